"""API routes for study sets and their contents."""

from fastapi import APIRouter, Response, status

from studyhub import schemas
from studyhub.dependencies import Storage
from studyhub.exceptions import NotFoundError

router = APIRouter(prefix="/study-sets", tags=["study-sets"])


def _require_study_set(storage: Storage, study_set_id: int) -> schemas.StudySet:
    study_set = storage.get_study_set(study_set_id)
    if study_set is None:
        raise NotFoundError("StudySet", study_set_id)
    return study_set


@router.get("/{study_set_id}", response_model=schemas.StudySet)
def get_study_set(study_set_id: int, storage: Storage) -> schemas.StudySet:
    """Get a study set."""
    return _require_study_set(storage, study_set_id)


@router.put("/{study_set_id}", response_model=schemas.StudySet)
def update_study_set(
    study_set_id: int, request: schemas.StudySetUpdate, storage: Storage
) -> schemas.StudySet:
    """Update a study set's title, description and/or category."""
    study_set = storage.update_study_set(study_set_id, request)
    if study_set is None:
        raise NotFoundError("StudySet", study_set_id)
    return study_set


@router.delete("/{study_set_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_study_set(study_set_id: int, storage: Storage) -> Response:
    """Delete a study set with its flashcards, quizzes, notes and progress."""
    storage.delete_study_set(study_set_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/{study_set_id}/flashcards", response_model=schemas.FlashcardsListResponse)
def list_flashcards(study_set_id: int, storage: Storage) -> schemas.FlashcardsListResponse:
    """List the flashcards of a study set in creation order."""
    _require_study_set(storage, study_set_id)
    return schemas.FlashcardsListResponse(
        flashcards=storage.get_flashcards_by_study_set(study_set_id)
    )


@router.post(
    "/{study_set_id}/flashcards",
    response_model=schemas.Flashcard,
    status_code=status.HTTP_201_CREATED,
)
def create_flashcard(
    study_set_id: int, request: schemas.FlashcardCreateRequest, storage: Storage
) -> schemas.Flashcard:
    """Create a flashcard in a study set."""
    return storage.create_flashcard({**request.model_dump(), "study_set_id": study_set_id})


@router.get("/{study_set_id}/quizzes", response_model=schemas.QuizzesListResponse)
def list_quizzes(study_set_id: int, storage: Storage) -> schemas.QuizzesListResponse:
    """List the quizzes of a study set in creation order."""
    _require_study_set(storage, study_set_id)
    return schemas.QuizzesListResponse(quizzes=storage.get_quizzes_by_study_set(study_set_id))


@router.post(
    "/{study_set_id}/quizzes",
    response_model=schemas.Quiz,
    status_code=status.HTTP_201_CREATED,
)
def create_quiz(
    study_set_id: int, request: schemas.QuizCreateRequest, storage: Storage
) -> schemas.Quiz:
    """Create a quiz in a study set."""
    return storage.create_quiz({**request.model_dump(), "study_set_id": study_set_id})


@router.get("/{study_set_id}/notes", response_model=schemas.NotesListResponse)
def list_notes(study_set_id: int, storage: Storage) -> schemas.NotesListResponse:
    """List the notes of a study set in creation order."""
    _require_study_set(storage, study_set_id)
    return schemas.NotesListResponse(notes=storage.get_notes_by_study_set(study_set_id))


@router.post(
    "/{study_set_id}/notes",
    response_model=schemas.Note,
    status_code=status.HTTP_201_CREATED,
)
def create_note(
    study_set_id: int, request: schemas.NoteCreateRequest, storage: Storage
) -> schemas.Note:
    """Create a note in a study set."""
    return storage.create_note({**request.model_dump(), "study_set_id": study_set_id})
