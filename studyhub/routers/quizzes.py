"""API routes for quiz management."""

from fastapi import APIRouter, Response, status

from studyhub import schemas
from studyhub.dependencies import Storage
from studyhub.exceptions import NotFoundError

router = APIRouter(prefix="/quizzes", tags=["quizzes"])


@router.get("/{quiz_id}", response_model=schemas.Quiz)
def get_quiz(quiz_id: int, storage: Storage) -> schemas.Quiz:
    """Get a quiz."""
    quiz = storage.get_quiz(quiz_id)
    if quiz is None:
        raise NotFoundError("Quiz", quiz_id)
    return quiz


@router.put("/{quiz_id}", response_model=schemas.Quiz)
def update_quiz(quiz_id: int, request: schemas.QuizUpdate, storage: Storage) -> schemas.Quiz:
    """Rename a quiz."""
    quiz = storage.update_quiz(quiz_id, request)
    if quiz is None:
        raise NotFoundError("Quiz", quiz_id)
    return quiz


@router.delete("/{quiz_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_quiz(quiz_id: int, storage: Storage) -> Response:
    """Delete a quiz."""
    storage.delete_quiz(quiz_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
