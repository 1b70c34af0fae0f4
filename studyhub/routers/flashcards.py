"""API routes for flashcard management."""

from fastapi import APIRouter, Response, status

from studyhub import schemas
from studyhub.dependencies import Storage
from studyhub.exceptions import NotFoundError

router = APIRouter(prefix="/flashcards", tags=["flashcards"])


@router.get("/{flashcard_id}", response_model=schemas.Flashcard)
def get_flashcard(flashcard_id: int, storage: Storage) -> schemas.Flashcard:
    """Get a flashcard."""
    flashcard = storage.get_flashcard(flashcard_id)
    if flashcard is None:
        raise NotFoundError("Flashcard", flashcard_id)
    return flashcard


@router.put("/{flashcard_id}", response_model=schemas.Flashcard)
def update_flashcard(
    flashcard_id: int, request: schemas.FlashcardUpdate, storage: Storage
) -> schemas.Flashcard:
    """
    Update a flashcard's question, answer and/or category tag.

    Review counters cannot be set here; see ``record_review``.
    """
    flashcard = storage.update_flashcard(flashcard_id, request)
    if flashcard is None:
        raise NotFoundError("Flashcard", flashcard_id)
    return flashcard


@router.post("/{flashcard_id}/reviews", response_model=schemas.Flashcard)
def record_review(
    flashcard_id: int, request: schemas.FlashcardReviewRequest, storage: Storage
) -> schemas.Flashcard:
    """Count one review of a flashcard and whether it was answered correctly."""
    flashcard = storage.record_flashcard_review(flashcard_id, correct=request.correct)
    if flashcard is None:
        raise NotFoundError("Flashcard", flashcard_id)
    return flashcard


@router.delete("/{flashcard_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_flashcard(flashcard_id: int, storage: Storage) -> Response:
    """Delete a flashcard. Deleting a missing flashcard succeeds."""
    storage.delete_flashcard(flashcard_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
