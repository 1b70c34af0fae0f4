"""API routes for note management."""

from fastapi import APIRouter, Response, status

from studyhub import schemas
from studyhub.dependencies import Storage
from studyhub.exceptions import NotFoundError

router = APIRouter(prefix="/notes", tags=["notes"])


@router.get("/{note_id}", response_model=schemas.Note)
def get_note(note_id: int, storage: Storage) -> schemas.Note:
    """Get a note."""
    note = storage.get_note(note_id)
    if note is None:
        raise NotFoundError("Note", note_id)
    return note


@router.put("/{note_id}", response_model=schemas.Note)
def update_note(note_id: int, request: schemas.NoteUpdate, storage: Storage) -> schemas.Note:
    """Update a note's title and/or content."""
    note = storage.update_note(note_id, request)
    if note is None:
        raise NotFoundError("Note", note_id)
    return note


@router.delete("/{note_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_note(note_id: int, storage: Storage) -> Response:
    """Delete a note."""
    storage.delete_note(note_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
