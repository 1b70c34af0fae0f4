"""API routes for study progress records."""

from fastapi import APIRouter, Response, status

from studyhub import schemas
from studyhub.dependencies import Storage
from studyhub.exceptions import NotFoundError

router = APIRouter(prefix="/progress", tags=["progress"])


@router.get("/{progress_id}", response_model=schemas.StudyProgress)
def get_progress(progress_id: int, storage: Storage) -> schemas.StudyProgress:
    """Get a progress record."""
    progress = storage.get_progress(progress_id)
    if progress is None:
        raise NotFoundError("StudyProgress", progress_id)
    return progress


@router.put("/{progress_id}", response_model=schemas.StudyProgress)
def update_progress(progress_id: int, storage: Storage) -> schemas.StudyProgress:
    """Mark a progress record as studied now."""
    progress = storage.update_progress(progress_id)
    if progress is None:
        raise NotFoundError("StudyProgress", progress_id)
    return progress


@router.delete("/{progress_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_progress(progress_id: int, storage: Storage) -> Response:
    """Delete a progress record."""
    storage.delete_progress(progress_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
