"""API routes for users and the records they own."""

import structlog
from fastapi import APIRouter, Response, status

from studyhub import schemas
from studyhub.dependencies import Storage
from studyhub.exceptions import CredentialsException, NotFoundError
from studyhub.password_service import get_dummy_hash, hash_password, verify_password

logger = structlog.get_logger(__name__)

router = APIRouter(prefix="/users", tags=["users"])


def _require_user(storage: Storage, user_id: int) -> schemas.User:
    user = storage.get_user(user_id)
    if user is None:
        raise NotFoundError("User", user_id)
    return user


@router.post("", response_model=schemas.UserResponse, status_code=status.HTTP_201_CREATED)
def register(register_data: schemas.UserRegisterRequest, storage: Storage) -> schemas.User:
    """
    Register a new user account.

    The password is stored only as a hash. A taken username yields 409.
    """
    user = storage.create_user(
        schemas.UserCreate(
            username=register_data.username,
            password=hash_password(register_data.password),
        )
    )
    logger.info("user_registered", user_id=user.id)
    return user


@router.post("/login", response_model=schemas.UserResponse)
def login(login_data: schemas.UserLoginRequest, storage: Storage) -> schemas.User:
    """Check a username/password pair and return the matching user."""
    user = storage.get_user_by_username(login_data.username)
    if user is None:
        # Same hashing cost as a wrong password
        verify_password(login_data.password, get_dummy_hash())
        raise CredentialsException
    if not verify_password(login_data.password, user.password):
        raise CredentialsException
    return user


@router.get("/{user_id}", response_model=schemas.UserResponse)
def get_user(user_id: int, storage: Storage) -> schemas.User:
    """Get a user's public profile."""
    return _require_user(storage, user_id)


@router.put("/{user_id}", response_model=schemas.UserResponse)
def update_user(
    user_id: int, update_data: schemas.UserUpdateRequest, storage: Storage
) -> schemas.User:
    """Change a user's username and/or password."""
    changes = update_data.model_dump(exclude_unset=True)
    if changes.get("password") is not None:
        changes["password"] = hash_password(changes["password"])
    user = storage.update_user(user_id, changes)
    if user is None:
        raise NotFoundError("User", user_id)
    return user


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_user(user_id: int, storage: Storage) -> Response:
    """Delete a user and everything they own. Deleting a missing user succeeds."""
    storage.delete_user(user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/{user_id}/study-sets", response_model=schemas.StudySetsListResponse)
def list_study_sets(user_id: int, storage: Storage) -> schemas.StudySetsListResponse:
    """List a user's study sets in creation order."""
    _require_user(storage, user_id)
    return schemas.StudySetsListResponse(study_sets=storage.get_study_sets_by_user(user_id))


@router.post(
    "/{user_id}/study-sets",
    response_model=schemas.StudySet,
    status_code=status.HTTP_201_CREATED,
)
def create_study_set(
    user_id: int, request: schemas.StudySetCreateRequest, storage: Storage
) -> schemas.StudySet:
    """Create a study set owned by a user."""
    return storage.create_study_set({**request.model_dump(), "user_id": user_id})


@router.get("/{user_id}/progress", response_model=schemas.StudyProgressListResponse)
def list_progress(user_id: int, storage: Storage) -> schemas.StudyProgressListResponse:
    """List a user's progress records in creation order."""
    _require_user(storage, user_id)
    return schemas.StudyProgressListResponse(progress=storage.get_progress_by_user(user_id))


@router.post(
    "/{user_id}/progress",
    response_model=schemas.StudyProgress,
    status_code=status.HTTP_201_CREATED,
)
def create_progress(
    user_id: int, request: schemas.StudyProgressCreateRequest, storage: Storage
) -> schemas.StudyProgress:
    """Record that a user studied a study set."""
    return storage.create_progress({**request.model_dump(), "user_id": user_id})
