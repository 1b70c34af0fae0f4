"""Custom exception hierarchy for StudyHub."""

from fastapi import HTTPException
from starlette import status


class StudyHubError(Exception):
    """Base exception for all StudyHub errors."""

    def __init__(self, message: str, status_code: int = 500) -> None:
        """Initialize exception with message and optional status code."""
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)


class ConfigurationError(StudyHubError):
    """Required configuration is missing or invalid at startup."""


class ValidationError(StudyHubError):
    """Payload does not match an entity's insert or update shape."""

    def __init__(self, message: str, errors: list[dict[str, object]] | None = None) -> None:
        """Initialize with message, optional field errors and 422 status code."""
        self.errors = errors or []
        super().__init__(message, status_code=status.HTTP_422_UNPROCESSABLE_CONTENT)


class NotFoundError(StudyHubError):
    """Resource not found error."""

    def __init__(self, entity: str, entity_id: int | None = None, *, message: str | None = None) -> None:
        """Initialize with entity name and ID or custom message."""
        self.entity = entity
        self.entity_id = entity_id
        if message:
            super().__init__(message, status_code=status.HTTP_404_NOT_FOUND)
        elif entity_id is not None:
            super().__init__(
                f"{entity} with id {entity_id} not found", status_code=status.HTTP_404_NOT_FOUND
            )
        else:
            super().__init__(f"{entity} not found", status_code=status.HTTP_404_NOT_FOUND)


class ConstraintError(StudyHubError):
    """Referential or uniqueness violation reported by the store."""

    def __init__(self, message: str) -> None:
        """Initialize with message and 409 status code."""
        super().__init__(message, status_code=status.HTTP_409_CONFLICT)


class DuplicateUsernameError(ConstraintError):
    """Username already taken by another user."""

    def __init__(self, username: str) -> None:
        """Initialize with the colliding username."""
        self.username = username
        super().__init__(f"Username '{username}' is already taken")


class MissingParentError(ConstraintError):
    """Referenced parent row does not exist."""

    def __init__(
        self, entity: str, parent: str | None = None, parent_id: int | None = None
    ) -> None:
        """Initialize with the child entity and, when known, the dangling parent reference."""
        self.entity = entity
        self.parent = parent
        self.parent_id = parent_id
        if parent is None:
            super().__init__(f"Cannot create {entity}: referenced parent does not exist")
        else:
            super().__init__(
                f"Cannot create {entity}: {parent} with id {parent_id} does not exist"
            )


class ConnectivityError(StudyHubError):
    """The store is unreachable or the operation timed out."""

    def __init__(self, message: str = "Database is unavailable") -> None:
        """Initialize with message and 503 status code."""
        super().__init__(message, status_code=status.HTTP_503_SERVICE_UNAVAILABLE)


CredentialsException = HTTPException(
    status_code=status.HTTP_401_UNAUTHORIZED,
    detail="Incorrect username or password",
)
