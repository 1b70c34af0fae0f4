"""User repository for database operations."""

from sqlalchemy import select

from studyhub import models
from studyhub.repositories.base_repository import Repository


class UserRepository(Repository[models.User]):
    """Repository for User database operations."""

    model = models.User

    def get_by_username(self, username: str) -> models.User | None:
        """Get a user by their unique username."""
        stmt = select(models.User).where(models.User.username == username)
        return self.db.execute(stmt).scalar_one_or_none()
