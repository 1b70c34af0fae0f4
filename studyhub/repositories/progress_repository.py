"""StudyProgress repository for database operations."""

from sqlalchemy import func

from studyhub import models
from studyhub.repositories.base_repository import Repository


class StudyProgressRepository(Repository[models.StudyProgress]):
    """Repository for StudyProgress database operations."""

    model = models.StudyProgress

    def get_by_user_id(self, user_id: int) -> list[models.StudyProgress]:
        """Get all progress records of a user."""
        return self.list_by(models.StudyProgress.user_id, user_id)

    def touch(self, progress_id: int) -> models.StudyProgress | None:
        """Mark a progress record as studied now."""
        return self.update(progress_id, last_studied_at=func.now())
