"""StudySet repository for database operations."""

from studyhub import models
from studyhub.repositories.base_repository import Repository


class StudySetRepository(Repository[models.StudySet]):
    """Repository for StudySet database operations."""

    model = models.StudySet

    def get_by_user_id(self, user_id: int) -> list[models.StudySet]:
        """Get all study sets owned by a user."""
        return self.list_by(models.StudySet.user_id, user_id)
