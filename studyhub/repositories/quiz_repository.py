"""Quiz repository for database operations."""

from studyhub import models
from studyhub.repositories.base_repository import Repository


class QuizRepository(Repository[models.Quiz]):
    """Repository for Quiz database operations."""

    model = models.Quiz

    def get_by_study_set_id(self, study_set_id: int) -> list[models.Quiz]:
        """Get all quizzes in a study set."""
        return self.list_by(models.Quiz.study_set_id, study_set_id)
