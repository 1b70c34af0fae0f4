"""Note repository for database operations."""

from studyhub import models
from studyhub.repositories.base_repository import Repository


class NoteRepository(Repository[models.Note]):
    """Repository for Note database operations."""

    model = models.Note

    def get_by_study_set_id(self, study_set_id: int) -> list[models.Note]:
        """Get all notes in a study set."""
        return self.list_by(models.Note.study_set_id, study_set_id)
