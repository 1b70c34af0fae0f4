"""Flashcard repository for database operations."""

import structlog
from sqlalchemy import update

from studyhub import models
from studyhub.repositories.base_repository import Repository

logger = structlog.get_logger(__name__)


class FlashcardRepository(Repository[models.Flashcard]):
    """Repository for Flashcard database operations."""

    model = models.Flashcard

    def get_by_study_set_id(self, study_set_id: int) -> list[models.Flashcard]:
        """Get all flashcards in a study set."""
        return self.list_by(models.Flashcard.study_set_id, study_set_id)

    def record_review(self, flashcard_id: int, *, correct: bool) -> models.Flashcard | None:
        """
        Count one review of a flashcard.

        Both counters are incremented by the store in a single UPDATE so
        concurrent reviews never lose an increment.

        Returns the updated flashcard if found, None otherwise.
        """
        stmt = (
            update(models.Flashcard)
            .where(models.Flashcard.id == flashcard_id)
            .values(
                times_reviewed=models.Flashcard.times_reviewed + 1,
                times_correct=models.Flashcard.times_correct + (1 if correct else 0),
            )
            .execution_options(synchronize_session=False)
        )
        result = self.db.execute(stmt)
        if result.rowcount == 0:  # type: ignore[attr-defined]
            return None

        flashcard = self.get_by_id(flashcard_id)
        if flashcard is not None:
            self.db.refresh(flashcard)
        logger.info("flashcard_reviewed", id=flashcard_id, correct=correct)
        return flashcard
