"""Pydantic schemas for Flashcard validation and responses."""

from datetime import datetime as dt
from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field


class FlashcardBase(BaseModel):
    """Base schema for Flashcard."""

    question: str = Field(..., min_length=1, description="Question text for the flashcard")
    answer: str = Field(..., min_length=1, description="Answer text for the flashcard")
    category: str | None = Field(None, max_length=100, description="Optional free-text tag")


class FlashcardCreate(FlashcardBase):
    """Insert shape for a flashcard. Review counters are server-assigned."""

    model_config = ConfigDict(extra="ignore")

    study_set_id: int = Field(..., strict=True, description="Owning study set")


class FlashcardCreateRequest(FlashcardBase):
    """Request body for creating a flashcard in a study set."""

    model_config = ConfigDict(extra="ignore")


class FlashcardUpdate(BaseModel):
    """Partial update shape for a flashcard."""

    model_config = ConfigDict(extra="ignore")
    nullable_fields: ClassVar[frozenset[str]] = frozenset({"category"})

    question: str | None = Field(None, min_length=1, description="New question text")
    answer: str | None = Field(None, min_length=1, description="New answer text")
    category: str | None = Field(None, max_length=100, description="New free-text tag")


class FlashcardReviewRequest(BaseModel):
    """Outcome of a single flashcard review."""

    correct: bool = Field(..., description="Whether the answer was recalled correctly")


class Flashcard(FlashcardBase):
    """Stored shape of a flashcard."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    study_set_id: int
    times_reviewed: int
    times_correct: int
    created_at: dt


class FlashcardsListResponse(BaseModel):
    """Schema for list of flashcards response."""

    flashcards: list[Flashcard] = Field(default_factory=list, description="List of flashcards")
