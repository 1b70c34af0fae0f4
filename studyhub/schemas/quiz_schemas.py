"""Pydantic schemas for Quiz validation and responses."""

from datetime import datetime as dt

from pydantic import BaseModel, ConfigDict, Field


class QuizCreate(BaseModel):
    """Insert shape for a quiz."""

    model_config = ConfigDict(extra="ignore")

    study_set_id: int = Field(..., strict=True, description="Owning study set")
    title: str = Field(..., min_length=1, max_length=255, description="Quiz title")


class QuizCreateRequest(BaseModel):
    """Request body for creating a quiz in a study set."""

    model_config = ConfigDict(extra="ignore")

    title: str = Field(..., min_length=1, max_length=255, description="Quiz title")


class QuizUpdate(BaseModel):
    """Partial update shape for a quiz. The creation timestamp is immutable."""

    model_config = ConfigDict(extra="ignore")

    title: str | None = Field(None, min_length=1, max_length=255, description="New title")


class Quiz(BaseModel):
    """Stored shape of a quiz."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    study_set_id: int
    title: str
    created_at: dt


class QuizzesListResponse(BaseModel):
    """Schema for list of quizzes response."""

    quizzes: list[Quiz] = Field(default_factory=list, description="List of quizzes")
