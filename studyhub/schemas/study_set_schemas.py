"""Pydantic schemas for StudySet validation and responses."""

from datetime import datetime as dt
from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field

from studyhub.models import StudyCategory


class StudySetBase(BaseModel):
    """Base schema for StudySet."""

    title: str = Field(..., min_length=1, max_length=255, description="Title of the study set")
    description: str | None = Field(None, description="Optional description")
    category: StudyCategory = Field(..., description="Subject category")


class StudySetCreate(StudySetBase):
    """Insert shape for a study set."""

    model_config = ConfigDict(extra="ignore")

    user_id: int = Field(..., strict=True, description="Owning user")


class StudySetCreateRequest(StudySetBase):
    """Request body for creating a study set under a user."""

    model_config = ConfigDict(extra="ignore")


class StudySetUpdate(BaseModel):
    """Partial update shape for a study set."""

    model_config = ConfigDict(extra="ignore")
    nullable_fields: ClassVar[frozenset[str]] = frozenset({"description"})

    title: str | None = Field(None, min_length=1, max_length=255, description="New title")
    description: str | None = Field(None, description="New description")
    category: StudyCategory | None = Field(None, description="New subject category")


class StudySet(StudySetBase):
    """Stored shape of a study set."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int
    created_at: dt


class StudySetsListResponse(BaseModel):
    """Schema for list of study sets response."""

    study_sets: list[StudySet] = Field(default_factory=list, description="List of study sets")
