"""Pydantic schemas for StudyProgress validation and responses."""

from datetime import datetime as dt

from pydantic import BaseModel, ConfigDict, Field


class StudyProgressCreate(BaseModel):
    """Insert shape for a progress record."""

    model_config = ConfigDict(extra="ignore")

    user_id: int = Field(..., strict=True, description="User who studied")
    study_set_id: int = Field(..., strict=True, description="Study set that was studied")


class StudyProgressCreateRequest(BaseModel):
    """Request body for recording progress for a user."""

    model_config = ConfigDict(extra="ignore")

    study_set_id: int = Field(..., strict=True, description="Study set that was studied")


class StudyProgressUpdate(BaseModel):
    """
    Update shape for a progress record.

    Every field of a progress record is either a reference or
    server-assigned, so an update only refreshes ``last_studied_at``.
    """

    model_config = ConfigDict(extra="ignore")


class StudyProgress(BaseModel):
    """Stored shape of a progress record."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int
    study_set_id: int
    last_studied_at: dt


class StudyProgressListResponse(BaseModel):
    """Schema for list of progress records response."""

    progress: list[StudyProgress] = Field(
        default_factory=list, description="List of progress records"
    )
