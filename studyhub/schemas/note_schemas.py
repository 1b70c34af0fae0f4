"""Pydantic schemas for Note validation and responses."""

from datetime import datetime as dt

from pydantic import BaseModel, ConfigDict, Field


class NoteCreate(BaseModel):
    """Insert shape for a note."""

    model_config = ConfigDict(extra="ignore")

    study_set_id: int = Field(..., strict=True, description="Owning study set")
    title: str = Field(..., min_length=1, max_length=255, description="Note title")
    content: str = Field(..., description="Note body")


class NoteCreateRequest(BaseModel):
    """Request body for creating a note in a study set."""

    model_config = ConfigDict(extra="ignore")

    title: str = Field(..., min_length=1, max_length=255, description="Note title")
    content: str = Field(..., description="Note body")


class NoteUpdate(BaseModel):
    """Partial update shape for a note."""

    model_config = ConfigDict(extra="ignore")

    title: str | None = Field(None, min_length=1, max_length=255, description="New title")
    content: str | None = Field(None, description="New body")


class Note(BaseModel):
    """Stored shape of a note."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    study_set_id: int
    title: str
    content: str
    created_at: dt


class NotesListResponse(BaseModel):
    """Schema for list of notes response."""

    notes: list[Note] = Field(default_factory=list, description="List of notes")
