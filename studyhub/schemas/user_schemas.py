"""Pydantic schemas for User validation and responses."""

from datetime import datetime as dt

from pydantic import BaseModel, ConfigDict, Field


class UserCreate(BaseModel):
    """Insert shape for a user."""

    model_config = ConfigDict(extra="ignore")

    username: str = Field(..., min_length=1, max_length=100, description="Unique username")
    password: str = Field(..., min_length=1, description="Password credential")


class UserUpdate(BaseModel):
    """Partial update shape for a user."""

    model_config = ConfigDict(extra="ignore")

    username: str | None = Field(None, min_length=1, max_length=100, description="New username")
    password: str | None = Field(None, min_length=1, description="New password credential")


class User(BaseModel):
    """Stored shape of a user, credential included."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    username: str
    password: str
    created_at: dt


class UserResponse(BaseModel):
    """Public view of a user returned by the API."""

    model_config = ConfigDict(from_attributes=True)

    id: int = Field(..., description="User id")
    username: str = Field(..., description="Username")
    created_at: dt


class UserRegisterRequest(BaseModel):
    """Schema for user registration."""

    username: str = Field(
        ..., min_length=1, max_length=100, description="Username for the new account"
    )
    password: str = Field(..., min_length=8, description="Password (min 8 characters)")


class UserLoginRequest(BaseModel):
    """Schema for checking a user's credentials."""

    username: str = Field(..., min_length=1, description="Username")
    password: str = Field(..., min_length=1, description="Password")


class UserUpdateRequest(BaseModel):
    """Schema for updating a user."""

    username: str | None = Field(None, min_length=1, max_length=100, description="New username")
    password: str | None = Field(None, min_length=8, description="New password (min 8 characters)")
