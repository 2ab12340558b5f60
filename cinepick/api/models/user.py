"""
Pydantic schemas for User API.
"""

import json

from pydantic import BaseModel, Field, field_validator


class UserCreate(BaseModel):
    """Request body for creating a user."""

    email: str = Field(..., min_length=3, max_length=255, pattern=r"^[^@\s]+@[^@\s]+$")
    name: str | None = Field(None, max_length=100)
    preferred_genres: list[str] = Field(default_factory=list)


class UserUpdate(BaseModel):
    """Request body for updating a user (all fields optional)."""

    email: str | None = Field(None, min_length=3, max_length=255, pattern=r"^[^@\s]+@[^@\s]+$")
    name: str | None = Field(None, max_length=100)
    preferred_genres: list[str] | None = None


class UserResponse(BaseModel):
    """Response model for user."""

    user_id: int
    email: str
    name: str | None = None
    preferred_genres: list[str] = []

    @field_validator("preferred_genres", mode="before")
    @classmethod
    def parse_preferred_genres(cls, value):
        if isinstance(value, str):
            return json.loads(value) if value else []
        return value

    class Config:
        from_attributes = True


class PreferencesUpdate(BaseModel):
    """Request body for replacing preferred genres."""

    genres: list[str]


class PreferencesResponse(BaseModel):
    """Response model for a user's preferred genres."""

    user_id: int
    genres: list[str]
