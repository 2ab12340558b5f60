"""
Pydantic schemas for Movie API.
"""

import json

from pydantic import BaseModel, Field, field_validator


class MovieResponse(BaseModel):
    """Response model for a single movie."""

    movie_id: int
    title: str
    genres: list[str]
    rating: float
    image_url: str | None = None
    description: str | None = None

    @field_validator("genres", mode="before")
    @classmethod
    def parse_genres(cls, value):
        # ORM rows store genres as JSON array text
        if isinstance(value, str):
            return json.loads(value)
        return value

    class Config:
        from_attributes = True


class MovieCreate(BaseModel):
    """Request body for adding a catalog movie."""

    movie_id: int = Field(..., gt=0)
    title: str = Field(..., min_length=1)
    genres: list[str] = Field(..., min_length=1)
    rating: float = Field(0.0, ge=0.0, le=5.0)
    image_url: str | None = None
    description: str | None = None


class MovieList(BaseModel):
    """Response model for list of movies with total count."""

    movies: list[MovieResponse]
    total: int


class GenreList(BaseModel):
    """Response model for the catalog's genres."""

    genres: list[str]
