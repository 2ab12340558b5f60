"""
Pydantic schemas for Watchlist API.
"""

from pydantic import BaseModel, Field

from cinepick.api.models.movie import MovieResponse


class WatchlistAdd(BaseModel):
    """Request body for adding a movie to a watchlist."""

    movie_id: int = Field(..., gt=0)


class WatchlistResponse(BaseModel):
    """Response model for a user's watchlist."""

    user_id: int
    movies: list[MovieResponse]
    total: int
