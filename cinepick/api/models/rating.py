"""
Pydantic schemas for star ratings.

A user holds at most one rating per movie; posting again replaces it.
"""

from pydantic import BaseModel, Field


class RatingCreate(BaseModel):
    """Star rating a user gives a catalog movie (replaces any earlier one)."""

    user_id: int = Field(..., gt=0)
    movie_id: int = Field(..., gt=0)
    rating: int = Field(..., ge=1, le=5, description="Whole stars, 1 to 5")


class RatingResponse(BaseModel):
    """Stored rating; ``rating_id`` stays the same when a rating is replaced."""

    rating_id: int
    user_id: int
    movie_id: int
    rating: int

    class Config:
        from_attributes = True


class RatingStatsResponse(BaseModel):
    """
    Aggregate over user ratings, for one movie or the whole catalog.

    With no ratings every field is 0.
    """

    count: int = Field(..., ge=0)
    average: float = Field(..., description="Mean stars")
    min: float
    max: float
