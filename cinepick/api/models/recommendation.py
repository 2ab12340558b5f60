"""
Pydantic schemas for Recommendation API.
"""

import math

from pydantic import BaseModel

from cinepick.core.recommendations import ScoredMovie


class RecommendationItem(BaseModel):
    """Single recommendation item with movie and score."""

    movie_id: int
    title: str
    genres: list[str]
    rating: float
    image_url: str | None = None
    description: str | None = None
    score: float | None

    @classmethod
    def from_scored(cls, scored: ScoredMovie) -> "RecommendationItem":
        movie = scored.movie
        return cls(
            movie_id=movie.id,
            title=movie.title,
            genres=list(movie.genres),
            rating=movie.rating,
            image_url=movie.image_url or None,
            description=movie.description or None,
            # -inf isn't valid JSON
            score=scored.score if math.isfinite(scored.score) else None,
        )


class RecommendationResponse(BaseModel):
    """Response model for a recommendation list."""

    user_id: int
    collection: str
    recommendations: list[RecommendationItem]
    n: int
