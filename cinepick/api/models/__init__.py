"""
Pydantic schemas for API request/response validation.
"""

from cinepick.api.models.user import (
    UserCreate,
    UserUpdate,
    UserResponse,
    PreferencesUpdate,
    PreferencesResponse,
)
from cinepick.api.models.movie import MovieResponse, MovieCreate, MovieList, GenreList
from cinepick.api.models.rating import RatingCreate, RatingResponse, RatingStatsResponse
from cinepick.api.models.recommendation import RecommendationResponse, RecommendationItem
from cinepick.api.models.watchlist import WatchlistAdd, WatchlistResponse

__all__ = [
    "UserCreate",
    "UserUpdate",
    "UserResponse",
    "PreferencesUpdate",
    "PreferencesResponse",
    "MovieResponse",
    "MovieCreate",
    "MovieList",
    "GenreList",
    "RatingCreate",
    "RatingResponse",
    "RatingStatsResponse",
    "RecommendationResponse",
    "RecommendationItem",
    "WatchlistAdd",
    "WatchlistResponse",
]
