"""
Movie recommendation scoring.

This package contains:
- Plain catalog records and the built-in catalog
- Per-movie scoring (recommendation, trending, similarity)
- Selection with the genre diversity cap
- The Recommender and the database-backed RecommendationEngine
"""

from cinepick.core.recommendations.catalog import DEFAULT_CATALOG, Movie, ScoredMovie
from cinepick.core.recommendations.recommender import (
    Recommender,
    get_because_you_watched,
    get_recommendations,
    get_trending_movies,
)
from cinepick.core.recommendations.engine import RecommendationEngine

__all__ = [
    'DEFAULT_CATALOG',
    'Movie',
    'ScoredMovie',
    'Recommender',
    'RecommendationEngine',
    'get_recommendations',
    'get_trending_movies',
    'get_because_you_watched',
]
