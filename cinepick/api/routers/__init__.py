"""
API route handlers.
"""

from cinepick.api.routers import users, movies, ratings, watchlist, recommendations, metadata, system

__all__ = ["users", "movies", "ratings", "watchlist", "recommendations", "metadata", "system"]
