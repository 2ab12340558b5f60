"""
External movie metadata (TMDB) API endpoints.
"""

import logging
from typing import Any, Callable

import requests
from fastapi import APIRouter, Depends, HTTPException, Query

from cinepick.api.dependencies import get_tmdb_client
from cinepick.integrations.tmdb import TMDBClient

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/metadata", tags=["metadata"])


def _call(fetch: Callable[..., Any], *args) -> Any:
    """Run a TMDB call, turning upstream failures into 502."""
    try:
        return fetch(*args)
    except requests.RequestException as e:
        logger.error(f"TMDB request failed: {e}")
        raise HTTPException(status_code=502, detail=f"Metadata provider error: {e}")


@router.get("/trending")
def trending(page: int = Query(1, ge=1), tmdb: TMDBClient = Depends(get_tmdb_client)):
    """Movies trending this week on TMDB."""
    return {"page": page, "results": _call(tmdb.get_trending_movies, page)}


@router.get("/popular")
def popular(page: int = Query(1, ge=1), tmdb: TMDBClient = Depends(get_tmdb_client)):
    """Popular movies on TMDB."""
    return {"page": page, "results": _call(tmdb.get_popular_movies, page)}


@router.get("/search")
def search(
    query: str = Query(..., min_length=1),
    page: int = Query(1, ge=1),
    tmdb: TMDBClient = Depends(get_tmdb_client),
):
    """Search TMDB by title."""
    return {"page": page, "results": _call(tmdb.search_movies, query, page)}


@router.get("/genres")
def genres(tmdb: TMDBClient = Depends(get_tmdb_client)):
    """TMDB genre list."""
    return {"genres": _call(tmdb.get_genres)}


@router.get("/genres/{genre_id}")
def by_genre(genre_id: int, page: int = Query(1, ge=1), tmdb: TMDBClient = Depends(get_tmdb_client)):
    """Discover TMDB movies in a genre."""
    return {"page": page, "results": _call(tmdb.get_movies_by_genre, genre_id, page)}


@router.get("/movies/{tmdb_id}")
def movie_details(tmdb_id: int, tmdb: TMDBClient = Depends(get_tmdb_client)):
    """Full TMDB details for a movie."""
    return _call(tmdb.get_movie_details, tmdb_id)
