"""
The Movie Database (TMDB) API client.

Fetches trending, popular, searched and per-genre movie listings plus full
movie details, and normalizes TMDB payloads into flat dictionaries with
absolute image URLs.
"""

import logging
from typing import Any, Dict, List, Optional

import requests

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.themoviedb.org/3"
DEFAULT_IMAGE_BASE_URL = "https://image.tmdb.org/t/p"

MAX_CAST = 10
MAX_CREW = 5
MAX_SIMILAR = 6


def _image_url(image_base_url: str, size: str, path: Optional[str]) -> Optional[str]:
    return f"{image_base_url}/{size}{path}" if path else None


def format_movie(raw: Dict[str, Any], image_base_url: str = DEFAULT_IMAGE_BASE_URL) -> Dict[str, Any]:
    """
    Normalize a TMDB movie list entry.

    Args:
        raw: Movie object as returned by TMDB
        image_base_url: Base URL for poster/backdrop images

    Returns:
        Dictionary with id, title, poster_url, backdrop_url, overview,
        release_date, vote_average and genre_ids
    """
    return {
        "id": raw["id"],
        "title": raw.get("title", ""),
        "poster_url": _image_url(image_base_url, "w500", raw.get("poster_path")),
        "backdrop_url": _image_url(image_base_url, "original", raw.get("backdrop_path")),
        "overview": raw.get("overview", ""),
        "release_date": raw.get("release_date"),
        "vote_average": raw.get("vote_average"),
        "genre_ids": raw.get("genre_ids") or [],
    }


def format_movie_details(
    raw: Dict[str, Any],
    image_base_url: str = DEFAULT_IMAGE_BASE_URL
) -> Dict[str, Any]:
    """
    Normalize a TMDB movie details payload (with credits, similar, videos).

    Cast is capped at 10, crew at 5 and similar movies at 6; only YouTube
    videos are kept.
    """
    details = format_movie(raw, image_base_url)
    details.pop("genre_ids")

    credits = raw.get("credits") or {}
    cast = [
        {
            "id": actor["id"],
            "name": actor.get("name", ""),
            "character": actor.get("character", ""),
            "profile_url": _image_url(image_base_url, "w185", actor.get("profile_path")),
        }
        for actor in (credits.get("cast") or [])[:MAX_CAST]
    ]
    crew = [
        {
            "id": member["id"],
            "name": member.get("name", ""),
            "job": member.get("job", ""),
            "department": member.get("department", ""),
        }
        for member in (credits.get("crew") or [])[:MAX_CREW]
    ]
    similar = [
        format_movie(m, image_base_url)
        for m in ((raw.get("similar") or {}).get("results") or [])[:MAX_SIMILAR]
    ]
    videos = [
        {
            "id": video["id"],
            "key": video.get("key", ""),
            "name": video.get("name", ""),
            "type": video.get("type", ""),
        }
        for video in ((raw.get("videos") or {}).get("results") or [])
        if video.get("site") == "YouTube"
    ]

    details.update({
        "genres": raw.get("genres") or [],
        "runtime": raw.get("runtime"),
        "status": raw.get("status"),
        "tagline": raw.get("tagline"),
        "cast": cast,
        "crew": crew,
        "similar": similar,
        "videos": videos,
    })
    return details


class TMDBClient:
    """
    Thin TMDB v3 client.

    Construct one explicitly and pass it to the code that needs it; there is
    no module-level instance.
    """

    def __init__(
        self,
        api_key: str,
        base_url: str = DEFAULT_BASE_URL,
        image_base_url: str = DEFAULT_IMAGE_BASE_URL,
        timeout: float = 10.0,
        session: Optional[requests.Session] = None
    ):
        """
        Initialize client.

        Args:
            api_key: TMDB API key
            base_url: API base URL
            image_base_url: Image CDN base URL
            timeout: Request timeout in seconds
            session: requests Session to reuse (default: a new one)

        Raises:
            ValueError: If api_key is empty
        """
        if not api_key:
            raise ValueError("Missing TMDB API key. Set TMDB_API_KEY in the environment.")
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.image_base_url = image_base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    def _get(self, path: str, **params) -> Dict[str, Any]:
        params["api_key"] = self.api_key
        url = f"{self.base_url}{path}"
        logger.debug(f"TMDB GET {path} {({k: v for k, v in params.items() if k != 'api_key'})}")
        r = self.session.get(url, params=params, timeout=self.timeout)
        r.raise_for_status()
        return r.json()

    def _movie_list(self, path: str, **params) -> List[Dict[str, Any]]:
        data = self._get(path, **params)
        return [format_movie(m, self.image_base_url) for m in data.get("results", [])]

    def get_trending_movies(self, page: int = 1) -> List[Dict[str, Any]]:
        """Movies trending this week."""
        return self._movie_list("/trending/movie/week", page=page)

    def get_popular_movies(self, page: int = 1) -> List[Dict[str, Any]]:
        """Currently popular movies."""
        return self._movie_list("/movie/popular", page=page)

    def search_movies(self, query: str, page: int = 1) -> List[Dict[str, Any]]:
        """Search movies by title."""
        return self._movie_list("/search/movie", query=query, page=page)

    def get_movies_by_genre(self, genre_id: int, page: int = 1) -> List[Dict[str, Any]]:
        """Discover movies in a TMDB genre."""
        return self._movie_list("/discover/movie", with_genres=genre_id, page=page)

    def get_genres(self) -> List[Dict[str, Any]]:
        """TMDB movie genre list ({id, name} dictionaries)."""
        return self._get("/genre/movie/list").get("genres", [])

    def get_movie_details(self, movie_id: int) -> Dict[str, Any]:
        """Full details for one movie, including credits, similar movies and videos."""
        raw = self._get(f"/movie/{movie_id}", append_to_response="credits,similar,videos")
        return format_movie_details(raw, self.image_base_url)

    def close(self) -> None:
        """Close the underlying HTTP session."""
        self.session.close()
