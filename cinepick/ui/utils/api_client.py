"""
FastAPI client wrapper for the Streamlit UI.
"""

import os
import requests


def get_api_base_url() -> str:
    """Get API base URL from env or default."""
    return os.getenv("API_BASE_URL", "http://localhost:8000").rstrip("/")


def create_user(email: str, name: str | None = None, preferred_genres: list[str] | None = None) -> dict:
    """Create a new user."""
    payload = {"email": email, "preferred_genres": preferred_genres or []}
    if name is not None:
        payload["name"] = name
    r = requests.post(f"{get_api_base_url()}/api/users", json=payload, timeout=10)
    r.raise_for_status()
    return r.json()


def get_user(user_id: int) -> dict:
    """Get user profile."""
    r = requests.get(f"{get_api_base_url()}/api/users/{user_id}", timeout=10)
    r.raise_for_status()
    return r.json()


def update_user(user_id: int, **kwargs) -> dict:
    """Update user profile. Pass email, name or preferred_genres as kwargs."""
    payload = {k: v for k, v in kwargs.items() if v is not None}
    r = requests.put(f"{get_api_base_url()}/api/users/{user_id}", json=payload, timeout=10)
    r.raise_for_status()
    return r.json()


def set_preferences(user_id: int, genres: list[str]) -> dict:
    """Replace the user's preferred genres."""
    r = requests.put(
        f"{get_api_base_url()}/api/users/{user_id}/preferences",
        json={"genres": genres},
        timeout=10,
    )
    r.raise_for_status()
    return r.json()


def get_user_ratings(user_id: int) -> dict:
    """Get user rating history."""
    r = requests.get(f"{get_api_base_url()}/api/users/{user_id}/ratings", timeout=10)
    r.raise_for_status()
    return r.json()


def add_rating(user_id: int, movie_id: int, rating: int) -> dict:
    """Add or update a rating."""
    r = requests.post(
        f"{get_api_base_url()}/api/ratings",
        json={"user_id": user_id, "movie_id": movie_id, "rating": rating},
        timeout=10,
    )
    r.raise_for_status()
    return r.json()


def get_movie(movie_id: int) -> dict:
    """Get one catalog movie."""
    r = requests.get(f"{get_api_base_url()}/api/movies/{movie_id}", timeout=10)
    r.raise_for_status()
    return r.json()


def list_genres() -> list[str]:
    """Get the catalog's genres."""
    r = requests.get(f"{get_api_base_url()}/api/movies/genres", timeout=10)
    r.raise_for_status()
    return r.json()["genres"]


def search_movies(q: str | None = None, genres: list[str] | None = None, min_rating: float | None = None) -> dict:
    """Search the catalog."""
    params = {}
    if q:
        params["q"] = q
    if genres:
        params["genre"] = genres
    if min_rating is not None:
        params["min_rating"] = min_rating
    r = requests.get(f"{get_api_base_url()}/api/movies/search", params=params, timeout=10)
    r.raise_for_status()
    return r.json()


def get_watchlist(user_id: int) -> dict:
    """Get the user's watchlist."""
    r = requests.get(f"{get_api_base_url()}/api/users/{user_id}/watchlist", timeout=10)
    r.raise_for_status()
    return r.json()


def add_to_watchlist(user_id: int, movie_id: int) -> dict:
    """Add a movie to the user's watchlist."""
    r = requests.post(
        f"{get_api_base_url()}/api/users/{user_id}/watchlist",
        json={"movie_id": movie_id},
        timeout=10,
    )
    r.raise_for_status()
    return r.json()


def remove_from_watchlist(user_id: int, movie_id: int) -> dict:
    """Remove a movie from the user's watchlist."""
    r = requests.delete(f"{get_api_base_url()}/api/users/{user_id}/watchlist/{movie_id}", timeout=10)
    r.raise_for_status()
    return r.json()


def get_recommendations(user_id: int, recently_viewed: list[int] | None = None) -> dict:
    """Get the "Picked for You" list."""
    r = requests.get(
        f"{get_api_base_url()}/api/recommendations/{user_id}",
        params={"recently_viewed": recently_viewed or []},
        timeout=30,
    )
    r.raise_for_status()
    return r.json()


def get_trending(user_id: int) -> dict:
    """Get trending movies for the user."""
    r = requests.get(f"{get_api_base_url()}/api/recommendations/{user_id}/trending", timeout=30)
    r.raise_for_status()
    return r.json()


def get_because_you_watched(user_id: int, movie_id: int) -> dict:
    """Get movies similar to one the user watched."""
    r = requests.get(
        f"{get_api_base_url()}/api/recommendations/{user_id}/because-you-watched/{movie_id}",
        timeout=30,
    )
    r.raise_for_status()
    return r.json()


def health_check() -> dict:
    """Check API health."""
    r = requests.get(f"{get_api_base_url()}/api/health", timeout=5)
    r.raise_for_status()
    return r.json()
