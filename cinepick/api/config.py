"""
API configuration loaded from environment or defaults.
"""

import os
from pathlib import Path


def get_database_url() -> str:
    """Database target from DATABASE_URL (URL or file path); defaults to data/cinepick.db."""
    return os.getenv("DATABASE_URL") or str(
        Path(__file__).resolve().parents[2] / "data" / "cinepick.db"
    )


def get_log_level() -> str:
    """Get log level from env or default."""
    return os.getenv("LOG_LEVEL", "INFO").upper()


def get_api_host() -> str:
    """Get API host for binding."""
    return os.getenv("API_HOST", "0.0.0.0")


def get_api_port() -> int:
    """Get API port."""
    return int(os.getenv("API_PORT", "8000"))


def get_recommendation_seed() -> int | None:
    """Seed for the scoring random source; unset means non-reproducible."""
    raw = os.getenv("RECOMMENDATION_SEED", "").strip()
    return int(raw) if raw else None


def get_tmdb_api_key() -> str:
    """Get TMDB API key (empty string when not configured)."""
    return os.getenv("TMDB_API_KEY", "")


def get_tmdb_base_url() -> str:
    return os.getenv("TMDB_BASE_URL", "https://api.themoviedb.org/3")


def get_tmdb_image_base_url() -> str:
    return os.getenv("TMDB_IMAGE_BASE_URL", "https://image.tmdb.org/t/p")
