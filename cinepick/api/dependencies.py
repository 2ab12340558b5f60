"""
FastAPI dependency injection for database sessions, the recommendation
engine and the TMDB client.
"""

import logging
from typing import Generator
from fastapi import HTTPException
from sqlalchemy.orm import Session

from cinepick.api.config import (
    get_database_url,
    get_recommendation_seed,
    get_tmdb_api_key,
    get_tmdb_base_url,
    get_tmdb_image_base_url,
)
from cinepick.core.recommendations import RecommendationEngine, Recommender
from cinepick.database.connection import get_db_manager
from cinepick.database.init_db import init_database
from cinepick.integrations.tmdb import TMDBClient

logger = logging.getLogger(__name__)

_db_ready = False


def get_db() -> Generator[Session, None, None]:
    """Yield database session for FastAPI Depends()."""
    global _db_ready
    db_manager = get_db_manager(db_path=get_database_url())
    if not _db_ready:
        # Create tables and seed the built-in catalog on first use
        init_database(db_manager=db_manager)
        _db_ready = True
    with db_manager.session_scope() as session:
        yield session


_recommendation_engine: RecommendationEngine | None = None


def get_recommendation_engine() -> RecommendationEngine:
    """Get or create the shared RecommendationEngine."""
    global _recommendation_engine
    if _recommendation_engine is None:
        seed = get_recommendation_seed()
        _recommendation_engine = RecommendationEngine(Recommender(seed=seed))
        if seed is not None:
            logger.info("Recommendation scoring seeded with %s", seed)
    return _recommendation_engine


_tmdb_client: TMDBClient | None = None


def get_tmdb_client() -> TMDBClient:
    """Get or create the shared TMDB client; 503 when no API key is configured."""
    global _tmdb_client
    if _tmdb_client is None:
        try:
            _tmdb_client = TMDBClient(
                api_key=get_tmdb_api_key(),
                base_url=get_tmdb_base_url(),
                image_base_url=get_tmdb_image_base_url(),
            )
        except ValueError as e:
            logger.warning("TMDB client unavailable: %s", e)
            raise HTTPException(status_code=503, detail=str(e))
    return _tmdb_client
