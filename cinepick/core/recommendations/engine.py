"""
Recommendation engine orchestrator.

Loads the catalog and a user's state from the database, converts them into
plain records and hands them to a ``Recommender``. This is the seam between
persistence and the pure scoring code.
"""

import logging
from typing import Collection, List, Optional

from sqlalchemy.orm import Session

from cinepick.core.recommendations.catalog import Movie, ScoredMovie, movies_from_records
from cinepick.core.recommendations.recommender import Recommender
from cinepick.database import crud

logger = logging.getLogger(__name__)


class RecommendationEngine:
    """
    High-level recommendation service.

    Usage:
        engine = RecommendationEngine(Recommender(seed=42))
        with db_manager.session_scope() as session:
            picks = engine.get_recommendations(session, user_id=1)
    """

    def __init__(self, recommender: Optional[Recommender] = None):
        """
        Initialize engine.

        Args:
            recommender: Recommender to delegate to (default: unseeded Recommender)
        """
        self.recommender = recommender or Recommender()
        logger.info("RecommendationEngine initialized")

    def load_catalog(self, session: Session) -> List[Movie]:
        """Load the full catalog in catalog (ID) order."""
        return movies_from_records(crud.get_all_movies(session))

    def _require_user(self, session: Session, user_id: int) -> None:
        if crud.get_user(session, user_id) is None:
            raise LookupError(f"User {user_id} not found")

    def get_recommendations(
        self,
        session: Session,
        user_id: int,
        recently_viewed: Collection[int] = ()
    ) -> List[ScoredMovie]:
        """
        Personalized "Picked for You" list for a user.

        Args:
            session: Database session
            user_id: User ID
            recently_viewed: Movie IDs to leave out

        Returns:
            Scored movies, best first

        Raises:
            LookupError: If the user doesn't exist
        """
        self._require_user(session, user_id)
        catalog = self.load_catalog(session)
        preferences = crud.get_user_preferences(session, user_id) or []
        ratings = crud.get_user_rating_map(session, user_id)

        logger.info(
            f"Generating recommendations for user {user_id} "
            f"({len(ratings)} ratings, {len(preferences)} preferred genres)"
        )
        return self.recommender.recommend(catalog, preferences, ratings, recently_viewed)

    def get_trending(self, session: Session, user_id: int) -> List[ScoredMovie]:
        """
        Trending list for a user.

        Raises:
            LookupError: If the user doesn't exist
        """
        self._require_user(session, user_id)
        catalog = self.load_catalog(session)
        ratings = crud.get_user_rating_map(session, user_id)
        return self.recommender.trending(catalog, ratings)

    def get_because_you_watched(
        self,
        session: Session,
        user_id: int,
        movie_id: int
    ) -> List[ScoredMovie]:
        """
        Movies similar to ``movie_id`` for a user.

        Raises:
            LookupError: If the user or the anchor movie doesn't exist
        """
        self._require_user(session, user_id)
        catalog = self.load_catalog(session)
        anchor = next((m for m in catalog if m.id == movie_id), None)
        if anchor is None:
            raise LookupError(f"Movie {movie_id} not found")
        ratings = crud.get_user_rating_map(session, user_id)
        return self.recommender.because_you_watched(catalog, anchor, ratings)
