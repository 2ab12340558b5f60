"""
Recommendation generation over an in-memory catalog.

Handles scoring every catalog movie for a user, filtering ineligible
candidates, applying the genre diversity cap and returning top-N lists for
the "Picked for You", "Trending" and "Because You Watched" collections.
"""

import logging
from typing import Collection, Iterable, List, Mapping, Optional, Sequence

import numpy as np

from cinepick.core.recommendations.catalog import Movie, ScoredMovie
from cinepick.core.recommendations.scoring import (
    RandomSource,
    build_genre_weights,
    compute_recommendation_score,
    compute_similarity_score,
    compute_trending_score,
    mean_user_rating,
)
from cinepick.core.recommendations.selection import (
    MAX_PER_GENRE,
    MAX_RECOMMENDATIONS,
    filter_eligible,
    select_recommendations,
    top_n,
)

logger = logging.getLogger(__name__)

MAX_TRENDING = 3
MAX_SIMILAR = 3


class Recommender:
    """
    Generates recommendations from plain catalog and user-state data.

    This class handles:
    - Scoring all catalog movies against the user's preferences and ratings
    - Excluding rated and recently viewed movies
    - Enforcing the per-genre diversity cap
    - Trending and "because you watched" variants

    The random source is injected so tests can pin the diversity and
    recency terms. Instances hold no per-user state and can be shared.
    """

    def __init__(
        self,
        rng: Optional[RandomSource] = None,
        seed: Optional[int] = None,
        max_recommendations: int = MAX_RECOMMENDATIONS,
        max_per_genre: int = MAX_PER_GENRE,
        max_trending: int = MAX_TRENDING,
        max_similar: int = MAX_SIMILAR
    ):
        """
        Initialize recommender.

        Args:
            rng: Random source; defaults to ``numpy.random.default_rng(seed)``
            seed: Seed for the default random source (ignored if ``rng`` given)
            max_recommendations: Size of the "Picked for You" list (default: 6)
            max_per_genre: Genre diversity cap (default: 2)
            max_trending: Size of the trending list (default: 3)
            max_similar: Size of the "because you watched" list (default: 3)
        """
        self.rng = rng if rng is not None else np.random.default_rng(seed)
        self.max_recommendations = max_recommendations
        self.max_per_genre = max_per_genre
        self.max_trending = max_trending
        self.max_similar = max_similar

    def score_catalog(
        self,
        catalog: Sequence[Movie],
        preferences: Collection[str],
        ratings: Mapping[int, float],
        recently_viewed: Collection[int] = ()
    ) -> List[ScoredMovie]:
        """
        Score every catalog movie in catalog order.

        Rated movies carry the -10 rating penalty and recently viewed ones
        score -inf; nothing is filtered here.
        """
        preferences = set(preferences)
        recently_viewed = set(recently_viewed)
        genre_weights = build_genre_weights(catalog, ratings)
        average_rating = mean_user_rating(ratings)

        return [
            ScoredMovie(
                movie,
                compute_recommendation_score(
                    movie,
                    preferences,
                    ratings,
                    recently_viewed,
                    catalog,
                    self.rng,
                    genre_weights=genre_weights,
                    average_rating=average_rating,
                ),
            )
            for movie in catalog
        ]

    def recommend(
        self,
        catalog: Sequence[Movie],
        preferences: Collection[str],
        ratings: Mapping[int, float],
        recently_viewed: Collection[int] = ()
    ) -> List[ScoredMovie]:
        """
        Score, filter and diversify the catalog for one user.

        Args:
            catalog: Full movie catalog
            preferences: Preferred genres
            ratings: Mapping of movie ID to user rating (1-5)
            recently_viewed: Movie IDs to leave out

        Returns:
            At most ``max_recommendations`` scored movies, best first
        """
        scored = self.score_catalog(catalog, preferences, ratings, recently_viewed)
        eligible = filter_eligible(scored, ratings, set(recently_viewed))
        selected = select_recommendations(
            eligible,
            limit=self.max_recommendations,
            max_per_genre=self.max_per_genre,
        )
        logger.debug(
            f"Recommended {len(selected)} of {len(catalog)} movies "
            f"({len(scored) - len(eligible)} excluded)"
        )
        return selected

    def trending(
        self,
        catalog: Sequence[Movie],
        ratings: Mapping[int, float]
    ) -> List[ScoredMovie]:
        """Top ``max_trending`` movies by trending score."""
        scored = [
            ScoredMovie(movie, compute_trending_score(movie, ratings, self.rng))
            for movie in catalog
        ]
        return top_n(scored, self.max_trending)

    def because_you_watched(
        self,
        catalog: Sequence[Movie],
        anchor: Movie,
        ratings: Mapping[int, float]
    ) -> List[ScoredMovie]:
        """Top ``max_similar`` movies most similar to ``anchor`` (anchor excluded)."""
        scored = [
            ScoredMovie(movie, compute_similarity_score(movie, anchor, ratings))
            for movie in catalog
            if movie.id != anchor.id
        ]
        return top_n(scored, self.max_similar)


def _movies(scored: Iterable[ScoredMovie]) -> List[Movie]:
    return [s.movie for s in scored]


def get_recommendations(
    catalog: Sequence[Movie],
    preferences: Collection[str],
    ratings: Mapping[int, float],
    recently_viewed: Collection[int] = (),
    rng: Optional[RandomSource] = None
) -> List[Movie]:
    """Personalized recommendations (at most 6), best first."""
    return _movies(Recommender(rng=rng).recommend(catalog, preferences, ratings, recently_viewed))


def get_trending_movies(
    catalog: Sequence[Movie],
    ratings: Mapping[int, float],
    rng: Optional[RandomSource] = None
) -> List[Movie]:
    """Trending movies (at most 3), best first."""
    return _movies(Recommender(rng=rng).trending(catalog, ratings))


def get_because_you_watched(
    catalog: Sequence[Movie],
    anchor: Movie,
    ratings: Mapping[int, float]
) -> List[Movie]:
    """Movies similar to ``anchor`` (at most 3), best first."""
    return _movies(Recommender().because_you_watched(catalog, anchor, ratings))
