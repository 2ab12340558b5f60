"""
Per-movie scoring functions for recommendations, trending and similarity.

Every function here is pure: inputs are read, never mutated, and the only
source of non-determinism is the ``rng`` argument (any object exposing
``random() -> float`` in [0, 1), e.g. ``numpy.random.Generator``).

Recommendation score components and weights:
- genre affinity        0.30
- rating deviation      0.25
- collaborative         0.25
- diversity / novelty   0.20
"""

import math
from typing import Collection, Dict, Iterable, Mapping, Optional, Protocol, Sequence

from cinepick.core.recommendations.catalog import Movie


GENRE_WEIGHT = 0.30
RATING_WEIGHT = 0.25
COLLABORATIVE_WEIGHT = 0.25
DIVERSITY_WEIGHT = 0.20

PREFERRED_GENRE_BONUS = 2.0
DEFAULT_GENRE_WEIGHT = 1.0
RATED_MOVIE_PENALTY = -10.0
EXCLUDED_SCORE = -math.inf

TRENDING_RATING_WEIGHT = 0.4
TRENDING_ENGAGEMENT_WEIGHT = 0.3
TRENDING_RECENCY_WEIGHT = 0.2
TRENDING_POPULARITY_WEIGHT = 0.1

SIMILAR_GENRE_WEIGHT = 0.4
SIMILAR_RATING_WEIGHT = 0.3
SIMILAR_USER_WEIGHT = 0.3


class RandomSource(Protocol):
    """Anything that can draw a uniform float in [0, 1)."""

    def random(self) -> float:
        ...


def mean_user_rating(ratings: Mapping[int, float]) -> float:
    """Arithmetic mean of all user ratings, 0 when the user has rated nothing."""
    if not ratings:
        return 0.0
    return sum(ratings.values()) / len(ratings)


def build_genre_weights(
    catalog: Iterable[Movie],
    ratings: Mapping[int, float]
) -> Dict[str, float]:
    """
    Build the per-genre weight table from the user's rating history.

    For every catalog movie the user rated, the rating is credited to each of
    the movie's genres; the weight of a genre is the mean of those ratings.
    Genres without rated exemplars are absent (callers default them to 1).

    Args:
        catalog: Full movie catalog
        ratings: Mapping of movie ID to user rating

    Returns:
        Dictionary of genre -> mean user rating
    """
    totals: Dict[str, float] = {}
    counts: Dict[str, int] = {}

    for movie in catalog:
        if movie.id not in ratings:
            continue
        user_rating = ratings[movie.id]
        for genre in movie.genres:
            totals[genre] = totals.get(genre, 0.0) + user_rating
            counts[genre] = counts.get(genre, 0) + 1

    return {genre: totals[genre] / counts[genre] for genre in totals}


def genre_affinity_score(
    movie: Movie,
    preferences: Collection[str],
    genre_weights: Mapping[str, float]
) -> float:
    """Average over the movie's genres of (preference bonus + learned weight)."""
    score = 0.0
    for genre in movie.genres:
        if genre in preferences:
            score += PREFERRED_GENRE_BONUS
        score += genre_weights.get(genre, DEFAULT_GENRE_WEIGHT)
    return score / len(movie.genres)


def rating_deviation_score(
    movie: Movie,
    ratings: Mapping[int, float],
    average_rating: float
) -> float:
    """
    Reward movies whose catalog rating is close to the user's average rating.

    Movies the user already rated get a fixed -10 penalty.
    """
    if movie.id in ratings:
        return RATED_MOVIE_PENALTY
    return (5 - abs(movie.rating - average_rating)) / 2


def collaborative_score(
    movie: Movie,
    catalog: Sequence[Movie],
    ratings: Mapping[int, float]
) -> float:
    """
    Average genre-weighted user rating across genre-overlapping movies.

    Overlapping movies the user has not rated contribute 0, so sparse
    history in a genre dilutes the score.
    """
    genres = set(movie.genres)
    contributions = []

    for other in catalog:
        if other.id == movie.id:
            continue
        overlap = sum(1 for g in other.genres if g in genres)
        if overlap == 0:
            continue
        if other.id not in ratings:
            contributions.append(0.0)
            continue
        contributions.append(ratings[other.id] * (overlap / len(other.genres)))

    if not contributions:
        return 0.0
    return sum(contributions) / len(contributions)


def diversity_score(movie: Movie, rng: RandomSource) -> float:
    """Random jitter in [0, 0.5) plus a boost for movies with fewer genres."""
    return rng.random() * 0.5 + 1 / len(movie.genres)


def compute_recommendation_score(
    movie: Movie,
    preferences: Collection[str],
    ratings: Mapping[int, float],
    recently_viewed: Collection[int],
    catalog: Sequence[Movie],
    rng: RandomSource,
    genre_weights: Optional[Mapping[str, float]] = None,
    average_rating: Optional[float] = None
) -> float:
    """
    Compute the weighted recommendation score for a single movie.

    Args:
        movie: Movie to score
        preferences: Genres the user opted into
        ratings: Mapping of movie ID to user rating
        recently_viewed: Movie IDs to exclude (scored -inf)
        catalog: Full catalog (needed for genre weights and collaborative term)
        rng: Random source for the diversity term
        genre_weights: Precomputed ``build_genre_weights`` result (optional)
        average_rating: Precomputed ``mean_user_rating`` result (optional)

    Returns:
        Score (higher is better), or -inf for recently viewed movies
    """
    if movie.id in recently_viewed:
        return EXCLUDED_SCORE

    if genre_weights is None:
        genre_weights = build_genre_weights(catalog, ratings)
    if average_rating is None:
        average_rating = mean_user_rating(ratings)

    score = 0.0
    score += genre_affinity_score(movie, preferences, genre_weights) * GENRE_WEIGHT
    score += rating_deviation_score(movie, ratings, average_rating) * RATING_WEIGHT
    score += collaborative_score(movie, catalog, ratings) * COLLABORATIVE_WEIGHT
    score += diversity_score(movie, rng) * DIVERSITY_WEIGHT
    return score


def compute_trending_score(
    movie: Movie,
    ratings: Mapping[int, float],
    rng: RandomSource
) -> float:
    """
    Score a movie for the trending list.

    Combines catalog rating, a step "has the user rated anything" engagement
    term, a random recency stand-in and a capped rating-count popularity term.
    """
    score = (movie.rating / 5) * TRENDING_RATING_WEIGHT
    score += TRENDING_ENGAGEMENT_WEIGHT if ratings else 0.0
    score += rng.random() * TRENDING_RECENCY_WEIGHT
    score += min(len(ratings) / 10, 1) * TRENDING_POPULARITY_WEIGHT
    return score


def compute_similarity_score(
    candidate: Movie,
    anchor: Movie,
    ratings: Mapping[int, float]
) -> float:
    """
    Score how similar ``candidate`` is to ``anchor`` for "because you watched".

    Genre overlap ratio (over the larger genre list), closeness of catalog
    ratings, and a boost when the user rated the candidate.
    """
    anchor_genres = set(anchor.genres)
    overlap = sum(1 for g in candidate.genres if g in anchor_genres)
    score = overlap / max(len(candidate.genres), len(anchor.genres)) * SIMILAR_GENRE_WEIGHT

    rating_diff = abs(candidate.rating - anchor.rating)
    score += ((5 - rating_diff) / 5) * SIMILAR_RATING_WEIGHT

    if candidate.id in ratings:
        score += (ratings[candidate.id] / 5) * SIMILAR_USER_WEIGHT
    return score
