"""
Post-scoring selection: ranking, eligibility filtering and genre diversity.
"""

import math
from typing import Collection, Dict, Iterable, List, Mapping

from cinepick.core.recommendations.catalog import ScoredMovie


MAX_RECOMMENDATIONS = 6
MAX_PER_GENRE = 2


def rank(scored: Iterable[ScoredMovie]) -> List[ScoredMovie]:
    """Sort by descending score; equal scores keep catalog order."""
    return sorted(scored, key=lambda s: s.score, reverse=True)


def filter_eligible(
    scored: Iterable[ScoredMovie],
    ratings: Mapping[int, float],
    recently_viewed: Collection[int] = ()
) -> List[ScoredMovie]:
    """
    Drop candidates the user has already rated or recently viewed.

    The scorer already penalizes both; this makes the exclusion hold no
    matter how the other score terms turn out.
    """
    return [
        s for s in scored
        if s.movie.id not in ratings and s.movie.id not in recently_viewed
    ]


def select_recommendations(
    scored: Iterable[ScoredMovie],
    limit: int = MAX_RECOMMENDATIONS,
    max_per_genre: int = MAX_PER_GENRE
) -> List[ScoredMovie]:
    """
    Greedily pick the top movies while capping how often each genre appears.

    Candidates are visited in descending score order. A movie is skipped when
    any of its genres has already been accepted ``max_per_genre`` times, and
    movies scored -inf are never accepted.

    Args:
        scored: Scored candidates
        limit: Maximum number of movies to return
        max_per_genre: Maximum accepted movies per genre

    Returns:
        Accepted movies in descending score order
    """
    accepted: List[ScoredMovie] = []
    genre_counts: Dict[str, int] = {}

    for candidate in rank(scored):
        if len(accepted) >= limit:
            break
        if candidate.score == -math.inf:
            # Sorted descending, so everything after is excluded too
            break
        if any(genre_counts.get(g, 0) >= max_per_genre for g in candidate.movie.genres):
            continue
        accepted.append(candidate)
        for genre in candidate.movie.genres:
            genre_counts[genre] = genre_counts.get(genre, 0) + 1

    return accepted


def top_n(scored: Iterable[ScoredMovie], n: int) -> List[ScoredMovie]:
    """Highest ``n`` scored movies, no diversity constraint."""
    return rank(scored)[:n]
