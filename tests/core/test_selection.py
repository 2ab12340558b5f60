"""
Unit tests for ranking, eligibility filtering and the genre diversity cap.
"""

import math
import random

from cinepick.core.recommendations.catalog import Movie, ScoredMovie
from cinepick.core.recommendations.selection import (
    filter_eligible,
    rank,
    select_recommendations,
    top_n,
)


GENRES = ["Action", "Drama", "Comedy", "Sci-Fi", "Horror", "Romance"]


def scored(movie_id, genres, score):
    movie = Movie(id=movie_id, title=f"Movie {movie_id}", genres=tuple(genres), rating=3.0)
    return ScoredMovie(movie, score)


def ids(items):
    return [s.movie.id for s in items]


class TestRank:
    """Tests for rank and top_n."""

    def test_descending(self):
        items = [scored(1, ["Action"], 0.1), scored(2, ["Drama"], 0.9), scored(3, ["Comedy"], 0.5)]
        assert ids(rank(items)) == [2, 3, 1]

    def test_ties_keep_input_order(self):
        items = [scored(i, ["Drama"], 1.0) for i in (5, 3, 9)]
        assert ids(rank(items)) == [5, 3, 9]

    def test_top_n_truncates(self):
        items = [scored(i, ["Action"], float(i)) for i in range(1, 6)]
        assert ids(top_n(items, 3)) == [5, 4, 3]

    def test_top_n_short_input(self):
        assert ids(top_n([scored(1, ["Action"], 0.0)], 3)) == [1]


class TestFilterEligible:
    """Tests for filter_eligible."""

    def test_drops_rated_and_recent(self):
        items = [scored(i, ["Action"], 1.0) for i in range(1, 5)]
        kept = filter_eligible(items, {1: 4}, {3})
        assert ids(kept) == [2, 4]

    def test_keeps_everything_without_history(self):
        items = [scored(i, ["Action"], 1.0) for i in range(1, 4)]
        assert ids(filter_eligible(items, {})) == [1, 2, 3]


class TestSelectRecommendations:
    """Tests for select_recommendations."""

    def test_genre_cap(self):
        items = [scored(i, ["Action"], 10.0 - i) for i in range(1, 6)]
        items.append(scored(6, ["Drama"], 0.0))
        selected = select_recommendations(items)
        assert ids(selected) == [1, 2, 6]

    def test_multi_genre_movie_blocked_by_any_full_genre(self):
        items = [
            scored(1, ["Action"], 3.0),
            scored(2, ["Action", "Drama"], 2.0),
            scored(3, ["Drama", "Action"], 1.0),
            scored(4, ["Drama"], 0.5),
        ]
        # After 1 and 2, Action is full so 3 is skipped
        assert ids(select_recommendations(items)) == [1, 2, 4]

    def test_limit(self):
        items = [scored(i, [GENRES[i % len(GENRES)]], float(i)) for i in range(20)]
        assert len(select_recommendations(items)) == 6

    def test_custom_limits(self):
        items = [scored(i, ["Action"], float(i)) for i in range(10)]
        assert len(select_recommendations(items, limit=4, max_per_genre=3)) == 3

    def test_excluded_scores_never_selected(self):
        items = [
            scored(1, ["Action"], -math.inf),
            scored(2, ["Drama"], -5.0),
            scored(3, ["Comedy"], -math.inf),
        ]
        assert ids(select_recommendations(items)) == [2]

    def test_empty(self):
        assert select_recommendations([]) == []

    def test_cap_holds_on_random_catalogs(self):
        rng = random.Random(1234)
        for _ in range(50):
            items = [
                scored(i, rng.sample(GENRES, rng.randint(1, 3)), rng.uniform(-3, 3))
                for i in range(rng.randint(0, 25))
            ]
            selected = select_recommendations(items)

            assert len(selected) <= 6
            counts = {}
            for s in selected:
                for genre in s.movie.genres:
                    counts[genre] = counts.get(genre, 0) + 1
            assert all(c <= 2 for c in counts.values())

            scores = [s.score for s in selected]
            assert scores == sorted(scores, reverse=True)
