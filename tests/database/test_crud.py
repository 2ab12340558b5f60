"""
Unit tests for database CRUD operations.

Tests for User, Movie, Rating and watchlist CRUD operations using an
in-memory SQLite database for fast, isolated testing.
"""

import pytest
import json
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from cinepick.database.models import Base, User, Rating, WatchlistItem
from cinepick.database import crud


@pytest.fixture
def engine():
    """Create an in-memory SQLite engine for testing."""
    engine = create_engine("sqlite:///:memory:")
    Base.metadata.create_all(engine)
    return engine


@pytest.fixture
def session(engine):
    """Create a new database session for testing."""
    Session = sessionmaker(bind=engine)
    session = Session()
    yield session
    session.close()


@pytest.fixture
def catalog(session):
    """A small catalog of three movies."""
    crud.create_movie(session, 1, "The Adventure Begins", ["Adventure", "Action"], 4.5,
                      description="An epic adventure")
    crud.create_movie(session, 2, "Mystery of the Night", ["Mystery", "Thriller"], 4.2,
                      description="A thrilling mystery")
    crud.create_movie(session, 3, "Space Odyssey", ["Sci-Fi", "Adventure"], 4.7,
                      description="An interstellar journey")
    return session


@pytest.fixture
def user(session):
    return crud.create_user(session, email="ada@example.com", name="Ada")


class TestUserCRUD:
    """Tests for User CRUD operations."""

    def test_create_user(self, session):
        """Test creating a new user."""
        user = crud.create_user(
            session,
            email="Grace@Example.com",
            name="Grace",
            preferred_genres=["Drama", "Comedy"]
        )

        assert user.user_id is not None
        assert user.email == "grace@example.com"
        assert user.name == "Grace"
        assert json.loads(user.preferred_genres) == ["Drama", "Comedy"]

    def test_create_user_invalid_email(self, session):
        """Test that an email without '@' is rejected."""
        with pytest.raises(ValueError):
            crud.create_user(session, email="not-an-email")

    def test_create_user_duplicate_email(self, session, user):
        """Test that emails are unique regardless of case."""
        with pytest.raises(ValueError):
            crud.create_user(session, email="ADA@example.com")

    def test_get_user(self, session, user):
        """Test retrieving a user by ID."""
        retrieved = crud.get_user(session, user.user_id)
        assert retrieved is not None
        assert retrieved.email == "ada@example.com"

    def test_get_user_not_found(self, session):
        """Test that getting a non-existent user returns None."""
        assert crud.get_user(session, 999) is None

    def test_get_user_by_email(self, session, user):
        assert crud.get_user_by_email(session, " Ada@Example.com ").user_id == user.user_id

    def test_get_users_and_count(self, session):
        for i in range(5):
            crud.create_user(session, email=f"user{i}@example.com")

        assert len(crud.get_users(session, skip=0, limit=3)) == 3
        assert crud.get_user_count(session) == 5

    def test_update_user(self, session, user):
        """Test updating user fields."""
        updated = crud.update_user(session, user.user_id, name="Ada L.", email="ADA.L@example.com")
        assert updated.name == "Ada L."
        assert updated.email == "ada.l@example.com"

    def test_update_user_not_found(self, session):
        assert crud.update_user(session, 999, name="Nobody") is None

    def test_update_user_email_taken(self, session, user):
        """Changing to another user's email is rejected without touching the row."""
        other = crud.create_user(session, email="bob@example.com", name="Bob")
        with pytest.raises(ValueError):
            crud.update_user(session, other.user_id, name="Robert", email="ADA@example.com")
        session.rollback()
        assert crud.get_user(session, other.user_id).name == "Bob"

    def test_update_user_invalid_email(self, session, user):
        with pytest.raises(ValueError):
            crud.update_user(session, user.user_id, email="no-at-sign")

    def test_update_user_keeps_own_email(self, session, user):
        updated = crud.update_user(session, user.user_id, email="Ada@Example.com", name="Ada")
        assert updated.email == "ada@example.com"

    def test_delete_user_cascades(self, catalog, user):
        """Deleting a user removes their ratings and watchlist entries."""
        session = catalog
        crud.create_rating(session, user.user_id, 1, 5)
        crud.add_to_watchlist(session, user.user_id, 2)

        assert crud.delete_user(session, user.user_id) is True
        assert crud.get_user(session, user.user_id) is None
        assert session.query(Rating).count() == 0
        assert session.query(WatchlistItem).count() == 0

    def test_delete_user_not_found(self, session):
        assert crud.delete_user(session, 999) is False


class TestPreferences:
    """Tests for preferred-genre helpers."""

    def test_defaults_to_empty(self, session, user):
        assert crud.get_user_preferences(session, user.user_id) == []

    def test_set_preferences_dedupes(self, session, user):
        stored = crud.set_user_preferences(
            session, user.user_id, ["Sci-Fi", "Drama", "Sci-Fi", " ", "Comedy"]
        )
        assert stored == ["Sci-Fi", "Drama", "Comedy"]
        assert crud.get_user_preferences(session, user.user_id) == stored

    def test_unknown_user(self, session):
        assert crud.get_user_preferences(session, 42) is None
        assert crud.set_user_preferences(session, 42, ["Drama"]) is None


class TestMovieCRUD:
    """Tests for Movie CRUD operations."""

    def test_create_movie(self, session):
        """Test creating a new movie."""
        movie = crud.create_movie(
            session,
            movie_id=10,
            title="Comedy Hour",
            genres=["Comedy"],
            rating=3.8,
            image_url="https://example.com/poster.jpg"
        )

        assert movie.movie_id == 10
        assert json.loads(movie.genres) == ["Comedy"]
        assert movie.rating == 3.8

    def test_create_movie_without_genres(self, session):
        """A movie must carry at least one genre."""
        with pytest.raises(ValueError):
            crud.create_movie(session, 11, "Nothing", [])

    def test_create_movie_rating_out_of_range(self, session):
        with pytest.raises(ValueError):
            crud.create_movie(session, 12, "Too Good", ["Drama"], rating=7.0)

    def test_get_movie(self, catalog):
        movie = crud.get_movie(catalog, 2)
        assert movie.title == "Mystery of the Night"

    def test_get_movie_not_found(self, session):
        assert crud.get_movie(session, 999) is None

    def test_get_movies_ordered(self, catalog):
        movies = crud.get_movies(catalog, skip=1, limit=5)
        assert [m.movie_id for m in movies] == [2, 3]
        assert crud.get_movie_count(catalog) == 3

    def test_get_all_genres(self, catalog):
        assert crud.get_all_genres(catalog) == [
            "Action", "Adventure", "Mystery", "Sci-Fi", "Thriller"
        ]


class TestSearch:
    """Tests for catalog search."""

    def test_title_query_case_insensitive(self, catalog):
        results = crud.search_movies(catalog, query="odyssey")
        assert [m.movie_id for m in results] == [3]

    def test_description_query(self, catalog):
        results = crud.search_movies(catalog, query="thrilling")
        assert [m.movie_id for m in results] == [2]

    def test_genre_filter(self, catalog):
        results = crud.search_movies(catalog, genres=["Adventure"])
        assert [m.movie_id for m in results] == [1, 3]

    def test_min_rating(self, catalog):
        results = crud.search_movies(catalog, min_rating=4.5)
        assert [m.movie_id for m in results] == [1, 3]

    def test_combined_filters_and_limit(self, catalog):
        results = crud.search_movies(catalog, query="a", genres=["Adventure", "Mystery"], limit=2)
        assert len(results) == 2

    def test_no_filters_returns_everything(self, catalog):
        assert len(crud.search_movies(catalog)) == 3

    def test_wildcards_escaped(self, catalog):
        assert crud.search_movies(catalog, query="%") == []
        assert crud.search_movies(catalog, query="_") == []

    def test_underscore_matches_literally(self, catalog):
        crud.create_movie(catalog, 4, "snake_case_movie", ["Comedy"], 2.0)
        results = crud.search_movies(catalog, query="e_c")
        assert [m.movie_id for m in results] == [4]


class TestRatingCRUD:
    """Tests for Rating CRUD operations."""

    def test_create_rating(self, catalog, user):
        """Test creating a new rating."""
        rating = crud.create_rating(catalog, user.user_id, 1, 4)
        assert rating.rating_id is not None
        assert rating.rating == 4

    @pytest.mark.parametrize("value", [0, 6, 3.5])
    def test_invalid_rating_values(self, catalog, user, value):
        """Ratings must be whole stars between 1 and 5."""
        with pytest.raises(ValueError):
            crud.create_rating(catalog, user.user_id, 1, value)

    def test_upsert_overwrites(self, catalog, user):
        first = crud.upsert_rating(catalog, user.user_id, 1, 2)
        second = crud.upsert_rating(catalog, user.user_id, 1, 5)

        assert first.rating_id == second.rating_id
        assert second.rating == 5
        assert crud.get_rating_count(catalog) == 1

    def test_rating_map(self, catalog, user):
        crud.create_rating(catalog, user.user_id, 1, 5)
        crud.create_rating(catalog, user.user_id, 3, 2)
        assert crud.get_user_rating_map(catalog, user.user_id) == {1: 5, 3: 2}

    def test_get_rating_by_user_movie(self, catalog, user):
        crud.create_rating(catalog, user.user_id, 2, 3)
        assert crud.get_rating_by_user_movie(catalog, user.user_id, 2).rating == 3
        assert crud.get_rating_by_user_movie(catalog, user.user_id, 1) is None

    def test_update_and_delete(self, catalog, user):
        rating = crud.create_rating(catalog, user.user_id, 2, 3)

        assert crud.update_rating(catalog, rating.rating_id, 1).rating == 1
        assert crud.delete_rating(catalog, rating.rating_id) is True
        assert crud.delete_rating(catalog, rating.rating_id) is False

    def test_rating_stats(self, catalog):
        for i, value in enumerate([5, 3, 4]):
            u = crud.create_user(catalog, email=f"r{i}@example.com")
            crud.create_rating(catalog, u.user_id, 1, value)

        stats = crud.get_rating_stats(catalog, 1)
        assert stats['count'] == 3
        assert stats['average'] == pytest.approx(4.0)
        assert stats['min'] == 3.0
        assert stats['max'] == 5.0

        assert len(crud.get_ratings_by_movie(catalog, 1)) == 3
        assert crud.get_global_rating_stats(catalog)['count'] == 3

    def test_rating_stats_empty(self, catalog):
        stats = crud.get_rating_stats(catalog, 2)
        assert stats == {'count': 0, 'average': 0.0, 'min': 0.0, 'max': 0.0}


class TestWatchlist:
    """Tests for watchlist operations."""

    def test_add_and_list(self, catalog, user):
        crud.add_to_watchlist(catalog, user.user_id, 3)
        crud.add_to_watchlist(catalog, user.user_id, 1)

        movies = crud.get_watchlist(catalog, user.user_id)
        assert [m.movie_id for m in movies] == [3, 1]
        assert crud.is_in_watchlist(catalog, user.user_id, 3)

    def test_add_is_idempotent(self, catalog, user):
        first = crud.add_to_watchlist(catalog, user.user_id, 2)
        second = crud.add_to_watchlist(catalog, user.user_id, 2)
        assert first.watchlist_id == second.watchlist_id
        assert len(crud.get_watchlist(catalog, user.user_id)) == 1

    def test_remove(self, catalog, user):
        crud.add_to_watchlist(catalog, user.user_id, 2)
        assert crud.remove_from_watchlist(catalog, user.user_id, 2) is True
        assert crud.remove_from_watchlist(catalog, user.user_id, 2) is False
        assert not crud.is_in_watchlist(catalog, user.user_id, 2)
