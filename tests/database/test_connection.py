"""
Tests for database URL resolution and the session scope.
"""

import pytest

from cinepick.database import crud
from cinepick.database.models import User
from cinepick.database.connection import DatabaseManager, get_database_url


class TestGetDatabaseUrl:
    """Tests for get_database_url."""

    def test_memory(self):
        assert get_database_url(":memory:") == "sqlite://"

    def test_url_passthrough(self):
        assert get_database_url("sqlite:////tmp/x.db") == "sqlite:////tmp/x.db"

    def test_file_path_creates_parent(self, tmp_path):
        target = tmp_path / "nested" / "movies.db"
        url = get_database_url(str(target))
        assert url == f"sqlite:///{target}"
        assert target.parent.is_dir()


class TestSessionScope:
    """Tests for DatabaseManager.session_scope."""

    def test_rollback_on_error(self):
        manager = DatabaseManager(":memory:")
        manager.create_tables()

        with pytest.raises(RuntimeError):
            with manager.session_scope() as session:
                session.add(User(email="ghost@example.com", preferred_genres="[]"))
                raise RuntimeError("boom")

        with manager.session_scope() as session:
            assert crud.get_user_count(session) == 0
        manager.close()
