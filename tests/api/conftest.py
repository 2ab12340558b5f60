"""
Shared fixtures for API tests.

Each test gets a fresh in-memory database seeded with the built-in catalog
and a recommendation engine whose random source is pinned.
"""

import pytest
from fastapi.testclient import TestClient

from cinepick.api.dependencies import get_db, get_recommendation_engine
from cinepick.api.main import app
from cinepick.core.recommendations import RecommendationEngine, Recommender
from cinepick.database.connection import DatabaseManager
from cinepick.database.init_db import init_database


class FixedRandom:
    def random(self):
        return 0.5


@pytest.fixture
def db_manager():
    manager = init_database(db_manager=DatabaseManager(":memory:"))
    yield manager
    manager.close()


@pytest.fixture
def client(db_manager):
    """TestClient wired to the in-memory database."""

    def override_get_db():
        with db_manager.session_scope() as session:
            yield session

    engine = RecommendationEngine(Recommender(rng=FixedRandom()))
    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_recommendation_engine] = lambda: engine
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def user(client):
    """A user created through the API."""
    r = client.post("/api/users", json={
        "email": "viewer@example.com",
        "name": "Viewer",
        "preferred_genres": ["Sci-Fi"],
    })
    assert r.status_code == 200
    return r.json()
