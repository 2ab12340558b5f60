"""
API tests for user and preference endpoints.
"""


class TestUserEndpoints:
    """Tests for /api/users."""

    def test_create_user(self, client):
        """POST /api/users creates a user and returns its profile."""
        r = client.post("/api/users", json={
            "email": "Someone@Example.com",
            "name": "Someone",
            "preferred_genres": ["Drama"],
        })
        assert r.status_code == 200
        data = r.json()
        assert data["user_id"] is not None
        assert data["email"] == "someone@example.com"
        assert data["preferred_genres"] == ["Drama"]

    def test_create_user_minimal(self, client):
        r = client.post("/api/users", json={"email": "min@example.com"})
        assert r.status_code == 200
        assert r.json()["name"] is None
        assert r.json()["preferred_genres"] == []

    def test_create_user_invalid_email(self, client):
        """Malformed email fails schema validation."""
        r = client.post("/api/users", json={"email": "nope"})
        assert r.status_code == 422

    def test_create_user_duplicate_email(self, client, user):
        r = client.post("/api/users", json={"email": "VIEWER@example.com"})
        assert r.status_code == 400

    def test_get_user(self, client, user):
        r = client.get(f"/api/users/{user['user_id']}")
        assert r.status_code == 200
        assert r.json()["name"] == "Viewer"

    def test_get_user_not_found(self, client):
        assert client.get("/api/users/99999").status_code == 404

    def test_update_user(self, client, user):
        r = client.put(f"/api/users/{user['user_id']}", json={"name": "Renamed"})
        assert r.status_code == 200
        assert r.json()["name"] == "Renamed"
        assert r.json()["email"] == "viewer@example.com"

    def test_update_user_email_taken(self, client, user):
        client.post("/api/users", json={"email": "other@example.com"})
        r = client.put(f"/api/users/{user['user_id']}", json={"email": "other@example.com"})
        assert r.status_code == 400

    def test_update_user_not_found(self, client):
        assert client.put("/api/users/99999", json={"name": "X"}).status_code == 404

    def test_get_user_ratings(self, client, user):
        """GET /api/users/{id}/ratings lists the rating history with titles."""
        client.post("/api/ratings", json={"user_id": user["user_id"], "movie_id": 4, "rating": 5})
        r = client.get(f"/api/users/{user['user_id']}/ratings")
        assert r.status_code == 200
        ratings = r.json()["ratings"]
        assert len(ratings) == 1
        assert ratings[0]["movie_id"] == 4
        assert ratings[0]["title"] == "Space Odyssey"
        assert ratings[0]["rating"] == 5

    def test_get_user_ratings_not_found(self, client):
        assert client.get("/api/users/99999/ratings").status_code == 404


class TestPreferenceEndpoints:
    """Tests for /api/users/{id}/preferences."""

    def test_get_preferences(self, client, user):
        r = client.get(f"/api/users/{user['user_id']}/preferences")
        assert r.status_code == 200
        assert r.json() == {"user_id": user["user_id"], "genres": ["Sci-Fi"]}

    def test_set_preferences(self, client, user):
        r = client.put(
            f"/api/users/{user['user_id']}/preferences",
            json={"genres": ["Comedy", "Drama", "Comedy"]},
        )
        assert r.status_code == 200
        assert r.json()["genres"] == ["Comedy", "Drama"]

        profile = client.get(f"/api/users/{user['user_id']}").json()
        assert profile["preferred_genres"] == ["Comedy", "Drama"]

    def test_preferences_unknown_user(self, client):
        assert client.get("/api/users/99999/preferences").status_code == 404
        assert client.put("/api/users/99999/preferences", json={"genres": []}).status_code == 404
