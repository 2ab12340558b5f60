"""
API tests for rating endpoints.
"""


class TestRatingEndpoints:
    """Tests for /api/ratings."""

    def test_create_rating(self, client, user):
        r = client.post("/api/ratings", json={"user_id": user["user_id"], "movie_id": 2, "rating": 4})
        assert r.status_code == 200
        data = r.json()
        assert data["rating"] == 4
        assert data["movie_id"] == 2

    def test_rating_is_replaced(self, client, user):
        first = client.post("/api/ratings", json={"user_id": user["user_id"], "movie_id": 2, "rating": 4})
        second = client.post("/api/ratings", json={"user_id": user["user_id"], "movie_id": 2, "rating": 1})
        assert first.json()["rating_id"] == second.json()["rating_id"]
        assert second.json()["rating"] == 1

    def test_rating_out_of_range(self, client, user):
        r = client.post("/api/ratings", json={"user_id": user["user_id"], "movie_id": 2, "rating": 6})
        assert r.status_code == 422

    def test_unknown_user_or_movie(self, client, user):
        r = client.post("/api/ratings", json={"user_id": 99999, "movie_id": 2, "rating": 3})
        assert r.status_code == 404
        r = client.post("/api/ratings", json={"user_id": user["user_id"], "movie_id": 999, "rating": 3})
        assert r.status_code == 404

    def test_stats(self, client, user):
        other = client.post("/api/users", json={"email": "second@example.com"}).json()
        client.post("/api/ratings", json={"user_id": user["user_id"], "movie_id": 1, "rating": 5})
        client.post("/api/ratings", json={"user_id": other["user_id"], "movie_id": 1, "rating": 2})

        movie_stats = client.get("/api/ratings/stats/1").json()
        assert movie_stats["count"] == 2
        assert movie_stats["average"] == 3.5

        assert client.get("/api/ratings/stats").json()["count"] == 2

    def test_stats_unknown_movie(self, client):
        assert client.get("/api/ratings/stats/999").status_code == 404

    def test_stats_without_ratings(self, client):
        """A movie nobody rated reports zeros rather than nulls."""
        r = client.get("/api/ratings/stats/3")
        assert r.status_code == 200
        assert r.json() == {"count": 0, "average": 0.0, "min": 0.0, "max": 0.0}
