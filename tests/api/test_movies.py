"""
API tests for movie endpoints.

Uses FastAPI TestClient with the database dependency pointed at an
in-memory SQLite database.
"""

import pytest

MATRIX = {
    "title": "The Matrix",
    "release_year": 1999,
    "description": "A hacker learns the truth.",
    "rating": 8.7,
    "duration_minutes": 136,
    "genre": "Action, Sci-Fi",
}


@pytest.fixture
def movie_id(client):
    r = client.post("/api/movies", json=MATRIX)
    assert r.status_code == 200
    return r.json()["id"]


class TestMovieEndpoints:
    """Tests for /api/movies."""

    def test_create_movie(self, client):
        """POST /api/movies creates a movie and returns it with an ID."""
        r = client.post("/api/movies", json=MATRIX)
        assert r.status_code == 200
        data = r.json()
        assert data["id"] is not None
        assert data["title"] == "The Matrix"
        assert data["genre"] == "Action, Sci-Fi"

    def test_create_movie_strips_title(self, client):
        """POST /api/movies stores the title without surrounding whitespace."""
        r = client.post("/api/movies", json={"title": "  Heat  ", "release_year": 1995})
        assert r.status_code == 200
        assert r.json()["title"] == "Heat"

    def test_create_movie_minimal(self, client):
        """POST /api/movies accepts just title and release year."""
        r = client.post("/api/movies", json={"title": "Heat", "release_year": 1995})
        assert r.status_code == 200
        assert r.json()["rating"] is None

    @pytest.mark.parametrize("payload", [
        {"title": "", "release_year": 2000},
        {"title": "   ", "release_year": 2000},
        {"title": "Old", "release_year": 1700},
        {"title": "Bad", "release_year": 2000, "rating": 0.5},
        {"title": "Zero", "release_year": 2000, "duration_minutes": 0},
        {"release_year": 2000},
    ])
    def test_create_movie_invalid(self, client, payload):
        """POST /api/movies rejects invalid fields with 422."""
        r = client.post("/api/movies", json=payload)
        assert r.status_code == 422

    def test_list_movies(self, client, movie_id):
        """GET /api/movies returns every movie with a total."""
        client.post("/api/movies", json={"title": "Heat", "release_year": 1995})

        r = client.get("/api/movies")
        assert r.status_code == 200
        data = r.json()
        assert data["total"] == 2
        assert [m["title"] for m in data["movies"]] == ["The Matrix", "Heat"]

    def test_get_movie(self, client, movie_id):
        """GET /api/movies/{movie_id} returns the movie."""
        r = client.get(f"/api/movies/{movie_id}")
        assert r.status_code == 200
        assert r.json()["release_year"] == 1999

    def test_get_movie_not_found(self, client):
        """GET /api/movies/{movie_id} returns 404 for a missing movie."""
        r = client.get("/api/movies/999999")
        assert r.status_code == 404
        assert "not found" in r.json()["detail"].lower()

    def test_update_movie(self, client, movie_id):
        """PUT /api/movies/{movie_id} replaces every field."""
        r = client.put(
            f"/api/movies/{movie_id}",
            json={"title": "The Matrix Reloaded", "release_year": 2003},
        )
        assert r.status_code == 200
        data = r.json()
        assert data["title"] == "The Matrix Reloaded"
        assert data["description"] is None

    def test_update_movie_blank_title(self, client, movie_id):
        """PUT /api/movies/{movie_id} rejects a whitespace-only title."""
        r = client.put(f"/api/movies/{movie_id}", json={"title": "   ", "release_year": 1999})
        assert r.status_code == 422
        assert client.get(f"/api/movies/{movie_id}").json()["title"] == "The Matrix"

    def test_update_movie_not_found(self, client):
        """PUT /api/movies/{movie_id} returns 404 for a missing movie."""
        r = client.put("/api/movies/999999", json={"title": "Ghost", "release_year": 2000})
        assert r.status_code == 404

    def test_delete_movie(self, client, movie_id):
        """DELETE /api/movies/{movie_id} removes the movie and its dependents."""
        client.post("/api/reviews", json={
            "movie_id": movie_id, "rating": 9.0, "watch_date": "2026-01-01",
        })
        client.post(f"/api/watch-history/add/{movie_id}")

        r = client.delete(f"/api/movies/{movie_id}")
        assert r.status_code == 204

        assert client.get(f"/api/movies/{movie_id}").status_code == 404
        assert client.get("/api/reviews").json()["total"] == 0
        assert client.get("/api/watch-history").json()["total"] == 0

    def test_delete_movie_not_found(self, client):
        """DELETE /api/movies/{movie_id} returns 404 for a missing movie."""
        assert client.delete("/api/movies/999999").status_code == 404


class TestMovieSearch:
    """Tests for /api/movies/search, /api/movies/genres, and /api/home."""

    @pytest.fixture(autouse=True)
    def catalog(self, client):
        for payload in [
            MATRIX,
            {"title": "Heat", "release_year": 1995, "genre": "Crime, Thriller"},
            {"title": "Arrival", "release_year": 2016, "genre": "Drama, Sci-Fi"},
        ]:
            client.post("/api/movies", json=payload)

    def test_search_by_title(self, client):
        """GET /api/movies/search?title= matches case-insensitively."""
        r = client.get("/api/movies/search", params={"title": "HEAT"})
        assert [m["title"] for m in r.json()["movies"]] == ["Heat"]

    def test_search_by_genre(self, client):
        """GET /api/movies/search?genre= matches genre substrings."""
        r = client.get("/api/movies/search", params={"genre": "sci-fi"})
        assert r.json()["total"] == 2

    def test_genres(self, client):
        """GET /api/movies/genres returns sorted distinct tags."""
        r = client.get("/api/movies/genres")
        assert r.json() == ["Action", "Crime", "Drama", "Sci-Fi", "Thriller"]

    def test_home(self, client):
        """GET /api/home returns movies, genres, and watch counters."""
        heat_id = client.get("/api/movies/search", params={"title": "Heat"}).json()["movies"][0]["id"]
        client.post(f"/api/watch-history/add/{heat_id}")

        r = client.get("/api/home", params={"genre": "Crime"})
        assert r.status_code == 200
        data = r.json()
        assert data["movie_count"] == 1
        assert data["selected_genre"] == "Crime"
        assert data["search_query"] is None
        assert data["planned_count"] == 1
        assert data["watching_count"] == 0
        assert data["completed_count"] == 0
        assert "Thriller" in data["genres"]

    def test_home_query_wins(self, client):
        """GET /api/home prefers the title query over the genre filter."""
        r = client.get("/api/home", params={"query": "arrival", "genre": "Crime"})
        data = r.json()
        assert [m["title"] for m in data["movies"]] == ["Arrival"]
        assert data["search_query"] == "arrival"
        assert data["selected_genre"] is None


class TestSystemEndpoints:
    """Tests for /api/health and /."""

    def test_health(self, client):
        """GET /api/health reports a connected database."""
        r = client.get("/api/health")
        assert r.status_code == 200
        data = r.json()
        assert data["status"] == "healthy"
        assert data["movies"] == 0

    def test_root(self, client):
        """GET / lists the API entry points."""
        r = client.get("/")
        assert r.status_code == 200
