"""
API tests for watch history endpoints.

Statuses go in as display labels or internal tokens and always come back
as display labels.
"""

import pytest


@pytest.fixture
def movie_id(client):
    r = client.post("/api/movies", json={"title": "Alien", "release_year": 1979})
    return r.json()["id"]


def _create(client, movie_id, status, added="2026-01-01", completed=None):
    return client.post("/api/watch-history", json={
        "movie_id": movie_id,
        "status": status,
        "added_date": added,
        "completed_date": completed,
    })


class TestWatchHistoryEndpoints:
    """Tests for /api/watch-history CRUD."""

    def test_create(self, client, movie_id):
        """POST /api/watch-history stores the entry and returns display form."""
        r = _create(client, movie_id, "watching")
        assert r.status_code == 200
        data = r.json()
        assert data["status"] == "Watching"
        assert data["movie_title"] == "Alien"
        assert data["completed_date"] is None

    def test_create_duplicate(self, client, movie_id):
        """POST /api/watch-history returns 409 when the movie is already tracked."""
        assert _create(client, movie_id, "Planned").status_code == 200

        r = _create(client, movie_id, "Watching")
        assert r.status_code == 409
        assert client.get("/api/watch-history").json()["total"] == 1

    def test_create_unknown_movie(self, client):
        """POST /api/watch-history returns 404 for a missing movie."""
        assert _create(client, 999999, "Planned").status_code == 404

    def test_create_missing_status(self, client, movie_id):
        """POST /api/watch-history rejects an empty status."""
        assert _create(client, movie_id, "").status_code == 422

    def test_create_blank_status(self, client, movie_id):
        """POST /api/watch-history rejects a whitespace-only status."""
        assert _create(client, movie_id, "   ").status_code == 422
        assert client.get("/api/watch-history").json()["total"] == 0

    def test_create_strips_status(self, client, movie_id):
        """POST /api/watch-history recognizes a padded status label."""
        r = _create(client, movie_id, "  Watching ")
        assert r.status_code == 200
        assert r.json()["status"] == "Watching"
        assert client.get("/api/watch-history/stats").json() == {"watching": 1}

    def test_get_and_list_for_movie(self, client, movie_id):
        """GET by entry ID and by movie ID return the same entry."""
        entry_id = _create(client, movie_id, "Dropped").json()["id"]

        assert client.get(f"/api/watch-history/{entry_id}").json()["status"] == "Dropped"
        data = client.get(f"/api/watch-history/movie/{movie_id}").json()
        assert [e["id"] for e in data["entries"]] == [entry_id]

    def test_get_not_found(self, client):
        """GET /api/watch-history/{entry_id} returns 404 for a missing entry."""
        assert client.get("/api/watch-history/999999").status_code == 404

    def test_update(self, client, movie_id):
        """PUT /api/watch-history/{entry_id} replaces status and dates."""
        entry_id = _create(client, movie_id, "Planned").json()["id"]

        r = client.put(f"/api/watch-history/{entry_id}", json={
            "status": "Completed",
            "added_date": "2026-01-02",
            "completed_date": "2026-01-09",
        })
        assert r.status_code == 200
        data = r.json()
        assert data["status"] == "Completed"
        assert data["completed_date"] == "2026-01-09"

    def test_update_to_tracked_movie(self, client, movie_id):
        """PUT /api/watch-history/{entry_id} returns 409 when moving onto a tracked movie."""
        other_id = client.post("/api/movies", json={"title": "Aliens", "release_year": 1986}).json()["id"]
        entry_id = _create(client, movie_id, "Planned").json()["id"]
        _create(client, other_id, "Planned")

        r = client.put(f"/api/watch-history/{entry_id}", json={
            "movie_id": other_id, "status": "Planned", "added_date": "2026-01-01",
        })
        assert r.status_code == 409

    def test_update_blank_status(self, client, movie_id):
        """PUT /api/watch-history/{entry_id} rejects a whitespace-only status."""
        entry_id = _create(client, movie_id, "Planned").json()["id"]

        r = client.put(f"/api/watch-history/{entry_id}", json={
            "status": "   ", "added_date": "2026-01-01",
        })
        assert r.status_code == 422
        assert client.get(f"/api/watch-history/{entry_id}").json()["status"] == "Planned"

    def test_update_not_found(self, client):
        """PUT /api/watch-history/{entry_id} returns 404 for a missing entry."""
        r = client.put("/api/watch-history/999999", json={
            "status": "Planned", "added_date": "2026-01-01",
        })
        assert r.status_code == 404

    def test_delete_is_idempotent(self, client, movie_id):
        """DELETE /api/watch-history/{entry_id} returns 204 even when absent."""
        entry_id = _create(client, movie_id, "Planned").json()["id"]

        assert client.delete(f"/api/watch-history/{entry_id}").status_code == 204
        assert client.delete(f"/api/watch-history/{entry_id}").status_code == 204


class TestWatchHistoryWorkflow:
    """Tests for quick add, status change, and statistics endpoints."""

    def test_quick_add(self, client, movie_id):
        """POST /api/watch-history/add/{movie_id} plans the movie."""
        r = client.post(f"/api/watch-history/add/{movie_id}")
        assert r.status_code == 200
        assert r.json()["status"] == "Planned"

        assert client.post(f"/api/watch-history/add/{movie_id}").status_code == 409

    def test_quick_add_unknown_movie(self, client):
        """POST /api/watch-history/add/{movie_id} returns 404 for a missing movie."""
        assert client.post("/api/watch-history/add/999999").status_code == 404

    def test_change_status_to_completed(self, client, movie_id):
        """POST /api/watch-history/change-status/{movie_id} completes a watching movie."""
        _create(client, movie_id, "Watching")

        r = client.post(f"/api/watch-history/change-status/{movie_id}", json={"status": "Completed"})
        assert r.status_code == 200
        data = r.json()
        assert data["status"] == "Completed"
        assert data["completed_date"] is not None

    def test_change_status_requires_watching(self, client, movie_id):
        """POST /api/watch-history/change-status/{movie_id} returns 404 unless watching."""
        entry_id = _create(client, movie_id, "Planned").json()["id"]

        r = client.post(f"/api/watch-history/change-status/{movie_id}", json={"status": "Completed"})
        assert r.status_code == 404
        assert client.get(f"/api/watch-history/{entry_id}").json()["status"] == "Planned"

    def test_change_status_blank(self, client, movie_id):
        """POST /api/watch-history/change-status/{movie_id} rejects a whitespace-only status."""
        _create(client, movie_id, "Watching")

        r = client.post(f"/api/watch-history/change-status/{movie_id}", json={"status": "   "})
        assert r.status_code == 422
        assert client.get("/api/watch-history/stats").json() == {"watching": 1}

    def test_stats_use_internal_keys(self, client, movie_id):
        """GET /api/watch-history/stats counts by internal status token."""
        other_id = client.post("/api/movies", json={"title": "Aliens", "release_year": 1986}).json()["id"]
        _create(client, movie_id, "Watching")
        _create(client, other_id, "planned")

        assert client.get("/api/watch-history/stats").json() == {"planned": 1, "watching": 1}

    def test_statuses(self, client):
        """GET /api/watch-history/statuses lists the display labels."""
        r = client.get("/api/watch-history/statuses")
        assert r.json() == ["Planned", "Watching", "Completed", "Dropped"]
