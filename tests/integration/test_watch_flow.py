"""
Integration test: a movie's path through the catalog from creation to
completion, checked through the REST API and the home page counters.
"""


class TestWatchFlow:
    """End-to-end watch workflow over the API."""

    def test_plan_watch_complete(self, client):
        """Test planning, watching, completing, reviewing, and deleting a movie."""
        movie = client.post("/api/movies", json={
            "title": "Stalker",
            "release_year": 1979,
            "genre": "Drama, Sci-Fi",
        }).json()
        movie_id = movie["id"]

        # Plan it
        entry = client.post(f"/api/watch-history/add/{movie_id}").json()
        assert entry["status"] == "Planned"
        home = client.get("/api/home").json()
        assert (home["planned_count"], home["watching_count"], home["completed_count"]) == (1, 0, 0)

        # A planned movie cannot be moved by change-status
        r = client.post(f"/api/watch-history/change-status/{movie_id}", json={"status": "Watching"})
        assert r.status_code == 404

        # Start watching through a full update
        r = client.put(f"/api/watch-history/{entry['id']}", json={
            "status": "Watching",
            "added_date": entry["added_date"],
        })
        assert r.json()["status"] == "Watching"

        # Finish it
        r = client.post(f"/api/watch-history/change-status/{movie_id}", json={"status": "Completed"})
        assert r.status_code == 200
        assert r.json()["completed_date"] is not None

        home = client.get("/api/home").json()
        assert (home["planned_count"], home["watching_count"], home["completed_count"]) == (0, 0, 1)

        # Review it, then remove the movie entirely
        client.post("/api/reviews", json={
            "movie_id": movie_id, "rating": 10.0, "watch_date": r.json()["completed_date"],
        })
        assert client.get(f"/api/reviews/movie/{movie_id}").json()["total"] == 1

        assert client.delete(f"/api/movies/{movie_id}").status_code == 204
        assert client.get("/api/watch-history/stats").json() == {}
        assert client.get("/api/reviews").json()["total"] == 0
