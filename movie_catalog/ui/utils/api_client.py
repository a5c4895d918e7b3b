"""
FastAPI client wrapper for Streamlit UI.
"""

import os
from datetime import date

import requests


def get_api_base_url() -> str:
    """Get API base URL from env or default."""
    return os.getenv("API_BASE_URL", "http://localhost:8000").rstrip("/")


def error_message(exc: Exception) -> str:
    """Best human-readable message for a failed API call."""
    if isinstance(exc, requests.HTTPError) and exc.response is not None:
        try:
            detail = exc.response.json().get("detail")
        except ValueError:
            detail = None
        if isinstance(detail, str):
            return detail
        if isinstance(detail, list) and detail:
            return "; ".join(str(d.get("msg", d)) for d in detail)
    return str(exc)


def _get(path: str, params: dict | None = None, timeout: int = 10):
    r = requests.get(f"{get_api_base_url()}{path}", params=params, timeout=timeout)
    r.raise_for_status()
    return r.json()


def _send(method: str, path: str, payload: dict | None = None, timeout: int = 10):
    r = requests.request(method, f"{get_api_base_url()}{path}", json=payload, timeout=timeout)
    r.raise_for_status()
    return r.json() if r.content else None


def _iso(value: date | None) -> str | None:
    return value.isoformat() if value else None


# ==================== HOME / SYSTEM ====================

def health_check() -> dict:
    """Check API health."""
    return _get("/api/health", timeout=5)


def get_home(query: str | None = None, genre: str | None = None) -> dict:
    """Home page data: filtered movies, genres, and watch counters."""
    params = {}
    if query:
        params["query"] = query
    if genre:
        params["genre"] = genre
    return _get("/api/home", params=params)


# ==================== MOVIES ====================

def list_genres() -> list[str]:
    """Distinct genre tags used across the catalog."""
    return _get("/api/movies/genres")


def list_movies() -> list[dict]:
    """List all movies."""
    return _get("/api/movies")["movies"]


def get_movie(movie_id: int) -> dict:
    """Get movie details."""
    return _get(f"/api/movies/{movie_id}")


def create_movie(movie: dict) -> dict:
    """Add a movie. Keys follow the MovieCreate schema."""
    return _send("POST", "/api/movies", movie)


def update_movie(movie_id: int, movie: dict) -> dict:
    """Replace every field of a movie."""
    return _send("PUT", f"/api/movies/{movie_id}", movie)


def delete_movie(movie_id: int) -> None:
    """Delete a movie with its reviews and watch history."""
    _send("DELETE", f"/api/movies/{movie_id}")


# ==================== REVIEWS ====================

def list_reviews(movie_id: int | None = None) -> list[dict]:
    """List all reviews, or the reviews of one movie."""
    path = f"/api/reviews/movie/{movie_id}" if movie_id else "/api/reviews"
    return _get(path)["reviews"]


def create_review(movie_id: int, rating: float, watch_date: date, comment: str | None = None) -> dict:
    """Add a review to a movie."""
    return _send("POST", "/api/reviews", {
        "movie_id": movie_id,
        "rating": rating,
        "watch_date": _iso(watch_date),
        "comment": comment,
    })


def update_review(review_id: int, rating: float, watch_date: date, comment: str | None = None) -> dict:
    """Replace rating, comment, and watch date of a review."""
    return _send("PUT", f"/api/reviews/{review_id}", {
        "rating": rating,
        "watch_date": _iso(watch_date),
        "comment": comment,
    })


def delete_review(review_id: int) -> None:
    """Delete a review."""
    _send("DELETE", f"/api/reviews/{review_id}")


# ==================== WATCH HISTORY ====================

def list_watch_history() -> list[dict]:
    """List watch history entries (display statuses)."""
    return _get("/api/watch-history")["entries"]


def get_watch_stats() -> dict:
    """Entry counts keyed by internal status."""
    return _get("/api/watch-history/stats")


def get_status_options() -> list[str]:
    """Display labels accepted by the API."""
    return _get("/api/watch-history/statuses")


def create_watch_entry(
    movie_id: int,
    status: str,
    added_date: date,
    completed_date: date | None = None,
) -> dict:
    """Add a movie to the watch history."""
    return _send("POST", "/api/watch-history", {
        "movie_id": movie_id,
        "status": status,
        "added_date": _iso(added_date),
        "completed_date": _iso(completed_date),
    })


def update_watch_entry(
    entry_id: int,
    movie_id: int,
    status: str,
    added_date: date,
    completed_date: date | None = None,
) -> dict:
    """Replace a watch history entry."""
    return _send("PUT", f"/api/watch-history/{entry_id}", {
        "movie_id": movie_id,
        "status": status,
        "added_date": _iso(added_date),
        "completed_date": _iso(completed_date),
    })


def delete_watch_entry(entry_id: int) -> None:
    """Delete a watch history entry."""
    _send("DELETE", f"/api/watch-history/{entry_id}")


def quick_add(movie_id: int) -> dict:
    """Add a movie to the watch history as planned."""
    return _send("POST", f"/api/watch-history/add/{movie_id}")


def change_status(movie_id: int, status: str) -> dict:
    """Move a movie that is being watched to a new status."""
    return _send("POST", f"/api/watch-history/change-status/{movie_id}", {"status": status})
