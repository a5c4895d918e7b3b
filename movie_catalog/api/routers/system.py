"""
System API endpoints (health, home page summary).
"""

import logging

from fastapi import APIRouter, Depends, Query
from sqlalchemy.exc import SQLAlchemyError

from movie_catalog.api.dependencies import get_movie_service, get_watch_history_service
from movie_catalog.api.models.movie import HomeResponse, MovieResponse
from movie_catalog.core.catalog import MovieService
from movie_catalog.core.status import WatchStatus
from movie_catalog.core.watch_history import WatchHistoryService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["system"])


@router.get("/health")
def health_check(
    movies: MovieService = Depends(get_movie_service),
    history: WatchHistoryService = Depends(get_watch_history_service),
):
    """Health check: database reachable and record counts."""
    try:
        movie_count = movies.count()
        tracked_count = sum(history.statistics().values())
    except SQLAlchemyError as e:
        logger.error(f"Health check failed: {e}")
        return {"status": "unhealthy", "database": str(e)}
    return {
        "status": "healthy",
        "database": "connected",
        "movies": movie_count,
        "watch_history": tracked_count,
    }


@router.get("/home", response_model=HomeResponse)
def home(
    query: str | None = Query(None),
    genre: str | None = Query(None),
    movies: MovieService = Depends(get_movie_service),
    history: WatchHistoryService = Depends(get_watch_history_service),
):
    """Movies filtered by title query or genre, the genre list, and watch counters."""
    found = movies.search(query=query, genre=genre)
    summary = history.status_summary()
    searching = bool(query and query.strip())
    return HomeResponse(
        movies=[MovieResponse.model_validate(m) for m in found],
        movie_count=len(found),
        genres=movies.list_genres(),
        search_query=query if searching else None,
        selected_genre=genre.replace("+", " ") if genre and genre.strip() and not searching else None,
        completed_count=summary[WatchStatus.COMPLETED.value],
        watching_count=summary[WatchStatus.WATCHING.value],
        planned_count=summary[WatchStatus.PLANNED.value],
    )
