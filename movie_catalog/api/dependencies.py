"""
FastAPI dependency injection for the database session and catalog services.
"""

from typing import Generator
from fastapi import Depends
from sqlalchemy.orm import Session

from movie_catalog.api.config import get_database_path
from movie_catalog.core.catalog import MovieService, ReviewService
from movie_catalog.core.watch_history import WatchHistoryService
from movie_catalog.database.connection import get_db_manager


def get_db() -> Generator[Session, None, None]:
    """Yield database session for FastAPI Depends()."""
    db_manager = get_db_manager(db_path=get_database_path())
    with db_manager.session_scope() as session:
        yield session


def get_movie_service(db: Session = Depends(get_db)) -> MovieService:
    return MovieService(db)


def get_review_service(
    db: Session = Depends(get_db),
    movie_service: MovieService = Depends(get_movie_service),
) -> ReviewService:
    return ReviewService(db, movie_service)


def get_watch_history_service(
    db: Session = Depends(get_db),
    movie_service: MovieService = Depends(get_movie_service),
) -> WatchHistoryService:
    return WatchHistoryService(db, movie_service)
