"""
Pydantic schemas for API request/response validation.
"""

from movie_catalog.api.models.movie import MovieCreate, MovieResponse, MovieList, HomeResponse
from movie_catalog.api.models.review import ReviewCreate, ReviewUpdate, ReviewResponse, ReviewList
from movie_catalog.api.models.watch_history import (
    WatchHistoryCreate,
    WatchHistoryUpdate,
    StatusChange,
    WatchHistoryResponse,
    WatchHistoryList,
)

__all__ = [
    "MovieCreate",
    "MovieResponse",
    "MovieList",
    "HomeResponse",
    "ReviewCreate",
    "ReviewUpdate",
    "ReviewResponse",
    "ReviewList",
    "WatchHistoryCreate",
    "WatchHistoryUpdate",
    "StatusChange",
    "WatchHistoryResponse",
    "WatchHistoryList",
]
