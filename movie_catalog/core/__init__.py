"""
Catalog business logic.

This package contains:
- The watch status vocabulary and its translations
- Movie and review services
- The watch history workflow service
- Business error types
"""

from movie_catalog.core.catalog import MovieService, ReviewService
from movie_catalog.core.watch_history import WatchHistoryService, WatchHistoryEntry
from movie_catalog.core.status import WatchStatus, to_display, to_internal

__all__ = [
    'MovieService',
    'ReviewService',
    'WatchHistoryService',
    'WatchHistoryEntry',
    'WatchStatus',
    'to_display',
    'to_internal',
]
