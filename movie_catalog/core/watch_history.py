"""
Watch history workflow.

Mediates every read and write of watch history records:
- statuses are stored in internal form and returned in display form
- a movie has at most one watch history record
- status changes out of 'watching' stamp the completion date when the
  movie is finished

The one-record-per-movie check reads before it writes and takes no lock.
Two concurrent creates for the same movie can both pass it; this is accepted
for a single-user catalog.
"""

import logging
from dataclasses import dataclass
from datetime import date
from typing import Callable, Dict, List, Optional
from sqlalchemy.orm import Session

from movie_catalog.core.catalog import MovieService
from movie_catalog.core.exceptions import (
    DuplicateWatchEntryError,
    MovieNotFoundError,
    NotFoundInHistoryError,
    WatchHistoryNotFoundError,
)
from movie_catalog.core.status import WatchStatus, to_display, to_internal
from movie_catalog.database import crud
from movie_catalog.database.models import Movie, WatchHistory

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class WatchHistoryEntry:
    """A watch history record as seen by callers, with its status in display form."""

    id: int
    movie_id: int
    movie_title: str
    status: str
    added_date: date
    completed_date: Optional[date] = None

    @classmethod
    def from_record(cls, record: WatchHistory) -> "WatchHistoryEntry":
        return cls(
            id=record.id,
            movie_id=record.movie_id,
            movie_title=record.movie.title,
            status=to_display(record.status),
            added_date=record.added_date,
            completed_date=record.completed_date,
        )


class WatchHistoryService:
    """
    Watch history operations for the catalog.

    Usage:
        movies = MovieService(session)
        history = WatchHistoryService(session, movies)
        history.quick_add(movie_id=1)
        history.statistics()  # {'planned': 1}

    Args:
        session: Database session
        movie_service: Used to resolve movie references
        today: Clock for added/completed dates (default: date.today)
    """

    def __init__(
        self,
        session: Session,
        movie_service: MovieService,
        today: Callable[[], date] = date.today,
    ):
        self.session = session
        self.movie_service = movie_service
        self.today = today

    # ==================== READS ====================

    def list(self) -> List[WatchHistoryEntry]:
        """All records in storage order."""
        return [
            WatchHistoryEntry.from_record(record)
            for record in crud.get_watch_history_entries(self.session)
        ]

    def get(self, entry_id: int) -> Optional[WatchHistoryEntry]:
        """A single record, or None if the ID is unknown."""
        record = crud.get_watch_history_entry(self.session, entry_id)
        if record is None:
            return None
        return WatchHistoryEntry.from_record(record)

    def list_for_movie(self, movie_id: int) -> List[WatchHistoryEntry]:
        return [
            WatchHistoryEntry.from_record(record)
            for record in crud.get_watch_history_by_movie(self.session, movie_id)
        ]

    def statistics(self) -> Dict[str, int]:
        """
        Record counts grouped by stored status.

        Keys are internal tokens ('planned', ...), not display labels; only
        statuses that occur are present.
        """
        return dict(crud.get_watch_status_counts(self.session))

    def status_summary(self) -> Dict[str, int]:
        """Counts for every vocabulary status, zero when absent."""
        stats = self.statistics()
        return {status.value: stats.get(status.value, 0) for status in WatchStatus}

    # ==================== WRITES ====================

    def create(
        self,
        movie_id: int,
        status: str,
        added_date: date,
        completed_date: Optional[date] = None,
    ) -> WatchHistoryEntry:
        """
        Add a movie to the watch history.

        Raises:
            DuplicateWatchEntryError: If the movie already has a record
            MovieNotFoundError: If the movie does not exist
        """
        self._ensure_not_tracked(movie_id)
        movie = self._resolve_movie(movie_id)

        record = WatchHistory(
            movie=movie,
            status=to_internal(status),
            added_date=added_date,
            completed_date=completed_date,
        )
        record = crud.save_watch_history(self.session, record)
        logger.info(f"Watch history entry {record.id} created for '{movie.title}' ({record.status})")
        return WatchHistoryEntry.from_record(record)

    def update(
        self,
        entry_id: int,
        status: str,
        added_date: date,
        completed_date: Optional[date] = None,
        movie_id: Optional[int] = None,
    ) -> WatchHistoryEntry:
        """
        Replace status, dates, and optionally the movie of a record.

        Moving a record to a movie that another record already tracks is
        rejected; keeping its own movie is fine.

        Raises:
            WatchHistoryNotFoundError: If no record has this ID
            MovieNotFoundError: If movie_id is given and does not exist
            DuplicateWatchEntryError: If movie_id is tracked by another record
        """
        record = crud.get_watch_history_entry(self.session, entry_id)
        if record is None:
            raise WatchHistoryNotFoundError(entry_id)

        movie = None
        if movie_id is not None:
            movie = self._resolve_movie(movie_id)
            self._ensure_not_tracked(movie_id, exclude_entry_id=entry_id)

        record.status = to_internal(status)
        record.added_date = added_date
        record.completed_date = completed_date
        if movie is not None:
            record.movie = movie

        record = crud.save_watch_history(self.session, record)
        logger.info(f"Watch history entry {record.id} updated ({record.status})")
        return WatchHistoryEntry.from_record(record)

    def delete(self, entry_id: int) -> bool:
        """Remove a record. Unknown IDs are ignored; returns whether a row was removed."""
        deleted = crud.delete_watch_history(self.session, entry_id)
        if deleted:
            logger.info(f"Watch history entry {entry_id} deleted")
        return deleted

    def quick_add(self, movie_id: int) -> WatchHistoryEntry:
        """
        Add a movie as planned, dated today.

        Raises:
            MovieNotFoundError: If the movie does not exist
            DuplicateWatchEntryError: If the movie already has a record
        """
        self._resolve_movie(movie_id)
        return self.create(
            movie_id=movie_id,
            status=WatchStatus.PLANNED.value,
            added_date=self.today(),
        )

    def change_status(self, movie_id: int, new_status: str) -> WatchHistoryEntry:
        """
        Move a movie that is currently being watched to a new status.

        Only a record whose stored status is 'watching' can be changed here;
        a planned, completed, or dropped movie is reported as not found.
        Switching to completed stamps today's date as the completion date.

        Raises:
            MovieNotFoundError: If the movie does not exist
            NotFoundInHistoryError: If the movie has no record in 'watching'
        """
        movie = self._resolve_movie(movie_id)

        record = crud.get_watch_history_by_movie_and_status(
            self.session, movie_id, WatchStatus.WATCHING.value
        )
        if record is None:
            logger.warning(f"Status change to '{new_status}' rejected: '{movie.title}' is not being watched")
            raise NotFoundInHistoryError(movie_id)

        record.status = to_internal(new_status)
        if record.status == WatchStatus.COMPLETED.value:
            record.completed_date = self.today()

        record = crud.save_watch_history(self.session, record)
        logger.info(f"'{movie.title}' moved from watching to {record.status}")
        return WatchHistoryEntry.from_record(record)

    # ==================== HELPERS ====================

    def _resolve_movie(self, movie_id: int) -> Movie:
        movie = self.movie_service.find_by_id(movie_id)
        if movie is None:
            raise MovieNotFoundError(movie_id)
        return movie

    def _ensure_not_tracked(self, movie_id: int, exclude_entry_id: Optional[int] = None) -> None:
        existing = crud.get_watch_history_by_movie(self.session, movie_id)
        if any(record.id != exclude_entry_id for record in existing):
            logger.warning(f"Movie {movie_id} is already in the watch history")
            raise DuplicateWatchEntryError(movie_id)
