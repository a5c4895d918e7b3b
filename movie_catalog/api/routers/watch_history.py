"""
Watch history API endpoints.

Business errors from the workflow service map to 404 (missing movie, entry,
or watching record) and 409 (movie already tracked).
"""

from fastapi import APIRouter, Depends, HTTPException, Response

from movie_catalog.api.dependencies import get_watch_history_service
from movie_catalog.api.models.watch_history import (
    WatchHistoryCreate,
    WatchHistoryUpdate,
    StatusChange,
    WatchHistoryResponse,
    WatchHistoryList,
)
from movie_catalog.core.exceptions import DuplicateWatchEntryError, NotFoundError
from movie_catalog.core.status import display_options
from movie_catalog.core.watch_history import WatchHistoryService

router = APIRouter(prefix="/api/watch-history", tags=["watch-history"])


def _to_list(entries) -> WatchHistoryList:
    return WatchHistoryList(
        entries=[WatchHistoryResponse.model_validate(e) for e in entries],
        total=len(entries),
    )


@router.get("", response_model=WatchHistoryList)
def list_watch_history(history: WatchHistoryService = Depends(get_watch_history_service)):
    """List every watch history entry."""
    return _to_list(history.list())


@router.get("/stats", response_model=dict[str, int])
def get_watch_stats(history: WatchHistoryService = Depends(get_watch_history_service)):
    """Entry counts keyed by internal status token."""
    return history.statistics()


@router.get("/statuses", response_model=list[str])
def list_statuses():
    """Status labels accepted by the create and update forms."""
    return display_options()


@router.get("/movie/{movie_id}", response_model=WatchHistoryList)
def list_watch_history_for_movie(
    movie_id: int,
    history: WatchHistoryService = Depends(get_watch_history_service),
):
    """Watch history entries of one movie."""
    return _to_list(history.list_for_movie(movie_id))


@router.post("", response_model=WatchHistoryResponse)
def create_watch_history(
    entry_in: WatchHistoryCreate,
    history: WatchHistoryService = Depends(get_watch_history_service),
):
    """Add a movie to the watch history."""
    try:
        return history.create(
            movie_id=entry_in.movie_id,
            status=entry_in.status,
            added_date=entry_in.added_date,
            completed_date=entry_in.completed_date,
        )
    except DuplicateWatchEntryError as e:
        raise HTTPException(status_code=409, detail=str(e))
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.post("/add/{movie_id}", response_model=WatchHistoryResponse)
def quick_add(movie_id: int, history: WatchHistoryService = Depends(get_watch_history_service)):
    """Add a movie as planned, dated today."""
    try:
        return history.quick_add(movie_id)
    except DuplicateWatchEntryError as e:
        raise HTTPException(status_code=409, detail=str(e))
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.post("/change-status/{movie_id}", response_model=WatchHistoryResponse)
def change_status(
    movie_id: int,
    change: StatusChange,
    history: WatchHistoryService = Depends(get_watch_history_service),
):
    """Move a movie that is being watched to a new status."""
    try:
        return history.change_status(movie_id, change.status)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.get("/{entry_id}", response_model=WatchHistoryResponse)
def get_watch_history(entry_id: int, history: WatchHistoryService = Depends(get_watch_history_service)):
    """Get a watch history entry by ID."""
    entry = history.get(entry_id)
    if not entry:
        raise HTTPException(status_code=404, detail="Watch history entry not found")
    return entry


@router.put("/{entry_id}", response_model=WatchHistoryResponse)
def update_watch_history(
    entry_id: int,
    entry_in: WatchHistoryUpdate,
    history: WatchHistoryService = Depends(get_watch_history_service),
):
    """Replace status and dates of an entry, and its movie when given."""
    try:
        return history.update(
            entry_id,
            status=entry_in.status,
            added_date=entry_in.added_date,
            completed_date=entry_in.completed_date,
            movie_id=entry_in.movie_id,
        )
    except DuplicateWatchEntryError as e:
        raise HTTPException(status_code=409, detail=str(e))
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.delete("/{entry_id}", status_code=204)
def delete_watch_history(entry_id: int, history: WatchHistoryService = Depends(get_watch_history_service)):
    """Delete an entry. Deleting an unknown entry is not an error."""
    history.delete(entry_id)
    return Response(status_code=204)
