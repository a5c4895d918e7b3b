"""
Pydantic schemas for Watch History API.

Statuses are accepted as display labels or internal tokens and returned as
display labels.
"""

from datetime import date

from typing import Annotated

from pydantic import BaseModel, Field, StringConstraints

# Whitespace is stripped before the length check
Status = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=20)]


class WatchHistoryCreate(BaseModel):
    """Request body for adding a movie to the watch history."""

    movie_id: int = Field(..., gt=0)
    status: Status
    added_date: date
    completed_date: date | None = None


class WatchHistoryUpdate(BaseModel):
    """Request body for replacing a watch history entry. Omit movie_id to keep the movie."""

    movie_id: int | None = Field(None, gt=0)
    status: Status
    added_date: date
    completed_date: date | None = None


class StatusChange(BaseModel):
    """Request body for moving a movie out of the 'watching' state."""

    status: Status


class WatchHistoryResponse(BaseModel):
    """Response model for a watch history entry."""

    id: int
    movie_id: int
    movie_title: str
    status: str
    added_date: date
    completed_date: date | None

    class Config:
        from_attributes = True


class WatchHistoryList(BaseModel):
    """Response model for list of watch history entries with total count."""

    entries: list[WatchHistoryResponse]
    total: int
