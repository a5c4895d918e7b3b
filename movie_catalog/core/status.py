"""
Watch status vocabulary.

Statuses are stored in an internal lower-case form and shown to users with a
display label. Translation in either direction is case-insensitive and falls
back to returning the input unchanged when the token is not recognized.
"""

from enum import Enum
from typing import List, Optional


class WatchStatus(str, Enum):
    """Internal watch status tokens."""

    PLANNED = "planned"
    WATCHING = "watching"
    COMPLETED = "completed"
    DROPPED = "dropped"

    @property
    def label(self) -> str:
        """Display label for this status."""
        return _DISPLAY_LABELS[self]


_DISPLAY_LABELS = {
    WatchStatus.PLANNED: "Planned",
    WatchStatus.WATCHING: "Watching",
    WatchStatus.COMPLETED: "Completed",
    WatchStatus.DROPPED: "Dropped",
}

# Lookup tables keyed by lower-cased token
_TO_INTERNAL = {status.label.lower(): status.value for status in WatchStatus}
_TO_INTERNAL.update({status.value: status.value for status in WatchStatus})
_TO_DISPLAY = {status.value: status.label for status in WatchStatus}


def to_internal(status: Optional[str]) -> Optional[str]:
    """
    Translate a display label (or an internal token) to the internal token.

    Unknown values are returned unchanged.

    Args:
        status: Status as entered by a user or another service

    Returns:
        Internal status token, or the input itself if not recognized
    """
    if status is None:
        return None
    return _TO_INTERNAL.get(status.lower(), status)


def to_display(status: Optional[str]) -> Optional[str]:
    """
    Translate an internal token to its display label.

    Unknown values are returned unchanged.

    Args:
        status: Internal status token

    Returns:
        Display label, or the input itself if not recognized
    """
    if status is None:
        return None
    return _TO_DISPLAY.get(status.lower(), status)


def display_options() -> List[str]:
    """Display labels in vocabulary order, for status pickers."""
    return [status.label for status in WatchStatus]
