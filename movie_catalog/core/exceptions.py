"""
Business errors raised by the catalog services.

Storage failures are not wrapped; they surface as SQLAlchemy exceptions.
"""


class CatalogError(Exception):
    """Base class for catalog business errors."""


class NotFoundError(CatalogError, LookupError):
    """A referenced record does not exist."""


class MovieNotFoundError(NotFoundError):
    def __init__(self, movie_id: int):
        super().__init__(f"Movie not found with ID: {movie_id}")
        self.movie_id = movie_id


class ReviewNotFoundError(NotFoundError):
    def __init__(self, review_id: int):
        super().__init__(f"Review not found with ID: {review_id}")
        self.review_id = review_id


class WatchHistoryNotFoundError(NotFoundError):
    def __init__(self, entry_id: int):
        super().__init__(f"Watch history entry not found with ID: {entry_id}")
        self.entry_id = entry_id


class NotFoundInHistoryError(NotFoundError):
    """No watch history record in the 'watching' state exists for the movie."""

    def __init__(self, movie_id: int):
        super().__init__(f"Movie {movie_id} is not currently being watched")
        self.movie_id = movie_id


class DuplicateWatchEntryError(CatalogError):
    """The movie already has a watch history record."""

    def __init__(self, movie_id: int):
        super().__init__(f"Movie {movie_id} is already in the watch history")
        self.movie_id = movie_id
