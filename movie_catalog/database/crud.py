"""
CRUD operations for Movie, Review, and WatchHistory models.

This module provides Create, Read, Update, Delete operations for all database
models. Each write commits its own transaction.
"""

from datetime import date
from typing import List, Optional, Tuple
from sqlalchemy import func, and_
from sqlalchemy.orm import Session

from movie_catalog.database.models import Movie, Review, WatchHistory


# Scalar movie columns replaced by update_movie
MOVIE_FIELDS = ('title', 'release_year', 'description', 'rating', 'duration_minutes', 'genre')


# ==================== MOVIE CRUD OPERATIONS ====================

def create_movie(
    session: Session,
    title: str,
    release_year: int,
    description: Optional[str] = None,
    rating: Optional[float] = None,
    duration_minutes: Optional[int] = None,
    genre: Optional[str] = None
) -> Movie:
    """
    Create a new movie.

    Args:
        session: Database session
        title: Movie title
        release_year: Year the movie was released
        description: Free-text description
        rating: Catalog rating (1.0 to 10.0)
        duration_minutes: Running time in minutes
        genre: Comma-separated genre tags

    Returns:
        Created Movie object

    Raises:
        ValueError: If rating is outside 1.0 to 10.0
    """
    if rating is not None and not (1.0 <= rating <= 10.0):
        raise ValueError("Rating must be between 1.0 and 10.0")

    movie = Movie(
        title=title,
        release_year=release_year,
        description=description,
        rating=rating,
        duration_minutes=duration_minutes,
        genre=genre
    )
    session.add(movie)
    session.commit()
    session.refresh(movie)
    return movie


def get_movie(session: Session, movie_id: int) -> Optional[Movie]:
    """
    Get a movie by ID.

    Args:
        session: Database session
        movie_id: Movie ID

    Returns:
        Movie object or None if not found
    """
    return session.query(Movie).filter(Movie.id == movie_id).first()


def get_movies(session: Session) -> List[Movie]:
    """Get all movies in storage order."""
    return session.query(Movie).all()


def get_movie_count(session: Session) -> int:
    """Get total count of movies."""
    return session.query(func.count(Movie.id)).scalar()


def search_movies_by_title(session: Session, title: str) -> List[Movie]:
    """
    Find movies whose title contains the given text, ignoring case.

    Args:
        session: Database session
        title: Substring to look for

    Returns:
        List of matching Movie objects
    """
    return session.query(Movie).filter(Movie.title.ilike(f"%{title}%")).all()


def search_movies_by_genre(session: Session, genre: str) -> List[Movie]:
    """
    Find movies whose genre tags contain the given text, ignoring case.

    Args:
        session: Database session
        genre: Substring to look for

    Returns:
        List of matching Movie objects
    """
    return session.query(Movie).filter(Movie.genre.ilike(f"%{genre}%")).all()


def get_movie_genres(session: Session) -> List[str]:
    """Get the raw genre column of every movie that has one."""
    rows = session.query(Movie.genre).filter(Movie.genre.isnot(None)).all()
    return [row.genre for row in rows]


def update_movie(session: Session, movie_id: int, **kwargs) -> Optional[Movie]:
    """
    Update movie fields.

    Args:
        session: Database session
        movie_id: Movie ID
        **kwargs: Fields to update (see MOVIE_FIELDS)

    Returns:
        Updated Movie object or None if not found
    """
    movie = get_movie(session, movie_id)
    if movie:
        for key, value in kwargs.items():
            if key in MOVIE_FIELDS:
                setattr(movie, key, value)
        session.commit()
        session.refresh(movie)
    return movie


def delete_movie(session: Session, movie_id: int) -> bool:
    """
    Delete a movie together with its reviews and watch history.

    Dependents are removed first, then the movie, all in one commit.

    Args:
        session: Database session
        movie_id: Movie ID

    Returns:
        True if the movie was deleted, False if not found
    """
    movie = get_movie(session, movie_id)
    if not movie:
        return False

    session.query(Review).filter(Review.movie_id == movie_id).delete()
    session.query(WatchHistory).filter(
        WatchHistory.movie_id == movie_id
    ).delete()
    session.delete(movie)
    session.commit()
    return True


# ==================== REVIEW CRUD OPERATIONS ====================

def create_review(
    session: Session,
    movie_id: int,
    rating: float,
    watch_date: date,
    comment: Optional[str] = None
) -> Review:
    """
    Create a new review.

    Args:
        session: Database session
        movie_id: Movie ID
        rating: Rating value (1.0 to 10.0)
        watch_date: Date the movie was watched
        comment: Review text

    Returns:
        Created Review object

    Raises:
        ValueError: If rating is not between 1 and 10
    """
    if not (1.0 <= rating <= 10.0):
        raise ValueError("Rating must be between 1.0 and 10.0")

    review = Review(
        movie_id=movie_id,
        rating=rating,
        watch_date=watch_date,
        comment=comment
    )
    session.add(review)
    session.commit()
    session.refresh(review)
    return review


def get_review(session: Session, review_id: int) -> Optional[Review]:
    """
    Get a review by ID.

    Args:
        session: Database session
        review_id: Review ID

    Returns:
        Review object or None if not found
    """
    return session.query(Review).filter(Review.id == review_id).first()


def get_reviews(session: Session) -> List[Review]:
    """Get all reviews in storage order."""
    return session.query(Review).all()


def get_reviews_by_movie(session: Session, movie_id: int) -> List[Review]:
    """
    Get all reviews for a specific movie.

    Args:
        session: Database session
        movie_id: Movie ID

    Returns:
        List of Review objects
    """
    return session.query(Review).filter(Review.movie_id == movie_id).all()


def get_review_count(session: Session) -> int:
    """Get total count of reviews."""
    return session.query(func.count(Review.id)).scalar()


def update_review(
    session: Session,
    review_id: int,
    rating: float,
    watch_date: date,
    comment: Optional[str] = None
) -> Optional[Review]:
    """
    Replace the rating, comment, and watch date of a review.

    Args:
        session: Database session
        review_id: Review ID
        rating: New rating value (1.0 to 10.0)
        watch_date: New watch date
        comment: New review text

    Returns:
        Updated Review object or None if not found

    Raises:
        ValueError: If rating is not between 1 and 10
    """
    if not (1.0 <= rating <= 10.0):
        raise ValueError("Rating must be between 1.0 and 10.0")

    review = get_review(session, review_id)
    if review:
        review.rating = rating
        review.comment = comment
        review.watch_date = watch_date
        session.commit()
        session.refresh(review)
    return review


def delete_review(session: Session, review_id: int) -> bool:
    """
    Delete a review.

    Args:
        session: Database session
        review_id: Review ID

    Returns:
        True if review was deleted, False if not found
    """
    review = get_review(session, review_id)
    if review:
        session.delete(review)
        session.commit()
        return True
    return False


# ==================== WATCH HISTORY CRUD OPERATIONS ====================

def get_watch_history_entries(session: Session) -> List[WatchHistory]:
    """Get all watch history records in storage order."""
    return session.query(WatchHistory).all()


def get_watch_history_entry(session: Session, entry_id: int) -> Optional[WatchHistory]:
    """
    Get a watch history record by ID.

    Args:
        session: Database session
        entry_id: Watch history ID

    Returns:
        WatchHistory object or None if not found
    """
    return session.query(WatchHistory).filter(WatchHistory.id == entry_id).first()


def get_watch_history_by_movie(session: Session, movie_id: int) -> List[WatchHistory]:
    """
    Get all watch history records that reference a movie.

    Args:
        session: Database session
        movie_id: Movie ID

    Returns:
        List of WatchHistory objects
    """
    return session.query(WatchHistory).filter(WatchHistory.movie_id == movie_id).all()


def get_watch_history_by_movie_and_status(
    session: Session,
    movie_id: int,
    status: str
) -> Optional[WatchHistory]:
    """
    Get the watch history record of a movie that has the given internal status.

    Args:
        session: Database session
        movie_id: Movie ID
        status: Internal status token

    Returns:
        WatchHistory object or None if not found
    """
    return session.query(WatchHistory).filter(
        and_(WatchHistory.movie_id == movie_id, WatchHistory.status == status)
    ).first()


def save_watch_history(session: Session, entry: WatchHistory) -> WatchHistory:
    """
    Insert or update a watch history record.

    Args:
        session: Database session
        entry: New or already persistent WatchHistory object

    Returns:
        The persisted WatchHistory object with its assigned ID
    """
    session.add(entry)
    session.commit()
    session.refresh(entry)
    return entry


def delete_watch_history(session: Session, entry_id: int) -> bool:
    """
    Delete a watch history record.

    Args:
        session: Database session
        entry_id: Watch history ID

    Returns:
        True if the record was deleted, False if not found
    """
    entry = get_watch_history_entry(session, entry_id)
    if entry:
        session.delete(entry)
        session.commit()
        return True
    return False


def get_watch_history_count(session: Session) -> int:
    """Get total count of watch history records."""
    return session.query(func.count(WatchHistory.id)).scalar()


def get_watch_status_counts(session: Session) -> List[Tuple[str, int]]:
    """
    Count watch history records grouped by stored status.

    Args:
        session: Database session

    Returns:
        List of (internal status, count) tuples
    """
    rows = session.query(
        WatchHistory.status,
        func.count(WatchHistory.id).label('count')
    ).group_by(WatchHistory.status).all()
    return [(row.status, row.count) for row in rows]
