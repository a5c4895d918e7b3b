"""
SQLAlchemy ORM models for the movie catalog database.

This module defines the Movie, Review, and WatchHistory tables with their
relationships and constraints. Dependent rows are removed explicitly by the
crud layer when a movie is deleted, so the relationships carry no ORM
delete cascade.
"""

from datetime import date
from typing import List, Optional
from sqlalchemy import (
    Integer, String, Float, Date, ForeignKey,
    CheckConstraint, Index
)
from sqlalchemy.orm import DeclarativeBase, relationship, Mapped, mapped_column


class Base(DeclarativeBase):
    """Base class for all ORM models."""
    pass


class Movie(Base):
    """
    Movie table storing catalog entries.

    Attributes:
        id: Primary key, auto-incremented
        title: Movie title (required, up to 200 characters)
        release_year: Year the movie was released (1800-2026)
        description: Free-text description (optional, up to 1000 characters)
        rating: Catalog rating (1.0 to 10.0, optional)
        duration_minutes: Running time in minutes (optional)
        genre: Comma-separated genre tags (optional, up to 100 characters)
    """
    __tablename__ = 'movies'

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(String(200), nullable=False)
    release_year: Mapped[int] = mapped_column(Integer, nullable=False)
    description: Mapped[Optional[str]] = mapped_column(String(1000), nullable=True)
    rating: Mapped[Optional[float]] = mapped_column(Float, nullable=True)
    duration_minutes: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    genre: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)

    # Relationships
    reviews: Mapped[List["Review"]] = relationship(
        "Review",
        back_populates="movie",
        passive_deletes="all"
    )
    watch_histories: Mapped[List["WatchHistory"]] = relationship(
        "WatchHistory",
        back_populates="movie",
        passive_deletes="all"
    )

    __table_args__ = (
        CheckConstraint("release_year >= 1800 AND release_year <= 2026", name='check_release_year'),
        CheckConstraint("rating IS NULL OR (rating >= 1 AND rating <= 10)", name='check_movie_rating'),
        CheckConstraint("duration_minutes IS NULL OR duration_minutes >= 1", name='check_duration'),
        Index('idx_movies_title', 'title'),
    )

    def __repr__(self) -> str:
        return f"<Movie(id={self.id}, title='{self.title}', year={self.release_year})>"


class Review(Base):
    """
    Review table storing a user's rating and comment for a movie.

    Attributes:
        id: Primary key, auto-incremented
        rating: Rating value (1.0 to 10.0)
        comment: Review text (optional, up to 1000 characters)
        watch_date: Date the movie was watched
        movie_id: Foreign key to movies table
    """
    __tablename__ = 'reviews'

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    rating: Mapped[float] = mapped_column(Float, nullable=False)
    comment: Mapped[Optional[str]] = mapped_column(String(1000), nullable=True)
    watch_date: Mapped[date] = mapped_column(Date, nullable=False)
    movie_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey('movies.id', ondelete='CASCADE'),
        nullable=False
    )

    movie: Mapped["Movie"] = relationship("Movie", back_populates="reviews")

    __table_args__ = (
        CheckConstraint("rating >= 1 AND rating <= 10", name='check_review_rating'),
        Index('idx_reviews_movie', 'movie_id'),
    )

    def __repr__(self) -> str:
        return f"<Review(id={self.id}, movie_id={self.movie_id}, rating={self.rating})>"


class WatchHistory(Base):
    """
    Watch history table tracking the current watch status of a movie.

    The status column always holds the internal token ('planned', 'watching',
    'completed' or 'dropped'). There is deliberately no unique constraint on
    movie_id; the one-record-per-movie rule lives in the workflow service.

    Attributes:
        id: Primary key, auto-incremented
        status: Internal watch status token
        added_date: Date the movie was added to the history
        completed_date: Date the movie was marked completed (optional)
        movie_id: Foreign key to movies table
    """
    __tablename__ = 'watch_history'

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    status: Mapped[str] = mapped_column(String(20), nullable=False)
    added_date: Mapped[date] = mapped_column(Date, nullable=False)
    completed_date: Mapped[Optional[date]] = mapped_column(Date, nullable=True)
    movie_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey('movies.id', ondelete='CASCADE'),
        nullable=False
    )

    movie: Mapped["Movie"] = relationship("Movie", back_populates="watch_histories")

    __table_args__ = (
        Index('idx_watch_history_movie', 'movie_id'),
        Index('idx_watch_history_status', 'status'),
    )

    def __repr__(self) -> str:
        return f"<WatchHistory(id={self.id}, movie_id={self.movie_id}, status='{self.status}')>"
