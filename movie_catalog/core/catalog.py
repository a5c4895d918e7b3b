"""
Movie and review services.

Thin service layer over the crud functions: field replacement on update,
not-found checks, and the search helpers used by the home page.
"""

import logging
from datetime import date
from typing import List, Optional
from sqlalchemy.orm import Session

from movie_catalog.core.exceptions import MovieNotFoundError, ReviewNotFoundError
from movie_catalog.database import crud
from movie_catalog.database.models import Movie, Review

logger = logging.getLogger(__name__)


class MovieService:
    """
    Catalog operations on movies.

    Usage:
        movies = MovieService(session)
        movie = movies.save(title="Alien", release_year=1979, genre="Horror, Sci-Fi")
        movies.search_by_genre("sci")
    """

    def __init__(self, session: Session):
        self.session = session

    def find_by_id(self, movie_id: int) -> Optional[Movie]:
        return crud.get_movie(self.session, movie_id)

    def find_all(self) -> List[Movie]:
        return crud.get_movies(self.session)

    def count(self) -> int:
        return crud.get_movie_count(self.session)

    def save(
        self,
        title: str,
        release_year: int,
        description: Optional[str] = None,
        rating: Optional[float] = None,
        duration_minutes: Optional[int] = None,
        genre: Optional[str] = None,
    ) -> Movie:
        """Create a movie and return it with its assigned ID."""
        movie = crud.create_movie(
            self.session,
            title=title,
            release_year=release_year,
            description=description,
            rating=rating,
            duration_minutes=duration_minutes,
            genre=genre,
        )
        logger.info(f"Movie added: {movie.id} '{movie.title}'")
        return movie

    def update(
        self,
        movie_id: int,
        title: str,
        release_year: int,
        description: Optional[str] = None,
        rating: Optional[float] = None,
        duration_minutes: Optional[int] = None,
        genre: Optional[str] = None,
    ) -> Movie:
        """
        Replace every scalar field of a movie.

        Raises:
            MovieNotFoundError: If no movie has this ID
        """
        if rating is not None and not (1.0 <= rating <= 10.0):
            raise ValueError("Rating must be between 1.0 and 10.0")

        movie = crud.update_movie(
            self.session,
            movie_id,
            title=title,
            release_year=release_year,
            description=description,
            rating=rating,
            duration_minutes=duration_minutes,
            genre=genre,
        )
        if movie is None:
            raise MovieNotFoundError(movie_id)
        logger.info(f"Movie updated: {movie.id} '{movie.title}'")
        return movie

    def delete(self, movie_id: int) -> bool:
        """Delete a movie with its reviews and watch history. Returns False if absent."""
        deleted = crud.delete_movie(self.session, movie_id)
        if deleted:
            logger.info(f"Movie deleted: {movie_id}")
        return deleted

    def search_by_title(self, title: str) -> List[Movie]:
        return crud.search_movies_by_title(self.session, title)

    def search_by_genre(self, genre: str) -> List[Movie]:
        return crud.search_movies_by_genre(self.session, genre)

    def search(self, query: Optional[str] = None, genre: Optional[str] = None) -> List[Movie]:
        """
        Home page movie listing.

        A non-blank title query wins over a genre filter; with neither,
        every movie is returned. Genres arriving from URLs may carry '+'
        in place of spaces.
        """
        if query and query.strip():
            return self.search_by_title(query)
        if genre and genre.strip():
            return self.search_by_genre(genre.replace("+", " "))
        return self.find_all()

    def list_genres(self) -> List[str]:
        """Distinct genre tags across the catalog, sorted."""
        genres = set()
        for value in crud.get_movie_genres(self.session):
            for tag in value.split(","):
                tag = tag.strip()
                if tag:
                    genres.add(tag)
        return sorted(genres)


class ReviewService:
    """Review operations. Reviews always belong to an existing movie."""

    def __init__(self, session: Session, movie_service: MovieService):
        self.session = session
        self.movie_service = movie_service

    def find_by_id(self, review_id: int) -> Optional[Review]:
        return crud.get_review(self.session, review_id)

    def find_all(self) -> List[Review]:
        return crud.get_reviews(self.session)

    def find_by_movie_id(self, movie_id: int) -> List[Review]:
        return crud.get_reviews_by_movie(self.session, movie_id)

    def save(
        self,
        movie_id: int,
        rating: float,
        watch_date: date,
        comment: Optional[str] = None,
    ) -> Review:
        """
        Create a review for a movie.

        Raises:
            MovieNotFoundError: If the movie does not exist
            ValueError: If rating is outside 1.0 to 10.0
        """
        movie = self.movie_service.find_by_id(movie_id)
        if movie is None:
            raise MovieNotFoundError(movie_id)

        review = crud.create_review(
            self.session,
            movie_id=movie.id,
            rating=rating,
            watch_date=watch_date,
            comment=comment,
        )
        logger.info(f"Review added for movie '{movie.title}': {review.id}")
        return review

    def update(
        self,
        review_id: int,
        rating: float,
        watch_date: date,
        comment: Optional[str] = None,
    ) -> Review:
        """
        Replace rating, comment, and watch date of a review.

        Raises:
            ReviewNotFoundError: If no review has this ID
        """
        review = crud.update_review(
            self.session,
            review_id,
            rating=rating,
            watch_date=watch_date,
            comment=comment,
        )
        if review is None:
            raise ReviewNotFoundError(review_id)
        logger.info(f"Review updated: {review_id}")
        return review

    def delete(self, review_id: int) -> bool:
        deleted = crud.delete_review(self.session, review_id)
        if deleted:
            logger.info(f"Review deleted: {review_id}")
        return deleted
