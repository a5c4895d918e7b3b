"""
Movie API endpoints.
"""

from fastapi import APIRouter, Depends, HTTPException, Query, Response

from movie_catalog.api.dependencies import get_movie_service
from movie_catalog.api.models.movie import MovieCreate, MovieResponse, MovieList
from movie_catalog.core.catalog import MovieService
from movie_catalog.core.exceptions import MovieNotFoundError

router = APIRouter(prefix="/api/movies", tags=["movies"])


@router.get("", response_model=MovieList)
def list_movies(movies: MovieService = Depends(get_movie_service)):
    """List all movies."""
    found = movies.find_all()
    return MovieList(
        movies=[MovieResponse.model_validate(m) for m in found],
        total=len(found),
    )


@router.get("/search", response_model=MovieList)
def search_movies(
    title: str | None = Query(None),
    genre: str | None = Query(None),
    movies: MovieService = Depends(get_movie_service),
):
    """Search movies by title or, failing that, by genre (case-insensitive substring)."""
    found = movies.search(query=title, genre=genre)
    return MovieList(
        movies=[MovieResponse.model_validate(m) for m in found],
        total=len(found),
    )


@router.get("/genres", response_model=list[str])
def list_genres(movies: MovieService = Depends(get_movie_service)):
    """Distinct genre tags used across the catalog."""
    return movies.list_genres()


@router.post("", response_model=MovieResponse)
def create_movie(movie_in: MovieCreate, movies: MovieService = Depends(get_movie_service)):
    """Add a movie to the catalog."""
    try:
        return movies.save(**movie_in.model_dump())
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.get("/{movie_id}", response_model=MovieResponse)
def get_movie(movie_id: int, movies: MovieService = Depends(get_movie_service)):
    """Get movie details by ID."""
    movie = movies.find_by_id(movie_id)
    if not movie:
        raise HTTPException(status_code=404, detail="Movie not found")
    return movie


@router.put("/{movie_id}", response_model=MovieResponse)
def update_movie(
    movie_id: int,
    movie_in: MovieCreate,
    movies: MovieService = Depends(get_movie_service),
):
    """Replace every field of a movie."""
    try:
        return movies.update(movie_id, **movie_in.model_dump())
    except MovieNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.delete("/{movie_id}", status_code=204)
def delete_movie(movie_id: int, movies: MovieService = Depends(get_movie_service)):
    """Delete a movie along with its reviews and watch history."""
    if not movies.delete(movie_id):
        raise HTTPException(status_code=404, detail="Movie not found")
    return Response(status_code=204)
