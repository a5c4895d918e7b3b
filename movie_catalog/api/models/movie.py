"""
Pydantic schemas for Movie API.
"""

from typing import Annotated

from pydantic import BaseModel, Field, StringConstraints

# Whitespace is stripped before the length check
Title = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=200)]


class MovieCreate(BaseModel):
    """Request body for creating or replacing a movie."""

    title: Title
    release_year: int = Field(..., ge=1800, le=2026)
    description: str | None = Field(None, max_length=1000)
    rating: float | None = Field(None, ge=1.0, le=10.0)
    duration_minutes: int | None = Field(None, ge=1)
    genre: str | None = Field(None, max_length=100)


class MovieResponse(BaseModel):
    """Response model for a single movie."""

    id: int
    title: str
    release_year: int
    description: str | None
    rating: float | None
    duration_minutes: int | None
    genre: str | None

    class Config:
        from_attributes = True


class MovieList(BaseModel):
    """Response model for list of movies with total count."""

    movies: list[MovieResponse]
    total: int


class HomeResponse(BaseModel):
    """Home page data: filtered movies, genre tags, and watch counters."""

    movies: list[MovieResponse]
    movie_count: int
    genres: list[str]
    search_query: str | None = None
    selected_genre: str | None = None
    completed_count: int
    watching_count: int
    planned_count: int
