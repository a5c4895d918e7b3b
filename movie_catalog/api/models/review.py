"""
Pydantic schemas for Review API.
"""

from datetime import date

from pydantic import BaseModel, Field


class ReviewCreate(BaseModel):
    """Request body for creating a review."""

    movie_id: int = Field(..., gt=0)
    rating: float = Field(..., ge=1.0, le=10.0)
    comment: str | None = Field(None, max_length=1000)
    watch_date: date


class ReviewUpdate(BaseModel):
    """Request body for replacing a review. The movie cannot be changed."""

    rating: float = Field(..., ge=1.0, le=10.0)
    comment: str | None = Field(None, max_length=1000)
    watch_date: date


class ReviewResponse(BaseModel):
    """Response model for review."""

    id: int
    movie_id: int
    rating: float
    comment: str | None
    watch_date: date

    class Config:
        from_attributes = True


class ReviewList(BaseModel):
    """Response model for list of reviews with total count."""

    reviews: list[ReviewResponse]
    total: int
