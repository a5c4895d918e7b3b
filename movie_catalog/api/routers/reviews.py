"""
Review API endpoints.
"""

from fastapi import APIRouter, Depends, HTTPException, Response

from movie_catalog.api.dependencies import get_movie_service, get_review_service
from movie_catalog.api.models.review import ReviewCreate, ReviewUpdate, ReviewResponse, ReviewList
from movie_catalog.core.catalog import MovieService, ReviewService
from movie_catalog.core.exceptions import NotFoundError

router = APIRouter(prefix="/api/reviews", tags=["reviews"])


@router.get("", response_model=ReviewList)
def list_reviews(reviews: ReviewService = Depends(get_review_service)):
    """List all reviews."""
    found = reviews.find_all()
    return ReviewList(
        reviews=[ReviewResponse.model_validate(r) for r in found],
        total=len(found),
    )


@router.get("/movie/{movie_id}", response_model=ReviewList)
def list_reviews_for_movie(
    movie_id: int,
    reviews: ReviewService = Depends(get_review_service),
    movies: MovieService = Depends(get_movie_service),
):
    """List the reviews of one movie."""
    if not movies.find_by_id(movie_id):
        raise HTTPException(status_code=404, detail="Movie not found")
    found = reviews.find_by_movie_id(movie_id)
    return ReviewList(
        reviews=[ReviewResponse.model_validate(r) for r in found],
        total=len(found),
    )


@router.post("", response_model=ReviewResponse)
def create_review(review_in: ReviewCreate, reviews: ReviewService = Depends(get_review_service)):
    """Add a review to a movie."""
    try:
        return reviews.save(
            movie_id=review_in.movie_id,
            rating=review_in.rating,
            watch_date=review_in.watch_date,
            comment=review_in.comment,
        )
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.get("/{review_id}", response_model=ReviewResponse)
def get_review(review_id: int, reviews: ReviewService = Depends(get_review_service)):
    """Get a review by ID."""
    review = reviews.find_by_id(review_id)
    if not review:
        raise HTTPException(status_code=404, detail="Review not found")
    return review


@router.put("/{review_id}", response_model=ReviewResponse)
def update_review(
    review_id: int,
    review_in: ReviewUpdate,
    reviews: ReviewService = Depends(get_review_service),
):
    """Replace rating, comment, and watch date of a review."""
    try:
        return reviews.update(
            review_id,
            rating=review_in.rating,
            watch_date=review_in.watch_date,
            comment=review_in.comment,
        )
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.delete("/{review_id}", status_code=204)
def delete_review(review_id: int, reviews: ReviewService = Depends(get_review_service)):
    """Delete a review."""
    if not reviews.delete(review_id):
        raise HTTPException(status_code=404, detail="Review not found")
    return Response(status_code=204)
