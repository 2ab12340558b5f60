"""
Rating API endpoints.
"""

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from cinepick.api.dependencies import get_db
from cinepick.api.models.rating import RatingCreate, RatingResponse, RatingStatsResponse
from cinepick.database import crud

router = APIRouter(prefix="/api/ratings", tags=["ratings"])


@router.post("", response_model=RatingResponse)
def create_rating(rating_in: RatingCreate, db: Session = Depends(get_db)):
    """Add a rating, or replace the user's existing rating for the movie."""
    if not crud.get_user(db, rating_in.user_id):
        raise HTTPException(status_code=404, detail="User not found")
    if not crud.get_movie(db, rating_in.movie_id):
        raise HTTPException(status_code=404, detail="Movie not found")
    try:
        return crud.upsert_rating(
            db,
            user_id=rating_in.user_id,
            movie_id=rating_in.movie_id,
            rating=rating_in.rating,
        )
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.get("/stats", response_model=RatingStatsResponse)
def get_rating_stats(db: Session = Depends(get_db)):
    """Get global rating statistics."""
    return crud.get_global_rating_stats(db)


@router.get("/stats/{movie_id}", response_model=RatingStatsResponse)
def get_movie_rating_stats(movie_id: int, db: Session = Depends(get_db)):
    """Get user rating statistics for one movie."""
    if not crud.get_movie(db, movie_id):
        raise HTTPException(status_code=404, detail="Movie not found")
    return crud.get_rating_stats(db, movie_id)
