"""
Watchlist API endpoints.
"""

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from cinepick.api.dependencies import get_db
from cinepick.api.models.movie import MovieResponse
from cinepick.api.models.watchlist import WatchlistAdd, WatchlistResponse
from cinepick.database import crud

router = APIRouter(prefix="/api/users/{user_id}/watchlist", tags=["watchlist"])


def _watchlist(db: Session, user_id: int) -> WatchlistResponse:
    movies = crud.get_watchlist(db, user_id)
    return WatchlistResponse(
        user_id=user_id,
        movies=[MovieResponse.model_validate(m) for m in movies],
        total=len(movies),
    )


@router.get("", response_model=WatchlistResponse)
def get_watchlist(user_id: int, db: Session = Depends(get_db)):
    """Get the movies on a user's watchlist."""
    if not crud.get_user(db, user_id):
        raise HTTPException(status_code=404, detail="User not found")
    return _watchlist(db, user_id)


@router.post("", response_model=WatchlistResponse)
def add_to_watchlist(user_id: int, item_in: WatchlistAdd, db: Session = Depends(get_db)):
    """Add a movie to the watchlist (no-op if already there)."""
    if not crud.get_user(db, user_id):
        raise HTTPException(status_code=404, detail="User not found")
    if not crud.get_movie(db, item_in.movie_id):
        raise HTTPException(status_code=404, detail="Movie not found")
    crud.add_to_watchlist(db, user_id, item_in.movie_id)
    return _watchlist(db, user_id)


@router.delete("/{movie_id}", response_model=WatchlistResponse)
def remove_from_watchlist(user_id: int, movie_id: int, db: Session = Depends(get_db)):
    """Remove a movie from the watchlist."""
    if not crud.get_user(db, user_id):
        raise HTTPException(status_code=404, detail="User not found")
    if not crud.remove_from_watchlist(db, user_id, movie_id):
        raise HTTPException(status_code=404, detail="Movie not in watchlist")
    return _watchlist(db, user_id)
