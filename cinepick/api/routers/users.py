"""
User management API endpoints.
"""

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from cinepick.api.dependencies import get_db
from cinepick.api.models.user import (
    UserCreate,
    UserUpdate,
    UserResponse,
    PreferencesUpdate,
    PreferencesResponse,
)
from cinepick.database import crud

router = APIRouter(prefix="/api/users", tags=["users"])


@router.post("", response_model=UserResponse)
def create_user(user_in: UserCreate, db: Session = Depends(get_db)):
    """Create a new user profile."""
    try:
        return crud.create_user(
            db,
            email=user_in.email,
            name=user_in.name,
            preferred_genres=user_in.preferred_genres,
        )
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.get("/{user_id}", response_model=UserResponse)
def get_user(user_id: int, db: Session = Depends(get_db)):
    """Get user profile by ID."""
    user = crud.get_user(db, user_id)
    if not user:
        raise HTTPException(status_code=404, detail="User not found")
    return user


@router.put("/{user_id}", response_model=UserResponse)
def update_user(user_id: int, user_in: UserUpdate, db: Session = Depends(get_db)):
    """Update a user's email, name or preferred genres."""
    if not crud.get_user(db, user_id):
        raise HTTPException(status_code=404, detail="User not found")
    try:
        return crud.update_user(db, user_id, **user_in.model_dump(exclude_none=True))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.get("/{user_id}/ratings")
def get_user_ratings(user_id: int, db: Session = Depends(get_db)):
    """Get rating history for a user."""
    user = crud.get_user(db, user_id)
    if not user:
        raise HTTPException(status_code=404, detail="User not found")
    ratings = crud.get_user_ratings(db, user_id)
    return {
        "user_id": user_id,
        "ratings": [
            {"rating_id": r.rating_id, "movie_id": r.movie_id, "title": r.movie.title, "rating": r.rating}
            for r in ratings
        ],
    }


@router.get("/{user_id}/preferences", response_model=PreferencesResponse)
def get_preferences(user_id: int, db: Session = Depends(get_db)):
    """Get a user's preferred genres."""
    genres = crud.get_user_preferences(db, user_id)
    if genres is None:
        raise HTTPException(status_code=404, detail="User not found")
    return PreferencesResponse(user_id=user_id, genres=genres)


@router.put("/{user_id}/preferences", response_model=PreferencesResponse)
def set_preferences(user_id: int, prefs_in: PreferencesUpdate, db: Session = Depends(get_db)):
    """Replace a user's preferred genres."""
    genres = crud.set_user_preferences(db, user_id, prefs_in.genres)
    if genres is None:
        raise HTTPException(status_code=404, detail="User not found")
    return PreferencesResponse(user_id=user_id, genres=genres)
