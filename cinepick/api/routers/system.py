"""
System API endpoints (health).
"""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from cinepick.api.config import get_tmdb_api_key
from cinepick.api.dependencies import get_db
from cinepick.database import crud

router = APIRouter(prefix="/api", tags=["system"])


@router.get("/health")
def health_check(db: Session = Depends(get_db)):
    """Health check: database reachable and catalog size."""
    try:
        user_count = crud.get_user_count(db)
        movie_count = crud.get_movie_count(db)
    except Exception as e:
        return {"status": "unhealthy", "database": str(e)}
    return {
        "status": "healthy",
        "database": "connected",
        "users": user_count,
        "movies": movie_count,
        "metadata_configured": bool(get_tmdb_api_key()),
    }
