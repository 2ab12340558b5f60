"""
Recommendation API endpoints.
"""

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from cinepick.api.dependencies import get_db, get_recommendation_engine
from cinepick.api.models.recommendation import RecommendationResponse, RecommendationItem
from cinepick.core.recommendations import RecommendationEngine, ScoredMovie

router = APIRouter(prefix="/api/recommendations", tags=["recommendations"])


def _response(user_id: int, collection: str, recs: list[ScoredMovie]) -> RecommendationResponse:
    items = [RecommendationItem.from_scored(r) for r in recs]
    return RecommendationResponse(
        user_id=user_id,
        collection=collection,
        recommendations=items,
        n=len(items),
    )


@router.get("/{user_id}", response_model=RecommendationResponse)
def get_recommendations(
    user_id: int,
    recently_viewed: list[int] = Query([]),
    db: Session = Depends(get_db),
    engine: RecommendationEngine = Depends(get_recommendation_engine),
):
    """Personalized "Picked for You" list (at most 6, genre-diverse)."""
    try:
        recs = engine.get_recommendations(db, user_id=user_id, recently_viewed=recently_viewed)
    except LookupError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return _response(user_id, "for_you", recs)


@router.get("/{user_id}/trending", response_model=RecommendationResponse)
def get_trending(
    user_id: int,
    db: Session = Depends(get_db),
    engine: RecommendationEngine = Depends(get_recommendation_engine),
):
    """Trending movies (at most 3)."""
    try:
        recs = engine.get_trending(db, user_id=user_id)
    except LookupError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return _response(user_id, "trending", recs)


@router.get("/{user_id}/because-you-watched/{movie_id}", response_model=RecommendationResponse)
def get_because_you_watched(
    user_id: int,
    movie_id: int,
    db: Session = Depends(get_db),
    engine: RecommendationEngine = Depends(get_recommendation_engine),
):
    """Movies similar to one the user watched (at most 3)."""
    try:
        recs = engine.get_because_you_watched(db, user_id=user_id, movie_id=movie_id)
    except LookupError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return _response(user_id, "because_you_watched", recs)
