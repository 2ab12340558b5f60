"""
Movie catalog API endpoints.
"""

from fastapi import APIRouter, Depends, Query, HTTPException
from sqlalchemy.orm import Session

from cinepick.api.dependencies import get_db
from cinepick.api.models.movie import MovieResponse, MovieCreate, MovieList, GenreList
from cinepick.database import crud

router = APIRouter(prefix="/api/movies", tags=["movies"])


@router.get("", response_model=MovieList)
def list_movies(
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=500),
    db: Session = Depends(get_db),
):
    """List catalog movies with pagination."""
    movies = crud.get_movies(db, skip=skip, limit=limit)
    total = crud.get_movie_count(db)
    return MovieList(
        movies=[MovieResponse.model_validate(m) for m in movies],
        total=total,
    )


@router.post("", response_model=MovieResponse)
def create_movie(movie_in: MovieCreate, db: Session = Depends(get_db)):
    """Add a movie to the catalog."""
    if crud.get_movie(db, movie_in.movie_id):
        raise HTTPException(status_code=400, detail="Movie already exists")
    try:
        return crud.create_movie(db, **movie_in.model_dump())
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.get("/search", response_model=MovieList)
def search_movies(
    q: str | None = Query(None),
    genre: list[str] | None = Query(None),
    min_rating: float | None = Query(None, ge=0.0, le=5.0),
    limit: int = Query(100, ge=1, le=500),
    db: Session = Depends(get_db),
):
    """Search by title/description text, any-of genres and minimum rating."""
    movies = crud.search_movies(db, query=q, genres=genre, min_rating=min_rating, limit=limit)
    return MovieList(
        movies=[MovieResponse.model_validate(m) for m in movies],
        total=len(movies),
    )


@router.get("/genres", response_model=GenreList)
def list_genres(db: Session = Depends(get_db)):
    """List every genre present in the catalog."""
    return GenreList(genres=crud.get_all_genres(db))


@router.get("/{movie_id}", response_model=MovieResponse)
def get_movie(movie_id: int, db: Session = Depends(get_db)):
    """Get movie details by ID."""
    movie = crud.get_movie(db, movie_id)
    if not movie:
        raise HTTPException(status_code=404, detail="Movie not found")
    return movie
