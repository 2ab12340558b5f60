"""
CRUD operations for User, Movie, Rating and WatchlistItem models.

Genre lists (movie genres and user preferences) are stored as JSON array
text; helpers here take and return plain Python lists.
"""

import json
from typing import List, Optional, Dict, Any, Iterable
from sqlalchemy import func, and_, or_
from sqlalchemy.orm import Session

from cinepick.database.models import User, Movie, Rating, WatchlistItem


def _dump_genres(genres: Iterable[str]) -> str:
    return json.dumps([g.strip() for g in genres if g and g.strip()])


def _load_genres(raw: Optional[str]) -> List[str]:
    if not raw:
        return []
    return list(json.loads(raw))


# ==================== USER CRUD OPERATIONS ====================

def _checked_email(session: Session, email: str, user_id: Optional[int] = None) -> str:
    """Normalize an email and make sure no other user holds it."""
    email = (email or "").strip().lower()
    if "@" not in email:
        raise ValueError("Email must be a valid address")
    owner = get_user_by_email(session, email)
    if owner and owner.user_id != user_id:
        raise ValueError(f"Email already registered: {email}")
    return email


def create_user(
    session: Session,
    email: str,
    name: Optional[str] = None,
    preferred_genres: Optional[Iterable[str]] = None,
) -> User:
    """
    Create a new user.

    Args:
        session: Database session
        email: Account email (must be unique)
        name: Display name (optional)
        preferred_genres: Initial preferred genres (optional)

    Returns:
        Created User object

    Raises:
        ValueError: If email is malformed or already registered
    """
    user = User(
        email=_checked_email(session, email),
        name=name,
        preferred_genres=_dump_genres(preferred_genres or []),
    )
    session.add(user)
    session.commit()
    session.refresh(user)
    return user


def get_user(session: Session, user_id: int) -> Optional[User]:
    """
    Get a user by ID.

    Returns:
        User object or None if not found
    """
    return session.query(User).filter(User.user_id == user_id).first()


def get_user_by_email(session: Session, email: str) -> Optional[User]:
    """Get a user by (case-insensitive) email, or None."""
    return session.query(User).filter(User.email == email.strip().lower()).first()


def get_users(
    session: Session,
    skip: int = 0,
    limit: int = 100
) -> List[User]:
    """Get a list of users with pagination."""
    return session.query(User).offset(skip).limit(limit).all()


def get_user_count(session: Session) -> int:
    """Get total count of users."""
    return session.query(func.count(User.user_id)).scalar()


def update_user(
    session: Session,
    user_id: int,
    **kwargs
) -> Optional[User]:
    """
    Update user information.

    Args:
        session: Database session
        user_id: User ID
        **kwargs: Fields to update (email, name, preferred_genres)

    Returns:
        Updated User object or None if not found

    Raises:
        ValueError: If the new email is malformed or belongs to another user
    """
    user = get_user(session, user_id)
    if user:
        # Validate everything before touching the row
        if "preferred_genres" in kwargs:
            kwargs["preferred_genres"] = _dump_genres(kwargs["preferred_genres"] or [])
        if "email" in kwargs:
            kwargs["email"] = _checked_email(session, kwargs["email"], user_id=user_id)
        for key, value in kwargs.items():
            if hasattr(user, key):
                setattr(user, key, value)
        session.commit()
        session.refresh(user)
    return user


def delete_user(session: Session, user_id: int) -> bool:
    """
    Delete a user and, via cascade, their ratings and watchlist.

    Returns:
        True if user was deleted, False if not found
    """
    user = get_user(session, user_id)
    if user:
        session.delete(user)
        session.commit()
        return True
    return False


def get_user_preferences(session: Session, user_id: int) -> Optional[List[str]]:
    """
    Get a user's preferred genres.

    Returns:
        List of genre labels, or None if the user doesn't exist
    """
    user = get_user(session, user_id)
    if user is None:
        return None
    return _load_genres(user.preferred_genres)


def set_user_preferences(
    session: Session,
    user_id: int,
    genres: Iterable[str]
) -> Optional[List[str]]:
    """
    Replace a user's preferred genres (duplicates removed, order kept).

    Returns:
        The stored genre list, or None if the user doesn't exist
    """
    unique = list(dict.fromkeys(g.strip() for g in genres if g and g.strip()))
    user = update_user(session, user_id, preferred_genres=unique)
    if user is None:
        return None
    return _load_genres(user.preferred_genres)


def get_user_ratings(session: Session, user_id: int) -> List[Rating]:
    """Get all ratings by a user."""
    return session.query(Rating).filter(Rating.user_id == user_id).all()


def get_user_rating_map(session: Session, user_id: int) -> Dict[int, int]:
    """
    Get a user's ratings as a movie_id -> rating mapping.

    This is the shape the recommendation scorer consumes.
    """
    rows = session.query(Rating.movie_id, Rating.rating).filter(
        Rating.user_id == user_id
    ).all()
    return {movie_id: rating for movie_id, rating in rows}


# ==================== MOVIE CRUD OPERATIONS ====================

def create_movie(
    session: Session,
    movie_id: int,
    title: str,
    genres: Iterable[str],
    rating: float = 0.0,
    image_url: Optional[str] = None,
    description: Optional[str] = None
) -> Movie:
    """
    Create a new movie.

    Args:
        session: Database session
        movie_id: Movie ID
        title: Movie title
        genres: Genre labels (at least one)
        rating: Catalog rating (0.0 to 5.0)
        image_url: Poster URL
        description: Short synopsis

    Returns:
        Created Movie object

    Raises:
        ValueError: If genres is empty or rating is out of range
    """
    genres_json = _dump_genres(genres)
    if genres_json == "[]":
        raise ValueError("Movie must have at least one genre")
    if not (0.0 <= rating <= 5.0):
        raise ValueError("Movie rating must be between 0.0 and 5.0")

    movie = Movie(
        movie_id=movie_id,
        title=title,
        genres=genres_json,
        rating=rating,
        image_url=image_url,
        description=description
    )
    session.add(movie)
    session.commit()
    session.refresh(movie)
    return movie


def get_movie(session: Session, movie_id: int) -> Optional[Movie]:
    """Get a movie by ID, or None if not found."""
    return session.query(Movie).filter(Movie.movie_id == movie_id).first()


def get_movies(
    session: Session,
    skip: int = 0,
    limit: int = 100
) -> List[Movie]:
    """Get a page of movies ordered by ID."""
    return session.query(Movie).order_by(Movie.movie_id).offset(skip).limit(limit).all()


def get_all_movies(session: Session) -> List[Movie]:
    """Get the whole catalog ordered by ID (catalog order for scoring)."""
    return session.query(Movie).order_by(Movie.movie_id).all()


def get_movie_count(session: Session) -> int:
    """Get total count of movies."""
    return session.query(func.count(Movie.movie_id)).scalar()


def get_all_genres(session: Session) -> List[str]:
    """Get the sorted set of genres present in the catalog."""
    genres = set()
    for (raw,) in session.query(Movie.genres).all():
        genres.update(_load_genres(raw))
    return sorted(genres)


def search_movies(
    session: Session,
    query: Optional[str] = None,
    genres: Optional[Iterable[str]] = None,
    min_rating: Optional[float] = None,
    limit: int = 100
) -> List[Movie]:
    """
    Search the catalog.

    Args:
        session: Database session
        query: Case-insensitive substring of title or description
        genres: Keep movies carrying any of these genres
        min_rating: Minimum catalog rating
        limit: Maximum number of results

    Returns:
        Matching Movie objects ordered by ID
    """
    q = session.query(Movie)

    if query:
        # autoescape keeps % and _ in the query literal
        q = q.filter(or_(
            Movie.title.icontains(query, autoescape=True),
            Movie.description.icontains(query, autoescape=True),
        ))

    if min_rating is not None:
        q = q.filter(Movie.rating >= min_rating)

    movies = q.order_by(Movie.movie_id).all()

    # Genres live in JSON text, so match them after loading
    wanted = set(genres or [])
    if wanted:
        movies = [m for m in movies if wanted.intersection(_load_genres(m.genres))]

    return movies[:limit]


# ==================== RATING CRUD OPERATIONS ====================

def _validate_rating(rating: int) -> None:
    if int(rating) != rating or not (1 <= rating <= 5):
        raise ValueError("Rating must be a whole number between 1 and 5")


def create_rating(
    session: Session,
    user_id: int,
    movie_id: int,
    rating: int
) -> Rating:
    """
    Create a new rating.

    Raises:
        ValueError: If rating is not a whole number between 1 and 5
    """
    _validate_rating(rating)

    rating_obj = Rating(
        user_id=user_id,
        movie_id=movie_id,
        rating=int(rating)
    )
    session.add(rating_obj)
    session.commit()
    session.refresh(rating_obj)
    return rating_obj


def upsert_rating(
    session: Session,
    user_id: int,
    movie_id: int,
    rating: int
) -> Rating:
    """Create the user's rating for a movie, or overwrite the existing one."""
    existing = get_rating_by_user_movie(session, user_id, movie_id)
    if existing:
        return update_rating(session, existing.rating_id, rating)
    return create_rating(session, user_id=user_id, movie_id=movie_id, rating=rating)


def get_rating(session: Session, rating_id: int) -> Optional[Rating]:
    """Get a rating by ID, or None if not found."""
    return session.query(Rating).filter(Rating.rating_id == rating_id).first()


def get_rating_by_user_movie(
    session: Session,
    user_id: int,
    movie_id: int
) -> Optional[Rating]:
    """Get a rating by user and movie, or None."""
    return session.query(Rating).filter(
        and_(Rating.user_id == user_id, Rating.movie_id == movie_id)
    ).first()


def get_ratings_by_movie(
    session: Session,
    movie_id: int,
    skip: int = 0,
    limit: int = 100
) -> List[Rating]:
    """Get all ratings for a specific movie."""
    return session.query(Rating).filter(
        Rating.movie_id == movie_id
    ).offset(skip).limit(limit).all()


def update_rating(
    session: Session,
    rating_id: int,
    new_rating: int
) -> Optional[Rating]:
    """
    Update a rating value.

    Raises:
        ValueError: If rating is not a whole number between 1 and 5
    """
    _validate_rating(new_rating)

    rating = get_rating(session, rating_id)
    if rating:
        rating.rating = int(new_rating)
        session.commit()
        session.refresh(rating)
    return rating


def delete_rating(session: Session, rating_id: int) -> bool:
    """Delete a rating. Returns False if not found."""
    rating = get_rating(session, rating_id)
    if rating:
        session.delete(rating)
        session.commit()
        return True
    return False


def get_rating_count(session: Session) -> int:
    """Get total count of ratings."""
    return session.query(func.count(Rating.rating_id)).scalar()


def _stats(query) -> Dict[str, Any]:
    stats = query.first()
    return {
        'count': stats.count or 0,
        'average': float(stats.average) if stats.average else 0.0,
        'min': float(stats.min) if stats.min else 0.0,
        'max': float(stats.max) if stats.max else 0.0
    }


def get_rating_stats(session: Session, movie_id: int) -> Dict[str, Any]:
    """
    Get user rating statistics for a movie.

    Returns:
        Dictionary with count, average, min and max
    """
    return _stats(session.query(
        func.count(Rating.rating_id).label('count'),
        func.avg(Rating.rating).label('average'),
        func.min(Rating.rating).label('min'),
        func.max(Rating.rating).label('max')
    ).filter(Rating.movie_id == movie_id))


def get_global_rating_stats(session: Session) -> Dict[str, Any]:
    """Get statistics across all user ratings."""
    return _stats(session.query(
        func.count(Rating.rating_id).label('count'),
        func.avg(Rating.rating).label('average'),
        func.min(Rating.rating).label('min'),
        func.max(Rating.rating).label('max')
    ))


# ==================== WATCHLIST CRUD OPERATIONS ====================

def add_to_watchlist(session: Session, user_id: int, movie_id: int) -> WatchlistItem:
    """
    Add a movie to the user's watchlist.

    Adding a movie that's already listed returns the existing entry.
    """
    existing = session.query(WatchlistItem).filter(
        and_(WatchlistItem.user_id == user_id, WatchlistItem.movie_id == movie_id)
    ).first()
    if existing:
        return existing

    item = WatchlistItem(user_id=user_id, movie_id=movie_id)
    session.add(item)
    session.commit()
    session.refresh(item)
    return item


def remove_from_watchlist(session: Session, user_id: int, movie_id: int) -> bool:
    """Remove a movie from the watchlist. Returns False if it wasn't listed."""
    item = session.query(WatchlistItem).filter(
        and_(WatchlistItem.user_id == user_id, WatchlistItem.movie_id == movie_id)
    ).first()
    if item:
        session.delete(item)
        session.commit()
        return True
    return False


def get_watchlist(session: Session, user_id: int) -> List[Movie]:
    """Get the movies on a user's watchlist, oldest addition first."""
    return session.query(Movie).join(
        WatchlistItem, WatchlistItem.movie_id == Movie.movie_id
    ).filter(
        WatchlistItem.user_id == user_id
    ).order_by(WatchlistItem.watchlist_id).all()


def is_in_watchlist(session: Session, user_id: int, movie_id: int) -> bool:
    """Check whether a movie is on the user's watchlist."""
    return session.query(WatchlistItem).filter(
        and_(WatchlistItem.user_id == user_id, WatchlistItem.movie_id == movie_id)
    ).first() is not None
