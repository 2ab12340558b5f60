"""
SQLAlchemy ORM models for the CinePick database.

This module defines the User, Movie, Rating and WatchlistItem tables with
their relationships and constraints. Genre lists are stored as JSON array
text, as are a user's preferred genres.
"""

from datetime import datetime
from typing import List
from sqlalchemy import (
    Integer, String, Float, Text, ForeignKey,
    CheckConstraint, UniqueConstraint, Index, TIMESTAMP
)
from sqlalchemy.orm import DeclarativeBase, relationship, Mapped, mapped_column
from sqlalchemy.sql import func


class Base(DeclarativeBase):
    """Base class for all ORM models."""
    pass


class User(Base):
    """
    User account and profile.

    Authentication itself is handled by an external identity provider; this
    table only keeps the profile the recommender needs.

    Attributes:
        user_id: Primary key, auto-incremented
        email: Unique account email
        name: Display name (optional)
        preferred_genres: JSON array of genre labels the user opted into
        created_at: Timestamp when record was created
        updated_at: Timestamp when record was last updated
    """
    __tablename__ = 'users'

    user_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    email: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)
    name: Mapped[str] = mapped_column(String(100), nullable=True)
    preferred_genres: Mapped[str] = mapped_column(Text, nullable=False, default='[]')
    created_at: Mapped[datetime] = mapped_column(
        TIMESTAMP,
        nullable=False,
        server_default=func.current_timestamp()
    )
    updated_at: Mapped[datetime] = mapped_column(
        TIMESTAMP,
        nullable=False,
        server_default=func.current_timestamp(),
        onupdate=func.current_timestamp()
    )

    # Relationships
    ratings: Mapped[List["Rating"]] = relationship(
        "Rating",
        back_populates="user",
        cascade="all, delete-orphan"
    )
    watchlist: Mapped[List["WatchlistItem"]] = relationship(
        "WatchlistItem",
        back_populates="user",
        cascade="all, delete-orphan"
    )

    def __repr__(self) -> str:
        return f"<User(user_id={self.user_id}, email='{self.email}')>"


class Movie(Base):
    """
    Catalog movie.

    Attributes:
        movie_id: Primary key
        title: Movie title (required)
        genres: JSON array of genres stored as text (at least one)
        rating: Catalog/critic rating (0.0 to 5.0)
        image_url: Poster image URL
        description: Short synopsis
        created_at: Timestamp when record was created
    """
    __tablename__ = 'movies'

    movie_id: Mapped[int] = mapped_column(Integer, primary_key=True)
    title: Mapped[str] = mapped_column(Text, nullable=False)
    genres: Mapped[str] = mapped_column(Text, nullable=False)  # JSON array as text
    rating: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)
    image_url: Mapped[str] = mapped_column(Text, nullable=True)
    description: Mapped[str] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        TIMESTAMP,
        nullable=False,
        server_default=func.current_timestamp()
    )

    # Relationships
    ratings: Mapped[List["Rating"]] = relationship(
        "Rating",
        back_populates="movie",
        cascade="all, delete-orphan"
    )

    __table_args__ = (
        CheckConstraint("rating >= 0 AND rating <= 5", name='check_movie_rating_range'),
        Index('idx_movies_title', 'title'),
    )

    def __repr__(self) -> str:
        return f"<Movie(movie_id={self.movie_id}, title='{self.title}', rating={self.rating})>"


class Rating(Base):
    """
    User rating for a movie.

    Attributes:
        rating_id: Primary key, auto-incremented
        user_id: Foreign key to users table
        movie_id: Foreign key to movies table
        rating: Whole-star rating value (1 to 5)
        created_at: Timestamp when rating was created
        updated_at: Timestamp when rating was last updated
    """
    __tablename__ = 'ratings'

    rating_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey('users.user_id', ondelete='CASCADE'),
        nullable=False
    )
    movie_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey('movies.movie_id', ondelete='CASCADE'),
        nullable=False
    )
    rating: Mapped[int] = mapped_column(Integer, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        TIMESTAMP,
        nullable=False,
        server_default=func.current_timestamp()
    )
    updated_at: Mapped[datetime] = mapped_column(
        TIMESTAMP,
        nullable=False,
        server_default=func.current_timestamp(),
        onupdate=func.current_timestamp()
    )

    # Relationships
    user: Mapped["User"] = relationship("User", back_populates="ratings")
    movie: Mapped["Movie"] = relationship("Movie", back_populates="ratings")

    __table_args__ = (
        CheckConstraint("rating >= 1 AND rating <= 5", name='check_rating_range'),
        UniqueConstraint('user_id', 'movie_id', name='unique_user_movie'),
        Index('idx_ratings_user', 'user_id'),
        Index('idx_ratings_movie', 'movie_id'),
    )

    def __repr__(self) -> str:
        return f"<Rating(rating_id={self.rating_id}, user_id={self.user_id}, movie_id={self.movie_id}, rating={self.rating})>"


class WatchlistItem(Base):
    """
    Movie saved to a user's watchlist.

    Attributes:
        watchlist_id: Primary key, auto-incremented
        user_id: Foreign key to users table
        movie_id: Foreign key to movies table
        created_at: Timestamp when the movie was added
    """
    __tablename__ = 'watchlist'

    watchlist_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey('users.user_id', ondelete='CASCADE'),
        nullable=False
    )
    movie_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey('movies.movie_id', ondelete='CASCADE'),
        nullable=False
    )
    created_at: Mapped[datetime] = mapped_column(
        TIMESTAMP,
        nullable=False,
        server_default=func.current_timestamp()
    )

    user: Mapped["User"] = relationship("User", back_populates="watchlist")
    movie: Mapped["Movie"] = relationship("Movie")

    __table_args__ = (
        UniqueConstraint('user_id', 'movie_id', name='unique_watchlist_movie'),
        Index('idx_watchlist_user', 'user_id'),
    )

    def __repr__(self) -> str:
        return f"<WatchlistItem(user_id={self.user_id}, movie_id={self.movie_id})>"
