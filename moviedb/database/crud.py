"""
CRUD operations for the Movie model.

This module provides Create, Read, Update, Delete operations for movies.
Each write commits its own transaction.
"""

from typing import List, Optional
from sqlalchemy import func
from sqlalchemy.orm import Session

from moviedb.database.models import Movie


# Columns a client is allowed to set
MOVIE_FIELDS = ('name', 'genre', 'rating', 'explicit')

# Primary keys are signed 64-bit integers
MAX_MOVIE_ID = 2 ** 63 - 1


def create_movie(
    session: Session,
    name: str,
    genre: str,
    rating: float,
    explicit: bool
) -> Movie:
    """
    Create a new movie.

    Args:
        session: Database session
        name: Movie title
        genre: Genre label
        rating: Numeric rating
        explicit: Explicit content flag

    Returns:
        Created Movie object with its generated id
    """
    movie = Movie(
        name=name,
        genre=genre,
        rating=rating,
        explicit=explicit
    )
    session.add(movie)
    session.commit()
    session.refresh(movie)
    return movie


def get_movie(session: Session, movie_id: int) -> Optional[Movie]:
    """
    Get a movie by ID.

    Args:
        session: Database session
        movie_id: Movie ID

    Returns:
        Movie object or None if not found
    """
    if not -MAX_MOVIE_ID - 1 <= movie_id <= MAX_MOVIE_ID:
        # No row can hold an id the driver cannot bind
        return None
    return session.query(Movie).filter(Movie.id == movie_id).first()


def get_movies(session: Session) -> List[Movie]:
    """
    Get every movie in storage order.

    Args:
        session: Database session

    Returns:
        List of Movie objects
    """
    return session.query(Movie).order_by(Movie.id).all()


def get_movie_count(session: Session) -> int:
    """Get total count of movies."""
    return session.query(func.count(Movie.id)).scalar()


def update_movie(
    session: Session,
    movie_id: int,
    **kwargs
) -> Optional[Movie]:
    """
    Update movie fields.

    Only the given fields are changed; the id is never writable.

    Args:
        session: Database session
        movie_id: Movie ID
        **kwargs: Fields to update (name, genre, rating, explicit)

    Returns:
        Updated Movie object or None if not found

    Raises:
        ValueError: If a field is unknown or set to None
    """
    for key, value in kwargs.items():
        if key not in MOVIE_FIELDS:
            raise ValueError(f"Unknown movie field: {key}")
        if value is None:
            raise ValueError(f"Field '{key}' may not be null")

    movie = get_movie(session, movie_id)
    if movie:
        for key, value in kwargs.items():
            setattr(movie, key, value)
        session.commit()
        session.refresh(movie)
    return movie


def delete_movie(session: Session, movie_id: int) -> Optional[Movie]:
    """
    Delete a movie.

    Args:
        session: Database session
        movie_id: Movie ID

    Returns:
        The deleted Movie (detached, still holding its prior values),
        or None if not found
    """
    movie = get_movie(session, movie_id)
    if movie:
        session.delete(movie)
        session.commit()
    return movie
