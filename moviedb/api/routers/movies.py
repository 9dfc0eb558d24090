"""
Movie API endpoints.
"""

import logging

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from moviedb.api.dependencies import get_db
from moviedb.api.errors import NotFound, ValidationError
from moviedb.api.models.movie import MovieCreate, MovieUpdate, MovieResponse, MovieEnvelope
from moviedb.database import crud

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/movies", tags=["movies"])


def envelope(*movies) -> MovieEnvelope:
    return MovieEnvelope(data=[MovieResponse.model_validate(m) for m in movies])


@router.get("", response_model=MovieEnvelope)
def list_movies(db: Session = Depends(get_db)):
    """List all movies."""
    return envelope(*crud.get_movies(db))


@router.get("/{movie_id}", response_model=MovieEnvelope)
def get_movie(movie_id: int, db: Session = Depends(get_db)):
    """Get a single movie by ID."""
    movie = crud.get_movie(db, movie_id)
    if not movie:
        logger.debug("Movie %d not found", movie_id)
        raise NotFound()
    return envelope(movie)


@router.post("", response_model=MovieEnvelope, status_code=201)
def create_movie(movie_in: MovieCreate, db: Session = Depends(get_db)):
    """Create a new movie from a complete payload."""
    movie = crud.create_movie(
        db,
        name=movie_in.name,
        genre=movie_in.genre,
        rating=movie_in.rating,
        explicit=movie_in.explicit,
    )
    logger.info("Created movie %d (%s)", movie.id, movie.name)
    return envelope(movie)


@router.put("/{movie_id}", response_model=MovieEnvelope)
def update_movie(movie_id: int, movie_in: MovieUpdate, db: Session = Depends(get_db)):
    """Update the given fields of a movie; other fields are left as they are."""
    changes = movie_in.model_dump(exclude_unset=True)
    try:
        movie = crud.update_movie(db, movie_id, **changes)
    except ValueError as e:
        raise ValidationError(str(e))
    if not movie:
        raise NotFound()
    logger.info("Updated movie %d: %s", movie_id, sorted(changes))
    return envelope(movie)


@router.delete("/{movie_id}", response_model=MovieEnvelope)
def delete_movie(movie_id: int, db: Session = Depends(get_db)):
    """Delete a movie and return its last values."""
    movie = crud.delete_movie(db, movie_id)
    if not movie:
        raise NotFound()
    logger.info("Deleted movie %d (%s)", movie_id, movie.name)
    return envelope(movie)
