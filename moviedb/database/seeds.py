"""
Seed data for the movies table.

Running the seeds replaces the table contents with a fixed set of rows so
tests and local development start from a known state.
"""

import logging
from typing import List

from sqlalchemy.orm import Session

from moviedb.database.models import Movie

logger = logging.getLogger(__name__)


SEED_MOVIES = [
    {'name': 'Toy Story', 'genre': 'Animation', 'rating': 8.3, 'explicit': False},
    {'name': 'Pulp Fiction', 'genre': 'Crime', 'rating': 8.9, 'explicit': True},
    {'name': 'The Matrix', 'genre': 'Science Fiction', 'rating': 8.7, 'explicit': True},
]


def run_seeds(session: Session) -> List[Movie]:
    """
    Delete all movies and insert the seed rows.

    Args:
        session: Database session

    Returns:
        List of inserted Movie objects
    """
    session.query(Movie).delete()
    movies = [Movie(**values) for values in SEED_MOVIES]
    session.add_all(movies)
    session.commit()
    for movie in movies:
        session.refresh(movie)

    logger.info("Seeded %d movies", len(movies))
    return movies
