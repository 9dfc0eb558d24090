"""
Unit tests for database CRUD operations.

Tests for Movie CRUD operations and seed data using an in-memory
SQLite database for fast, isolated testing.
"""

import pytest
from sqlalchemy import create_engine
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import sessionmaker

from moviedb.database.models import Base, Movie
from moviedb.database import crud
from moviedb.database.seeds import SEED_MOVIES, run_seeds


@pytest.fixture
def engine():
    """Create an in-memory SQLite engine for testing."""
    engine = create_engine("sqlite:///:memory:")
    Base.metadata.create_all(engine)
    return engine


@pytest.fixture
def session(engine):
    """Create a new database session for testing."""
    Session = sessionmaker(bind=engine)
    session = Session()
    yield session
    session.close()


@pytest.fixture
def movie(session):
    """A single stored movie."""
    return crud.create_movie(
        session,
        name='Titanic',
        genre='Drama',
        rating=7.9,
        explicit=False
    )


class TestMovieCRUD:
    """Tests for Movie CRUD operations."""

    def test_create_movie(self, session):
        """Test creating a new movie assigns an id."""
        movie = crud.create_movie(
            session,
            name='Alien',
            genre='Horror',
            rating=8.5,
            explicit=True
        )

        assert movie.id is not None
        assert movie.name == 'Alien'
        assert movie.genre == 'Horror'
        assert movie.rating == 8.5
        assert movie.explicit is True

    def test_create_movie_empty_name_rejected(self, session):
        """The database refuses an empty name."""
        with pytest.raises(IntegrityError):
            crud.create_movie(session, name='', genre='Drama', rating=5, explicit=False)

    def test_get_movie(self, session, movie):
        """Test retrieving a movie by ID."""
        retrieved = crud.get_movie(session, movie.id)
        assert retrieved is not None
        assert retrieved.id == movie.id
        assert retrieved.name == 'Titanic'

    def test_get_movie_not_found(self, session):
        """Test that getting a non-existent movie returns None."""
        assert crud.get_movie(session, 999) is None

    def test_get_movie_id_out_of_range(self, session, movie):
        """Ids beyond the 64-bit key range match nothing."""
        assert crud.get_movie(session, 2 ** 64) is None
        assert crud.delete_movie(session, -(2 ** 64)) is None
        assert crud.get_movie_count(session) == 1

    def test_get_movies_in_id_order(self, session):
        """All movies come back in storage order."""
        for name in ('B', 'A', 'C'):
            crud.create_movie(session, name=name, genre='Drama', rating=5, explicit=False)

        movies = crud.get_movies(session)
        assert [m.name for m in movies] == ['B', 'A', 'C']
        assert [m.id for m in movies] == sorted(m.id for m in movies)

    def test_get_movie_count(self, session):
        """Test getting total movie count."""
        assert crud.get_movie_count(session) == 0

        crud.create_movie(session, name='Heat', genre='Crime', rating=8.3, explicit=True)
        crud.create_movie(session, name='Up', genre='Animation', rating=8.2, explicit=False)

        assert crud.get_movie_count(session) == 2

    def test_update_movie(self, session, movie):
        """Only the given fields change."""
        updated = crud.update_movie(session, movie.id, rating=9.0)

        assert updated.rating == 9.0
        assert updated.name == 'Titanic'  # Unchanged
        assert updated.genre == 'Drama'  # Unchanged
        assert updated.explicit is False  # Unchanged

    def test_update_movie_no_fields(self, session, movie):
        """An empty update returns the movie unchanged."""
        before = movie.to_dict()
        updated = crud.update_movie(session, movie.id)
        assert updated.to_dict() == before

    def test_update_movie_not_found(self, session):
        """Updating a missing movie returns None."""
        assert crud.update_movie(session, 999, rating=1.0) is None

    def test_update_movie_rejects_null(self, session, movie):
        """Required fields may not be cleared."""
        with pytest.raises(ValueError):
            crud.update_movie(session, movie.id, genre=None)

    def test_update_movie_rejects_id(self, session, movie):
        """The id is not writable."""
        with pytest.raises(ValueError):
            crud.update_movie(session, movie.id, id=42)

    def test_delete_movie(self, session, movie):
        """Deleting returns the prior values and removes the row."""
        movie_id = movie.id
        deleted = crud.delete_movie(session, movie_id)

        assert deleted is not None
        assert deleted.id == movie_id
        assert deleted.name == 'Titanic'
        assert crud.get_movie(session, movie_id) is None
        assert crud.get_movie_count(session) == 0

    def test_delete_movie_twice(self, session, movie):
        """A second delete of the same id finds nothing."""
        crud.delete_movie(session, movie.id)
        assert crud.delete_movie(session, movie.id) is None


class TestSeeds:
    """Tests for the seed data."""

    def test_run_seeds(self, session):
        """Seeding inserts the fixture rows."""
        movies = run_seeds(session)

        assert len(movies) == len(SEED_MOVIES) == 3
        assert all(m.id is not None for m in movies)
        assert crud.get_movie_count(session) == 3

    def test_run_seeds_replaces_existing_rows(self, session, movie):
        """Seeding clears whatever was there before."""
        run_seeds(session)
        run_seeds(session)

        names = [m.name for m in session.query(Movie).order_by(Movie.id).all()]
        assert names == [values['name'] for values in SEED_MOVIES]
