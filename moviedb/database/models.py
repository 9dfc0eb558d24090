"""
SQLAlchemy ORM models for the movies database.

This module defines the Movie table. The schema itself is created and torn
down by the migrations in moviedb.database.migrations.
"""

from sqlalchemy import Integer, String, Float, Boolean, CheckConstraint
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    """Base class for all ORM models."""
    pass


class Movie(Base):
    """
    Movie table storing the catalogue entries served by the API.

    Attributes:
        id: Primary key, auto-incremented by the database
        name: Movie title (required, non-empty)
        genre: Genre label (required, non-empty)
        rating: Numeric rating (required)
        explicit: Whether the movie has explicit content (required)
    """
    __tablename__ = 'movies'

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    genre: Mapped[str] = mapped_column(String(255), nullable=False)
    rating: Mapped[float] = mapped_column(Float, nullable=False)
    explicit: Mapped[bool] = mapped_column(Boolean, nullable=False)

    __table_args__ = (
        CheckConstraint("length(name) > 0", name='check_name_not_empty'),
        CheckConstraint("length(genre) > 0", name='check_genre_not_empty'),
    )

    def to_dict(self) -> dict:
        """Return the column values as a plain dictionary."""
        return {
            'id': self.id,
            'name': self.name,
            'genre': self.genre,
            'rating': self.rating,
            'explicit': self.explicit,
        }

    def __repr__(self) -> str:
        return f"<Movie(id={self.id}, name='{self.name}', genre='{self.genre}', rating={self.rating})>"
