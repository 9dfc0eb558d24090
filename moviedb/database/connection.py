"""
Database connection management using SQLAlchemy.

This module handles engine creation, session management, and provides
utilities for database operations.
"""

import os
from contextlib import contextmanager
from typing import Generator, Optional
from sqlalchemy import create_engine
from sqlalchemy.engine import make_url
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.pool import StaticPool


# Default database path
DEFAULT_DB_PATH = "data/movies.db"


def get_database_url(db_path: str = DEFAULT_DB_PATH) -> str:
    """
    Get SQLite database URL for a file path.

    Args:
        db_path: Path to SQLite database file

    Returns:
        SQLAlchemy database URL
    """
    # Ensure directory exists
    db_dir = os.path.dirname(db_path)
    if db_dir:
        os.makedirs(db_dir, exist_ok=True)

    # SQLite URL format: sqlite:///path/to/database.db
    return f"sqlite:///{os.path.abspath(db_path)}"


class DatabaseManager:
    """
    Database connection manager.

    Handles engine creation and session management. Schema changes go
    through moviedb.database.migrations.
    """

    def __init__(self, database_url: Optional[str] = None, echo: bool = False):
        """
        Initialize database manager.

        Args:
            database_url: SQLAlchemy URL (default: SQLite file at DEFAULT_DB_PATH)
            echo: If True, log all SQL statements (useful for debugging)
        """
        self.database_url = database_url or get_database_url()

        engine_kwargs = {"echo": echo}
        url = make_url(self.database_url)
        if url.get_backend_name() == "sqlite":
            # Requests are served from a thread pool
            engine_kwargs["connect_args"] = {"check_same_thread": False}
            if url.database in (None, "", ":memory:"):
                # An in-memory database only lives as long as its one connection
                engine_kwargs["poolclass"] = StaticPool
        self.engine = create_engine(self.database_url, **engine_kwargs)

        # Create session factory
        self.SessionLocal = sessionmaker(
            autocommit=False,
            autoflush=False,
            bind=self.engine
        )

    @contextmanager
    def session_scope(self) -> Generator[Session, None, None]:
        """
        Context manager for database sessions.

        Automatically commits on success and rolls back on failure.

        Usage:
            with db_manager.session_scope() as session:
                session.add(movie)

        Yields:
            SQLAlchemy Session object
        """
        session = self.SessionLocal()
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    def close(self):
        """Close the database engine and all connections."""
        self.engine.dispose()

