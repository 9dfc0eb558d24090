"""
FastAPI dependency injection for the database session.
"""

import logging
from typing import Generator
from sqlalchemy.orm import Session

from moviedb.database.connection import DatabaseManager
from moviedb.api.config import get_database_url, get_sql_echo

logger = logging.getLogger(__name__)


# Singleton database manager, created on first use
_db_manager: DatabaseManager | None = None


def get_manager() -> DatabaseManager:
    """Get or create the DatabaseManager for the configured URL."""
    global _db_manager
    if _db_manager is None:
        _db_manager = DatabaseManager(database_url=get_database_url(), echo=get_sql_echo())
        logger.info("Using database %s", _db_manager.engine.url.render_as_string(hide_password=True))
    return _db_manager


def get_db() -> Generator[Session, None, None]:
    """Yield database session for FastAPI Depends()."""
    with get_manager().session_scope() as session:
        yield session
