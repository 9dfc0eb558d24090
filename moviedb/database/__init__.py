"""
Database module for the movies service.

This module provides the ORM model, connection management, migrations,
seed data, and CRUD operations using SQLAlchemy.
"""

from moviedb.database.models import Base, Movie
from moviedb.database.connection import DatabaseManager
from moviedb.database.migrations import (
    migrate_latest,
    rollback,
    applied_migrations,
    verify_schema,
)
from moviedb.database.seeds import run_seeds
from moviedb.database import crud

__all__ = [
    # Models
    'Base',
    'Movie',
    # Connection
    'DatabaseManager',
    # Migrations and seeds
    'migrate_latest',
    'rollback',
    'applied_migrations',
    'verify_schema',
    'run_seeds',
    # CRUD module
    'crud',
]
