"""
Versioned schema migrations.

Migrations are applied in batches: migrate_latest() runs every pending
migration as one new batch, rollback() reverts the most recent batch.
Applied migrations are recorded in the schema_migrations table.
"""

import logging
from dataclasses import dataclass
from typing import Callable, List

from sqlalchemy import (
    Column, Integer, String, MetaData, Table, TIMESTAMP, inspect, select, func
)
from sqlalchemy.engine import Connection

from moviedb.database.connection import DatabaseManager
from moviedb.database.models import Movie

logger = logging.getLogger(__name__)

# Bookkeeping lives outside the ORM metadata so it survives schema rollbacks
_migration_metadata = MetaData()

schema_migrations = Table(
    'schema_migrations',
    _migration_metadata,
    Column('id', Integer, primary_key=True, autoincrement=True),
    Column('name', String(255), nullable=False, unique=True),
    Column('batch', Integer, nullable=False),
    Column('migrated_at', TIMESTAMP, nullable=False, server_default=func.current_timestamp()),
)


@dataclass(frozen=True)
class Migration:
    """A named schema change with its inverse."""

    name: str
    upgrade: Callable[[Connection], None]
    downgrade: Callable[[Connection], None]


def _create_movies(conn: Connection) -> None:
    Movie.__table__.create(bind=conn)


def _drop_movies(conn: Connection) -> None:
    Movie.__table__.drop(bind=conn)


# Ordered oldest first
MIGRATIONS: List[Migration] = [
    Migration('20190101000000_create_movies', _create_movies, _drop_movies),
]


def _applied(conn: Connection) -> List[tuple]:
    rows = conn.execute(
        select(schema_migrations.c.name, schema_migrations.c.batch)
        .order_by(schema_migrations.c.id)
    )
    return [(row.name, row.batch) for row in rows]


def applied_migrations(db_manager: DatabaseManager) -> List[str]:
    """
    List the names of applied migrations, oldest first.

    Args:
        db_manager: DatabaseManager instance

    Returns:
        List of migration names
    """
    with db_manager.engine.begin() as conn:
        schema_migrations.create(bind=conn, checkfirst=True)
        return [name for name, _ in _applied(conn)]


def migrate_latest(db_manager: DatabaseManager) -> List[str]:
    """
    Apply all pending migrations as a single batch.

    Args:
        db_manager: DatabaseManager instance

    Returns:
        Names of the migrations applied (empty if already up to date)
    """
    with db_manager.engine.begin() as conn:
        schema_migrations.create(bind=conn, checkfirst=True)
        applied = _applied(conn)
        done = {name for name, _ in applied}
        pending = [m for m in MIGRATIONS if m.name not in done]
        if not pending:
            logger.info("Database already up to date")
            return []

        batch = max((b for _, b in applied), default=0) + 1
        for migration in pending:
            logger.info("Applying migration %s (batch %d)", migration.name, batch)
            migration.upgrade(conn)
            conn.execute(schema_migrations.insert().values(name=migration.name, batch=batch))
        return [m.name for m in pending]


def rollback(db_manager: DatabaseManager) -> List[str]:
    """
    Revert the most recently applied batch of migrations.

    Args:
        db_manager: DatabaseManager instance

    Returns:
        Names of the migrations reverted, newest first (empty if none applied)
    """
    by_name = {m.name: m for m in MIGRATIONS}

    with db_manager.engine.begin() as conn:
        schema_migrations.create(bind=conn, checkfirst=True)
        applied = _applied(conn)
        if not applied:
            logger.info("Already at the base migration")
            return []

        last_batch = max(b for _, b in applied)
        reverted = [name for name, b in reversed(applied) if b == last_batch]
        for name in reverted:
            migration = by_name.get(name)
            if migration is None:
                raise RuntimeError(f"Applied migration {name} is missing from the registry")
            logger.info("Reverting migration %s (batch %d)", name, last_batch)
            migration.downgrade(conn)
            conn.execute(schema_migrations.delete().where(schema_migrations.c.name == name))
        return reverted


def verify_schema(db_manager: DatabaseManager) -> bool:
    """
    Verify that all model tables exist in the database.

    Args:
        db_manager: DatabaseManager instance

    Returns:
        True if all tables exist, False otherwise
    """
    existing_tables = set(inspect(db_manager.engine).get_table_names())
    missing_tables = {Movie.__tablename__} - existing_tables

    if missing_tables:
        logger.warning("Missing tables: %s", missing_tables)
        return False
    return True
