#!/usr/bin/env python
"""
Database setup script for the movies service.

This script manages the schema and fixture data:
1. Rolls back the latest migration batch (with --reset or --rollback)
2. Applies all pending migrations
3. Loads the seed movies (with --seed)
4. Verifies the schema

Usage:
    # Fresh schema with seed data (recommended for development)
    python scripts/init_database.py --reset --seed

    # Apply pending migrations only
    python scripts/init_database.py

    # Revert the latest batch and stop
    python scripts/init_database.py --rollback
"""

import sys
import argparse
import logging
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from moviedb.api.config import get_database_url
from moviedb.database import DatabaseManager, migrate_latest, rollback, run_seeds, verify_schema
from moviedb.utils.logging_config import configure_script_logging

logger = logging.getLogger(__name__)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Migrate and seed the movies database")
    parser.add_argument('--database-url', default=None,
                        help="SQLAlchemy URL (default: DATABASE_URL or data/movies.db)")
    group = parser.add_mutually_exclusive_group()
    group.add_argument('--reset', action='store_true',
                       help="Roll back the latest batch before migrating")
    group.add_argument('--rollback', action='store_true',
                       help="Roll back the latest batch and exit")
    parser.add_argument('--seed', action='store_true',
                        help="Replace table contents with the seed movies")
    parser.add_argument('--debug', action='store_true', help="Enable debug logging")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    configure_script_logging(debug=args.debug)

    db_manager = DatabaseManager(database_url=args.database_url or get_database_url())
    logger.info("Using database %s", db_manager.engine.url.render_as_string(hide_password=True))

    try:
        if args.reset or args.rollback:
            reverted = rollback(db_manager)
            logger.info("Rolled back: %s", ", ".join(reverted) or "nothing")
            if args.rollback:
                return 0

        applied = migrate_latest(db_manager)
        logger.info("Migrated: %s", ", ".join(applied) or "already up to date")

        if args.seed:
            with db_manager.session_scope() as session:
                for movie in run_seeds(session):
                    logger.info("  %s", movie.to_dict())

        if not verify_schema(db_manager):
            logger.error("Database initialization failed")
            return 1
        logger.info("Database initialization successful")
        return 0
    finally:
        db_manager.close()


if __name__ == "__main__":
    sys.exit(main())
