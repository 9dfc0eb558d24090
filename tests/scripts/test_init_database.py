"""
Tests for the database setup script.
"""

import importlib.util
from pathlib import Path

import pytest

from moviedb.database import crud
from moviedb.database.connection import DatabaseManager
from moviedb.database.migrations import applied_migrations, verify_schema

SCRIPT = Path(__file__).resolve().parents[2] / "scripts" / "init_database.py"


@pytest.fixture
def init_database(monkeypatch):
    """The script loaded as a module, with its logging setup disabled."""
    spec = importlib.util.spec_from_file_location("init_database", SCRIPT)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    monkeypatch.setattr(module, "configure_script_logging", lambda debug=False: None)
    return module


@pytest.fixture
def database_url(tmp_path):
    return f"sqlite:///{tmp_path / 'movies.db'}"


def movie_count(database_url):
    manager = DatabaseManager(database_url=database_url)
    try:
        with manager.session_scope() as session:
            return crud.get_movie_count(session)
    finally:
        manager.close()


def test_reset_and_seed(init_database, database_url):
    assert init_database.main(["--reset", "--seed", "--database-url", database_url]) == 0
    assert movie_count(database_url) == 3

    # Running again starts over rather than piling up rows
    assert init_database.main(["--reset", "--seed", "--database-url", database_url]) == 0
    assert movie_count(database_url) == 3


def test_migrate_without_seed(init_database, database_url):
    assert init_database.main(["--database-url", database_url]) == 0
    assert movie_count(database_url) == 0


def test_rollback(init_database, database_url):
    init_database.main(["--seed", "--database-url", database_url])
    assert init_database.main(["--rollback", "--database-url", database_url]) == 0

    manager = DatabaseManager(database_url=database_url)
    try:
        assert verify_schema(manager) is False
        assert applied_migrations(manager) == []
    finally:
        manager.close()


def test_reset_and_rollback_are_exclusive(init_database, database_url):
    with pytest.raises(SystemExit):
        init_database.main(["--reset", "--rollback", "--database-url", database_url])
