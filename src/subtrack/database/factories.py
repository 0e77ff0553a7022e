"""Database factory functions for creating database instances."""

import os
from pathlib import Path
from typing import Optional

from subtrack.database.sqlalchemy_db import SQLAlchemyDatabase

DB_PATH_ENV = "SUBTRACK_DB_PATH"
DEFAULT_DB_DIR = ".subtrack"
DEFAULT_DB_NAME = "subtrack.db"


def default_database_path() -> Path:
    """Database file used when neither an option nor SUBTRACK_DB_PATH is given."""
    return Path.home() / DEFAULT_DB_DIR / DEFAULT_DB_NAME


def create_sqlite_database(database_path: Optional[str] = None) -> SQLAlchemyDatabase:
    """Create a SQLite database instance.

    Args:
        database_path: Path to SQLite database file. If None, checks SUBTRACK_DB_PATH
            environment variable, then defaults to ~/.subtrack/subtrack.db

    Returns:
        SQLAlchemyDatabase instance configured for SQLite
    """
    if database_path is None:
        database_path = os.environ.get(DB_PATH_ENV)

    if database_path is None:
        path = default_database_path()
        path.parent.mkdir(parents=True, exist_ok=True)
        database_path = str(path)

    return SQLAlchemyDatabase(f"sqlite:///{database_path}")
