"""Database factory functions for creating database instances."""

import os
from pathlib import Path
from typing import Optional

from hourtrack.database.sqlalchemy_db import SQLAlchemyDatabase


def create_sqlite_database(database_path: Optional[str] = None) -> SQLAlchemyDatabase:
    """Create a SQLite database instance.

    Args:
        database_path: Path to SQLite database file. If None, checks HOURTRACK_DB_PATH
            environment variable, then defaults to ~/.hourtrack/hourtrack.db

    Returns:
        SQLAlchemyDatabase instance configured for SQLite
    """
    if database_path is None:
        database_path = os.environ.get("HOURTRACK_DB_PATH")

    if database_path is None:
        db_dir = Path.home() / ".hourtrack"
        db_dir.mkdir(exist_ok=True)
        database_path = str(db_dir / "hourtrack.db")

    database_url = f"sqlite:///{database_path}"
    db = SQLAlchemyDatabase(database_url)
    db.database_path = database_path
    return db
