"""Database layer for hourtrack application."""

from hourtrack.database.base import Database
from hourtrack.database.factories import create_sqlite_database

__all__ = ["Database", "create_sqlite_database"]
