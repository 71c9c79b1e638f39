"""Database layer — SQLite with transactions and the repository pattern."""

from kennel.db.database import Database, get_db, reset_db
from kennel.db.schema import DOG_COLUMNS, DOGS_TABLE

__all__ = ["Database", "get_db", "reset_db", "DOG_COLUMNS", "DOGS_TABLE"]
