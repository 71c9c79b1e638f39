"""Core database connection with transaction support."""

from __future__ import annotations

import logging
import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Generator, Optional, Sequence

from kennel.config import MEMORY_DB, get_db_path
from kennel.errors import StoreUnavailable

logger = logging.getLogger(__name__)


@contextmanager
def _store_errors(action: str) -> Generator[None, None, None]:
    """Re-raise driver-level failures as ``StoreUnavailable``."""
    try:
        yield
    except (sqlite3.IntegrityError, sqlite3.ProgrammingError):
        raise
    except sqlite3.DatabaseError as exc:
        logger.error("Store failure during %s: %s", action, exc)
        raise StoreUnavailable(f"{action} failed: {exc}") from exc


class Database:
    """
    SQLite database wrapper with explicit transaction support.

    Every mutation goes through ``transaction()``, which commits on success
    and rolls back on failure. Rows come back as ``sqlite3.Row`` objects,
    which index positionally like tuples.
    """

    def __init__(self, path: Optional[Path | str] = None, timeout: float = 5.0):
        if path is None:
            path = get_db_path()
        self.path: Path | str = path if path == MEMORY_DB else Path(path)
        self.timeout = timeout
        self._conn: Optional[sqlite3.Connection] = None

    @property
    def in_memory(self) -> bool:
        return self.path == MEMORY_DB

    # -- connection lifecycle --------------------------------------------------

    def _ensure_dir(self) -> None:
        if self.in_memory:
            return
        try:
            Path(self.path).parent.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise StoreUnavailable(f"Cannot create directory for {self.path}: {exc}") from exc

    def connection(self) -> sqlite3.Connection:
        if self._conn is None:
            self._ensure_dir()
            with _store_errors("connect"):
                self._conn = sqlite3.connect(str(self.path), timeout=self.timeout)
            self._conn.row_factory = sqlite3.Row
            logger.debug("Opened SQLite connection to %s", self.path)
        return self._conn

    def close(self) -> None:
        if self._conn:
            self._conn.close()
            self._conn = None

    # -- transaction helpers ---------------------------------------------------

    @contextmanager
    def transaction(self) -> Generator[sqlite3.Connection, None, None]:
        """Commits on success, rolls back on exception."""
        conn = self.connection()
        try:
            with _store_errors("transaction"):
                yield conn
                conn.commit()
        except Exception:
            conn.rollback()
            raise

    # -- low-level query helpers -----------------------------------------------

    def execute(self, sql: str, params: Sequence[Any] = ()) -> sqlite3.Cursor:
        with _store_errors("execute"):
            return self.connection().execute(sql, tuple(params))

    def fetchone(self, sql: str, params: Sequence[Any] = ()) -> Optional[sqlite3.Row]:
        with _store_errors("fetchone"):
            return self.connection().execute(sql, tuple(params)).fetchone()

    def fetchall(self, sql: str, params: Sequence[Any] = ()) -> list[sqlite3.Row]:
        with _store_errors("fetchall"):
            return self.connection().execute(sql, tuple(params)).fetchall()


# -- module singleton ----------------------------------------------------------

_default_db: Optional[Database] = None


def get_db(path: Optional[Path | str] = None) -> Database:
    """Return (and lazily create) the module-level Database singleton."""
    global _default_db
    if _default_db is None:
        _default_db = Database(path)
    return _default_db


def reset_db() -> None:
    """Close and discard the singleton (useful in tests)."""
    global _default_db
    if _default_db is not None:
        _default_db.close()
        _default_db = None
