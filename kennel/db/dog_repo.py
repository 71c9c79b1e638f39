"""Repository for the ``dogs`` table — schema lifecycle, persistence and lookups."""

from __future__ import annotations

import logging
from typing import Any, Optional, Sequence

from kennel.db.database import Database
from kennel.db.schema import (
    CREATE_DOGS_SQL,
    DOG_COLUMNS,
    DOG_DATA_COLUMNS,
    DOGS_TABLE,
    DROP_DOGS_SQL,
    TABLE_EXISTS_SQL,
)
from kennel.errors import AlreadyPersistedError, NotPersistedError, UpdateTargetMissing
from kennel.models.dog import Dog, PersistenceState

logger = logging.getLogger(__name__)

_SELECT_ALL = f"SELECT {', '.join(DOG_COLUMNS)} FROM {DOGS_TABLE}"
_INSERT = (
    f"INSERT INTO {DOGS_TABLE} ({', '.join(DOG_DATA_COLUMNS)}) "
    f"VALUES ({', '.join('?' for _ in DOG_DATA_COLUMNS)})"
)
_UPDATE = (
    f"UPDATE {DOGS_TABLE} SET {', '.join(f'{c} = ?' for c in DOG_DATA_COLUMNS)} "
    "WHERE id = ?"
)


class DogRepository:
    """Maps ``Dog`` objects to rows of the ``dogs`` table.

    The repository holds no state besides the ``Database`` it was given;
    the caller owns that handle and closes it.
    """

    def __init__(self, db: Database):
        self._db = db

    # -- Schema ----------------------------------------------------------------

    def create_table(self) -> None:
        """Create the ``dogs`` table unless it already exists."""
        with self._db.transaction() as conn:
            conn.execute(CREATE_DOGS_SQL)
        logger.info("Ensured table %s exists", DOGS_TABLE)

    def drop_table(self) -> None:
        """Drop the ``dogs`` table if present."""
        with self._db.transaction() as conn:
            conn.execute(DROP_DOGS_SQL)
        logger.info("Dropped table %s", DOGS_TABLE)

    def table_exists(self) -> bool:
        return self._db.fetchone(TABLE_EXISTS_SQL, (DOGS_TABLE,)) is not None

    # -- Hydration -------------------------------------------------------------

    @staticmethod
    def hydrate(row: Sequence[Any]) -> Dog:
        return Dog.from_row(row)

    # -- Create ----------------------------------------------------------------

    def insert(self, dog: Dog) -> Dog:
        """Insert an unpersisted dog and assign the row id the store generated."""
        if dog.persisted:
            raise AlreadyPersistedError(dog.id)  # type: ignore[arg-type]
        with self._db.transaction() as conn:
            conn.execute(_INSERT, dog.values())
            new_id = conn.execute("SELECT last_insert_rowid()").fetchone()[0]
        # id is assigned only once the commit has succeeded
        dog.id = new_id
        logger.info("Inserted dog #%s (%s)", dog.id, dog.name)
        return dog

    def create(self, **fields: Any) -> Dog:
        """Build a dog from keyword fields and persist it."""
        self._check_fields(fields)
        if "id" in fields:
            raise ValueError("id is assigned by the store and cannot be passed to create()")
        return self.save(Dog(**fields))

    # -- Update ----------------------------------------------------------------

    def update(self, dog: Dog) -> Dog:
        """Overwrite every non-id column of the row matching ``dog.id``."""
        if not dog.persisted:
            raise NotPersistedError("Cannot update a dog that has not been inserted")
        with self._db.transaction() as conn:
            cur = conn.execute(_UPDATE, (*dog.values(), dog.id))
            if cur.rowcount == 0:
                raise UpdateTargetMissing(dog.id)
        logger.info("Updated dog #%s", dog.id)
        return dog

    def save(self, dog: Dog) -> Dog:
        if dog.state is PersistenceState.UNPERSISTED:
            return self.insert(dog)
        return self.update(dog)

    # -- Read ------------------------------------------------------------------

    def find(self, dog_id: int) -> Optional[Dog]:
        row = self._db.fetchone(f"{_SELECT_ALL} WHERE id = ?", (dog_id,))
        return self.hydrate(row) if row is not None else None

    def find_by_name(self, name: str) -> Optional[Dog]:
        """First dog with exactly this name, in insertion order."""
        return self.find_by(name=name)

    def find_by(self, **fields: Any) -> Optional[Dog]:
        """
        First dog (lowest id) whose columns equal every given field.
        A ``None`` value matches a NULL column. At least one field is required.
        """
        if not fields:
            raise ValueError("find_by() needs at least one field to match on")
        self._check_fields(fields)
        clauses: list[str] = []
        params: list[Any] = []
        for column, value in fields.items():
            if value is None:
                clauses.append(f"{column} IS NULL")
            else:
                clauses.append(f"{column} = ?")
                params.append(value)

        where = f" WHERE {' AND '.join(clauses)}"
        row = self._db.fetchone(f"{_SELECT_ALL}{where} ORDER BY id LIMIT 1", tuple(params))
        return self.hydrate(row) if row is not None else None

    def find_or_create_by(self, **fields: Any) -> Dog:
        """Return the first exact match for ``fields``, creating it if none exists."""
        found = self.find_by(**fields)
        if found is not None:
            return found
        return self.create(**fields)

    def all(self) -> list[Dog]:
        rows = self._db.fetchall(f"{_SELECT_ALL} ORDER BY id")
        return [self.hydrate(r) for r in rows]

    # -- Helpers ---------------------------------------------------------------

    @staticmethod
    def _check_fields(fields: dict[str, Any]) -> None:
        unknown = set(fields) - set(DOG_COLUMNS)
        if unknown:
            raise ValueError(f"Unknown dog field(s): {', '.join(sorted(unknown))}")
