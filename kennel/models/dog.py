"""Dog domain model — the single record type mapped onto the ``dogs`` table."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, Sequence

from kennel.db.schema import DOG_COLUMNS, DOG_DATA_COLUMNS
from kennel.errors import InvalidRowError


class PersistenceState(str, Enum):
    UNPERSISTED = "unpersisted"
    PERSISTED = "persisted"


@dataclass
class Dog:
    """A dog as stored in one row of the ``dogs`` table.

    ``id`` stays ``None`` until the repository inserts the dog; the store
    assigns it and nothing changes it afterwards.
    """

    name: Optional[str] = None
    breed: Optional[str] = None
    color: Optional[str] = None
    instagram: Optional[str] = None
    id: Optional[int] = None

    @property
    def state(self) -> PersistenceState:
        if self.id is None:
            return PersistenceState.UNPERSISTED
        return PersistenceState.PERSISTED

    @property
    def persisted(self) -> bool:
        return self.state is PersistenceState.PERSISTED

    def values(self) -> tuple[Any, ...]:
        """Non-id field values in column order."""
        return tuple(getattr(self, column) for column in DOG_DATA_COLUMNS)

    def to_dict(self) -> dict[str, Any]:
        return {column: getattr(self, column) for column in DOG_COLUMNS}

    @classmethod
    def from_row(cls, row: Sequence[Any]) -> "Dog":
        """Hydrate a dog from an ordered row of column values."""
        if isinstance(row, (str, bytes, Mapping)) or not hasattr(row, "__len__") or not hasattr(row, "__getitem__"):
            raise InvalidRowError(expected=len(DOG_COLUMNS), got=type(row).__name__)
        if len(row) != len(DOG_COLUMNS):
            raise InvalidRowError(expected=len(DOG_COLUMNS), got=len(row))
        return cls(**{column: row[i] for i, column in enumerate(DOG_COLUMNS)})

    def __str__(self) -> str:
        ident = f"#{self.id}" if self.persisted else "(new)"
        return f"{ident} {self.name} | {self.breed or '-'} | {self.color or '-'} | {self.instagram or '-'}"
