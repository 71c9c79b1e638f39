"""Exception taxonomy for the kennel persistence layer.

A lookup that finds nothing is not an error: finders return ``None``.
"""

from __future__ import annotations

from typing import Optional


class KennelError(Exception):
    """Base class for every error raised by this package."""


class InvalidRowError(KennelError, ValueError):
    """A row handed to hydration does not have one value per column."""

    def __init__(self, expected: int, got: int | str):
        super().__init__(f"Expected a row of {expected} values, got {got}")
        self.expected = expected
        self.got = got


class UpdateTargetMissing(KennelError):
    """An UPDATE matched no row for the given id."""

    def __init__(self, dog_id: Optional[int]):
        super().__init__(f"No dog row with id={dog_id} to update")
        self.dog_id = dog_id


class NotPersistedError(KennelError):
    """Update requested for a dog that was never inserted."""


class AlreadyPersistedError(KennelError):
    """Insert requested for a dog that already has an id."""

    def __init__(self, dog_id: int):
        super().__init__(f"Dog already persisted with id={dog_id}; use update()")
        self.dog_id = dog_id


class StoreUnavailable(KennelError):
    """The backing SQLite store failed to serve a statement."""
