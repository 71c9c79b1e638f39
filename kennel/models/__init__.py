"""Domain models."""

from kennel.models.dog import Dog, PersistenceState

__all__ = ["Dog", "PersistenceState"]
