"""Kennel — a small SQLite-backed mapper for ``Dog`` records."""

__version__ = "0.1.0"
