"""
Persistence layer.

``CreatureRepository`` defines the contract; ``SQLiteCreatureRepository``
is the production implementation and ``InMemoryCreatureRepository`` a
throwaway one.  ``build_repository`` picks an implementation from the
configured storage backend.
"""

from typing import Optional

from ..core.db import Database
from .base import CreatureRepository, WriteResult, WriteStatus
from .memory_repository import InMemoryCreatureRepository
from .sqlite_repository import SQLiteCreatureRepository


def build_repository(backend: str, database: Optional[Database] = None) -> CreatureRepository:
    """Return the repository implementation for ``backend``."""
    if backend == "memory":
        return InMemoryCreatureRepository()
    if backend == "sqlite":
        if database is None:
            raise ValueError("The sqlite backend requires a Database handle")
        return SQLiteCreatureRepository(database)
    raise ValueError(f"Unknown storage backend: {backend}")


__all__ = [
    "CreatureRepository",
    "InMemoryCreatureRepository",
    "SQLiteCreatureRepository",
    "WriteResult",
    "WriteStatus",
    "build_repository",
]
