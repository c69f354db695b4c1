"""
Repository contract for creature persistence.

``CreatureRepository`` is the port the service layer depends on.  It
exposes plain CRUD primitives and owns no business rules: it does not
check name uniqueness and it does not decide whether a missing record
is an error.

Lookups report absence as ``None``.  Writes report their outcome as a
``WriteResult`` so that "no such row" and "the store refused the write"
are distinguishable data rather than exceptions.  Infrastructure
failures are not results; implementations raise ``PersistenceError``.
"""

from __future__ import annotations

import enum
from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import List, Optional

from ..schemas.creature import CreatureCreate, CreatureRead


UPDATABLE_FIELDS = ("name", "category", "level", "hp", "attack", "defense")


class WriteStatus(str, enum.Enum):
    OK = "ok"
    ABSENT = "absent"
    REJECTED = "rejected"


@dataclass(frozen=True)
class WriteResult:
    """Outcome of a create, update or remove call."""

    status: WriteStatus
    record: Optional[CreatureRead] = None
    reason: Optional[str] = None

    @classmethod
    def ok(cls, record: CreatureRead) -> "WriteResult":
        return cls(WriteStatus.OK, record=record)

    @classmethod
    def absent(cls) -> "WriteResult":
        return cls(WriteStatus.ABSENT)

    @classmethod
    def rejected(cls, reason: str) -> "WriteResult":
        return cls(WriteStatus.REJECTED, reason=reason)


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def next_timestamp(previous: datetime) -> datetime:
    """Return the current time, nudged past ``previous`` if the clock has not moved."""
    now = utcnow()
    if now <= previous:
        return previous + timedelta(microseconds=1)
    return now


class CreatureRepository(ABC):
    """Port for creature persistence."""

    @abstractmethod
    async def find_all(self) -> List[CreatureRead]:
        """Return every creature, newest first."""

    @abstractmethod
    async def find_by_id(self, creature_id: str) -> Optional[CreatureRead]:
        """Return the creature with this identifier, or ``None``."""

    @abstractmethod
    async def find_by_name(self, name: str) -> Optional[CreatureRead]:
        """Return the creature with exactly this name, or ``None``."""

    @abstractmethod
    async def create(self, data: CreatureCreate) -> WriteResult:
        """Persist a new creature with a fresh identifier and timestamps."""

    @abstractmethod
    async def update(self, creature_id: str, changes: dict) -> WriteResult:
        """Apply ``changes`` to an existing creature and refresh ``updated_at``."""

    @abstractmethod
    async def remove(self, creature_id: str) -> WriteResult:
        """Delete a creature, returning it as it was before deletion."""

    async def count(self) -> int:
        return len(await self.find_all())
