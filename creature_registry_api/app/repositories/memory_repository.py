"""
Dict-backed creature repository.

Useful for local experiments (``STORAGE_BACKEND=memory``) and for
exercising the service without a database.  It mirrors the SQLite
store's name constraint so both implementations report a duplicate
write the same way.  Data lives only as long as the process.
"""

from __future__ import annotations

import itertools
import uuid
from typing import Dict, List, Optional

from ..schemas.creature import CreatureCreate, CreatureRead
from .base import UPDATABLE_FIELDS, CreatureRepository, WriteResult, next_timestamp, utcnow


class InMemoryCreatureRepository(CreatureRepository):
    def __init__(self) -> None:
        self._records: Dict[str, CreatureRead] = {}
        self._sequence: Dict[str, int] = {}
        self._counter = itertools.count()

    async def find_all(self) -> List[CreatureRead]:
        records = sorted(
            self._records.values(),
            key=lambda record: (record.created_at, self._sequence[record.id]),
            reverse=True,
        )
        return [record.model_copy() for record in records]

    async def find_by_id(self, creature_id: str) -> Optional[CreatureRead]:
        record = self._records.get(creature_id)
        return record.model_copy() if record else None

    async def find_by_name(self, name: str) -> Optional[CreatureRead]:
        for record in self._records.values():
            if record.name == name:
                return record.model_copy()
        return None

    async def create(self, data: CreatureCreate) -> WriteResult:
        if self._name_taken(data.name):
            return WriteResult.rejected(f"name '{data.name}' is already stored")
        now = utcnow()
        record = CreatureRead(
            id=str(uuid.uuid4()),
            created_at=now,
            updated_at=now,
            **data.model_dump(),
        )
        self._records[record.id] = record
        self._sequence[record.id] = next(self._counter)
        return WriteResult.ok(record.model_copy())

    async def update(self, creature_id: str, changes: dict) -> WriteResult:
        current = self._records.get(creature_id)
        if current is None:
            return WriteResult.absent()
        applied = {field: changes[field] for field in UPDATABLE_FIELDS if field in changes}
        if "name" in applied and self._name_taken(applied["name"], exclude=creature_id):
            return WriteResult.rejected(f"name '{applied['name']}' is already stored")
        applied["updated_at"] = next_timestamp(current.updated_at)
        updated = current.model_copy(update=applied)
        self._records[creature_id] = updated
        return WriteResult.ok(updated.model_copy())

    async def remove(self, creature_id: str) -> WriteResult:
        record = self._records.pop(creature_id, None)
        if record is None:
            return WriteResult.absent()
        del self._sequence[creature_id]
        return WriteResult.ok(record)

    async def count(self) -> int:
        return len(self._records)

    def _name_taken(self, name: str, exclude: Optional[str] = None) -> bool:
        return any(
            record.name == name and record.id != exclude
            for record in self._records.values()
        )
