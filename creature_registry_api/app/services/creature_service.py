"""
Service layer for creature records.

``CreatureService`` enforces the rules the repository does not:

* a creature's name is unique across all stored creatures;
* operations on an identifier that has no stored creature fail with
  ``CreatureNotFoundError``.

Field-level constraints (level range, minimum scores, non-blank text)
are validated by the request schemas before the service is called.
The service keeps no copies of records; every call goes back to the
repository.

The uniqueness check is a read followed by a write and is not
serialized here.  When two requests race for the same name, the
store's own constraint rejects the second write and the rejection is
reported as a conflict.
"""

from __future__ import annotations

import logging
from typing import List

from ..core.exceptions import (
    CreatureConflictError,
    CreatureNotFoundError,
    CreatureWriteRejectedError,
)
from ..repositories.base import CreatureRepository, WriteResult, WriteStatus
from ..schemas.creature import CreatureCreate, CreatureRead, CreatureUpdate


logger = logging.getLogger(__name__)


class CreatureService:
    """Business operations on creature records."""

    def __init__(self, repository: CreatureRepository) -> None:
        self.repository = repository

    async def create(self, data: CreatureCreate) -> CreatureRead:
        """Store a new creature.

        Raises ``CreatureConflictError`` if the name is already taken.
        """
        existing = await self.repository.find_by_name(data.name)
        if existing is not None:
            logger.warning("Rejected creature '%s': name already used by %s", data.name, existing.id)
            raise CreatureConflictError(data.name)
        result = await self.repository.create(data)
        if result.status is WriteStatus.REJECTED:
            logger.warning("Store rejected creature '%s': %s", data.name, result.reason)
            raise CreatureConflictError(data.name)
        logger.info("Created creature %s ('%s')", result.record.id, result.record.name)
        return result.record

    async def find_all(self) -> List[CreatureRead]:
        return await self.repository.find_all()

    async def find_one(self, creature_id: str) -> CreatureRead:
        creature = await self.repository.find_by_id(creature_id)
        if creature is None:
            raise CreatureNotFoundError(creature_id)
        return creature

    async def update(self, creature_id: str, data: CreatureUpdate) -> CreatureRead:
        """Apply a partial update.

        Renaming a creature to the name it already has is allowed.  No
        existence check is made before the write; a missing record is
        detected from the repository's result.
        """
        changes = data.changes()
        name = changes.get("name")
        if name is not None:
            holder = await self.repository.find_by_name(name)
            if holder is not None and holder.id != creature_id:
                logger.warning(
                    "Rejected rename of %s to '%s': name used by %s", creature_id, name, holder.id
                )
                raise CreatureConflictError(name)
        result = await self.repository.update(creature_id, changes)
        record = self._unwrap(creature_id, result, name)
        logger.info("Updated creature %s (%s)", creature_id, ", ".join(sorted(changes)) or "no fields")
        return record

    async def remove(self, creature_id: str) -> CreatureRead:
        """Delete a creature and return it as it was before deletion."""
        result = await self.repository.remove(creature_id)
        record = self._unwrap(creature_id, result)
        logger.info("Deleted creature %s ('%s')", creature_id, record.name)
        return record

    async def count(self) -> int:
        return await self.repository.count()

    @staticmethod
    def _unwrap(creature_id: str, result: WriteResult, name: str | None = None) -> CreatureRead:
        if result.status is WriteStatus.ABSENT:
            raise CreatureNotFoundError(creature_id)
        if result.status is WriteStatus.REJECTED:
            logger.warning("Store rejected write to %s: %s", creature_id, result.reason)
            if name is not None:
                raise CreatureConflictError(name)
            raise CreatureWriteRejectedError(creature_id, result.reason)
        return result.record
