"""
SQLite-backed creature repository.

All queries use parameterized statements.  Timestamps are stored as
ISO‑8601 text in UTC with microsecond precision, which keeps
lexicographic and chronological order identical for ``ORDER BY``.

A ``UNIQUE`` constraint on ``creatures.name`` backs up the service's
read-before-write uniqueness check: if two writers race for the same
name, the loser's ``IntegrityError`` is reported as a rejected write.
"""

from __future__ import annotations

import logging
import sqlite3
import uuid
from datetime import datetime
from typing import List, Optional

from ..core.db import Database
from ..core.exceptions import PersistenceError
from ..schemas.creature import CreatureCreate, CreatureRead
from .base import UPDATABLE_FIELDS, CreatureRepository, WriteResult, next_timestamp, utcnow


logger = logging.getLogger(__name__)


def _format_timestamp(value: datetime) -> str:
    return value.isoformat(timespec="microseconds")


class SQLiteCreatureRepository(CreatureRepository):
    """Creature repository storing rows in the ``creatures`` table."""

    def __init__(self, database: Database) -> None:
        self.database = database

    async def find_all(self) -> List[CreatureRead]:
        try:
            with self.database.cursor() as cursor:
                rows = cursor.execute(
                    "SELECT * FROM creatures ORDER BY created_at DESC, rowid DESC"
                ).fetchall()
        except sqlite3.Error as exc:
            raise PersistenceError(f"Failed to list creatures: {exc}") from exc
        return [self._row_to_creature(row) for row in rows]

    async def find_by_id(self, creature_id: str) -> Optional[CreatureRead]:
        return self._fetch_one("SELECT * FROM creatures WHERE id = ?", creature_id)

    async def find_by_name(self, name: str) -> Optional[CreatureRead]:
        return self._fetch_one("SELECT * FROM creatures WHERE name = ?", name)

    async def create(self, data: CreatureCreate) -> WriteResult:
        creature_id = str(uuid.uuid4())
        now = _format_timestamp(utcnow())
        try:
            with self.database.cursor() as cursor:
                cursor.execute(
                    """
                    INSERT INTO creatures (id, name, category, level, hp, attack, defense, created_at, updated_at)
                    VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?)
                    """,
                    (
                        creature_id,
                        data.name,
                        data.category,
                        data.level,
                        data.hp,
                        data.attack,
                        data.defense,
                        now,
                        now,
                    ),
                )
                row = cursor.execute(
                    "SELECT * FROM creatures WHERE id = ?", (creature_id,)
                ).fetchone()
        except sqlite3.IntegrityError as exc:
            logger.warning("Insert of creature '%s' rejected: %s", data.name, exc)
            return WriteResult.rejected(str(exc))
        except sqlite3.Error as exc:
            raise PersistenceError(f"Failed to create creature: {exc}") from exc
        return WriteResult.ok(self._row_to_creature(row))

    async def update(self, creature_id: str, changes: dict) -> WriteResult:
        fields = [field for field in UPDATABLE_FIELDS if field in changes]
        try:
            with self.database.cursor() as cursor:
                row = cursor.execute(
                    "SELECT updated_at FROM creatures WHERE id = ?", (creature_id,)
                ).fetchone()
                if row is None:
                    return WriteResult.absent()
                updated_at = next_timestamp(datetime.fromisoformat(row["updated_at"]))
                assignments = ", ".join(f"{field} = ?" for field in fields + ["updated_at"])
                params = [changes[field] for field in fields]
                params += [_format_timestamp(updated_at), creature_id]
                cursor.execute(
                    f"UPDATE creatures SET {assignments} WHERE id = ?",
                    params,
                )
                row = cursor.execute(
                    "SELECT * FROM creatures WHERE id = ?", (creature_id,)
                ).fetchone()
        except sqlite3.IntegrityError as exc:
            logger.warning("Update of creature %s rejected: %s", creature_id, exc)
            return WriteResult.rejected(str(exc))
        except sqlite3.Error as exc:
            raise PersistenceError(f"Failed to update creature {creature_id}: {exc}") from exc
        if row is None:
            # Deleted by another writer between the statements.
            return WriteResult.absent()
        return WriteResult.ok(self._row_to_creature(row))

    async def remove(self, creature_id: str) -> WriteResult:
        try:
            with self.database.cursor() as cursor:
                row = cursor.execute(
                    "SELECT * FROM creatures WHERE id = ?", (creature_id,)
                ).fetchone()
                if row is None:
                    return WriteResult.absent()
                cursor.execute("DELETE FROM creatures WHERE id = ?", (creature_id,))
                if cursor.rowcount == 0:
                    return WriteResult.absent()
        except sqlite3.Error as exc:
            raise PersistenceError(f"Failed to delete creature {creature_id}: {exc}") from exc
        return WriteResult.ok(self._row_to_creature(row))

    async def count(self) -> int:
        try:
            with self.database.cursor() as cursor:
                row = cursor.execute("SELECT COUNT(*) AS total FROM creatures").fetchone()
        except sqlite3.Error as exc:
            raise PersistenceError(f"Failed to count creatures: {exc}") from exc
        return row["total"]

    def _fetch_one(self, query: str, value: str) -> Optional[CreatureRead]:
        try:
            with self.database.cursor() as cursor:
                row = cursor.execute(query, (value,)).fetchone()
        except sqlite3.Error as exc:
            raise PersistenceError(f"Failed to read creature: {exc}") from exc
        if row is None:
            return None
        return self._row_to_creature(row)

    @staticmethod
    def _row_to_creature(row: sqlite3.Row) -> CreatureRead:
        """Convert a database row to a ``CreatureRead`` instance."""
        return CreatureRead(
            id=row["id"],
            name=row["name"],
            category=row["category"],
            level=row["level"],
            hp=row["hp"],
            attack=row["attack"],
            defense=row["defense"],
            created_at=datetime.fromisoformat(row["created_at"]),
            updated_at=datetime.fromisoformat(row["updated_at"]),
        )
