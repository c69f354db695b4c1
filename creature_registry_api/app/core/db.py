"""
SQLite database handle and simple migration system.

A ``Database`` owns a single ``sqlite3.Connection`` for the lifetime of
the process: the application opens it on startup, hands it to the
repository that needs it and closes it on shutdown.  Nothing in this
module keeps a global connection; callers always go through an
explicit handle.

Schema changes are expressed as an ordered list of ``(version, sql)``
migrations.  Applied versions are recorded in the ``migrations`` table
and only newer ones are executed on ``connect``.
"""

import logging
import os
import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Optional

from .config import settings
from .exceptions import PersistenceError


logger = logging.getLogger(__name__)

MEMORY_DATABASE = ":memory:"

MIGRATIONS: list[tuple[int, str]] = [
    # Migration 1: initial schema
    (
        1,
        """
        CREATE TABLE IF NOT EXISTS creatures (
            id TEXT PRIMARY KEY,
            name TEXT NOT NULL UNIQUE,
            category TEXT NOT NULL,
            level INTEGER NOT NULL CHECK (level BETWEEN 1 AND 100),
            hp INTEGER NOT NULL CHECK (hp >= 1),
            attack INTEGER NOT NULL CHECK (attack >= 1),
            defense INTEGER NOT NULL CHECK (defense >= 1),
            created_at TEXT NOT NULL,
            updated_at TEXT NOT NULL
        );

        CREATE INDEX IF NOT EXISTS idx_creatures_created_at ON creatures(created_at);
        """,
    ),
]


def resolve_database_path(database_url: Optional[str] = None) -> str:
    """Compute the path to the SQLite database file.

    Absolute paths and ``:memory:`` are returned unchanged.  Relative
    paths are resolved against the project root.
    """
    db_url = database_url or settings.database_url
    if db_url == MEMORY_DATABASE or os.path.isabs(db_url):
        return db_url
    base_dir = Path(__file__).resolve().parent.parent.parent  # creature_registry_api/
    return str((base_dir / db_url).resolve())


class Database:
    """Process-scoped owner of the SQLite connection."""

    def __init__(self, path: str) -> None:
        self.path = path
        self._conn: Optional[sqlite3.Connection] = None

    @property
    def connection(self) -> sqlite3.Connection:
        if self._conn is None:
            raise PersistenceError("Database connection is not open")
        return self._conn

    @property
    def is_open(self) -> bool:
        return self._conn is not None

    def connect(self) -> None:
        """Open the connection and apply pending migrations."""
        if self._conn is not None:
            return
        try:
            # The connection is created on the startup thread but used by
            # request handlers, so the same-thread check is disabled.
            conn = sqlite3.connect(self.path, check_same_thread=False)
        except sqlite3.Error as exc:
            raise PersistenceError(f"Cannot open database {self.path}: {exc}") from exc
        # Return rows as dict‑like objects keyed by column name
        conn.row_factory = sqlite3.Row
        self._conn = conn
        try:
            self.migrate()
        except sqlite3.Error as exc:
            self.close()
            raise PersistenceError(f"Cannot migrate database {self.path}: {exc}") from exc
        logger.info("Opened database %s", self.path)

    def close(self) -> None:
        if self._conn is None:
            return
        self._conn.close()
        self._conn = None
        logger.info("Closed database %s", self.path)

    @contextmanager
    def cursor(self) -> Iterator[sqlite3.Cursor]:
        """Yield a cursor, committing on success and rolling back on error."""
        conn = self.connection
        cursor = conn.cursor()
        try:
            yield cursor
            conn.commit()
        except Exception:
            conn.rollback()
            raise
        finally:
            cursor.close()

    def migrate(self) -> int:
        """Apply migrations newer than the recorded schema version.

        Returns the schema version after migrating.
        """
        with self.cursor() as cursor:
            cursor.execute(
                "CREATE TABLE IF NOT EXISTS migrations (version INTEGER PRIMARY KEY)"
            )
            cursor.execute("SELECT MAX(version) AS version FROM migrations")
            row = cursor.fetchone()
            current_version = row["version"] if row and row["version"] is not None else 0

            for version, sql in MIGRATIONS:
                if version > current_version:
                    cursor.executescript(sql)
                    cursor.execute(
                        "INSERT INTO migrations (version) VALUES (?)", (version,)
                    )
                    logger.info("Applied migration %s", version)
                    current_version = version
        return current_version
