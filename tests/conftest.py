"""
Pytest configuration for the Creature Registry API.

Provides fixtures for:
- a migrated SQLite database in a temporary directory
- both repository implementations
- a FastAPI test client wired to a throwaway database
"""

from __future__ import annotations

from pathlib import Path
from typing import Generator

import pytest
from fastapi.testclient import TestClient

from creature_registry_api.app.core.config import Settings
from creature_registry_api.app.core.db import Database
from creature_registry_api.app.main import create_app
from creature_registry_api.app.repositories import (
    CreatureRepository,
    InMemoryCreatureRepository,
    SQLiteCreatureRepository,
)
from creature_registry_api.app.schemas.creature import CreatureCreate


@pytest.fixture
def pikachu() -> dict:
    return {
        "name": "Pikachu",
        "category": "Electric",
        "level": 25,
        "hp": 35,
        "attack": 55,
        "defense": 40,
    }


@pytest.fixture
def make_creature(pikachu: dict):
    """Build a ``CreatureCreate`` from the Pikachu payload with overrides."""

    def _make(**overrides) -> CreatureCreate:
        return CreatureCreate(**{**pikachu, **overrides})

    return _make


@pytest.fixture
def database(tmp_path: Path) -> Generator[Database, None, None]:
    db = Database(str(tmp_path / "creatures.db"))
    db.connect()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture(params=["memory", "sqlite"])
def repository(request: pytest.FixtureRequest) -> CreatureRepository:
    """Each repository implementation, so contract tests run against both."""
    if request.param == "memory":
        return InMemoryCreatureRepository()
    return SQLiteCreatureRepository(request.getfixturevalue("database"))


@pytest.fixture
def app_settings(tmp_path: Path) -> Settings:
    return Settings(
        project_name="Creature Registry Test",
        log_level="DEBUG",
        database_url=str(tmp_path / "api.db"),
        storage_backend="sqlite",
    )


@pytest.fixture
def client(app_settings: Settings) -> Generator[TestClient, None, None]:
    # Entering the client runs the startup and shutdown hooks.
    with TestClient(create_app(app_settings)) as test_client:
        yield test_client
