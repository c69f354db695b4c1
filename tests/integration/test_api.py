"""End-to-end tests of the HTTP API against a temporary SQLite database."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from creature_registry_api.app.core.config import Settings
from creature_registry_api.app.main import create_app


BASE = "/api/v1/creatures/"


def test_crud_scenario(client: TestClient, pikachu: dict) -> None:
    created = client.post(BASE, json=pikachu)
    assert created.status_code == 201
    body = created.json()
    creature_id = body["id"]
    assert creature_id
    assert body["created_at"] == body["updated_at"]

    duplicate = client.post(BASE, json=pikachu)
    assert duplicate.status_code == 409
    assert "Pikachu" in duplicate.json()["detail"]

    fetched = client.get(f"{BASE}{creature_id}")
    assert fetched.status_code == 200
    assert fetched.json() == body

    updated = client.patch(f"{BASE}{creature_id}", json={"level": 30})
    assert updated.status_code == 200
    updated_body = updated.json()
    assert updated_body["level"] == 30
    for field in ("id", "name", "category", "hp", "attack", "defense", "created_at"):
        assert updated_body[field] == body[field]
    assert updated_body["updated_at"] != body["updated_at"]

    deleted = client.delete(f"{BASE}{creature_id}")
    assert deleted.status_code == 204
    assert deleted.content == b""

    assert client.get(f"{BASE}{creature_id}").status_code == 404


def test_list_returns_newest_first(client: TestClient, pikachu: dict) -> None:
    assert client.get(BASE).json() == []
    for name in ("Bulbasaur", "Charmander", "Squirtle"):
        assert client.post(BASE, json={**pikachu, "name": name}).status_code == 201

    response = client.get(BASE)
    assert response.status_code == 200
    assert [item["name"] for item in response.json()] == ["Squirtle", "Charmander", "Bulbasaur"]


@pytest.mark.parametrize(
    "override",
    [
        {"level": 0},
        {"level": 101},
        {"hp": 0},
        {"name": ""},
        {"category": "  "},
        {"speed": 90},
        {"level": True},
        {"hp": "40"},
        {"attack": 55.0},
    ],
)
def test_invalid_payloads_are_rejected(client: TestClient, pikachu: dict, override: dict) -> None:
    response = client.post(BASE, json={**pikachu, **override})
    assert response.status_code == 422
    assert client.get(BASE).json() == []


def test_unknown_identifier_is_404(client: TestClient) -> None:
    assert client.get(f"{BASE}missing").status_code == 404
    assert client.patch(f"{BASE}missing", json={"level": 2}).status_code == 404
    response = client.delete(f"{BASE}missing")
    assert response.status_code == 404
    assert response.json()["detail"] == "Creature missing not found"


def test_second_delete_is_404(client: TestClient, pikachu: dict) -> None:
    creature_id = client.post(BASE, json=pikachu).json()["id"]
    assert client.delete(f"{BASE}{creature_id}").status_code == 204
    assert client.delete(f"{BASE}{creature_id}").status_code == 404


def test_rename_rules(client: TestClient, pikachu: dict) -> None:
    client.post(BASE, json={**pikachu, "name": "Raichu"})
    creature_id = client.post(BASE, json=pikachu).json()["id"]

    same_name = client.put(f"{BASE}{creature_id}", json={"name": "Pikachu"})
    assert same_name.status_code == 200

    taken = client.patch(f"{BASE}{creature_id}", json={"name": "Raichu"})
    assert taken.status_code == 409

    renamed = client.put(f"{BASE}{creature_id}", json={"name": "Pichu", "level": 5})
    assert renamed.status_code == 200
    assert renamed.json()["name"] == "Pichu"
    assert renamed.json()["level"] == 5


def test_update_rejects_null_and_unknown_fields(client: TestClient, pikachu: dict) -> None:
    creature_id = client.post(BASE, json=pikachu).json()["id"]
    assert client.patch(f"{BASE}{creature_id}", json={"name": None}).status_code == 422
    assert client.patch(f"{BASE}{creature_id}", json={"id": "other"}).status_code == 422
    assert client.get(f"{BASE}{creature_id}").json()["name"] == "Pikachu"


def test_data_persists_across_restarts(app_settings: Settings, pikachu: dict) -> None:
    with TestClient(create_app(app_settings)) as first:
        creature_id = first.post(BASE, json=pikachu).json()["id"]
    with TestClient(create_app(app_settings)) as second:
        assert second.get(f"{BASE}{creature_id}").json()["name"] == "Pikachu"


def test_info_reports_backend_and_count(client: TestClient, pikachu: dict) -> None:
    client.post(BASE, json=pikachu)
    info = client.get("/api/v1/info/").json()
    assert info["name"] == "Creature Registry Test"
    assert info["storage_backend"] == "sqlite"
    assert info["creatures"] == 1


def test_storage_failure_is_503(client: TestClient) -> None:
    client.app.state.database.close()
    response = client.get(BASE)
    assert response.status_code == 503
    assert response.json() == {"detail": "Storage unavailable"}


def test_memory_backend_serves_the_same_api(pikachu: dict) -> None:
    settings = Settings(storage_backend="memory", database_url=":memory:")
    with TestClient(create_app(settings)) as memory_client:
        created = memory_client.post(BASE, json=pikachu)
        assert created.status_code == 201
        assert memory_client.post(BASE, json=pikachu).status_code == 409
        assert memory_client.get("/api/v1/info/").json()["storage_backend"] == "memory"


@pytest.mark.parametrize("changes", [{"level": True}, {"level": "30"}, {"defense": 40.0}])
def test_update_requires_real_integers(client: TestClient, pikachu: dict, changes: dict) -> None:
    creature_id = client.post(BASE, json=pikachu).json()["id"]
    assert client.patch(f"{BASE}{creature_id}", json=changes).status_code == 422
    assert client.get(f"{BASE}{creature_id}").json()["level"] == 25
