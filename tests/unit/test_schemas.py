from __future__ import annotations

import pytest
from pydantic import ValidationError

from creature_registry_api.app.schemas.creature import CreatureCreate, CreatureUpdate


def test_create_accepts_valid_payload(pikachu: dict) -> None:
    creature = CreatureCreate(**pikachu)
    assert creature.name == "Pikachu"
    assert creature.level == 25


@pytest.mark.parametrize(
    "field,value",
    [
        ("level", 0),
        ("level", 101),
        ("hp", 0),
        ("attack", -3),
        ("defense", 0),
        ("name", ""),
        ("name", "   "),
        ("category", ""),
    ],
)
def test_create_rejects_out_of_range_or_blank(pikachu: dict, field: str, value) -> None:
    with pytest.raises(ValidationError):
        CreatureCreate(**{**pikachu, field: value})


def test_create_accepts_level_bounds_and_large_scores(pikachu: dict) -> None:
    assert CreatureCreate(**{**pikachu, "level": 1}).level == 1
    assert CreatureCreate(**{**pikachu, "level": 100}).level == 100
    assert CreatureCreate(**{**pikachu, "hp": 10_000}).hp == 10_000


def test_create_rejects_missing_and_unknown_fields(pikachu: dict) -> None:
    missing = dict(pikachu)
    del missing["defense"]
    with pytest.raises(ValidationError):
        CreatureCreate(**missing)
    with pytest.raises(ValidationError):
        CreatureCreate(**pikachu, speed=90)


def test_update_reports_only_supplied_fields() -> None:
    update = CreatureUpdate(level=30)
    assert update.changes() == {"level": 30}
    assert CreatureUpdate().changes() == {}


def test_update_rejects_null_unknown_and_invalid_values() -> None:
    with pytest.raises(ValidationError):
        CreatureUpdate(name=None)
    with pytest.raises(ValidationError):
        CreatureUpdate(id="abc")
    with pytest.raises(ValidationError):
        CreatureUpdate(level=150)
    with pytest.raises(ValidationError):
        CreatureUpdate(category=" ")


@pytest.mark.parametrize("field,value", [("level", True), ("hp", "40"), ("attack", 55.0)])
def test_scores_must_be_integers(pikachu: dict, field: str, value) -> None:
    with pytest.raises(ValidationError):
        CreatureCreate(**{**pikachu, field: value})
    with pytest.raises(ValidationError):
        CreatureUpdate(**{field: value})
