"""
Pydantic schemas for creature records.

A creature has a unique ``name``, a free-text ``category``, a ``level``
between 1 and 100 and three attribute scores (``hp``, ``attack``,
``defense``) that must each be at least 1.  The request models reject
unknown fields so that typos in a payload surface as validation errors
instead of being silently ignored.  They also validate in strict mode:
``true``, ``"40"`` or ``55.0`` are not accepted where an integer is
expected.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field, field_validator


MIN_LEVEL = 1
MAX_LEVEL = 100
MIN_SCORE = 1


def _require_text(value: str) -> str:
    if not value.strip():
        raise ValueError("must not be blank")
    return value


class CreatureBase(BaseModel):
    name: str = Field(..., min_length=1, examples=["Pikachu"])
    category: str = Field(..., min_length=1, examples=["Electric"])
    level: int = Field(..., ge=MIN_LEVEL, le=MAX_LEVEL, examples=[25])
    hp: int = Field(..., ge=MIN_SCORE, examples=[35])
    attack: int = Field(..., ge=MIN_SCORE, examples=[55])
    defense: int = Field(..., ge=MIN_SCORE, examples=[40])


class CreatureCreate(CreatureBase):
    """Schema for creating a creature."""

    model_config = {"extra": "forbid", "strict": True}

    @field_validator("name", "category")
    @classmethod
    def validate_text(cls, v: str) -> str:
        return _require_text(v)


class CreatureUpdate(BaseModel):
    """Schema for updating a creature.

    All fields are optional; only fields present in the payload are
    applied.  Sending ``null`` for a field is rejected because every
    stored attribute is mandatory.
    """

    name: Optional[str] = Field(None, min_length=1)
    category: Optional[str] = Field(None, min_length=1)
    level: Optional[int] = Field(None, ge=MIN_LEVEL, le=MAX_LEVEL)
    hp: Optional[int] = Field(None, ge=MIN_SCORE)
    attack: Optional[int] = Field(None, ge=MIN_SCORE)
    defense: Optional[int] = Field(None, ge=MIN_SCORE)

    model_config = {"extra": "forbid", "strict": True}

    @field_validator("name", "category", "level", "hp", "attack", "defense", mode="before")
    @classmethod
    def reject_null(cls, v):
        if v is None:
            raise ValueError("may not be null")
        return v

    @field_validator("name", "category")
    @classmethod
    def validate_text(cls, v: str) -> str:
        return _require_text(v)

    def changes(self) -> dict:
        """Return only the fields supplied by the client."""
        return self.model_dump(exclude_unset=True)


class CreatureRead(CreatureBase):
    """Schema for a stored creature, as returned by the API."""

    id: str
    created_at: datetime
    updated_at: datetime

    model_config = {
        "from_attributes": True,
    }
