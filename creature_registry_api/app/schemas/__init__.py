"""
Pydantic schema definitions for API payloads.

Request models (``CreatureCreate``, ``CreatureUpdate``) carry the
field-level validation performed at the transport boundary; the
response model ``CreatureRead`` is also the record type returned by
repositories and services.
"""

from .creature import CreatureCreate, CreatureRead, CreatureUpdate

__all__ = ["CreatureCreate", "CreatureRead", "CreatureUpdate"]
