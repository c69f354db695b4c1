"""
Service layer.

Services own the business invariants of the registry (unique names,
existence checks) and translate repository outcomes into domain
errors.  They never talk to the database directly: all persistence goes
through a ``CreatureRepository`` passed in at construction time, so the
storage technology can be swapped without touching this layer.
"""

from .creature_service import CreatureService

__all__ = ["CreatureService"]
