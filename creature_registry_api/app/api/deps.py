"""FastAPI dependencies shared by the v1 endpoints."""

from fastapi import Request

from creature_registry_api.app.repositories.base import CreatureRepository
from creature_registry_api.app.services.creature_service import CreatureService


def get_repository(request: Request) -> CreatureRepository:
    """Return the repository attached to the application on startup."""
    return request.app.state.repository


def get_creature_service(request: Request) -> CreatureService:
    return CreatureService(get_repository(request))
