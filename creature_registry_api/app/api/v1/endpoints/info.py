"""
Information endpoint for API v1.

Returns the service name, version and storage backend together with
the number of stored creatures.  Because it performs a real query it
doubles as a health check: a broken store surfaces here as a 503.
"""

from typing import Any, Dict

from fastapi import APIRouter, Depends, Request

from creature_registry_api.app.api.deps import get_creature_service
from creature_registry_api.app.services.creature_service import CreatureService

router = APIRouter()


@router.get("/", response_model=Dict[str, Any])
async def get_info(
    request: Request,
    service: CreatureService = Depends(get_creature_service),
) -> Dict[str, Any]:
    app_settings = request.app.state.settings
    return {
        "name": app_settings.project_name,
        "version": app_settings.api_version,
        "storage_backend": app_settings.storage_backend,
        "creatures": await service.count(),
    }
