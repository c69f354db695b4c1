"""
Creature endpoints for API v1.

These routes expose a CRUD API for creature records.  Request bodies
are validated by the Pydantic schemas before the service is invoked;
domain errors raised by the service are translated into HTTP status
codes here:

* ``CreatureNotFoundError`` → 404
* ``CreatureConflictError`` → 409

``PUT`` is accepted as an alias of ``PATCH``; both apply partial
updates.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, Response, status

from creature_registry_api.app.api.deps import get_creature_service
from creature_registry_api.app.core.exceptions import CreatureConflictError, CreatureNotFoundError
from creature_registry_api.app.schemas.creature import CreatureCreate, CreatureRead, CreatureUpdate
from creature_registry_api.app.services.creature_service import CreatureService

router = APIRouter()


def _not_found(exc: CreatureNotFoundError) -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc))


def _conflict(exc: CreatureConflictError) -> HTTPException:
    return HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(exc))


@router.post("/", response_model=CreatureRead, status_code=status.HTTP_201_CREATED)
async def create_creature(
    creature_in: CreatureCreate,
    service: CreatureService = Depends(get_creature_service),
) -> CreatureRead:
    """Create a new creature.

    Returns HTTP 409 if another creature already has the same name.
    """
    try:
        return await service.create(creature_in)
    except CreatureConflictError as exc:
        raise _conflict(exc) from exc


@router.get("/", response_model=List[CreatureRead])
async def list_creatures(
    service: CreatureService = Depends(get_creature_service),
) -> List[CreatureRead]:
    """Return all creatures, most recently created first."""
    return await service.find_all()


@router.get("/{creature_id}", response_model=CreatureRead)
async def get_creature(
    creature_id: str,
    service: CreatureService = Depends(get_creature_service),
) -> CreatureRead:
    """Retrieve a single creature by ID.

    Returns HTTP 404 if the creature is not found.
    """
    try:
        return await service.find_one(creature_id)
    except CreatureNotFoundError as exc:
        raise _not_found(exc) from exc


@router.patch("/{creature_id}", response_model=CreatureRead)
@router.put("/{creature_id}", response_model=CreatureRead)
async def update_creature(
    creature_id: str,
    creature_in: CreatureUpdate,
    service: CreatureService = Depends(get_creature_service),
) -> CreatureRead:
    """Update the supplied fields of an existing creature."""
    try:
        return await service.update(creature_id, creature_in)
    except CreatureNotFoundError as exc:
        raise _not_found(exc) from exc
    except CreatureConflictError as exc:
        raise _conflict(exc) from exc


@router.delete("/{creature_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_creature(
    creature_id: str,
    service: CreatureService = Depends(get_creature_service),
) -> Response:
    """Delete a creature."""
    try:
        await service.remove(creature_id)
    except CreatureNotFoundError as exc:
        raise _not_found(exc) from exc
    return Response(status_code=status.HTTP_204_NO_CONTENT)
