"""
Top‑level router for version 1 of the API.

Aggregates the resource routers under a single router that ``main``
mounts at ``/api/v1``.
"""

from fastapi import APIRouter

from .endpoints import creatures, info

router = APIRouter()

router.include_router(creatures.router, prefix="/creatures", tags=["creatures"])
router.include_router(info.router, prefix="/info", tags=["info"])
