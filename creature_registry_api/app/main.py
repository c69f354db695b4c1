"""
Main entrypoint for the Creature Registry API.

This module assembles the FastAPI application, sets up logging and
includes versioned routers.  ``create_app`` builds and configures the
app; the module-level ``app`` instance is what ASGI servers load::

    uvicorn creature_registry_api.app.main:app --reload

The storage handle is scoped to the application's lifetime: it is
opened in the startup hook, exposed to request handlers through
``app.state.repository`` and closed in the shutdown hook.
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from .api.v1.router import router as v1_router
from .core.config import Settings, settings
from .core.db import Database, resolve_database_path
from .core.exceptions import PersistenceError
from .core.logging_config import setup_logging
from .repositories import build_repository


logger = logging.getLogger(__name__)


def create_app(app_settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    app_settings : Optional[Settings]
        Settings to configure the app with.  Defaults to the settings
        read from the environment at import time.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    app_settings = app_settings or settings
    # Initialise logging before anything else so that startup hooks can log.
    setup_logging(app_settings.log_level, app_settings.log_file)

    app = FastAPI(
        title=app_settings.project_name,
        version=app_settings.api_version,
        debug=app_settings.debug,
    )
    app.state.settings = app_settings
    app.state.database = None
    app.state.repository = None

    app.include_router(v1_router, prefix="/api/v1")

    @app.on_event("startup")
    async def startup_event() -> None:
        database = None
        if app_settings.storage_backend == "sqlite":
            database = Database(resolve_database_path(app_settings.database_url))
            database.connect()
        app.state.database = database
        app.state.repository = build_repository(app_settings.storage_backend, database)
        logger.info("Storage backend '%s' ready", app_settings.storage_backend)

    @app.on_event("shutdown")
    async def shutdown_event() -> None:
        if app.state.database is not None:
            app.state.database.close()
        app.state.database = None
        app.state.repository = None

    @app.exception_handler(PersistenceError)
    async def persistence_error_handler(request: Request, exc: PersistenceError) -> JSONResponse:
        logger.error("Storage failure on %s %s: %s", request.method, request.url.path, exc, exc_info=exc)
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"detail": "Storage unavailable"},
        )

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it via ``creature_registry_api.app.main:app``.
app = create_app()
