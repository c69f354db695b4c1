"""Entry point for the Creature Registry API.

Serves the FastAPI application with uvicorn.  Host, port and every
other setting are read from environment variables (see
``creature_registry_api/app/core/config.py``).

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from creature_registry_api.app.core.config import settings
from creature_registry_api.app.main import app


async def run_api() -> None:
    """Start the API server using uvicorn."""
    config = Config(
        app=app,
        host=settings.api_host,
        port=settings.api_port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    await server.serve()


async def main() -> None:
    try:
        await run_api()
    except Exception:
        logging.getLogger(__name__).exception("API server stopped unexpectedly")
        raise


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
