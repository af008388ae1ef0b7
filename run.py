"""Entry point for the person CRUD backend.

Starts the FastAPI application with uvicorn on the host and port from
``person_api.app.core.config.settings`` (``HOST`` and ``PORT``
environment variables, defaulting to ``0.0.0.0:3001``).  The console
frontend in ``person_console.py`` reads the same ``PORT`` to find the
backend.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from person_api.app.core.config import settings
from person_api.app.main import app


async def run_api() -> None:
    """Serve the API until interrupted."""
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    logging.getLogger(__name__).info("Server starting on port %s", settings.port)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(run_api())
    except (KeyboardInterrupt, SystemExit):
        pass
