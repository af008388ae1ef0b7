"""
Main entrypoint for the Person CRUD API.

This module assembles the FastAPI application: it sets up logging,
enables cross‑origin requests from the frontend, attaches the
in‑memory store, registers plain‑text error handlers and includes the
API router under ``/api``.  The ``create_app`` function builds the
app, which is then instantiated at module import time as ``app`` so it
can be served directly, e.g.::

    uvicorn person_api.app.main:app --reload --port 3001
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .api.router import router as api_router
from .core.config import Settings, settings as default_settings
from .core.db import PersonStore
from .core.logging_config import setup_logging

logger = logging.getLogger(__name__)


async def http_error_handler(request: Request, exc: StarletteHTTPException) -> PlainTextResponse:
    """Render HTTP errors as plain text, the format the frontend displays."""
    return PlainTextResponse(str(exc.detail), status_code=exc.status_code, headers=exc.headers)


async def validation_error_handler(request: Request, exc: RequestValidationError) -> PlainTextResponse:
    """Report unparsable request bodies as a 400 rather than FastAPI's 422."""
    logger.info("Rejected malformed request to %s: %s", request.url.path, exc.errors())
    return PlainTextResponse("Malformed request body!", status_code=status.HTTP_400_BAD_REQUEST)


def create_app(
    store: Optional[PersonStore] = None,
    config: Optional[Settings] = None,
) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    store : Optional[PersonStore]
        Store backing the person routes.  A fresh, empty store is
        created when omitted.
    config : Optional[Settings]
        Settings to use instead of the module level ``settings``.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    config = config or default_settings

    # Initialise logging before anything else so that the modules below
    # can safely log messages.
    setup_logging(config.log_level, config.log_file or None)

    app = FastAPI(title=config.project_name, version=config.api_version, debug=config.debug)

    # The frontend is served from a different origin than the API, so
    # cross‑origin requests must be allowed explicitly.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)

    app.state.store = store if store is not None else PersonStore()

    app.include_router(api_router, prefix="/api")

    logger.info("%s %s ready", config.project_name, config.api_version)
    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
