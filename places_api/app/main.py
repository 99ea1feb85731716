"""
Main entrypoint for the Places API.

This module assembles the FastAPI application: logging, the request
logging middleware, plain-text error handlers and the versioned
routers.  ``create_app`` builds and configures the app, which is then
instantiated at module import time as ``app`` so it can be served
with::

    uvicorn places_api.app.main:app

The store is wired in during the application's lifespan: a
``PlaceService`` is built once around a ``Database`` and stored on
``app.state``, where the routes pick it up through a dependency.  Tests
pass their own ``Database`` to ``create_app``; otherwise it is built
from ``DATABASE_URL``, and a missing value stops startup.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .api.v1.router import router as v1_router
from .core.config import Settings, settings as default_settings
from .core.db import Database
from .core.logging_config import setup_logging
from .core.request_logging import RequestLoggingMiddleware
from .schemas.place import PlaceValidationError
from .services.place_service import PlaceService

logger = logging.getLogger(__name__)


def validation_error_message(exc: RequestValidationError) -> str:
    """Render the first request validation error as a one-line message.

    Field-rule failures from ``validate_place`` are returned verbatim;
    anything else (malformed JSON, wrong types) is prefixed with the
    location of the offending value.
    """
    errors = exc.errors()
    if not errors:
        return "invalid request"
    first = errors[0]
    cause = (first.get("ctx") or {}).get("error")
    if isinstance(cause, PlaceValidationError):
        return str(cause)
    location = ".".join(str(part) for part in first.get("loc", ()))
    message = first.get("msg", "invalid request")
    return f"{location}: {message}" if location else message


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> PlainTextResponse:
    return PlainTextResponse(str(exc.detail), status_code=exc.status_code, headers=exc.headers)


async def request_validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> PlainTextResponse:
    return PlainTextResponse(validation_error_message(exc), status_code=status.HTTP_400_BAD_REQUEST)


def create_app(database: Optional[Database] = None, app_settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    database : Optional[Database]
        Store to serve.  When omitted it is built from
        ``app_settings.database_url`` at startup.
    app_settings : Optional[Settings]
        Settings to use instead of the module-level ``settings``.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    app_settings = app_settings or default_settings
    setup_logging(app_settings.log_level, app_settings.log_file)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        store = database
        if store is None:
            if not app_settings.database_url:
                raise RuntimeError("DATABASE_URL can't be found")
            store = Database(app_settings.database_url)
        # Startup failures (unreachable database, failing DDL) propagate
        # and abort the server.
        store.init_db()
        app.state.place_service = PlaceService(store)
        logger.info("%s %s started", app_settings.project_name, app_settings.api_version)
        yield

    app = FastAPI(
        title=app_settings.project_name,
        version=app_settings.api_version,
        lifespan=lifespan,
    )
    app.add_middleware(RequestLoggingMiddleware)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_exception_handler)

    # The same routes are served unversioned and under /v1.
    app.include_router(v1_router)
    app.include_router(v1_router, prefix="/v1")
    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
