"""
Request logging middleware.

Installed once on the application, so it wraps every route the same
way.  A record is written after the handler finishes, whatever the
outcome; requests that end in an unhandled exception are logged with
status 500 before the exception continues to Starlette's error
handling.
"""

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

logger = logging.getLogger("places_api.requests")


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        started = time.perf_counter()
        status_code = 500
        try:
            response = await call_next(request)
            status_code = response.status_code
            return response
        finally:
            elapsed_ms = (time.perf_counter() - started) * 1000
            logger.info(
                "%s %s completed with %s in %.1f ms",
                request.method,
                request.url.path,
                status_code,
                elapsed_ms,
            )
