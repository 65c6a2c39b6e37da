"""
Bloglist Backend — Request Logging Middleware
===============================================

What:  One access log line per request: method, path, status, duration.
Who:   Logs to the `bloglist.access` logger. The request ID is added by
       RequestIDLogFilter through the log format, not by this middleware.

What we log vs what we DON'T log:
    ✅ method, path, status, duration, client IP
    ❌ request bodies (they carry plaintext passwords on POST /api/users)
"""

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

logger = logging.getLogger("bloglist.access")

# Probed every few seconds by load balancers
QUIET_PATHS = frozenset({"/health"})


def level_for_status(status: int) -> int:
    """5xx → ERROR, 4xx → WARNING, anything else → INFO."""
    if status >= 500:
        return logging.ERROR
    if status >= 400:
        return logging.WARNING
    return logging.INFO


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Logs each request once its response is ready."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        if request.url.path in QUIET_PATHS:
            return await call_next(request)

        started = time.perf_counter()
        response = await call_next(request)
        duration_ms = (time.perf_counter() - started) * 1000

        client_ip = request.client.host if request.client else "unknown"
        logger.log(
            level_for_status(response.status_code),
            "%s %s %d %.1fms from %s",
            request.method,
            request.url.path,
            response.status_code,
            duration_ms,
            client_ip,
            extra={
                "status": response.status_code,
                "duration_ms": round(duration_ms, 2),
                "client_ip": client_ip,
            },
        )
        return response
