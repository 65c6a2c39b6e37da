"""
Bloglist Backend — Request ID Middleware
==========================================

What:  Assigns a correlation ID to each request and echoes it back.
How:   Reuses the client's X-Request-ID header when present, otherwise
       generates a short UUID. The ID is stored in a ContextVar and in
       request.state. RequestIDLogFilter copies it onto every log record,
       so service and store log lines carry the ID of the request that
       produced them.

Log line example:
    2026-10-19T12:00:00 [INFO] [3f2a9c1d] bloglist.services.blog_service: Blog ... created
"""

import logging
import uuid
from contextvars import ContextVar

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

# Coroutine-local: concurrent requests on one thread each see their own ID
request_id_var: ContextVar[str] = ContextVar("request_id", default="")

# Placeholder for records emitted outside a request (startup, migrations)
NO_REQUEST_ID = "-"


class RequestIDLogFilter(logging.Filter):
    """Sets `record.request_id` from request_id_var; never drops a record."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.request_id = request_id_var.get("") or NO_REQUEST_ID
        return True


class RequestIDMiddleware(BaseHTTPMiddleware):
    """
    Binds the request ID for the duration of one request.

    The ContextVar is reset after the response so a reused task never
    carries a stale ID into the next request's log lines.
    """

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        rid = request.headers.get("X-Request-ID") or uuid.uuid4().hex[:8]

        token = request_id_var.set(rid)
        request.state.request_id = rid
        try:
            response = await call_next(request)
        finally:
            request_id_var.reset(token)

        response.headers["X-Request-ID"] = rid
        return response
