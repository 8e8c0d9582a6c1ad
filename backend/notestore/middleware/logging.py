"""
Note Store: Request Logging Middleware
======================================

What:  One access-log line per HTTP request on the "notestore.access" logger.
How:   Times the downstream call and logs method, path, status, duration,
       request ID and client address. Requests routed to /notes/{name}
       also carry the decoded note name, so "note=..." can be grepped
       regardless of how the client percent-encoded the path.
       Level follows the status class: 5xx → ERROR, 4xx → WARNING,
       everything else → INFO.

Request bodies are never logged (they are note contents).
"""

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from notestore.middleware.request_id import request_id_var

logger = logging.getLogger("notestore.access")

# Polled by monitoring every few seconds
QUIET_PATHS = {"/health"}


def level_for_status(status: int) -> int:
    if status >= 500:
        return logging.ERROR
    if status >= 400:
        return logging.WARNING
    return logging.INFO


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Access log for the note API."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        if request.url.path in QUIET_PATHS:
            return await call_next(request)

        started = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - started) * 1000

        # The router fills path_params into the shared scope on a match
        note = request.path_params.get("name")
        fields = {
            "request_id": request_id_var.get(""),
            "method": request.method,
            "path": request.url.path,
            "note": note,
            "status": response.status_code,
            "duration_ms": round(elapsed_ms, 2),
            "client_ip": request.client.host if request.client else "unknown",
        }

        message = "%(method)s %(path)s %(status)d %(duration_ms).1fms [%(request_id)s] from %(client_ip)s"
        if note is not None:
            message += " note=%(note)r"
        logger.log(level_for_status(response.status_code), message, fields, extra=fields)

        return response
