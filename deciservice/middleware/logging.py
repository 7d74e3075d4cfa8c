"""
Deciservice — Request Logging Middleware
==========================================

What:  One access-log line per HTTP request.
How:   Times the downstream call and logs method, path, status, duration,
       request id and client address. The level follows the status:
       5xx → ERROR, 4xx → WARNING, everything else → INFO.
Who:   Applied to every request except /health.

Request bodies are never logged (note text may be private).
"""

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from deciservice.middleware.request_id import request_id_var

logger = logging.getLogger("deciservice.access")

# Probed every few seconds; logging them drowns real traffic
UNLOGGED_PATHS = frozenset({"/health"})


def level_for_status(status: int) -> int:
    if status >= 500:
        return logging.ERROR
    if status >= 400:
        return logging.WARNING
    return logging.INFO


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Logs structured information about each HTTP request and response."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        path = request.url.path
        if path in UNLOGGED_PATHS:
            return await call_next(request)

        start_time = time.perf_counter()
        client_ip = request.client.host if request.client else "unknown"
        method = request.method

        try:
            response = await call_next(request)
        except Exception:
            # The outermost error handler answers 500 after this re-raise
            self.log_request(method, path, 500, start_time, client_ip)
            raise

        self.log_request(method, path, response.status_code, start_time, client_ip)
        return response

    @staticmethod
    def log_request(
        method: str, path: str, status: int, start_time: float, client_ip: str
    ) -> None:
        duration_ms = (time.perf_counter() - start_time) * 1000
        rid = request_id_var.get("")

        logger.log(
            level_for_status(status),
            "%s %s %d %.1fms [%s] from %s",
            method,
            path,
            status,
            duration_ms,
            rid,
            client_ip,
            extra={
                "request_id": rid,
                "method": method,
                "path": path,
                "status": status,
                "duration_ms": round(duration_ms, 2),
                "client_ip": client_ip,
            },
        )
