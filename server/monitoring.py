"""Request logging for the site API.

Only ``/api`` requests are logged, one line each, in the form
``GET /api/docs 200 in 12ms``.
"""

import time
import logging

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger(__name__)

MAX_LOG_LINE = 80


def format_request_line(method: str, path: str, status_code: int, duration_ms: int) -> str:
    line = f"{method} {path} {status_code} in {duration_ms}ms"
    if len(line) > MAX_LOG_LINE:
        line = line[:MAX_LOG_LINE - 1] + "…"
    return line


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Log method, path, status and duration of API requests."""

    async def dispatch(self, request: Request, call_next):
        start_time = time.time()
        path = request.url.path

        response = await call_next(request)

        duration_ms = int((time.time() - start_time) * 1000)
        response.headers['X-Response-Time'] = f"{duration_ms}ms"
        if path.startswith("/api"):
            logger.info(
                format_request_line(request.method, path, response.status_code, duration_ms),
                extra={
                    "status_code": response.status_code,
                    "duration_ms": duration_ms,
                    "client_ip": request.client.host if request.client else None,
                }
            )
        return response
