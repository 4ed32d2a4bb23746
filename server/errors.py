"""Error types and exception handlers for the site API.

Client-facing bodies are always small JSON objects with a safe message.
Full details, including the stack trace, only go to the server log.
"""

import logging
import secrets

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class SiteError(Exception):
    """Base error with an HTTP status and a message that is safe to show."""
    status_code = 500
    message = "Internal server error"

    def __init__(self, message: str = None):
        if message is not None:
            self.message = message
        super().__init__(self.message)


class PathRequiredError(SiteError):
    status_code = 400
    message = "File path is required"


class AccessDeniedError(SiteError):
    status_code = 403
    message = "Access denied"


class DocNotFoundError(SiteError):
    status_code = 404
    message = "Documentation file not found"


class ResourceNotFoundError(SiteError):
    status_code = 404
    message = "Not found"


async def site_error_handler(request: Request, exc: SiteError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
    return JSONResponse(status_code=exc.status_code, content={"message": exc.message})


def make_unhandled_error_handler(include_details: bool):
    """Catch-all handler; *include_details* adds the exception text (development only)."""

    async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
        error_id = secrets.token_hex(6)
        logger.error(
            f"Error {error_id}: {exc}",
            extra={
                "error_id": error_id,
                "url": str(request.url.path),
                "method": request.method,
                "user_agent": request.headers.get("user-agent"),
                "client_ip": request.client.host if request.client else None,
            },
            exc_info=exc,
        )
        content = {"message": "Internal server error", "errorId": error_id}
        if include_details:
            content["detail"] = str(exc)
        return JSONResponse(status_code=500, content=content)

    return unhandled_error_handler


def register_error_handlers(app: FastAPI, include_details: bool = False) -> None:
    app.add_exception_handler(SiteError, site_error_handler)
    app.add_exception_handler(Exception, make_unhandled_error_handler(include_details))
