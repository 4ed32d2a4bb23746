"""CORS and security header configuration for the site API."""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from typing import List
import logging

from config.settings import Settings

logger = logging.getLogger(__name__)


def get_cors_config(settings: Settings) -> dict:
    """Get CORS configuration based on environment."""
    if settings.is_production:
        # Only the site's own domains
        allow_origins: List[str] = list(settings.cors_origins)
        logger.info(f"Using production CORS origins: {allow_origins}")
    else:
        allow_origins = ["*"]
        logger.info("Using development CORS configuration")

    return {
        "allow_origins": allow_origins,
        # Credentials cannot be combined with a wildcard origin
        "allow_credentials": settings.is_production,
        "allow_methods": ["GET", "HEAD", "OPTIONS"],
        "allow_headers": ["Accept", "Accept-Language", "Content-Language", "Content-Type"],
        "max_age": 86400 if settings.is_production else 600
    }


def setup_cors(app: FastAPI, settings: Settings) -> None:
    """Setup CORS middleware for FastAPI application."""
    app.add_middleware(CORSMiddleware, **get_cors_config(settings))


class SecurityHeadersMiddleware:
    """Add security headers to all responses."""

    def __init__(self, app, production: bool = False):
        self.app = app
        self.production = production

    async def __call__(self, scope, receive, send):
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        async def send_wrapper(message):
            if message["type"] == "http.response.start":
                headers = dict(message.get("headers", []))

                security_headers = {
                    b"x-content-type-options": b"nosniff",
                    b"x-frame-options": b"SAMEORIGIN",
                    b"referrer-policy": b"strict-origin-when-cross-origin",
                    b"permissions-policy": b"geolocation=(), microphone=(), camera=()"
                }

                # CSP and HSTS only in production; the dev frontend needs inline scripts
                if self.production:
                    security_headers[b"strict-transport-security"] = b"max-age=31536000; includeSubDomains"
                    security_headers[b"content-security-policy"] = (
                        b"default-src 'self'; "
                        b"style-src 'self' https://fonts.googleapis.com; "
                        b"font-src 'self' https://fonts.gstatic.com; "
                        b"script-src 'self'; img-src 'self' data: https:; "
                        b"connect-src 'self'; object-src 'none'; upgrade-insecure-requests"
                    )

                headers.update(security_headers)
                message["headers"] = list(headers.items())

            await send(message)

        await self.app(scope, receive, send_wrapper)


def setup_security_headers(app: FastAPI, settings: Settings) -> None:
    """Setup security headers middleware."""
    app.add_middleware(SecurityHeadersMiddleware, production=settings.is_production)
    logger.info("Security headers middleware configured")


def setup_api_security(app: FastAPI, settings: Settings) -> None:
    """Setup CORS and security headers."""
    setup_cors(app, settings)
    setup_security_headers(app, settings)
