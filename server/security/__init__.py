"""Security package for the site API."""

from .rate_limiting import (
    limiter,
    api_rate_limit,
    setup_rate_limiting,
    rate_limit_handler,
    rate_limit_health_check,
    get_client_ip,
    resolve_client_ip,
    redis_available
)
from .cors import (
    setup_cors,
    setup_security_headers,
    setup_api_security,
    get_cors_config,
    SecurityHeadersMiddleware
)
from .mutations import DisableMutationsMiddleware, MUTATIONS_DISABLED_MESSAGE

__all__ = [
    # Rate limiting
    "limiter",
    "api_rate_limit",
    "setup_rate_limiting",
    "rate_limit_handler",
    "rate_limit_health_check",
    "get_client_ip",
    "resolve_client_ip",
    "redis_available",
    # CORS and security headers
    "setup_cors",
    "setup_security_headers",
    "setup_api_security",
    "get_cors_config",
    "SecurityHeadersMiddleware",
    # Read-only guard
    "DisableMutationsMiddleware",
    "MUTATIONS_DISABLED_MESSAGE"
]
