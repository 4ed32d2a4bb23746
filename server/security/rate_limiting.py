"""Rate limiting for the /api routes using slowapi, with Redis storage when configured.

The limit string and storage come from the process settings when this module
is imported. Whether limits apply, and which proxies may name the client, are
read from the settings of the app serving the request.
"""

import redis
from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.util import get_remote_address
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from typing import Iterable, Optional
import logging

from config.settings import Settings, get_settings

logger = logging.getLogger(__name__)

RATE_LIMIT_MESSAGE = "Too many requests from this IP, please try again later."


def _request_settings(request: Request) -> Settings:
    app = request.scope.get("app")
    return getattr(getattr(app, "state", None), "settings", None) or get_settings()


def resolve_client_ip(request: Request, trusted_proxies: Iterable[str]) -> str:
    """Return the address the limit is keyed on.

    Forwarding headers are only believed when the socket peer is a trusted
    proxy; otherwise any caller could pick their own key.
    """
    peer = get_remote_address(request)
    trusted = set(trusted_proxies)
    if peer not in trusted:
        return peer

    forwarded_for = request.headers.get("X-Forwarded-For")
    if forwarded_for:
        # Rightmost hop that is not one of our proxies
        hops = [hop.strip() for hop in forwarded_for.split(",") if hop.strip()]
        for hop in reversed(hops):
            if hop not in trusted:
                return hop

    real_ip = request.headers.get("X-Real-IP")
    if real_ip:
        return real_ip.strip()

    return peer


def get_client_ip(request: Request) -> str:
    """Limiter key: the client address as seen through trusted proxies."""
    return resolve_client_ip(request, _request_settings(request).trusted_proxies)


def redis_available(redis_url: Optional[str]) -> bool:
    """Ping Redis at *redis_url*; the connection is always closed."""
    if not redis_url:
        return False
    client = redis.from_url(redis_url, decode_responses=True)
    try:
        client.ping()
        return True
    except redis.RedisError as e:
        logger.warning(f"Redis connection failed: {e}")
        return False
    finally:
        client.close()


def _build_limiter() -> Limiter:
    settings = get_settings()
    if redis_available(settings.redis_url):
        storage_uri = settings.redis_url
    else:
        if settings.redis_url:
            logger.warning("Rate limiting will use in-memory storage")
        storage_uri = "memory://"
    return Limiter(key_func=get_client_ip, storage_uri=storage_uri)


limiter = _build_limiter()


def _limits_disabled(request: Request) -> bool:
    return not _request_settings(request).rate_limit_enabled


def api_rate_limit():
    """One per-client budget shared by every /api endpoint (100 requests per 15 minutes by default)."""
    return limiter.shared_limit(
        get_settings().rate_limit_api,
        scope="api",
        exempt_when=_limits_disabled,
    )


async def rate_limit_handler(request: Request, exc: RateLimitExceeded) -> JSONResponse:
    """Custom handler for rate limit exceeded responses."""
    retry_after = getattr(exc, 'retry_after', None) or 60
    logger.warning(f"Rate limit exceeded for {get_client_ip(request)} on {request.url.path}")
    response = JSONResponse(
        status_code=429,
        content={"error": RATE_LIMIT_MESSAGE, "detail": f"Rate limit exceeded: {exc.detail}"}
    )
    response.headers["Retry-After"] = str(retry_after)
    return response


def setup_rate_limiting(app: FastAPI) -> None:
    """Setup rate limiting for FastAPI application."""
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, rate_limit_handler)


async def rate_limit_health_check(settings: Optional[Settings] = None) -> dict:
    """Check health of rate limiting system."""
    settings = settings or get_settings()
    storage_url = get_settings().redis_url
    health = {
        "rate_limiting": "healthy" if settings.rate_limit_enabled else "disabled",
        "redis_connected": False,
        "storage_type": "redis" if storage_url else "in-memory"
    }

    if storage_url:
        if redis_available(storage_url):
            health["redis_connected"] = True
        else:
            health["rate_limiting"] = "degraded"

    return health
