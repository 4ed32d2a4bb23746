from contextlib import asynccontextmanager
from typing import Optional
import datetime
import logging
import os

from fastapi import FastAPI, Request
from fastapi.middleware.gzip import GZipMiddleware
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
import uvicorn

from config.settings import Settings, get_settings
from observability.logging import setup_logging
from observability.prometheus_metrics import setup_prometheus_metrics
from services.seed import seed_database
from services.shared.db import Database
from services.storage import DatabaseStorage

from .content_api import router as content_router
from .docs_api import router as docs_router
from .errors import register_error_handlers
from .monitoring import RequestLoggingMiddleware
from .security import (
    DisableMutationsMiddleware,
    rate_limit_health_check,
    setup_api_security,
    setup_rate_limiting,
)

logger = logging.getLogger(__name__)

APP_TITLE = "CodexCrafters Site API"


def configure_logging(settings: Settings) -> None:
    setup_logging(
        level=settings.log_level,
        service_name="codexcrafters",
        log_file=settings.log_file,
        use_json=settings.log_json,
        use_colors=not settings.log_json,
    )


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the API application. Tests pass their own ``Settings``."""
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        database = Database(settings.database)
        try:
            database.initialize()
            storage = DatabaseStorage(database.get_session_factory())
            if settings.seed_database:
                seed_database(storage)
        except SQLAlchemyError as e:
            logger.error(f"Failed to initialize database: {e}")
            database.close()
            raise

        app.state.database = database
        app.state.storage = storage
        logger.info(f"Serving docs from {settings.docs_dir}")
        try:
            yield
        finally:
            database.close()
            app.state.database = None
            app.state.storage = None

    app = FastAPI(title=APP_TITLE, version=settings.app_version, lifespan=lifespan)
    app.state.settings = settings
    app.state.database = None
    app.state.storage = None

    register_error_handlers(app, include_details=settings.environment == "development")
    setup_rate_limiting(app)

    # Last added runs first
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(DisableMutationsMiddleware, enabled=settings.mutations_enabled)
    setup_api_security(app, settings)
    app.add_middleware(GZipMiddleware, minimum_size=1000)
    setup_prometheus_metrics(app, settings.app_version, settings.environment)

    app.include_router(docs_router)
    app.include_router(content_router)

    @app.get("/")
    async def root():
        """Root endpoint with API information."""
        return {
            "message": APP_TITLE,
            "version": settings.app_version,
            "docs": "/api/docs",
            "sitemap": "/sitemap.xml",
            "health": "/health",
            "metrics": "/metrics"
        }

    @app.get("/health")
    async def health():
        return {
            "status": "ok",
            "time": datetime.datetime.now(datetime.timezone.utc).isoformat(),
            "docs": os.path.isdir(settings.docs_dir)
        }

    @app.get("/health/detailed")
    async def detailed_health_check(request: Request):
        """Health check including database and rate limit storage."""
        health_status = {
            "status": "healthy",
            "timestamp": datetime.datetime.now(datetime.timezone.utc).isoformat(),
            "version": settings.app_version,
            "components": {
                "docs": {"status": "healthy" if os.path.isdir(settings.docs_dir) else "unavailable"}
            }
        }

        database = request.app.state.database
        if database is None or database.engine is None:
            health_status["components"]["database"] = {"status": "unavailable"}
        else:
            try:
                with database.engine.connect() as conn:
                    conn.execute(text("SELECT 1"))
                health_status["components"]["database"] = {"status": "healthy"}
            except SQLAlchemyError as e:
                logger.warning(f"Database health check failed: {e}")
                health_status["components"]["database"] = {"status": "unhealthy"}
                health_status["status"] = "degraded"

        health_status["components"]["rate_limiting"] = await rate_limit_health_check(settings)
        if health_status["components"]["docs"]["status"] != "healthy":
            health_status["status"] = "degraded"
        return health_status

    return app


app = create_app()


def main() -> None:
    settings = get_settings()
    configure_logging(settings)
    uvicorn.run(app, host=settings.api_host, port=settings.api_port)


if __name__ == "__main__":
    main()
