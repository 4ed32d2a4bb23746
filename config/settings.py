"""Application settings, read from the environment."""

import os
import pathlib
from typing import List, Optional

from pydantic import BaseModel, Field

from .database import DatabaseConfig

BASE_DIR = pathlib.Path(__file__).resolve().parents[1]

PRODUCTION_ORIGINS = [
    "https://codexcrafters.juelfoundationofselflearning.org",
    "https://juelfoundationofselflearning.org",
]


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in ("1", "true", "yes")


def _env_list(name: str, default: List[str]) -> List[str]:
    raw = os.getenv(name, "")
    if not raw:
        return list(default)
    return [item.strip() for item in raw.split(",") if item.strip()]


class Settings(BaseModel):
    # Runtime
    environment: str = Field(default_factory=lambda: os.getenv("ENVIRONMENT", "development"))
    app_version: str = Field(default_factory=lambda: os.getenv("APP_VERSION", "1.0.0"))

    # Documentation
    docs_dir: str = Field(default_factory=lambda: os.getenv("DOCS_DIR", str(BASE_DIR / "docs")))
    site_url: str = Field(
        default_factory=lambda: os.getenv("SITE_URL", PRODUCTION_ORIGINS[0]).rstrip("/")
    )

    # Logging
    log_level: str = Field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO"))
    log_json: bool = Field(default_factory=lambda: _env_flag("LOG_JSON", "false"))
    log_file: Optional[str] = Field(default_factory=lambda: os.getenv("LOG_FILE") or None)

    # Database
    database: DatabaseConfig = Field(default_factory=DatabaseConfig.from_env)
    seed_database: bool = Field(default_factory=lambda: _env_flag("SEED_DATABASE", "true"))

    # Security
    mutations_enabled: bool = Field(default_factory=lambda: _env_flag("MUTATIONS_ENABLED", "false"))
    cors_origins: List[str] = Field(
        default_factory=lambda: _env_list("ALLOWED_ORIGINS", PRODUCTION_ORIGINS)
    )
    # The limit string and its storage are process-wide: the limiter reads
    # them from the environment when it is built. rate_limit_enabled and
    # trusted_proxies are read per app.
    rate_limit_api: str = Field(default_factory=lambda: os.getenv("RATE_LIMIT_API", "100/15minutes"))
    rate_limit_enabled: bool = Field(default_factory=lambda: _env_flag("RATE_LIMIT_ENABLED", "true"))
    redis_url: Optional[str] = Field(default_factory=lambda: os.getenv("REDIS_URL") or None)
    # Peers whose X-Forwarded-For / X-Real-IP headers are believed
    trusted_proxies: List[str] = Field(default_factory=lambda: _env_list("TRUSTED_PROXIES", []))

    # API
    api_host: str = Field(default_factory=lambda: os.getenv("API_HOST", "0.0.0.0"))
    api_port: int = Field(default_factory=lambda: int(os.getenv("API_PORT", "5000")))

    @property
    def is_production(self) -> bool:
        return self.environment == "production"


settings = Settings()


def get_settings() -> Settings:
    """Process-wide settings, read from the environment at import time."""
    return settings
