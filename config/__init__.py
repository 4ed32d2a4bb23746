"""Configuration module for the CodexCrafters site API.

Provides settings for the documentation root, database, logging and security.
"""

from .database import (
    DatabaseConfig,
    DatabaseType,
    DEFAULT_DATABASE_URL
)
from .settings import (
    Settings,
    get_settings,
    BASE_DIR,
    PRODUCTION_ORIGINS
)

__all__ = [
    'DatabaseConfig',
    'DatabaseType',
    'DEFAULT_DATABASE_URL',
    'Settings',
    'get_settings',
    'BASE_DIR',
    'PRODUCTION_ORIGINS'
]
