"""Database configuration for the CodexCrafters site API.

SQLite is used for local development; production points ``DATABASE_URL``
at PostgreSQL (``postgresql+psycopg://...``).
"""

import os
import logging
from enum import Enum
from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)

DEFAULT_DATABASE_URL = "sqlite:///./codexcrafters.db"


class DatabaseType(str, Enum):
    """Supported database types."""
    SQLITE = "sqlite"
    POSTGRESQL = "postgresql"


class DatabaseConfig(BaseModel):
    """Database configuration."""
    url: str = Field(default=DEFAULT_DATABASE_URL, description="SQLAlchemy database URL")

    # Connection settings
    pool_size: int = Field(default=10, description="Connection pool size")
    max_overflow: int = Field(default=20, description="Maximum pool overflow")
    pool_timeout: int = Field(default=30, description="Pool timeout in seconds")
    echo: bool = Field(default=False, description="Log emitted SQL")

    @property
    def type(self) -> DatabaseType:
        if self.url.startswith("postgresql"):
            return DatabaseType.POSTGRESQL
        return DatabaseType.SQLITE

    @classmethod
    def from_env(cls) -> 'DatabaseConfig':
        """Create configuration from environment variables."""
        return cls(
            url=os.getenv('DATABASE_URL', DEFAULT_DATABASE_URL),
            pool_size=int(os.getenv('DB_POOL_SIZE', '10')),
            max_overflow=int(os.getenv('DB_MAX_OVERFLOW', '20')),
            pool_timeout=int(os.getenv('DB_POOL_TIMEOUT', '30')),
            echo=os.getenv('DEBUG_SQL', 'false').lower() == 'true'
        )
