"""Engine and session factory for the examples/guides database."""
import logging
from typing import Optional

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker

from config.database import DatabaseConfig, DatabaseType
from .models import Base

logger = logging.getLogger(__name__)


class Database:
    """Owns the SQLAlchemy engine and session factory."""

    def __init__(self, config: DatabaseConfig):
        self.config = config
        self.engine: Optional[Engine] = None
        self.session_factory: Optional[sessionmaker] = None

    def initialize(self) -> None:
        """Create the engine and make sure the tables exist."""
        if self.config.type == DatabaseType.POSTGRESQL:
            self.engine = create_engine(
                self.config.url,
                pool_size=self.config.pool_size,
                max_overflow=self.config.max_overflow,
                pool_timeout=self.config.pool_timeout,
                pool_pre_ping=True,
                pool_recycle=3600,
                echo=self.config.echo,
            )
        else:
            self.engine = create_engine(
                self.config.url,
                connect_args={"check_same_thread": False},
                echo=self.config.echo,
            )

        Base.metadata.create_all(self.engine)
        self.session_factory = sessionmaker(bind=self.engine, autoflush=False, expire_on_commit=False)
        logger.info(f"Database initialized: {self.config.type.value}")

    def close(self) -> None:
        if self.engine is not None:
            self.engine.dispose()
            self.engine = None
            self.session_factory = None
            logger.info("Database connections closed")

    def get_session_factory(self) -> sessionmaker:
        if self.session_factory is None:
            raise RuntimeError("Database not initialized. Call initialize() first.")
        return self.session_factory
