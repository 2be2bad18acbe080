"""SQLite database connection management."""
from typing import Optional
import logging

from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import Session, sessionmaker

from stock_api.config import database_config
from stock_api.repository.models import Base

logger = logging.getLogger(__name__)


class SQLiteConnection:
    """Manages the SQLite engine and session factory."""

    def __init__(self, url: str = None, echo: bool = None):
        self.url = url or database_config.URL
        self.echo = database_config.ECHO if echo is None else echo
        self._engine: Optional[Engine] = None
        self._session_factory: Optional[sessionmaker] = None

    def connect(self) -> None:
        """Open the engine and create the schema if absent."""
        try:
            self._engine = create_engine(
                self.url,
                echo=self.echo,
                connect_args={"check_same_thread": False, "timeout": 30},
            )
            Base.metadata.create_all(self._engine)
            self._session_factory = sessionmaker(self._engine, expire_on_commit=False)
            logger.info(f"Connected to {self.url}")
        except Exception as e:
            logger.error(f"Failed to open database {self.url}: {e}")
            raise

    def disconnect(self) -> None:
        """Dispose the engine."""
        if self._engine:
            self._engine.dispose()
            self._engine = None
            self._session_factory = None
            logger.info("Disconnected from database")

    def session(self) -> Session:
        """Create a new session."""
        if not self._session_factory:
            raise RuntimeError("Not connected to database")
        return self._session_factory()

    @property
    def engine(self) -> Engine:
        """Get underlying engine."""
        if not self._engine:
            raise RuntimeError("Not connected to database")
        return self._engine
