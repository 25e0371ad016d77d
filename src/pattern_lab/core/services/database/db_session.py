"""Database engine and session factory used by the bookstore exercises."""

from collections.abc import Iterator
from contextlib import contextmanager

from loguru import logger
from sqlalchemy import Engine, text
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, create_engine

from src.pattern_lab.runtime.config.config_data import DatabaseConfig
from src.pattern_lab.runtime.context import get_config


class DbSessionService:
    def __init__(self, db_config: DatabaseConfig | None = None, engine: Engine | None = None):
        """Initialize the database engine and session factory.

        Args:
            db_config: Database settings; defaults to the active configuration.
            engine: Pre-built engine to use instead of creating one.
        """
        self._config = db_config or get_config().database

        if engine is not None:
            self._engine = engine
            return

        logger.debug("Initializing database engine using connection string: {}", self._config.connection_string)
        self._engine = create_engine(
            self._config.connection_string,
            echo=self._config.echo,
            **self._get_engine_args(),
        )

    def _get_engine_args(self) -> dict:
        """Get database-specific engine arguments."""
        if not self._config.is_sqlite:
            return {"pool_pre_ping": True}

        engine_args: dict = {
            "connect_args": {
                "check_same_thread": False,
                "timeout": self._config.timeout,
            }
        }
        # An in-memory database lives only as long as its single connection
        if self._config.url in ("sqlite://", "sqlite:///:memory:"):
            engine_args["poolclass"] = StaticPool
        return engine_args

    @property
    def engine(self) -> Engine:
        return self._engine

    def get_session(self) -> Session:
        """Return a new SQLModel session bound to the shared engine."""
        return Session(
            self._engine,
            expire_on_commit=False,  # Prevent lazy loading issues
            autoflush=True,
        )

    @contextmanager
    def session_scope(self) -> Iterator[Session]:
        """Context manager style helper for repositories and tests."""
        db = self.get_session()
        try:
            yield db
            db.commit()
        except Exception as e:
            db.rollback()
            logger.error(
                "Database transaction failed: {}: {}",
                type(e).__name__,
                e,
            )
            raise
        finally:
            db.close()

    def health_check(self) -> bool:
        """Perform a health check on the database connection."""
        try:
            with self._engine.connect() as connection:
                connection.execute(text("SELECT 1"))
                return True
        except Exception as e:
            logger.error("Database health check failed: {}: {}", type(e).__name__, e)
            return False

    def dispose(self) -> None:
        self._engine.dispose()
