"""Schema management for the bookstore database."""

from loguru import logger
from sqlmodel import SQLModel

from src.pattern_lab.core.services.database.db_session import DbSessionService


class DbManageService:
    def __init__(self, db_session_service: DbSessionService):
        self._engine = db_session_service.engine

    def create_all(self) -> None:
        """Create all bookstore tables that do not exist yet."""
        from src.pattern_lab.entities.author import AuthorTable  # noqa: F401
        from src.pattern_lab.entities.book import BookTable  # noqa: F401

        SQLModel.metadata.create_all(self._engine)
        logger.info("Database initialized with tables.")

    def drop_all(self) -> None:
        """Drop all bookstore tables."""
        from src.pattern_lab.entities.author import AuthorTable  # noqa: F401
        from src.pattern_lab.entities.book import BookTable  # noqa: F401

        SQLModel.metadata.drop_all(self._engine)
        logger.info("Database tables dropped.")
