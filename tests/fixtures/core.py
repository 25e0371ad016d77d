from __future__ import annotations

import io
import sys
from collections.abc import Callable, Generator

import pytest
from loguru import logger
from rich.console import Console
from sqlalchemy import StaticPool
from sqlmodel import Session, SQLModel, create_engine

from src.pattern_lab.core.console import Narrator
from src.pattern_lab.core.services.database import DbSessionService
from src.pattern_lab.patterns.creational.singleton import Singleton
from src.pattern_lab.runtime.config.config_data import DatabaseConfig
from tests.utils import seed_mock_bookstore

# Models will be imported within fixtures to control timing


@pytest.fixture
def console() -> Console:
    """A colorless console recording everything printed to it."""
    return Console(
        file=io.StringIO(),
        width=200,
        color_system=None,
        no_color=True,
        soft_wrap=True,
        highlight=False,
        emoji=False,
    )


@pytest.fixture
def narrator(console: Console) -> Narrator:
    return Narrator(console=console, color=False)


@pytest.fixture
def output(console: Console) -> Callable[[], list[str]]:
    """Return the lines printed so far, blank lines included."""

    def _lines() -> list[str]:
        return console.file.getvalue().splitlines()

    return _lines


@pytest.fixture
def session() -> Generator[Session]:
    """Create a fresh, empty bookstore database session for testing."""
    # Create a unique engine for each test to avoid metadata conflicts
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    # Import models to register them with the metadata
    from src.pattern_lab.entities.author import AuthorTable  # noqa: F401
    from src.pattern_lab.entities.book import BookTable  # noqa: F401

    # Create all tables - each test gets a fresh database
    SQLModel.metadata.create_all(engine)

    with Session(engine, expire_on_commit=False) as session:
        try:
            yield session
        finally:
            # Explicit cleanup
            session.rollback()
            session.close()
            engine.dispose()


@pytest.fixture
def bookstore_session(session: Session) -> Session:
    """A session over the three-book, two-author mock dataset."""
    seed_mock_bookstore(session)
    return session


@pytest.fixture
def db_session_service() -> Generator[DbSessionService]:
    """A DbSessionService over its own in-memory database."""
    service = DbSessionService(DatabaseConfig(url="sqlite://"))
    try:
        yield service
    finally:
        service.dispose()


@pytest.fixture
def fresh_singleton() -> Generator[None]:
    """Start and finish the test without a shared Singleton instance."""
    Singleton.reset_instance()
    yield
    Singleton.reset_instance()


@pytest.fixture
def restore_logging() -> Generator[None]:
    """Put loguru back to its default stderr sink after the test reconfigures it."""
    yield
    logger.remove()
    logger.add(sys.stderr)
