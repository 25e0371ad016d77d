"""Shared utilities for CLI commands."""

from collections.abc import Iterator
from contextlib import contextmanager

import typer
from rich.console import Console

from src.pattern_lab.core.console import Narrator
from src.pattern_lab.core.exceptions import PatternLabError
from src.pattern_lab.core.services.database import DbSessionService
from src.pattern_lab.runtime.context import get_config

# Initialize Rich console for status messages
console = Console()


def make_narrator(color: bool | None = None) -> Narrator:
    """Create a narrator writing to the current stdout."""
    return Narrator(color=color)


def make_db_session_service(database_url: str | None = None) -> DbSessionService:
    """Create a DbSessionService for ``database_url`` or the configured database."""
    db_config = get_config().database
    if database_url:
        db_config = db_config.model_copy(update={"url": database_url})
    return DbSessionService(db_config)


@contextmanager
def handle_errors() -> Iterator[None]:
    """Turn pattern lab errors into a red message and exit code 1."""
    try:
        yield
    except PatternLabError as e:
        console.print(f"[red]❌ {e}[/red]")
        raise typer.Exit(1) from e
