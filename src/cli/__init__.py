"""Main CLI application module."""

import typer

from src.pattern_lab.runtime.logging_setup import configure_logging

from .bookstore_commands import bookstore_app
from .pattern_commands import patterns_app

# Create the main CLI application
app = typer.Typer(
    help="🧪 Pattern Lab - design pattern examples and bookstore query exercises",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

# Register command groups
app.add_typer(patterns_app, name="patterns")
app.add_typer(bookstore_app, name="bookstore")


@app.callback()
def main_callback(
    log_level: str | None = typer.Option(
        None,
        "--log-level",
        help="Logging level (TRACE, DEBUG, INFO, WARNING, ERROR, CRITICAL). Defaults to config.yaml.",
    ),
) -> None:
    """Configure logging before any command runs."""
    configure_logging(log_level)


def main() -> None:
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
