"""Bookstore query exercise commands."""

import typer
from loguru import logger

from src.pattern_lab.bookstore import BookstoreQueryService, BookstoreReport, seed_database, seed_if_empty
from src.pattern_lab.core.services.database import DbManageService
from src.pattern_lab.entities import BookRepository

from .utils import console, handle_errors, make_db_session_service, make_narrator

bookstore_app = typer.Typer(help="📚 Bookstore query exercises")

DATABASE_URL_OPTION = typer.Option(
    None, "--database-url", help="Database URL (defaults to database.url from config.yaml)"
)


@bookstore_app.command(name="init")
def init_database(database_url: str | None = DATABASE_URL_OPTION) -> None:
    """
    🗄️  Create the bookstore tables if they do not exist.
    """
    db = make_db_session_service(database_url)
    try:
        DbManageService(db).create_all()
    finally:
        db.dispose()
    console.print("[green]✅ Bookstore tables are ready[/green]")


@bookstore_app.command(name="seed")
def seed(
    force: bool = typer.Option(
        False, "--force", help="Drop and recreate the tables before seeding"
    ),
    database_url: str | None = DATABASE_URL_OPTION,
) -> None:
    """
    🌱 Seed the bookstore with the standard authors and books.

    Refuses to seed a database that already holds authors unless --force is given.
    """
    db = make_db_session_service(database_url)
    try:
        manage = DbManageService(db)
        if force:
            manage.drop_all()
        manage.create_all()

        with handle_errors(), db.session_scope() as session:
            inserted = seed_database(session)
            books = BookRepository(session).count()
    finally:
        db.dispose()

    console.print(f"[green]✅ Seeded {inserted} authors and {books} books[/green]")


@bookstore_app.command(name="report")
def report(
    database_url: str | None = DATABASE_URL_OPTION,
    color: bool = typer.Option(True, "--color/--no-color", help="Colorize headings"),
) -> None:
    """
    📊 Run every bookstore query and print the results.

    Creates the tables and seeds the standard dataset first when the database is empty.
    """
    db = make_db_session_service(database_url)
    narrator = make_narrator(color=color)
    try:
        DbManageService(db).create_all()
        with db.session_scope() as session:
            if seed_if_empty(session):
                logger.info("Seeded the standard bookstore dataset")
            BookstoreReport(BookstoreQueryService(session), narrator).run_all()
    finally:
        db.dispose()
