"""Data-access layer for books."""

from sqlalchemy import func
from sqlmodel import Session, select

from src.pattern_lab.entities.book.entity import Book
from src.pattern_lab.entities.book.table import BookTable


class BookRepository:
    """Data-access layer for books."""

    def __init__(self, session: Session) -> None:
        self._session = session

    def get(self, book_id: int) -> Book | None:
        row = self._session.get(BookTable, book_id)
        if row is None:
            return None
        return Book.model_validate(row, from_attributes=True)

    def list_by_author(self, author_id: int) -> list[Book]:
        statement = (
            select(BookTable)
            .where(BookTable.author_id == author_id)
            .order_by(BookTable.id)
        )
        return [
            Book.model_validate(row, from_attributes=True)
            for row in self._session.exec(statement)
        ]

    def count(self) -> int:
        statement = select(func.count()).select_from(BookTable)
        return self._session.exec(statement).one()
