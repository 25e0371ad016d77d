"""Data-access layer for authors."""

from sqlalchemy import func
from sqlmodel import Session, select

from src.pattern_lab.entities.author.entity import Author
from src.pattern_lab.entities.author.table import AuthorTable


class AuthorRepository:
    """Data-access layer for authors."""

    def __init__(self, session: Session) -> None:
        self._session = session

    def get(self, author_id: int) -> Author | None:
        row = self._session.get(AuthorTable, author_id)
        if row is None:
            return None
        return Author.model_validate(row, from_attributes=True)

    def get_by_name(self, name: str) -> Author | None:
        statement = select(AuthorTable).where(AuthorTable.name == name)
        row = self._session.exec(statement).first()
        if row is None:
            return None
        return Author.model_validate(row, from_attributes=True)

    def list_all(self) -> list[Author]:
        statement = select(AuthorTable).order_by(AuthorTable.id)
        return [
            Author.model_validate(row, from_attributes=True)
            for row in self._session.exec(statement)
        ]

    def count(self) -> int:
        statement = select(func.count()).select_from(AuthorTable)
        return self._session.exec(statement).one()

    def add(self, author: AuthorTable) -> AuthorTable:
        """Stage ``author`` (and any books attached to it) and flush to get ids."""
        self._session.add(author)
        self._session.flush()
        return author
