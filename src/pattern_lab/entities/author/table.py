"""Author database table model."""

from typing import TYPE_CHECKING

from sqlmodel import Relationship

from src.pattern_lab.entities._base import EntityTable

if TYPE_CHECKING:
    from src.pattern_lab.entities.book.table import BookTable


class AuthorTable(EntityTable, table=True):
    """Database persistence model for authors.

    ``books`` and ``BookTable.author`` are two ends of the same foreign key and
    are kept consistent by the ORM.
    """

    __tablename__ = "authors"

    name: str
    age: int

    books: list["BookTable"] = Relationship(back_populates="author")
