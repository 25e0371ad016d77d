"""Book database table model."""

from decimal import Decimal
from typing import TYPE_CHECKING, Optional

from sqlmodel import Field, Relationship

from src.pattern_lab.entities._base import EntityTable

if TYPE_CHECKING:
    from src.pattern_lab.entities.author.table import AuthorTable


class BookTable(EntityTable, table=True):
    """Database persistence model for books."""

    __tablename__ = "books"

    title: str
    price: Decimal = Field(max_digits=10, decimal_places=2)
    year_published: int
    author_id: int | None = Field(default=None, foreign_key="authors.id", index=True)

    author: Optional["AuthorTable"] = Relationship(back_populates="books")
