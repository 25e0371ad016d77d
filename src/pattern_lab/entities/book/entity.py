"""Entity: Book."""

from decimal import Decimal
from typing import Any

from pydantic import Field

from src.pattern_lab.entities._base import Entity


class Book(Entity):
    """Book in the bookstore dataset.

    Every book belongs to exactly one author through ``author_id``.
    """

    title: str = Field(description="Title")
    price: Decimal = Field(description="Price with two decimal places", decimal_places=2)
    year_published: int = Field(description="Year of first publication")
    author_id: int | None = Field(default=None, description="Owning author")

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Book):
            return False

        return (
            self.id == other.id
            and self.title == other.title
            and self.price == other.price
            and self.year_published == other.year_published
            and self.author_id == other.author_id
        )

    def __hash__(self) -> int:
        return hash((
            self.id,
            self.title,
            self.price,
            self.year_published,
            self.author_id,
        ))
