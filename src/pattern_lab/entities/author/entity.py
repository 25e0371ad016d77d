"""Entity: Author."""

from typing import Any

from pydantic import Field

from src.pattern_lab.entities._base import Entity


class Author(Entity):
    """Author of one or more books in the bookstore dataset."""

    name: str = Field(description="Author's full name")
    age: int = Field(description="Author's age in years")

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Author):
            return False

        return (
            self.id == other.id
            and self.name == other.name
            and self.age == other.age
        )

    def __hash__(self) -> int:
        return hash((self.id, self.name, self.age))
