"""Bookstore entities.

Each entity has its own package containing:
- entity.py: Domain model
- table.py: Database persistence model
- repository.py: Data access layer

Both table modules must be imported before the mappers are configured, since
``AuthorTable.books`` and ``BookTable.author`` refer to each other by name.
"""

from .author import Author, AuthorRepository, AuthorTable
from .book import Book, BookRepository, BookTable

__all__ = [
    "Author",
    "AuthorTable",
    "AuthorRepository",
    "Book",
    "BookTable",
    "BookRepository",
]
