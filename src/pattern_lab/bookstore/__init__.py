"""Bookstore query exercises: seed data, queries and printed reports."""

from .queries import BookstoreQueryService
from .report import BookstoreReport, format_book
from .seed import SEED_AUTHORS, seed_database, seed_if_empty

__all__ = [
    "SEED_AUTHORS",
    "BookstoreQueryService",
    "BookstoreReport",
    "format_book",
    "seed_database",
    "seed_if_empty",
]
