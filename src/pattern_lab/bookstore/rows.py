"""Read models returned by the bookstore queries.

These are projections over one or both tables, shaped after what each query
reports. Prices are kept as Decimal so they print exactly as stored.
"""

from decimal import Decimal

from pydantic import BaseModel, ConfigDict


class _Row(BaseModel):
    model_config = ConfigDict(frozen=True)


class BookWithAuthorRow(_Row):
    title: str
    price: Decimal
    year_published: int
    author_name: str


class AuthorBookCountRow(_Row):
    author_name: str
    book_count: int


class AuthorAgeRow(_Row):
    name: str
    age: int


class YearTopBookRow(_Row):
    year: int
    title: str
    price: Decimal


class AuthorAveragePriceRow(_Row):
    author_name: str
    average_price: Decimal
