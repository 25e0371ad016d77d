"""Query exercises over the bookstore dataset.

Each method answers one question about the authors and books. Filtering,
joining and grouping happen in SQL where SQLite gives exact answers; averages
and "first of a group" selections are computed in Python over Decimal prices
so that ties and rounding match what is stored.

Store order is primary-key order. Whenever a question does not impose an
order, results follow it.
"""

from decimal import Decimal

from loguru import logger
from sqlalchemy import distinct, func
from sqlmodel import Session, col, select

from src.pattern_lab.bookstore.rows import (
    AuthorAgeRow,
    AuthorAveragePriceRow,
    AuthorBookCountRow,
    BookWithAuthorRow,
    YearTopBookRow,
)
from src.pattern_lab.entities.author import AuthorTable
from src.pattern_lab.entities.book import Book, BookTable

Number = Decimal | int


def _book_author_join():
    return select(BookTable, AuthorTable).join(
        AuthorTable, col(BookTable.author_id) == col(AuthorTable.id)
    )


def _book_with_author(book: BookTable, author: AuthorTable) -> BookWithAuthorRow:
    return BookWithAuthorRow(
        title=book.title,
        price=book.price,
        year_published=book.year_published,
        author_name=author.name,
    )


class BookstoreQueryService:
    """Read-only queries over an open bookstore session."""

    def __init__(self, session: Session) -> None:
        self._session = session

    def _books(self, statement) -> list[Book]:
        return [
            Book.model_validate(row, from_attributes=True)
            for row in self._session.exec(statement)
        ]

    def all_books(self) -> list[Book]:
        return self._books(select(BookTable).order_by(col(BookTable.id)))

    def books_published_in(self, year: int) -> list[Book]:
        statement = (
            select(BookTable)
            .where(BookTable.year_published == year)
            .order_by(col(BookTable.id))
        )
        return self._books(statement)

    def authors_and_their_books(self) -> list[BookWithAuthorRow]:
        statement = _book_author_join().order_by(col(BookTable.id))
        return [_book_with_author(book, author) for book, author in self._session.exec(statement)]

    def books_priced_between(self, minimum: Number, maximum: Number) -> list[Book]:
        """Books whose price lies in the inclusive range [minimum, maximum]."""
        statement = (
            select(BookTable)
            .where(col(BookTable.price) >= minimum, col(BookTable.price) <= maximum)
            .order_by(col(BookTable.id))
        )
        return self._books(statement)

    def authors_with_more_books_than(self, book_count: int = 2) -> list[AuthorBookCountRow]:
        count = func.count(col(BookTable.id))
        statement = (
            select(AuthorTable.name, count)
            .join(BookTable, col(BookTable.author_id) == col(AuthorTable.id))
            .group_by(col(AuthorTable.id))
            .having(count > book_count)
            .order_by(col(AuthorTable.id))
        )
        return [
            AuthorBookCountRow(author_name=name, book_count=total)
            for name, total in self._session.exec(statement)
        ]

    def books_with_title_containing(self, text: str) -> list[Book]:
        """Case-sensitive substring match on the title."""
        statement = (
            select(BookTable)
            .where(func.instr(BookTable.title, text) > 0)
            .order_by(col(BookTable.id))
        )
        return self._books(statement)

    def authors_in_age_range(self, minimum: int, maximum: int) -> list[AuthorAgeRow]:
        """Authors aged within [minimum, maximum], youngest first."""
        statement = (
            select(AuthorTable)
            .where(AuthorTable.age >= minimum, AuthorTable.age <= maximum)
            .order_by(col(AuthorTable.age), col(AuthorTable.id))
        )
        return [AuthorAgeRow(name=author.name, age=author.age) for author in self._session.exec(statement)]

    def authors_with_book_in(self, year: int = 2024) -> list[str]:
        """Author names, once per book they published in ``year``."""
        statement = (
            select(AuthorTable.name)
            .join(BookTable, col(BookTable.author_id) == col(AuthorTable.id))
            .where(BookTable.year_published == year)
            .order_by(col(AuthorTable.id), col(BookTable.id))
        )
        return list(self._session.exec(statement))

    def most_expensive_book(self) -> Book | None:
        """The highest-priced book; among equal prices, the last one stored."""
        statement = (
            select(BookTable)
            .order_by(col(BookTable.price).desc(), col(BookTable.id).desc())
            .limit(1)
        )
        row = self._session.exec(statement).first()
        if row is None:
            return None
        return Book.model_validate(row, from_attributes=True)

    def books_by_author(self, author_name: str) -> list[Book]:
        statement = (
            select(BookTable)
            .join(AuthorTable, col(BookTable.author_id) == col(AuthorTable.id))
            .where(AuthorTable.name == author_name)
            .order_by(col(BookTable.id))
        )
        return self._books(statement)

    def most_expensive_book_per_year(self) -> list[YearTopBookRow]:
        """For every publication year, its highest-priced book (first stored on ties)."""
        best: dict[int, Book] = {}
        for book in self.all_books():
            current = best.get(book.year_published)
            if current is None or book.price > current.price:
                best[book.year_published] = book

        return [
            YearTopBookRow(year=year, title=book.title, price=book.price)
            for year, book in sorted(best.items())
        ]

    def authors_with_books_priced_over(self, threshold: Number) -> list[str]:
        """Distinct author names with at least one book priced above ``threshold``."""
        statement = (
            select(AuthorTable.name)
            .join(BookTable, col(BookTable.author_id) == col(AuthorTable.id))
            .where(col(BookTable.price) > threshold)
            .order_by(col(BookTable.id))
        )
        return list(dict.fromkeys(self._session.exec(statement)))

    def books_priced_under_with_author(self, threshold: Number) -> list[BookWithAuthorRow]:
        """Books priced below ``threshold`` with their author, cheapest first."""
        statement = (
            _book_author_join()
            .where(col(BookTable.price) < threshold)
            .order_by(col(BookTable.price), col(BookTable.id))
        )
        return [_book_with_author(book, author) for book, author in self._session.exec(statement)]

    def authors_with_books_in_multiple_years(self) -> list[str]:
        statement = (
            select(AuthorTable.name)
            .join(BookTable, col(BookTable.author_id) == col(AuthorTable.id))
            .group_by(col(AuthorTable.id))
            .having(func.count(distinct(BookTable.year_published)) > 1)
            .order_by(func.min(BookTable.id))
        )
        return list(self._session.exec(statement))

    def books_priced_above_average(self) -> list[Book]:
        """Books priced strictly above the mean price; empty when there are no books."""
        books = self.all_books()
        if not books:
            return []

        average = sum(book.price for book in books) / len(books)
        logger.debug("Average book price is {}", average)
        return [book for book in books if book.price > average]

    def average_price_per_author(self) -> list[AuthorAveragePriceRow]:
        """Mean book price of every author with books, in order of their first book."""
        prices: dict[int, list[Decimal]] = {}
        for book in self.all_books():
            prices.setdefault(book.author_id, []).append(book.price)

        statement = select(AuthorTable.id, AuthorTable.name).where(col(AuthorTable.id).in_(list(prices)))
        names = {author_id: name for author_id, name in self._session.exec(statement)}
        return [
            AuthorAveragePriceRow(
                author_name=names[author_id],
                average_price=sum(author_prices) / len(author_prices),
            )
            for author_id, author_prices in prices.items()
            if author_id in names
        ]

    def books_with_title_longer_than(self, length: int) -> list[Book]:
        statement = (
            select(BookTable)
            .where(func.length(BookTable.title) > length)
            .order_by(col(BookTable.id))
        )
        return self._books(statement)

    def books_by_authors_starting_with(self, initial: str) -> list[BookWithAuthorRow]:
        """Books of every author whose name starts with ``initial`` (case-sensitive)."""
        statement = (
            _book_author_join()
            .where(func.substr(AuthorTable.name, 1, len(initial)) == initial)
            .order_by(col(AuthorTable.id), col(BookTable.id))
        )
        return [_book_with_author(book, author) for book, author in self._session.exec(statement)]

    def authors_by_book_count(self) -> list[AuthorBookCountRow]:
        """Authors with books, most prolific first; ties keep store order."""
        count = func.count(col(BookTable.id))
        statement = (
            select(AuthorTable.name, count)
            .join(BookTable, col(BookTable.author_id) == col(AuthorTable.id))
            .group_by(col(AuthorTable.id))
            .order_by(count.desc(), func.min(BookTable.id))
        )
        return [
            AuthorBookCountRow(author_name=name, book_count=total)
            for name, total in self._session.exec(statement)
        ]

    def unique_publication_years(self) -> list[int]:
        """Distinct publication years in order of first appearance."""
        statement = select(BookTable.year_published).order_by(col(BookTable.id))
        return list(dict.fromkeys(self._session.exec(statement)))
