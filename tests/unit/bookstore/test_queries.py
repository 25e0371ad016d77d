"""Unit tests for the bookstore queries over the mock dataset."""

from decimal import Decimal

import pytest

from src.pattern_lab.bookstore import BookstoreQueryService
from src.pattern_lab.bookstore.rows import AuthorAgeRow, AuthorBookCountRow, YearTopBookRow
from tests.utils import add_book


@pytest.fixture
def queries(bookstore_session) -> BookstoreQueryService:
    return BookstoreQueryService(bookstore_session)


def titles(books) -> list[str]:
    return [book.title for book in books]


class TestBookQueries:
    """Test the queries that return books."""

    def test_all_books_in_store_order(self, queries):
        books = queries.all_books()

        assert titles(books) == ["1984", "Animal Farm", "Brave New World"]
        assert books[0].price == Decimal("19.99")
        assert books[0].year_published == 1949
        assert books[0].author_id == 1

    def test_books_published_in(self, queries):
        assert titles(queries.books_published_in(1949)) == ["1984"]
        assert queries.books_published_in(2000) == []

    def test_books_priced_between_is_inclusive(self, queries):
        assert titles(queries.books_priced_between(10, 20)) == ["1984", "Brave New World"]
        assert titles(queries.books_priced_between(Decimal("9.99"), Decimal("14.99"))) == [
            "Animal Farm",
            "Brave New World",
        ]

    def test_title_containing_is_case_sensitive(self, queries):
        assert titles(queries.books_with_title_containing("Brave")) == ["Brave New World"]
        assert queries.books_with_title_containing("brave") == []

    def test_books_by_author(self, queries):
        assert titles(queries.books_by_author("George Orwell")) == ["1984", "Animal Farm"]
        assert queries.books_by_author("Nobody") == []

    def test_books_with_title_longer_than(self, queries):
        assert titles(queries.books_with_title_longer_than(10)) == ["Animal Farm", "Brave New World"]
        assert titles(queries.books_with_title_longer_than(11)) == ["Brave New World"]

    def test_books_priced_above_average(self, queries):
        assert titles(queries.books_priced_above_average()) == ["1984"]

    def test_books_priced_above_average_with_no_books(self, session):
        assert BookstoreQueryService(session).books_priced_above_average() == []


class TestMostExpensive:
    def test_most_expensive_book(self, queries):
        book = queries.most_expensive_book()
        assert book is not None
        assert (book.title, book.price) == ("1984", Decimal("19.99"))

    def test_most_expensive_tie_picks_last_stored(self, bookstore_session):
        add_book(bookstore_session, 4, "Homage to Catalonia", "19.99", 1938, 1)

        book = BookstoreQueryService(bookstore_session).most_expensive_book()

        assert book.title == "Homage to Catalonia"

    def test_most_expensive_with_no_books(self, session):
        assert BookstoreQueryService(session).most_expensive_book() is None

    def test_most_expensive_per_year_sorted_by_year(self, queries):
        assert queries.most_expensive_book_per_year() == [
            YearTopBookRow(year=1932, title="Brave New World", price=Decimal("14.99")),
            YearTopBookRow(year=1945, title="Animal Farm", price=Decimal("9.99")),
            YearTopBookRow(year=1949, title="1984", price=Decimal("19.99")),
        ]

    def test_most_expensive_per_year_tie_keeps_first_stored(self, bookstore_session):
        add_book(bookstore_session, 4, "Nineteen Eighty-Four", "19.99", 1949, 1)
        add_book(bookstore_session, 5, "Island", "24.99", 1932, 2)

        rows = BookstoreQueryService(bookstore_session).most_expensive_book_per_year()

        assert [(row.year, row.title) for row in rows] == [
            (1932, "Island"),
            (1945, "Animal Farm"),
            (1949, "1984"),
        ]


class TestAuthorQueries:
    """Test the queries that return authors or joined rows."""

    def test_authors_and_their_books(self, queries):
        rows = queries.authors_and_their_books()

        assert [(row.title, row.author_name) for row in rows] == [
            ("1984", "George Orwell"),
            ("Animal Farm", "George Orwell"),
            ("Brave New World", "Aldous Huxley"),
        ]

    def test_authors_with_more_books_than(self, queries):
        assert queries.authors_with_more_books_than() == []
        assert queries.authors_with_more_books_than(1) == [
            AuthorBookCountRow(author_name="George Orwell", book_count=2)
        ]

    def test_authors_in_age_range_ordered_by_age(self, queries):
        assert queries.authors_in_age_range(40, 70) == [
            AuthorAgeRow(name="George Orwell", age=46),
            AuthorAgeRow(name="Aldous Huxley", age=69),
        ]
        assert queries.authors_in_age_range(50, 69) == [AuthorAgeRow(name="Aldous Huxley", age=69)]

    def test_authors_with_book_in_year(self, queries):
        assert queries.authors_with_book_in(1949) == ["George Orwell"]
        assert queries.authors_with_book_in() == []

    def test_authors_with_book_in_year_repeats_per_book(self, bookstore_session):
        add_book(bookstore_session, 4, "Coming Up for Air", "11.99", 1949, 1)

        names = BookstoreQueryService(bookstore_session).authors_with_book_in(1949)

        assert names == ["George Orwell", "George Orwell"]

    def test_authors_with_books_priced_over_are_distinct(self, queries):
        assert queries.authors_with_books_priced_over(9) == ["George Orwell", "Aldous Huxley"]
        assert queries.authors_with_books_priced_over(15) == ["George Orwell"]
        assert queries.authors_with_books_priced_over(Decimal("19.99")) == []

    def test_books_priced_under_with_author_ordered_by_price(self, queries):
        rows = queries.books_priced_under_with_author(15)

        assert [(row.title, row.author_name, row.price) for row in rows] == [
            ("Animal Farm", "George Orwell", Decimal("9.99")),
            ("Brave New World", "Aldous Huxley", Decimal("14.99")),
        ]

    def test_authors_with_books_in_multiple_years(self, queries):
        assert queries.authors_with_books_in_multiple_years() == ["George Orwell"]

    def test_average_price_per_author(self, queries):
        rows = queries.average_price_per_author()

        assert [(row.author_name, row.average_price) for row in rows] == [
            ("George Orwell", Decimal("14.99")),
            ("Aldous Huxley", Decimal("14.99")),
        ]

    def test_books_by_authors_starting_with(self, queries):
        rows = queries.books_by_authors_starting_with("G")
        assert [(row.title, row.author_name) for row in rows] == [
            ("1984", "George Orwell"),
            ("Animal Farm", "George Orwell"),
        ]
        assert queries.books_by_authors_starting_with("g") == []

    def test_authors_by_book_count(self, queries):
        assert queries.authors_by_book_count() == [
            AuthorBookCountRow(author_name="George Orwell", book_count=2),
            AuthorBookCountRow(author_name="Aldous Huxley", book_count=1),
        ]

    def test_authors_by_book_count_ties_keep_store_order(self, bookstore_session):
        add_book(bookstore_session, 4, "Island", "12.99", 1962, 2)

        rows = BookstoreQueryService(bookstore_session).authors_by_book_count()

        assert [row.author_name for row in rows] == ["George Orwell", "Aldous Huxley"]

    def test_unique_publication_years(self, queries):
        assert queries.unique_publication_years() == [1949, 1945, 1932]
