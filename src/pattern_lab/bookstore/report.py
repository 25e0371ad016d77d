"""Printed reports for the bookstore query exercises."""

from src.pattern_lab.bookstore.queries import BookstoreQueryService, Number
from src.pattern_lab.core.console import Narrator
from src.pattern_lab.entities.book import Book


def format_book(book: Book) -> str:
    return (
        f"Title: {book.title}, Price: {book.price}, "
        f"Year Published: {book.year_published}, Author ID: {book.author_id}"
    )


class BookstoreReport:
    """Prints each query's result under a heading, one line per row."""

    def __init__(self, queries: BookstoreQueryService, narrator: Narrator) -> None:
        self._queries = queries
        self._narrator = narrator

    def _lines(self, heading: str, lines) -> None:
        self._narrator.heading(heading)
        for line in lines:
            self._narrator.line(line)

    def print_all_books(self) -> None:
        self._lines("All books:", map(format_book, self._queries.all_books()))

    def print_books_published_in(self, year: int) -> None:
        self._lines(
            f"Books published in {year}:",
            map(format_book, self._queries.books_published_in(year)),
        )

    def print_authors_and_their_books(self) -> None:
        self._lines(
            "All authors and their books:",
            (
                f"Title : {row.title}, Price : {row.price}, "
                f"Published in : {row.year_published}, Author Name : {row.author_name}"
                for row in self._queries.authors_and_their_books()
            ),
        )

    def print_books_priced_between(self, minimum: Number, maximum: Number) -> None:
        self._lines(
            f"Books with price between {minimum} and {maximum}:",
            (
                f"Title: {book.title}, Price: {book.price}"
                for book in self._queries.books_priced_between(minimum, maximum)
            ),
        )

    def print_authors_with_more_books_than(self, book_count: int = 2) -> None:
        heading = (
            "Authors who have written more than two books:"
            if book_count == 2
            else f"Authors who have written more than {book_count} books:"
        )
        self._lines(
            heading,
            (
                f"Name: {row.author_name}, Number of books written: {row.book_count}"
                for row in self._queries.authors_with_more_books_than(book_count)
            ),
        )

    def print_books_with_title_containing(self, text: str) -> None:
        self._lines(
            f"Books with title containing '{text}':",
            (f"Title: {book.title}" for book in self._queries.books_with_title_containing(text)),
        )

    def print_authors_in_age_range(self, minimum: int, maximum: int) -> None:
        self._lines(
            f"Authors in age range {minimum} - {maximum} in order:",
            (
                f"Name: {row.name}, Age: {row.age}"
                for row in self._queries.authors_in_age_range(minimum, maximum)
            ),
        )

    def print_authors_with_book_in(self, year: int = 2024) -> None:
        self._lines(
            f"Authors who have written a book in {year}:",
            (f"Name: {name}" for name in self._queries.authors_with_book_in(year)),
        )

    def print_most_expensive_book(self) -> None:
        book = self._queries.most_expensive_book()
        self._narrator.heading("Most expensive book:")
        if book is not None:
            self._narrator.line(f"Title: {book.title}, Price: {book.price}")
        else:
            self._narrator.line("No books found.")

    def print_books_by_author(self, author_name: str) -> None:
        self._lines(
            f"Books by author '{author_name}':",
            (
                f"Title: {book.title}, Price: {book.price}, Year Published: {book.year_published}"
                for book in self._queries.books_by_author(author_name)
            ),
        )

    def print_most_expensive_book_per_year(self) -> None:
        self._lines(
            "Most expensive book by year:",
            (
                f"Year: {row.year}, Title: {row.title}, Price: {row.price}"
                for row in self._queries.most_expensive_book_per_year()
            ),
        )

    def print_authors_with_books_priced_over(self, threshold: Number) -> None:
        self._lines(
            f"Authors with books priced over {threshold}:",
            (f"Author: {name}" for name in self._queries.authors_with_books_priced_over(threshold)),
        )

    def print_books_priced_under_with_author(self, threshold: Number) -> None:
        self._lines(
            f"Books with price less than {threshold}:",
            (
                f"Book Title: {row.title}, Author Name: {row.author_name}, Price: {row.price}"
                for row in self._queries.books_priced_under_with_author(threshold)
            ),
        )

    def print_authors_with_books_in_multiple_years(self) -> None:
        self._lines(
            "Authors with books published in multiple years:",
            (f"Author: {name}" for name in self._queries.authors_with_books_in_multiple_years()),
        )

    def print_books_priced_above_average(self) -> None:
        self._lines(
            "Books priced above average:",
            (
                f"Title: {book.title}, Price: {book.price}"
                for book in self._queries.books_priced_above_average()
            ),
        )

    def print_average_price_per_author(self) -> None:
        self._lines(
            "Average book price per author:",
            (
                f"Author: {row.author_name}, Average Price: {row.average_price}"
                for row in self._queries.average_price_per_author()
            ),
        )

    def print_books_with_title_longer_than(self, length: int) -> None:
        self._lines(
            f"Books with title longer than {length} characters:",
            (f"Title: {book.title}" for book in self._queries.books_with_title_longer_than(length)),
        )

    def print_books_by_authors_starting_with(self, initial: str) -> None:
        self._lines(
            f"Books by authors whose name starts with '{initial}':",
            (
                f"Title: {row.title}, Author Name: {row.author_name}"
                for row in self._queries.books_by_authors_starting_with(initial)
            ),
        )

    def print_authors_by_book_count(self) -> None:
        self._lines(
            "Authors ordered by book count:",
            (
                f"Author: {row.author_name}, Book Count: {row.book_count}"
                for row in self._queries.authors_by_book_count()
            ),
        )

    def print_unique_publication_years(self) -> None:
        self._lines(
            "Unique publication years:",
            (f"Year: {year}" for year in self._queries.unique_publication_years()),
        )

    def run_all(self) -> None:
        """Print every report with the exercise's standard parameters."""
        self.print_all_books()
        self.print_books_published_in(2000)
        self.print_authors_and_their_books()
        self.print_books_priced_between(10, 20)
        self.print_authors_with_more_books_than(2)
        self.print_books_with_title_containing("Harry")
        self.print_authors_in_age_range(50, 70)
        self.print_authors_with_book_in(2024)
        self.print_most_expensive_book()
        self.print_books_by_author("J.K. Rowling")
        self.print_most_expensive_book_per_year()
        self.print_authors_with_books_priced_over(20)
        self.print_books_priced_under_with_author(15)
        self.print_authors_with_books_in_multiple_years()
        self.print_books_priced_above_average()
        self.print_average_price_per_author()
        self.print_books_with_title_longer_than(20)
        self.print_books_by_authors_starting_with("J")
        self.print_authors_by_book_count()
        self.print_unique_publication_years()
