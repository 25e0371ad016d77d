from decimal import Decimal

from sqlmodel import Session

from src.pattern_lab.entities.author import AuthorTable
from src.pattern_lab.entities.book import BookTable


def seed_mock_bookstore(session: Session) -> None:
    """Insert the small fixed dataset the query tests are written against.

    George Orwell (id 1) has two books, Aldous Huxley (id 2) has one.
    """
    session.add_all([
        AuthorTable(id=1, name="George Orwell", age=46),
        AuthorTable(id=2, name="Aldous Huxley", age=69),
    ])
    session.flush()
    session.add_all([
        BookTable(id=1, title="1984", price=Decimal("19.99"), year_published=1949, author_id=1),
        BookTable(id=2, title="Animal Farm", price=Decimal("9.99"), year_published=1945, author_id=1),
        BookTable(id=3, title="Brave New World", price=Decimal("14.99"), year_published=1932, author_id=2),
    ])
    session.commit()


def add_book(session: Session, book_id: int, title: str, price: str, year: int, author_id: int) -> None:
    session.add(BookTable(id=book_id, title=title, price=Decimal(price), year_published=year, author_id=author_id))
    session.commit()
