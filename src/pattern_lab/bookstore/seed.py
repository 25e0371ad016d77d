"""Seed data for the bookstore exercises."""

from decimal import Decimal

from loguru import logger
from sqlmodel import Session

from src.pattern_lab.core.exceptions import DatasetAlreadySeededError
from src.pattern_lab.entities.author import AuthorRepository, AuthorTable
from src.pattern_lab.entities.book import BookTable

# (name, age, [(title, price, year published), ...])
SEED_AUTHORS: list[tuple[str, int, list[tuple[str, str, int]]]] = [
    ("George Orwell", 46, [
        ("1984", "19.99", 1949),
    ]),
    ("J.K. Rowling", 58, [
        ("Harry Potter and the Philosopher's Stone", "24.99", 1997),
        ("Harry Potter and the Chamber of Secrets", "24.99", 1998),
        ("Harry Potter and the Prisoner of Azkaban", "24.99", 1999),
        ("Harry Potter and the Goblet of Fire", "24.99", 2000),
        ("Harry Potter and the Order of the Phoenix", "24.99", 2003),
        ("Harry Potter and the Half-Blood Prince", "24.99", 2005),
        ("Harry Potter and the Deathly Hallows", "24.99", 2007),
    ]),
    ("J.R.R. Tolkien", 81, [
        ("The Hobbit", "15.99", 1937),
        ("The Lord of the Rings: The Fellowship of the Ring", "29.99", 1954),
        ("The Lord of the Rings: The Two Towers", "29.99", 1954),
        ("The Lord of the Rings: The Return of the King", "29.99", 1955),
        ("The Silmarillion", "24.99", 1977),
    ]),
    ("Agatha Christie", 85, [
        ("Murder on the Orient Express", "12.99", 1934),
        ("And Then There Were None", "12.99", 1939),
        ("The Murder of Roger Ackroyd", "12.99", 1926),
        ("The ABC Murders", "12.99", 1936),
    ]),
    ("Stephen King", 76, [
        ("The Shining", "18.99", 1977),
        ("It", "18.99", 1986),
        ("Misery", "18.99", 1987),
        ("Carrie", "18.99", 1974),
        ("Pet Sematary", "18.99", 1983),
        ("The Dark Tower: The Gunslinger", "18.99", 1982),
        ("The Dark Tower: The Drawing of the Three", "18.99", 1987),
        ("The Dark Tower: The Waste Lands", "18.99", 1991),
        ("The Dark Tower: Wizard and Glass", "18.99", 1997),
        ("The Dark Tower: Wolves of the Calla", "18.99", 2003),
        ("The Dark Tower: Song of Susannah", "18.99", 2004),
        ("The Dark Tower: The Dark Tower", "18.99", 2004),
    ]),
    ("Isaac Asimov", 72, [
        ("Foundation", "14.99", 1951),
        ("Foundation and Empire", "14.99", 1952),
        ("Second Foundation", "14.99", 1953),
        ("Foundation's Edge", "14.99", 1982),
        ("Foundation and Earth", "14.99", 1986),
        ("The Gods Themselves", "14.99", 1972),
    ]),
    ("J.D. Salinger", 91, [
        ("The Catcher in the Rye", "10.99", 1951),
    ]),
    ("H.G. Wells", 79, [
        ("The War of the Worlds", "13.99", 1898),
        ("The Invisible Man", "13.99", 1897),
        ("The Time Machine", "13.99", 1895),
        ("The Island of Doctor Moreau", "13.99", 1896),
    ]),
    ("Orson Scott Card", 71, [
        ("Ender's Game", "16.99", 1985),
        ("Speaker for the Dead", "16.99", 1986),
        ("Xenocide", "16.99", 1991),
        ("Children of the Mind", "16.99", 1996),
    ]),
    ("Philip K. Dick", 53, [
        ("Do Androids Dream of Electric Sheep?", "15.99", 1968),
        ("The Man in the High Castle", "15.99", 1962),
        ("Ubik", "15.99", 1969),
        ("A Scanner Darkly", "15.99", 1977),
    ]),
    ("Douglas Adams", 59, [
        ("The Hitchhiker's Guide to the Galaxy", "14.99", 1979),
        ("The Restaurant at the End of the Universe", "14.99", 1980),
        ("Life, the Universe and Everything", "14.99", 1982),
        ("So Long, and Thanks for All the Fish", "14.99", 1984),
        ("Mostly Harmless", "14.99", 1992),
    ]),
    ("Margaret Atwood", 83, [
        ("The Handmaid's Tale", "18.99", 1985),
        ("Oryx and Crake", "18.99", 2003),
        ("The Year of the Flood", "18.99", 2009),
        ("MaddAddam", "18.99", 2013),
    ]),
]


def build_author(name: str, age: int, books: list[tuple[str, str, int]]) -> AuthorTable:
    """Build an author row with its books attached through the relationship."""
    return AuthorTable(
        name=name,
        age=age,
        books=[
            BookTable(title=title, price=Decimal(price), year_published=year)
            for title, price, year in books
        ],
    )


def seed_database(
    session: Session,
    authors: list[tuple[str, int, list[tuple[str, str, int]]]] | None = None,
) -> int:
    """Insert ``authors`` (the standard dataset by default) with their books.

    Returns:
        The number of authors inserted.

    Raises:
        DatasetAlreadySeededError: If the database already holds authors.
    """
    repository = AuthorRepository(session)
    existing = repository.count()
    if existing:
        raise DatasetAlreadySeededError(
            f"Bookstore database already holds {existing} authors"
        )

    dataset = SEED_AUTHORS if authors is None else authors
    for name, age, books in dataset:
        repository.add(build_author(name, age, books))

    logger.info(
        "Seeded {} authors and {} books",
        len(dataset),
        sum(len(books) for _, _, books in dataset),
    )
    return len(dataset)


def seed_if_empty(session: Session) -> bool:
    """Seed the standard dataset unless authors already exist.

    Returns:
        True when the dataset was inserted.
    """
    if AuthorRepository(session).count():
        logger.debug("Bookstore database already seeded; skipping")
        return False
    seed_database(session)
    return True
