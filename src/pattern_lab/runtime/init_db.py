"""Database initialization script."""

from src.pattern_lab.bookstore.seed import seed_if_empty
from src.pattern_lab.core.services.database import DbManageService, DbSessionService


def init_db(db_session_service: DbSessionService | None = None, seed: bool = False) -> DbSessionService:
    """Create all bookstore tables, optionally seeding the standard dataset."""
    db_session_service = db_session_service or DbSessionService()
    DbManageService(db_session_service).create_all()

    if seed:
        with db_session_service.session_scope() as session:
            seed_if_empty(session)

    return db_session_service


if __name__ == "__main__":
    init_db(seed=True)
