from database.connection import DatabasePool, db
from database.db_manager import DatabaseManager
from database.repositories import (
    FeedRepositoryDB,
    PowerupRepositoryDB,
    ScoreRepositoryDB,
    TeamRepositoryDB,
    UserRepositoryDB,
)
from database.exceptions import (
    AuthorizationError,
    DatabaseError,
    DuplicateError,
    IntegrityError,
    InvalidStateError,
    NotFoundError,
)

__all__ = [
    "DatabasePool",
    "db",
    "DatabaseManager",
    "TeamRepositoryDB",
    "UserRepositoryDB",
    "ScoreRepositoryDB",
    "PowerupRepositoryDB",
    "FeedRepositoryDB",
    "DatabaseError",
    "NotFoundError",
    "DuplicateError",
    "IntegrityError",
    "AuthorizationError",
    "InvalidStateError",
]
