from fastapi import HTTPException, Request

from database.db_manager import DatabaseManager
from database.exceptions import (
    AuthorizationError,
    DatabaseError,
    DuplicateError,
    IntegrityError,
    InvalidStateError,
    NotFoundError,
)

_STATUS_CODES = {
    NotFoundError: 404,
    AuthorizationError: 403,
    InvalidStateError: 409,
    DuplicateError: 409,
    IntegrityError: 400,
}


def get_db(request: Request) -> DatabaseManager:
    """FastAPI dependency that provides the DatabaseManager."""
    return request.app.state.db_manager


def http_error(exc: DatabaseError) -> HTTPException:
    """Map a repository error onto the matching HTTP status."""
    for error_type, status_code in _STATUS_CODES.items():
        if isinstance(exc, error_type):
            return HTTPException(status_code, str(exc))
    return HTTPException(500, str(exc))
