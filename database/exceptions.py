class DatabaseError(Exception):
    """Base for all database errors."""


class NotFoundError(DatabaseError):
    """Entity not found."""


class DuplicateError(DatabaseError):
    """Unique constraint violation."""


class IntegrityError(DatabaseError):
    """Foreign key or check constraint violation."""


class AuthorizationError(DatabaseError):
    """Actor lacks the role or team membership the action needs."""


class InvalidStateError(DatabaseError):
    """Action not allowed from the record's current state."""
