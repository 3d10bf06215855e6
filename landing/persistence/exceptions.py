"""Persistence layer exceptions.

All persistence exceptions inherit from PersistenceError for easy catching.
"""


class PersistenceError(Exception):
    """Base exception for all persistence layer errors."""

    pass


class DatabaseConnectionError(PersistenceError):
    """Raised when database connection or initialization fails.

    Examples:
    - Invalid database URL format
    - Database file not accessible
    - Database used before init_database()
    """

    pass


class DataIntegrityError(PersistenceError):
    """Raised when a write violates a database constraint.

    For landing pages this means another writer inserted the same slug
    between our read and our insert.
    """

    pass
