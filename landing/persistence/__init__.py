"""Persistence layer for published landing pages.

This module provides:
- Database initialization and session management
- The landing_pages ORM model
- LandingPageRepository with compare-and-swap writes
- Persistence exceptions
"""

from .database import close_database, get_engine, get_session, init_database
from .exceptions import DatabaseConnectionError, DataIntegrityError, PersistenceError
from .repositories import LandingPageRepository

__all__ = [
    # Database management
    "init_database",
    "get_session",
    "get_engine",
    "close_database",
    # Repositories
    "LandingPageRepository",
    # Exceptions
    "PersistenceError",
    "DatabaseConnectionError",
    "DataIntegrityError",
]
