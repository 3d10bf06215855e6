"""Database engine and session lifecycle for published landing pages.

init_database() is called once at startup; every unit of work then runs in
get_session(), which commits on success and rolls back on any exception.
"""

from contextlib import contextmanager
from pathlib import Path
from typing import Generator, Optional

from sqlalchemy import create_engine, event, text
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.exc import ArgumentError
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from landing.logging import get_logger

from .exceptions import DatabaseConnectionError

# Module-level engine and session factory
_engine: Optional[Engine] = None
_session_factory: Optional[sessionmaker] = None

logger = get_logger(__name__, component="database")


def init_database(database_url: str) -> None:
    """Create the engine, check the connection and create missing tables.

    SQLite file databases get their parent directory created. In-memory SQLite
    shares one connection so every session sees the same tables.

    Args:
        database_url: SQLAlchemy URL, e.g. "sqlite:///./data/landing_pages.db"

    Raises:
        DatabaseConnectionError: If the URL is invalid or the database is unreachable
    """
    global _engine, _session_factory

    if not database_url or not isinstance(database_url, str):
        raise DatabaseConnectionError("Database URL must be a non-empty string")

    try:
        url = make_url(database_url)
    except ArgumentError as e:
        raise DatabaseConnectionError(f"Invalid database URL: {e}") from e

    logger.info(
        "Initializing database",
        extra={"event": "database.initializing", "database_url": url.render_as_string(hide_password=True)},
    )

    is_sqlite = url.get_backend_name() == "sqlite"
    in_memory = is_sqlite and url.database in (None, "", ":memory:")

    try:
        engine_kwargs = {"pool_pre_ping": True}
        if is_sqlite:
            engine_kwargs["connect_args"] = {"check_same_thread": False, "timeout": 30}
            if in_memory:
                engine_kwargs["poolclass"] = StaticPool
            else:
                _ensure_directory(url.database)

        engine = create_engine(url, **engine_kwargs)
        if is_sqlite:
            _configure_sqlite(engine, in_memory)

        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))

        from .schema import create_schema

        create_schema(engine)
    except DatabaseConnectionError:
        raise
    except Exception as e:
        logger.error(f"Failed to initialize database: {e}", exc_info=True, extra={"event": "database.init_failed"})
        raise DatabaseConnectionError(f"Failed to initialize database: {e}") from e

    _engine = engine
    _session_factory = sessionmaker(bind=engine, autoflush=True, expire_on_commit=False)

    logger.info("Database ready", extra={"event": "database.ready"})


def _ensure_directory(database_path: str) -> None:
    parent = Path(database_path).parent
    if not parent.exists():
        logger.info(f"Creating database directory: {parent}")
        parent.mkdir(parents=True, exist_ok=True)


def _configure_sqlite(engine: Engine, in_memory: bool) -> None:
    @event.listens_for(engine, "connect")
    def set_sqlite_pragma(dbapi_conn, connection_record):
        cursor = dbapi_conn.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        if not in_memory:
            cursor.execute("PRAGMA journal_mode=WAL")
        cursor.close()


@contextmanager
def get_session() -> Generator[Session, None, None]:
    """Provide a session that commits on success and rolls back on error.

    Yields:
        Session: SQLAlchemy session for database operations

    Raises:
        DatabaseConnectionError: If init_database() has not been called

    Example:
        >>> with get_session() as session:
        ...     page = LandingPageRepository(session).get_by_slug("acme-robotics-0125")
    """
    if _session_factory is None:
        raise DatabaseConnectionError("Database not initialized. Call init_database() before using get_session()")

    session = _session_factory()
    try:
        yield session
        session.commit()
    except Exception as e:
        session.rollback()
        logger.warning(
            f"Database session rolled back due to exception: {e}",
            extra={"event": "database.session.rolled_back", "error_type": type(e).__name__},
        )
        raise
    finally:
        session.close()


def get_engine() -> Engine:
    """Return the engine created by init_database()."""
    if _engine is None:
        raise DatabaseConnectionError("Database not initialized. Call init_database() before using get_engine()")
    return _engine


def close_database() -> None:
    """Dispose of the engine; safe to call when not initialized."""
    global _engine, _session_factory

    if _engine is not None:
        _engine.dispose()
        _engine = None
        _session_factory = None
        logger.info("Database connections closed", extra={"event": "database.closed"})
