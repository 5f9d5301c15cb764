"""Database connection and session management.

Provides the async engine, session factory and schema bootstrap. SQLite
(via aiosqlite) is the default backend; PostgreSQL (via asyncpg) works with
the same code.
"""

from typing import Any

from sqlalchemy import Connection, event
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from tome.config import Settings
from tome.persistence.tables import metadata


def _enable_sqlite_wal(dbapi_connection: Any, _connection_record: Any) -> None:
    """Switch SQLite connections to WAL for concurrent readers."""
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA journal_mode=WAL")
    cursor.close()


def create_engine(settings: Settings) -> AsyncEngine:
    """Create async database engine.

    Args:
        settings: Application settings with database URL

    Returns:
        Configured async engine
    """
    url = make_url(settings.database_url)
    is_sqlite = url.get_backend_name() == "sqlite"

    engine_kwargs: dict[str, Any] = {
        "echo": settings.debug,  # Log SQL queries in debug mode
        "pool_pre_ping": True,  # Verify connections before using
    }
    if not is_sqlite:
        engine_kwargs["pool_size"] = settings.database.pool_size
        engine_kwargs["max_overflow"] = settings.database.max_overflow

    engine = create_async_engine(url, **engine_kwargs)

    if is_sqlite:
        event.listen(engine.sync_engine, "connect", _enable_sqlite_wal)

    return engine


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Create async session factory.

    Args:
        engine: Database engine

    Returns:
        Session factory for creating database sessions
    """
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,  # Don't expire objects after commit
        autoflush=False,  # Manual flushing for better control
        autocommit=False,  # Explicit transaction management
    )


def create_schema(connection: Connection) -> None:
    """Create tables and indexes that do not exist yet.

    Safe to run on every start; existing objects are left untouched.

    Args:
        connection: Synchronous connection (use with ``run_sync``)
    """
    metadata.create_all(connection, checkfirst=True)
