"""Database connection and session management.

Provides async database engine and session factory.
"""

from typing import Any

from sqlalchemy import event
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from board.config import Settings
from board.persistence.tables import metadata


def create_engine(settings: Settings) -> AsyncEngine:
    """Create async database engine.

    Args:
        settings: Application settings with database URL

    Returns:
        Configured async engine
    """
    url = make_url(settings.database.url)
    kwargs: dict[str, Any] = {
        "echo": settings.debug,  # Log SQL queries in debug mode
        "pool_pre_ping": True,  # Verify connections before using
    }
    if url.get_backend_name() != "sqlite":
        kwargs["pool_size"] = settings.database.pool_size
        kwargs["max_overflow"] = settings.database.max_overflow

    engine = create_async_engine(url, **kwargs)
    if url.get_backend_name() == "sqlite":
        configure_sqlite_connections(engine)
    return engine


def configure_sqlite_connections(engine: AsyncEngine) -> None:
    """Align SQLite connections with PostgreSQL semantics.

    Turns on FK enforcement (and ON DELETE CASCADE) and makes LIKE case
    sensitive, so title search matches the same rows on both backends.
    """

    @event.listens_for(engine.sync_engine, "connect")
    def _set_pragma(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.execute("PRAGMA case_sensitive_like=ON")
        cursor.close()


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


async def create_schema(engine: AsyncEngine) -> None:
    """Create all board tables that don't exist yet.

    Used for local development and tests; production schemas are managed
    outside this package.
    """
    async with engine.begin() as conn:
        await conn.run_sync(metadata.create_all)
