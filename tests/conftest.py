"""Test configuration and fixtures."""

from collections.abc import AsyncIterator

import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession

from board.config import DatabaseSettings, Settings
from board.persistence.database import (
    create_engine,
    create_schema,
    create_session_factory,
)


@pytest_asyncio.fixture
async def sqlite_engine() -> AsyncIterator[AsyncEngine]:
    """Fresh in-memory SQLite database with the board schema."""
    settings = Settings(
        environment="test",
        database=DatabaseSettings(url="sqlite+aiosqlite:///:memory:"),
    )
    engine = create_engine(settings)
    await create_schema(engine)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def session(sqlite_engine: AsyncEngine) -> AsyncIterator[AsyncSession]:
    """Session over the in-memory SQLite database."""
    session_factory = create_session_factory(sqlite_engine)
    async with session_factory() as session:
        yield session
