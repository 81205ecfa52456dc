"""Test harness for unit and integration tests.

Settings are loaded from environment variables (configure via .env or export).
"""

from datetime import datetime, timedelta

import pytest_asyncio

from board.util.di import Component
from tests.di import build_test_container

BASE_TIME = datetime(2024, 1, 1, 12, 0, 0)


def at_minute(minute: int) -> datetime:
    """Deterministic timestamps for ordering assertions."""
    return BASE_TIME + timedelta(minutes=minute)


def create_env_fixture(unmock: set[Component] | None = None):
    """Factory for creating test environment fixtures.

    Creates a pytest fixture that:
    - Builds a test container with specified unmocking
    - Yields request-scoped container for service access
    - Closes the container afterwards

    Args:
        unmock: Components to use real implementations for

    Returns:
        Pytest fixture function that yields AsyncContainer

    Usage:
        # Unit tests - everything mocked
        unit_env = create_env_fixture()

        @pytest.mark.asyncio
        async def test_create_post(unit_env):
            service = await unit_env.get(PostService)
            outcome = await service.create_post("Title", "Body", UserName("kane"))
            assert outcome.post_id > 0
    """

    @pytest_asyncio.fixture
    async def _test_environment():
        container = build_test_container(unmock=unmock or set())

        async with container() as request_container:
            yield request_container

        await container.close()

    return _test_environment
