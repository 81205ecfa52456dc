"""Production dependency injection container."""

from typing import Optional

from dishka import AsyncContainer, make_async_container

from board.config import Settings
from board.util.di import PROVIDERS, get_provider
from board.util.di.core import ProdConfigProvider


def create_container(settings: Optional[Settings] = None) -> AsyncContainer:
    """Build the production container (SQL store, Redis counters).

    Args:
        settings: Fixed settings; loaded from the environment when omitted

    Returns:
        Container; open a request scope per operation and close it on
        shutdown to dispose the engine and the Redis client

    Usage:
        container = create_container()
        async with container() as request_container:
            use_case = await request_container.get(FindPostsUseCase)
            response = await use_case.execute(FindPostsRequest(tag="python"))
        await container.close()
    """
    providers = []
    for base in PROVIDERS:
        if base is ProdConfigProvider:
            providers.append(ProdConfigProvider(settings))
        else:
            providers.append(get_provider(base, use_mock=False)())
    return make_async_container(*providers)
