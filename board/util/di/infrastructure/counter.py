"""Like counter store infrastructure providers."""

from collections.abc import AsyncIterator

from dishka import Scope, provide
from redis.asyncio import Redis

from board.adapter.counter import RedisLikeCounterGateway
from board.config import Settings
from board.domain.gateway import LikeCounterGateway
from board.util.di.base import ProviderBase
from board.util.observability import instrument_redis


class CounterProvider(ProviderBase):
    """Like counter component base."""

    __mock_component__ = "counter"


class ProdCounterProvider(CounterProvider):
    """Production like counter provider using Redis."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    async def get_redis(self, settings: Settings) -> AsyncIterator[Redis]:
        """Provide Redis client, closed when the container closes."""
        instrument_redis()
        client = Redis.from_url(settings.redis.url)
        yield client
        await client.aclose()

    @provide(scope=Scope.APP)
    def get_like_counter(self, redis: Redis, settings: Settings) -> LikeCounterGateway:
        """Provide Redis-backed like counter gateway."""
        return RedisLikeCounterGateway(redis, key_prefix=settings.redis.key_prefix)
