"""Like counter store adapters."""

from .inmemory import InMemoryLikeCounterGateway
from .redis_counter import RedisLikeCounterGateway

__all__ = ["InMemoryLikeCounterGateway", "RedisLikeCounterGateway"]
