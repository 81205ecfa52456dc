"""Redis-backed like counters.

Each post has two keys:
- ``{prefix}:post:{id}:count``: the like counter
- ``{prefix}:post:{id}:likers``: set of identities that liked the post

Likes and unlikes run as server-side Lua scripts, so membership check and
counter update are one atomic operation per key pair.
"""

from typing import Sequence

import logfire
from redis.asyncio import Redis

from board.domain.gateway import LikeCounterGateway
from board.domain.value import PostId, UserName

LIKE_SCRIPT = """
if redis.call('SADD', KEYS[2], ARGV[1]) == 1 then
    return redis.call('INCR', KEYS[1])
end
return tonumber(redis.call('GET', KEYS[1]) or '0')
"""

UNLIKE_SCRIPT = """
local count = tonumber(redis.call('GET', KEYS[1]) or '0')
if redis.call('SREM', KEYS[2], ARGV[1]) == 1 and count > 0 then
    return redis.call('DECR', KEYS[1])
end
return math.max(count, 0)
"""


def _as_count(value) -> int:
    """Missing keys and counters driven below zero read as 0."""
    if value is None:
        return 0
    return max(int(value), 0)


class RedisLikeCounterGateway(LikeCounterGateway):
    """Like counters stored in Redis.

    Connection and command errors from redis-py are not caught here; they
    propagate to the caller as storage failures.
    """

    def __init__(self, redis: Redis, key_prefix: str = "board") -> None:
        """Initialize gateway.

        Args:
            redis: Async Redis client
            key_prefix: Namespace for all keys written by the gateway
        """
        self.redis = redis
        self.key_prefix = key_prefix
        self._like = redis.register_script(LIKE_SCRIPT)
        self._unlike = redis.register_script(UNLIKE_SCRIPT)

    def count_key(self, post_id: PostId) -> str:
        return f"{self.key_prefix}:post:{post_id}:count"

    def likers_key(self, post_id: PostId) -> str:
        return f"{self.key_prefix}:post:{post_id}:likers"

    async def increment(self, post_id: PostId, liker_id: UserName) -> int:
        """Record a like once per liker."""
        with logfire.span("like_counter.increment", post_id=post_id, liker=liker_id):
            count = await self._like(
                keys=[self.count_key(post_id), self.likers_key(post_id)],
                args=[liker_id],
            )
            return _as_count(count)

    async def decrement(self, post_id: PostId, liker_id: UserName) -> int:
        """Withdraw a liker's like, if recorded."""
        with logfire.span("like_counter.decrement", post_id=post_id, liker=liker_id):
            count = await self._unlike(
                keys=[self.count_key(post_id), self.likers_key(post_id)],
                args=[liker_id],
            )
            return _as_count(count)

    async def count(self, post_id: PostId) -> int:
        """Read one counter (missing key reads as 0)."""
        value = await self.redis.get(self.count_key(post_id))
        return _as_count(value)

    async def count_batch(self, post_ids: Sequence[PostId]) -> dict[PostId, int]:
        """Read many counters with a single MGET."""
        if not post_ids:
            return {}

        with logfire.span("like_counter.count_batch", count=len(post_ids)):
            values = await self.redis.mget(
                [self.count_key(post_id) for post_id in post_ids]
            )
            return {
                post_id: _as_count(value)
                for post_id, value in zip(post_ids, values)
            }
