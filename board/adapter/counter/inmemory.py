"""In-memory like counters for testing."""

from collections import defaultdict
from typing import Sequence

from board.domain.gateway import LikeCounterGateway
from board.domain.value import PostId, UserName


class InMemoryLikeCounterGateway(LikeCounterGateway):
    """In-memory implementation of LikeCounterGateway for testing.

    Mirrors the Redis semantics (one like per liker, missing = 0) and
    records how many batch lookups were made.
    """

    def __init__(self) -> None:
        self._likers: dict[PostId, set[str]] = defaultdict(set)
        self.batch_calls: list[list[PostId]] = []

    async def increment(self, post_id: PostId, liker_id: UserName) -> int:
        """Record a like once per liker."""
        self._likers[post_id].add(liker_id)
        return len(self._likers[post_id])

    async def decrement(self, post_id: PostId, liker_id: UserName) -> int:
        """Withdraw a liker's like, if recorded."""
        self._likers[post_id].discard(liker_id)
        return len(self._likers[post_id])

    async def count(self, post_id: PostId) -> int:
        """Read one counter."""
        return len(self._likers.get(post_id, ()))

    async def count_batch(self, post_ids: Sequence[PostId]) -> dict[PostId, int]:
        """Read many counters, remembering the call."""
        self.batch_calls.append(list(post_ids))
        return {post_id: len(self._likers.get(post_id, ())) for post_id in post_ids}
