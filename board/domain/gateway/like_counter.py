"""Like counter gateway interface."""

from abc import ABC, abstractmethod
from typing import Sequence

from board.domain.value import PostId, UserName


class LikeCounterGateway(ABC):
    """Per-post like counters living in a fast key-counter store.

    Counters are not part of the relational store and may lag recent writes.
    A post without a counter has zero likes; reading it is never an error.
    Each (post, liker) pair is counted at most once.
    """

    @abstractmethod
    async def increment(self, post_id: PostId, liker_id: UserName) -> int:
        """Record a like.

        Args:
            post_id: Liked post
            liker_id: Identity of the liker

        Returns:
            The post's like count after the operation
        """
        pass

    @abstractmethod
    async def decrement(self, post_id: PostId, liker_id: UserName) -> int:
        """Withdraw a like previously recorded for the liker.

        Args:
            post_id: Liked post
            liker_id: Identity of the liker

        Returns:
            The post's like count after the operation
        """
        pass

    @abstractmethod
    async def count(self, post_id: PostId) -> int:
        """Read the like count of one post (0 if unknown)."""
        pass

    @abstractmethod
    async def count_batch(self, post_ids: Sequence[PostId]) -> dict[PostId, int]:
        """Read the like counts of several posts in a single round trip.

        Args:
            post_ids: Posts to look up

        Returns:
            Mapping with an entry for every requested id (0 if unknown)
        """
        pass
