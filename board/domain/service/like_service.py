"""Like domain service."""

import logfire

from board.domain.gateway import LikeCounterGateway
from board.domain.repository import PostRepository
from board.domain.value import PostId, UserName

from .base import Service
from .outcome import LikeRecorded, LikeResult, PostNotFound


class LikeService(Service):
    """Domain service recording likes in the counter store.

    The post must exist in the relational store at the time of the like;
    the counter itself lives only in the counter store.
    """

    def __init__(
        self, post_repository: PostRepository, like_counter: LikeCounterGateway
    ) -> None:
        """Initialize like service.

        Args:
            post_repository: Post repository
            like_counter: Like counter gateway
        """
        self.post_repository = post_repository
        self.like_counter = like_counter

    async def like_post(self, post_id: PostId, liker_id: UserName) -> LikeResult:
        """Like a post (idempotent per liker).

        Args:
            post_id: Post ID
            liker_id: User liking the post

        Returns:
            LikeRecorded with the new count, or PostNotFound
        """
        with logfire.span("like_service.like_post", post_id=post_id, liker=liker_id):
            post = await self.post_repository.find_by_id(post_id)
            if post is None:
                logfire.warn("Like on non-existent post", post_id=post_id)
                return PostNotFound(post_id=post_id)

            like_count = await self.like_counter.increment(post_id, liker_id)
            logfire.info("Post liked", post_id=post_id, like_count=like_count)
            return LikeRecorded(post_id=post_id, like_count=like_count)

    async def unlike_post(self, post_id: PostId, liker_id: UserName) -> LikeResult:
        """Withdraw a like from a post.

        Args:
            post_id: Post ID
            liker_id: User withdrawing the like

        Returns:
            LikeRecorded with the new count, or PostNotFound
        """
        with logfire.span(
            "like_service.unlike_post", post_id=post_id, liker=liker_id
        ):
            post = await self.post_repository.find_by_id(post_id)
            if post is None:
                logfire.warn("Unlike on non-existent post", post_id=post_id)
                return PostNotFound(post_id=post_id)

            like_count = await self.like_counter.decrement(post_id, liker_id)
            logfire.info("Post unliked", post_id=post_id, like_count=like_count)
            return LikeRecorded(post_id=post_id, like_count=like_count)
