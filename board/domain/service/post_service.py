"""Post domain service.

Aggregates the relational post store with the like counter store. The two
stores are never written in one transaction; like counts are read after the
relational data and may lag behind recent likes.
"""

from datetime import datetime
from typing import Optional, Sequence

import logfire

from board.domain.gateway import LikeCounterGateway
from board.domain.model import Page, Post, PostDetail, PostListing, PostSummary
from board.domain.model.view import CommentView
from board.domain.repository import PostRepository
from board.domain.value import (
    UNSET,
    PageRequest,
    PostFilter,
    PostId,
    Unset,
    UserName,
)

from .base import Service
from .outcome import (
    DeletePostResult,
    PostMutated,
    PostNotDeletable,
    PostNotFound,
    PostNotUpdatable,
    UpdatePostResult,
)
from .tag_service import TagService


class PostService(Service):
    """Domain service for post operations.

    Ownership and existence are checked before anything is written, so a
    rejected update or delete leaves the stored post untouched.
    """

    def __init__(
        self,
        post_repository: PostRepository,
        tag_service: TagService,
        like_counter: LikeCounterGateway,
    ) -> None:
        """Initialize post service.

        Args:
            post_repository: Post repository
            tag_service: Tag domain service
            like_counter: Like counter gateway
        """
        self.post_repository = post_repository
        self.tag_service = tag_service
        self.like_counter = like_counter

    async def create_post(
        self,
        title: str,
        content: str,
        created_by: UserName,
        tag_names: Optional[Sequence[str]] = None,
    ) -> PostMutated:
        """Create a post with an optional initial tag sequence.

        Args:
            title: Post title
            content: Post body
            created_by: Author
            tag_names: Tag names in display order

        Returns:
            Outcome carrying the new post's id

        Raises:
            ValidationError: If the title is empty or longer than 300 characters
        """
        with logfire.span(
            "post_service.create_post",
            title=title,
            created_by=created_by,
            tags=list(tag_names or []),
        ):
            post = Post(
                title=title,
                content=content,
                created_by=created_by,
                created_at=datetime.now(),
            )
            saved = await self.post_repository.save(post)

            # A new post has no stored tags yet
            tags = await self.tag_service.sync_tags(
                saved.id, tag_names, created_by, current=[]
            )

            logfire.info("Post created", post_id=saved.id, tag_count=len(tags))
            return PostMutated(post_id=saved.id)

    async def update_post(
        self,
        post_id: PostId,
        title: str,
        content: str,
        updated_by: UserName,
        tag_names: Optional[Sequence[str]] | Unset = UNSET,
    ) -> UpdatePostResult:
        """Replace a post's title, content and (optionally) tags.

        Args:
            post_id: Post to update
            title: New title
            content: New content
            updated_by: User performing the update (must be the author)
            tag_names: UNSET leaves the tags untouched; None or an empty
                list removes them all; a list replaces them

        Returns:
            PostMutated, or PostNotFound / PostNotUpdatable without any write
        """
        with logfire.span(
            "post_service.update_post",
            post_id=post_id,
            updated_by=updated_by,
            replace_tags=tag_names is not UNSET,
        ):
            post = await self.post_repository.find_by_id(post_id)
            if post is None:
                logfire.warn("Update of non-existent post", post_id=post_id)
                return PostNotFound(post_id=post_id)

            if not post.is_owned_by(updated_by):
                logfire.warn(
                    "Update rejected: not the author",
                    post_id=post_id,
                    author=post.created_by,
                    actor=updated_by,
                )
                return PostNotUpdatable(post_id=post_id, actor=updated_by)

            revised = post.revise(
                title=title,
                content=content,
                updated_by=updated_by,
                updated_at=datetime.now(),
            )
            await self.post_repository.save(revised)

            if not isinstance(tag_names, Unset):
                await self.tag_service.sync_tags(post_id, tag_names, updated_by)

            logfire.info("Post updated", post_id=post_id)
            return PostMutated(post_id=post_id)

    async def delete_post(
        self, post_id: PostId, requested_by: UserName
    ) -> DeletePostResult:
        """Delete a post along with its tags and comments.

        Args:
            post_id: Post to delete
            requested_by: User requesting deletion (must be the author)

        Returns:
            PostMutated, or PostNotFound / PostNotDeletable without any write
        """
        with logfire.span(
            "post_service.delete_post", post_id=post_id, requested_by=requested_by
        ):
            post = await self.post_repository.find_by_id(post_id)
            if post is None:
                logfire.warn("Delete of non-existent post", post_id=post_id)
                return PostNotFound(post_id=post_id)

            if not post.is_owned_by(requested_by):
                logfire.warn(
                    "Delete rejected: not the author",
                    post_id=post_id,
                    author=post.created_by,
                    actor=requested_by,
                )
                return PostNotDeletable(post_id=post_id, actor=requested_by)

            await self.post_repository.delete(post_id)

            logfire.info("Post deleted", post_id=post_id)
            return PostMutated(post_id=post_id)

    async def get_post(self, post_id: PostId) -> PostDetail | PostNotFound:
        """Get a post with its tags, comments and like count.

        Args:
            post_id: Post ID

        Returns:
            Post detail if found, PostNotFound otherwise
        """
        with logfire.span("post_service.get_post", post_id=post_id):
            aggregate = await self.post_repository.find_detail(post_id)
            if aggregate is None:
                logfire.warn("Post not found", post_id=post_id)
                return PostNotFound(post_id=post_id)

            like_count = await self.like_counter.count(post_id)

            post = aggregate.post
            return PostDetail(
                id=post_id,
                title=post.title,
                content=post.content,
                created_by=post.created_by,
                created_at=post.created_at,
                updated_by=post.updated_by,
                updated_at=post.updated_at,
                tags=[tag.name for tag in aggregate.tags],
                comments=[
                    CommentView(
                        content=comment.content,
                        created_by=comment.created_by,
                        created_at=comment.created_at,
                    )
                    for comment in aggregate.comments
                ],
                like_count=like_count,
            )

    async def find_page(
        self,
        page_request: PageRequest,
        post_filter: Optional[PostFilter] = None,
    ) -> Page[PostSummary]:
        """Search posts and attach like counts.

        The store returns one page of listings (first tag already joined);
        like counts for the whole page are then fetched with a single batch
        call to the counter store.

        Args:
            page_request: Page number and size
            post_filter: Optional title/author/tag filter

        Returns:
            Page of post summaries, most recent first
        """
        post_filter = post_filter or PostFilter()
        with logfire.span(
            "post_service.find_page",
            page_number=page_request.page_number,
            page_size=page_request.page_size,
            title=post_filter.title,
            created_by=post_filter.created_by,
            tag=post_filter.tag,
        ):
            listings = await self.post_repository.find_page(post_filter, page_request)

            like_counts: dict[PostId, int] = {}
            if listings.items:
                like_counts = await self.like_counter.count_batch(
                    [listing.id for listing in listings.items]
                )

            def to_summary(listing: PostListing) -> PostSummary:
                return PostSummary(
                    **listing.model_dump(),
                    like_count=like_counts.get(listing.id, 0),
                )

            logfire.info(
                "Posts found",
                count=len(listings.items),
                total=listings.total_elements,
            )
            return listings.map(to_summary)
