"""In-memory post repository for testing."""

from typing import Optional

from board.domain.model import Page, Post, PostAggregate, PostListing
from board.domain.repository.post import PostRepository
from board.domain.value import PageRequest, PostFilter, PostId

from .store import InMemoryStore


class InMemoryPostRepository(PostRepository):
    """In-memory implementation of PostRepository for testing."""

    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    def _matching(self, post_filter: PostFilter) -> list[Post]:
        posts = list(self._store.posts.values())

        if post_filter.title is not None:
            posts = [p for p in posts if post_filter.title in p.title]

        if post_filter.created_by is not None:
            posts = [p for p in posts if p.created_by == post_filter.created_by]

        if post_filter.tag is not None:
            posts = [
                p
                for p in posts
                if any(t.name == post_filter.tag for t in self._store.tags_of(p.id))
            ]

        return posts

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        return self._store.posts.get(post_id)

    async def find_detail(self, post_id: PostId) -> Optional[PostAggregate]:
        """Find a post with its tags and comments."""
        post = self._store.posts.get(post_id)
        if post is None:
            return None

        return PostAggregate(
            post=post,
            tags=self._store.tags_of(post_id),
            comments=self._store.comments_of(post_id),
        )

    async def find_page(
        self, post_filter: PostFilter, page_request: PageRequest
    ) -> Page[PostListing]:
        """Find a page of post listings, most recent first."""
        posts = self._matching(post_filter)
        posts.sort(key=lambda p: (p.created_at, p.id), reverse=True)

        page = posts[page_request.offset : page_request.offset + page_request.page_size]
        listings = []
        for post in page:
            tags = self._store.tags_of(post.id)
            listings.append(
                PostListing(
                    id=post.id,
                    title=post.title,
                    created_by=post.created_by,
                    created_at=post.created_at,
                    first_tag=tags[0].name if tags else None,
                )
            )

        return Page[PostListing](
            items=listings,
            page_number=page_request.page_number,
            page_size=page_request.page_size,
            total_elements=len(posts),
        )

    async def count(self, post_filter: PostFilter) -> int:
        """Count posts matching the given filter."""
        return len(self._matching(post_filter))

    async def save(self, post: Post) -> Post:
        """Save or update a post."""
        if post.id is None:
            post = post.model_copy(update={"id": self._store.next_post_id()})
        self._store.posts[post.id] = post
        return post

    async def delete(self, post_id: PostId) -> None:
        """Delete a post and cascade to its tags and comments."""
        self._store.posts.pop(post_id, None)
        self._store.tags = {
            tag_id: tag
            for tag_id, tag in self._store.tags.items()
            if tag.post_id != post_id
        }
        self._store.comments = {
            comment_id: comment
            for comment_id, comment in self._store.comments.items()
            if comment.post_id != post_id
        }
