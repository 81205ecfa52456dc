"""Post repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from board.domain.model import Page, Post, PostAggregate, PostListing
from board.domain.value import PageRequest, PostFilter, PostId


class PostRepository(ABC):
    """Repository for the Post aggregate.

    Defines the contract for post persistence operations.
    Implementations live in the persistence layer.
    """

    @abstractmethod
    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID (scalar fields only).

        Args:
            post_id: The post's unique identifier

        Returns:
            The post if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_detail(self, post_id: PostId) -> Optional[PostAggregate]:
        """Find a post together with its tags and comments.

        Children are loaded eagerly with a fixed number of queries,
        independent of how many tags or comments the post has.

        Args:
            post_id: The post's unique identifier

        Returns:
            The post with tags (position order) and comments (creation
            order), or None if the post doesn't exist
        """
        pass

    @abstractmethod
    async def find_page(
        self, post_filter: PostFilter, page_request: PageRequest
    ) -> Page[PostListing]:
        """Find a page of post listings.

        Ordered most-recently-created first, ties broken by id descending.
        Each post appears at most once regardless of how many of its tags
        match the tag filter.

        Args:
            post_filter: Conjunctive title/author/tag filter
            page_request: Page number and size

        Returns:
            Page of listings with the first tag of each post joined in
        """
        pass

    @abstractmethod
    async def count(self, post_filter: PostFilter) -> int:
        """Count posts matching the filter.

        Args:
            post_filter: Conjunctive title/author/tag filter

        Returns:
            Number of matching posts
        """
        pass

    @abstractmethod
    async def save(self, post: Post) -> Post:
        """Save a post.

        Inserts when ``post.id`` is None (assigning a new id), otherwise
        overwrites the stored scalar fields. Tags and comments are not
        touched.

        Args:
            post: The post to save

        Returns:
            The saved post, with its id set
        """
        pass

    @abstractmethod
    async def delete(self, post_id: PostId) -> None:
        """Delete a post together with its tags and comments.

        Args:
            post_id: The post ID to delete
        """
        pass
