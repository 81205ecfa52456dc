"""Shared state for the in-memory repositories.

Posts, tags and comments live in one store so that deleting a post can
cascade to its children and post searches can look at tags, just as the
relational store does with foreign keys and joins.
"""

from itertools import count

from board.domain.model import Comment, Post, Tag
from board.domain.value import CommentId, PostId, TagId


class InMemoryStore:
    """Tables and id sequences backing the in-memory repositories."""

    def __init__(self) -> None:
        self.posts: dict[PostId, Post] = {}
        self.tags: dict[TagId, Tag] = {}
        self.comments: dict[CommentId, Comment] = {}
        self._post_ids = count(1)
        self._tag_ids = count(1)
        self._comment_ids = count(1)

    def next_post_id(self) -> PostId:
        return PostId(next(self._post_ids))

    def next_tag_id(self) -> TagId:
        return TagId(next(self._tag_ids))

    def next_comment_id(self) -> CommentId:
        return CommentId(next(self._comment_ids))

    def tags_of(self, post_id: PostId) -> list[Tag]:
        """Tags of a post in position order."""
        tags = [tag for tag in self.tags.values() if tag.post_id == post_id]
        tags.sort(key=lambda tag: (tag.position, tag.id))
        return tags

    def comments_of(self, post_id: PostId) -> list[Comment]:
        """Comments of a post in creation order."""
        comments = [c for c in self.comments.values() if c.post_id == post_id]
        comments.sort(key=lambda c: (c.created_at, c.id))
        return comments
