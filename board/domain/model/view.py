"""Read models returned to the presentation layer.

These are assembled from the relational store and the like counter; they
are not persisted as-is.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from board.domain.model.comment import Comment
from board.domain.model.common import DomainModel
from board.domain.model.post import Post
from board.domain.model.tag import Tag
from board.domain.value import PostId, UserName


class PostAggregate(DomainModel):
    """A post loaded together with its owned children.

    Tags are in position order, comments in creation order.
    """

    post: Post
    tags: list[Tag] = Field(default_factory=list)
    comments: list[Comment] = Field(default_factory=list)


class CommentView(DomainModel):
    """Comment as shown on the post detail page."""

    content: str
    created_by: UserName
    created_at: datetime


class PostDetail(DomainModel):
    """Full post view with tags, comments and like count."""

    id: PostId
    title: str
    content: str
    created_by: UserName
    created_at: datetime
    updated_by: Optional[UserName] = None
    updated_at: Optional[datetime] = None
    tags: list[str] = Field(default_factory=list)
    comments: list[CommentView] = Field(default_factory=list)
    like_count: int = Field(default=0, ge=0)


class PostListing(DomainModel):
    """One row of a post search, as produced by the store.

    ``first_tag`` is the name of the post's lowest-position tag, if any.
    """

    id: PostId
    title: str
    created_by: UserName
    created_at: datetime
    first_tag: Optional[str] = None


class PostSummary(PostListing):
    """Post search row merged with its like count."""

    like_count: int = Field(default=0, ge=0)
