"""Domain model entities for the board."""

from board.domain.model.comment import Comment
from board.domain.model.page import Page
from board.domain.model.post import Post
from board.domain.model.tag import Tag
from board.domain.model.view import (
    CommentView,
    PostAggregate,
    PostDetail,
    PostListing,
    PostSummary,
)

__all__ = [
    "Post",
    "Tag",
    "Comment",
    "Page",
    "PostAggregate",
    "PostDetail",
    "PostListing",
    "PostSummary",
    "CommentView",
]
