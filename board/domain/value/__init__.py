"""Domain value objects for the board."""

from board.domain.value.identifiers import CommentId, PostId, TagId, UserName
from board.domain.value.types import (
    MAX_PAGE_SIZE,
    UNSET,
    PageRequest,
    PostFilter,
    Unset,
)

__all__ = [
    # Identifiers
    "PostId",
    "TagId",
    "CommentId",
    "UserName",
    # Types
    "MAX_PAGE_SIZE",
    "PageRequest",
    "PostFilter",
    "UNSET",
    "Unset",
]
