"""SQL repository implementations."""

from board.persistence.repository.comment import SqlCommentRepository
from board.persistence.repository.post import SqlPostRepository
from board.persistence.repository.tag import SqlTagRepository

__all__ = [
    "SqlPostRepository",
    "SqlTagRepository",
    "SqlCommentRepository",
]
