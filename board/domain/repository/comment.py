"""Comment repository interface."""

from abc import ABC, abstractmethod

from board.domain.model.comment import Comment
from board.domain.value import PostId


class CommentRepository(ABC):
    """Repository interface for comments owned by posts."""

    @abstractmethod
    async def save(self, comment: Comment) -> Comment:
        """Insert a new comment or update an existing one.

        Args:
            comment: Comment to save (``id`` None means insert)

        Returns:
            Saved comment with its id set
        """
        pass

    @abstractmethod
    async def find_by_post(self, post_id: PostId) -> list[Comment]:
        """Find the comments of a post in creation order.

        Args:
            post_id: Owning post

        Returns:
            List of comments
        """
        pass
