"""Tag repository interface."""

from abc import ABC, abstractmethod
from typing import Sequence

from board.domain.model.tag import Tag
from board.domain.value import PostId, TagId


class TagRepository(ABC):
    """Repository interface for tags owned by posts."""

    @abstractmethod
    async def find_by_post(self, post_id: PostId) -> list[Tag]:
        """Find the tags of a post.

        Args:
            post_id: Owning post

        Returns:
            Tags ordered by position
        """
        pass

    @abstractmethod
    async def save(self, tag: Tag) -> Tag:
        """Insert a new tag or update an existing one.

        Args:
            tag: Tag to save (``id`` None means insert)

        Returns:
            Saved tag with its id set
        """
        pass

    @abstractmethod
    async def delete_many(self, tag_ids: Sequence[TagId]) -> None:
        """Delete several tags in one operation.

        Args:
            tag_ids: Identifiers of the tags to remove
        """
        pass
