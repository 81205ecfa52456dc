"""Comment entity."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from board.domain.model.common import DomainModel
from board.domain.value import CommentId, PostId, UserName


class Comment(DomainModel):
    """Comment on a post.

    Comments are flat and listed in creation order. Like posts, only the
    original author may change or remove a comment.
    """

    id: Optional[CommentId] = None
    post_id: PostId
    content: str = Field(min_length=1)
    created_by: UserName
    created_at: datetime = Field(default_factory=datetime.now)
    updated_by: Optional[UserName] = None
    updated_at: Optional[datetime] = None

    def is_owned_by(self, actor: UserName) -> bool:
        """Check whether the actor authored this comment."""
        return self.created_by == actor
