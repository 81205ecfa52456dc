"""Post aggregate root.

Posts are the top-level content unit of the board. A post owns an ordered
sequence of tags and a sequence of comments; both are removed with it.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from board.domain.model.common import DomainModel
from board.domain.value import PostId, UserName


class Post(DomainModel):
    """Post aggregate root.

    ``id`` is None until the post has been saved for the first time; the
    store assigns it on insert. ``created_by`` never changes after creation
    and is the only identity allowed to update or delete the post.
    """

    id: Optional[PostId] = None
    title: str = Field(min_length=1, max_length=300)
    content: str
    created_by: UserName
    created_at: datetime = Field(default_factory=datetime.now)
    updated_by: Optional[UserName] = None
    updated_at: Optional[datetime] = None

    def is_owned_by(self, actor: UserName) -> bool:
        """Check whether the actor authored this post."""
        return self.created_by == actor

    def revise(
        self, title: str, content: str, updated_by: UserName, updated_at: datetime
    ) -> "Post":
        """Return a copy with the editable fields replaced."""
        # model_copy skips validation, so re-run it for the new title
        return Post.model_validate(
            {
                **self.model_dump(),
                "title": title,
                "content": content,
                "updated_by": updated_by,
                "updated_at": updated_at,
            }
        )
