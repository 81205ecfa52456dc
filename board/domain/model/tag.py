"""Tag entity for labelling posts."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from board.domain.model.common import DomainModel
from board.domain.value import PostId, TagId, UserName


class Tag(DomainModel):
    """Tag entity owned by exactly one post.

    The tags of a post form an ordered sequence; ``position`` is the tag's
    0-based index in that sequence. The first tag (position 0) is the one
    shown in post summaries. Names are free-form and may repeat.

    Tags are a projection of the post's tag-name list and are only created,
    renamed or deleted through tag reconciliation.
    """

    id: Optional[TagId] = None
    post_id: PostId
    name: str
    position: int = Field(ge=0)
    created_by: UserName
    created_at: datetime = Field(default_factory=datetime.now)
    updated_by: Optional[UserName] = None
    updated_at: Optional[datetime] = None
