"""Positional reconciliation of a post's tag sequence.

A post's tags are rewritten by comparing the stored sequence with the
desired tag names index by index:

- inside the overlap, a tag whose name differs is renamed in place, keeping
  its id and position
- extra desired names are appended as new tags
- surplus stored tags at the tail are deleted

Tags whose name is unchanged at the same position keep their identity, so
resubmitting the same list is a no-op and reordering only renames.
"""

from datetime import datetime
from typing import Optional, Sequence

from pydantic import Field

from board.domain.model.common import DomainModel
from board.domain.model.tag import Tag
from board.domain.value import PostId, UserName


class TagReconciliation(DomainModel):
    """Changes needed to turn the stored tags into the desired sequence.

    ``tags`` is the resulting sequence in position order: kept and renamed
    tags carry their ids, new tags have ``id=None`` until saved.
    """

    post_id: PostId
    tags: list[Tag] = Field(default_factory=list)
    to_create: list[Tag] = Field(default_factory=list)
    to_update: list[Tag] = Field(default_factory=list)
    to_delete: list[Tag] = Field(default_factory=list)

    @property
    def names(self) -> list[str]:
        return [tag.name for tag in self.tags]

    @property
    def is_noop(self) -> bool:
        return not (self.to_create or self.to_update or self.to_delete)


def reconcile_tags(
    post_id: PostId,
    current_tags: Sequence[Tag],
    desired_names: Optional[Sequence[str]],
    actor: UserName,
    now: Optional[datetime] = None,
) -> TagReconciliation:
    """Compute the minimal create/update/delete set for a post's tags.

    Args:
        post_id: Post owning the tags
        current_tags: Stored tags of the post, in any order
        desired_names: Tag names in the wanted order (None or empty removes
            every tag)
        actor: Identity recorded as creator of new tags and updater of
            renamed ones
        now: Timestamp for created/updated tags (defaults to now)

    Returns:
        The reconciliation plan. Nothing is persisted.
    """
    now = now or datetime.now()
    current = sorted(current_tags, key=lambda tag: tag.position)
    desired = list(desired_names or [])

    tags: list[Tag] = []
    to_create: list[Tag] = []
    to_update: list[Tag] = []

    for position, name in enumerate(desired):
        if position < len(current):
            existing = current[position]
            if existing.name == name and existing.position == position:
                tags.append(existing)
                continue
            renamed = existing.model_copy(
                update={
                    "name": name,
                    "position": position,
                    "updated_by": actor,
                    "updated_at": now,
                }
            )
            to_update.append(renamed)
            tags.append(renamed)
        else:
            created = Tag(
                post_id=post_id,
                name=name,
                position=position,
                created_by=actor,
                created_at=now,
            )
            to_create.append(created)
            tags.append(created)

    return TagReconciliation(
        post_id=post_id,
        tags=tags,
        to_create=to_create,
        to_update=to_update,
        to_delete=current[len(desired) :],
    )
