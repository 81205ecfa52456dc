"""Tag domain service."""

from typing import Optional, Sequence

import logfire

from board.domain.model.tag import Tag
from board.domain.repository import TagRepository
from board.domain.value import PostId, UserName

from .base import Service
from .tag_reconciler import TagReconciliation, reconcile_tags


class TagService(Service):
    """Domain service keeping a post's stored tags in line with its tag names.

    Not safe against concurrent tag updates of the same post: the current
    tags are read, diffed and written back without a lock. Callers that
    need strict consistency must serialize updates per post id.
    """

    def __init__(self, tag_repository: TagRepository) -> None:
        """Initialize tag service.

        Args:
            tag_repository: Tag repository
        """
        self.tag_repository = tag_repository

    async def get_tags(self, post_id: PostId) -> list[Tag]:
        """Get the tags of a post in position order."""
        return await self.tag_repository.find_by_post(post_id)

    async def sync_tags(
        self,
        post_id: PostId,
        desired_names: Optional[Sequence[str]],
        actor: UserName,
        current: Optional[Sequence[Tag]] = None,
    ) -> list[Tag]:
        """Reconcile and persist a post's tags.

        Args:
            post_id: Post owning the tags
            desired_names: Tag names in the wanted order (None/empty clears)
            actor: User performing the change
            current: Already known current tags; loaded from the repository
                when not given

        Returns:
            The persisted tags in position order
        """
        with logfire.span(
            "tag_service.sync_tags",
            post_id=post_id,
            tags=list(desired_names or []),
            actor=actor,
        ):
            if current is None:
                current = await self.tag_repository.find_by_post(post_id)

            plan = reconcile_tags(post_id, current, desired_names, actor)
            if plan.is_noop:
                logfire.debug("Tags unchanged", post_id=post_id)
                return plan.tags

            return await self.apply(plan)

    async def apply(self, plan: TagReconciliation) -> list[Tag]:
        """Persist a reconciliation plan.

        Surplus tags are removed first, then renamed tags are updated and new
        ones inserted, walking the target sequence in position order.

        Args:
            plan: Plan produced by ``reconcile_tags``

        Returns:
            The persisted tags in position order, all with ids
        """
        if plan.to_delete:
            await self.tag_repository.delete_many(
                [tag.id for tag in plan.to_delete if tag.id is not None]
            )

        updated_ids = {tag.id for tag in plan.to_update}
        persisted: list[Tag] = []
        for tag in plan.tags:
            if tag.id is None or tag.id in updated_ids:
                tag = await self.tag_repository.save(tag)
            persisted.append(tag)

        logfire.info(
            "Tags reconciled",
            post_id=plan.post_id,
            created=len(plan.to_create),
            updated=len(plan.to_update),
            deleted=len(plan.to_delete),
        )
        return persisted
