"""SQL implementation of Tag repository."""

from typing import Sequence

from sqlalchemy import delete, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from board.domain.model.tag import Tag
from board.domain.repository.tag import TagRepository
from board.domain.value import PostId, TagId
from board.persistence.mappers import row_to_tag, tag_to_dict
from board.persistence.tables import tags_table


class SqlTagRepository(TagRepository):
    """SQLAlchemy Core implementation of TagRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: Async database session
        """
        self.session = session

    async def find_by_post(self, post_id: PostId) -> list[Tag]:
        """Find the tags of a post in position order."""
        stmt = (
            select(tags_table)
            .where(tags_table.c.post_id == post_id)
            .order_by(tags_table.c.position, tags_table.c.id)
        )
        result = await self.session.execute(stmt)
        return [row_to_tag(row._asdict()) for row in result.fetchall()]

    async def save(self, tag: Tag) -> Tag:
        """Insert or update a tag."""
        tag_dict = tag_to_dict(tag)

        if tag.id is None:
            result = await self.session.execute(insert(tags_table).values(**tag_dict))
            tag = tag.model_copy(update={"id": TagId(result.inserted_primary_key[0])})
        else:
            stmt = (
                update(tags_table).where(tags_table.c.id == tag.id).values(**tag_dict)
            )
            await self.session.execute(stmt)

        await self.session.flush()
        return tag

    async def delete_many(self, tag_ids: Sequence[TagId]) -> None:
        """Delete tags by id."""
        if not tag_ids:
            return

        stmt = delete(tags_table).where(tags_table.c.id.in_(list(tag_ids)))
        await self.session.execute(stmt)
        await self.session.flush()
