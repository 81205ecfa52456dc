"""SQL implementation of Comment repository."""

from sqlalchemy import insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from board.domain.model.comment import Comment
from board.domain.repository.comment import CommentRepository
from board.domain.value import CommentId, PostId
from board.persistence.mappers import comment_to_dict, row_to_comment
from board.persistence.tables import comments_table


class SqlCommentRepository(CommentRepository):
    """SQLAlchemy Core implementation of CommentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: Async database session
        """
        self.session = session

    async def save(self, comment: Comment) -> Comment:
        """Insert or update a comment."""
        comment_dict = comment_to_dict(comment)

        if comment.id is None:
            stmt = insert(comments_table).values(**comment_dict)
            result = await self.session.execute(stmt)
            comment = comment.model_copy(
                update={"id": CommentId(result.inserted_primary_key[0])}
            )
        else:
            stmt = (
                update(comments_table)
                .where(comments_table.c.id == comment.id)
                .values(**comment_dict)
            )
            await self.session.execute(stmt)

        await self.session.flush()
        return comment

    async def find_by_post(self, post_id: PostId) -> list[Comment]:
        """Find the comments of a post in creation order."""
        stmt = (
            select(comments_table)
            .where(comments_table.c.post_id == post_id)
            .order_by(comments_table.c.created_at, comments_table.c.id)
        )
        result = await self.session.execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]
