"""SQL implementation of Post repository."""

from typing import Optional

import logfire
from sqlalchemy import Select, delete, desc, func, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from board.domain.model import Page, Post, PostAggregate, PostListing
from board.domain.repository.post import PostRepository
from board.domain.value import PageRequest, PostFilter, PostId
from board.persistence.mappers import (
    post_to_dict,
    row_to_comment,
    row_to_listing,
    row_to_post,
    row_to_tag,
)
from board.persistence.tables import comments_table, posts_table, tags_table


class SqlPostRepository(PostRepository):
    """SQLAlchemy Core implementation of PostRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    @staticmethod
    def _apply_filter(stmt: Select, post_filter: PostFilter) -> Select:
        """Add WHERE clauses for the supplied filter fields."""
        if post_filter.title is not None:
            stmt = stmt.where(
                posts_table.c.title.contains(post_filter.title, autoescape=True)
            )

        if post_filter.created_by is not None:
            stmt = stmt.where(posts_table.c.created_by == post_filter.created_by)

        if post_filter.tag is not None:
            # EXISTS instead of a join: one row per post even when several
            # of its tags carry the requested name
            has_tag = (
                select(tags_table.c.id)
                .where(
                    tags_table.c.post_id == posts_table.c.id,
                    tags_table.c.name == post_filter.tag,
                )
                .exists()
            )
            stmt = stmt.where(has_tag)

        return stmt

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        with logfire.span("post_repository.find_by_id", post_id=post_id):
            stmt = select(posts_table).where(posts_table.c.id == post_id)
            result = await self.session.execute(stmt)
            row = result.fetchone()

            if not row:
                return None

            return row_to_post(row._asdict())

    async def find_detail(self, post_id: PostId) -> Optional[PostAggregate]:
        """Find a post with its tags and comments (three queries, no N+1)."""
        with logfire.span("post_repository.find_detail", post_id=post_id):
            post = await self.find_by_id(post_id)
            if post is None:
                return None

            tag_stmt = (
                select(tags_table)
                .where(tags_table.c.post_id == post_id)
                .order_by(tags_table.c.position, tags_table.c.id)
            )
            tag_rows = (await self.session.execute(tag_stmt)).fetchall()

            comment_stmt = (
                select(comments_table)
                .where(comments_table.c.post_id == post_id)
                .order_by(comments_table.c.created_at, comments_table.c.id)
            )
            comment_rows = (await self.session.execute(comment_stmt)).fetchall()

            return PostAggregate(
                post=post,
                tags=[row_to_tag(row._asdict()) for row in tag_rows],
                comments=[row_to_comment(row._asdict()) for row in comment_rows],
            )

    async def find_page(
        self, post_filter: PostFilter, page_request: PageRequest
    ) -> Page[PostListing]:
        """Find a page of post listings with the first tag joined in."""
        with logfire.span(
            "post_repository.find_page",
            title=post_filter.title,
            created_by=post_filter.created_by,
            tag=post_filter.tag,
            limit=page_request.page_size,
            offset=page_request.offset,
        ):
            first_tag = (
                select(tags_table.c.name)
                .where(tags_table.c.post_id == posts_table.c.id)
                .order_by(tags_table.c.position, tags_table.c.id)
                .limit(1)
                .correlate(posts_table)
                .scalar_subquery()
                .label("first_tag")
            )

            stmt = select(
                posts_table.c.id,
                posts_table.c.title,
                posts_table.c.created_by,
                posts_table.c.created_at,
                first_tag,
            )
            stmt = self._apply_filter(stmt, post_filter)
            stmt = (
                stmt.order_by(desc(posts_table.c.created_at), desc(posts_table.c.id))
                .limit(page_request.page_size)
                .offset(page_request.offset)
            )

            result = await self.session.execute(stmt)
            listings = [row_to_listing(row._asdict()) for row in result.fetchall()]

            total = await self.count(post_filter)

            logfire.info("Found posts", count=len(listings), total=total)
            return Page[PostListing](
                items=listings,
                page_number=page_request.page_number,
                page_size=page_request.page_size,
                total_elements=total,
            )

    async def count(self, post_filter: PostFilter) -> int:
        """Count posts matching the given filter."""
        stmt = self._apply_filter(
            select(func.count()).select_from(posts_table), post_filter
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def save(self, post: Post) -> Post:
        """Save a post (insert if new, else update scalar fields)."""
        with logfire.span("post_repository.save", post_id=post.id, title=post.title):
            post_dict = post_to_dict(post)

            if post.id is None:
                stmt = insert(posts_table).values(**post_dict)
                result = await self.session.execute(stmt)
                post = post.model_copy(
                    update={"id": PostId(result.inserted_primary_key[0])}
                )
                logfire.info("Inserted new post", post_id=post.id)
            else:
                # created_by/created_at are immutable after insert
                post_dict.pop("created_by")
                post_dict.pop("created_at")
                stmt = (
                    update(posts_table)
                    .where(posts_table.c.id == post.id)
                    .values(**post_dict)
                )
                await self.session.execute(stmt)

            await self.session.flush()
            return post

    async def delete(self, post_id: PostId) -> None:
        """Delete a post with its tags and comments."""
        with logfire.span("post_repository.delete", post_id=post_id):
            # Children first, so dialects without FK cascades behave the same
            await self.session.execute(
                delete(tags_table).where(tags_table.c.post_id == post_id)
            )
            await self.session.execute(
                delete(comments_table).where(comments_table.c.post_id == post_id)
            )
            await self.session.execute(
                delete(posts_table).where(posts_table.c.id == post_id)
            )
            await self.session.flush()
