"""SQLAlchemy table definitions for the board.

Column types are kept dialect-neutral so the same metadata runs on
PostgreSQL in production and SQLite in tests.
"""

from sqlalchemy import (
    Column,
    DateTime,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
)

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# POSTS TABLE
# ============================================================================
posts_table = Table(
    "posts",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("title", String(300), nullable=False),
    Column("content", Text, nullable=False),
    Column("created_by", String(255), nullable=False),
    Column("created_at", DateTime(timezone=True), nullable=False),
    Column("updated_by", String(255), nullable=True),
    Column("updated_at", DateTime(timezone=True), nullable=True),
)

Index("idx_posts_created_at", posts_table.c.created_at.desc(), posts_table.c.id.desc())
Index("idx_posts_created_by", posts_table.c.created_by)

# ============================================================================
# TAGS TABLE (owned by posts, ordered by position)
# ============================================================================
tags_table = Table(
    "tags",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column(
        "post_id", Integer, ForeignKey("posts.id", ondelete="CASCADE"), nullable=False
    ),
    Column("name", String(255), nullable=False),
    Column("position", Integer, nullable=False),
    Column("created_by", String(255), nullable=False),
    Column("created_at", DateTime(timezone=True), nullable=False),
    Column("updated_by", String(255), nullable=True),
    Column("updated_at", DateTime(timezone=True), nullable=True),
)

Index("idx_tags_post_id_position", tags_table.c.post_id, tags_table.c.position)
Index("idx_tags_name", tags_table.c.name)

# ============================================================================
# COMMENTS TABLE
# ============================================================================
comments_table = Table(
    "comments",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column(
        "post_id", Integer, ForeignKey("posts.id", ondelete="CASCADE"), nullable=False
    ),
    Column("content", Text, nullable=False),
    Column("created_by", String(255), nullable=False),
    Column("created_at", DateTime(timezone=True), nullable=False),
    Column("updated_by", String(255), nullable=True),
    Column("updated_at", DateTime(timezone=True), nullable=True),
)

Index("idx_comments_post_id", comments_table.c.post_id, comments_table.c.created_at)
