"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict

from board.domain.model import Comment, Post, PostListing, Tag
from board.domain.value import CommentId, PostId, TagId, UserName


def row_to_post(row: Dict[str, Any]) -> Post:
    """Convert database row to Post domain model.

    Args:
        row: Database row as dict

    Returns:
        Post domain model
    """
    return Post(
        id=PostId(row["id"]),
        title=row["title"],
        content=row["content"],
        created_by=UserName(row["created_by"]),
        created_at=row["created_at"],
        updated_by=UserName(row["updated_by"]) if row.get("updated_by") else None,
        updated_at=row.get("updated_at"),
    )


def post_to_dict(post: Post) -> Dict[str, Any]:
    """Convert Post domain model to database dict.

    The id is left out: it is generated on insert and never rewritten.

    Args:
        post: Post domain model

    Returns:
        Dict suitable for database insertion/update
    """
    return post.model_dump(exclude={"id"})


def row_to_tag(row: Dict[str, Any]) -> Tag:
    """Convert database row to Tag domain model.

    Args:
        row: Database row as dict

    Returns:
        Tag domain model
    """
    return Tag(
        id=TagId(row["id"]),
        post_id=PostId(row["post_id"]),
        name=row["name"],
        position=row["position"],
        created_by=UserName(row["created_by"]),
        created_at=row["created_at"],
        updated_by=UserName(row["updated_by"]) if row.get("updated_by") else None,
        updated_at=row.get("updated_at"),
    )


def tag_to_dict(tag: Tag) -> Dict[str, Any]:
    """Convert Tag domain model to database dict.

    Args:
        tag: Tag domain model

    Returns:
        Dict suitable for database insertion/update
    """
    return tag.model_dump(exclude={"id"})


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model.

    Args:
        row: Database row as dict

    Returns:
        Comment domain model
    """
    return Comment(
        id=CommentId(row["id"]),
        post_id=PostId(row["post_id"]),
        content=row["content"],
        created_by=UserName(row["created_by"]),
        created_at=row["created_at"],
        updated_by=UserName(row["updated_by"]) if row.get("updated_by") else None,
        updated_at=row.get("updated_at"),
    )


def comment_to_dict(comment: Comment) -> Dict[str, Any]:
    """Convert Comment domain model to database dict.

    Args:
        comment: Comment domain model

    Returns:
        Dict suitable for database insertion/update
    """
    return comment.model_dump(exclude={"id"})


def row_to_listing(row: Dict[str, Any]) -> PostListing:
    """Convert a post search row (post columns + first_tag) to a listing."""
    return PostListing(
        id=PostId(row["id"]),
        title=row["title"],
        created_by=UserName(row["created_by"]),
        created_at=row["created_at"],
        first_tag=row.get("first_tag"),
    )
