"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict
from uuid import UUID

from blog.domain.model import Comment, Post, Tag
from blog.domain.value import CommentId, PostId, TagId


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_post(row: Dict[str, Any]) -> Post:
    """Convert database row to Post domain model.

    Args:
        row: Database row as dict

    Returns:
        Post domain model
    """
    return Post(
        id=PostId(_uuid(row["id"])),
        title=row["title"],
        text=row["text"],
        likes_count=row["likes_count"],
        comments_count=row["comments_count"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def row_to_tag(row: Dict[str, Any]) -> Tag:
    """Convert database row to Tag domain model."""
    return Tag(id=TagId(_uuid(row["id"])), name=row["name"])


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model.

    Args:
        row: Database row as dict

    Returns:
        Comment domain model
    """
    return Comment(
        id=CommentId(_uuid(row["id"])),
        post_id=PostId(_uuid(row["post_id"])),
        text=row["text"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )
