"""PostgreSQL repository implementations."""

from blog.persistence.repository.comment import PostgresCommentRepository
from blog.persistence.repository.post import PostgresPostRepository
from blog.persistence.repository.tag import PostgresTagRepository

__all__ = [
    "PostgresPostRepository",
    "PostgresCommentRepository",
    "PostgresTagRepository",
]
