"""In-memory repository implementations for testing."""

from .comment import InMemoryCommentRepository
from .database import InMemoryDatabase
from .post import InMemoryPostRepository
from .tag import InMemoryTagRepository

__all__ = [
    "InMemoryCommentRepository",
    "InMemoryDatabase",
    "InMemoryPostRepository",
    "InMemoryTagRepository",
]
