"""Domain value objects for the blog."""

from blog.domain.value.identifiers import CommentId, PostId, TagId
from blog.domain.value.search import SearchQuery
from blog.domain.value.types import (
    TAG_PREFIX,
    normalize_tag_name,
    normalize_tag_names,
)

__all__ = [
    # Identifiers
    "PostId",
    "CommentId",
    "TagId",
    # Types
    "SearchQuery",
    "TAG_PREFIX",
    "normalize_tag_name",
    "normalize_tag_names",
]
