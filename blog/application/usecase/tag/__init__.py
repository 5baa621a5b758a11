"""Tag use cases."""

from .list_tags import ListTagsRequest, ListTagsResponse, ListTagsUseCase, TagItem
from .purge_orphan_tags import PurgeOrphanTagsResponse, PurgeOrphanTagsUseCase

__all__ = [
    "ListTagsRequest",
    "ListTagsResponse",
    "ListTagsUseCase",
    "PurgeOrphanTagsResponse",
    "PurgeOrphanTagsUseCase",
    "TagItem",
]
