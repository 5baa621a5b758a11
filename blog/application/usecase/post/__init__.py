"""Post use cases."""

from .common import PostResponse
from .create_post import CreatePostRequest, CreatePostUseCase
from .delete_post import DeletePostRequest, DeletePostUseCase
from .get_post import GetPostRequest, GetPostUseCase
from .like_post import LikePostRequest, LikePostResponse, LikePostUseCase
from .post_image import (
    GetPostImageRequest,
    GetPostImageUseCase,
    SetPostImageRequest,
    SetPostImageUseCase,
)
from .search_posts import SearchPostsRequest, SearchPostsResponse, SearchPostsUseCase
from .update_post import UpdatePostRequest, UpdatePostUseCase

__all__ = [
    "CreatePostRequest",
    "CreatePostUseCase",
    "DeletePostRequest",
    "DeletePostUseCase",
    "GetPostImageRequest",
    "GetPostImageUseCase",
    "GetPostRequest",
    "GetPostUseCase",
    "LikePostRequest",
    "LikePostResponse",
    "LikePostUseCase",
    "PostResponse",
    "SearchPostsRequest",
    "SearchPostsResponse",
    "SearchPostsUseCase",
    "SetPostImageRequest",
    "SetPostImageUseCase",
    "UpdatePostRequest",
    "UpdatePostUseCase",
]
