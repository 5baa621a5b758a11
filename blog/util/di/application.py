"""Application layer DI providers."""

from dishka import Scope, provide

from blog.application.usecase.comment import (
    CreateCommentUseCase,
    DeleteCommentUseCase,
    GetCommentUseCase,
    ListCommentsUseCase,
    UpdateCommentUseCase,
)
from blog.application.usecase.post import (
    CreatePostUseCase,
    DeletePostUseCase,
    GetPostImageUseCase,
    GetPostUseCase,
    LikePostUseCase,
    SearchPostsUseCase,
    SetPostImageUseCase,
    UpdatePostUseCase,
)
from blog.application.usecase.tag import ListTagsUseCase, PurgeOrphanTagsUseCase
from blog.config import Settings
from blog.domain.service import CommentService, PostService, TagService
from blog.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider."""

    # Post use cases
    @provide(scope=Scope.REQUEST)
    def get_search_posts_use_case(
        self, post_service: PostService, settings: Settings
    ) -> SearchPostsUseCase:
        """Provide search posts use case."""
        return SearchPostsUseCase(post_service=post_service, settings=settings)

    @provide(scope=Scope.REQUEST)
    def get_get_post_use_case(self, post_service: PostService) -> GetPostUseCase:
        """Provide get post use case."""
        return GetPostUseCase(post_service=post_service)

    @provide(scope=Scope.REQUEST)
    def get_create_post_use_case(self, post_service: PostService) -> CreatePostUseCase:
        """Provide create post use case."""
        return CreatePostUseCase(post_service=post_service)

    @provide(scope=Scope.REQUEST)
    def get_update_post_use_case(self, post_service: PostService) -> UpdatePostUseCase:
        """Provide update post use case."""
        return UpdatePostUseCase(post_service=post_service)

    @provide(scope=Scope.REQUEST)
    def get_delete_post_use_case(self, post_service: PostService) -> DeletePostUseCase:
        """Provide delete post use case."""
        return DeletePostUseCase(post_service=post_service)

    @provide(scope=Scope.REQUEST)
    def get_like_post_use_case(self, post_service: PostService) -> LikePostUseCase:
        """Provide like post use case."""
        return LikePostUseCase(post_service=post_service)

    @provide(scope=Scope.REQUEST)
    def get_set_post_image_use_case(
        self, post_service: PostService
    ) -> SetPostImageUseCase:
        """Provide set post image use case."""
        return SetPostImageUseCase(post_service=post_service)

    @provide(scope=Scope.REQUEST)
    def get_get_post_image_use_case(
        self, post_service: PostService
    ) -> GetPostImageUseCase:
        """Provide get post image use case."""
        return GetPostImageUseCase(post_service=post_service)

    # Comment use cases
    @provide(scope=Scope.REQUEST)
    def get_list_comments_use_case(
        self, comment_service: CommentService, post_service: PostService
    ) -> ListCommentsUseCase:
        """Provide list comments use case."""
        return ListCommentsUseCase(
            comment_service=comment_service, post_service=post_service
        )

    @provide(scope=Scope.REQUEST)
    def get_get_comment_use_case(
        self, comment_service: CommentService
    ) -> GetCommentUseCase:
        """Provide get comment use case."""
        return GetCommentUseCase(comment_service=comment_service)

    @provide(scope=Scope.REQUEST)
    def get_create_comment_use_case(
        self, comment_service: CommentService, post_service: PostService
    ) -> CreateCommentUseCase:
        """Provide create comment use case."""
        return CreateCommentUseCase(
            comment_service=comment_service, post_service=post_service
        )

    @provide(scope=Scope.REQUEST)
    def get_update_comment_use_case(
        self, comment_service: CommentService, post_service: PostService
    ) -> UpdateCommentUseCase:
        """Provide update comment use case."""
        return UpdateCommentUseCase(
            comment_service=comment_service, post_service=post_service
        )

    @provide(scope=Scope.REQUEST)
    def get_delete_comment_use_case(
        self, comment_service: CommentService, post_service: PostService
    ) -> DeleteCommentUseCase:
        """Provide delete comment use case."""
        return DeleteCommentUseCase(
            comment_service=comment_service, post_service=post_service
        )

    # Tag use cases
    @provide(scope=Scope.REQUEST)
    def get_list_tags_use_case(self, tag_service: TagService) -> ListTagsUseCase:
        """Provide list tags use case."""
        return ListTagsUseCase(tag_service=tag_service)

    @provide(scope=Scope.REQUEST)
    def get_purge_orphan_tags_use_case(
        self, tag_service: TagService
    ) -> PurgeOrphanTagsUseCase:
        """Provide purge orphan tags use case."""
        return PurgeOrphanTagsUseCase(tag_service=tag_service)
