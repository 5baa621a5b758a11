"""Domain layer DI providers."""

from dishka import Scope, provide

from blog.domain.repository import CommentRepository, PostRepository, TagRepository
from blog.domain.service import CommentService, PostService, TagService
from blog.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Services resolved in one scope share one transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_post_service(
        self, post_repository: PostRepository, tag_repository: TagRepository
    ) -> PostService:
        """Provide post domain service."""
        return PostService(
            post_repository=post_repository, tag_repository=tag_repository
        )

    @provide
    def get_comment_service(
        self, comment_repository: CommentRepository
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(comment_repository=comment_repository)

    @provide
    def get_tag_service(self, tag_repository: TagRepository) -> TagService:
        """Provide tag domain service."""
        return TagService(tag_repository=tag_repository)
