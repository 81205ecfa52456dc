"""Domain layer DI providers."""

from dishka import Scope, provide

from board.domain.gateway import LikeCounterGateway
from board.domain.repository import PostRepository, TagRepository
from board.domain.service import LikeService, PostService, TagService
from board.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_tag_service(self, tag_repository: TagRepository) -> TagService:
        """Provide tag domain service."""
        return TagService(tag_repository=tag_repository)

    @provide
    def get_post_service(
        self,
        post_repository: PostRepository,
        tag_service: TagService,
        like_counter: LikeCounterGateway,
    ) -> PostService:
        """Provide post domain service."""
        return PostService(
            post_repository=post_repository,
            tag_service=tag_service,
            like_counter=like_counter,
        )

    @provide
    def get_like_service(
        self, post_repository: PostRepository, like_counter: LikeCounterGateway
    ) -> LikeService:
        """Provide like domain service."""
        return LikeService(post_repository=post_repository, like_counter=like_counter)
