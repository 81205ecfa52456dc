"""Application layer DI providers."""

from dishka import Scope, provide

from board.application.usecase.like import LikePostUseCase, UnlikePostUseCase
from board.application.usecase.post import (
    CreatePostUseCase,
    DeletePostUseCase,
    FindPostsUseCase,
    GetPostUseCase,
    UpdatePostUseCase,
)
from board.config import Settings
from board.domain.service import LikeService, PostService
from board.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Post use cases
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
    def get_get_post_use_case(self, post_service: PostService) -> GetPostUseCase:
        """Provide get post use case."""
        return GetPostUseCase(post_service=post_service)

    @provide(scope=Scope.REQUEST)
    def get_find_posts_use_case(
        self, post_service: PostService, settings: Settings
    ) -> FindPostsUseCase:
        """Provide find posts use case."""
        return FindPostsUseCase(post_service=post_service, settings=settings)

    # Like use cases
    @provide(scope=Scope.REQUEST)
    def get_like_post_use_case(self, like_service: LikeService) -> LikePostUseCase:
        """Provide like post use case."""
        return LikePostUseCase(like_service=like_service)

    @provide(scope=Scope.REQUEST)
    def get_unlike_post_use_case(
        self, like_service: LikeService
    ) -> UnlikePostUseCase:
        """Provide unlike post use case."""
        return UnlikePostUseCase(like_service=like_service)
