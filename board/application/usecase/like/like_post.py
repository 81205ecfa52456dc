"""Like/unlike post use cases."""

from pydantic import BaseModel

from board.application.usecase.base import BaseUseCase
from board.domain.error import PostNotFoundError
from board.domain.service import LikeService, PostNotFound
from board.domain.value import PostId, UserName


class LikePostRequest(BaseModel):
    """Like (or unlike) post request."""

    post_id: int
    liker_id: str  # User ID from authenticated user


class LikePostResponse(BaseModel):
    """Like (or unlike) post response."""

    post_id: int
    like_count: int


class LikePostUseCase(BaseUseCase[LikePostRequest, LikePostResponse]):
    """Use case for liking a post."""

    def __init__(self, like_service: LikeService) -> None:
        """Initialize like post use case.

        Args:
            like_service: Like domain service
        """
        self.like_service = like_service

    async def execute(self, request: LikePostRequest) -> LikePostResponse:
        """Execute like flow.

        Raises:
            PostNotFoundError: If the post doesn't exist
        """
        outcome = await self.like_service.like_post(
            PostId(request.post_id), UserName(request.liker_id)
        )
        if isinstance(outcome, PostNotFound):
            raise PostNotFoundError(request.post_id)

        return LikePostResponse(post_id=outcome.post_id, like_count=outcome.like_count)


class UnlikePostUseCase(BaseUseCase[LikePostRequest, LikePostResponse]):
    """Use case for withdrawing a like."""

    def __init__(self, like_service: LikeService) -> None:
        """Initialize unlike post use case.

        Args:
            like_service: Like domain service
        """
        self.like_service = like_service

    async def execute(self, request: LikePostRequest) -> LikePostResponse:
        """Execute unlike flow.

        Raises:
            PostNotFoundError: If the post doesn't exist
        """
        outcome = await self.like_service.unlike_post(
            PostId(request.post_id), UserName(request.liker_id)
        )
        if isinstance(outcome, PostNotFound):
            raise PostNotFoundError(request.post_id)

        return LikePostResponse(post_id=outcome.post_id, like_count=outcome.like_count)
