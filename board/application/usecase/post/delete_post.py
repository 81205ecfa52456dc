"""Delete post use case."""

from pydantic import BaseModel

from board.application.usecase.base import BaseUseCase
from board.domain.error import PostNotDeletableError, PostNotFoundError
from board.domain.service import (
    PostNotDeletable,
    PostNotFound,
    PostService,
)
from board.domain.value import PostId, UserName


class DeletePostRequest(BaseModel):
    """Delete post request."""

    post_id: int
    requested_by: str  # Must be the post's author


class DeletePostResponse(BaseModel):
    """Delete post response."""

    post_id: int


class DeletePostUseCase(BaseUseCase[DeletePostRequest, DeletePostResponse]):
    """Use case for deleting a post with its tags and comments."""

    def __init__(self, post_service: PostService) -> None:
        """Initialize delete post use case.

        Args:
            post_service: Post domain service
        """
        self.post_service = post_service

    async def execute(self, request: DeletePostRequest) -> DeletePostResponse:
        """Execute delete post flow.

        Raises:
            PostNotFoundError: If the post doesn't exist
            PostNotDeletableError: If the user isn't the post's author
        """
        outcome = await self.post_service.delete_post(
            post_id=PostId(request.post_id),
            requested_by=UserName(request.requested_by),
        )

        if isinstance(outcome, PostNotFound):
            raise PostNotFoundError(outcome.post_id)
        if isinstance(outcome, PostNotDeletable):
            raise PostNotDeletableError(outcome.post_id, outcome.actor)

        return DeletePostResponse(post_id=outcome.post_id)
