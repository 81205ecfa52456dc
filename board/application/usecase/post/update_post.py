"""Update post use case."""

from typing import Optional

from pydantic import BaseModel

from board.application.usecase.base import BaseUseCase
from board.domain.error import PostNotFoundError, PostNotUpdatableError
from board.domain.service import (
    PostNotFound,
    PostNotUpdatable,
    PostService,
)
from board.domain.value import UNSET, PostId, UserName


class UpdatePostRequest(BaseModel):
    """Update post request.

    ``tags`` has three states: left out of the request (tags untouched),
    empty list or null (all tags removed), or a list (tags replaced).
    """

    post_id: int
    title: str
    content: str
    updated_by: str  # Must be the post's author
    tags: Optional[list[str]] = None

    @property
    def tags_provided(self) -> bool:
        return "tags" in self.model_fields_set


class UpdatePostResponse(BaseModel):
    """Update post response."""

    post_id: int


class UpdatePostUseCase(BaseUseCase[UpdatePostRequest, UpdatePostResponse]):
    """Use case for replacing a post's title, content and tags."""

    def __init__(self, post_service: PostService) -> None:
        """Initialize update post use case.

        Args:
            post_service: Post domain service
        """
        self.post_service = post_service

    async def execute(self, request: UpdatePostRequest) -> UpdatePostResponse:
        """Execute update post flow.

        Args:
            request: Update post request

        Returns:
            Response with the updated post's id

        Raises:
            PostNotFoundError: If the post doesn't exist
            PostNotUpdatableError: If the user isn't the post's author
        """
        outcome = await self.post_service.update_post(
            post_id=PostId(request.post_id),
            title=request.title,
            content=request.content,
            updated_by=UserName(request.updated_by),
            tag_names=request.tags if request.tags_provided else UNSET,
        )

        if isinstance(outcome, PostNotFound):
            raise PostNotFoundError(outcome.post_id)
        if isinstance(outcome, PostNotUpdatable):
            raise PostNotUpdatableError(outcome.post_id, outcome.actor)

        return UpdatePostResponse(post_id=outcome.post_id)
