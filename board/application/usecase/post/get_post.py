"""Get post use case."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from board.application.usecase.base import BaseUseCase
from board.domain.error import PostNotFoundError
from board.domain.service import PostNotFound, PostService
from board.domain.value import PostId


class GetPostRequest(BaseModel):
    """Get post request."""

    post_id: int


class CommentItem(BaseModel):
    """Comment as returned with a post."""

    content: str
    created_by: str
    created_at: datetime


class GetPostResponse(BaseModel):
    """Get post response."""

    post_id: int
    title: str
    content: str
    created_by: str
    created_at: datetime
    updated_by: Optional[str]
    updated_at: Optional[datetime]
    tags: list[str]
    comments: list[CommentItem]
    like_count: int


class GetPostUseCase(BaseUseCase[GetPostRequest, GetPostResponse]):
    """Use case for retrieving a post with tags, comments and likes."""

    def __init__(self, post_service: PostService) -> None:
        """Initialize get post use case.

        Args:
            post_service: Post domain service
        """
        self.post_service = post_service

    async def execute(self, request: GetPostRequest) -> GetPostResponse:
        """Execute get post flow.

        Raises:
            PostNotFoundError: If the post doesn't exist
        """
        detail = await self.post_service.get_post(PostId(request.post_id))
        if isinstance(detail, PostNotFound):
            raise PostNotFoundError(request.post_id)

        return GetPostResponse(
            post_id=detail.id,
            title=detail.title,
            content=detail.content,
            created_by=detail.created_by,
            created_at=detail.created_at,
            updated_by=detail.updated_by,
            updated_at=detail.updated_at,
            tags=detail.tags,
            comments=[
                CommentItem(
                    content=comment.content,
                    created_by=comment.created_by,
                    created_at=comment.created_at,
                )
                for comment in detail.comments
            ],
            like_count=detail.like_count,
        )
