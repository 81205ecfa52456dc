"""Create post use case."""

from pydantic import BaseModel, Field

from board.application.usecase.base import BaseUseCase
from board.domain.service import PostService
from board.domain.value import UserName


class CreatePostRequest(BaseModel):
    """Create post request."""

    title: str
    content: str
    created_by: str  # Author identity from the auth layer
    tags: list[str] = Field(default_factory=list)  # Display order


class CreatePostResponse(BaseModel):
    """Create post response."""

    post_id: int


class CreatePostUseCase(BaseUseCase[CreatePostRequest, CreatePostResponse]):
    """Use case for creating a new post."""

    def __init__(self, post_service: PostService) -> None:
        """Initialize create post use case.

        Args:
            post_service: Post domain service
        """
        self.post_service = post_service

    async def execute(self, request: CreatePostRequest) -> CreatePostResponse:
        """Execute create post flow.

        Args:
            request: Create post request

        Returns:
            Response with the new post's id
        """
        outcome = await self.post_service.create_post(
            title=request.title,
            content=request.content,
            created_by=UserName(request.created_by),
            tag_names=request.tags,
        )
        return CreatePostResponse(post_id=outcome.post_id)
