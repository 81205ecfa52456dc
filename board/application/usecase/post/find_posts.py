"""Find posts use case."""

from datetime import datetime
from typing import Optional

import logfire
from pydantic import BaseModel, Field

from board.application.usecase.base import BaseUseCase
from board.config import Settings
from board.domain.service import PostService
from board.domain.value import MAX_PAGE_SIZE, PageRequest, PostFilter, UserName


class PostSummaryItem(BaseModel):
    """Post row in a search result."""

    post_id: int
    title: str
    created_by: str
    created_at: datetime
    first_tag: Optional[str]
    like_count: int


class FindPostsRequest(BaseModel):
    """Find posts request.

    Supplied filters are combined with AND; none at all lists every post.
    """

    page_number: int = Field(default=0, ge=0)
    page_size: Optional[int] = Field(default=None, ge=1, le=MAX_PAGE_SIZE)
    title: Optional[str] = None  # Substring of the title
    created_by: Optional[str] = None  # Exact author
    tag: Optional[str] = None  # Exact tag name


class FindPostsResponse(BaseModel):
    """Find posts response."""

    posts: list[PostSummaryItem]
    page_number: int
    page_size: int
    total_elements: int
    total_pages: int


class FindPostsUseCase(BaseUseCase[FindPostsRequest, FindPostsResponse]):
    """Use case for searching posts with filtering and pagination."""

    def __init__(self, post_service: PostService, settings: Settings) -> None:
        """Initialize find posts use case.

        Args:
            post_service: Post domain service
            settings: Application settings (default page size)
        """
        self.post_service = post_service
        self.settings = settings

    async def execute(self, request: FindPostsRequest) -> FindPostsResponse:
        """Execute find posts flow.

        Args:
            request: Filters and page coordinates

        Returns:
            One page of post summaries, most recent first
        """
        pagination = self.settings.pagination
        page_request = PageRequest(
            page_number=request.page_number,
            page_size=min(
                request.page_size or pagination.default_page_size,
                pagination.max_page_size,
            ),
        )
        post_filter = PostFilter(
            title=request.title,
            created_by=UserName(request.created_by) if request.created_by else None,
            tag=request.tag,
        )

        with logfire.span(
            "find_posts.execute",
            page_number=page_request.page_number,
            page_size=page_request.page_size,
            filtered=not post_filter.is_empty,
        ):
            page = await self.post_service.find_page(page_request, post_filter)

            return FindPostsResponse(
                posts=[
                    PostSummaryItem(
                        post_id=summary.id,
                        title=summary.title,
                        created_by=summary.created_by,
                        created_at=summary.created_at,
                        first_tag=summary.first_tag,
                        like_count=summary.like_count,
                    )
                    for summary in page.items
                ],
                page_number=page.page_number,
                page_size=page.page_size,
                total_elements=page.total_elements,
                total_pages=page.total_pages,
            )
