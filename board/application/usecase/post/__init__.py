"""Post use cases."""

from .create_post import CreatePostRequest, CreatePostResponse, CreatePostUseCase
from .delete_post import DeletePostRequest, DeletePostResponse, DeletePostUseCase
from .find_posts import (
    FindPostsRequest,
    FindPostsResponse,
    FindPostsUseCase,
    PostSummaryItem,
)
from .get_post import CommentItem, GetPostRequest, GetPostResponse, GetPostUseCase
from .update_post import UpdatePostRequest, UpdatePostResponse, UpdatePostUseCase

__all__ = [
    "CommentItem",
    "CreatePostRequest",
    "CreatePostResponse",
    "CreatePostUseCase",
    "DeletePostRequest",
    "DeletePostResponse",
    "DeletePostUseCase",
    "FindPostsRequest",
    "FindPostsResponse",
    "FindPostsUseCase",
    "GetPostRequest",
    "GetPostResponse",
    "GetPostUseCase",
    "PostSummaryItem",
    "UpdatePostRequest",
    "UpdatePostResponse",
    "UpdatePostUseCase",
]
