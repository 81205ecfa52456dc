"""Like use cases."""

from .like_post import (
    LikePostRequest,
    LikePostResponse,
    LikePostUseCase,
    UnlikePostUseCase,
)

__all__ = [
    "LikePostRequest",
    "LikePostResponse",
    "LikePostUseCase",
    "UnlikePostUseCase",
]
