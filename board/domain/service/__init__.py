"""Domain services."""

from .base import Service
from .like_service import LikeService
from .outcome import (
    DeletePostResult,
    LikeRecorded,
    LikeResult,
    PostMutated,
    PostNotDeletable,
    PostNotFound,
    PostNotUpdatable,
    UpdatePostResult,
)
from .post_service import PostService
from .tag_reconciler import TagReconciliation, reconcile_tags
from .tag_service import TagService

__all__ = [
    "DeletePostResult",
    "LikeRecorded",
    "LikeResult",
    "LikeService",
    "PostMutated",
    "PostNotDeletable",
    "PostNotFound",
    "PostNotUpdatable",
    "PostService",
    "Service",
    "TagReconciliation",
    "TagService",
    "UpdatePostResult",
    "reconcile_tags",
]
