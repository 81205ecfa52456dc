"""Outcomes of post operations.

Mutating operations report existence and ownership failures as values
rather than raising, so callers must handle every case explicitly. The
application layer turns the failure outcomes into errors for its callers.
"""

from typing import Literal, Union

from board.domain.model.common import DomainModel
from board.domain.value import PostId, UserName


class PostMutated(DomainModel):
    """The post was created, updated or deleted."""

    kind: Literal["mutated"] = "mutated"
    post_id: PostId


class PostNotFound(DomainModel):
    """No post exists with the requested id."""

    kind: Literal["not_found"] = "not_found"
    post_id: PostId


class PostNotUpdatable(DomainModel):
    """The actor is not the author of the post it tried to update."""

    kind: Literal["not_updatable"] = "not_updatable"
    post_id: PostId
    actor: UserName


class PostNotDeletable(DomainModel):
    """The actor is not the author of the post it tried to delete."""

    kind: Literal["not_deletable"] = "not_deletable"
    post_id: PostId
    actor: UserName


class LikeRecorded(DomainModel):
    """A like was added or withdrawn; carries the resulting count."""

    kind: Literal["like_recorded"] = "like_recorded"
    post_id: PostId
    like_count: int


UpdatePostResult = Union[PostMutated, PostNotFound, PostNotUpdatable]
DeletePostResult = Union[PostMutated, PostNotFound, PostNotDeletable]
LikeResult = Union[LikeRecorded, PostNotFound]
