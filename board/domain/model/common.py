"""Shared base for board entities and read models."""

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Immutable pydantic model.

    Entities are never mutated in place: changes produce a new instance via
    ``model_copy`` or a domain method (e.g. ``Post.revise``) and are written
    back through a repository.
    """

    model_config = ConfigDict(frozen=True)
