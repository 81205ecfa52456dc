"""Shared base for query value objects."""

from pydantic import BaseModel, ConfigDict


class ValueObject(BaseModel):
    """Immutable, equality-by-value model that rejects unknown fields."""

    model_config = ConfigDict(frozen=True, extra="forbid")
