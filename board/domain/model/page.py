"""Paged result container."""

import math
from typing import Callable, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field

T = TypeVar("T")
U = TypeVar("U")


class Page(BaseModel, Generic[T]):
    """A bounded, offset-addressed slice of a larger result set.

    Carries the total number of matching elements so callers can render
    pagination controls without a second query.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    items: list[T]
    page_number: int = Field(ge=0)
    page_size: int = Field(ge=1)
    total_elements: int = Field(ge=0)

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total_elements / self.page_size)

    @property
    def is_first(self) -> bool:
        return self.page_number == 0

    @property
    def is_last(self) -> bool:
        return not self.has_next

    @property
    def has_next(self) -> bool:
        return self.page_number + 1 < self.total_pages

    def map(self, fn: Callable[[T], U]) -> "Page[U]":
        """Transform the items, keeping the paging metadata."""
        return Page(
            items=[fn(item) for item in self.items],
            page_number=self.page_number,
            page_size=self.page_size,
            total_elements=self.total_elements,
        )
