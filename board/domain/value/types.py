"""Query value objects for the board domain."""

from enum import Enum
from typing import Optional

from pydantic import Field

from board.domain.value.common import ValueObject
from board.domain.value.identifiers import UserName

MAX_PAGE_SIZE = 100


class PageRequest(ValueObject):
    """Offset-addressed page request.

    Pages are zero-indexed: page 0 holds the first ``page_size`` results.
    """

    page_number: int = Field(default=0, ge=0)
    page_size: int = Field(default=20, ge=1, le=MAX_PAGE_SIZE)

    @property
    def offset(self) -> int:
        """Number of rows to skip before this page starts."""
        return self.page_number * self.page_size


class PostFilter(ValueObject):
    """Search filter for post listings.

    Every supplied field narrows the result (filters are conjunctive):
    - title: substring match on the post title
    - created_by: exact match on the author
    - tag: exact match on any of the post's tag names
    """

    title: Optional[str] = None
    created_by: Optional[UserName] = None
    tag: Optional[str] = None

    @property
    def is_empty(self) -> bool:
        return self.title is None and self.created_by is None and self.tag is None


class Unset(Enum):
    """Marker for an optional argument the caller did not supply at all.

    Lets an update tell "field not provided" apart from an explicit None or
    empty value.
    """

    UNSET = "UNSET"

    def __repr__(self) -> str:
        return "UNSET"


UNSET = Unset.UNSET
