"""In-memory implementation of Tag repository for testing."""

from typing import Sequence

from board.domain.model.tag import Tag
from board.domain.repository.tag import TagRepository
from board.domain.value import PostId, TagId

from .store import InMemoryStore


class InMemoryTagRepository(TagRepository):
    """In-memory implementation of TagRepository for testing."""

    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    async def find_by_post(self, post_id: PostId) -> list[Tag]:
        """Find the tags of a post in position order."""
        return self._store.tags_of(post_id)

    async def save(self, tag: Tag) -> Tag:
        """Save or update a tag."""
        if tag.id is None:
            tag = tag.model_copy(update={"id": self._store.next_tag_id()})
        self._store.tags[tag.id] = tag
        return tag

    async def delete_many(self, tag_ids: Sequence[TagId]) -> None:
        """Delete tags by id."""
        for tag_id in tag_ids:
            self._store.tags.pop(tag_id, None)
