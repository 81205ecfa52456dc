"""In-memory comment repository for testing."""

from board.domain.model.comment import Comment
from board.domain.repository.comment import CommentRepository
from board.domain.value import PostId

from .store import InMemoryStore


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing."""

    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    async def save(self, comment: Comment) -> Comment:
        """Save or update a comment."""
        if comment.id is None:
            comment = comment.model_copy(update={"id": self._store.next_comment_id()})
        self._store.comments[comment.id] = comment
        return comment

    async def find_by_post(self, post_id: PostId) -> list[Comment]:
        """Find the comments of a post in creation order."""
        return self._store.comments_of(post_id)
