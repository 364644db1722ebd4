"""In-memory comment repository for testing."""

from bazaar.domain.model.comment import Comment
from bazaar.domain.repository.comment import CommentRepository
from bazaar.domain.value import PostId, PostKind

from .database import InMemoryDatabase


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing."""

    def __init__(self, database: InMemoryDatabase) -> None:
        self._db = database

    def _for_post(self, post_kind: PostKind, post_id: PostId) -> list[Comment]:
        return [
            c
            for c in self._db.comments
            if c.post_kind == post_kind and c.post_id == post_id
        ]

    async def save(self, comment: Comment) -> Comment:
        """Save a comment."""
        self._db.comments.append(comment)
        return comment

    async def find_by_post(
        self,
        post_kind: PostKind,
        post_id: PostId,
        limit: int = 20,
        offset: int = 0,
    ) -> list[Comment]:
        """Find a page of a post's comments, newest first."""
        # Later inserts win ties on created_at
        comments = list(reversed(self._for_post(post_kind, post_id)))
        comments.sort(key=lambda c: c.created_at, reverse=True)
        return comments[offset : offset + limit]

    async def count_by_post(self, post_kind: PostKind, post_id: PostId) -> int:
        """Count a post's comments."""
        return len(self._for_post(post_kind, post_id))
