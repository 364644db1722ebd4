"""In-memory post repository for testing."""

from datetime import datetime
from typing import Optional

from bazaar.domain.model.post import Post
from bazaar.domain.repository.post import PostRepository
from bazaar.domain.value import PostId, PostKind

from .database import InMemoryDatabase


class InMemoryPostRepository(PostRepository):
    """In-memory implementation of PostRepository for testing."""

    def __init__(self, database: InMemoryDatabase, kind: PostKind) -> None:
        self.kind = kind
        self._posts = database.posts[kind]

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        return self._posts.get(post_id)

    async def save(self, post: Post) -> Post:
        """Save a post (create or update)."""
        self._posts[post.id] = post
        return post

    async def adjust_counters(
        self, post_id: PostId, upvotes_delta: int, downvotes_delta: int
    ) -> Optional[Post]:
        """Shift both counters, clamping at 0."""
        post = self._posts.get(post_id)
        if post is None:
            return None
        return await self.set_counters(
            post_id,
            max(post.upvotes + upvotes_delta, 0),
            max(post.downvotes + downvotes_delta, 0),
        )

    async def set_counters(
        self, post_id: PostId, upvotes: int, downvotes: int
    ) -> Optional[Post]:
        """Overwrite both counters."""
        post = self._posts.get(post_id)
        if post is None:
            return None
        updated = post.model_copy(
            update={
                "upvotes": upvotes,
                "downvotes": downvotes,
                "updated_at": datetime.now(),
            }
        )
        self._posts[post_id] = updated
        return updated
