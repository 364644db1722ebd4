"""Post repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from bazaar.domain.model.post import Post
from bazaar.domain.value import PostId, PostKind


class PostRepository(ABC):
    """Store for one kind of post.

    Each post kind (trade, forum) has its own repository instance, so the
    vote and comment logic is written once against this capability and
    selected by ``kind``.
    """

    kind: PostKind

    @abstractmethod
    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID.

        Args:
            post_id: The post's unique identifier

        Returns:
            The post if found, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, post: Post) -> Post:
        """Save a post (create or update).

        Args:
            post: The post to save

        Returns:
            The saved post
        """
        pass

    @abstractmethod
    async def adjust_counters(
        self, post_id: PostId, upvotes_delta: int, downvotes_delta: int
    ) -> Optional[Post]:
        """Atomically add deltas to the vote counters, clamping each at 0.

        Args:
            post_id: The post ID
            upvotes_delta: Change applied to ``upvotes``
            downvotes_delta: Change applied to ``downvotes``

        Returns:
            The updated post, or None if the post does not exist
        """
        pass

    @abstractmethod
    async def set_counters(
        self, post_id: PostId, upvotes: int, downvotes: int
    ) -> Optional[Post]:
        """Overwrite both vote counters.

        Args:
            post_id: The post ID
            upvotes: New ``upvotes`` value
            downvotes: New ``downvotes`` value

        Returns:
            The updated post, or None if the post does not exist
        """
        pass
