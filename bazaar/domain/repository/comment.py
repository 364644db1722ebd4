"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import List

from bazaar.domain.model.comment import Comment
from bazaar.domain.value import PostId, PostKind


class CommentRepository(ABC):
    """Repository for Comment entity. Comments are append-only."""

    @abstractmethod
    async def save(self, comment: Comment) -> Comment:
        """Insert a comment.

        Args:
            comment: The comment to save

        Returns:
            The saved comment
        """
        pass

    @abstractmethod
    async def find_by_post(
        self,
        post_kind: PostKind,
        post_id: PostId,
        limit: int = 20,
        offset: int = 0,
    ) -> List[Comment]:
        """Find comments on a post, newest first.

        Args:
            post_kind: Kind of post
            post_id: The post ID
            limit: Maximum number of comments to return
            offset: Number of comments to skip

        Returns:
            Comments ordered by creation time, newest first
        """
        pass

    @abstractmethod
    async def count_by_post(self, post_kind: PostKind, post_id: PostId) -> int:
        """Count comments on a post.

        Args:
            post_kind: Kind of post
            post_id: The post ID

        Returns:
            Number of comments
        """
        pass
