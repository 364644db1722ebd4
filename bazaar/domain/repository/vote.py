"""Vote repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from bazaar.domain.model.vote import Vote
from bazaar.domain.value import PostId, PostKind, UserId, VoteId, VoteType


class VoteRepository(ABC):
    """Repository for Vote entity.

    Defines the contract for vote persistence operations.
    Implementations live in the persistence layer.
    """

    @abstractmethod
    async def find_by_user_and_post(
        self, post_kind: PostKind, post_id: PostId, user_id: UserId
    ) -> Optional[Vote]:
        """Find a user's vote on a specific post.

        Args:
            post_kind: Kind of post
            post_id: ID of the post
            user_id: The user's ID

        Returns:
            The vote if found, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, vote: Vote) -> Vote:
        """Create a vote.

        Args:
            vote: The vote to save

        Returns:
            The saved vote

        Raises:
            IntegrityError: If the user already has a vote on this post
        """
        pass

    @abstractmethod
    async def update_type(self, vote_id: VoteId, vote_type: VoteType) -> Optional[Vote]:
        """Change the direction of an existing vote in place.

        Only a vote still pointing the other way is changed.

        Args:
            vote_id: The vote ID
            vote_type: New direction

        Returns:
            The updated vote, or None if it no longer exists or already
            points in the new direction
        """
        pass

    @abstractmethod
    async def delete(self, vote_id: VoteId) -> bool:
        """Delete a vote.

        Args:
            vote_id: The vote ID to delete

        Returns:
            True if a vote was deleted, False if none existed
        """
        pass

    @abstractmethod
    async def count_by_post(
        self, post_kind: PostKind, post_id: PostId, vote_type: VoteType
    ) -> int:
        """Count votes of one direction on a post.

        Args:
            post_kind: Kind of post
            post_id: ID of the post
            vote_type: Direction to count

        Returns:
            Number of matching votes
        """
        pass
