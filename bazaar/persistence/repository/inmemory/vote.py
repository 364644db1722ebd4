"""In-memory vote repository for testing."""

from datetime import datetime
from typing import Optional

from sqlalchemy.exc import IntegrityError

from bazaar.domain.model.vote import Vote
from bazaar.domain.repository.vote import VoteRepository
from bazaar.domain.value import PostId, PostKind, UserId, VoteId, VoteType

from .database import InMemoryDatabase


class InMemoryVoteRepository(VoteRepository):
    """In-memory implementation of VoteRepository for testing."""

    def __init__(self, database: InMemoryDatabase) -> None:
        self._db = database

    async def find_by_user_and_post(
        self, post_kind: PostKind, post_id: PostId, user_id: UserId
    ) -> Optional[Vote]:
        """Find a user's vote on a post."""
        for vote in self._db.votes:
            if (
                vote.post_kind == post_kind
                and vote.post_id == post_id
                and vote.user_id == user_id
            ):
                return vote
        return None

    async def save(self, vote: Vote) -> Vote:
        """Save a vote.

        Raises:
            IntegrityError: If the user already voted on the post
        """
        existing = await self.find_by_user_and_post(
            vote.post_kind, vote.post_id, vote.user_id
        )
        if existing:
            raise IntegrityError("Duplicate vote", None, Exception())

        self._db.votes.append(vote)
        return vote

    async def update_type(self, vote_id: VoteId, vote_type: VoteType) -> Optional[Vote]:
        """Flip a vote's direction if it still points the other way."""
        for i, vote in enumerate(self._db.votes):
            if vote.id == vote_id and vote.vote_type != vote_type:
                updated = vote.model_copy(
                    update={"vote_type": vote_type, "updated_at": datetime.now()}
                )
                self._db.votes[i] = updated
                return updated
        return None

    async def delete(self, vote_id: VoteId) -> bool:
        """Delete a vote by ID."""
        before = len(self._db.votes)
        self._db.votes[:] = [v for v in self._db.votes if v.id != vote_id]
        return len(self._db.votes) < before

    async def count_by_post(
        self, post_kind: PostKind, post_id: PostId, vote_type: VoteType
    ) -> int:
        """Count one direction of votes on a post."""
        return sum(
            1
            for v in self._db.votes
            if v.post_kind == post_kind
            and v.post_id == post_id
            and v.vote_type == vote_type
        )
