"""PostgreSQL implementation of Vote repository."""

from datetime import datetime
from typing import Optional

from sqlalchemy import and_, delete, func, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from bazaar.domain.model import Vote
from bazaar.domain.repository import VoteRepository
from bazaar.domain.value import PostId, PostKind, UserId, VoteId, VoteType
from bazaar.persistence.mappers import row_to_vote, vote_to_dict
from bazaar.persistence.tables import votes_table


class PostgresVoteRepository(VoteRepository):
    """PostgreSQL implementation of VoteRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_user_and_post(
        self, post_kind: PostKind, post_id: PostId, user_id: UserId
    ) -> Optional[Vote]:
        """Find a user's vote on a post."""
        stmt = select(votes_table).where(
            and_(
                votes_table.c.post_kind == post_kind.value,
                votes_table.c.post_id == post_id,
                votes_table.c.user_id == user_id,
            )
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_vote(row._asdict()) if row else None

    async def save(self, vote: Vote) -> Vote:
        """Insert a vote.

        The unique constraint raises IntegrityError on a duplicate.
        """
        stmt = insert(votes_table).values(**vote_to_dict(vote))
        await self.session.execute(stmt)
        await self.session.flush()
        return vote

    async def update_type(self, vote_id: VoteId, vote_type: VoteType) -> Optional[Vote]:
        """Flip a vote's direction if it still points the other way."""
        stmt = (
            update(votes_table)
            .where(
                and_(
                    votes_table.c.id == vote_id,
                    votes_table.c.vote_type != vote_type.value,
                )
            )
            .values(vote_type=vote_type.value, updated_at=datetime.now())
            .returning(votes_table)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        await self.session.flush()
        return row_to_vote(row._asdict()) if row else None

    async def delete(self, vote_id: VoteId) -> bool:
        """Delete a vote."""
        stmt = delete(votes_table).where(votes_table.c.id == vote_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]

    async def count_by_post(
        self, post_kind: PostKind, post_id: PostId, vote_type: VoteType
    ) -> int:
        """Count one direction of votes on a post."""
        stmt = (
            select(func.count())
            .select_from(votes_table)
            .where(
                and_(
                    votes_table.c.post_kind == post_kind.value,
                    votes_table.c.post_id == post_id,
                    votes_table.c.vote_type == vote_type.value,
                )
            )
        )
        result = await self.session.execute(stmt)
        return result.scalar_one()
