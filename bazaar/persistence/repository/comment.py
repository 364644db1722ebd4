"""PostgreSQL implementation of Comment repository."""

from sqlalchemy import and_, desc, func, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from bazaar.domain.model import Comment
from bazaar.domain.repository import CommentRepository
from bazaar.domain.value import PostId, PostKind
from bazaar.persistence.mappers import comment_to_dict, row_to_comment
from bazaar.persistence.tables import comments_table


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    def _for_post(self, post_kind: PostKind, post_id: PostId):
        return and_(
            comments_table.c.post_kind == post_kind.value,
            comments_table.c.post_id == post_id,
        )

    async def save(self, comment: Comment) -> Comment:
        """Insert a comment."""
        stmt = insert(comments_table).values(**comment_to_dict(comment))
        await self.session.execute(stmt)
        await self.session.flush()
        return comment

    async def find_by_post(
        self,
        post_kind: PostKind,
        post_id: PostId,
        limit: int = 20,
        offset: int = 0,
    ) -> list[Comment]:
        """Find a page of a post's comments, newest first."""
        stmt = (
            select(comments_table)
            .where(self._for_post(post_kind, post_id))
            .order_by(desc(comments_table.c.created_at), desc(comments_table.c.id))
            .limit(limit)
            .offset(offset)
        )
        result = await self.session.execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def count_by_post(self, post_kind: PostKind, post_id: PostId) -> int:
        """Count a post's comments."""
        stmt = (
            select(func.count())
            .select_from(comments_table)
            .where(self._for_post(post_kind, post_id))
        )
        result = await self.session.execute(stmt)
        return result.scalar_one()
