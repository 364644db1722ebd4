"""PostgreSQL implementation of Post repository."""

from datetime import datetime
from typing import Optional

import logfire
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from bazaar.domain.model import Post
from bazaar.domain.repository.post import PostRepository
from bazaar.domain.value import PostId, PostKind
from bazaar.persistence.mappers import post_to_dict, row_to_post
from bazaar.persistence.tables import POST_TABLES


class PostgresPostRepository(PostRepository):
    """PostgreSQL implementation of PostRepository.

    One instance serves one post kind; the kind picks the table.
    """

    def __init__(self, session: AsyncSession, kind: PostKind) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
            kind: Post kind stored by this repository
        """
        self.session = session
        self.kind = kind
        self.table = POST_TABLES[kind]

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        with logfire.span(
            "post_repository.find_by_id", post_kind=self.kind.value, post_id=str(post_id)
        ):
            stmt = select(self.table).where(self.table.c.id == post_id)
            result = await self.session.execute(stmt)
            row = result.fetchone()

            if not row:
                logfire.warn(
                    "Post not found", post_kind=self.kind.value, post_id=str(post_id)
                )
                return None

            return row_to_post(row._asdict(), self.kind)

    async def save(self, post: Post) -> Post:
        """Save a post (create or update)."""
        with logfire.span(
            "post_repository.save", post_kind=self.kind.value, post_id=str(post.id)
        ):
            existing = await self.find_by_id(post.id)
            post_dict = post_to_dict(post)

            if existing:
                stmt = (
                    self.table.update()
                    .where(self.table.c.id == post.id)
                    .values(**post_dict)
                )
            else:
                stmt = self.table.insert().values(**post_dict)

            await self.session.execute(stmt)
            await self.session.flush()
            return post

    async def adjust_counters(
        self, post_id: PostId, upvotes_delta: int, downvotes_delta: int
    ) -> Optional[Post]:
        """Atomically shift both counters, clamping at 0."""
        with logfire.span(
            "post_repository.adjust_counters",
            post_kind=self.kind.value,
            post_id=str(post_id),
            upvotes_delta=upvotes_delta,
            downvotes_delta=downvotes_delta,
        ):
            stmt = (
                self.table.update()
                .where(self.table.c.id == post_id)
                .values(
                    upvotes=func.greatest(self.table.c.upvotes + upvotes_delta, 0),
                    downvotes=func.greatest(
                        self.table.c.downvotes + downvotes_delta, 0
                    ),
                    updated_at=datetime.now(),
                )
                .returning(self.table)
            )
            return await self._execute_returning(stmt, post_id)

    async def set_counters(
        self, post_id: PostId, upvotes: int, downvotes: int
    ) -> Optional[Post]:
        """Overwrite both counters."""
        stmt = (
            self.table.update()
            .where(self.table.c.id == post_id)
            .values(upvotes=upvotes, downvotes=downvotes, updated_at=datetime.now())
            .returning(self.table)
        )
        return await self._execute_returning(stmt, post_id)

    async def _execute_returning(self, stmt, post_id: PostId) -> Optional[Post]:
        result = await self.session.execute(stmt)
        row = result.fetchone()

        if row is None:
            logfire.warn(
                "Post not found for counter update",
                post_kind=self.kind.value,
                post_id=str(post_id),
            )
            return None

        await self.session.flush()
        return row_to_post(row._asdict(), self.kind)
