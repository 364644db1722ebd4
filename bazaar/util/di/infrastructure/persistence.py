"""Persistence infrastructure providers.

One SQLAlchemy session per request is the unit of work: a vote record,
its counter update and the notification it triggers commit together.
"""

from collections.abc import AsyncIterator

from dishka import Scope, provide
import logfire
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from bazaar.config import Settings
from bazaar.domain.repository import (
    CommentRepository,
    NotificationRepository,
    PostRepository,
    VoteRepository,
)
from bazaar.domain.value import PostKind
from bazaar.persistence.database import create_engine, create_session_factory
from bazaar.persistence.repository import (
    PostgresCommentRepository,
    PostgresNotificationRepository,
    PostgresPostRepository,
    PostgresVoteRepository,
)
from bazaar.util.di.base import ProviderBase
from bazaar.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Swappable persistence component."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """PostgreSQL-backed repositories."""

    __is_mock__ = False

    scope = Scope.REQUEST

    @provide(scope=Scope.APP)
    async def get_engine(self, settings: Settings) -> AsyncIterator[AsyncEngine]:
        """Engine shared by every request; its pool closes with the container."""
        engine = create_engine(settings)
        instrument_sqlalchemy(engine)
        yield engine
        await engine.dispose()

    @provide(scope=Scope.APP)
    def get_session_factory(
        self, engine: AsyncEngine
    ) -> async_sessionmaker[AsyncSession]:
        return create_session_factory(engine)

    @provide
    async def get_session(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> AsyncIterator[AsyncSession]:
        """Open the request's transaction.

        Commits when the request finishes cleanly; any exception rolls back
        every ledger write made during the request.
        """
        async with session_factory() as session:
            try:
                yield session
            except Exception as e:
                logfire.warn(
                    "Ledger transaction rolled back",
                    error=str(e),
                    error_type=type(e).__name__,
                )
                await session.rollback()
                raise
            await session.commit()
            logfire.debug("Ledger transaction committed")

    @provide
    def get_post_repositories(
        self, session: AsyncSession
    ) -> dict[PostKind, PostRepository]:
        """Provide one repository per post table."""
        return {kind: PostgresPostRepository(session, kind) for kind in PostKind}

    @provide
    def get_vote_repository(self, session: AsyncSession) -> VoteRepository:
        return PostgresVoteRepository(session)

    @provide
    def get_comment_repository(self, session: AsyncSession) -> CommentRepository:
        return PostgresCommentRepository(session)

    @provide
    def get_notification_repository(
        self, session: AsyncSession
    ) -> NotificationRepository:
        return PostgresNotificationRepository(session)
