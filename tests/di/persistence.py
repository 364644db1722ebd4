"""Mock persistence providers for testing."""

from dishka import Scope, from_context, provide

from bazaar.domain.repository import (
    CommentRepository,
    NotificationRepository,
    PostRepository,
    VoteRepository,
)
from bazaar.domain.value import PostKind
from bazaar.persistence.repository.inmemory import (
    InMemoryCommentRepository,
    InMemoryDatabase,
    InMemoryNotificationRepository,
    InMemoryPostRepository,
    InMemoryVoteRepository,
)
from bazaar.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using in-memory repositories.

    Repositories are REQUEST-scoped views over one APP-scoped
    ``InMemoryDatabase`` handed in as container context, so state written
    by one request is visible to the next, and each container starts empty.
    """

    __is_mock__ = True

    scope = Scope.REQUEST

    database = from_context(provides=InMemoryDatabase, scope=Scope.APP)

    @provide
    def get_post_repositories(
        self, database: InMemoryDatabase
    ) -> dict[PostKind, PostRepository]:
        """Provide one in-memory Post repository per post kind."""
        return {kind: InMemoryPostRepository(database, kind) for kind in PostKind}

    @provide
    def get_vote_repository(self, database: InMemoryDatabase) -> VoteRepository:
        """Provide in-memory Vote repository."""
        return InMemoryVoteRepository(database)

    @provide
    def get_comment_repository(self, database: InMemoryDatabase) -> CommentRepository:
        """Provide in-memory Comment repository."""
        return InMemoryCommentRepository(database)

    @provide
    def get_notification_repository(
        self, database: InMemoryDatabase
    ) -> NotificationRepository:
        """Provide in-memory Notification repository."""
        return InMemoryNotificationRepository(database)
