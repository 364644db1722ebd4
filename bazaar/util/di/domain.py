"""Domain layer DI providers."""

from dishka import Scope, provide

from bazaar.config import AuthSettings, LedgerSettings
from bazaar.domain.repository import (
    CommentRepository,
    NotificationRepository,
    PostRepository,
    VoteRepository,
)
from bazaar.domain.service import (
    CommentService,
    JWTService,
    NotificationDispatcher,
    NotificationService,
    PostService,
    VoteService,
)
from bazaar.domain.value import PostKind
from bazaar.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_post_service(
        self, post_repositories: dict[PostKind, PostRepository]
    ) -> PostService:
        """Provide post domain service over every post kind."""
        return PostService(post_repositories=post_repositories)

    @provide
    def get_notification_service(
        self, notification_repository: NotificationRepository
    ) -> NotificationService:
        """Provide notification domain service."""
        return NotificationService(notification_repository=notification_repository)

    @provide
    def get_notification_dispatcher(
        self, notification_service: NotificationService
    ) -> NotificationDispatcher:
        """Provide the best-effort notification emitter."""
        return NotificationDispatcher(notification_service=notification_service)

    @provide
    def get_vote_service(
        self,
        vote_repository: VoteRepository,
        post_service: PostService,
        notification_dispatcher: NotificationDispatcher,
    ) -> VoteService:
        """Provide vote domain service."""
        return VoteService(
            vote_repository=vote_repository,
            post_service=post_service,
            notification_dispatcher=notification_dispatcher,
        )

    @provide
    def get_comment_service(
        self,
        comment_repository: CommentRepository,
        post_service: PostService,
        notification_dispatcher: NotificationDispatcher,
        ledger_settings: LedgerSettings,
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(
            comment_repository=comment_repository,
            post_service=post_service,
            notification_dispatcher=notification_dispatcher,
            max_length=ledger_settings.comment_max_length,
        )
