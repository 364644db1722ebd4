"""Application layer DI providers."""

from dishka import Scope, provide

from bazaar.application.usecase.comment import AddCommentUseCase, ListCommentsUseCase
from bazaar.application.usecase.notification import (
    DeleteNotificationUseCase,
    DeleteReadNotificationsUseCase,
    GetNotificationUseCase,
    GetUnreadCountUseCase,
    ListNotificationsUseCase,
    MarkAllNotificationsReadUseCase,
    MarkNotificationReadUseCase,
)
from bazaar.application.usecase.vote import (
    CastVoteUseCase,
    GetVotesUseCase,
    RecountVotesUseCase,
)
from bazaar.config import Settings
from bazaar.domain.service import CommentService, NotificationService, VoteService
from bazaar.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    scope = Scope.REQUEST

    # Vote use cases
    @provide
    def get_cast_vote_use_case(self, vote_service: VoteService) -> CastVoteUseCase:
        """Provide cast vote use case."""
        return CastVoteUseCase(vote_service=vote_service)

    @provide
    def get_get_votes_use_case(self, vote_service: VoteService) -> GetVotesUseCase:
        """Provide get votes use case."""
        return GetVotesUseCase(vote_service=vote_service)

    @provide
    def get_recount_votes_use_case(
        self, vote_service: VoteService
    ) -> RecountVotesUseCase:
        """Provide recount votes use case."""
        return RecountVotesUseCase(vote_service=vote_service)

    # Comment use cases
    @provide
    def get_add_comment_use_case(
        self, comment_service: CommentService
    ) -> AddCommentUseCase:
        """Provide add comment use case."""
        return AddCommentUseCase(comment_service=comment_service)

    @provide
    def get_list_comments_use_case(
        self, comment_service: CommentService, settings: Settings
    ) -> ListCommentsUseCase:
        """Provide list comments use case."""
        return ListCommentsUseCase(comment_service=comment_service, settings=settings)

    # Notification use cases
    @provide
    def get_list_notifications_use_case(
        self, notification_service: NotificationService, settings: Settings
    ) -> ListNotificationsUseCase:
        """Provide list notifications use case."""
        return ListNotificationsUseCase(
            notification_service=notification_service, settings=settings
        )

    @provide
    def get_unread_count_use_case(
        self, notification_service: NotificationService
    ) -> GetUnreadCountUseCase:
        """Provide unread count use case."""
        return GetUnreadCountUseCase(notification_service=notification_service)

    @provide
    def get_mark_notification_read_use_case(
        self, notification_service: NotificationService
    ) -> MarkNotificationReadUseCase:
        """Provide mark notification read use case."""
        return MarkNotificationReadUseCase(notification_service=notification_service)

    @provide
    def get_mark_all_notifications_read_use_case(
        self, notification_service: NotificationService
    ) -> MarkAllNotificationsReadUseCase:
        """Provide mark all notifications read use case."""
        return MarkAllNotificationsReadUseCase(
            notification_service=notification_service
        )

    @provide
    def get_get_notification_use_case(
        self, notification_service: NotificationService
    ) -> GetNotificationUseCase:
        """Provide get notification use case."""
        return GetNotificationUseCase(notification_service=notification_service)

    @provide
    def get_delete_notification_use_case(
        self, notification_service: NotificationService
    ) -> DeleteNotificationUseCase:
        """Provide delete notification use case."""
        return DeleteNotificationUseCase(notification_service=notification_service)

    @provide
    def get_delete_read_notifications_use_case(
        self, notification_service: NotificationService
    ) -> DeleteReadNotificationsUseCase:
        """Provide delete read notifications use case."""
        return DeleteReadNotificationsUseCase(
            notification_service=notification_service
        )
