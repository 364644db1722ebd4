"""Mark notifications read use cases."""

from pydantic import BaseModel

from bazaar.application.usecase.base import BaseUseCase, CamelModel, parse_id
from bazaar.domain.service import NotificationService
from bazaar.domain.value import AuthContext, NotificationId

from .list_notifications import NotificationItem


class MarkNotificationReadRequest(BaseModel):
    """Mark one notification read request."""

    recipient: AuthContext
    notification_id: str  # UUID string


class MarkNotificationReadUseCase(BaseUseCase):
    """Use case for marking one of the caller's notifications as read."""

    def __init__(self, notification_service: NotificationService) -> None:
        """Initialize mark read use case.

        Args:
            notification_service: Notification domain service
        """
        self.notification_service = notification_service

    async def execute(self, request: MarkNotificationReadRequest) -> NotificationItem:
        """Execute mark read flow.

        Raises:
            NotFoundError: If the notification does not exist or belongs to
                another user
        """
        notification_id = NotificationId(
            parse_id(request.notification_id, "Notification")
        )
        notification = await self.notification_service.mark_read(
            notification_id, request.recipient.user_id
        )
        return NotificationItem.from_notification(notification)


class MarkAllNotificationsReadRequest(BaseModel):
    """Mark all notifications read request."""

    recipient: AuthContext


class MarkAllNotificationsReadResponse(CamelModel):
    """Number of notifications that were unread."""

    updated: int


class MarkAllNotificationsReadUseCase(BaseUseCase):
    """Use case for marking all of the caller's notifications as read."""

    def __init__(self, notification_service: NotificationService) -> None:
        self.notification_service = notification_service

    async def execute(
        self, request: MarkAllNotificationsReadRequest
    ) -> MarkAllNotificationsReadResponse:
        updated = await self.notification_service.mark_all_read(
            request.recipient.user_id
        )
        return MarkAllNotificationsReadResponse(updated=updated)
