"""Get notification use case."""

from pydantic import BaseModel

from bazaar.application.usecase.base import BaseUseCase, parse_id
from bazaar.domain.service import NotificationService
from bazaar.domain.value import AuthContext, NotificationId

from .list_notifications import NotificationItem


class GetNotificationRequest(BaseModel):
    """Get one notification request."""

    recipient: AuthContext
    notification_id: str  # UUID string


class GetNotificationUseCase(BaseUseCase):
    """Use case for reading one of the caller's notifications."""

    def __init__(self, notification_service: NotificationService) -> None:
        self.notification_service = notification_service

    async def execute(self, request: GetNotificationRequest) -> NotificationItem:
        """Execute get notification flow.

        Reading a notification does not mark it as read.

        Raises:
            NotFoundError: If the notification does not exist or belongs to
                another user
        """
        notification_id = NotificationId(
            parse_id(request.notification_id, "Notification")
        )
        notification = await self.notification_service.get_notification(
            notification_id, request.recipient.user_id
        )
        return NotificationItem.from_notification(notification)
