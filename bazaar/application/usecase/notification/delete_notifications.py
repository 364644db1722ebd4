"""Delete notifications use cases."""

from pydantic import BaseModel

from bazaar.application.usecase.base import BaseUseCase, CamelModel, parse_id
from bazaar.domain.service import NotificationService
from bazaar.domain.value import AuthContext, NotificationId


class DeleteNotificationsResponse(CamelModel):
    """Number of notifications removed."""

    deleted: int


class DeleteNotificationRequest(BaseModel):
    """Delete one notification request."""

    recipient: AuthContext
    notification_id: str  # UUID string


class DeleteNotificationUseCase(BaseUseCase):
    """Use case for deleting one of the caller's notifications."""

    def __init__(self, notification_service: NotificationService) -> None:
        """Initialize delete notification use case.

        Args:
            notification_service: Notification domain service
        """
        self.notification_service = notification_service

    async def execute(
        self, request: DeleteNotificationRequest
    ) -> DeleteNotificationsResponse:
        """Execute delete notification flow.

        Raises:
            NotFoundError: If the notification does not exist or belongs to
                another user
        """
        notification_id = NotificationId(
            parse_id(request.notification_id, "Notification")
        )
        await self.notification_service.delete_notification(
            notification_id, request.recipient.user_id
        )
        return DeleteNotificationsResponse(deleted=1)


class DeleteReadNotificationsRequest(BaseModel):
    """Delete all read notifications request."""

    recipient: AuthContext


class DeleteReadNotificationsUseCase(BaseUseCase):
    """Use case for clearing the caller's read notifications."""

    def __init__(self, notification_service: NotificationService) -> None:
        self.notification_service = notification_service

    async def execute(
        self, request: DeleteReadNotificationsRequest
    ) -> DeleteNotificationsResponse:
        deleted = await self.notification_service.delete_read(
            request.recipient.user_id
        )
        return DeleteNotificationsResponse(deleted=deleted)
