"""List notifications use case."""

from datetime import datetime

from pydantic import BaseModel

from bazaar.application.usecase.base import (
    BaseUseCase,
    CamelModel,
    PaginationResponse,
    clamp_page,
)
from bazaar.config import Settings
from bazaar.domain.model import Notification
from bazaar.domain.service import NotificationService
from bazaar.domain.value import (
    AuthContext,
    NotificationPriority,
    NotificationType,
    RelatedModel,
)


class NotificationItem(CamelModel):
    """Notification as returned to its recipient."""

    id: str
    sender_id: str
    type: NotificationType
    title: str
    message: str
    related_id: str
    related_model: RelatedModel
    priority: NotificationPriority
    is_read: bool
    created_at: datetime

    @classmethod
    def from_notification(cls, notification: Notification) -> "NotificationItem":
        return cls(
            id=str(notification.id),
            sender_id=str(notification.sender_id),
            type=notification.type,
            title=notification.title,
            message=notification.message,
            related_id=str(notification.related_id),
            related_model=notification.related_model,
            priority=notification.priority,
            is_read=notification.is_read,
            created_at=notification.created_at,
        )


class ListNotificationsRequest(BaseModel):
    """List notifications request."""

    recipient: AuthContext
    page: int | None = None
    limit: int | None = None
    unread_only: bool = False


class ListNotificationsResponse(CamelModel):
    """A page of notifications plus the unread total."""

    notifications: list[NotificationItem]
    pagination: PaginationResponse
    unread_count: int


class ListNotificationsUseCase(BaseUseCase):
    """Use case for listing the caller's notifications."""

    def __init__(
        self, notification_service: NotificationService, settings: Settings
    ) -> None:
        """Initialize list notifications use case.

        Args:
            notification_service: Notification domain service
            settings: Application settings (page size limits)
        """
        self.notification_service = notification_service
        self.settings = settings

    async def execute(
        self, request: ListNotificationsRequest
    ) -> ListNotificationsResponse:
        """Execute list notifications flow, newest first."""
        recipient_id = request.recipient.user_id
        page, limit, offset = clamp_page(
            request.page,
            request.limit,
            default=self.settings.ledger.notifications_page_size,
            maximum=self.settings.ledger.notifications_max_page_size,
        )

        notifications = await self.notification_service.list_for_recipient(
            recipient_id,
            unread_only=request.unread_only,
            limit=limit,
            offset=offset,
        )
        total = await self.notification_service.count_for_recipient(
            recipient_id, unread_only=request.unread_only
        )
        unread_count = await self.notification_service.count_for_recipient(
            recipient_id, unread_only=True
        )

        return ListNotificationsResponse(
            notifications=[NotificationItem.from_notification(n) for n in notifications],
            pagination=PaginationResponse.build(page, limit, total),
            unread_count=unread_count,
        )
