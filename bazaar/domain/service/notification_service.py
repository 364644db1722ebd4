"""Notification domain service."""

from datetime import datetime
from uuid import UUID, uuid4

import logfire

from bazaar.domain.error import NotFoundError
from bazaar.domain.model.notification import Notification
from bazaar.domain.repository import NotificationRepository
from bazaar.domain.value import (
    NotificationId,
    NotificationPriority,
    NotificationType,
    RelatedModel,
    UserId,
)

from .base import Service


class NotificationService(Service):
    """Domain service for storing and reading notifications."""

    def __init__(self, notification_repository: NotificationRepository) -> None:
        """Initialize notification service.

        Args:
            notification_repository: Notification repository
        """
        self.notification_repository = notification_repository

    async def create_notification(
        self,
        recipient_id: UserId,
        sender_id: UserId,
        type: NotificationType,
        title: str,
        message: str,
        related_id: UUID,
        related_model: RelatedModel,
        priority: NotificationPriority = NotificationPriority.MEDIUM,
    ) -> Notification:
        """Create and store a notification.

        Args:
            recipient_id: User who receives the notification
            sender_id: User whose action caused it
            type: Notification type
            title: Short title
            message: Full message
            related_id: ID of the post or comment involved
            related_model: Which entity ``related_id`` refers to
            priority: Display priority

        Returns:
            Stored notification
        """
        with logfire.span(
            "notification_service.create_notification",
            recipient_id=str(recipient_id),
            type=type.value,
        ):
            notification = Notification(
                id=NotificationId(uuid4()),
                recipient_id=recipient_id,
                sender_id=sender_id,
                type=type,
                title=title,
                message=message,
                related_id=related_id,
                related_model=related_model,
                priority=priority,
                is_read=False,
                created_at=datetime.now(),
            )
            saved = await self.notification_repository.save(notification)
            logfire.info(
                "Notification created",
                notification_id=str(saved.id),
                recipient_id=str(recipient_id),
                type=type.value,
            )
            return saved

    async def list_for_recipient(
        self,
        recipient_id: UserId,
        unread_only: bool = False,
        limit: int = 20,
        offset: int = 0,
    ) -> list[Notification]:
        """List a user's notifications, newest first."""
        with logfire.span(
            "notification_service.list_for_recipient",
            recipient_id=str(recipient_id),
            unread_only=unread_only,
        ):
            return await self.notification_repository.find_by_recipient(
                recipient_id=recipient_id,
                unread_only=unread_only,
                limit=limit,
                offset=offset,
            )

    async def count_for_recipient(
        self, recipient_id: UserId, unread_only: bool = False
    ) -> int:
        """Count a user's notifications."""
        return await self.notification_repository.count_by_recipient(
            recipient_id=recipient_id, unread_only=unread_only
        )

    async def mark_read(
        self, notification_id: NotificationId, recipient_id: UserId
    ) -> Notification:
        """Mark one notification as read.

        Raises:
            NotFoundError: If the notification does not belong to the recipient
        """
        with logfire.span(
            "notification_service.mark_read",
            notification_id=str(notification_id),
            recipient_id=str(recipient_id),
        ):
            updated = await self.notification_repository.mark_read(
                notification_id, recipient_id
            )
            if not updated:
                logfire.warn(
                    "Notification not found for recipient",
                    notification_id=str(notification_id),
                    recipient_id=str(recipient_id),
                )
                raise NotFoundError("Notification", str(notification_id))
            return updated

    async def mark_all_read(self, recipient_id: UserId) -> int:
        """Mark all of a user's notifications as read.

        Returns:
            Number of notifications updated
        """
        with logfire.span(
            "notification_service.mark_all_read", recipient_id=str(recipient_id)
        ):
            updated = await self.notification_repository.mark_all_read(recipient_id)
            logfire.info(
                "Notifications marked read", recipient_id=str(recipient_id), count=updated
            )
            return updated

    async def get_notification(
        self, notification_id: NotificationId, recipient_id: UserId
    ) -> Notification:
        """Get one of the recipient's notifications.

        Raises:
            NotFoundError: If the notification does not belong to the recipient
        """
        notification = await self.notification_repository.find_by_id(
            notification_id, recipient_id
        )
        if not notification:
            raise NotFoundError("Notification", str(notification_id))
        return notification

    async def delete_notification(
        self, notification_id: NotificationId, recipient_id: UserId
    ) -> None:
        """Delete one of the recipient's notifications.

        Raises:
            NotFoundError: If the notification does not belong to the recipient
        """
        with logfire.span(
            "notification_service.delete_notification",
            notification_id=str(notification_id),
            recipient_id=str(recipient_id),
        ):
            deleted = await self.notification_repository.delete(
                notification_id, recipient_id
            )
            if not deleted:
                logfire.warn(
                    "Notification not found for recipient",
                    notification_id=str(notification_id),
                    recipient_id=str(recipient_id),
                )
                raise NotFoundError("Notification", str(notification_id))

    async def delete_read(self, recipient_id: UserId) -> int:
        """Delete all of a user's read notifications.

        Returns:
            Number of notifications deleted
        """
        with logfire.span(
            "notification_service.delete_read", recipient_id=str(recipient_id)
        ):
            deleted = await self.notification_repository.delete_read(recipient_id)
            logfire.info(
                "Read notifications deleted",
                recipient_id=str(recipient_id),
                count=deleted,
            )
            return deleted
