"""Notification repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from bazaar.domain.model.notification import Notification
from bazaar.domain.value import NotificationId, UserId


class NotificationRepository(ABC):
    """Repository for Notification entity."""

    @abstractmethod
    async def save(self, notification: Notification) -> Notification:
        """Insert a notification.

        Args:
            notification: The notification to save

        Returns:
            The saved notification
        """
        pass

    @abstractmethod
    async def find_by_recipient(
        self,
        recipient_id: UserId,
        unread_only: bool = False,
        limit: int = 20,
        offset: int = 0,
    ) -> List[Notification]:
        """Find a user's notifications, newest first.

        Args:
            recipient_id: The recipient's user ID
            unread_only: Only return unread notifications
            limit: Maximum number of notifications to return
            offset: Number of notifications to skip

        Returns:
            List of notifications
        """
        pass

    @abstractmethod
    async def count_by_recipient(
        self, recipient_id: UserId, unread_only: bool = False
    ) -> int:
        """Count a user's notifications.

        Args:
            recipient_id: The recipient's user ID
            unread_only: Only count unread notifications

        Returns:
            Number of notifications
        """
        pass

    @abstractmethod
    async def mark_read(
        self, notification_id: NotificationId, recipient_id: UserId
    ) -> Optional[Notification]:
        """Mark one of the recipient's notifications as read.

        Args:
            notification_id: The notification ID
            recipient_id: Owner of the notification

        Returns:
            The updated notification, or None if not found for this recipient
        """
        pass

    @abstractmethod
    async def mark_all_read(self, recipient_id: UserId) -> int:
        """Mark every unread notification of the recipient as read.

        Args:
            recipient_id: The recipient's user ID

        Returns:
            Number of notifications updated
        """
        pass

    @abstractmethod
    async def find_by_id(
        self, notification_id: NotificationId, recipient_id: UserId
    ) -> Optional[Notification]:
        """Find one of the recipient's notifications.

        Args:
            notification_id: The notification ID
            recipient_id: Owner of the notification

        Returns:
            The notification, or None if not found for this recipient
        """
        pass

    @abstractmethod
    async def delete(
        self, notification_id: NotificationId, recipient_id: UserId
    ) -> bool:
        """Delete one of the recipient's notifications.

        Args:
            notification_id: The notification ID
            recipient_id: Owner of the notification

        Returns:
            True if a notification was deleted
        """
        pass

    @abstractmethod
    async def delete_read(self, recipient_id: UserId) -> int:
        """Delete every read notification of the recipient.

        Args:
            recipient_id: The recipient's user ID

        Returns:
            Number of notifications deleted
        """
        pass
