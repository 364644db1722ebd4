"""In-memory notification repository for testing."""

from typing import Optional

from bazaar.domain.model.notification import Notification
from bazaar.domain.repository.notification import NotificationRepository
from bazaar.domain.value import NotificationId, UserId

from .database import InMemoryDatabase


class InMemoryNotificationRepository(NotificationRepository):
    """In-memory implementation of NotificationRepository for testing."""

    def __init__(self, database: InMemoryDatabase) -> None:
        self._db = database

    def _for_recipient(
        self, recipient_id: UserId, unread_only: bool
    ) -> list[Notification]:
        return [
            n
            for n in self._db.notifications
            if n.recipient_id == recipient_id and not (unread_only and n.is_read)
        ]

    async def save(self, notification: Notification) -> Notification:
        """Save a notification."""
        self._db.notifications.append(notification)
        return notification

    async def find_by_recipient(
        self,
        recipient_id: UserId,
        unread_only: bool = False,
        limit: int = 20,
        offset: int = 0,
    ) -> list[Notification]:
        """Find a page of a user's notifications, newest first."""
        notifications = list(reversed(self._for_recipient(recipient_id, unread_only)))
        notifications.sort(key=lambda n: n.created_at, reverse=True)
        return notifications[offset : offset + limit]

    async def count_by_recipient(
        self, recipient_id: UserId, unread_only: bool = False
    ) -> int:
        """Count a user's notifications."""
        return len(self._for_recipient(recipient_id, unread_only))

    async def mark_read(
        self, notification_id: NotificationId, recipient_id: UserId
    ) -> Optional[Notification]:
        """Mark one of the recipient's notifications as read."""
        for i, notification in enumerate(self._db.notifications):
            if (
                notification.id == notification_id
                and notification.recipient_id == recipient_id
            ):
                updated = notification.model_copy(update={"is_read": True})
                self._db.notifications[i] = updated
                return updated
        return None

    async def mark_all_read(self, recipient_id: UserId) -> int:
        """Mark every unread notification of the recipient as read."""
        count = 0
        for i, notification in enumerate(self._db.notifications):
            if notification.recipient_id == recipient_id and not notification.is_read:
                self._db.notifications[i] = notification.model_copy(
                    update={"is_read": True}
                )
                count += 1
        return count

    async def find_by_id(
        self, notification_id: NotificationId, recipient_id: UserId
    ) -> Optional[Notification]:
        """Find one of the recipient's notifications."""
        for notification in self._db.notifications:
            if (
                notification.id == notification_id
                and notification.recipient_id == recipient_id
            ):
                return notification
        return None

    async def delete(
        self, notification_id: NotificationId, recipient_id: UserId
    ) -> bool:
        """Delete one of the recipient's notifications."""
        before = len(self._db.notifications)
        self._db.notifications[:] = [
            n
            for n in self._db.notifications
            if not (n.id == notification_id and n.recipient_id == recipient_id)
        ]
        return len(self._db.notifications) < before

    async def delete_read(self, recipient_id: UserId) -> int:
        """Delete every read notification of the recipient."""
        before = len(self._db.notifications)
        self._db.notifications[:] = [
            n
            for n in self._db.notifications
            if not (n.recipient_id == recipient_id and n.is_read)
        ]
        return before - len(self._db.notifications)
