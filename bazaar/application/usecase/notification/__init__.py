"""Notification use cases."""

from .delete_notifications import (
    DeleteNotificationRequest,
    DeleteNotificationsResponse,
    DeleteNotificationUseCase,
    DeleteReadNotificationsRequest,
    DeleteReadNotificationsUseCase,
)
from .get_notification import GetNotificationRequest, GetNotificationUseCase
from .list_notifications import (
    ListNotificationsRequest,
    ListNotificationsResponse,
    ListNotificationsUseCase,
    NotificationItem,
)
from .mark_read import (
    MarkAllNotificationsReadRequest,
    MarkAllNotificationsReadResponse,
    MarkAllNotificationsReadUseCase,
    MarkNotificationReadRequest,
    MarkNotificationReadUseCase,
)
from .unread_count import (
    GetUnreadCountRequest,
    GetUnreadCountUseCase,
    UnreadCountResponse,
)

__all__ = [
    "DeleteNotificationRequest",
    "DeleteNotificationsResponse",
    "DeleteNotificationUseCase",
    "DeleteReadNotificationsRequest",
    "DeleteReadNotificationsUseCase",
    "GetNotificationRequest",
    "GetNotificationUseCase",
    "ListNotificationsRequest",
    "ListNotificationsResponse",
    "ListNotificationsUseCase",
    "NotificationItem",
    "MarkAllNotificationsReadRequest",
    "MarkAllNotificationsReadResponse",
    "MarkAllNotificationsReadUseCase",
    "MarkNotificationReadRequest",
    "MarkNotificationReadUseCase",
    "GetUnreadCountRequest",
    "GetUnreadCountUseCase",
    "UnreadCountResponse",
]
