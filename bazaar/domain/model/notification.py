"""Notification entity."""

from datetime import datetime
from uuid import UUID

from pydantic import Field

from bazaar.domain.model.common import DomainModel
from bazaar.domain.value import (
    NotificationId,
    NotificationPriority,
    NotificationType,
    RelatedModel,
    UserId,
)


class Notification(DomainModel):
    """Notification delivered to a post author.

    ``related_id`` points at the post (for votes) or the comment (for
    comments); ``related_model`` says which.
    """

    id: NotificationId
    recipient_id: UserId
    sender_id: UserId
    type: NotificationType
    title: str = Field(min_length=1, max_length=255)
    message: str = Field(min_length=1, max_length=1000)
    related_id: UUID
    related_model: RelatedModel
    priority: NotificationPriority = NotificationPriority.MEDIUM
    is_read: bool = False
    created_at: datetime = Field(default_factory=datetime.now)
