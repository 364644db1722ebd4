"""Best-effort notification dispatch.

The vote and comment ledgers emit notifications only through
``NotificationDispatcher``. A failure while storing a notification is
logged and discarded here, so the vote or comment that triggered it
always succeeds.
"""

from uuid import UUID

import logfire

from bazaar.domain.model.comment import Comment
from bazaar.domain.model.notification import Notification
from bazaar.domain.model.post import Post
from bazaar.domain.value import (
    AuthContext,
    NotificationType,
    RelatedModel,
    UserId,
    VoteType,
)

from .base import Service
from .notification_service import NotificationService


class NotificationDispatcher(Service):
    """Fire-and-forget emission point for post author notifications."""

    def __init__(self, notification_service: NotificationService) -> None:
        """Initialize dispatcher.

        Args:
            notification_service: Service that stores notifications
        """
        self.notification_service = notification_service

    async def notify_vote(
        self, post: Post, voter: AuthContext, vote_type: VoteType
    ) -> Notification | None:
        """Tell the post author that someone voted on their post."""
        action = f"{vote_type.value}voted"
        return await self.dispatch(
            recipient_id=post.author_id,
            sender_id=voter.user_id,
            type=NotificationType.for_vote(post.kind, vote_type),
            title=f"Your {post.kind.heading} Was {action}",
            message=f'{voter.username} {action} your {post.kind.label} "{post.title}"',
            related_id=post.id,
            related_model=RelatedModel.for_post(post.kind),
        )

    async def notify_comment(
        self, post: Post, comment: Comment, commenter: AuthContext
    ) -> Notification | None:
        """Tell the post author that someone commented on their post."""
        return await self.dispatch(
            recipient_id=post.author_id,
            sender_id=commenter.user_id,
            type=NotificationType.for_comment(post.kind),
            title=f"New Comment on Your {post.kind.heading}",
            message=(
                f'{commenter.username} commented on your {post.kind.label} "{post.title}"'
            ),
            related_id=comment.id,
            related_model=RelatedModel.for_comment(post.kind),
        )

    async def dispatch(
        self,
        recipient_id: UserId,
        sender_id: UserId,
        type: NotificationType,
        title: str,
        message: str,
        related_id: UUID,
        related_model: RelatedModel,
    ) -> Notification | None:
        """Store a notification, swallowing any failure.

        Nothing is sent when the sender is the recipient.

        Returns:
            The stored notification, or None if skipped or failed
        """
        if sender_id == recipient_id:
            return None

        try:
            return await self.notification_service.create_notification(
                recipient_id=recipient_id,
                sender_id=sender_id,
                type=type,
                title=title[:255],
                message=message[:1000],
                related_id=related_id,
                related_model=related_model,
            )
        except Exception as e:
            logfire.warn(
                "Notification dispatch failed",
                recipient_id=str(recipient_id),
                type=type.value,
                related_id=str(related_id),
                error=str(e),
                _exc_info=True,
            )
            return None
