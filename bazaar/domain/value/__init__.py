"""Domain value objects for Bazaar."""

from bazaar.domain.value.identifiers import (
    CommentId,
    NotificationId,
    PostId,
    UserId,
    VoteId,
)
from bazaar.domain.value.types import (
    AuthContext,
    NotificationPriority,
    NotificationType,
    PostKind,
    RelatedModel,
    Username,
    UserRole,
    VoteType,
)

__all__ = [
    # Identifiers
    "UserId",
    "PostId",
    "CommentId",
    "VoteId",
    "NotificationId",
    # Types
    "AuthContext",
    "NotificationPriority",
    "NotificationType",
    "PostKind",
    "RelatedModel",
    "Username",
    "UserRole",
    "VoteType",
]
