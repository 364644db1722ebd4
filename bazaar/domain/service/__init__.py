"""Domain services."""

from .base import Service
from .comment_service import CommentService
from .jwt_service import JWTService
from .notification_dispatcher import NotificationDispatcher
from .notification_service import NotificationService
from .post_service import PostService
from .vote_service import VoteService, parse_vote_type

__all__ = [
    "CommentService",
    "JWTService",
    "NotificationDispatcher",
    "NotificationService",
    "PostService",
    "Service",
    "VoteService",
    "parse_vote_type",
]
