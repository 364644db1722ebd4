"""Repository interfaces for Bazaar domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from bazaar.domain.repository.comment import CommentRepository
from bazaar.domain.repository.notification import NotificationRepository
from bazaar.domain.repository.post import PostRepository
from bazaar.domain.repository.vote import VoteRepository

__all__ = [
    "PostRepository",
    "CommentRepository",
    "VoteRepository",
    "NotificationRepository",
]
