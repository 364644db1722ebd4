"""PostgreSQL repository implementations."""

from bazaar.persistence.repository.comment import PostgresCommentRepository
from bazaar.persistence.repository.notification import PostgresNotificationRepository
from bazaar.persistence.repository.post import PostgresPostRepository
from bazaar.persistence.repository.vote import PostgresVoteRepository

__all__ = [
    "PostgresPostRepository",
    "PostgresCommentRepository",
    "PostgresVoteRepository",
    "PostgresNotificationRepository",
]
