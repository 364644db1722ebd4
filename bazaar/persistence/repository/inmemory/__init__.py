"""In-memory repository implementations for testing."""

from .comment import InMemoryCommentRepository
from .database import InMemoryDatabase
from .notification import InMemoryNotificationRepository
from .post import InMemoryPostRepository
from .vote import InMemoryVoteRepository

__all__ = [
    "InMemoryCommentRepository",
    "InMemoryDatabase",
    "InMemoryNotificationRepository",
    "InMemoryPostRepository",
    "InMemoryVoteRepository",
]
