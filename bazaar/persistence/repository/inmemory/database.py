"""Shared in-memory store for testing."""

from bazaar.domain.model import Comment, Notification, Post, Vote
from bazaar.domain.value import PostId, PostKind


class InMemoryDatabase:
    """Process-local tables shared by the in-memory repositories.

    Repositories are created per request, so state that must survive
    between requests lives here.
    """

    def __init__(self) -> None:
        self.posts: dict[PostKind, dict[PostId, Post]] = {
            kind: {} for kind in PostKind
        }
        self.votes: list[Vote] = []
        self.comments: list[Comment] = []
        self.notifications: list[Notification] = []
