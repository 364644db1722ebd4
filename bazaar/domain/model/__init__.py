"""Domain model entities for Bazaar."""

from bazaar.domain.model.comment import Comment
from bazaar.domain.model.notification import Notification
from bazaar.domain.model.post import Post
from bazaar.domain.model.vote import Vote, VoteState

__all__ = [
    "Post",
    "Vote",
    "VoteState",
    "Comment",
    "Notification",
]
