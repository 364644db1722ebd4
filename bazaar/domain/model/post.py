"""Post entity.

A post is either a trade listing or a forum post. Both kinds carry the
same cached vote counters, which only the vote ledger mutates.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from bazaar.domain.model.common import DomainModel
from bazaar.domain.value import PostId, PostKind, UserId
from bazaar.domain.value.types import Username


class Post(DomainModel):
    """Trade listing or forum post.

    For trades ``title`` is the offered item and ``body`` the description;
    for forum posts they are the post title and content.
    """

    id: PostId
    kind: PostKind
    author_id: UserId
    author_username: Username
    title: str = Field(min_length=1, max_length=255)
    body: Optional[str] = None
    upvotes: int = Field(default=0, ge=0)
    downvotes: int = Field(default=0, ge=0)
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    def is_authored_by(self, user_id: UserId) -> bool:
        return self.author_id == user_id
