"""Comment entity.

Comments are flat and append-only: there is no edit or delete path.
"""

from datetime import datetime

from pydantic import Field

from bazaar.domain.model.common import DomainModel
from bazaar.domain.value import CommentId, PostId, PostKind, UserId
from bazaar.domain.value.types import Username


class Comment(DomainModel):
    """Comment on a trade or forum post."""

    id: CommentId
    post_kind: PostKind
    post_id: PostId
    author_id: UserId
    author_username: Username
    content: str = Field(min_length=1)
    created_at: datetime = Field(default_factory=datetime.now)
