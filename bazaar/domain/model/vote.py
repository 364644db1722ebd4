"""Vote entity."""

from datetime import datetime

from pydantic import Field

from bazaar.domain.model.common import DomainModel
from bazaar.domain.value import PostId, PostKind, UserId, VoteId, VoteType


class Vote(DomainModel):
    """A user's current up/down choice on a post.

    Business rules:
    - One vote per user per post (enforced by database unique constraint)
    - Never held by the post's author
    - Re-casting the same direction deletes the record (toggle-off)
    """

    id: VoteId
    post_kind: PostKind
    post_id: PostId
    user_id: UserId
    vote_type: VoteType
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)


class VoteState(DomainModel):
    """Aggregate counters of a post plus one user's current vote."""

    upvotes: int = Field(ge=0)
    downvotes: int = Field(ge=0)
    user_vote: VoteType | None = None
