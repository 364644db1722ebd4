"""Domain value objects for Bazaar.

Value objects are immutable and defined by their values, not identity.
"""

from enum import Enum

from pydantic import field_validator

from bazaar.domain.value.common import RootValueObject, ValueObject
from bazaar.domain.value.identifiers import UserId


class PostKind(str, Enum):
    """Kind of user-generated post that can receive votes and comments."""

    TRADE = "trade"
    FORUM = "forum"

    @property
    def label(self) -> str:
        """Human-readable noun used in notification messages."""
        return "trade" if self is PostKind.TRADE else "forum post"

    @property
    def heading(self) -> str:
        """Capitalized noun used in notification titles."""
        return "Trade" if self is PostKind.TRADE else "Post"


class VoteType(str, Enum):
    """Direction of a vote."""

    UP = "up"
    DOWN = "down"


class UserRole(str, Enum):
    """Role supplied by the identity provider."""

    USER = "user"
    VERIFIED = "verified"
    MIDDLEMAN = "middleman"
    MODERATOR = "moderator"
    ADMIN = "admin"
    BANNED = "banned"

    @property
    def is_staff(self) -> bool:
        return self in (UserRole.MODERATOR, UserRole.ADMIN)


class NotificationType(str, Enum):
    """Kinds of notification raised by votes and comments."""

    TRADE_COMMENT = "trade_comment"
    FORUM_COMMENT = "forum_comment"
    TRADE_UPVOTE = "trade_upvote"
    TRADE_DOWNVOTE = "trade_downvote"
    FORUM_UPVOTE = "forum_upvote"
    FORUM_DOWNVOTE = "forum_downvote"

    @classmethod
    def for_vote(cls, kind: PostKind, vote_type: VoteType) -> "NotificationType":
        return cls(f"{kind.value}_{vote_type.value}vote")

    @classmethod
    def for_comment(cls, kind: PostKind) -> "NotificationType":
        return cls(f"{kind.value}_comment")


class RelatedModel(str, Enum):
    """Entity a notification points at."""

    TRADE = "trade"
    TRADE_COMMENT = "trade_comment"
    FORUM_POST = "forum_post"
    FORUM_COMMENT = "forum_comment"

    @classmethod
    def for_post(cls, kind: PostKind) -> "RelatedModel":
        return cls.TRADE if kind is PostKind.TRADE else cls.FORUM_POST

    @classmethod
    def for_comment(cls, kind: PostKind) -> "RelatedModel":
        return cls.TRADE_COMMENT if kind is PostKind.TRADE else cls.FORUM_COMMENT


class NotificationPriority(str, Enum):
    """Notification priority."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    URGENT = "urgent"


class Username(RootValueObject[str]):
    """Public username of an account."""

    @field_validator("root")
    @classmethod
    def validate_username(cls, v: str) -> str:
        """Validate username is not empty and within length limits."""
        if len(v) < 1 or len(v) > 255:
            raise ValueError("Username must be 1-255 characters")
        return v


class AuthContext(ValueObject):
    """Authenticated caller, as supplied by the identity provider.

    Passed explicitly into every ledger operation; the ledger never
    authenticates on its own.
    """

    user_id: UserId
    username: Username
    role: UserRole = UserRole.USER
