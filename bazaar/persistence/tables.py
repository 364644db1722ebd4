"""SQLAlchemy table definitions for Bazaar.

They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    Enum,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
    UniqueConstraint,
)
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

from bazaar.domain.value import PostKind

metadata = MetaData()

post_kind_enum = Enum("trade", "forum", name="post_kind", create_type=False)
vote_type_enum = Enum("up", "down", name="vote_type", create_type=False)

# ============================================================================
# TRADES TABLE
# ============================================================================
trades_table = Table(
    "trades",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("user_id", UUID, nullable=False),  # Author
    Column("username", String(255), nullable=False),  # Denormalized from users
    Column("item_offered", String(255), nullable=False),
    Column("item_requested", String(255), nullable=True),
    Column("description", Text, nullable=True),
    Column("status", String(20), nullable=False, server_default="open"),
    Column("upvotes", Integer, nullable=False, server_default="0"),
    Column("downvotes", Integer, nullable=False, server_default="0"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("upvotes >= 0 AND downvotes >= 0", name="trade_votes_non_negative"),
)

Index("idx_trades_user_id", trades_table.c.user_id)
Index("idx_trades_created_at", trades_table.c.created_at.desc())

# ============================================================================
# FORUM POSTS TABLE
# ============================================================================
forum_posts_table = Table(
    "forum_posts",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("user_id", UUID, nullable=False),  # Author
    Column("username", String(255), nullable=False),  # Denormalized from users
    Column("category", String(30), nullable=False, server_default="general"),
    Column("title", String(255), nullable=False),
    Column("content", Text, nullable=False),
    Column("upvotes", Integer, nullable=False, server_default="0"),
    Column("downvotes", Integer, nullable=False, server_default="0"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("upvotes >= 0 AND downvotes >= 0", name="forum_votes_non_negative"),
)

Index("idx_forum_posts_user_id", forum_posts_table.c.user_id)
Index("idx_forum_posts_created_at", forum_posts_table.c.created_at.desc())

# Table holding each post kind
POST_TABLES: dict[PostKind, Table] = {
    PostKind.TRADE: trades_table,
    PostKind.FORUM: forum_posts_table,
}

# ============================================================================
# VOTES TABLE
# ============================================================================
votes_table = Table(
    "votes",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("post_kind", post_kind_enum, nullable=False),
    Column("post_id", UUID, nullable=False),
    Column("user_id", UUID, nullable=False),
    Column("vote_type", vote_type_enum, nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("post_kind", "post_id", "user_id", name="unique_vote"),
)

Index("idx_votes_post", votes_table.c.post_kind, votes_table.c.post_id)

# ============================================================================
# COMMENTS TABLE
# ============================================================================
comments_table = Table(
    "comments",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("post_kind", post_kind_enum, nullable=False),
    Column("post_id", UUID, nullable=False),
    Column("author_id", UUID, nullable=False),
    Column("author_username", String(255), nullable=False),  # Denormalized
    Column("content", Text, nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("length(trim(content)) > 0", name="content_not_blank"),
)

Index(
    "idx_comments_post_created_at",
    comments_table.c.post_kind,
    comments_table.c.post_id,
    comments_table.c.created_at.desc(),
)

# ============================================================================
# NOTIFICATIONS TABLE
# ============================================================================
notifications_table = Table(
    "notifications",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("recipient_id", UUID, nullable=False),
    Column("sender_id", UUID, nullable=False),
    Column(
        "type",
        Enum(
            "trade_comment",
            "forum_comment",
            "trade_upvote",
            "trade_downvote",
            "forum_upvote",
            "forum_downvote",
            name="notification_type",
            create_type=False,
        ),
        nullable=False,
    ),
    Column("title", String(255), nullable=False),
    Column("message", String(1000), nullable=False),
    Column("related_id", UUID, nullable=False),
    Column("related_model", String(30), nullable=False),
    Column(
        "priority",
        Enum(
            "low",
            "medium",
            "high",
            "urgent",
            name="notification_priority",
            create_type=False,
        ),
        nullable=False,
        server_default="medium",
    ),
    Column("is_read", Boolean, nullable=False, server_default="false"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index(
    "idx_notifications_recipient_created_at",
    notifications_table.c.recipient_id,
    notifications_table.c.created_at.desc(),
)
Index(
    "idx_notifications_recipient_is_read",
    notifications_table.c.recipient_id,
    notifications_table.c.is_read,
)
