"""initial_ledger_schema

Create the schema for the Bazaar vote/comment ledger:
- Trades and forum posts (each with cached upvote/downvote counters)
- Votes (one per user per post, up or down)
- Comments (flat, append-only)
- Notifications (delivered to post authors)

Revision ID: 3f1c9a7d2b64
Revises:
Create Date: 2026-10-19 10:12:44.318205

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3f1c9a7d2b64"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

ENUMS = {
    "post_kind": ("trade", "forum"),
    "vote_type": ("up", "down"),
    "notification_type": (
        "trade_comment",
        "forum_comment",
        "trade_upvote",
        "trade_downvote",
        "forum_upvote",
        "forum_downvote",
    ),
    "notification_priority": ("low", "medium", "high", "urgent"),
}


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.Column(
            "updated_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
    ]


def _id() -> sa.Column:
    return sa.Column(
        "id",
        sa.UUID(),
        server_default=sa.text("uuid_generate_v4()"),
        nullable=False,
    )


def upgrade() -> None:
    """Upgrade schema."""
    op.execute('CREATE EXTENSION IF NOT EXISTS "uuid-ossp"')

    # Create ENUM types (idempotent)
    for name, values in ENUMS.items():
        labels = ", ".join(f"'{value}'" for value in values)
        op.execute(f"""
            DO $$ BEGIN
                CREATE TYPE {name} AS ENUM ({labels});
            EXCEPTION
                WHEN duplicate_object THEN null;
            END $$;
        """)

    # ========================================================================
    # TRADES table
    # ========================================================================
    op.create_table(
        "trades",
        _id(),
        sa.Column("user_id", sa.UUID(), nullable=False),
        sa.Column("username", sa.String(255), nullable=False),
        sa.Column("item_offered", sa.String(255), nullable=False),
        sa.Column("item_requested", sa.String(255), nullable=True),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("status", sa.String(20), nullable=False, server_default="open"),
        sa.Column("upvotes", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("downvotes", sa.Integer(), nullable=False, server_default="0"),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint(
            "upvotes >= 0 AND downvotes >= 0", name="trade_votes_non_negative"
        ),
    )
    op.create_index("idx_trades_user_id", "trades", ["user_id"])
    op.create_index("idx_trades_created_at", "trades", [sa.text("created_at DESC")])

    # ========================================================================
    # FORUM_POSTS table
    # ========================================================================
    op.create_table(
        "forum_posts",
        _id(),
        sa.Column("user_id", sa.UUID(), nullable=False),
        sa.Column("username", sa.String(255), nullable=False),
        sa.Column("category", sa.String(30), nullable=False, server_default="general"),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("upvotes", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("downvotes", sa.Integer(), nullable=False, server_default="0"),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint(
            "upvotes >= 0 AND downvotes >= 0", name="forum_votes_non_negative"
        ),
    )
    op.create_index("idx_forum_posts_user_id", "forum_posts", ["user_id"])
    op.create_index(
        "idx_forum_posts_created_at", "forum_posts", [sa.text("created_at DESC")]
    )

    # ========================================================================
    # VOTES table (one row per user per post)
    # ========================================================================
    op.create_table(
        "votes",
        _id(),
        sa.Column(
            "post_kind",
            postgresql.ENUM(*ENUMS["post_kind"], name="post_kind", create_type=False),
            nullable=False,
        ),
        sa.Column("post_id", sa.UUID(), nullable=False),
        sa.Column("user_id", sa.UUID(), nullable=False),
        sa.Column(
            "vote_type",
            postgresql.ENUM(*ENUMS["vote_type"], name="vote_type", create_type=False),
            nullable=False,
        ),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("post_kind", "post_id", "user_id", name="unique_vote"),
    )
    op.create_index("idx_votes_post", "votes", ["post_kind", "post_id"])

    # ========================================================================
    # COMMENTS table
    # ========================================================================
    op.create_table(
        "comments",
        _id(),
        sa.Column(
            "post_kind",
            postgresql.ENUM(*ENUMS["post_kind"], name="post_kind", create_type=False),
            nullable=False,
        ),
        sa.Column("post_id", sa.UUID(), nullable=False),
        sa.Column("author_id", sa.UUID(), nullable=False),
        sa.Column("author_username", sa.String(255), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint("length(trim(content)) > 0", name="content_not_blank"),
    )
    op.create_index(
        "idx_comments_post_created_at",
        "comments",
        ["post_kind", "post_id", sa.text("created_at DESC")],
    )

    # ========================================================================
    # NOTIFICATIONS table
    # ========================================================================
    op.create_table(
        "notifications",
        _id(),
        sa.Column("recipient_id", sa.UUID(), nullable=False),
        sa.Column("sender_id", sa.UUID(), nullable=False),
        sa.Column(
            "type",
            postgresql.ENUM(
                *ENUMS["notification_type"],
                name="notification_type",
                create_type=False,
            ),
            nullable=False,
        ),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("message", sa.String(1000), nullable=False),
        sa.Column("related_id", sa.UUID(), nullable=False),
        sa.Column("related_model", sa.String(30), nullable=False),
        sa.Column(
            "priority",
            postgresql.ENUM(
                *ENUMS["notification_priority"],
                name="notification_priority",
                create_type=False,
            ),
            nullable=False,
            server_default="medium",
        ),
        sa.Column("is_read", sa.Boolean(), nullable=False, server_default="false"),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "idx_notifications_recipient_created_at",
        "notifications",
        ["recipient_id", sa.text("created_at DESC")],
    )
    op.create_index(
        "idx_notifications_recipient_is_read",
        "notifications",
        ["recipient_id", "is_read"],
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_table("notifications")
    op.drop_table("comments")
    op.drop_table("votes")
    op.drop_table("forum_posts")
    op.drop_table("trades")

    for name in reversed(list(ENUMS)):
        op.execute(f"DROP TYPE IF EXISTS {name}")
