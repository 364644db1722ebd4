"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict
from uuid import UUID

from bazaar.domain.model import Comment, Notification, Post, Vote
from bazaar.domain.value import (
    CommentId,
    NotificationId,
    NotificationPriority,
    NotificationType,
    PostId,
    PostKind,
    RelatedModel,
    UserId,
    VoteId,
    VoteType,
)
from bazaar.domain.value.types import Username

# Column names holding the generic post title and body, per post kind
POST_COLUMNS: dict[PostKind, tuple[str, str]] = {
    PostKind.TRADE: ("item_offered", "description"),
    PostKind.FORUM: ("title", "content"),
}


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_post(row: Dict[str, Any], kind: PostKind) -> Post:
    """Convert a trades or forum_posts row to the Post domain model.

    Args:
        row: Database row as dict
        kind: Kind of table the row was read from

    Returns:
        Post domain model
    """
    title_column, body_column = POST_COLUMNS[kind]
    return Post(
        id=PostId(_uuid(row["id"])),
        kind=kind,
        author_id=UserId(_uuid(row["user_id"])),
        author_username=Username(row["username"]),
        title=row[title_column],
        body=row.get(body_column),
        upvotes=row["upvotes"],
        downvotes=row["downvotes"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def post_to_dict(post: Post) -> Dict[str, Any]:
    """Convert Post domain model to a dict for its kind's table.

    Args:
        post: Post domain model

    Returns:
        Dict suitable for database insertion/update
    """
    title_column, body_column = POST_COLUMNS[post.kind]
    body: str | None = post.body
    if post.kind is PostKind.FORUM and body is None:
        body = ""
    return {
        "id": post.id,
        "user_id": post.author_id,
        "username": post.author_username.root,
        title_column: post.title,
        body_column: body,
        "upvotes": post.upvotes,
        "downvotes": post.downvotes,
        "created_at": post.created_at,
        "updated_at": post.updated_at,
    }


def row_to_vote(row: Dict[str, Any]) -> Vote:
    """Convert database row to Vote domain model.

    Args:
        row: Database row as dict

    Returns:
        Vote domain model
    """
    return Vote(
        id=VoteId(_uuid(row["id"])),
        post_kind=PostKind(row["post_kind"]),
        post_id=PostId(_uuid(row["post_id"])),
        user_id=UserId(_uuid(row["user_id"])),
        vote_type=VoteType(row["vote_type"]),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def vote_to_dict(vote: Vote) -> Dict[str, Any]:
    """Convert Vote domain model to database dict."""
    return {
        "id": vote.id,
        "post_kind": vote.post_kind.value,
        "post_id": vote.post_id,
        "user_id": vote.user_id,
        "vote_type": vote.vote_type.value,
        "created_at": vote.created_at,
        "updated_at": vote.updated_at,
    }


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model.

    Args:
        row: Database row as dict

    Returns:
        Comment domain model
    """
    return Comment(
        id=CommentId(_uuid(row["id"])),
        post_kind=PostKind(row["post_kind"]),
        post_id=PostId(_uuid(row["post_id"])),
        author_id=UserId(_uuid(row["author_id"])),
        author_username=Username(row["author_username"]),
        content=row["content"],
        created_at=row["created_at"],
    )


def comment_to_dict(comment: Comment) -> Dict[str, Any]:
    """Convert Comment domain model to database dict."""
    return {
        "id": comment.id,
        "post_kind": comment.post_kind.value,
        "post_id": comment.post_id,
        "author_id": comment.author_id,
        "author_username": comment.author_username.root,
        "content": comment.content,
        "created_at": comment.created_at,
    }


def row_to_notification(row: Dict[str, Any]) -> Notification:
    """Convert database row to Notification domain model."""
    return Notification(
        id=NotificationId(_uuid(row["id"])),
        recipient_id=UserId(_uuid(row["recipient_id"])),
        sender_id=UserId(_uuid(row["sender_id"])),
        type=NotificationType(row["type"]),
        title=row["title"],
        message=row["message"],
        related_id=_uuid(row["related_id"]),
        related_model=RelatedModel(row["related_model"]),
        priority=NotificationPriority(row["priority"]),
        is_read=row["is_read"],
        created_at=row["created_at"],
    )


def notification_to_dict(notification: Notification) -> Dict[str, Any]:
    """Convert Notification domain model to database dict."""
    return notification.model_dump(mode="python") | {
        "type": notification.type.value,
        "related_model": notification.related_model.value,
        "priority": notification.priority.value,
    }
