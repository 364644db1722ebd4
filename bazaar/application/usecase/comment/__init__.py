"""Comment use cases."""

from .add_comment import (
    AddCommentRequest,
    AddCommentUseCase,
    CommentAuthor,
    CommentItem,
)
from .list_comments import (
    ListCommentsRequest,
    ListCommentsResponse,
    ListCommentsUseCase,
)

__all__ = [
    "AddCommentRequest",
    "AddCommentUseCase",
    "CommentAuthor",
    "CommentItem",
    "ListCommentsRequest",
    "ListCommentsResponse",
    "ListCommentsUseCase",
]
