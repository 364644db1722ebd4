"""Add comment use case."""

from datetime import datetime

from pydantic import BaseModel

from bazaar.application.usecase.base import BaseUseCase, CamelModel, parse_id
from bazaar.domain.model import Comment
from bazaar.domain.service import CommentService
from bazaar.domain.value import AuthContext, PostId, PostKind


class CommentAuthor(CamelModel):
    """Public identity of a comment's author."""

    id: str
    username: str


class CommentItem(CamelModel):
    """Comment as returned to clients."""

    comment_id: str
    content: str
    created_at: datetime
    author: CommentAuthor

    @classmethod
    def from_comment(cls, comment: Comment) -> "CommentItem":
        return cls(
            comment_id=str(comment.id),
            content=comment.content,
            created_at=comment.created_at,
            author=CommentAuthor(
                id=str(comment.author_id), username=comment.author_username.root
            ),
        )


class AddCommentRequest(BaseModel):
    """Add comment request."""

    kind: PostKind
    post_id: str  # UUID string
    author: AuthContext  # Authenticated caller
    content: str


class AddCommentUseCase(BaseUseCase):
    """Use case for commenting on a trade or forum post."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize add comment use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: AddCommentRequest) -> CommentItem:
        """Execute add comment flow.

        Args:
            request: Add comment request

        Returns:
            Created comment

        Raises:
            NotFoundError: If the post does not exist
            InvalidArgumentError: If the content is blank or too long
        """
        post_id = PostId(parse_id(request.post_id, request.kind.label.capitalize()))
        comment = await self.comment_service.add_comment(
            kind=request.kind,
            post_id=post_id,
            author=request.author,
            content=request.content,
        )
        return CommentItem.from_comment(comment)
