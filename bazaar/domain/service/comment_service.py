"""Comment domain service."""

from datetime import datetime
from uuid import uuid4

import logfire

from bazaar.domain.error import InvalidArgumentError
from bazaar.domain.model.comment import Comment
from bazaar.domain.repository import CommentRepository
from bazaar.domain.value import AuthContext, CommentId, PostId, PostKind

from .base import Service
from .notification_dispatcher import NotificationDispatcher
from .post_service import PostService


class CommentService(Service):
    """Domain service for comment operations.

    Comment counts are never stored on the post; they are counted from
    the comment records whenever they are needed.
    """

    def __init__(
        self,
        comment_repository: CommentRepository,
        post_service: PostService,
        notification_dispatcher: NotificationDispatcher,
        max_length: int = 5000,
    ) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
            post_service: Post domain service
            notification_dispatcher: Best-effort notification emitter
            max_length: Maximum comment length after trimming
        """
        self.comment_repository = comment_repository
        self.post_service = post_service
        self.notification_dispatcher = notification_dispatcher
        self.max_length = max_length

    async def add_comment(
        self,
        kind: PostKind,
        post_id: PostId,
        author: AuthContext,
        content: str,
    ) -> Comment:
        """Add a comment to a post.

        Args:
            kind: Post kind
            post_id: Post ID
            author: Authenticated caller
            content: Comment text (surrounding whitespace is removed)

        Returns:
            Created comment

        Raises:
            InvalidArgumentError: If the trimmed content is empty or too long
            NotFoundError: If the post does not exist
        """
        with logfire.span(
            "comment_service.add_comment",
            post_kind=kind.value,
            post_id=str(post_id),
            author_id=str(author.user_id),
        ):
            content = (content or "").strip()
            if not content:
                raise InvalidArgumentError("Comment content is required")
            if len(content) > self.max_length:
                raise InvalidArgumentError(
                    f"Comment content must be at most {self.max_length} characters"
                )

            post = await self.post_service.get_post(kind, post_id)

            comment = Comment(
                id=CommentId(uuid4()),
                post_kind=kind,
                post_id=post_id,
                author_id=author.user_id,
                author_username=author.username,
                content=content,
                created_at=datetime.now(),
            )
            saved = await self.comment_repository.save(comment)
            logfire.info(
                "Comment created",
                comment_id=str(saved.id),
                post_kind=kind.value,
                post_id=str(post_id),
                author=str(author.username),
            )

            if not post.is_authored_by(author.user_id):
                await self.notification_dispatcher.notify_comment(post, saved, author)

            return saved

    async def list_comments(
        self,
        kind: PostKind,
        post_id: PostId,
        limit: int = 20,
        offset: int = 0,
    ) -> tuple[list[Comment], int]:
        """List a post's comments, newest first.

        Args:
            kind: Post kind
            post_id: Post ID
            limit: Page size
            offset: Number of comments to skip

        Returns:
            Tuple of (comments on the requested page, total comment count)

        Raises:
            NotFoundError: If the post does not exist
        """
        with logfire.span(
            "comment_service.list_comments",
            post_kind=kind.value,
            post_id=str(post_id),
            limit=limit,
            offset=offset,
        ):
            await self.post_service.get_post(kind, post_id)

            comments = await self.comment_repository.find_by_post(
                post_kind=kind, post_id=post_id, limit=limit, offset=offset
            )
            total = await self.comment_repository.count_by_post(kind, post_id)
            logfire.info(
                "Comments retrieved for post",
                post_id=str(post_id),
                count=len(comments),
                total=total,
            )
            return comments, total
