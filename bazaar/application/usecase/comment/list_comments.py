"""List comments use case."""

from pydantic import BaseModel

from bazaar.application.usecase.base import (
    BaseUseCase,
    CamelModel,
    PaginationResponse,
    clamp_page,
    parse_id,
)
from bazaar.config import Settings
from bazaar.domain.service import CommentService
from bazaar.domain.value import PostId, PostKind

from .add_comment import CommentItem


class ListCommentsRequest(BaseModel):
    """List comments request."""

    kind: PostKind
    post_id: str  # UUID string
    page: int | None = None
    limit: int | None = None


class ListCommentsResponse(CamelModel):
    """A page of comments, newest first."""

    comments: list[CommentItem]
    pagination: PaginationResponse


class ListCommentsUseCase(BaseUseCase):
    """Use case for listing a post's comments."""

    def __init__(self, comment_service: CommentService, settings: Settings) -> None:
        """Initialize list comments use case.

        Args:
            comment_service: Comment domain service
            settings: Application settings (page size limits)
        """
        self.comment_service = comment_service
        self.settings = settings

    async def execute(self, request: ListCommentsRequest) -> ListCommentsResponse:
        """Execute list comments flow.

        Page and limit are clamped into range rather than rejected.

        Raises:
            NotFoundError: If the post does not exist
        """
        post_id = PostId(parse_id(request.post_id, request.kind.label.capitalize()))
        page, limit, offset = clamp_page(
            request.page,
            request.limit,
            default=self.settings.ledger.comments_page_size,
            maximum=self.settings.ledger.comments_max_page_size,
        )

        comments, total = await self.comment_service.list_comments(
            request.kind, post_id, limit=limit, offset=offset
        )

        return ListCommentsResponse(
            comments=[CommentItem.from_comment(c) for c in comments],
            pagination=PaginationResponse.build(page, limit, total),
        )
