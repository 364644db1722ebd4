"""Comment routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Query, Request, status
from pydantic import BaseModel

from bazaar.application.usecase.comment import (
    AddCommentRequest,
    AddCommentUseCase,
    CommentItem,
    ListCommentsRequest,
    ListCommentsResponse,
    ListCommentsUseCase,
)
from bazaar.config import AuthSettings
from bazaar.domain.service import JWTService
from bazaar.domain.value import PostKind
from bazaar.interface.api.auth import require_auth
from bazaar.interface.api.routes.resources import RESOURCE_PREFIXES


class AddCommentAPIRequest(BaseModel):
    """API request for adding a comment.

    Length limits are applied after trimming by the comment service.
    """

    content: str = ""


def build_comments_router(kind: PostKind) -> APIRouter:
    """Create the comment routes for one post kind."""
    router = APIRouter(
        prefix=RESOURCE_PREFIXES[kind],
        tags=[f"{kind.value} comments"],
        route_class=DishkaRoute,
    )

    @router.post(
        "/{post_id}/comments",
        response_model=CommentItem,
        status_code=status.HTTP_201_CREATED,
    )
    async def add_comment(
        post_id: str,
        body: AddCommentAPIRequest,
        request: Request,
        add_comment_use_case: FromDishka[AddCommentUseCase],
        jwt_service: FromDishka[JWTService],
        auth_settings: FromDishka[AuthSettings],
    ) -> CommentItem:
        """Add a comment to a post.

        Requires authentication. Surrounding whitespace is removed and
        blank comments are rejected.
        """
        author = require_auth(request, jwt_service, auth_settings)
        return await add_comment_use_case.execute(
            AddCommentRequest(
                kind=kind, post_id=post_id, author=author, content=body.content
            )
        )

    @router.get("/{post_id}/comments", response_model=ListCommentsResponse)
    async def list_comments(
        post_id: str,
        list_comments_use_case: FromDishka[ListCommentsUseCase],
        page: int | None = Query(default=None),
        limit: int | None = Query(default=None),
    ) -> ListCommentsResponse:
        """List a post's comments, newest first."""
        return await list_comments_use_case.execute(
            ListCommentsRequest(kind=kind, post_id=post_id, page=page, limit=limit)
        )

    return router
