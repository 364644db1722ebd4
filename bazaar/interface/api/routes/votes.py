"""Vote routes.

The same handlers serve every post kind; ``build_votes_router`` mounts
them under the kind's resource prefix.
"""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Request
from pydantic import BaseModel, ConfigDict, Field

from bazaar.application.usecase.vote import (
    CastVoteRequest,
    CastVoteUseCase,
    GetVotesRequest,
    GetVotesUseCase,
    RecountVotesRequest,
    RecountVotesUseCase,
    VoteStateResponse,
)
from bazaar.config import AuthSettings
from bazaar.domain.service import JWTService
from bazaar.domain.value import PostKind
from bazaar.interface.api.auth import optional_auth, require_auth
from bazaar.interface.api.routes.resources import RESOURCE_PREFIXES


class CastVoteAPIRequest(BaseModel):
    """API request for casting a vote."""

    model_config = ConfigDict(populate_by_name=True)

    # Checked by the vote service so a bad value is a 400, not a 422
    vote_type: str | None = Field(default=None, alias="voteType")


def build_votes_router(kind: PostKind) -> APIRouter:
    """Create the vote routes for one post kind."""
    router = APIRouter(
        prefix=RESOURCE_PREFIXES[kind],
        tags=[f"{kind.value} votes"],
        route_class=DishkaRoute,
    )

    @router.post("/{post_id}/vote", response_model=VoteStateResponse)
    async def cast_vote(
        post_id: str,
        body: CastVoteAPIRequest,
        request: Request,
        cast_vote_use_case: FromDishka[CastVoteUseCase],
        jwt_service: FromDishka[JWTService],
        auth_settings: FromDishka[AuthSettings],
    ) -> VoteStateResponse:
        """Cast, flip or withdraw the caller's vote.

        Voting the same direction twice removes the vote. Requires
        authentication; authors cannot vote on their own posts.
        """
        voter = require_auth(request, jwt_service, auth_settings)
        return await cast_vote_use_case.execute(
            CastVoteRequest(
                kind=kind, post_id=post_id, voter=voter, vote_type=body.vote_type
            )
        )

    @router.get("/{post_id}/votes", response_model=VoteStateResponse)
    async def get_votes(
        post_id: str,
        request: Request,
        get_votes_use_case: FromDishka[GetVotesUseCase],
        jwt_service: FromDishka[JWTService],
        auth_settings: FromDishka[AuthSettings],
    ) -> VoteStateResponse:
        """Get vote counters and, when signed in, the caller's own vote."""
        viewer = optional_auth(request, jwt_service, auth_settings)
        return await get_votes_use_case.execute(
            GetVotesRequest(kind=kind, post_id=post_id, viewer=viewer)
        )

    @router.post("/{post_id}/votes/recount", response_model=VoteStateResponse)
    async def recount_votes(
        post_id: str,
        request: Request,
        recount_votes_use_case: FromDishka[RecountVotesUseCase],
        jwt_service: FromDishka[JWTService],
        auth_settings: FromDishka[AuthSettings],
    ) -> VoteStateResponse:
        """Rebuild the counters from vote records. Moderators and admins only."""
        actor = require_auth(request, jwt_service, auth_settings)
        return await recount_votes_use_case.execute(
            RecountVotesRequest(kind=kind, post_id=post_id, actor=actor)
        )

    return router
