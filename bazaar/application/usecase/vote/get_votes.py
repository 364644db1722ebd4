"""Get votes use case."""

from pydantic import BaseModel

from bazaar.application.usecase.base import BaseUseCase, parse_id
from bazaar.domain.service import VoteService
from bazaar.domain.value import AuthContext, PostId, PostKind

from .cast_vote import VoteStateResponse


class GetVotesRequest(BaseModel):
    """Get votes request."""

    kind: PostKind
    post_id: str  # UUID string
    viewer: AuthContext | None = None  # Anonymous reads have no viewer


class GetVotesUseCase(BaseUseCase):
    """Use case for reading a post's vote counters."""

    def __init__(self, vote_service: VoteService) -> None:
        self.vote_service = vote_service

    async def execute(self, request: GetVotesRequest) -> VoteStateResponse:
        post_id = PostId(parse_id(request.post_id, request.kind.label.capitalize()))
        state = await self.vote_service.get_vote_state(
            request.kind, post_id, request.viewer
        )
        return VoteStateResponse.from_state(state)
