"""Recount votes use case."""

from pydantic import BaseModel

from bazaar.application.usecase.base import BaseUseCase, parse_id
from bazaar.domain.service import VoteService
from bazaar.domain.value import AuthContext, PostId, PostKind

from .cast_vote import VoteStateResponse


class RecountVotesRequest(BaseModel):
    """Recount votes request."""

    kind: PostKind
    post_id: str  # UUID string
    actor: AuthContext  # Must be a moderator or admin


class RecountVotesUseCase(BaseUseCase):
    """Use case for rebuilding a post's counters from its vote records."""

    def __init__(self, vote_service: VoteService) -> None:
        """Initialize recount votes use case.

        Args:
            vote_service: Vote domain service
        """
        self.vote_service = vote_service

    async def execute(self, request: RecountVotesRequest) -> VoteStateResponse:
        """Execute recount flow.

        Raises:
            ForbiddenError: If the caller is not staff
            NotFoundError: If the post does not exist
        """
        post_id = PostId(parse_id(request.post_id, request.kind.label.capitalize()))
        state = await self.vote_service.recount_votes(
            request.kind, post_id, request.actor
        )
        return VoteStateResponse.from_state(state)
