"""Cast vote use case."""

from pydantic import BaseModel

from bazaar.application.usecase.base import BaseUseCase, CamelModel, parse_id
from bazaar.domain.model import VoteState
from bazaar.domain.service import VoteService
from bazaar.domain.value import AuthContext, PostId, PostKind, VoteType


class CastVoteRequest(BaseModel):
    """Cast vote request."""

    kind: PostKind
    post_id: str  # UUID string
    voter: AuthContext  # Authenticated caller
    vote_type: str | None = None  # Validated by the vote service


class VoteStateResponse(CamelModel):
    """Post counters plus the caller's own vote."""

    upvotes: int
    downvotes: int
    user_vote: VoteType | None = None

    @classmethod
    def from_state(cls, state: VoteState) -> "VoteStateResponse":
        return cls(
            upvotes=state.upvotes,
            downvotes=state.downvotes,
            user_vote=state.user_vote,
        )


class CastVoteUseCase(BaseUseCase):
    """Use case for casting, flipping or withdrawing a vote."""

    def __init__(self, vote_service: VoteService) -> None:
        """Initialize cast vote use case.

        Args:
            vote_service: Vote domain service
        """
        self.vote_service = vote_service

    async def execute(self, request: CastVoteRequest) -> VoteStateResponse:
        """Execute cast vote flow.

        Args:
            request: Cast vote request

        Returns:
            Counters after the change and the caller's resulting vote

        Raises:
            NotFoundError: If the post does not exist
            InvalidArgumentError: If the vote type is not recognised
            ForbiddenError: If the caller authored the post
            ConflictError: If a concurrent vote won the race
        """
        post_id = PostId(parse_id(request.post_id, request.kind.label.capitalize()))
        state = await self.vote_service.cast_vote(
            kind=request.kind,
            post_id=post_id,
            voter=request.voter,
            vote_type=request.vote_type,
        )
        return VoteStateResponse.from_state(state)
