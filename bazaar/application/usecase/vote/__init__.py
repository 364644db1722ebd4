"""Vote use cases."""

from .cast_vote import (
    CastVoteRequest,
    CastVoteUseCase,
    VoteStateResponse,
)
from .get_votes import GetVotesRequest, GetVotesUseCase
from .recount_votes import RecountVotesRequest, RecountVotesUseCase

__all__ = [
    "CastVoteRequest",
    "CastVoteUseCase",
    "VoteStateResponse",
    "GetVotesRequest",
    "GetVotesUseCase",
    "RecountVotesRequest",
    "RecountVotesUseCase",
]
