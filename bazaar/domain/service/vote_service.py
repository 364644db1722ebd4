"""Vote domain service.

Per user and post the vote is a three-state machine:

    NoVote    --up-->   Upvoted    (upvotes +1)
    NoVote    --down--> Downvoted  (downvotes +1)
    Upvoted   --up-->   NoVote     (upvotes -1)
    Upvoted   --down--> Downvoted  (upvotes -1, downvotes +1)
    Downvoted --down--> NoVote     (downvotes -1)
    Downvoted --up-->   Upvoted    (downvotes -1, upvotes +1)

The post's counters are updated in the same request as the vote record.
Counters never drop below 0.
"""

from datetime import datetime
from uuid import uuid4

import logfire
from sqlalchemy.exc import IntegrityError

from bazaar.domain.error import ConflictError, ForbiddenError, InvalidArgumentError
from bazaar.domain.model.vote import Vote, VoteState
from bazaar.domain.repository import VoteRepository
from bazaar.domain.value import AuthContext, PostId, PostKind, VoteId, VoteType

from .base import Service
from .notification_dispatcher import NotificationDispatcher
from .post_service import PostService


def parse_vote_type(value: VoteType | str) -> VoteType:
    """Convert raw input into a VoteType.

    Raises:
        InvalidArgumentError: If the value is not "up" or "down"
    """
    try:
        return VoteType(value)
    except ValueError:
        raise InvalidArgumentError('Vote type must be "up" or "down"')


def _counter_deltas(vote_type: VoteType, amount: int) -> tuple[int, int]:
    if vote_type is VoteType.UP:
        return amount, 0
    return 0, amount


class VoteService(Service):
    """Domain service for vote operations."""

    def __init__(
        self,
        vote_repository: VoteRepository,
        post_service: PostService,
        notification_dispatcher: NotificationDispatcher,
    ) -> None:
        """Initialize vote service.

        Args:
            vote_repository: Vote repository
            post_service: Post domain service
            notification_dispatcher: Best-effort notification emitter
        """
        self.vote_repository = vote_repository
        self.post_service = post_service
        self.notification_dispatcher = notification_dispatcher

    async def cast_vote(
        self,
        kind: PostKind,
        post_id: PostId,
        voter: AuthContext,
        vote_type: VoteType | str,
    ) -> VoteState:
        """Cast, flip or withdraw a vote.

        Args:
            kind: Post kind
            post_id: Post ID
            voter: Authenticated caller
            vote_type: Requested direction ("up" or "down")

        Returns:
            Post counters after the change and the caller's resulting vote

        Raises:
            InvalidArgumentError: If the vote type is not recognised
            NotFoundError: If the post does not exist
            ForbiddenError: If the caller authored the post
            ConflictError: If a concurrent vote by the same user won the race
        """
        with logfire.span(
            "vote_service.cast_vote",
            post_kind=kind.value,
            post_id=str(post_id),
            user_id=str(voter.user_id),
            vote_type=str(getattr(vote_type, "value", vote_type)),
        ):
            vote_type = parse_vote_type(vote_type)
            post = await self.post_service.get_post(kind, post_id)

            if post.is_authored_by(voter.user_id):
                logfire.warn(
                    "Self-vote rejected", post_id=str(post_id), user_id=str(voter.user_id)
                )
                raise ForbiddenError(f"You cannot vote on your own {kind.label}")

            existing = await self.vote_repository.find_by_user_and_post(
                kind, post_id, voter.user_id
            )

            if existing is None:
                vote = Vote(
                    id=VoteId(uuid4()),
                    post_kind=kind,
                    post_id=post_id,
                    user_id=voter.user_id,
                    vote_type=vote_type,
                    created_at=datetime.now(),
                    updated_at=datetime.now(),
                )
                try:
                    await self.vote_repository.save(vote)
                except IntegrityError:
                    logfire.warn(
                        "Duplicate vote attempt",
                        user_id=str(voter.user_id),
                        post_id=str(post_id),
                    )
                    raise ConflictError("Your vote changed concurrently, please retry")
                upvotes_delta, downvotes_delta = _counter_deltas(vote_type, 1)
                user_vote: VoteType | None = vote_type
            elif existing.vote_type == vote_type:
                # Same direction again: toggle off
                deleted = await self.vote_repository.delete(existing.id)
                if not deleted:
                    logfire.warn(
                        "Vote removed concurrently",
                        user_id=str(voter.user_id),
                        post_id=str(post_id),
                    )
                    raise ConflictError("Your vote changed concurrently, please retry")
                upvotes_delta, downvotes_delta = _counter_deltas(vote_type, -1)
                user_vote = None
            else:
                changed = await self.vote_repository.update_type(
                    existing.id, vote_type
                )
                if changed is None:
                    logfire.warn(
                        "Vote changed concurrently",
                        user_id=str(voter.user_id),
                        post_id=str(post_id),
                    )
                    raise ConflictError("Your vote changed concurrently, please retry")
                up_new, down_new = _counter_deltas(vote_type, 1)
                up_old, down_old = _counter_deltas(existing.vote_type, -1)
                upvotes_delta, downvotes_delta = up_new + up_old, down_new + down_old
                user_vote = vote_type

            updated = await self.post_service.adjust_counters(
                kind, post_id, upvotes_delta, downvotes_delta
            )

            logfire.info(
                "Vote recorded",
                post_kind=kind.value,
                post_id=str(post_id),
                user_id=str(voter.user_id),
                previous=existing.vote_type.value if existing else None,
                current=user_vote.value if user_vote else None,
            )

            if existing is None:
                await self.notification_dispatcher.notify_vote(post, voter, vote_type)

            return VoteState(
                upvotes=updated.upvotes,
                downvotes=updated.downvotes,
                user_vote=user_vote,
            )

    async def get_vote_state(
        self,
        kind: PostKind,
        post_id: PostId,
        viewer: AuthContext | None = None,
    ) -> VoteState:
        """Read a post's counters and the viewer's own vote.

        Args:
            kind: Post kind
            post_id: Post ID
            viewer: Authenticated caller, or None for anonymous reads

        Raises:
            NotFoundError: If the post does not exist
        """
        with logfire.span(
            "vote_service.get_vote_state", post_kind=kind.value, post_id=str(post_id)
        ):
            post = await self.post_service.get_post(kind, post_id)

            user_vote = None
            if viewer:
                vote = await self.vote_repository.find_by_user_and_post(
                    kind, post_id, viewer.user_id
                )
                user_vote = vote.vote_type if vote else None

            return VoteState(
                upvotes=post.upvotes, downvotes=post.downvotes, user_vote=user_vote
            )

    async def recount_votes(
        self, kind: PostKind, post_id: PostId, actor: AuthContext
    ) -> VoteState:
        """Rebuild a post's counters from its vote records.

        Restricted to moderators and admins.

        Raises:
            ForbiddenError: If the caller is not staff
            NotFoundError: If the post does not exist
        """
        with logfire.span(
            "vote_service.recount_votes",
            post_kind=kind.value,
            post_id=str(post_id),
            actor_id=str(actor.user_id),
        ):
            if not actor.role.is_staff:
                logfire.warn(
                    "Recount rejected", actor_id=str(actor.user_id), role=actor.role.value
                )
                raise ForbiddenError("Only moderators can recount votes")

            post = await self.post_service.get_post(kind, post_id)
            upvotes = await self.vote_repository.count_by_post(kind, post_id, VoteType.UP)
            downvotes = await self.vote_repository.count_by_post(
                kind, post_id, VoteType.DOWN
            )
            updated = await self.post_service.set_counters(
                kind, post_id, upvotes, downvotes
            )

            if (post.upvotes, post.downvotes) != (upvotes, downvotes):
                logfire.warn(
                    "Vote counters drifted",
                    post_id=str(post_id),
                    stored_upvotes=post.upvotes,
                    stored_downvotes=post.downvotes,
                    upvotes=upvotes,
                    downvotes=downvotes,
                )

            own = await self.vote_repository.find_by_user_and_post(
                kind, post_id, actor.user_id
            )
            return VoteState(
                upvotes=updated.upvotes,
                downvotes=updated.downvotes,
                user_vote=own.vote_type if own else None,
            )
