"""Post domain service."""

import logfire

from bazaar.domain.error import InvalidArgumentError, NotFoundError
from bazaar.domain.model.post import Post
from bazaar.domain.repository import PostRepository
from bazaar.domain.value import PostId, PostKind

from .base import Service


class PostService(Service):
    """Domain service for post lookups and vote counter updates.

    Holds one repository per post kind and dispatches on ``kind``.
    """

    def __init__(self, post_repositories: dict[PostKind, PostRepository]) -> None:
        """Initialize post service.

        Args:
            post_repositories: Post repository for each supported kind
        """
        self.post_repositories = post_repositories

    def repository_for(self, kind: PostKind) -> PostRepository:
        """Select the repository that stores posts of ``kind``.

        Raises:
            InvalidArgumentError: If the kind has no registered store
        """
        try:
            return self.post_repositories[kind]
        except KeyError:
            raise InvalidArgumentError(f"Unsupported post kind: {kind}")

    async def save_post(self, post: Post) -> Post:
        """Save a post."""
        with logfire.span(
            "post_service.save_post", post_kind=post.kind.value, post_id=str(post.id)
        ):
            saved = await self.repository_for(post.kind).save(post)
            logfire.info("Post saved", post_kind=post.kind.value, post_id=str(saved.id))
            return saved

    async def find_post(self, kind: PostKind, post_id: PostId) -> Post | None:
        """Get a post by ID.

        Args:
            kind: Post kind
            post_id: Post ID

        Returns:
            Post if found, None otherwise
        """
        with logfire.span(
            "post_service.find_post", post_kind=kind.value, post_id=str(post_id)
        ):
            post = await self.repository_for(kind).find_by_id(post_id)
            if not post:
                logfire.warn("Post not found", post_kind=kind.value, post_id=str(post_id))
            return post

    async def get_post(self, kind: PostKind, post_id: PostId) -> Post:
        """Get a post by ID, failing when it does not exist.

        Raises:
            NotFoundError: If the post does not exist
        """
        post = await self.find_post(kind, post_id)
        if not post:
            raise NotFoundError(kind.label.capitalize(), str(post_id))
        return post

    async def adjust_counters(
        self,
        kind: PostKind,
        post_id: PostId,
        upvotes_delta: int,
        downvotes_delta: int,
    ) -> Post:
        """Atomically shift the vote counters, never below 0.

        Raises:
            NotFoundError: If the post disappeared
        """
        with logfire.span(
            "post_service.adjust_counters",
            post_kind=kind.value,
            post_id=str(post_id),
            upvotes_delta=upvotes_delta,
            downvotes_delta=downvotes_delta,
        ):
            updated = await self.repository_for(kind).adjust_counters(
                post_id, upvotes_delta, downvotes_delta
            )
            if not updated:
                raise NotFoundError(kind.label.capitalize(), str(post_id))
            logfire.info(
                "Post counters adjusted",
                post_id=str(post_id),
                upvotes=updated.upvotes,
                downvotes=updated.downvotes,
            )
            return updated

    async def set_counters(
        self, kind: PostKind, post_id: PostId, upvotes: int, downvotes: int
    ) -> Post:
        """Overwrite the vote counters.

        Raises:
            NotFoundError: If the post disappeared
        """
        with logfire.span(
            "post_service.set_counters",
            post_kind=kind.value,
            post_id=str(post_id),
            upvotes=upvotes,
            downvotes=downvotes,
        ):
            updated = await self.repository_for(kind).set_counters(
                post_id, max(0, upvotes), max(0, downvotes)
            )
            if not updated:
                raise NotFoundError(kind.label.capitalize(), str(post_id))
            return updated
