"""Unit tests for PostService."""

import pytest

from bazaar.domain.error import InvalidArgumentError, NotFoundError
from bazaar.domain.service import PostService
from bazaar.domain.value import PostKind
from bazaar.persistence.repository.inmemory import (
    InMemoryDatabase,
    InMemoryPostRepository,
)
from tests.conftest import make_post, make_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestPostService:
    """Tests for PostService."""

    @pytest.mark.asyncio
    async def test_find_post_returns_none_when_missing(self, unit_env):
        """find_post is the non-raising lookup."""
        post_service = await unit_env.get(PostService)

        assert await post_service.find_post(PostKind.TRADE, make_post(make_user()).id) is None

    @pytest.mark.asyncio
    async def test_adjust_counters_clamps_at_zero(self, unit_env):
        """Negative deltas larger than the counter stop at zero."""
        # Arrange
        post_service = await unit_env.get(PostService)
        post = await post_service.save_post(make_post(make_user(), upvotes=1, downvotes=0))

        # Act
        updated = await post_service.adjust_counters(PostKind.TRADE, post.id, -3, -1)

        # Assert
        assert (updated.upvotes, updated.downvotes) == (0, 0)

    @pytest.mark.asyncio
    async def test_set_counters_on_missing_post_raises(self, unit_env):
        """Counter writes need an existing post."""
        post_service = await unit_env.get(PostService)

        with pytest.raises(NotFoundError):
            await post_service.set_counters(
                PostKind.FORUM, make_post(make_user()).id, 1, 1
            )

    @pytest.mark.asyncio
    async def test_unsupported_kind_is_invalid(self):
        """A service wired without a kind rejects it."""
        # Arrange
        post_service = PostService(
            post_repositories={
                PostKind.TRADE: InMemoryPostRepository(
                    InMemoryDatabase(), PostKind.TRADE
                )
            }
        )

        # Act & Assert
        with pytest.raises(InvalidArgumentError):
            await post_service.get_post(PostKind.FORUM, make_post(make_user()).id)
