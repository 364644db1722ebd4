"""Unit tests for the in-memory repositories used by the test container."""

from datetime import datetime
from uuid import uuid4

import pytest
from sqlalchemy.exc import IntegrityError

from bazaar.domain.model import Comment, Vote
from bazaar.domain.value import CommentId, PostKind, VoteId, VoteType
from bazaar.persistence.repository.inmemory import (
    InMemoryCommentRepository,
    InMemoryDatabase,
    InMemoryPostRepository,
    InMemoryVoteRepository,
)
from tests.conftest import make_post, make_user


def _vote(post, user, vote_type=VoteType.UP) -> Vote:
    return Vote(
        id=VoteId(uuid4()),
        post_kind=post.kind,
        post_id=post.id,
        user_id=user.user_id,
        vote_type=vote_type,
    )


class TestInMemoryPostRepository:
    """Tests for InMemoryPostRepository."""

    @pytest.mark.asyncio
    async def test_kinds_are_separate_tables(self):
        """A trade is not visible through the forum repository."""
        # Arrange
        db = InMemoryDatabase()
        trades = InMemoryPostRepository(db, PostKind.TRADE)
        forum = InMemoryPostRepository(db, PostKind.FORUM)
        post = await trades.save(make_post(make_user()))

        # Act & Assert
        assert await trades.find_by_id(post.id) == post
        assert await forum.find_by_id(post.id) is None

    @pytest.mark.asyncio
    async def test_counter_updates_on_missing_post_return_none(self):
        repo = InMemoryPostRepository(InMemoryDatabase(), PostKind.TRADE)
        missing = make_post(make_user())

        assert await repo.adjust_counters(missing.id, 1, 0) is None
        assert await repo.set_counters(missing.id, 1, 0) is None


class TestInMemoryVoteRepository:
    """Tests for InMemoryVoteRepository."""

    @pytest.mark.asyncio
    async def test_second_vote_by_same_user_violates_uniqueness(self):
        """Mirrors the unique_vote constraint."""
        # Arrange
        repo = InMemoryVoteRepository(InMemoryDatabase())
        post, user = make_post(make_user("seller")), make_user("buyer")
        await repo.save(_vote(post, user))

        # Act & Assert
        with pytest.raises(IntegrityError):
            await repo.save(_vote(post, user, VoteType.DOWN))

    @pytest.mark.asyncio
    async def test_update_delete_and_count(self):
        # Arrange
        repo = InMemoryVoteRepository(InMemoryDatabase())
        post = make_post(make_user("seller"))
        first = await repo.save(_vote(post, make_user("a")))
        await repo.save(_vote(post, make_user("b")))

        # Act
        flipped = await repo.update_type(first.id, VoteType.DOWN)
        deleted = await repo.delete(first.id)
        deleted_again = await repo.delete(first.id)

        # Assert
        assert flipped.vote_type == VoteType.DOWN
        assert deleted is True
        assert deleted_again is False
        assert await repo.count_by_post(post.kind, post.id, VoteType.UP) == 1
        assert await repo.count_by_post(post.kind, post.id, VoteType.DOWN) == 0


class TestInMemoryCommentRepository:
    """Tests for InMemoryCommentRepository."""

    @pytest.mark.asyncio
    async def test_same_timestamp_orders_later_insert_first(self):
        """Ties on created_at fall back to insertion order, newest first."""
        # Arrange
        repo = InMemoryCommentRepository(InMemoryDatabase())
        author = make_user("buyer")
        post = make_post(make_user("seller"))
        stamp = datetime.now()
        for content in ("first", "second"):
            await repo.save(
                Comment(
                    id=CommentId(uuid4()),
                    post_kind=post.kind,
                    post_id=post.id,
                    author_id=author.user_id,
                    author_username=author.username,
                    content=content,
                    created_at=stamp,
                )
            )

        # Act
        comments = await repo.find_by_post(post.kind, post.id)

        # Assert
        assert [c.content for c in comments] == ["second", "first"]
        assert await repo.count_by_post(post.kind, post.id) == 2
        assert await repo.count_by_post(PostKind.FORUM, post.id) == 0
