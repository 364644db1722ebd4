"""Unit tests for the notification use cases."""

import pytest

from bazaar.application.usecase.comment import AddCommentRequest, AddCommentUseCase
from bazaar.application.usecase.notification import (
    DeleteNotificationRequest,
    DeleteNotificationUseCase,
    DeleteReadNotificationsRequest,
    DeleteReadNotificationsUseCase,
    GetNotificationRequest,
    GetNotificationUseCase,
    GetUnreadCountRequest,
    GetUnreadCountUseCase,
    ListNotificationsRequest,
    ListNotificationsUseCase,
    MarkAllNotificationsReadRequest,
    MarkAllNotificationsReadUseCase,
    MarkNotificationReadRequest,
    MarkNotificationReadUseCase,
)
from bazaar.application.usecase.vote import CastVoteRequest, CastVoteUseCase
from bazaar.domain.error import NotFoundError
from bazaar.domain.service import PostService
from bazaar.domain.value import PostKind
from tests.conftest import make_post, make_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


async def _seed_activity(unit_env):
    """Create a trade that got one upvote and one comment from a buyer."""
    post_service = await unit_env.get(PostService)
    cast = await unit_env.get(CastVoteUseCase)
    add = await unit_env.get(AddCommentUseCase)
    seller, buyer = make_user("seller"), make_user("buyer")
    post = await post_service.save_post(make_post(seller))
    await cast.execute(
        CastVoteRequest(
            kind=PostKind.TRADE, post_id=str(post.id), voter=buyer, vote_type="up"
        )
    )
    await add.execute(
        AddCommentRequest(
            kind=PostKind.TRADE, post_id=str(post.id), author=buyer, content="Deal?"
        )
    )
    return seller, buyer, post


class TestListNotificationsUseCase:
    """Tests for ListNotificationsUseCase."""

    @pytest.mark.asyncio
    async def test_lists_newest_first_with_unread_count(self, unit_env):
        """Votes and comments show up for the post author."""
        # Arrange
        seller, buyer, post = await _seed_activity(unit_env)
        use_case = await unit_env.get(ListNotificationsUseCase)

        # Act
        response = await use_case.execute(ListNotificationsRequest(recipient=seller))

        # Assert
        assert [n.type.value for n in response.notifications] == [
            "trade_comment",
            "trade_upvote",
        ]
        assert response.unread_count == 2
        assert response.pagination.total == 2
        upvote = response.notifications[1]
        assert upvote.related_id == str(post.id)
        assert upvote.sender_id == str(buyer.user_id)

    @pytest.mark.asyncio
    async def test_items_render_camel_case(self, unit_env):
        """Notification items use camelCase keys."""
        # Arrange
        seller, _, _ = await _seed_activity(unit_env)
        use_case = await unit_env.get(ListNotificationsUseCase)

        # Act
        response = await use_case.execute(
            ListNotificationsRequest(recipient=seller, limit=1)
        )

        # Assert
        body = response.model_dump(mode="json", by_alias=True)
        assert set(body) == {"notifications", "pagination", "unreadCount"}
        assert set(body["notifications"][0]) == {
            "id",
            "senderId",
            "type",
            "title",
            "message",
            "relatedId",
            "relatedModel",
            "priority",
            "isRead",
            "createdAt",
        }
        assert body["pagination"]["totalPages"] == 2

    @pytest.mark.asyncio
    async def test_other_users_see_nothing(self, unit_env):
        """Notifications are private to their recipient."""
        # Arrange
        _, buyer, _ = await _seed_activity(unit_env)
        use_case = await unit_env.get(ListNotificationsUseCase)

        # Act
        response = await use_case.execute(ListNotificationsRequest(recipient=buyer))

        # Assert
        assert response.notifications == []
        assert response.unread_count == 0


class TestMarkReadUseCases:
    """Tests for the mark read use cases and unread count."""

    @pytest.mark.asyncio
    async def test_mark_one_then_all(self, unit_env):
        """Unread count follows the mark read calls."""
        # Arrange
        seller, _, _ = await _seed_activity(unit_env)
        list_use_case = await unit_env.get(ListNotificationsUseCase)
        mark_one = await unit_env.get(MarkNotificationReadUseCase)
        mark_all = await unit_env.get(MarkAllNotificationsReadUseCase)
        unread = await unit_env.get(GetUnreadCountUseCase)
        listing = await list_use_case.execute(ListNotificationsRequest(recipient=seller))

        # Act
        item = await mark_one.execute(
            MarkNotificationReadRequest(
                recipient=seller, notification_id=listing.notifications[0].id
            )
        )
        after_one = await unread.execute(GetUnreadCountRequest(recipient=seller))
        result = await mark_all.execute(MarkAllNotificationsReadRequest(recipient=seller))
        after_all = await unread.execute(GetUnreadCountRequest(recipient=seller))

        # Assert
        assert item.is_read is True
        assert after_one.unread_count == 1
        assert result.updated == 1
        assert after_all.model_dump(by_alias=True) == {"unreadCount": 0}

    @pytest.mark.asyncio
    async def test_marking_foreign_or_malformed_id_is_not_found(self, unit_env):
        """A user cannot mark another user's notification."""
        # Arrange
        seller, buyer, _ = await _seed_activity(unit_env)
        list_use_case = await unit_env.get(ListNotificationsUseCase)
        mark_one = await unit_env.get(MarkNotificationReadUseCase)
        listing = await list_use_case.execute(ListNotificationsRequest(recipient=seller))

        # Act & Assert
        with pytest.raises(NotFoundError):
            await mark_one.execute(
                MarkNotificationReadRequest(
                    recipient=buyer, notification_id=listing.notifications[0].id
                )
            )
        with pytest.raises(NotFoundError):
            await mark_one.execute(
                MarkNotificationReadRequest(recipient=seller, notification_id="nope")
            )


class TestGetAndDeleteUseCases:
    """Tests for reading and deleting single notifications."""

    @pytest.mark.asyncio
    async def test_get_returns_item_without_marking_read(self, unit_env):
        """A fetched notification stays unread."""
        # Arrange
        seller, buyer, _ = await _seed_activity(unit_env)
        list_use_case = await unit_env.get(ListNotificationsUseCase)
        get_one = await unit_env.get(GetNotificationUseCase)
        listing = await list_use_case.execute(ListNotificationsRequest(recipient=seller))
        newest = listing.notifications[0]

        # Act
        item = await get_one.execute(
            GetNotificationRequest(recipient=seller, notification_id=newest.id)
        )

        # Assert
        assert item == newest
        assert item.is_read is False
        with pytest.raises(NotFoundError):
            await get_one.execute(
                GetNotificationRequest(recipient=buyer, notification_id=newest.id)
            )
        with pytest.raises(NotFoundError):
            await get_one.execute(
                GetNotificationRequest(recipient=seller, notification_id="nope")
            )

    @pytest.mark.asyncio
    async def test_delete_one_then_read_ones(self, unit_env):
        """Deleting single and read notifications reports what was removed."""
        # Arrange
        seller, buyer, _ = await _seed_activity(unit_env)
        list_use_case = await unit_env.get(ListNotificationsUseCase)
        mark_one = await unit_env.get(MarkNotificationReadUseCase)
        delete_one = await unit_env.get(DeleteNotificationUseCase)
        delete_read = await unit_env.get(DeleteReadNotificationsUseCase)
        listing = await list_use_case.execute(ListNotificationsRequest(recipient=seller))
        comment_note, vote_note = listing.notifications

        # Act & Assert
        with pytest.raises(NotFoundError):
            await delete_one.execute(
                DeleteNotificationRequest(
                    recipient=buyer, notification_id=comment_note.id
                )
            )

        result = await delete_one.execute(
            DeleteNotificationRequest(recipient=seller, notification_id=comment_note.id)
        )
        assert result.model_dump(by_alias=True) == {"deleted": 1}

        await mark_one.execute(
            MarkNotificationReadRequest(recipient=seller, notification_id=vote_note.id)
        )
        cleared = await delete_read.execute(
            DeleteReadNotificationsRequest(recipient=seller)
        )
        assert cleared.deleted == 1

        after = await list_use_case.execute(ListNotificationsRequest(recipient=seller))
        assert after.notifications == []
        assert after.pagination.total == 0
