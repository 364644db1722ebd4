"""Unit tests for NotificationService and NotificationDispatcher."""

from uuid import uuid4

import pytest

from bazaar.domain.error import NotFoundError
from bazaar.domain.service import NotificationDispatcher, NotificationService
from bazaar.domain.value import (
    NotificationId,
    NotificationPriority,
    NotificationType,
    PostKind,
    RelatedModel,
    VoteType,
)
from tests.conftest import make_post, make_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


async def _notify(service: NotificationService, recipient, sender, n: int = 1):
    created = []
    for i in range(n):
        created.append(
            await service.create_notification(
                recipient_id=recipient.user_id,
                sender_id=sender.user_id,
                type=NotificationType.TRADE_UPVOTE,
                title="Your Trade Was upvoted",
                message=f"vote {i}",
                related_id=uuid4(),
                related_model=RelatedModel.TRADE,
            )
        )
    return created


class TestNotificationService:
    """Tests for NotificationService."""

    @pytest.mark.asyncio
    async def test_created_notification_is_unread_medium(self, unit_env):
        """New notifications default to unread and medium priority."""
        service = await unit_env.get(NotificationService)
        [notification] = await _notify(service, make_user("a"), make_user("b"))

        assert notification.is_read is False
        assert notification.priority == NotificationPriority.MEDIUM

    @pytest.mark.asyncio
    async def test_list_newest_first_and_unread_filter(self, unit_env):
        """Listing is newest first; unread_only hides read ones."""
        # Arrange
        service = await unit_env.get(NotificationService)
        recipient, sender = make_user("seller"), make_user("buyer")
        created = await _notify(service, recipient, sender, n=3)
        await service.mark_read(created[2].id, recipient.user_id)

        # Act
        everything = await service.list_for_recipient(recipient.user_id)
        unread = await service.list_for_recipient(recipient.user_id, unread_only=True)

        # Assert
        assert [n.message for n in everything] == ["vote 2", "vote 1", "vote 0"]
        assert [n.message for n in unread] == ["vote 1", "vote 0"]
        assert await service.count_for_recipient(recipient.user_id, unread_only=True) == 2

    @pytest.mark.asyncio
    async def test_mark_read_of_someone_elses_notification_is_not_found(self, unit_env):
        """Recipients can only mark their own notifications."""
        # Arrange
        service = await unit_env.get(NotificationService)
        recipient, intruder = make_user("seller"), make_user("intruder")
        [notification] = await _notify(service, recipient, make_user("buyer"))

        # Act & Assert
        with pytest.raises(NotFoundError):
            await service.mark_read(notification.id, intruder.user_id)
        with pytest.raises(NotFoundError):
            await service.mark_read(NotificationId(uuid4()), recipient.user_id)

    @pytest.mark.asyncio
    async def test_mark_all_read_counts_only_unread(self, unit_env):
        """mark_all_read reports how many were unread."""
        # Arrange
        service = await unit_env.get(NotificationService)
        recipient = make_user("seller")
        created = await _notify(service, recipient, make_user("buyer"), n=3)
        await service.mark_read(created[0].id, recipient.user_id)

        # Act
        updated = await service.mark_all_read(recipient.user_id)

        # Assert
        assert updated == 2
        assert await service.count_for_recipient(recipient.user_id, unread_only=True) == 0
        assert await service.mark_all_read(recipient.user_id) == 0

    @pytest.mark.asyncio
    async def test_get_notification_is_owner_scoped(self, unit_env):
        """Getting a notification leaves it unread and hides it from others."""
        # Arrange
        service = await unit_env.get(NotificationService)
        recipient, intruder = make_user("seller"), make_user("intruder")
        [notification] = await _notify(service, recipient, make_user("buyer"))

        # Act
        fetched = await service.get_notification(notification.id, recipient.user_id)

        # Assert
        assert fetched.id == notification.id
        assert fetched.is_read is False
        with pytest.raises(NotFoundError):
            await service.get_notification(notification.id, intruder.user_id)

    @pytest.mark.asyncio
    async def test_delete_notification_is_owner_scoped(self, unit_env):
        """Only the recipient can delete a notification, and only once."""
        # Arrange
        service = await unit_env.get(NotificationService)
        recipient, intruder = make_user("seller"), make_user("intruder")
        [notification] = await _notify(service, recipient, make_user("buyer"))

        # Act & Assert
        with pytest.raises(NotFoundError):
            await service.delete_notification(notification.id, intruder.user_id)
        assert await service.count_for_recipient(recipient.user_id) == 1

        await service.delete_notification(notification.id, recipient.user_id)
        assert await service.count_for_recipient(recipient.user_id) == 0

        with pytest.raises(NotFoundError):
            await service.delete_notification(notification.id, recipient.user_id)

    @pytest.mark.asyncio
    async def test_delete_read_keeps_unread_and_other_users(self, unit_env):
        """delete_read removes only the caller's read notifications."""
        # Arrange
        service = await unit_env.get(NotificationService)
        recipient, other = make_user("seller"), make_user("other")
        sender = make_user("buyer")
        created = await _notify(service, recipient, sender, n=3)
        [foreign] = await _notify(service, other, sender)
        await service.mark_read(created[0].id, recipient.user_id)
        await service.mark_read(created[1].id, recipient.user_id)
        await service.mark_read(foreign.id, other.user_id)

        # Act
        deleted = await service.delete_read(recipient.user_id)

        # Assert
        assert deleted == 2
        [remaining] = await service.list_for_recipient(recipient.user_id)
        assert remaining.id == created[2].id
        assert await service.count_for_recipient(other.user_id) == 1
        assert await service.delete_read(recipient.user_id) == 0


class TestNotificationDispatcher:
    """Tests for NotificationDispatcher."""

    @pytest.mark.asyncio
    async def test_long_text_is_truncated(self, unit_env):
        """Titles and messages are cut to the stored column limits."""
        # Arrange
        dispatcher = await unit_env.get(NotificationDispatcher)

        # Act
        notification = await dispatcher.dispatch(
            recipient_id=make_user("seller").user_id,
            sender_id=make_user("buyer").user_id,
            type=NotificationType.TRADE_COMMENT,
            title="t" * 400,
            message="m" * 1500,
            related_id=uuid4(),
            related_model=RelatedModel.TRADE_COMMENT,
        )

        # Assert
        assert notification is not None
        assert len(notification.title) == 255
        assert len(notification.message) == 1000

    @pytest.mark.asyncio
    async def test_vote_notification_names_voter_and_post(self, unit_env):
        """Vote notifications point at the post itself."""
        # Arrange
        dispatcher = await unit_env.get(NotificationDispatcher)
        post = make_post(make_user("seller"), kind=PostKind.FORUM, title="Meetup")

        # Act
        notification = await dispatcher.notify_vote(
            post, make_user("buyer"), VoteType.DOWN
        )

        # Assert
        assert notification.type == NotificationType.FORUM_DOWNVOTE
        assert notification.related_model == RelatedModel.FORUM_POST
        assert notification.related_id == post.id
        assert notification.title == "Your Post Was downvoted"
        assert notification.message == 'buyer downvoted your forum post "Meetup"'

    @pytest.mark.asyncio
    async def test_sender_equal_to_recipient_is_skipped(self, unit_env):
        """Nobody is notified about their own actions."""
        # Arrange
        dispatcher = await unit_env.get(NotificationDispatcher)
        service = await unit_env.get(NotificationService)
        author = make_user("seller")

        # Act
        result = await dispatcher.dispatch(
            recipient_id=author.user_id,
            sender_id=author.user_id,
            type=NotificationType.TRADE_COMMENT,
            title="t",
            message="m",
            related_id=uuid4(),
            related_model=RelatedModel.TRADE_COMMENT,
        )

        # Assert
        assert result is None
        assert await service.count_for_recipient(author.user_id) == 0
