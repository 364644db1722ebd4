"""PostgreSQL implementation of Notification repository."""

from typing import Optional

from sqlalchemy import and_, delete, desc, func, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from bazaar.domain.model import Notification
from bazaar.domain.repository import NotificationRepository
from bazaar.domain.value import NotificationId, UserId
from bazaar.persistence.mappers import notification_to_dict, row_to_notification
from bazaar.persistence.tables import notifications_table


class PostgresNotificationRepository(NotificationRepository):
    """PostgreSQL implementation of NotificationRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    def _owned(self, notification_id: NotificationId, recipient_id: UserId):
        return and_(
            notifications_table.c.id == notification_id,
            notifications_table.c.recipient_id == recipient_id,
        )

    def _for_recipient(self, recipient_id: UserId, unread_only: bool):
        clause = notifications_table.c.recipient_id == recipient_id
        if unread_only:
            clause = and_(clause, notifications_table.c.is_read.is_(False))
        return clause

    async def save(self, notification: Notification) -> Notification:
        """Insert a notification.

        Runs inside a SAVEPOINT so a failed insert leaves the surrounding
        vote or comment transaction usable.
        """
        async with self.session.begin_nested():
            stmt = insert(notifications_table).values(
                **notification_to_dict(notification)
            )
            await self.session.execute(stmt)
        return notification

    async def find_by_recipient(
        self,
        recipient_id: UserId,
        unread_only: bool = False,
        limit: int = 20,
        offset: int = 0,
    ) -> list[Notification]:
        """Find a page of a user's notifications, newest first."""
        stmt = (
            select(notifications_table)
            .where(self._for_recipient(recipient_id, unread_only))
            .order_by(
                desc(notifications_table.c.created_at), desc(notifications_table.c.id)
            )
            .limit(limit)
            .offset(offset)
        )
        result = await self.session.execute(stmt)
        return [row_to_notification(row._asdict()) for row in result.fetchall()]

    async def count_by_recipient(
        self, recipient_id: UserId, unread_only: bool = False
    ) -> int:
        """Count a user's notifications."""
        stmt = (
            select(func.count())
            .select_from(notifications_table)
            .where(self._for_recipient(recipient_id, unread_only))
        )
        result = await self.session.execute(stmt)
        return result.scalar_one()

    async def mark_read(
        self, notification_id: NotificationId, recipient_id: UserId
    ) -> Optional[Notification]:
        """Mark one of the recipient's notifications as read."""
        stmt = (
            update(notifications_table)
            .where(self._owned(notification_id, recipient_id))
            .values(is_read=True)
            .returning(notifications_table)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        await self.session.flush()
        return row_to_notification(row._asdict()) if row else None

    async def mark_all_read(self, recipient_id: UserId) -> int:
        """Mark every unread notification of the recipient as read."""
        stmt = (
            update(notifications_table)
            .where(self._for_recipient(recipient_id, unread_only=True))
            .values(is_read=True)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount  # type: ignore[attr-defined]

    async def find_by_id(
        self, notification_id: NotificationId, recipient_id: UserId
    ) -> Optional[Notification]:
        """Find one of the recipient's notifications."""
        stmt = select(notifications_table).where(
            self._owned(notification_id, recipient_id)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_notification(row._asdict()) if row else None

    async def delete(
        self, notification_id: NotificationId, recipient_id: UserId
    ) -> bool:
        """Delete one of the recipient's notifications."""
        stmt = delete(notifications_table).where(
            self._owned(notification_id, recipient_id)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]

    async def delete_read(self, recipient_id: UserId) -> int:
        """Delete every read notification of the recipient."""
        stmt = delete(notifications_table).where(
            and_(
                notifications_table.c.recipient_id == recipient_id,
                notifications_table.c.is_read.is_(True),
            )
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount  # type: ignore[attr-defined]
