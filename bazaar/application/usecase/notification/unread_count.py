"""Unread notification count use case."""

from pydantic import BaseModel

from bazaar.application.usecase.base import BaseUseCase, CamelModel
from bazaar.domain.service import NotificationService
from bazaar.domain.value import AuthContext


class GetUnreadCountRequest(BaseModel):
    """Unread count request."""

    recipient: AuthContext


class UnreadCountResponse(CamelModel):
    """Unread count response."""

    unread_count: int


class GetUnreadCountUseCase(BaseUseCase):
    """Use case for counting the caller's unread notifications."""

    def __init__(self, notification_service: NotificationService) -> None:
        self.notification_service = notification_service

    async def execute(self, request: GetUnreadCountRequest) -> UnreadCountResponse:
        count = await self.notification_service.count_for_recipient(
            request.recipient.user_id, unread_only=True
        )
        return UnreadCountResponse(unread_count=count)
