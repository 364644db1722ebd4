"""Notification routes for the signed-in recipient."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Query, Request

from bazaar.application.usecase.notification import (
    DeleteNotificationRequest,
    DeleteNotificationsResponse,
    DeleteNotificationUseCase,
    DeleteReadNotificationsRequest,
    DeleteReadNotificationsUseCase,
    GetNotificationRequest,
    GetNotificationUseCase,
    GetUnreadCountRequest,
    GetUnreadCountUseCase,
    ListNotificationsRequest,
    ListNotificationsResponse,
    ListNotificationsUseCase,
    MarkAllNotificationsReadRequest,
    MarkAllNotificationsReadResponse,
    MarkAllNotificationsReadUseCase,
    MarkNotificationReadRequest,
    MarkNotificationReadUseCase,
    NotificationItem,
    UnreadCountResponse,
)
from bazaar.config import AuthSettings
from bazaar.domain.service import JWTService
from bazaar.interface.api.auth import require_auth

router = APIRouter(
    prefix="/notifications", tags=["notifications"], route_class=DishkaRoute
)


@router.get("", response_model=ListNotificationsResponse)
async def list_notifications(
    request: Request,
    list_notifications_use_case: FromDishka[ListNotificationsUseCase],
    jwt_service: FromDishka[JWTService],
    auth_settings: FromDishka[AuthSettings],
    page: int | None = Query(default=None),
    limit: int | None = Query(default=None),
    unread_only: bool = Query(default=False),
) -> ListNotificationsResponse:
    """List the caller's notifications, newest first."""
    recipient = require_auth(request, jwt_service, auth_settings)
    return await list_notifications_use_case.execute(
        ListNotificationsRequest(
            recipient=recipient, page=page, limit=limit, unread_only=unread_only
        )
    )


@router.get("/unread/count", response_model=UnreadCountResponse)
async def unread_count(
    request: Request,
    unread_count_use_case: FromDishka[GetUnreadCountUseCase],
    jwt_service: FromDishka[JWTService],
    auth_settings: FromDishka[AuthSettings],
) -> UnreadCountResponse:
    """Count the caller's unread notifications."""
    recipient = require_auth(request, jwt_service, auth_settings)
    return await unread_count_use_case.execute(
        GetUnreadCountRequest(recipient=recipient)
    )


@router.patch("/read-all", response_model=MarkAllNotificationsReadResponse)
async def mark_all_read(
    request: Request,
    mark_all_read_use_case: FromDishka[MarkAllNotificationsReadUseCase],
    jwt_service: FromDishka[JWTService],
    auth_settings: FromDishka[AuthSettings],
) -> MarkAllNotificationsReadResponse:
    """Mark every notification of the caller as read."""
    recipient = require_auth(request, jwt_service, auth_settings)
    return await mark_all_read_use_case.execute(
        MarkAllNotificationsReadRequest(recipient=recipient)
    )


@router.delete("/read/delete-all", response_model=DeleteNotificationsResponse)
async def delete_read(
    request: Request,
    delete_read_use_case: FromDishka[DeleteReadNotificationsUseCase],
    jwt_service: FromDishka[JWTService],
    auth_settings: FromDishka[AuthSettings],
) -> DeleteNotificationsResponse:
    """Delete every notification the caller has already read."""
    recipient = require_auth(request, jwt_service, auth_settings)
    return await delete_read_use_case.execute(
        DeleteReadNotificationsRequest(recipient=recipient)
    )


@router.patch("/{notification_id}/read", response_model=NotificationItem)
async def mark_read(
    notification_id: str,
    request: Request,
    mark_read_use_case: FromDishka[MarkNotificationReadUseCase],
    jwt_service: FromDishka[JWTService],
    auth_settings: FromDishka[AuthSettings],
) -> NotificationItem:
    """Mark one of the caller's notifications as read.

    Another user's notification is reported as not found.
    """
    recipient = require_auth(request, jwt_service, auth_settings)
    return await mark_read_use_case.execute(
        MarkNotificationReadRequest(
            recipient=recipient, notification_id=notification_id
        )
    )


@router.get("/{notification_id}", response_model=NotificationItem)
async def get_notification(
    notification_id: str,
    request: Request,
    get_notification_use_case: FromDishka[GetNotificationUseCase],
    jwt_service: FromDishka[JWTService],
    auth_settings: FromDishka[AuthSettings],
) -> NotificationItem:
    """Get one of the caller's notifications without marking it read."""
    recipient = require_auth(request, jwt_service, auth_settings)
    return await get_notification_use_case.execute(
        GetNotificationRequest(recipient=recipient, notification_id=notification_id)
    )


@router.delete("/{notification_id}", response_model=DeleteNotificationsResponse)
async def delete_notification(
    notification_id: str,
    request: Request,
    delete_notification_use_case: FromDishka[DeleteNotificationUseCase],
    jwt_service: FromDishka[JWTService],
    auth_settings: FromDishka[AuthSettings],
) -> DeleteNotificationsResponse:
    """Delete one of the caller's notifications.

    Another user's notification is reported as not found.
    """
    recipient = require_auth(request, jwt_service, auth_settings)
    return await delete_notification_use_case.execute(
        DeleteNotificationRequest(
            recipient=recipient, notification_id=notification_id
        )
    )
