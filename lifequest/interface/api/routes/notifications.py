"""Notification routes."""

from typing import Optional
from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, status
from pydantic import BaseModel

from lifequest.application.usecase.notification import (
    DeleteNotificationRequest,
    DeleteNotificationUseCase,
    ListNotificationsRequest,
    ListNotificationsResponse,
    ListNotificationsUseCase,
    MarkNotificationsReadRequest,
    MarkNotificationsReadUseCase,
)

router = APIRouter(
    prefix="/users/{user_id}/notifications",
    tags=["notifications"],
    route_class=DishkaRoute,
)


class MarkReadAPIRequest(BaseModel):
    """API request for marking notifications read (all when no ID)."""

    notification_id: Optional[UUID] = None


@router.get("", response_model=ListNotificationsResponse)
async def list_notifications(
    user_id: UUID,
    list_notifications_use_case: FromDishka[ListNotificationsUseCase],
    unread_only: bool = False,
) -> ListNotificationsResponse:
    """List notifications, newest first."""
    return await list_notifications_use_case.execute(
        ListNotificationsRequest(user_id=user_id, unread_only=unread_only)
    )


@router.post("/read", response_model=ListNotificationsResponse)
async def mark_notifications_read(
    user_id: UUID,
    request: MarkReadAPIRequest,
    mark_notifications_read_use_case: FromDishka[MarkNotificationsReadUseCase],
) -> ListNotificationsResponse:
    """Mark one notification, or every notification, read."""
    return await mark_notifications_read_use_case.execute(
        MarkNotificationsReadRequest(
            user_id=user_id, notification_id=request.notification_id
        )
    )


@router.delete("/{notification_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_notification(
    user_id: UUID,
    notification_id: UUID,
    delete_notification_use_case: FromDishka[DeleteNotificationUseCase],
) -> None:
    """Dismiss a notification."""
    await delete_notification_use_case.execute(
        DeleteNotificationRequest(user_id=user_id, notification_id=notification_id)
    )
