"""Notification use cases."""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel

from lifequest.domain.model import Notification
from lifequest.domain.service import ProgressionEngine
from lifequest.domain.value import NotificationId, UserId


class ListNotificationsRequest(BaseModel):
    """List notifications request."""

    user_id: UUID
    unread_only: bool = False


class ListNotificationsResponse(BaseModel):
    """List notifications response, newest first."""

    notifications: list[Notification]
    unread_count: int


class ListNotificationsUseCase:
    def __init__(self, engine: ProgressionEngine) -> None:
        self.engine = engine

    async def execute(
        self, request: ListNotificationsRequest
    ) -> ListNotificationsResponse:
        state = await self.engine.get_user(UserId(request.user_id))
        unread = [n for n in state.notifications if not n.read]
        return ListNotificationsResponse(
            notifications=unread if request.unread_only else state.notifications,
            unread_count=len(unread),
        )


class MarkNotificationsReadRequest(BaseModel):
    """Mark notifications read request. Omit the ID to mark everything read."""

    user_id: UUID
    notification_id: Optional[UUID] = None


class MarkNotificationsReadUseCase:
    """Use case for marking notifications read."""

    def __init__(self, engine: ProgressionEngine) -> None:
        self.engine = engine

    async def execute(
        self, request: MarkNotificationsReadRequest
    ) -> ListNotificationsResponse:
        state = await self.engine.mark_notifications_read(
            UserId(request.user_id),
            NotificationId(request.notification_id)
            if request.notification_id
            else None,
        )
        return ListNotificationsResponse(
            notifications=state.notifications,
            unread_count=sum(1 for n in state.notifications if not n.read),
        )


class DeleteNotificationRequest(BaseModel):
    """Delete notification request."""

    user_id: UUID
    notification_id: UUID


class DeleteNotificationUseCase:
    """Use case for dismissing a notification."""

    def __init__(self, engine: ProgressionEngine) -> None:
        self.engine = engine

    async def execute(self, request: DeleteNotificationRequest) -> None:
        """Remove the notification.

        Raises:
            NotFoundError: If the user has no such notification
        """
        await self.engine.delete_notification(
            UserId(request.user_id), NotificationId(request.notification_id)
        )
