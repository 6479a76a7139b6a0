"""Notification log kept on the user state."""

from datetime import datetime
from uuid import uuid4

from lifequest.domain.model import Notification, UserState
from lifequest.domain.value import NotificationId, NotificationType


def push_notification(
    state: UserState,
    title: str,
    message: str,
    now: datetime,
    limit: int,
    type: NotificationType = NotificationType.GENERIC,
) -> UserState:
    """Prepend a notification, keeping only the newest ``limit``."""
    notification = Notification(
        id=NotificationId(uuid4()),
        type=type,
        title=title,
        message=message,
        date=now,
    )
    return state.model_copy(
        update={"notifications": [notification, *state.notifications][:limit]}
    )


def mark_read(state: UserState, notification_id: NotificationId | None) -> UserState:
    """Mark one notification read, or all of them when no id is given."""
    return state.model_copy(
        update={
            "notifications": [
                n.model_copy(update={"read": True})
                if notification_id is None or n.id == notification_id
                else n
                for n in state.notifications
            ]
        }
    )


def remove_notification(state: UserState, notification_id: NotificationId) -> UserState:
    return state.model_copy(
        update={
            "notifications": [
                n for n in state.notifications if n.id != notification_id
            ]
        }
    )
