"""Notification use cases."""

from .notifications import (
    DeleteNotificationRequest,
    DeleteNotificationUseCase,
    ListNotificationsRequest,
    ListNotificationsResponse,
    ListNotificationsUseCase,
    MarkNotificationsReadRequest,
    MarkNotificationsReadUseCase,
)

__all__ = [
    "DeleteNotificationRequest",
    "DeleteNotificationUseCase",
    "ListNotificationsRequest",
    "ListNotificationsResponse",
    "ListNotificationsUseCase",
    "MarkNotificationsReadRequest",
    "MarkNotificationsReadUseCase",
]
