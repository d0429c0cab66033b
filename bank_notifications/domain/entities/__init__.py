"""Domain entities exposed by the application."""

from .notification import (
    MAX_MESSAGE_LENGTH,
    Notification,
    NotificationChannel,
    NotificationPriority,
    NotificationState,
)

__all__ = [
    "MAX_MESSAGE_LENGTH",
    "Notification",
    "NotificationChannel",
    "NotificationPriority",
    "NotificationState",
]
