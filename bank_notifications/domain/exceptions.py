"""Errors raised by the notification domain.

Every error derives from :class:`ValueError` so callers that already guard
use cases with ``except ValueError`` keep working.
"""

from __future__ import annotations

from uuid import UUID


class NotificationError(ValueError):
    """Base class for notification domain errors."""


class NotificationValidationError(NotificationError):
    """Raised when the data supplied for a notification is not acceptable."""


class RecipientInvalidError(NotificationValidationError):
    """Raised when a recipient does not match its channel's format."""


class MessageInvalidError(NotificationValidationError):
    """Raised when a message is blank or longer than allowed."""


class PriorityInvalidError(NotificationValidationError):
    """Raised when a priority is not one of HIGH, MEDIUM or LOW."""


class NotificationNotFoundError(NotificationError):
    """Raised when an operation addresses a notification that is not stored."""

    def __init__(self, notification_id: UUID) -> None:
        super().__init__(f"Notification not found with id: {notification_id}")
        self.notification_id = notification_id


class ChannelConfigurationError(NotificationError):
    """Raised when the channel strategies are wired incorrectly."""


class UnknownChannelError(ChannelConfigurationError):
    def __init__(self, channel: object) -> None:
        super().__init__(f"No strategy registered for channel: {channel}")
        self.channel = channel


class DuplicateChannelError(ChannelConfigurationError):
    def __init__(self, channel: object) -> None:
        super().__init__(f"More than one strategy registered for channel: {channel}")
        self.channel = channel


__all__ = [
    "ChannelConfigurationError",
    "DuplicateChannelError",
    "MessageInvalidError",
    "NotificationError",
    "NotificationNotFoundError",
    "NotificationValidationError",
    "PriorityInvalidError",
    "RecipientInvalidError",
    "UnknownChannelError",
]
