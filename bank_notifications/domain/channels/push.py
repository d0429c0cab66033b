"""Push channel: recipients are device tokens prefixed with ``device_``."""

from __future__ import annotations

from decimal import Decimal

from bank_notifications.domain.entities import NotificationChannel
from bank_notifications.domain.exceptions import RecipientInvalidError

from .base import NotificationChannelStrategy

PUSH_COST = Decimal("0.05")
DEVICE_PREFIX = "device_"


class PushNotificationStrategy(NotificationChannelStrategy):
    channel = NotificationChannel.PUSH
    cost = PUSH_COST

    def validate_recipient(self, recipient: str) -> None:
        if not recipient or not recipient.startswith(DEVICE_PREFIX):
            raise RecipientInvalidError(f"Device ID must have the prefix '{DEVICE_PREFIX}'")


__all__ = ["DEVICE_PREFIX", "PUSH_COST", "PushNotificationStrategy"]
