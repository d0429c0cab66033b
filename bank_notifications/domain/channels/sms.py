"""SMS channel: recipients are ten-digit phone numbers."""

from __future__ import annotations

import re
from decimal import Decimal
from typing import Final

from bank_notifications.domain.entities import NotificationChannel
from bank_notifications.domain.exceptions import RecipientInvalidError

from .base import NotificationChannelStrategy

SMS_COST = Decimal("0.50")

# ASCII digits only; ``\d`` would also accept other Unicode digit characters.
_PHONE_PATTERN: Final[re.Pattern[str]] = re.compile(r"[0-9]{10}")


class SmsNotificationStrategy(NotificationChannelStrategy):
    channel = NotificationChannel.SMS
    cost = SMS_COST

    def validate_recipient(self, recipient: str) -> None:
        if not recipient or _PHONE_PATTERN.fullmatch(recipient) is None:
            raise RecipientInvalidError("Phone number must have exactly 10 numeric digits")


__all__ = ["SMS_COST", "SmsNotificationStrategy"]
