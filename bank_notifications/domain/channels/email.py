"""Email channel: any recipient containing ``@`` is accepted."""

from __future__ import annotations

from decimal import Decimal

from bank_notifications.domain.entities import NotificationChannel
from bank_notifications.domain.exceptions import RecipientInvalidError

from .base import NotificationChannelStrategy

EMAIL_COST = Decimal("0.10")


class EmailNotificationStrategy(NotificationChannelStrategy):
    channel = NotificationChannel.EMAIL
    cost = EMAIL_COST

    def validate_recipient(self, recipient: str) -> None:
        if not recipient or "@" not in recipient:
            raise RecipientInvalidError("Email address must contain an @ symbol")


__all__ = ["EMAIL_COST", "EmailNotificationStrategy"]
