"""Strategy interface shared by every notification channel."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from decimal import Decimal
from typing import ClassVar

from bank_notifications.domain.entities import Notification, NotificationChannel
from bank_notifications.utils import AppClock

logger = logging.getLogger(__name__)


class NotificationChannelStrategy(ABC):
    """Everything that differs between channels: recipient shape, cost and send.

    Concrete strategies declare ``channel`` and ``cost`` and implement
    :meth:`validate_recipient`. Sending is a simulation: it never performs I/O
    and always succeeds for a recipient that passed validation.
    """

    channel: ClassVar[NotificationChannel]
    cost: ClassVar[Decimal]

    def __init__(self, clock: AppClock | None = None) -> None:
        self.clock = clock or AppClock()

    @abstractmethod
    def validate_recipient(self, recipient: str) -> None:
        """Raise :class:`RecipientInvalidError` when ``recipient`` is malformed."""

    def calculate_cost(self, notification: Notification) -> Decimal:
        """Return the fixed per-send cost; the content does not matter."""

        return self.cost

    def send(self, notification: Notification) -> Notification:
        """Return the SENT revision of ``notification`` without touching the input."""

        logger.info(
            "Sending %s notification %s to %s",
            self.channel.value,
            notification.id,
            notification.recipient,
        )
        return notification.mark_sent(
            sent_at=self.clock.now(),
            cost=self.calculate_cost(notification),
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}(channel={self.channel.value})"


__all__ = ["NotificationChannelStrategy"]
