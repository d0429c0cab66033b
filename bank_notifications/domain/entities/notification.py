"""Domain entity representing a bank notification and its lifecycle state."""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime
from decimal import Decimal
from enum import Enum
from uuid import UUID

MAX_MESSAGE_LENGTH = 500


class NotificationChannel(str, Enum):
    """Delivery medium, each with its own recipient format and fixed cost."""

    EMAIL = "EMAIL"
    SMS = "SMS"
    PUSH = "PUSH"


class NotificationPriority(str, Enum):
    """Informational priority; no lifecycle rule depends on it."""

    HIGH = "HIGH"
    MEDIUM = "MEDIUM"
    LOW = "LOW"


class NotificationState(str, Enum):
    PENDING = "PENDING"
    SENT = "SENT"
    FAILED = "FAILED"


@dataclass(frozen=True)
class Notification:
    """One notification revision.

    Instances are never mutated. Every lifecycle transition produces a new
    revision through :meth:`with_cost`, :meth:`mark_sent` or
    :meth:`mark_failed`, keeping ``id`` and ``created_at`` untouched.
    """

    id: UUID
    recipient: str
    message: str
    channel: NotificationChannel
    priority: NotificationPriority
    state: NotificationState
    cost: Decimal
    created_at: datetime
    sent_at: datetime | None = None

    def __post_init__(self) -> None:
        if self.id is None:
            raise ValueError("id is required")
        if not self.recipient or not self.recipient.strip():
            raise ValueError("recipient is required")
        if not self.message or not self.message.strip():
            raise ValueError("message is required")
        if len(self.message) > MAX_MESSAGE_LENGTH:
            raise ValueError(f"message cannot exceed {MAX_MESSAGE_LENGTH} characters")
        if self.channel is None:
            raise ValueError("channel is required")
        if self.priority is None:
            raise ValueError("priority is required")
        if self.state is None:
            raise ValueError("state is required")
        if self.created_at is None:
            raise ValueError("created_at is required")
        if not isinstance(self.cost, Decimal):
            raise ValueError("cost must be a Decimal amount")
        if self.cost < 0:
            raise ValueError("cost cannot be negative")
        if (self.sent_at is not None) != (self.state == NotificationState.SENT):
            raise ValueError("sent_at must be set if and only if the notification is SENT")

    @property
    def is_sent(self) -> bool:
        return self.state == NotificationState.SENT

    def with_cost(self, cost: Decimal) -> Notification:
        """Return a revision carrying ``cost``."""

        return replace(self, cost=cost)

    def mark_sent(self, *, sent_at: datetime, cost: Decimal) -> Notification:
        """Return the SENT revision delivered at ``sent_at``."""

        return replace(self, state=NotificationState.SENT, sent_at=sent_at, cost=cost)

    def mark_failed(self) -> Notification:
        """Return the FAILED revision; the cost is kept as already computed."""

        return replace(self, state=NotificationState.FAILED, sent_at=None)


__all__ = [
    "MAX_MESSAGE_LENGTH",
    "Notification",
    "NotificationChannel",
    "NotificationPriority",
    "NotificationState",
]
