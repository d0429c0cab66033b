"""Pydantic models describing notification payloads."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from bank_notifications.domain.entities import (
    NotificationChannel,
    NotificationPriority,
    NotificationState,
)


class NotificationCreate(BaseModel):
    """Payload used to register a new notification.

    Recipient format and message length are checked by the lifecycle service
    so the API reports the same errors as any other caller.
    """

    recipient: str = Field(..., description="Email address, phone number or device token")
    message: str = Field(..., description="Text delivered to the recipient")
    channel: NotificationChannel
    priority: NotificationPriority


class NotificationRead(BaseModel):
    """Representation of a notification returned to the client."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    recipient: str
    message: str
    channel: NotificationChannel
    priority: NotificationPriority
    state: NotificationState
    cost: Decimal
    created_at: datetime
    sent_at: datetime | None = None


class NotificationCostSummary(BaseModel):
    """Aggregated cost of every stored notification."""

    total_cost: Decimal
    count: int = Field(..., ge=0)


__all__ = ["NotificationCostSummary", "NotificationCreate", "NotificationRead"]
