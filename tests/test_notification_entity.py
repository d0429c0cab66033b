"""Unit tests for the notification entity invariants."""

from __future__ import annotations

import sys
from dataclasses import FrozenInstanceError
from datetime import datetime, timezone
from decimal import Decimal
from pathlib import Path
from uuid import uuid4

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from bank_notifications.domain.entities import (
    MAX_MESSAGE_LENGTH,
    Notification,
    NotificationChannel,
    NotificationPriority,
    NotificationState,
)

CREATED_AT = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)


def _pending(**overrides) -> Notification:
    values = {
        "id": uuid4(),
        "recipient": "juan@gmail.com",
        "message": "Your transfer was approved",
        "channel": NotificationChannel.EMAIL,
        "priority": NotificationPriority.HIGH,
        "state": NotificationState.PENDING,
        "cost": Decimal("0"),
        "created_at": CREATED_AT,
    }
    values.update(overrides)
    return Notification(**values)


def test_enums_are_string_valued():
    assert NotificationChannel.EMAIL == "EMAIL"
    assert NotificationPriority.LOW == "LOW"
    assert NotificationState.FAILED == "FAILED"
    assert {channel.value for channel in NotificationChannel} == {"EMAIL", "SMS", "PUSH"}


def test_pending_notification_has_no_sent_at():
    notification = _pending()

    assert notification.sent_at is None
    assert notification.is_sent is False


@pytest.mark.parametrize("field", ["recipient", "message"])
@pytest.mark.parametrize("value", ["", "   "])
def test_blank_text_fields_are_rejected(field, value):
    with pytest.raises(ValueError):
        _pending(**{field: value})


def test_message_longer_than_limit_is_rejected():
    with pytest.raises(ValueError):
        _pending(message="x" * (MAX_MESSAGE_LENGTH + 1))


def test_negative_cost_is_rejected():
    with pytest.raises(ValueError):
        _pending(cost=Decimal("-0.01"))


def test_float_cost_is_rejected():
    with pytest.raises(ValueError):
        _pending(cost=0.1)


def test_sent_at_requires_sent_state():
    with pytest.raises(ValueError):
        _pending(sent_at=CREATED_AT)


def test_sent_state_requires_sent_at():
    with pytest.raises(ValueError):
        _pending(state=NotificationState.SENT)


def test_notification_is_frozen():
    notification = _pending()

    with pytest.raises(FrozenInstanceError):
        notification.state = NotificationState.SENT  # type: ignore[misc]


def test_revisions_keep_identity_and_leave_original_untouched():
    original = _pending()
    sent_at = datetime(2024, 5, 1, 12, 5, tzinfo=timezone.utc)

    priced = original.with_cost(Decimal("0.10"))
    sent = priced.mark_sent(sent_at=sent_at, cost=Decimal("0.10"))

    assert original.cost == Decimal("0")
    assert priced.state is NotificationState.PENDING
    assert sent.id == original.id
    assert sent.created_at == original.created_at
    assert sent.state is NotificationState.SENT
    assert sent.sent_at == sent_at
    assert sent.is_sent is True


def test_mark_failed_keeps_cost_and_clears_sent_at():
    priced = _pending(cost=Decimal("0.50"), channel=NotificationChannel.SMS, recipient="1234567890")

    failed = priced.mark_failed()

    assert failed.state is NotificationState.FAILED
    assert failed.sent_at is None
    assert failed.cost == Decimal("0.50")
