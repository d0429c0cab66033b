"""Use cases driving the notification lifecycle.

:class:`NotificationService` is the only place where notifications are
constructed. It resolves the channel strategy, validates the input, prices the
notification and hands every revision to the storage port.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from decimal import Decimal
from uuid import UUID, uuid4

from bank_notifications.domain.channels import ChannelStrategyRegistry
from bank_notifications.domain.entities import (
    MAX_MESSAGE_LENGTH,
    Notification,
    NotificationChannel,
    NotificationPriority,
    NotificationState,
)
from bank_notifications.domain.exceptions import (
    MessageInvalidError,
    NotificationNotFoundError,
    NotificationValidationError,
    PriorityInvalidError,
)
from bank_notifications.domain.ports import NotificationPersistencePort
from bank_notifications.utils import AppClock

logger = logging.getLogger(__name__)


class NotificationService:
    """Create, send and query notifications through a storage port."""

    def __init__(
        self,
        repository: NotificationPersistencePort,
        strategies: ChannelStrategyRegistry,
        clock: AppClock | None = None,
    ) -> None:
        self._repository = repository
        self._strategies = strategies
        self._clock = clock or AppClock()

    def create(
        self,
        recipient: str,
        message: str,
        channel: NotificationChannel,
        priority: NotificationPriority,
    ) -> Notification:
        """Validate and store a new PENDING notification priced for ``channel``.

        The recipient is checked before the message, so a request with both
        fields wrong reports the recipient error.
        """

        strategy = self._strategies.resolve(channel)
        strategy.validate_recipient(recipient)
        _validate_message(message)
        priority = _parse_priority(priority)

        notification = Notification(
            id=uuid4(),
            recipient=recipient,
            message=message,
            channel=strategy.channel,
            priority=priority,
            state=NotificationState.PENDING,
            cost=Decimal("0"),
            created_at=self._clock.now(),
        )
        notification = notification.with_cost(strategy.calculate_cost(notification))

        saved = self._repository.save(notification)
        logger.info(
            "Created %s notification %s (priority=%s, cost=%s)",
            saved.channel.value,
            saved.id,
            saved.priority.value,
            saved.cost,
        )
        return saved

    def send_by_id(self, notification_id: UUID) -> Notification:
        """Send a stored notification through its channel and persist the result.

        The recipient is validated again because a stored notification may not
        have gone through :meth:`create`. Validation errors propagate. Any other
        error raised while sending is logged and recorded as a FAILED revision,
        which is returned instead of raising.
        """

        notification = self.get_by_id(notification_id)
        strategy = self._strategies.resolve(notification.channel)
        strategy.validate_recipient(notification.recipient)

        if notification.is_sent:
            logger.warning("Notification %s was already sent; sending it again", notification.id)

        try:
            result = strategy.send(notification)
        except NotificationValidationError:
            raise
        except Exception:
            logger.exception(
                "Delivery of %s notification %s failed",
                notification.channel.value,
                notification.id,
            )
            result = notification.mark_failed()

        return self._repository.save(result)

    def get_by_id(self, notification_id: UUID) -> Notification:
        notification = self._repository.find_by_id(notification_id)
        if notification is None:
            raise NotificationNotFoundError(notification_id)
        return notification

    def list_by_state(self, state: NotificationState) -> list[Notification]:
        return list(self._repository.filter_by_state(NotificationState(state)))

    def list_all(self) -> list[Notification]:
        return list(self._repository.list_all())

    def total_cost(self) -> Decimal:
        """Return the exact sum of the cost of every stored notification."""

        return _sum_costs(self._repository.list_all())

    def count(self) -> int:
        return self._repository.count_registries()


def _validate_message(message: str) -> None:
    if message is None or not message.strip():
        raise MessageInvalidError("Message cannot be null or empty")
    if len(message) > MAX_MESSAGE_LENGTH:
        msg = (
            f"Message cannot exceed {MAX_MESSAGE_LENGTH} characters "
            f"(current: {len(message)})"
        )
        raise MessageInvalidError(msg)


def _parse_priority(priority: NotificationPriority | str) -> NotificationPriority:
    try:
        return NotificationPriority(priority)
    except ValueError as exc:
        allowed = ", ".join(item.value for item in NotificationPriority)
        raise PriorityInvalidError(
            f"Priority must be one of {allowed} (got: {priority!r})"
        ) from exc


def _sum_costs(notifications: Sequence[Notification]) -> Decimal:
    return sum((notification.cost for notification in notifications), Decimal("0"))


__all__ = ["NotificationService"]
