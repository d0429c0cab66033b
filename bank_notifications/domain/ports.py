"""Outbound ports the notification domain depends on."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol
from uuid import UUID

from bank_notifications.domain.entities import Notification, NotificationState


class NotificationPersistencePort(Protocol):
    """Key-value storage for notifications, keyed by ``Notification.id``.

    Implementations shared across threads must make ``save`` atomic with
    respect to ``find_by_id`` on the same id and return consistent snapshots
    from the aggregate reads.
    """

    def save(self, notification: Notification) -> Notification:
        """Insert or replace ``notification`` and return the stored value."""
        ...

    def find_by_id(self, notification_id: UUID) -> Notification | None:
        ...

    def list_all(self) -> Sequence[Notification]:
        ...

    def filter_by_state(self, state: NotificationState) -> Sequence[Notification]:
        ...

    def count_registries(self) -> int:
        ...

    def clear(self) -> None:
        """Remove every stored notification."""
        ...


__all__ = ["NotificationPersistencePort"]
