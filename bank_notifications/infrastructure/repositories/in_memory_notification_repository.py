"""Process-local storage for notification entities."""

from __future__ import annotations

import threading
from collections.abc import Sequence
from uuid import UUID

from bank_notifications.domain.entities import Notification, NotificationState


class InMemoryNotificationRepository:
    """Dictionary-backed :class:`NotificationPersistencePort`.

    Each instance owns its own storage; nothing is shared between instances.
    All operations hold one re-entrant lock, and list results are copies taken
    under that lock.
    """

    def __init__(self) -> None:
        self._storage: dict[UUID, Notification] = {}
        self._lock = threading.RLock()

    def save(self, notification: Notification) -> Notification:
        with self._lock:
            self._storage[notification.id] = notification
        return notification

    def find_by_id(self, notification_id: UUID) -> Notification | None:
        with self._lock:
            return self._storage.get(notification_id)

    def list_all(self) -> Sequence[Notification]:
        with self._lock:
            return list(self._storage.values())

    def filter_by_state(self, state: NotificationState) -> Sequence[Notification]:
        with self._lock:
            return [
                notification
                for notification in self._storage.values()
                if notification.state == state
            ]

    def count_registries(self) -> int:
        with self._lock:
            return len(self._storage)

    def clear(self) -> None:
        with self._lock:
            self._storage.clear()


__all__ = ["InMemoryNotificationRepository"]
