"""Persistence helpers for notification entities."""

from __future__ import annotations

from collections.abc import Sequence
from decimal import Decimal
from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.orm import Session, sessionmaker

from bank_notifications.domain.entities import (
    Notification,
    NotificationChannel,
    NotificationPriority,
    NotificationState,
)
from bank_notifications.infrastructure.models import NotificationModel
from bank_notifications.utils import AppClock


class NotificationRepository:
    """SQLAlchemy-backed :class:`NotificationPersistencePort`.

    A short-lived session is opened for every call, so one repository can be
    shared by concurrent requests; the database provides the isolation.
    """

    def __init__(
        self,
        session_factory: sessionmaker[Session],
        clock: AppClock | None = None,
    ) -> None:
        self.session_factory = session_factory
        self.clock = clock or AppClock()

    def save(self, notification: Notification) -> Notification:
        with self.session_factory() as session:
            model = session.get(NotificationModel, str(notification.id))
            if model is None:
                model = NotificationModel(id=str(notification.id))
                session.add(model)
            self._apply_entity_to_model(model, notification)
            session.commit()
            session.refresh(model)
            return self._to_entity(model)

    def find_by_id(self, notification_id: UUID) -> Notification | None:
        with self.session_factory() as session:
            model = session.get(NotificationModel, str(notification_id))
            if model is None:
                return None
            return self._to_entity(model)

    def list_all(self) -> Sequence[Notification]:
        with self.session_factory() as session:
            query = select(NotificationModel).order_by(NotificationModel.created_at)
            return [self._to_entity(model) for model in session.scalars(query)]

    def filter_by_state(self, state: NotificationState) -> Sequence[Notification]:
        with self.session_factory() as session:
            query = (
                select(NotificationModel)
                .where(NotificationModel.state == NotificationState(state).value)
                .order_by(NotificationModel.created_at)
            )
            return [self._to_entity(model) for model in session.scalars(query)]

    def count_registries(self) -> int:
        with self.session_factory() as session:
            return session.scalar(select(func.count()).select_from(NotificationModel)) or 0

    def clear(self) -> None:
        with self.session_factory() as session:
            session.query(NotificationModel).delete(synchronize_session=False)
            session.commit()

    @staticmethod
    def _apply_entity_to_model(model: NotificationModel, notification: Notification) -> None:
        model.recipient = notification.recipient
        model.message = notification.message
        model.channel = notification.channel.value
        model.priority = notification.priority.value
        model.state = notification.state.value
        # Stored as text so the amount round-trips without float conversion.
        model.cost = str(notification.cost)
        # DateTime columns drop the offset; naive UTC keeps DST folds apart.
        model.created_at = AppClock.to_storage(notification.created_at)
        model.sent_at = AppClock.to_storage(notification.sent_at)

    def _to_entity(self, model: NotificationModel) -> Notification:
        return Notification(
            id=UUID(model.id),
            recipient=model.recipient,
            message=model.message,
            channel=NotificationChannel(model.channel),
            priority=NotificationPriority(model.priority),
            state=NotificationState(model.state),
            cost=Decimal(model.cost),
            created_at=self.clock.from_storage(model.created_at),
            sent_at=self.clock.from_storage(model.sent_at),
        )


__all__ = ["NotificationRepository"]
