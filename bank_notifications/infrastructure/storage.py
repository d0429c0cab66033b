"""Builds the notification service and its storage adapter from settings."""

from __future__ import annotations

import logging

from bank_notifications.application.use_cases.notifications import NotificationService
from bank_notifications.config import Settings
from bank_notifications.domain.channels import default_registry
from bank_notifications.domain.ports import NotificationPersistencePort
from bank_notifications.infrastructure.database import (
    build_engine,
    build_session_factory,
    initialize_database,
)
from bank_notifications.infrastructure.repositories import (
    InMemoryNotificationRepository,
    NotificationRepository,
)
from bank_notifications.utils import AppClock

logger = logging.getLogger(__name__)


def build_notification_repository(
    settings: Settings,
    clock: AppClock | None = None,
) -> NotificationPersistencePort:
    """Return a fresh repository for the configured ``storage_backend``.

    ``clock`` decides the timezone of datetimes read back from the database;
    it defaults to the one built from ``settings``.
    """

    if settings.storage_backend == "memory":
        logger.info("Storing notifications in process memory")
        return InMemoryNotificationRepository()

    if settings.storage_backend == "database":
        engine = build_engine(settings.database_url)
        initialize_database(engine)
        logger.info("Storing notifications in database %s", engine.url.render_as_string())
        return NotificationRepository(
            build_session_factory(engine),
            clock or AppClock.from_settings(settings),
        )

    msg = f"Unsupported storage backend: {settings.storage_backend}"
    raise RuntimeError(msg)



def build_notification_service(settings: Settings) -> NotificationService:
    """Wire one clock from ``settings`` into the storage adapter, strategies and service."""

    clock = AppClock.from_settings(settings)
    return NotificationService(
        build_notification_repository(settings, clock),
        default_registry(clock),
        clock,
    )


__all__ = ["build_notification_repository", "build_notification_service"]
