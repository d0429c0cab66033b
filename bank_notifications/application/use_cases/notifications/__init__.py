"""Public entry point for the notification lifecycle use cases."""

from .service import NotificationService

__all__ = ["NotificationService"]
