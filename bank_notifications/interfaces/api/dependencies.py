"""FastAPI dependency utilities."""

from fastapi import HTTPException, Request, status

from bank_notifications.application.use_cases.notifications import NotificationService


def get_notification_service(request: Request) -> NotificationService:
    """Return the lifecycle service wired into the running application."""

    service = getattr(request.app.state, "notification_service", None)
    if service is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Notification service is not initialised",
        )
    return service
