"""Endpoints exposing the notification lifecycle."""

from __future__ import annotations

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Query, status

from bank_notifications.application.use_cases.notifications import NotificationService
from bank_notifications.domain.entities import Notification, NotificationState
from bank_notifications.domain.exceptions import (
    ChannelConfigurationError,
    NotificationNotFoundError,
    NotificationValidationError,
)
from bank_notifications.interfaces.api.dependencies import get_notification_service
from bank_notifications.interfaces.api.schemas import (
    NotificationCostSummary,
    NotificationCreate,
    NotificationRead,
)

router = APIRouter(prefix="/notifications", tags=["notifications"])
logger = logging.getLogger(__name__)


def _to_read_model(notification: Notification) -> NotificationRead:
    return NotificationRead.model_validate(notification)


def _configuration_error(exc: ChannelConfigurationError) -> HTTPException:
    logger.error("Channel configuration error: %s", exc)
    return HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(exc))


@router.post("/", response_model=NotificationRead, status_code=status.HTTP_201_CREATED)
def create_notification(
    notification_in: NotificationCreate,
    service: NotificationService = Depends(get_notification_service),
) -> NotificationRead:
    """Register a PENDING notification priced for its channel."""

    try:
        notification = service.create(
            notification_in.recipient,
            notification_in.message,
            notification_in.channel,
            notification_in.priority,
        )
    except NotificationValidationError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    except ChannelConfigurationError as exc:
        raise _configuration_error(exc) from exc
    return _to_read_model(notification)


@router.get("/", response_model=list[NotificationRead])
def list_notifications(
    state: NotificationState | None = Query(default=None),
    service: NotificationService = Depends(get_notification_service),
) -> list[NotificationRead]:
    """Return every notification, or only those in ``state`` when given."""

    if state is None:
        notifications = service.list_all()
    else:
        notifications = service.list_by_state(state)
    return [_to_read_model(notification) for notification in notifications]


@router.get("/total-cost", response_model=NotificationCostSummary)
def get_total_cost(
    service: NotificationService = Depends(get_notification_service),
) -> NotificationCostSummary:
    return NotificationCostSummary(total_cost=service.total_cost(), count=service.count())


@router.get("/{notification_id}", response_model=NotificationRead)
def get_notification(
    notification_id: UUID,
    service: NotificationService = Depends(get_notification_service),
) -> NotificationRead:
    try:
        notification = service.get_by_id(notification_id)
    except NotificationNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    return _to_read_model(notification)


@router.post("/{notification_id}/send", response_model=NotificationRead)
def send_notification(
    notification_id: UUID,
    service: NotificationService = Depends(get_notification_service),
) -> NotificationRead:
    """Deliver a stored notification through its channel."""

    try:
        notification = service.send_by_id(notification_id)
    except NotificationNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    except NotificationValidationError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    except ChannelConfigurationError as exc:
        raise _configuration_error(exc) from exc
    return _to_read_model(notification)
