"""Utility script to create and send one notification from the command line."""

from __future__ import annotations

import argparse

from sqlalchemy.exc import SQLAlchemyError

from bank_notifications.config import get_settings
from bank_notifications.domain.entities import NotificationChannel, NotificationPriority
from bank_notifications.infrastructure.storage import build_notification_service


def parse_args() -> argparse.Namespace:
    """Parse command line arguments for the notification."""

    parser = argparse.ArgumentParser(
        description="Create a notification and run its simulated delivery.",
    )
    parser.add_argument(
        "--recipient",
        required=True,
        help="Email address, 10-digit phone number or device_ token",
    )
    parser.add_argument("--message", required=True, help="Text of the notification")
    parser.add_argument(
        "--channel",
        choices=[channel.value for channel in NotificationChannel],
        default=NotificationChannel.EMAIL.value,
        help="Delivery channel (default: EMAIL)",
    )
    parser.add_argument(
        "--priority",
        choices=[priority.value for priority in NotificationPriority],
        default=NotificationPriority.MEDIUM.value,
        help="Informational priority (default: MEDIUM)",
    )
    parser.add_argument(
        "--create-only",
        action="store_true",
        help="Store the notification as PENDING without sending it.",
    )
    return parser.parse_args()


def main() -> None:
    """Create (and optionally send) a notification using the parsed arguments."""

    args = parse_args()
    service = build_notification_service(get_settings())

    try:
        notification = service.create(
            args.recipient,
            args.message,
            NotificationChannel(args.channel),
            NotificationPriority(args.priority),
        )
        if not args.create_only:
            notification = service.send_by_id(notification.id)
    except ValueError as exc:
        raise SystemExit(f"Could not process the notification: {exc}") from exc
    except SQLAlchemyError as exc:
        raise SystemExit(f"Could not store the notification: {exc}") from exc

    print(
        "Notification processed:\n"
        f"  ID: {notification.id}\n"
        f"  Channel: {notification.channel.value}\n"
        f"  Recipient: {notification.recipient}\n"
        f"  State: {notification.state.value}\n"
        f"  Cost: {notification.cost}\n"
        f"  Sent at: {notification.sent_at.isoformat() if notification.sent_at else '-'}"
    )


if __name__ == "__main__":
    main()
