"""Channel strategies and the registry that resolves them."""

from .base import NotificationChannelStrategy
from .email import EMAIL_COST, EmailNotificationStrategy
from .push import DEVICE_PREFIX, PUSH_COST, PushNotificationStrategy
from .registry import ChannelStrategyRegistry, default_registry
from .sms import SMS_COST, SmsNotificationStrategy

__all__ = [
    "ChannelStrategyRegistry",
    "DEVICE_PREFIX",
    "EMAIL_COST",
    "EmailNotificationStrategy",
    "NotificationChannelStrategy",
    "PUSH_COST",
    "PushNotificationStrategy",
    "SMS_COST",
    "SmsNotificationStrategy",
    "default_registry",
]
