"""Lookup table resolving a channel to the strategy that serves it."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from types import MappingProxyType

from bank_notifications.domain.entities import NotificationChannel
from bank_notifications.domain.exceptions import DuplicateChannelError, UnknownChannelError
from bank_notifications.utils import AppClock

from .base import NotificationChannelStrategy
from .email import EmailNotificationStrategy
from .push import PushNotificationStrategy
from .sms import SmsNotificationStrategy


class ChannelStrategyRegistry:
    """Immutable mapping from :class:`NotificationChannel` to its strategy.

    The mapping is fixed at construction. Adding a channel means writing a new
    strategy and passing it in here; neither this class nor the lifecycle
    service changes.
    """

    def __init__(self, strategies: Iterable[NotificationChannelStrategy]) -> None:
        mapping: dict[NotificationChannel, NotificationChannelStrategy] = {}
        for strategy in strategies:
            if strategy.channel in mapping:
                raise DuplicateChannelError(strategy.channel.value)
            mapping[strategy.channel] = strategy
        self._strategies: Mapping[NotificationChannel, NotificationChannelStrategy] = (
            MappingProxyType(mapping)
        )

    @property
    def channels(self) -> frozenset[NotificationChannel]:
        return frozenset(self._strategies)

    def resolve(self, channel: NotificationChannel) -> NotificationChannelStrategy:
        strategy = self._strategies.get(channel)
        if strategy is None:
            label = channel.value if isinstance(channel, NotificationChannel) else channel
            raise UnknownChannelError(label)
        return strategy

    def __contains__(self, channel: object) -> bool:
        return channel in self._strategies

    def __len__(self) -> int:
        return len(self._strategies)


def default_registry(clock: AppClock | None = None) -> ChannelStrategyRegistry:
    """Return a registry holding the built-in email, SMS and push strategies.

    Every strategy stamps ``sent_at`` with ``clock`` (UTC when omitted).
    """

    return ChannelStrategyRegistry(
        [
            EmailNotificationStrategy(clock),
            SmsNotificationStrategy(clock),
            PushNotificationStrategy(clock),
        ]
    )


__all__ = ["ChannelStrategyRegistry", "default_registry"]
