"""Clock used to timestamp notifications in the configured timezone."""

from __future__ import annotations

import logging
import re
from datetime import datetime, timedelta, timezone, tzinfo
from typing import TYPE_CHECKING, Final

from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

if TYPE_CHECKING:
    from bank_notifications.config import Settings

logger = logging.getLogger(__name__)

_UTC_OFFSET: Final[re.Pattern[str]] = re.compile(
    r"^(?:UTC|GMT)(?P<sign>[+-])(?P<hours>\d{1,2})(?::?(?P<minutes>\d{2}))?$",
    re.IGNORECASE,
)


def parse_timezone(name: str | None) -> tzinfo:
    """Turn an IANA zone name or a ``UTC±HH:MM`` offset into a ``tzinfo``.

    Blank names mean UTC. Names that resolve to neither are logged and
    replaced by UTC so a typo in ``APP_TIMEZONE`` does not stop the service.
    """

    name = (name or "").strip()
    if not name:
        return timezone.utc

    offset = _UTC_OFFSET.match(name)
    if offset:
        delta = timedelta(
            hours=int(offset.group("hours")),
            minutes=int(offset.group("minutes") or 0),
        )
        return timezone(-delta if offset.group("sign") == "-" else delta)

    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError):
        logger.warning("Unknown timezone %r; notifications will be stamped in UTC", name)
        return timezone.utc


class AppClock:
    """Source of ``created_at`` / ``sent_at`` values for one service instance.

    Timestamps leave the clock aware and expressed in :attr:`tz`. Storage
    adapters whose columns cannot hold an offset go through
    :meth:`to_storage` / :meth:`from_storage`, which use naive UTC so the
    instant survives DST transitions.
    """

    def __init__(self, tz: tzinfo = timezone.utc) -> None:
        self.tz = tz

    @classmethod
    def from_settings(cls, settings: Settings) -> AppClock:
        return cls(parse_timezone(settings.app_timezone))

    def now(self) -> datetime:
        return datetime.now(tz=self.tz)

    @staticmethod
    def to_storage(value: datetime | None) -> datetime | None:
        if value is None:
            return None
        if value.tzinfo is None:
            raise ValueError("Cannot store a naive datetime; the instant is ambiguous")
        return value.astimezone(timezone.utc).replace(tzinfo=None)

    def from_storage(self, value: datetime | None) -> datetime | None:
        if value is None:
            return None
        return value.replace(tzinfo=timezone.utc).astimezone(self.tz)

    def __repr__(self) -> str:
        return f"AppClock(tz={self.tz})"


__all__ = ["AppClock", "parse_timezone"]
