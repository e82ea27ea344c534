"""Timestamp helpers bound to the configured application timezone.

Report and notification rows store naive ``DATETIME`` values expressed in the
application timezone; domain objects carry aware datetimes. ``APP_TIMEZONE``
accepts IANA names (``Europe/Madrid``) or fixed offsets (``UTC+05:30``,
``GMT-3``). Anything unresolvable means UTC.
"""

from __future__ import annotations

import re
from datetime import datetime, timedelta, timezone, tzinfo
from functools import lru_cache
from typing import Final

from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from forum.config import get_settings

_FIXED_OFFSET: Final[re.Pattern[str]] = re.compile(
    r"^(?:UTC|GMT)(?P<sign>[+-])(?P<hours>\d{1,2})(?::?(?P<minutes>\d{2}))?$",
    re.IGNORECASE,
)


def parse_fixed_offset(name: str) -> timezone | None:
    """Return the ``timezone`` for ``UTC±HH[:MM]`` names, ``None`` otherwise."""

    match = _FIXED_OFFSET.match(name.strip())
    if match is None:
        return None
    hours = int(match.group("hours"))
    minutes = int(match.group("minutes") or 0)
    if hours > 23 or minutes > 59:
        return None
    offset = timedelta(hours=hours, minutes=minutes)
    return timezone(-offset if match.group("sign") == "-" else offset)


def resolve_timezone(name: str | None) -> tzinfo:
    name = (name or "").strip()
    if not name:
        return timezone.utc
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError):
        return parse_fixed_offset(name) or timezone.utc


@lru_cache(maxsize=1)
def get_app_timezone() -> tzinfo:
    return resolve_timezone(get_settings().app_timezone)


def now_in_app_timezone() -> datetime:
    return datetime.now(tz=get_app_timezone())


def now_in_app_naive_datetime() -> datetime:
    """Column default for ``created_at`` style timestamps."""

    return now_in_app_timezone().replace(tzinfo=None)


def ensure_app_timezone(value: datetime | None) -> datetime | None:
    """Read a stored timestamp back as an aware datetime.

    Naive values are assumed to already be in the application timezone.
    """

    if value is None:
        return None
    tz = get_app_timezone()
    if value.tzinfo is None:
        return value.replace(tzinfo=tz)
    return value.astimezone(tz)


def ensure_app_naive_datetime(value: datetime | None) -> datetime | None:
    """Convert ``value`` into the naive form written to the database."""

    localized = ensure_app_timezone(value)
    return localized.replace(tzinfo=None) if localized is not None else None
