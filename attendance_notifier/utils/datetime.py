"""Timezone and calendar-date helpers.

Timestamps are stored naive in the application timezone and handed to the
domain as aware values. Notification dates are plain calendar days.
"""

from __future__ import annotations

import re
from datetime import date, datetime, timedelta, timezone, tzinfo
from functools import lru_cache
from typing import Final

from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from attendance_notifier.config import get_settings

_DEFAULT_TIMEZONE: Final[str] = "America/Bogota"
_OFFSET_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"^(?:UTC|GMT)(?P<sign>[+-])(?P<hours>\d{1,2})(?::?(?P<minutes>\d{2}))?$",
    re.IGNORECASE,
)


@lru_cache(maxsize=1)
def get_app_timezone() -> tzinfo:
    """Return the timezone named by ``APP_TIMEZONE``.

    Fixed offsets such as ``UTC-05:00`` are accepted; unknown names fall
    back to ``America/Bogota``.
    """

    tz_name = (get_settings().app_timezone or "").strip() or _DEFAULT_TIMEZONE
    try:
        return ZoneInfo(tz_name)
    except (ZoneInfoNotFoundError, ValueError):
        pass
    match = _OFFSET_PATTERN.match(tz_name)
    if match is None:
        return ZoneInfo(_DEFAULT_TIMEZONE)
    sign = -1 if match.group("sign") == "-" else 1
    offset = timedelta(hours=int(match.group("hours")), minutes=int(match.group("minutes") or 0))
    return timezone(sign * offset)


def now_in_app_timezone() -> datetime:
    return datetime.now(tz=get_app_timezone())


def now_in_app_naive_datetime() -> datetime:
    return now_in_app_timezone().replace(tzinfo=None)


def today_in_app_timezone() -> date:
    """Return the current calendar date as seen in the application timezone."""

    return now_in_app_timezone().date()


def ensure_app_timezone(value: datetime | None) -> datetime | None:
    """Express ``value`` in the application timezone; naive values are assumed local."""

    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=get_app_timezone())
    return value.astimezone(get_app_timezone())


def ensure_app_naive_datetime(value: datetime | None) -> datetime | None:
    """Return ``value`` as a naive wall-clock time in the application timezone."""

    localized = ensure_app_timezone(value)
    return localized.replace(tzinfo=None) if localized is not None else None


def to_calendar_date(value: date | datetime | str) -> date:
    """Reduce ``value`` to a calendar day.

    Aware datetimes are first converted to the application timezone so that
    a reminder generated at 23:30 local time still lands on the local day.
    Strings must be ISO 8601. Raises ``ValueError`` for anything else.
    """

    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone(get_app_timezone())
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        return to_calendar_date(datetime.fromisoformat(value.strip()))
    raise ValueError(f"Cannot interpret {value!r} as a date")
