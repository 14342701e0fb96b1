# spurgeon_daily/quotes/calendar.py
from __future__ import annotations

import logging
from datetime import date, datetime, tzinfo
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

log = logging.getLogger("spurgeon_daily")


def reference_zone(name: str) -> tzinfo | None:
    """ZoneInfo for a configured zone name; None means the host's local zone."""
    if not name:
        return None
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError) as e:
        # unknown key, or a malformed one such as an absolute path
        log.warning("quote_timezone_invalid", extra={"zone": name, "err": str(e)})
        return None


def now_in(tz: tzinfo | None) -> datetime:
    if tz is None:
        return datetime.now().astimezone()
    return datetime.now(tz)


def calendar_date(when: date | datetime, tz: tzinfo | None = None) -> date:
    """
    The calendar day `when` falls on in the reference zone.

    Aware datetimes are converted to `tz` first (local zone when tz is None);
    naive datetimes and plain dates are taken as already local.
    """
    if isinstance(when, datetime):
        if when.tzinfo is not None:
            when = when.astimezone(tz)
        return when.date()
    return when


def day_of_year(when: date | datetime, tz: tzinfo | None = None) -> int:
    """1-based ordinal of the day within its year: Jan 1 -> 1, Dec 31 -> 365 or 366."""
    return calendar_date(when, tz).timetuple().tm_yday


def format_complete(day: date) -> str:
    # e.g. "Saturday, October 17, 2026"
    return f"{day:%A}, {day:%B} {day.day}, {day.year}"
