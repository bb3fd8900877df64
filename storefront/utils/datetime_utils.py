"""
Centralized DateTime Utilities
==============================

Provides consistent datetime handling across the entire application.
Timestamps are kept in UTC at rest; zone conversion happens only when a
response is rendered or when a rule needs local wall-clock time.

Functions:
- get_zone(): Resolve a zone name to a tzinfo (falls back to UTC)
- ensure_utc(): Normalize a datetime to timezone-aware UTC
- to_zone(): Convert a UTC datetime into another zone for display
- subtract_months(): Calendar-month arithmetic with day clamping
- to_iso(): Convert datetime object to ISO 8601 string
"""
import calendar
import logging
from datetime import datetime, timedelta, timezone as dt_timezone, tzinfo
from typing import Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

logger = logging.getLogger(__name__)


def get_zone(tz_str: Optional[str]) -> tzinfo:
    """
    Resolve a timezone name (e.g. "UTC", "America/Sao_Paulo").
    Returns UTC if the name is empty or unknown.
    """
    if not tz_str or tz_str.upper() == "UTC":
        return dt_timezone.utc

    try:
        return ZoneInfo(tz_str)
    except (ZoneInfoNotFoundError, ValueError):
        logger.warning(f"Invalid timezone '{tz_str}', falling back to UTC")
        return dt_timezone.utc


def ensure_utc(dt: datetime) -> datetime:
    """
    Normalize a datetime to timezone-aware UTC.
    Naive datetimes are assumed to already be in UTC.
    """
    if dt.tzinfo is None:
        return dt.replace(tzinfo=dt_timezone.utc)
    return dt.astimezone(dt_timezone.utc)


def to_zone(dt: datetime, zone: tzinfo) -> datetime:
    """Convert a (UTC) datetime into the given zone."""
    return ensure_utc(dt).astimezone(zone)


def subtract_months(dt: datetime, months: int) -> datetime:
    """
    Move a datetime back by a number of calendar months.

    The day of month is clamped to the length of the target month, so
    2024-03-31 minus one month is 2024-02-29 and 2023-03-31 is 2023-02-28.
    Time of day and tzinfo are preserved.

    Args:
        dt: datetime to shift
        months: number of months to go back (negative moves forward)

    Returns:
        Shifted datetime
    """
    month_index = dt.year * 12 + (dt.month - 1) - months
    year, month = divmod(month_index, 12)
    month += 1
    last_day = calendar.monthrange(year, month)[1]
    return dt.replace(year=year, month=month, day=min(dt.day, last_day))


def to_iso(dt: Optional[datetime]) -> Optional[str]:
    """
    Convert datetime object to ISO 8601 string.
    Naive datetimes are assumed to be UTC.

    Returns:
        ISO 8601 formatted string ('Z' suffix for UTC), or None if dt is None
    """
    if dt is None:
        return None

    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=dt_timezone.utc)

    if dt.utcoffset() == timedelta(0):
        return dt.replace(microsecond=0).isoformat().replace("+00:00", "Z")
    return dt.replace(microsecond=0).isoformat()
