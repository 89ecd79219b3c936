"""DateTime utilities for CareerPilot.

Timezone-aware helpers used by the models and the analytics aggregator.
"""

from datetime import datetime, timezone
from typing import Optional, Union
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError


def utc_now() -> datetime:
    """Get current UTC datetime.

    Returns:
        datetime: Current UTC datetime with timezone info
    """
    return datetime.now(timezone.utc)


def ensure_utc(dt: datetime) -> datetime:
    """Treat naive datetimes as UTC and convert aware ones to UTC.

    MongoDB returns naive datetimes that are implicitly UTC.
    """
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def get_zone(name: Optional[str]) -> ZoneInfo:
    """Resolve a timezone name, falling back to UTC.

    Args:
        name: IANA timezone name such as ``Asia/Kolkata``

    Returns:
        ZoneInfo: Resolved zone
    """
    if not name:
        return ZoneInfo("UTC")
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError):
        return ZoneInfo("UTC")


def local_hour(dt: datetime, zone: Optional[Union[str, ZoneInfo]] = None) -> int:
    """Hour of day (0-23) of ``dt`` in the given zone."""
    tz = zone if isinstance(zone, ZoneInfo) else get_zone(zone)
    return ensure_utc(dt).astimezone(tz).hour


def is_in_future(dt: datetime, reference: Optional[datetime] = None) -> bool:
    """Whether ``dt`` lies strictly after ``reference`` (default: now)."""
    reference = ensure_utc(reference) if reference else utc_now()
    return ensure_utc(dt) > reference
