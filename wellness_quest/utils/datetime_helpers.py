"""
Calendar-day helpers

Completions and mood entries are keyed by ISO calendar day (YYYY-MM-DD).
Core functions take the day as an explicit argument; these helpers are only
used at the edge to work out what "today" is for the user.
"""

import logging
from datetime import date, datetime
from typing import Optional, Union
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

logger = logging.getLogger(__name__)

# Default timezone if none is configured
DEFAULT_TIMEZONE = "UTC"


def get_timezone(tz_name: Optional[str]) -> ZoneInfo:
    """
    Resolve an IANA timezone name, falling back to UTC

    Args:
        tz_name: IANA timezone (e.g. "Europe/Stockholm")

    Returns:
        ZoneInfo object
    """
    if not tz_name:
        return ZoneInfo(DEFAULT_TIMEZONE)

    try:
        return ZoneInfo(tz_name)
    except (ZoneInfoNotFoundError, ValueError) as e:
        logger.error(f"Invalid timezone '{tz_name}': {e}")
        return ZoneInfo(DEFAULT_TIMEZONE)


def today_iso(tz_name: Optional[str] = None) -> str:
    """Today's date in the given timezone, as YYYY-MM-DD"""
    return datetime.now(get_timezone(tz_name)).date().isoformat()


def to_iso_day(value: Union[str, date, datetime]) -> str:
    """
    Normalize a day given as a string, date or datetime to YYYY-MM-DD

    Raises:
        ValueError: If a string is not a valid ISO date
    """
    if isinstance(value, datetime):
        return value.date().isoformat()
    if isinstance(value, date):
        return value.isoformat()
    return date.fromisoformat(value).isoformat()
