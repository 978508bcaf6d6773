"""
DateTime Utilities
==================

Date handling for the dashboard:

- now(): timezone-aware current time in the configured LOCAL_TIMEZONE
- parse_capture_timestamp(): parse the device's ``YYYY-MM-DD_HH-MM-SS`` stamps
- format_capture_date() / format_capture_time(): card labels
- format_dashboard_date(): header date such as "Monday, April 28, 2025"
"""
from datetime import datetime, timezone as dt_timezone, tzinfo
from typing import Optional
import logging
import zoneinfo

from ..core.config import get_settings

logger = logging.getLogger(__name__)

CAPTURE_TIMESTAMP_FORMAT = "%Y-%m-%d_%H-%M-%S"


def _get_app_timezone() -> tzinfo:
    """Configured timezone, UTC if it is unknown."""
    tz_str = get_settings().local_timezone
    if tz_str.upper() == "UTC":
        return dt_timezone.utc
    try:
        return zoneinfo.ZoneInfo(tz_str)
    except (zoneinfo.ZoneInfoNotFoundError, ValueError):
        logger.warning("Invalid timezone '%s', falling back to UTC", tz_str)
        return dt_timezone.utc


def utc_now() -> datetime:
    return datetime.now(dt_timezone.utc)


def now() -> datetime:
    """
    Get current datetime with application-configured timezone.

    Returns:
        timezone-aware datetime object
    """
    return datetime.now(_get_app_timezone())


def parse_capture_timestamp(timestamp: Optional[str]) -> Optional[datetime]:
    """
    Parse a capture timestamp (e.g. ``2025-04-28_00-20-50``).

    Returns:
        Naive datetime in device local time, or None if it cannot be parsed
    """
    if not timestamp:
        return None
    try:
        return datetime.strptime(timestamp.strip(), CAPTURE_TIMESTAMP_FORMAT)
    except ValueError:
        return None


def format_capture_date(timestamp: Optional[str]) -> str:
    """MM/DD/YYYY for a capture timestamp, empty string if unparseable."""
    parsed = parse_capture_timestamp(timestamp)
    return parsed.strftime("%m/%d/%Y") if parsed else ""


def format_capture_time(timestamp: Optional[str]) -> str:
    parsed = parse_capture_timestamp(timestamp)
    return parsed.strftime("%H:%M:%S") if parsed else ""


def format_dashboard_date(moment: Optional[datetime] = None) -> str:
    """
    Long header date, e.g. ``Monday, April 28, 2025``.

    Args:
        moment: Date to format (defaults to now() in the configured timezone)
    """
    moment = moment or now()
    return f"{moment.strftime('%A')}, {moment.strftime('%B')} {moment.day}, {moment.year}"
