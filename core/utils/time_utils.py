"""
Time conversion and formatting utilities

Docker reports container creation as epoch seconds and service creation as
an ISO 8601 string; both are normalised to timezone-aware UTC datetimes here.
"""
import math
from datetime import datetime, timedelta, timezone
from typing import Optional, Union

from dateutil.parser import isoparse

SECONDS_PER_DAY = 24 * 60 * 60


def utc_now() -> datetime:
    """Current instant as an aware UTC datetime"""
    return datetime.now(timezone.utc)


def to_utc_datetime(value: Union[int, float, str, datetime]) -> datetime:
    """
    Normalise a creation timestamp to an aware UTC datetime

    Args:
        value: Epoch seconds, ISO 8601 string, or datetime (naive is read as UTC)

    Returns:
        Aware datetime in UTC

    Raises:
        ValueError: If the value cannot be interpreted
    """
    if isinstance(value, bool):
        raise ValueError(f"Invalid timestamp: {value!r}")

    if isinstance(value, datetime):
        dt = value
    elif isinstance(value, (int, float)):
        dt = datetime.fromtimestamp(value, tz=timezone.utc)
    elif isinstance(value, str):
        dt = isoparse(value.strip())
    else:
        raise ValueError(f"Invalid timestamp: {value!r}")

    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def days_to_timedelta(days: float) -> timedelta:
    """
    Convert an age threshold in days to a timedelta

    Raises:
        ValueError: If days is negative or not representable as a timedelta
    """
    if not math.isfinite(days):
        raise ValueError(f"Age threshold must be finite, got: {days}")
    if days < 0:
        raise ValueError(f"Age threshold must be non-negative, got: {days}")
    try:
        return timedelta(seconds=days * SECONDS_PER_DAY)
    except OverflowError as e:
        raise ValueError(f"Age threshold too large: {days}") from e


def format_age(created_at: datetime, now: Optional[datetime] = None) -> str:
    """
    Format the age of a resource: day-HH:MM:SS

    Args:
        created_at: Creation instant (aware)
        now: Reference instant (defaults to now)

    Returns:
        Formatted string like "0-00:39:20" or "2-14:30:45"
    """
    if now is None:
        now = utc_now()

    delta = now - created_at
    if delta < timedelta(0):
        delta = timedelta(0)

    days = delta.days
    seconds = delta.seconds

    hours = seconds // 3600
    minutes = (seconds % 3600) // 60
    secs = seconds % 60

    return f"{days}-{hours:02d}:{minutes:02d}:{secs:02d}"
