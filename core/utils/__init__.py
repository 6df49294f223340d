"""
Utility modules for docker-purger
"""
from .logger import setup_logger, log_event
from .time_utils import days_to_timedelta, format_age, to_utc_datetime, utc_now
from .validators import validate_pattern, validate_schedule, validate_timezone

__all__ = [
    "setup_logger",
    "log_event",
    "days_to_timedelta",
    "format_age",
    "to_utc_datetime",
    "utc_now",
    "validate_pattern",
    "validate_schedule",
    "validate_timezone",
]
