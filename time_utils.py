"""Time utilities for the business timezone.

Every calendar decision in the payout engine (midnight, weekday, which day a
session belongs to) goes through this module so results do not depend on the
timezone of the machine running the code.
"""

from datetime import date, datetime, time, timedelta
from typing import Union
import pytz

from config import Config


BUSINESS_TZ = pytz.timezone(Config.BUSINESS_TIMEZONE)


def get_tz(tz=None):
    """Return the given timezone or the configured business timezone.

    Args:
        tz: pytz timezone, timezone name or None.

    Returns:
        pytz timezone object.
    """
    if tz is None:
        return BUSINESS_TZ
    if isinstance(tz, str):
        return pytz.timezone(tz)
    return tz


def now_local(tz=None) -> datetime:
    """Get current time in the business timezone.

    Returns:
        Current datetime in the business timezone.
    """
    return datetime.now(tz=get_tz(tz))


def to_local(value: Union[datetime, date], tz=None) -> datetime:
    """Convert a date or datetime into an aware datetime in the business timezone.

    Naive datetimes are taken to already be business-local wall time.
    A bare date becomes local midnight of that date.

    Args:
        value: datetime (aware or naive) or date.
        tz: Optional timezone override.

    Returns:
        Aware datetime in the business timezone.
    """
    zone = get_tz(tz)
    if isinstance(value, datetime):
        if value.tzinfo is None:
            return zone.localize(value)
        return value.astimezone(zone)
    if isinstance(value, date):
        return zone.localize(datetime.combine(value, time.min))
    raise ValueError(f"Cannot convert {type(value)} to a local datetime")


def local_midnight(value: Union[datetime, date], tz=None) -> datetime:
    """Get local midnight of the calendar day containing value."""
    zone = get_tz(tz)
    local = to_local(value, zone)
    return zone.localize(datetime.combine(local.date(), time.min))


def add_days(value: datetime, days: int, tz=None) -> datetime:
    """Shift a local midnight by whole calendar days.

    Calendar arithmetic is done on the date so the result is midnight again
    even when a DST transition falls inside the span.
    """
    zone = get_tz(tz)
    local = to_local(value, zone)
    shifted = local.date() + timedelta(days=days)
    return zone.localize(datetime.combine(shifted, local.time()))


def format_dt(dt: datetime) -> str:
    """Format datetime to YYYY/MM/DD HH:MM:SS.

    Args:
        dt: Datetime object to format.

    Returns:
        Formatted string.
    """
    return dt.strftime(Config.DATE_FORMAT)


def parse_dt(dt_str: str, tz=None) -> datetime:
    """Parse a datetime string in YYYY/MM/DD HH:MM:SS or ISO 8601 format.

    Args:
        dt_str: Datetime string to parse.
        tz: Optional timezone override for naive input.

    Returns:
        Aware datetime; naive input is localized to the business timezone.
    """
    try:
        dt = datetime.strptime(dt_str, Config.DATE_FORMAT)
    except ValueError:
        dt = datetime.fromisoformat(dt_str.replace("Z", "+00:00"))
    return get_tz(tz).localize(dt) if dt.tzinfo is None else dt


