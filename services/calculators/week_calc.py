"""Pay week boundaries.

A pay week starts at Wednesday midnight in the business timezone and runs
for seven calendar days. The end bound is exclusive and is the one used for
range queries; the inclusive last day is only used for labels.
"""

from datetime import date, datetime
from enum import Enum
from typing import List, Optional, Tuple, Union

from services.calculators.models import PayWeek
from services.formatters import DateFormatter
from time_utils import add_days, get_tz, local_midnight, now_local


# datetime.weekday() numbering (Monday=0), i.e. index 3 in a Sunday=0 scheme
ANCHOR_WEEKDAY = 2
DAYS_PER_WEEK = 7


class DateRangeFilter(Enum):
    """Preset date ranges offered on the dashboards."""

    THIS_WEEK = "This Week"
    LAST_WEEK = "Last Week"
    LAST_MONTH = "Last Month"
    CUSTOM = "Custom"


def align_week_start(start: Union[datetime, date], tz=None) -> datetime:
    """Snap any moment back to the Wednesday midnight that opens its pay week.

    Callers may pass a start that drifted off midnight or off Wednesday;
    the returned value is always an anchor-day midnight.

    Args:
        start: Any datetime or date
        tz: Optional timezone override

    Returns:
        Aware datetime at local midnight on a Wednesday
    """
    zone = get_tz(tz)
    midnight = local_midnight(start, zone)
    offset = (midnight.weekday() - ANCHOR_WEEKDAY) % DAYS_PER_WEEK
    return add_days(midnight, -offset, zone)


def week_range(reference: Union[datetime, date], tz=None) -> PayWeek:
    """Get the pay week containing reference.

    Args:
        reference: Any datetime (aware or naive) or date
        tz: Optional timezone override

    Returns:
        PayWeek with start at Wednesday midnight and end seven days later
    """
    zone = get_tz(tz)
    start = align_week_start(reference, zone)
    return PayWeek(start=start, end=add_days(start, DAYS_PER_WEEK, zone))


def week_days(week: PayWeek, tz=None) -> List[datetime]:
    """The seven local midnights of a pay week, in order."""
    zone = get_tz(tz)
    start = align_week_start(week.start, zone)
    return [add_days(start, offset, zone) for offset in range(DAYS_PER_WEEK)]


def week_label(week: PayWeek) -> str:
    """Human-readable range, e.g. 'Oct 15 - Oct 21, 2025'."""
    return DateFormatter.week_label(week.start, week.display_end)


def previous_week(week: PayWeek, tz=None) -> PayWeek:
    return week_range(add_days(week.start, -DAYS_PER_WEEK, tz), tz)


def next_week(week: PayWeek, tz=None) -> PayWeek:
    return week_range(add_days(week.start, DAYS_PER_WEEK, tz), tz)


def is_current_week(week: PayWeek, now: Optional[datetime] = None, tz=None) -> bool:
    """Check whether week is the pay week containing now."""
    current = week_range(now if now is not None else now_local(tz), tz)
    return current.start == week.start


def filter_range(
    range_filter: DateRangeFilter,
    now: Optional[datetime] = None,
    tz=None
) -> Tuple[datetime, datetime]:
    """Resolve a preset filter to a [start, end) window.

    Weeks follow the pay week; LAST_MONTH is the previous calendar month.

    Args:
        range_filter: Preset to resolve
        now: Reference moment (defaults to the current time)
        tz: Optional timezone override

    Returns:
        Tuple of (start, end_exclusive)

    Raises:
        ValueError: For CUSTOM, which has no preset bounds
    """
    zone = get_tz(tz)
    now = now if now is not None else now_local(zone)

    if range_filter == DateRangeFilter.THIS_WEEK:
        week = week_range(now, zone)
        return week.start, week.end

    if range_filter == DateRangeFilter.LAST_WEEK:
        week = previous_week(week_range(now, zone), zone)
        return week.start, week.end

    if range_filter == DateRangeFilter.LAST_MONTH:
        this_month = local_midnight(now, zone).date().replace(day=1)
        if this_month.month == 1:
            last_month = this_month.replace(year=this_month.year - 1, month=12)
        else:
            last_month = this_month.replace(month=this_month.month - 1)
        return local_midnight(last_month, zone), local_midnight(this_month, zone)

    raise ValueError(f"No preset bounds for filter: {range_filter.value}")
