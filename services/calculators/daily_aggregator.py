"""Bucket session logs into the seven days of a pay week."""

import logging
from decimal import Decimal
from typing import Iterable, List, Optional, Tuple, Union
from datetime import date, datetime

from services.calculators.models import DailyStat, SessionLog, WeeklyTotals, timedelta_hours
from services.calculators.week_calc import week_days, week_range
from services.formatters import DateFormatter
from time_utils import get_tz, to_local

logger = logging.getLogger(__name__)


def session_hours(log: SessionLog, tz=None) -> Decimal:
    """Full start-to-end duration in hours.

    Both ends are normalized first so naive and aware timestamps mix safely.
    """
    zone = get_tz(tz)
    return timedelta_hours(to_local(log.end_time, zone) - to_local(log.start_time, zone))


def partition_logs(logs: Iterable[SessionLog], tz=None) -> Tuple[List[SessionLog], List[SessionLog]]:
    """Split logs into (valid, rejected) by end_time >= start_time."""
    zone = get_tz(tz)
    valid, rejected = [], []
    for log in logs:
        if to_local(log.end_time, zone) >= to_local(log.start_time, zone):
            valid.append(log)
        else:
            rejected.append(log)
    return valid, rejected


def aggregate_by_day(
    logs: Iterable[SessionLog],
    week_start: Union[datetime, date],
    base_pay_per_hour: Optional[Decimal] = None,
    tz=None
) -> List[DailyStat]:
    """Sum items and hours per calendar day of the pay week.

    A session counts entirely toward the day its start_time falls on, even
    when it runs past midnight. Days without sessions still get a zero row.

    Args:
        logs: Session logs for one seller (or all sellers) in the week
        week_start: Start of the pay week; re-aligned to Wednesday midnight
        base_pay_per_hour: Hourly rate for base pay (0 if omitted)
        tz: Optional timezone override

    Returns:
        Exactly 7 DailyStat rows, Wednesday first. Bonus is left at 0.
    """
    zone = get_tz(tz)
    rate = Decimal(str(base_pay_per_hour)) if base_pay_per_hour is not None else Decimal("0")

    days = week_days(week_range(week_start, zone), zone)
    position_by_date = {day.date(): position for position, day in enumerate(days)}
    stats = [DailyStat(date=day, day_name=DateFormatter.day_name(day)) for day in days]

    for log in logs:
        local_start = to_local(log.start_time, zone)
        position = position_by_date.get(local_start.date())
        if position is None:
            logger.debug(f"Session log {log.id} starts outside the week of {days[0].date()}, skipped")
            continue

        hours = session_hours(log, zone)
        if hours < 0:
            logger.warning(f"Session log {log.id} ends before it starts, skipped")
            continue

        day = stats[position]
        day.branded_items_sold += log.branded_items_sold
        day.free_size_items_sold += log.free_size_items_sold
        day.duration_hours += hours

    for day in stats:
        day.base_pay = day.duration_hours * rate

    return stats


def sum_weekly(daily_stats: Iterable[DailyStat]) -> WeeklyTotals:
    """Add up the daily rows. The weekly bonus is filled in by the caller."""
    totals = WeeklyTotals()
    for day in daily_stats:
        totals.branded_items_sold += day.branded_items_sold
        totals.free_size_items_sold += day.free_size_items_sold
        totals.duration_hours += day.duration_hours
    return totals
