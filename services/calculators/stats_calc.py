"""Weekly stats calculator - the single entry point for dashboard numbers.

Given the logs, the bonus targets and a reference date, produces the daily
rows, the weekly totals and the projected payout for the pay week that
contains the reference date. The same inputs always give the same output:
nothing here reads the clock or the database.
"""

import logging
from datetime import date, datetime
from typing import Iterable, List, Optional, Union

from services.calculators.bonus_calc import BonusCalculator
from services.calculators.daily_aggregator import aggregate_by_day, partition_logs, sum_weekly
from services.calculators.errors import ConfigurationUnavailable
from services.calculators.models import (
    ALL_SELLERS,
    BonusTargets,
    SellerSelector,
    SessionLog,
    WeeklyStats,
)
from services.calculators.payout_calc import compose_payout
from services.calculators.week_calc import week_label, week_range
from time_utils import get_tz, to_local

logger = logging.getLogger(__name__)

_bonus_calculator = BonusCalculator()


def matches_seller(log: SessionLog, seller_selector: SellerSelector) -> bool:
    """Check a log against a seller id or ALL_SELLERS.

    Ids are compared as strings so '12' from a query string matches 12.
    """
    if seller_selector == ALL_SELLERS:
        return True
    return str(log.seller_id) == str(seller_selector)


def compute_weekly_stats(
    seller_selector: SellerSelector,
    reference_date: Union[datetime, date],
    logs: Iterable[SessionLog],
    targets: Optional[BonusTargets],
    tz=None
) -> WeeklyStats:
    """Compute the full weekly statistics for a seller or for all sellers.

    Logs may be a superset of the week; they are re-filtered by seller and
    by start_time within [week.start, week.end). Logs that end before they
    start are left out of every sum and reported in rejected_log_ids.

    Args:
        seller_selector: Seller id or ALL_SELLERS
        reference_date: Any moment inside the wanted pay week
        logs: Candidate session logs
        targets: Bonus configuration (required)
        tz: Optional timezone override

    Returns:
        WeeklyStats; an empty week gives an all-zero result

    Raises:
        ConfigurationUnavailable: If targets is None or has a negative field
    """
    if targets is None:
        raise ConfigurationUnavailable()
    try:
        targets.validate()
    except ValueError as e:
        raise ConfigurationUnavailable(str(e)) from e

    zone = get_tz(tz)
    week = week_range(reference_date, zone)

    in_week: List[SessionLog] = [
        log for log in logs
        if matches_seller(log, seller_selector) and week.contains(to_local(log.start_time, zone))
    ]
    valid_logs, rejected_logs = partition_logs(in_week, zone)
    rejected_ids = [log.id for log in rejected_logs]
    if rejected_ids:
        logger.warning(f"Excluded {len(rejected_ids)} session log(s) ending before start: {rejected_ids}")

    daily_stats = aggregate_by_day(valid_logs, week.start, targets.base_pay_per_hour, zone)
    for day in daily_stats:
        day.bonus = _bonus_calculator.evaluate_daily(day, targets)

    weekly_totals = sum_weekly(daily_stats)
    weekly_totals.bonus = _bonus_calculator.evaluate_weekly(weekly_totals, targets)

    payout = compose_payout(weekly_totals, daily_stats)

    logger.debug(
        f"Weekly stats for seller={seller_selector} week={week.start.date()}: "
        f"{len(valid_logs)} logs, payout total={payout.total}"
    )

    return WeeklyStats(
        daily_stats=daily_stats,
        weekly_totals=weekly_totals,
        payout=payout,
        week=week,
        week_date_range=week_label(week),
        rejected_log_ids=rejected_ids,
    )
