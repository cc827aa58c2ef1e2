"""Payout calculator - base pay plus earned bonuses."""

from decimal import Decimal
from typing import Iterable

from services.calculators.models import DailyStat, Payout, WeeklyTotals


def compose_payout(weekly_totals: WeeklyTotals, daily_stats: Iterable[DailyStat]) -> Payout:
    """Assemble the projected payout for a pay week.

    Base pay and daily bonuses are summed from the daily rows; the weekly
    bonus is the award already recorded on weekly_totals. Nothing is rounded.

    Args:
        weekly_totals: Week sums with the evaluated weekly bonus
        daily_stats: The seven daily rows with evaluated daily bonuses

    Returns:
        Payout whose total is base_pay + daily_bonuses + weekly_bonus
    """
    base_pay = Decimal("0")
    daily_bonuses = Decimal("0")
    for day in daily_stats:
        base_pay += day.base_pay
        daily_bonuses += day.bonus

    return Payout(
        base_pay=base_pay,
        daily_bonuses=daily_bonuses,
        weekly_bonus=weekly_totals.bonus,
    )
