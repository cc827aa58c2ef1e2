"""Bonus calculator - daily and weekly target evaluation."""

import logging
from decimal import Decimal

from services.calculators.models import BonusTargets, DailyStat, WeeklyTotals

logger = logging.getLogger(__name__)


class BonusCalculator:
    """Decides daily and weekly bonus awards.

    A bonus is all or nothing. It is paid when the duration target is met
    and at least one of the item targets (branded or free-size) is met.
    Comparisons are inclusive, so hitting a target exactly qualifies, and a
    target of 0 is always met.
    """

    ZERO = Decimal("0")

    @staticmethod
    def targets_met(
        duration_hours: Decimal,
        branded_items: int,
        free_size_items: int,
        target_duration_hours: Decimal,
        target_branded_items: int,
        target_free_size_items: int
    ) -> bool:
        """Duration is mandatory; either item category triggers."""
        if duration_hours < target_duration_hours:
            return False
        return branded_items >= target_branded_items or free_size_items >= target_free_size_items

    def evaluate_daily(self, daily_stat: DailyStat, targets: BonusTargets) -> Decimal:
        """Bonus for one day.

        Args:
            daily_stat: Aggregated day
            targets: Bonus configuration

        Returns:
            targets.daily_bonus_amount if earned, otherwise 0
        """
        earned = self.targets_met(
            daily_stat.duration_hours,
            daily_stat.branded_items_sold,
            daily_stat.free_size_items_sold,
            targets.daily_target_duration_hours,
            targets.daily_target_branded_items,
            targets.daily_target_free_size_items,
        )
        if earned:
            logger.debug(f"Daily bonus earned for {daily_stat.date.date()}: {targets.daily_bonus_amount}")
            return Decimal(str(targets.daily_bonus_amount))
        return self.ZERO

    def evaluate_weekly(self, weekly_totals: WeeklyTotals, targets: BonusTargets) -> Decimal:
        """Bonus for the whole pay week.

        Args:
            weekly_totals: Sums across the seven days
            targets: Bonus configuration

        Returns:
            targets.weekly_bonus_amount if earned, otherwise 0
        """
        earned = self.targets_met(
            weekly_totals.duration_hours,
            weekly_totals.branded_items_sold,
            weekly_totals.free_size_items_sold,
            targets.weekly_target_duration_hours,
            targets.weekly_target_branded_items,
            targets.weekly_target_free_size_items,
        )
        if earned:
            logger.debug(f"Weekly bonus earned: {targets.weekly_bonus_amount}")
            return Decimal(str(targets.weekly_bonus_amount))
        return self.ZERO
