"""Payout calculators: pure functions over session logs and bonus targets."""

from .errors import StatsError, InvalidTimeRange, ConfigurationUnavailable
from .models import (
    ALL_SELLERS,
    SessionLog,
    BonusTargets,
    PayWeek,
    DailyStat,
    WeeklyTotals,
    Payout,
    WeeklyStats,
)
from .week_calc import DateRangeFilter, week_range, align_week_start, filter_range
from .daily_aggregator import aggregate_by_day, sum_weekly
from .bonus_calc import BonusCalculator
from .payout_calc import compose_payout
from .stats_calc import compute_weekly_stats

__all__ = [
    'StatsError',
    'InvalidTimeRange',
    'ConfigurationUnavailable',
    'ALL_SELLERS',
    'SessionLog',
    'BonusTargets',
    'PayWeek',
    'DailyStat',
    'WeeklyTotals',
    'Payout',
    'WeeklyStats',
    'DateRangeFilter',
    'week_range',
    'align_week_start',
    'filter_range',
    'aggregate_by_day',
    'sum_weekly',
    'BonusCalculator',
    'compose_payout',
    'compute_weekly_stats',
]
