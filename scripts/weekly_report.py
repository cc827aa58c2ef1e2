#!/usr/bin/env python3
"""Print weekly stats and projected payout for a seller or for all sellers.

Usage:
    python3 scripts/weekly_report.py --seller 12 [--date YYYY-MM-DD] [--json]
    python3 scripts/weekly_report.py --seller all --previous
"""

import argparse
import json
import logging
import os
import sys

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from config import Config
from logging_setup import setup_logging
from services.calculators import ALL_SELLERS, ConfigurationUnavailable, WeeklyStats
from services.calculators.week_calc import previous_week, week_range
from services.formatters import DateFormatter
from services.stats_service import StatsService
from time_utils import now_local

logger = logging.getLogger(__name__)


def parse_seller(value: str):
    """argparse type for --seller: a numeric seller ID or ALL_SELLERS."""
    if value == ALL_SELLERS:
        return ALL_SELLERS
    try:
        return int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f'expected a seller ID or "{ALL_SELLERS}", got {value!r}')


def render_report(stats: WeeklyStats) -> str:
    """Plain-text rendering of a WeeklyStats result."""
    lines = [
        f"Week: {stats.week_date_range}",
        "",
        f"{'Day':<10} {'Branded':>8} {'FreeSize':>9} {'Hours':>7} {'Base':>10} {'Bonus':>8}",
    ]
    for day in stats.daily_stats:
        lines.append(
            f"{day.day_name:<10} {day.branded_items_sold:>8} {day.free_size_items_sold:>9} "
            f"{float(day.duration_hours):>7.2f} {DateFormatter.format_money(day.base_pay):>10} "
            f"{DateFormatter.format_money(day.bonus):>8}"
        )

    totals = stats.weekly_totals
    payout = stats.payout
    lines += [
        "",
        f"Total items: {totals.total_items} ({totals.branded_items_sold} branded, "
        f"{totals.free_size_items_sold} free size), {float(totals.duration_hours):.2f} h",
        f"Base pay:      {DateFormatter.format_money(payout.base_pay)}",
        f"Daily bonuses: {DateFormatter.format_money(payout.daily_bonuses)}",
        f"Weekly bonus:  {DateFormatter.format_money(payout.weekly_bonus)}",
        f"Total payout:  {DateFormatter.format_money(payout.total)}",
    ]
    if stats.rejected_log_ids:
        lines.append(f"Excluded logs (end before start): {stats.rejected_log_ids}")
    return "\n".join(lines)


def main():
    parser = argparse.ArgumentParser(description='Weekly seller stats and projected payout')
    parser.add_argument('--seller', required=True, type=parse_seller, help=f'Seller ID or "{ALL_SELLERS}"')
    parser.add_argument('--date', type=str, help='Any date in the week (YYYY-MM-DD), default: today')
    parser.add_argument('--previous', action='store_true', help='Report the week before --date')
    parser.add_argument('--json', action='store_true', help='Print the dashboard JSON shape')
    parser.add_argument('--use-defaults', action='store_true', help='Use built-in targets if none are stored')
    args = parser.parse_args()

    setup_logging(level=logging.WARNING)

    try:
        Config.validate()
    except ValueError as e:
        logger.error(f"Configuration error: {e}")
        return 1

    if args.date:
        try:
            reference = DateFormatter.parse_date(args.date)
        except ValueError:
            print("Error: Invalid date format. Use YYYY-MM-DD")
            return 1
    else:
        reference = now_local()

    if args.previous:
        reference = previous_week(week_range(reference)).start

    try:
        stats = StatsService().get_weekly_stats(args.seller, reference, use_default_targets=args.use_defaults)
    except ConfigurationUnavailable as e:
        logger.error(str(e))
        return 2

    if args.json:
        print(json.dumps(stats.to_dict(), indent=2, ensure_ascii=False))
    else:
        print(render_report(stats))
    return 0


if __name__ == "__main__":
    sys.exit(main())
