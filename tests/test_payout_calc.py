"""Tests for payout composition."""

from decimal import Decimal

from conftest import utc
from services.calculators.models import DailyStat, WeeklyTotals
from services.calculators.payout_calc import compose_payout


def rows(*pairs):
    return [
        DailyStat(date=utc(2025, 10, 15 + i), day_name="", base_pay=Decimal(str(base)), bonus=Decimal(str(bonus)))
        for i, (base, bonus) in enumerate(pairs)
    ]


class TestComposePayout:

    def test_total_is_base_plus_bonuses(self):
        daily = rows((400, 500), (250.5, 0), (0, 0), (120, 500), (0, 0), (0, 0), (80, 0))
        payout = compose_payout(WeeklyTotals(bonus=Decimal("2500")), daily)

        assert payout.base_pay == Decimal("850.5")
        assert payout.daily_bonuses == Decimal("1000")
        assert payout.weekly_bonus == Decimal("2500")
        assert payout.bonuses == Decimal("3500")
        assert payout.total == payout.base_pay + payout.daily_bonuses + payout.weekly_bonus

    def test_empty_week(self):
        payout = compose_payout(WeeklyTotals(), rows(*[(0, 0)] * 7))
        assert payout.total == 0

    def test_no_rounding(self):
        third = Decimal(1) / Decimal(3)
        payout = compose_payout(WeeklyTotals(), [DailyStat(date=utc(2025, 10, 15), day_name="", base_pay=third)])
        assert payout.total == third

    def test_to_dict(self):
        payout = compose_payout(WeeklyTotals(bonus=Decimal("2500")), rows((400, 500)))
        assert payout.to_dict() == {
            "basePay": 400.0,
            "bonuses": 3000.0,
            "dailyBonuses": 500.0,
            "weeklyBonus": 2500.0,
            "total": 3400.0,
        }
