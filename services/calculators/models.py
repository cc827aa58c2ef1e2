"""Value objects shared by the payout calculators.

Everything here except SessionLog and BonusTargets is a derived projection:
recomputed on every request and never written back to the store.
"""

from dataclasses import dataclass, field
from datetime import date, datetime, timedelta
from decimal import Decimal
from typing import Dict, List, Optional, Union

ALL_SELLERS = "all"

SECONDS_PER_HOUR = Decimal("3600")

SellerSelector = Union[int, str]


def _num(value) -> float:
    """JSON-friendly number."""
    return float(value) if value is not None else 0.0


def _to_decimal(value) -> Decimal:
    return Decimal(str(value)) if value is not None else Decimal("0")


def timedelta_hours(delta: timedelta) -> Decimal:
    """Exact fractional hours of a timedelta."""
    seconds = Decimal(delta.days * 86400 + delta.seconds) + Decimal(delta.microseconds) / Decimal(1000000)
    return seconds / SECONDS_PER_HOUR


@dataclass
class SessionLog:
    """A single logged work session."""

    id: Optional[int]
    seller_id: int
    start_time: datetime
    end_time: datetime
    branded_items_sold: int = 0
    free_size_items_sold: int = 0

    @classmethod
    def from_row(cls, row: Dict) -> "SessionLog":
        """Build from a session_logs row (RealDictCursor dict)."""
        return cls(
            id=row["id"],
            seller_id=row["seller_id"],
            start_time=row["start_time"],
            end_time=row["end_time"],
            branded_items_sold=row.get("branded_items_sold") or 0,
            free_size_items_sold=row.get("free_size_items_sold") or 0,
        )

    def to_dict(self) -> Dict:
        return {
            "id": self.id,
            "sellerId": self.seller_id,
            "startTime": self.start_time.isoformat(),
            "endTime": self.end_time.isoformat(),
            "brandedItemsSold": self.branded_items_sold,
            "freeSizeItemsSold": self.free_size_items_sold,
        }


@dataclass(frozen=True)
class BonusTargets:
    """Global bonus and pay configuration.

    A target of 0 means "no minimum" for that condition. Immutable; derive
    changed copies with dataclasses.replace().
    """

    base_pay_per_hour: Decimal
    daily_target_branded_items: int
    daily_target_free_size_items: int
    daily_target_duration_hours: Decimal
    daily_bonus_amount: Decimal
    weekly_target_branded_items: int
    weekly_target_free_size_items: int
    weekly_target_duration_hours: Decimal
    weekly_bonus_amount: Decimal

    @classmethod
    def defaults(cls) -> "BonusTargets":
        """Built-in record, used only when a caller asks for it explicitly."""
        return cls(
            base_pay_per_hour=Decimal("100"),
            daily_target_branded_items=5,
            daily_target_free_size_items=8,
            daily_target_duration_hours=Decimal("4"),
            daily_bonus_amount=Decimal("500"),
            weekly_target_branded_items=25,
            weekly_target_free_size_items=40,
            weekly_target_duration_hours=Decimal("20"),
            weekly_bonus_amount=Decimal("2500"),
        )

    @classmethod
    def from_row(cls, row: Dict) -> "BonusTargets":
        """Build from the bonus_targets row."""
        return cls(
            base_pay_per_hour=_to_decimal(row["base_pay_per_hour"]),
            daily_target_branded_items=int(row["daily_target_branded_items"]),
            daily_target_free_size_items=int(row["daily_target_free_size_items"]),
            daily_target_duration_hours=_to_decimal(row["daily_target_duration_hours"]),
            daily_bonus_amount=_to_decimal(row["daily_bonus_amount"]),
            weekly_target_branded_items=int(row["weekly_target_branded_items"]),
            weekly_target_free_size_items=int(row["weekly_target_free_size_items"]),
            weekly_target_duration_hours=_to_decimal(row["weekly_target_duration_hours"]),
            weekly_bonus_amount=_to_decimal(row["weekly_bonus_amount"]),
        )

    def validate(self) -> None:
        """Check that no threshold or amount is negative.

        Raises:
            ValueError: If any field is negative.
        """
        negative = [name for name, value in vars(self).items() if value < 0]
        if negative:
            raise ValueError(f"Bonus targets must be non-negative: {', '.join(sorted(negative))}")

    def to_dict(self) -> Dict:
        return {
            "basePayPerHour": _num(self.base_pay_per_hour),
            "dailyTargetBrandedItems": self.daily_target_branded_items,
            "dailyTargetFreeSizeItems": self.daily_target_free_size_items,
            "dailyTargetDurationHours": _num(self.daily_target_duration_hours),
            "dailyBonusAmount": _num(self.daily_bonus_amount),
            "weeklyTargetBrandedItems": self.weekly_target_branded_items,
            "weeklyTargetFreeSizeItems": self.weekly_target_free_size_items,
            "weeklyTargetDurationHours": _num(self.weekly_target_duration_hours),
            "weeklyBonusAmount": _num(self.weekly_bonus_amount),
        }


@dataclass(frozen=True)
class PayWeek:
    """Seven-day pay window [start, end), start at Wednesday midnight."""

    start: datetime
    end: datetime

    @property
    def display_end(self) -> date:
        """Last calendar day of the week (inclusive), for labels."""
        return self.end.date() - timedelta(days=1)

    def contains(self, moment: datetime) -> bool:
        return self.start <= moment < self.end


@dataclass
class DailyStat:
    """Totals for one calendar day of a pay week."""

    date: datetime  # Local midnight
    day_name: str
    branded_items_sold: int = 0
    free_size_items_sold: int = 0
    duration_hours: Decimal = Decimal("0")
    base_pay: Decimal = Decimal("0")
    bonus: Decimal = Decimal("0")

    def to_dict(self) -> Dict:
        return {
            "date": self.date.isoformat(),
            "dayName": self.day_name,
            "brandedItemsSold": self.branded_items_sold,
            "freeSizeItemsSold": self.free_size_items_sold,
            "durationHours": _num(self.duration_hours),
            "basePay": _num(self.base_pay),
            "bonus": _num(self.bonus),
        }


@dataclass
class WeeklyTotals:
    """Sums over the seven daily rows plus the weekly bonus award."""

    branded_items_sold: int = 0
    free_size_items_sold: int = 0
    duration_hours: Decimal = Decimal("0")
    bonus: Decimal = Decimal("0")

    @property
    def total_items(self) -> int:
        return self.branded_items_sold + self.free_size_items_sold

    def to_dict(self) -> Dict:
        return {
            "brandedItemsSold": self.branded_items_sold,
            "freeSizeItemsSold": self.free_size_items_sold,
            "totalItems": self.total_items,
            "durationHours": _num(self.duration_hours),
            "bonus": _num(self.bonus),
        }


@dataclass
class Payout:
    """Projected payout for a pay week, full precision."""

    base_pay: Decimal = Decimal("0")
    daily_bonuses: Decimal = Decimal("0")
    weekly_bonus: Decimal = Decimal("0")

    @property
    def bonuses(self) -> Decimal:
        return self.daily_bonuses + self.weekly_bonus

    @property
    def total(self) -> Decimal:
        return self.base_pay + self.bonuses

    def to_dict(self) -> Dict:
        return {
            "basePay": _num(self.base_pay),
            "bonuses": _num(self.bonuses),
            "dailyBonuses": _num(self.daily_bonuses),
            "weeklyBonus": _num(self.weekly_bonus),
            "total": _num(self.total),
        }


@dataclass
class WeeklyStats:
    """Everything a dashboard needs for one seller (or all sellers) and one week."""

    daily_stats: List[DailyStat]
    weekly_totals: WeeklyTotals
    payout: Payout
    week: PayWeek
    week_date_range: str
    rejected_log_ids: List[Optional[int]] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        """True when no session contributed to the week."""
        return all(
            day.branded_items_sold == 0 and day.free_size_items_sold == 0 and day.duration_hours == 0
            for day in self.daily_stats
        )

    def to_dict(self) -> Dict:
        return {
            "dailyStats": [day.to_dict() for day in self.daily_stats],
            "weeklyTotals": self.weekly_totals.to_dict(),
            "payout": self.payout.to_dict(),
            "weekDateRange": self.week_date_range,
            "weekStart": self.week.start.isoformat(),
            "weekEnd": self.week.end.isoformat(),
            "rejectedLogIds": list(self.rejected_log_ids),
        }
