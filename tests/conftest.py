"""Shared fixtures for the payout engine tests."""

import os
import sys
from contextlib import contextmanager
from datetime import datetime, timedelta
from decimal import Decimal
from unittest.mock import MagicMock

import pytest
import pytz

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from services.calculators.models import BonusTargets, SessionLog


UTC = pytz.utc

# 2025-10-15 is a Wednesday
WEEK_START = UTC.localize(datetime(2025, 10, 15))


def utc(*args) -> datetime:
    return UTC.localize(datetime(*args))


def make_log(
    start: datetime,
    hours: float = 0,
    branded: int = 0,
    free_size: int = 0,
    seller_id: int = 1,
    log_id: int = None,
    end: datetime = None
) -> SessionLog:
    """Build a SessionLog lasting `hours` unless an explicit end is given."""
    return SessionLog(
        id=log_id,
        seller_id=seller_id,
        start_time=start,
        end_time=end if end is not None else start + timedelta(hours=hours),
        branded_items_sold=branded,
        free_size_items_sold=free_size,
    )


@pytest.fixture
def targets() -> BonusTargets:
    """The targets used in the worked payout examples."""
    return BonusTargets(
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


class FakeConnectionManager:
    """Stands in for ConnectionManager; every query hits one MagicMock cursor."""

    def __init__(self):
        self.cursor = MagicMock()
        self.cursor.fetchone.return_value = None
        self.cursor.fetchall.return_value = []
        self.cursor.rowcount = 1
        self.conn = MagicMock()
        self.commit_flags = []

    @contextmanager
    def get_cursor(self, commit: bool = True):
        self.commit_flags.append(commit)
        yield self.cursor

    @contextmanager
    def transaction(self):
        yield self.conn, self.cursor

    def executed_sql(self):
        return [c.args[0] for c in self.cursor.execute.call_args_list]


@pytest.fixture
def fake_db() -> FakeConnectionManager:
    return FakeConnectionManager()
