"""Stats service - wires the repositories to the weekly stats calculator."""

import logging
from datetime import date, datetime
from typing import Optional, Union

import psycopg2

from services.calculators import ConfigurationUnavailable, WeeklyStats, compute_weekly_stats, week_range
from services.calculators.models import SellerSelector
from services.repositories import BonusTargetsRepository, SessionLogRepository
from time_utils import now_local

logger = logging.getLogger(__name__)


class StatsService:
    """Dashboard-facing service for weekly seller statistics.

    The calculators are pure; this class is where the clock and the
    database come in. A week with no sessions returns an all-zero
    WeeklyStats. A database failure while loading logs propagates as
    psycopg2.Error so callers can tell "no data" from "failed to load".
    """

    def __init__(
        self,
        session_logs: Optional[SessionLogRepository] = None,
        bonus_targets: Optional[BonusTargetsRepository] = None
    ):
        self.session_logs = session_logs or SessionLogRepository()
        self.bonus_targets = bonus_targets or BonusTargetsRepository()

    def load_targets(self, use_default_targets: bool = False):
        """Fetch bonus targets or fail loudly.

        Raises:
            ConfigurationUnavailable: If the row is missing or cannot be read
        """
        try:
            targets = self.bonus_targets.fetch_bonus_targets(use_defaults=use_default_targets)
        except psycopg2.Error as e:
            logger.error(f"Failed to load bonus targets: {e}")
            raise ConfigurationUnavailable(f"Failed to load bonus targets: {e}") from e

        if targets is None:
            raise ConfigurationUnavailable()
        return targets

    def get_weekly_stats(
        self,
        seller_selector: SellerSelector,
        reference_date: Optional[Union[datetime, date]] = None,
        use_default_targets: bool = False
    ) -> WeeklyStats:
        """Compute weekly stats for a seller (or ALL_SELLERS).

        Args:
            seller_selector: Seller ID or ALL_SELLERS
            reference_date: Any moment in the wanted week (defaults to now)
            use_default_targets: Fall back to built-in targets if none are stored

        Returns:
            WeeklyStats for the pay week containing reference_date

        Raises:
            ConfigurationUnavailable: If bonus targets are not available
        """
        reference = reference_date if reference_date is not None else now_local()
        targets = self.load_targets(use_default_targets)

        week = week_range(reference)
        logs = self.session_logs.fetch_logs(seller_selector, week.start, week.end)
        logger.info(f"Loaded {len(logs)} session logs for seller={seller_selector} week={week.start.date()}")

        return compute_weekly_stats(seller_selector, reference, logs, targets)
