"""Bonus targets repository for the global pay configuration."""

import logging
from typing import Optional

from .base import BaseRepository
from config import Config
from services.cache_manager import CacheManager
from services.calculators.models import BonusTargets
from services.database import ConnectionManager

logger = logging.getLogger(__name__)


class BonusTargetsRepository(BaseRepository):
    """Repository for the single bonus_targets row (id = 1).

    The row is read on every stats request and changed rarely, so reads go
    through the cache and every save invalidates it.
    """

    ROW_ID = 1
    CACHE_NAMESPACE = "bonus_targets"
    CACHE_KEY = "current"

    def __init__(
        self,
        connection_manager: Optional[ConnectionManager] = None,
        cache_manager: Optional[CacheManager] = None
    ):
        super().__init__(connection_manager)
        self._cache = cache_manager or CacheManager()

    def fetch_bonus_targets(self, use_defaults: bool = False) -> Optional[BonusTargets]:
        """Get the configured bonus targets.

        Args:
            use_defaults: Return BonusTargets.defaults() when nothing is stored.
                          Off by default so a missing row is visible to callers.

        Returns:
            BonusTargets, or None when not configured and use_defaults is False
        """
        targets = self._cache.get(self.CACHE_NAMESPACE, self.CACHE_KEY)
        if targets is None:
            row = self._fetch_one("SELECT * FROM bonus_targets WHERE id = %s", (self.ROW_ID,))
            if row:
                targets = BonusTargets.from_row(row)
                self._cache.set(self.CACHE_NAMESPACE, self.CACHE_KEY, targets, ttl=Config.TARGETS_CACHE_TTL)

        if targets is None and use_defaults:
            logger.warning("Bonus targets not configured, using built-in defaults")
            return BonusTargets.defaults()
        return targets

    def save(self, targets: BonusTargets) -> None:
        """Replace the bonus targets wholesale.

        Raises:
            ValueError: If any field is negative
        """
        targets.validate()

        query = """
            INSERT INTO bonus_targets (
                id, base_pay_per_hour,
                daily_target_branded_items, daily_target_free_size_items,
                daily_target_duration_hours, daily_bonus_amount,
                weekly_target_branded_items, weekly_target_free_size_items,
                weekly_target_duration_hours, weekly_bonus_amount,
                updated_at
            ) VALUES (%s, %s, %s, %s, %s, %s, %s, %s, %s, %s, now())
            ON CONFLICT (id) DO UPDATE SET
                base_pay_per_hour = EXCLUDED.base_pay_per_hour,
                daily_target_branded_items = EXCLUDED.daily_target_branded_items,
                daily_target_free_size_items = EXCLUDED.daily_target_free_size_items,
                daily_target_duration_hours = EXCLUDED.daily_target_duration_hours,
                daily_bonus_amount = EXCLUDED.daily_bonus_amount,
                weekly_target_branded_items = EXCLUDED.weekly_target_branded_items,
                weekly_target_free_size_items = EXCLUDED.weekly_target_free_size_items,
                weekly_target_duration_hours = EXCLUDED.weekly_target_duration_hours,
                weekly_bonus_amount = EXCLUDED.weekly_bonus_amount,
                updated_at = now()
        """
        self._write(query, (
            self.ROW_ID, targets.base_pay_per_hour,
            targets.daily_target_branded_items, targets.daily_target_free_size_items,
            targets.daily_target_duration_hours, targets.daily_bonus_amount,
            targets.weekly_target_branded_items, targets.weekly_target_free_size_items,
            targets.weekly_target_duration_hours, targets.weekly_bonus_amount,
        ))
        self._cache.invalidate_namespace(self.CACHE_NAMESPACE)
        logger.info("Bonus targets updated")
