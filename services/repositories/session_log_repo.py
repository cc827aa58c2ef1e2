"""Session log repository for work session data access."""

import logging
from datetime import datetime
from typing import Optional, List

from .base import BaseRepository
from services.calculators.errors import InvalidTimeRange
from services.calculators.models import ALL_SELLERS, SellerSelector, SessionLog

logger = logging.getLogger(__name__)


class SessionLogRepository(BaseRepository):
    """Repository for session log operations.

    Logs are created by sellers and may be edited by administrators.
    The owning seller never changes and logs are never deleted.
    """

    @staticmethod
    def _check_range(start_time: datetime, end_time: datetime, log_id: Optional[int] = None) -> None:
        if end_time < start_time:
            raise InvalidTimeRange(start_time, end_time, log_id=log_id)

    @staticmethod
    def _check_counts(branded_items_sold: int, free_size_items_sold: int) -> None:
        if branded_items_sold < 0 or free_size_items_sold < 0:
            raise ValueError("Item counts must be non-negative")

    def create(
        self,
        seller_id: int,
        start_time: datetime,
        end_time: datetime,
        branded_items_sold: int = 0,
        free_size_items_sold: int = 0
    ) -> int:
        """Create new session log.

        Args:
            seller_id: Owning seller's user ID
            start_time: Session start (timezone-aware)
            end_time: Session end (timezone-aware)
            branded_items_sold: Branded items sold during the session
            free_size_items_sold: Free-size items sold during the session

        Returns:
            New session log ID

        Raises:
            InvalidTimeRange: If end_time is before start_time
            ValueError: If an item count is negative
        """
        self._check_range(start_time, end_time)
        self._check_counts(branded_items_sold, free_size_items_sold)

        query = """
            INSERT INTO session_logs (
                seller_id, start_time, end_time,
                branded_items_sold, free_size_items_sold
            ) VALUES (%s, %s, %s, %s, %s)
            RETURNING id
        """
        log_id = self._insert_returning_id(query, (
            seller_id, start_time, end_time,
            branded_items_sold, free_size_items_sold
        ))
        logger.info(f"Created session log {log_id} for seller {seller_id}")
        return log_id

    def get_by_id(self, log_id: int) -> Optional[SessionLog]:
        """Get session log by ID.

        Args:
            log_id: Session log ID

        Returns:
            SessionLog or None
        """
        row = self._fetch_one("SELECT * FROM session_logs WHERE id = %s", (log_id,))
        return SessionLog.from_row(row) if row else None

    def update(
        self,
        log_id: int,
        start_time: datetime,
        end_time: datetime,
        branded_items_sold: int,
        free_size_items_sold: int
    ) -> bool:
        """Administrator edit of a session's times and counts.

        seller_id is not updatable.

        Returns:
            True if a row was updated

        Raises:
            InvalidTimeRange: If end_time is before start_time
            ValueError: If an item count is negative
        """
        self._check_range(start_time, end_time, log_id=log_id)
        self._check_counts(branded_items_sold, free_size_items_sold)

        query = """
            UPDATE session_logs
            SET start_time = %s,
                end_time = %s,
                branded_items_sold = %s,
                free_size_items_sold = %s,
                updated_at = now()
            WHERE id = %s
        """
        affected = self._write(query, (
            start_time, end_time,
            branded_items_sold, free_size_items_sold,
            log_id
        ))

        if affected > 0:
            logger.info(f"Updated session log {log_id}")
            return True
        logger.warning(f"Session log {log_id} not found for update")
        return False

    def fetch_logs(
        self,
        seller_selector: SellerSelector,
        window_start: datetime,
        window_end: datetime
    ) -> List[SessionLog]:
        """Get logs whose start_time falls in [window_start, window_end).

        Args:
            seller_selector: Seller ID or ALL_SELLERS
            window_start: Inclusive lower bound
            window_end: Exclusive upper bound

        Returns:
            Session logs ordered by start_time
        """
        if seller_selector == ALL_SELLERS:
            query = """
                SELECT * FROM session_logs
                WHERE start_time >= %s AND start_time < %s
                ORDER BY start_time ASC, id ASC
            """
            params = (window_start, window_end)
        else:
            query = """
                SELECT * FROM session_logs
                WHERE seller_id = %s AND start_time >= %s AND start_time < %s
                ORDER BY start_time ASC, id ASC
            """
            params = (int(seller_selector), window_start, window_end)

        rows = self._fetch_all(query, params)
        return [SessionLog.from_row(row) for row in rows]

    def get_by_seller(self, seller_id: int, limit: int = 10, offset: int = 0) -> List[SessionLog]:
        """Get a seller's most recent logs, newest first."""
        query = """
            SELECT * FROM session_logs
            WHERE seller_id = %s
            ORDER BY start_time DESC, id DESC
            LIMIT %s OFFSET %s
        """
        rows = self._fetch_all(query, (seller_id, limit, offset))
        return [SessionLog.from_row(row) for row in rows]
