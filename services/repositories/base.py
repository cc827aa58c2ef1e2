"""Shared query helpers for the repositories."""

import logging
from typing import Dict, List, Optional

from services.database import ConnectionManager

logger = logging.getLogger(__name__)


class BaseRepository:
    """Moves rows in and out of PostgreSQL.

    Pay and bonus arithmetic lives in services.calculators; repositories
    only read and write session logs, bonus targets and users.
    """

    def __init__(self, connection_manager: Optional[ConnectionManager] = None):
        self._conn_manager = connection_manager or ConnectionManager()

    def _fetch_one(self, query: str, params: tuple = None) -> Optional[Dict]:
        """First row of a read query, or None."""
        with self._conn_manager.get_cursor(commit=False) as cursor:
            cursor.execute(query, params)
            return cursor.fetchone()

    def _fetch_all(self, query: str, params: tuple = None) -> List[Dict]:
        with self._conn_manager.get_cursor(commit=False) as cursor:
            cursor.execute(query, params)
            return cursor.fetchall() or []

    def _insert_returning_id(self, query: str, params: tuple) -> Optional[int]:
        """Run an INSERT ... RETURNING id and return the new id."""
        with self._conn_manager.get_cursor(commit=True) as cursor:
            cursor.execute(query, params)
            row = cursor.fetchone()
            return row["id"] if row else None

    def _write(self, query: str, params: tuple) -> int:
        """Run an UPDATE or upsert and return the affected row count."""
        with self._conn_manager.get_cursor(commit=True) as cursor:
            cursor.execute(query, params)
            return cursor.rowcount
