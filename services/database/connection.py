"""PostgreSQL connections for session logs, bonus targets and users.

One connection per unit of work: opened on entry, committed or rolled back,
and closed on exit. Rows come back as dicts (RealDictCursor) and TIMESTAMPTZ
values come back in the business timezone.
"""

import logging
from contextlib import contextmanager
from typing import Generator, Optional

import psycopg2
from psycopg2 import extras

from config import Config

logger = logging.getLogger(__name__)


def get_connection(**params):
    """Open a connection whose session timezone is the business timezone.

    Args:
        **params: host, port, database, user, password.
                 Falls back to Config.get_db_params() when empty.

    Returns:
        psycopg2 connection with RealDictCursor factory
    """
    params = params or Config.get_db_params()
    return psycopg2.connect(
        **params,
        cursor_factory=extras.RealDictCursor,
        options=f"-c timezone={Config.BUSINESS_TIMEZONE}"
    )


class ConnectionManager:
    """Hands out cursors and transactions to the repositories and StatsSchema."""

    def __init__(self, db_params: Optional[dict] = None):
        self.db_params = db_params or Config.get_db_params()

    @contextmanager
    def _session(self) -> Generator:
        conn = get_connection(**self.db_params)
        cursor = conn.cursor()
        try:
            yield conn, cursor
        except Exception as e:
            logger.error(f"Rolling back after database error: {e}")
            conn.rollback()
            raise
        finally:
            cursor.close()
            conn.close()

    @contextmanager
    def get_cursor(self, commit: bool = True) -> Generator:
        """Yield a cursor for one statement or a few related reads.

        Args:
            commit: Commit when the block exits cleanly (False for reads)
        """
        with self._session() as (conn, cursor):
            yield cursor
            if commit:
                conn.commit()

    @contextmanager
    def transaction(self) -> Generator:
        """Yield (connection, cursor); the caller commits, errors roll back."""
        with self._session() as (conn, cursor):
            yield conn, cursor
