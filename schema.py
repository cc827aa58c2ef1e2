"""PostgreSQL schema for the seller payout engine.

Tables:
- users: sellers and administrators (accounts live in the identity provider)
- session_logs: one row per logged work session
- bonus_targets: the single global pay/bonus configuration row (id = 1)
- schema_metadata: schema version bookkeeping
"""

import logging
from datetime import datetime
from typing import Dict, Optional

from psycopg2 import sql

from services.calculators.models import BonusTargets
from services.database import ConnectionManager

logger = logging.getLogger(__name__)


class StatsSchema:
    """Creates and inspects the tables the repositories read and write."""

    SCHEMA_VERSION = 1
    TABLES = ['schema_metadata', 'users', 'session_logs', 'bonus_targets']

    def __init__(self, connection_manager: Optional[ConnectionManager] = None):
        self._conn_manager = connection_manager or ConnectionManager()

    def init_schema(self, seed_default_targets: bool = True) -> None:
        """Create all tables if they don't exist.

        Args:
            seed_default_targets: Insert the built-in bonus targets row when
                                  the table is empty
        """
        with self._conn_manager.transaction() as (conn, cursor):
            logger.info("Initializing PostgreSQL schema...")

            cursor.execute("""
                CREATE TABLE IF NOT EXISTS schema_metadata (
                    key VARCHAR(255) PRIMARY KEY,
                    value TEXT NOT NULL,
                    updated_at TIMESTAMPTZ DEFAULT now()
                )
            """)

            cursor.execute("""
                CREATE TABLE IF NOT EXISTS users (
                    id SERIAL PRIMARY KEY,
                    auth_id VARCHAR(255) UNIQUE,
                    name VARCHAR(255) NOT NULL,
                    username VARCHAR(255),
                    email VARCHAR(255) NOT NULL UNIQUE,
                    role VARCHAR(16) NOT NULL DEFAULT 'SELLER'
                        CHECK (role IN ('ADMIN', 'SELLER')),
                    phone VARCHAR(32),
                    gcash VARCHAR(32),
                    created_at TIMESTAMPTZ DEFAULT now(),
                    updated_at TIMESTAMPTZ DEFAULT now()
                )
            """)
            logger.info("✓ users table created")

            cursor.execute("""
                CREATE TABLE IF NOT EXISTS session_logs (
                    id SERIAL PRIMARY KEY,
                    seller_id INTEGER NOT NULL REFERENCES users(id),
                    start_time TIMESTAMPTZ NOT NULL,
                    end_time TIMESTAMPTZ NOT NULL,
                    branded_items_sold INTEGER NOT NULL DEFAULT 0,
                    free_size_items_sold INTEGER NOT NULL DEFAULT 0,
                    created_at TIMESTAMPTZ DEFAULT now(),
                    updated_at TIMESTAMPTZ DEFAULT now(),
                    CONSTRAINT check_session_range CHECK (end_time >= start_time),
                    CONSTRAINT check_items_non_negative CHECK (
                        branded_items_sold >= 0 AND free_size_items_sold >= 0
                    )
                )
            """)
            cursor.execute("""
                CREATE INDEX IF NOT EXISTS idx_session_logs_seller_start
                ON session_logs(seller_id, start_time)
            """)
            cursor.execute("""
                CREATE INDEX IF NOT EXISTS idx_session_logs_start
                ON session_logs(start_time)
            """)
            logger.info("✓ session_logs table created")

            cursor.execute("""
                CREATE TABLE IF NOT EXISTS bonus_targets (
                    id INTEGER PRIMARY KEY CHECK (id = 1),
                    base_pay_per_hour DECIMAL(10, 2) NOT NULL CHECK (base_pay_per_hour >= 0),
                    daily_target_branded_items INTEGER NOT NULL CHECK (daily_target_branded_items >= 0),
                    daily_target_free_size_items INTEGER NOT NULL CHECK (daily_target_free_size_items >= 0),
                    daily_target_duration_hours DECIMAL(6, 2) NOT NULL CHECK (daily_target_duration_hours >= 0),
                    daily_bonus_amount DECIMAL(10, 2) NOT NULL CHECK (daily_bonus_amount >= 0),
                    weekly_target_branded_items INTEGER NOT NULL CHECK (weekly_target_branded_items >= 0),
                    weekly_target_free_size_items INTEGER NOT NULL CHECK (weekly_target_free_size_items >= 0),
                    weekly_target_duration_hours DECIMAL(6, 2) NOT NULL CHECK (weekly_target_duration_hours >= 0),
                    weekly_bonus_amount DECIMAL(10, 2) NOT NULL CHECK (weekly_bonus_amount >= 0),
                    updated_at TIMESTAMPTZ DEFAULT now()
                )
            """)
            logger.info("✓ bonus_targets table created")

            if seed_default_targets:
                defaults = BonusTargets.defaults()
                cursor.execute("""
                    INSERT INTO bonus_targets (
                        id, base_pay_per_hour,
                        daily_target_branded_items, daily_target_free_size_items,
                        daily_target_duration_hours, daily_bonus_amount,
                        weekly_target_branded_items, weekly_target_free_size_items,
                        weekly_target_duration_hours, weekly_bonus_amount
                    ) VALUES (1, %s, %s, %s, %s, %s, %s, %s, %s, %s)
                    ON CONFLICT (id) DO NOTHING
                """, (
                    defaults.base_pay_per_hour,
                    defaults.daily_target_branded_items, defaults.daily_target_free_size_items,
                    defaults.daily_target_duration_hours, defaults.daily_bonus_amount,
                    defaults.weekly_target_branded_items, defaults.weekly_target_free_size_items,
                    defaults.weekly_target_duration_hours, defaults.weekly_bonus_amount,
                ))

            cursor.execute("""
                INSERT INTO schema_metadata (key, value, updated_at)
                VALUES ('schema_version', %s, now())
                ON CONFLICT (key) DO UPDATE
                SET value = EXCLUDED.value, updated_at = now()
            """, (str(self.SCHEMA_VERSION),))
            cursor.execute("""
                INSERT INTO schema_metadata (key, value, updated_at)
                VALUES ('initialized_at', %s, now())
                ON CONFLICT (key) DO NOTHING
            """, (datetime.now().isoformat(),))

            conn.commit()
            logger.info(f"✅ PostgreSQL schema initialized (version {self.SCHEMA_VERSION})")

    def verify_schema(self) -> Dict[str, bool]:
        """Map each table name to whether it exists."""
        result = {}
        with self._conn_manager.get_cursor(commit=False) as cursor:
            for table in self.TABLES:
                cursor.execute("""
                    SELECT EXISTS (
                        SELECT FROM information_schema.tables
                        WHERE table_schema = 'public'
                        AND table_name = %s
                    )
                """, (table,))
                result[table] = cursor.fetchone()['exists']
        return result

    def get_table_stats(self) -> Dict[str, int]:
        """Row counts per table."""
        result = {}
        with self._conn_manager.get_cursor(commit=False) as cursor:
            for table in self.TABLES:
                cursor.execute(sql.SQL("SELECT COUNT(*) AS count FROM {}").format(sql.Identifier(table)))
                result[table] = cursor.fetchone()['count']
        return result


if __name__ == "__main__":
    from logging_setup import setup_logging

    setup_logging()
    schema = StatsSchema()
    schema.init_schema()

    for table, exists in schema.verify_schema().items():
        print(f"{'✅' if exists else '❌'} {table}")
    for table, count in schema.get_table_stats().items():
        print(f"  {table}: {count} rows")
