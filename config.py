"""Configuration module for the seller payout engine."""

import os
from dotenv import load_dotenv
import pytz

load_dotenv()


class Config:
    """Application configuration loaded from environment variables."""

    # PostgreSQL Database
    POSTGRES_HOST: str = os.getenv("DB_HOST", "localhost")
    POSTGRES_PORT: int = int(os.getenv("DB_PORT", "5432"))
    POSTGRES_DB: str = os.getenv("DB_NAME", "seller_stats")
    POSTGRES_USER: str = os.getenv("DB_USER", "seller_stats")
    POSTGRES_PASSWORD: str = os.getenv("DB_PASSWORD", "")

    # Calendar used for midnight, weekday and day bucketing
    BUSINESS_TIMEZONE: str = os.getenv("BUSINESS_TIMEZONE", "UTC")

    # Display
    CURRENCY_SYMBOL: str = os.getenv("CURRENCY_SYMBOL", "₱")
    DATE_FORMAT: str = "%Y/%m/%d %H:%M:%S"

    # Bonus targets are read on every stats request
    TARGETS_CACHE_TTL: int = int(os.getenv("TARGETS_CACHE_TTL", "300"))

    @classmethod
    def validate(cls) -> None:
        """Validate required configuration parameters.

        Raises:
            ValueError: If a required parameter is missing or the timezone is unknown.
        """
        required = {
            "DB_NAME": cls.POSTGRES_DB,
            "DB_USER": cls.POSTGRES_USER,
        }

        missing = [name for name, value in required.items() if not value]

        if missing:
            raise ValueError(f"Missing required environment variables: {', '.join(missing)}")

        if cls.BUSINESS_TIMEZONE not in pytz.all_timezones_set:
            raise ValueError(f"Unknown BUSINESS_TIMEZONE: {cls.BUSINESS_TIMEZONE}")

    @classmethod
    def get_db_params(cls) -> dict:
        """Get PostgreSQL connection parameters.

        Returns:
            Dict with connection parameters for psycopg2
        """
        return {
            "host": cls.POSTGRES_HOST,
            "port": cls.POSTGRES_PORT,
            "database": cls.POSTGRES_DB,
            "user": cls.POSTGRES_USER,
            "password": cls.POSTGRES_PASSWORD,
        }
