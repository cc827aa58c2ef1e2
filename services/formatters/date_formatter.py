"""Date formatter - single source of truth for display formats.

Formats:
- WEEK LABEL: "Oct 15 - Oct 21, 2025" (pay week headers)
- FRIENDLY: "Oct 15, 2025, 9:05 AM" (session log tables)
- DB: YYYY-MM-DD (date arguments and query params)
"""

from datetime import datetime, date
from decimal import Decimal, ROUND_HALF_UP
from typing import Optional, Union

from config import Config


class DateFormatter:
    """Single source of truth for date and money display."""

    DB_DATE_FORMAT = "%Y-%m-%d"

    @staticmethod
    def short_date(value: Union[datetime, date]) -> str:
        """Month abbreviation and unpadded day, e.g. 'Oct 5'."""
        return f"{value.strftime('%b')} {value.day}"

    @staticmethod
    def week_label(start: Union[datetime, date], display_end: Union[datetime, date]) -> str:
        """Label a pay week by its first and last calendar day.

        Args:
            start: First day of the week
            display_end: Last day of the week (inclusive)

        Returns:
            String like 'Oct 15 - Oct 21, 2025'

        Examples:
            >>> DateFormatter.week_label(date(2025, 12, 31), date(2026, 1, 6))
            'Dec 31 - Jan 6, 2026'
        """
        return f"{DateFormatter.short_date(start)} - {DateFormatter.short_date(display_end)}, {display_end.year}"

    @staticmethod
    def day_name(value: Union[datetime, date]) -> str:
        """Full weekday name, e.g. 'Wednesday'."""
        return value.strftime("%A")

    @staticmethod
    def format_friendly_datetime(value: Optional[datetime]) -> str:
        """Format datetime for session log listings.

        Returns:
            String like 'Oct 15, 2025, 9:05 AM' or 'Invalid Date'
        """
        if not isinstance(value, datetime):
            return "Invalid Date"
        hour = value.hour % 12 or 12
        meridiem = "AM" if value.hour < 12 else "PM"
        return f"{DateFormatter.short_date(value)}, {value.year}, {hour}:{value.minute:02d} {meridiem}"

    @staticmethod
    def format_money(value: Union[Decimal, int, float], symbol: Optional[str] = None) -> str:
        """Round to whole currency units for display.

        The calculators keep full precision; rounding only happens here.

        Examples:
            >>> DateFormatter.format_money(Decimal('1234.5'), '₱')
            '₱1,235'
        """
        symbol = Config.CURRENCY_SYMBOL if symbol is None else symbol
        rounded = Decimal(str(value)).quantize(Decimal("1"), rounding=ROUND_HALF_UP)
        return f"{symbol}{int(rounded):,}"

    @staticmethod
    def parse_date(value: str) -> date:
        """Parse date string to date object.

        Accepts both YYYY/MM/DD and YYYY-MM-DD formats.

        Args:
            value: Date string

        Returns:
            date object
        """
        normalized = value.replace("/", "-").split()[0]
        return datetime.strptime(normalized, DateFormatter.DB_DATE_FORMAT).date()
