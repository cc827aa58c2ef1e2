"""Display formatters."""

from .date_formatter import DateFormatter

__all__ = ['DateFormatter']
