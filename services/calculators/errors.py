"""Exceptions raised by the payout calculators."""

from datetime import datetime
from typing import Optional


class StatsError(Exception):
    """Base class for payout engine errors."""


class InvalidTimeRange(StatsError):
    """A session log ends before it starts."""

    def __init__(self, start_time: datetime, end_time: datetime, log_id: Optional[int] = None):
        self.log_id = log_id
        self.start_time = start_time
        self.end_time = end_time
        label = f"Session log {log_id}" if log_id is not None else "Session log"
        super().__init__(
            f"{label} ends before it starts: start={start_time.isoformat()} end={end_time.isoformat()}"
        )


class ConfigurationUnavailable(StatsError):
    """Bonus targets could not be obtained.

    Never replaced with zero targets: a zero target is always met.
    """

    def __init__(self, message: str = "Bonus targets are not configured"):
        super().__init__(message)
