"""Clock adapters."""

from datetime import date, datetime, timezone
from typing import Optional


class SystemClock:
    """Wall clock. Dates are local, timestamps are UTC."""

    def today(self) -> date:
        return date.today()

    def now(self) -> datetime:
        return datetime.now(timezone.utc)


class FixedClock:
    """
    Clock frozen at a given instant.

    Example:
        >>> clock = FixedClock(date(2024, 1, 15))
        >>> clock.today()
        datetime.date(2024, 1, 15)
    """

    def __init__(self, today: date, now: Optional[datetime] = None) -> None:
        self._today = today
        self._now = now or datetime(today.year, today.month, today.day, tzinfo=timezone.utc)

    def today(self) -> date:
        return self._today

    def now(self) -> datetime:
        return self._now
