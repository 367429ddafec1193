"""Clock port.

The "current date" is a collaborator, not ambient state: Meal creation and
the is_today predicate read it through this port so they stay deterministic.
"""

from datetime import date, datetime
from typing import Protocol


class IClock(Protocol):
    """Source of the current date and time.

    Example implementation (infrastructure layer):
        >>> class SystemClock:
        ...     def today(self) -> date:
        ...         return date.today()
        ...
        ...     def now(self) -> datetime:
        ...         return datetime.now(timezone.utc)
    """

    def today(self) -> date:
        """Current calendar date."""
        ...

    def now(self) -> datetime:
        """Current timezone-aware timestamp."""
        ...
