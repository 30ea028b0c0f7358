"""Clock abstraction for time-dependent business rules.

SystemClock: Django's timezone-aware now()
FixedClock: pinned time for tests and replays

Services never call timezone.now() directly; they ask their clock.
"""

from datetime import datetime
from typing import Protocol

from django.utils import timezone


class Clock(Protocol):
    """Clock interface used by all time-dependent services."""

    def now(self) -> datetime:
        """Current time as a timezone-aware datetime."""
        ...


class SystemClock:
    """Wall-clock time in the project's configured time zone."""

    def now(self) -> datetime:
        return timezone.localtime(timezone.now())


class FixedClock:
    """Clock pinned to a single moment until moved with set_time()."""

    def __init__(self, moment: datetime) -> None:
        self._moment = moment

    def now(self) -> datetime:
        return self._moment

    def set_time(self, moment: datetime) -> None:
        self._moment = moment
