"""
Clock
=====

Source of the current instant. The application registers a SystemClock;
tests swap in a FixedClock to pin time-dependent rules.
"""
from abc import ABC, abstractmethod
from datetime import datetime, timedelta, timezone

from storefront.utils.datetime_utils import ensure_utc


class Clock(ABC):
    """Supplies the current instant as a timezone-aware UTC datetime."""

    @abstractmethod
    def now(self) -> datetime:
        """Return the current instant (UTC)."""
        pass


class SystemClock(Clock):
    """Wall clock."""

    def now(self) -> datetime:
        return datetime.now(timezone.utc)


class FixedClock(Clock):
    """Clock frozen at a given instant until moved explicitly."""

    def __init__(self, instant: datetime):
        self._instant = ensure_utc(instant)

    def now(self) -> datetime:
        return self._instant

    def set(self, instant: datetime) -> None:
        self._instant = ensure_utc(instant)

    def advance(self, delta: timedelta) -> None:
        self._instant = self._instant + delta
