"""
Minimal day-count and calendar conventions.

Conventions proper are an external concern; these are the few the kernel and its
tests need. Anything satisfying `DayCounter` / `Calendar` from
`eqpricing.interfaces` can be used instead.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, timedelta


@dataclass(frozen=True)
class Actual365Fixed:
    """Actual/365 (Fixed)."""

    name: str = "Actual/365 (Fixed)"

    def day_count(self, start: date, end: date) -> int:
        return (end - start).days

    def year_fraction(self, start: date, end: date) -> float:
        return self.day_count(start, end) / 365.0


@dataclass(frozen=True)
class Actual360:
    """Actual/360."""

    name: str = "Actual/360"

    def day_count(self, start: date, end: date) -> int:
        return (end - start).days

    def year_fraction(self, start: date, end: date) -> float:
        return self.day_count(start, end) / 360.0


@dataclass(frozen=True)
class NullCalendar:
    """Calendar where every day is a business day."""

    name: str = "Null"

    def is_business_day(self, d: date) -> bool:
        return True

    def adjust(self, d: date) -> date:
        return d


@dataclass(frozen=True)
class WeekendsOnly:
    """Calendar whose only holidays are Saturdays and Sundays."""

    name: str = "Weekends only"

    def is_business_day(self, d: date) -> bool:
        return d.weekday() < 5

    def adjust(self, d: date) -> date:
        """Roll forward to the next business day (Following)."""
        while not self.is_business_day(d):
            d += timedelta(days=1)
        return d
