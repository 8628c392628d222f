"""
Protocol-based interfaces for the market data the kernel consumes.

Using typing.Protocol enables structural subtyping: any class that implements
the required methods satisfies the protocol without explicit inheritance.
Curves, surfaces and conventions are treated as opaque queryable objects, so
other implementations can be plugged into handles without touching the kernel.
"""

from __future__ import annotations

from datetime import date
from typing import Protocol, runtime_checkable


@runtime_checkable
class DayCounter(Protocol):
    """Protocol for day-count conventions."""

    name: str

    def year_fraction(self, start: date, end: date) -> float:
        """Return the year fraction between two dates."""
        ...


@runtime_checkable
class Calendar(Protocol):
    """Protocol for holiday calendars."""

    name: str

    def is_business_day(self, d: date) -> bool:
        """Return True if d is a business day."""
        ...


@runtime_checkable
class Quote(Protocol):
    """Protocol for scalar market quotes."""

    @property
    def value(self) -> float:
        ...


@runtime_checkable
class YieldTermStructure(Protocol):
    """Protocol for interest-rate (and dividend-yield) curves."""

    @property
    def reference_date(self) -> date:
        ...

    def time_from_reference(self, d: date) -> float:
        """Year fraction from the reference date on the curve's day count."""
        ...

    def zero_rate(self, t: float) -> float:
        """Continuously compounded zero rate at time t."""
        ...

    def discount(self, d: date | float) -> float:
        """Discount factor to a date or time."""
        ...

    def bumped(self, bump: float) -> YieldTermStructure:
        """Return a new curve with a parallel additive rate shift."""
        ...


@runtime_checkable
class BlackVolTermStructure(Protocol):
    """Protocol for Black volatility surfaces."""

    @property
    def reference_date(self) -> date:
        ...

    def black_vol(self, d: date | float, strike: float) -> float:
        """Black volatility at a date (or time) and strike."""
        ...
