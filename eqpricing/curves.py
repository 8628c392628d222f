"""
Interest-rate and dividend-yield curve primitives.

This module keeps curve math minimal and explicit:
- Every curve has a **reference date** and a **day counter**; times are year
  fractions from the reference date on that day counter.
- Rates are **continuously compounded zero rates**: DF(t) = exp(-r(t)*t).
- A curve built without an explicit reference date follows the global evaluation
  date and notifies its observers when it moves.

Bootstrapping is out of scope: curves are built directly from rates.
"""

from __future__ import annotations

import math
from datetime import date

from eqpricing.dates import Actual365Fixed
from eqpricing.handles import Handle
from eqpricing.interfaces import DayCounter, Quote
from eqpricing.observable import ForwardingObserver
from eqpricing.settings import settings


class TermStructure(ForwardingObserver):
    """
    Common reference-date and time handling for curves and surfaces.

    - `reference_date=None`: floating, always equal to the evaluation date.
    - `reference_date=<date>`: pinned.
    """

    def __init__(
        self,
        day_counter: DayCounter | None = None,
        reference_date: date | None = None,
    ) -> None:
        super().__init__()
        self.day_counter = day_counter or Actual365Fixed()
        self._reference_date = reference_date
        if reference_date is None:
            self.register_with(settings)

    @property
    def reference_date(self) -> date:
        if self._reference_date is None:
            return settings.evaluation_date
        return self._reference_date

    @property
    def floating(self) -> bool:
        return self._reference_date is None

    def time_from_reference(self, d: date) -> float:
        return self.day_counter.year_fraction(self.reference_date, d)

    def _to_time(self, d: date | float) -> float:
        t = self.time_from_reference(d) if isinstance(d, date) else float(d)
        if t < 0:
            raise ValueError("t must be >= 0")
        return t


class YieldCurve(TermStructure):
    """Base class for continuously compounded zero-rate curves."""

    def zero_rate(self, t: float) -> float:
        raise NotImplementedError

    def discount(self, d: date | float) -> float:
        r"""
        Discount factor to a date or time.

        With CC zero rate r(t), the discount factor is:
        DF(t) = exp(-r(t)*t).
        """
        t = self._to_time(d)
        return math.exp(-self.zero_rate(t) * t)

    def df(self, t: float) -> float:
        """Discount factor to time t (year-fraction)."""
        return self.discount(t)


class FlatForward(YieldCurve):
    """
    Flat continuously compounded curve.

    `rate` is either a number or a handle to a quote; with a handle, quote changes
    and relinks propagate to whoever observes the curve.
    """

    def __init__(
        self,
        rate: float | Handle[Quote],
        day_counter: DayCounter | None = None,
        reference_date: date | None = None,
    ) -> None:
        super().__init__(day_counter, reference_date)
        self._rate = rate
        if isinstance(rate, Handle):
            self.register_with(rate)

    @property
    def rate(self) -> float:
        if isinstance(self._rate, Handle):
            return self._rate.current_link.value
        return self._rate

    def zero_rate(self, t: float) -> float:
        return self.rate

    def bumped(self, bump: float) -> "FlatForward":
        """Return a new flat curve at rate + bump, same conventions and reference."""
        return FlatForward(
            rate=self.rate + bump,
            day_counter=self.day_counter,
            reference_date=self._reference_date,
        )

    def __repr__(self) -> str:
        return f"FlatForward(rate={self.rate!r}, reference_date={self.reference_date})"


class ZeroRateCurve(YieldCurve):
    """
    Zero rate curve (continuously compounded) with linear interpolation.

    - **Pillars** are increasing times (year fractions from the reference date).
    - `zero_rates_cc[i]` is the CC zero rate at `pillars[i]`.
    - Flat extrapolation before the first and beyond the last pillar.
    """

    def __init__(
        self,
        name: str,
        pillars: list[float],
        zero_rates_cc: list[float],
        day_counter: DayCounter | None = None,
        reference_date: date | None = None,
    ) -> None:
        super().__init__(day_counter, reference_date)
        self.name = name
        self.pillars = list(pillars)
        self.zero_rates_cc = list(zero_rates_cc)
        self._validate()

    @classmethod
    def from_dates(
        cls,
        name: str,
        reference_date: date,
        dates: list[date],
        zero_rates_cc: list[float],
        day_counter: DayCounter | None = None,
    ) -> "ZeroRateCurve":
        """Build a pinned curve from pillar dates instead of pillar times."""
        dc = day_counter or Actual365Fixed()
        pillars = [dc.year_fraction(reference_date, d) for d in dates]
        return cls(name, pillars, zero_rates_cc, dc, reference_date)

    def _validate(self) -> None:
        if len(self.pillars) != len(self.zero_rates_cc):
            raise ValueError("pillars and zero_rates_cc must have the same length")
        if not self.pillars:
            raise ValueError("curve has no pillars")
        for i in range(1, len(self.pillars)):
            if self.pillars[i] <= self.pillars[i - 1]:
                raise ValueError("pillars must be strictly increasing")

    def zero_rate(self, t: float) -> float:
        """
        Continuously compounded zero rate at time t (year-fraction).
        Linear interpolation in zero rates. t must be >= 0.
        """
        if t < 0:
            raise ValueError("t must be >= 0")
        if t <= self.pillars[0]:
            return self.zero_rates_cc[0]
        if t >= self.pillars[-1]:
            return self.zero_rates_cc[-1]
        for i in range(len(self.pillars) - 1):
            if self.pillars[i] <= t <= self.pillars[i + 1]:
                t0, t1 = self.pillars[i], self.pillars[i + 1]
                r0, r1 = self.zero_rates_cc[i], self.zero_rates_cc[i + 1]
                # Linear in *rates*, not in log discount factors.
                return r0 + (r1 - r0) * (t - t0) / (t1 - t0)
        return self.zero_rates_cc[-1]

    def bumped(self, bump: float) -> "ZeroRateCurve":
        """
        Return a new curve with a *parallel* additive shift to all zero rates.

        `bump` is expressed in absolute rate terms (e.g. 1bp = 0.0001).
        """
        return ZeroRateCurve(
            name=self.name,
            pillars=list(self.pillars),
            zero_rates_cc=[r + bump for r in self.zero_rates_cc],
            day_counter=self.day_counter,
            reference_date=self._reference_date,
        )

    def __repr__(self) -> str:
        return f"ZeroRateCurve(name={self.name!r}, pillars={self.pillars!r})"
