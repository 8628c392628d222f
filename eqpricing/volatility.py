"""
Black volatility term structures.

Volatilities are Black (lognormal) vols; variance is vol^2 * t with t measured
from the reference date on the surface's day counter. Strike is accepted for
interface compatibility; the surfaces here carry no smile.
"""

from __future__ import annotations

import math
from datetime import date

from eqpricing.curves import TermStructure
from eqpricing.handles import Handle
from eqpricing.interfaces import DayCounter, Quote


class BlackVolSurface(TermStructure):
    """Base class: black_vol(d, strike) and black_variance(d, strike)."""

    def black_vol(self, d: date | float, strike: float) -> float:
        raise NotImplementedError

    def black_variance(self, d: date | float, strike: float) -> float:
        t = self._to_time(d)
        vol = self.black_vol(t, strike)
        return vol * vol * t


class BlackConstantVol(BlackVolSurface):
    """Flat volatility, given as a number or as a handle to a quote."""

    def __init__(
        self,
        volatility: float | Handle[Quote],
        day_counter: DayCounter | None = None,
        reference_date: date | None = None,
    ) -> None:
        super().__init__(day_counter, reference_date)
        self._volatility = volatility
        if isinstance(volatility, Handle):
            self.register_with(volatility)

    @property
    def volatility(self) -> float:
        if isinstance(self._volatility, Handle):
            return self._volatility.current_link.value
        return self._volatility

    def black_vol(self, d: date | float, strike: float) -> float:
        self._to_time(d)
        return self.volatility

    def __repr__(self) -> str:
        return (
            f"BlackConstantVol(volatility={self.volatility!r}, "
            f"reference_date={self.reference_date})"
        )


class BlackVarianceCurve(BlackVolSurface):
    """
    Term-dependent, strike-independent volatility.

    Total variance is interpolated linearly in time between pillars (zero at t=0);
    beyond the last pillar the last volatility is held flat.
    """

    def __init__(
        self,
        pillars: list[float],
        volatilities: list[float],
        day_counter: DayCounter | None = None,
        reference_date: date | None = None,
    ) -> None:
        super().__init__(day_counter, reference_date)
        if len(pillars) != len(volatilities):
            raise ValueError("pillars and volatilities must have the same length")
        if not pillars:
            raise ValueError("curve has no pillars")
        if pillars[0] <= 0:
            raise ValueError("pillars must be positive")
        for i in range(1, len(pillars)):
            if pillars[i] <= pillars[i - 1]:
                raise ValueError("pillars must be strictly increasing")
        self.pillars = list(pillars)
        self.volatilities = list(volatilities)
        self._variances = [v * v * t for t, v in zip(self.pillars, self.volatilities)]
        for i in range(1, len(self._variances)):
            if self._variances[i] < self._variances[i - 1]:
                raise ValueError("variance must be non-decreasing")

    def black_vol(self, d: date | float, strike: float) -> float:
        t = self._to_time(d)
        if t == 0.0:
            return self.volatilities[0]
        if t >= self.pillars[-1]:
            return self.volatilities[-1]
        times = [0.0] + self.pillars
        variances = [0.0] + self._variances
        for i in range(len(times) - 1):
            if times[i] <= t <= times[i + 1]:
                w = (t - times[i]) / (times[i + 1] - times[i])
                variance = variances[i] + w * (variances[i + 1] - variances[i])
                return math.sqrt(variance / t)
        return self.volatilities[-1]
