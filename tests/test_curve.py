"""Tests for yield curves: FlatForward and ZeroRateCurve."""

import math
from datetime import date

import pytest

from eqpricing.curves import FlatForward, ZeroRateCurve
from eqpricing.dates import Actual360, Actual365Fixed
from eqpricing.handles import Handle
from eqpricing.observable import Observer
from eqpricing.quotes import SimpleQuote
from eqpricing.settings import settings

TODAY = date(2023, 1, 27)


class Recorder(Observer):
    def __init__(self) -> None:
        super().__init__()
        self.count = 0

    def update(self) -> None:
        self.count += 1


def test_curve_interpolation_endpoints() -> None:
    """Endpoints: rate at first/last pillar equals stored rate."""
    pillars = [0.5, 1.0, 2.0, 5.0]
    rates = [0.05, 0.04, 0.035, 0.03]
    curve = ZeroRateCurve(name="C", pillars=pillars, zero_rates_cc=rates)
    assert curve.zero_rate(0.5) == 0.05
    assert curve.zero_rate(5.0) == 0.03


def test_curve_interpolation_midpoint() -> None:
    """Midpoint: linear interp between two pillars."""
    curve = ZeroRateCurve(name="C", pillars=[0.0, 2.0], zero_rates_cc=[0.04, 0.06])
    # at t=1.0: r = 0.04 + (0.06-0.04)*1/2 = 0.05
    assert abs(curve.zero_rate(1.0) - 0.05) < 1e-10


def test_curve_flat_extrapolation() -> None:
    curve = ZeroRateCurve(name="C", pillars=[0.5, 1.0], zero_rates_cc=[0.05, 0.04])
    assert curve.zero_rate(0.0) == 0.05
    assert curve.zero_rate(0.25) == 0.05
    assert curve.zero_rate(2.0) == 0.04


def test_df_monotonic_decreasing_positive_rates() -> None:
    """DF is monotonic decreasing when rates are positive."""
    curve = ZeroRateCurve(name="C", pillars=[0.5, 1.0, 2.0, 5.0], zero_rates_cc=[0.05, 0.04, 0.035, 0.03])
    times = [0.1, 0.5, 1.0, 1.5, 2.0, 3.0, 5.0, 7.0]
    dfs = [curve.discount(t) for t in times]
    for i in range(1, len(dfs)):
        assert dfs[i] < dfs[i - 1]
    assert all(0 < d <= 1 for d in dfs)


def test_discount_to_date_uses_day_counter() -> None:
    """DF(date) = exp(-r * yf(reference, date)) on the curve's day count."""
    end = date(2023, 4, 5)
    a365 = FlatForward(0.0375, Actual365Fixed())
    a360 = FlatForward(0.0375, Actual360())
    assert abs(a365.discount(end) - math.exp(-0.0375 * 68 / 365.0)) < 1e-12
    assert abs(a360.discount(end) - math.exp(-0.0375 * 68 / 360.0)) < 1e-12
    assert a365.df(1.0) == a365.discount(1.0)


def test_negative_time_rejected() -> None:
    curve = FlatForward(0.01)
    with pytest.raises(ValueError, match="t must be >= 0"):
        curve.discount(date(2023, 1, 26))
    with pytest.raises(ValueError, match="t must be >= 0"):
        ZeroRateCurve(name="C", pillars=[1.0], zero_rates_cc=[0.04]).zero_rate(-0.1)


def test_bumped_curves() -> None:
    """Bumped curves have rates shifted by bump and keep their conventions."""
    curve = ZeroRateCurve(name="C", pillars=[1.0], zero_rates_cc=[0.04])
    bumped = curve.bumped(0.01)
    assert abs(bumped.zero_rate(1.0) - 0.05) < 1e-10
    assert abs(bumped.discount(1.0) - math.exp(-0.05)) < 1e-10

    pinned = FlatForward(0.02, Actual360(), reference_date=date(2023, 1, 2))
    bumped_flat = pinned.bumped(0.0001)
    assert abs(bumped_flat.rate - 0.0201) < 1e-15
    assert bumped_flat.reference_date == date(2023, 1, 2)
    assert bumped_flat.day_counter == Actual360()


def test_validate_pillars() -> None:
    with pytest.raises(ValueError, match="strictly increasing"):
        ZeroRateCurve(name="C", pillars=[1.0, 1.0], zero_rates_cc=[0.04, 0.04])
    with pytest.raises(ValueError, match="same length"):
        ZeroRateCurve(name="C", pillars=[1.0, 2.0], zero_rates_cc=[0.04])
    with pytest.raises(ValueError, match="no pillars"):
        ZeroRateCurve(name="C", pillars=[], zero_rates_cc=[])


def test_from_dates() -> None:
    ref = date(2023, 1, 27)
    curve = ZeroRateCurve.from_dates("C", ref, [date(2024, 1, 27), date(2025, 1, 26)], [0.03, 0.04])
    assert curve.pillars == [1.0, 2.0]
    assert curve.reference_date == ref
    assert not curve.floating


def test_floating_reference_follows_evaluation_date() -> None:
    curve = FlatForward(0.01)
    recorder = Recorder()
    recorder.register_with(curve)
    assert curve.floating
    assert curve.reference_date == TODAY
    settings.evaluation_date = date(2023, 2, 1)
    assert curve.reference_date == date(2023, 2, 1)
    assert recorder.count == 1


def test_pinned_reference_ignores_evaluation_date() -> None:
    curve = FlatForward(0.01, reference_date=date(2023, 1, 26))
    recorder = Recorder()
    recorder.register_with(curve)
    settings.evaluation_date = date(2023, 2, 1)
    assert curve.reference_date == date(2023, 1, 26)
    assert recorder.count == 0


def test_quote_driven_flat_forward() -> None:
    quote = SimpleQuote(0.02)
    curve = FlatForward(Handle(quote))
    recorder = Recorder()
    recorder.register_with(curve)
    assert curve.zero_rate(1.0) == 0.02
    quote.value = 0.03
    assert curve.zero_rate(1.0) == 0.03
    assert recorder.count == 1
