"""Tests for bump-and-reprice risk measures on an equity cash flow."""

import math
from datetime import date

import pytest

from eqpricing.curves import FlatForward
from eqpricing.errors import InconsistentReferenceDateError
from eqpricing.risk import RatePV01, SpotDelta, rate_pv01, spot_delta

START = date(2023, 1, 5)
END = date(2023, 4, 5)
T = 68 / 365.0


def test_spot_delta_simple_cash_flow(market) -> None:
    """Forward is linear in spot: delta = notional * DF_div / DF_rate / I_start."""
    cf = market.cash_flow(market.equity_index, START, END)
    quote = market.spot.current_link
    delta = spot_delta(cf, quote, bump_pct=0.01)
    expected = market.notional * math.exp(-0.005 * T) / math.exp(-0.0375 * T) / 9010.0
    assert abs(delta - expected) < 1e-6
    assert quote.value == 8700.0


def test_spot_delta_quanto_cash_flow(market) -> None:
    cf = market.cash_flow(market.equity_index, START, END)
    cf.set_pricer(market.quanto_pricer())
    delta = SpotDelta(quote=market.spot.current_link).compute(cf)
    expected = market.notional * math.exp((0.001 - 0.005 - 0.4 * 0.4 * 0.2) * T) / 9010.0
    assert abs(delta - expected) < 1e-6


def test_rate_pv01_quanto_curve(market) -> None:
    cf = market.cash_flow(market.equity_index, START, END)
    cf.set_pricer(market.quanto_pricer())
    base = cf.amount()
    curve = market.quanto_rate.current_link
    pv01 = rate_pv01(cf, market.quanto_rate, bump_bp=1.0)
    assert pv01 > 0
    # Forward scales by exp(1bp * T)
    expected = (base / market.notional + 1.0) * (math.exp(0.0001 * T) - 1.0) * market.notional
    assert abs(pv01 - expected) < 1e-6
    assert market.quanto_rate.current_link is curve
    assert abs(cf.amount() - base) < 1e-9


def test_rate_pv01_dividend_curve_negative(market) -> None:
    cf = market.cash_flow(market.equity_index, START, END)
    assert rate_pv01(cf, market.dividend) < 0


def test_risk_measure_names(market) -> None:
    assert RatePV01(handle=market.local_rate).name == "PV01_local"
    assert SpotDelta(quote=market.spot.current_link).name == "SpotDelta"


def test_market_data_restored_on_error(market) -> None:
    """A failing bumped reprice still relinks the original curve."""

    class MisdatedBump(FlatForward):
        def bumped(self, bump):
            return FlatForward(self.rate + bump, reference_date=date(2023, 1, 26))

    curve = MisdatedBump(0.001)
    market.quanto_rate.link_to(curve)
    cf = market.cash_flow(market.equity_index, START, END)
    cf.set_pricer(market.quanto_pricer())
    with pytest.raises(InconsistentReferenceDateError):
        rate_pv01(cf, market.quanto_rate)
    assert market.quanto_rate.current_link is curve
    cf.amount()
    assert cf.is_fresh
