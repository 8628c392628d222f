"""Shared market setup: the 2023-01-27 equity/quanto market used across tests."""

from dataclasses import dataclass
from datetime import date

import pytest

from eqpricing.cashflows import EquityCashFlow
from eqpricing.config import reset_config
from eqpricing.curves import FlatForward
from eqpricing.dates import Actual365Fixed, WeekendsOnly
from eqpricing.fixings import index_manager
from eqpricing.handles import Handle
from eqpricing.indexes import EquityIndex
from eqpricing.pricers import QuantoPricer
from eqpricing.quotes import SimpleQuote
from eqpricing.settings import SavedSettings, settings
from eqpricing.volatility import BlackConstantVol

TODAY = date(2023, 1, 27)
START = date(2023, 1, 5)
END = date(2023, 4, 5)
NOTIONAL = 1.0e7


@pytest.fixture(autouse=True)
def evaluation_context():
    """Pin the evaluation date and start every test with an empty fixing store."""
    reset_config()
    index_manager.clear_histories()
    with SavedSettings():
        settings.evaluation_date = TODAY
        settings.enforces_todays_historic_fixings = True
        yield
    index_manager.clear_histories()
    reset_config()


@dataclass
class MarketVars:
    """Handles, quotes and index of the reference market."""

    day_count: Actual365Fixed
    equity_index: EquityIndex
    local_rate: Handle
    dividend: Handle
    quanto_rate: Handle
    equity_vol: Handle
    fx_vol: Handle
    spot: Handle
    correlation: Handle
    notional: float = NOTIONAL

    def cash_flow(self, index: EquityIndex, start: date, end: date) -> EquityCashFlow:
        return EquityCashFlow(self.notional, index, start, end, end)

    def quanto_pricer(self) -> QuantoPricer:
        return QuantoPricer(self.quanto_rate, self.equity_vol, self.fx_vol, self.correlation)

    def quanto_pricer_with_missing_vols(self) -> QuantoPricer:
        vol = Handle()
        return QuantoPricer(self.quanto_rate, vol, vol, self.correlation)

    def bump(self) -> None:
        """Relink every market-data handle to moved data."""
        self.local_rate.link_to(FlatForward(0.04, self.day_count))
        self.dividend.link_to(FlatForward(0.01, self.day_count))
        self.quanto_rate.link_to(FlatForward(0.03, self.day_count))
        self.equity_vol.link_to(BlackConstantVol(0.45, self.day_count))
        self.fx_vol.link_to(BlackConstantVol(0.25, self.day_count))
        self.spot.link_to(SimpleQuote(8710.0))


@pytest.fixture
def market() -> MarketVars:
    day_count = Actual365Fixed()
    local_rate = Handle(label="local")
    dividend = Handle(label="dividend")
    quanto_rate = Handle(label="quanto")
    equity_vol = Handle(label="equity_vol")
    fx_vol = Handle(label="fx_vol")
    spot = Handle(label="spot")
    correlation = Handle(label="correlation")

    index = EquityIndex("eqIndex", WeekendsOnly(), local_rate, dividend, spot)
    index.add_fixing(START, 9010.0)
    index.add_fixing(TODAY, 8690.0)

    local_rate.link_to(FlatForward(0.0375, day_count))
    dividend.link_to(FlatForward(0.005, day_count))
    quanto_rate.link_to(FlatForward(0.001, day_count))
    equity_vol.link_to(BlackConstantVol(0.4, day_count))
    fx_vol.link_to(BlackConstantVol(0.2, day_count))
    spot.link_to(SimpleQuote(8700.0))
    correlation.link_to(SimpleQuote(0.4))

    return MarketVars(
        day_count=day_count,
        equity_index=index,
        local_rate=local_rate,
        dividend=dividend,
        quanto_rate=quanto_rate,
        equity_vol=equity_vol,
        fx_vol=fx_vol,
        spot=spot,
        correlation=correlation,
    )
