"""Equity cash flow pricing: handles, curves, index, cash flow, pricers, and risk."""

from eqpricing.cashflows import EquityCashFlow
from eqpricing.curves import FlatForward, ZeroRateCurve
from eqpricing.dates import Actual360, Actual365Fixed, NullCalendar, WeekendsOnly
from eqpricing.errors import (
    DateOrderingError,
    EmptyHandleError,
    InconsistentReferenceDateError,
    InvalidFixingDateError,
    MissingFixingError,
    MissingMarketDataError,
    PricingError,
)
from eqpricing.fixings import IndexManager, index_manager
from eqpricing.handles import Handle
from eqpricing.indexes import EquityIndex
from eqpricing.lazy import CacheState, LazyObject
from eqpricing.observable import Observable, Observer
from eqpricing.pricers import (
    BaseEquityPricer,
    QuantoForward,
    QuantoPricer,
    SimpleReturnPricer,
)
from eqpricing.quotes import SimpleQuote
from eqpricing.risk import RatePV01, SpotDelta, rate_pv01, spot_delta
from eqpricing.settings import SavedSettings, Settings, settings
from eqpricing.volatility import BlackConstantVol, BlackVarianceCurve

__all__ = [
    "Actual360",
    "Actual365Fixed",
    "BaseEquityPricer",
    "BlackConstantVol",
    "BlackVarianceCurve",
    "CacheState",
    "DateOrderingError",
    "EmptyHandleError",
    "EquityCashFlow",
    "EquityIndex",
    "FlatForward",
    "Handle",
    "InconsistentReferenceDateError",
    "IndexManager",
    "InvalidFixingDateError",
    "LazyObject",
    "MissingFixingError",
    "MissingMarketDataError",
    "NullCalendar",
    "Observable",
    "Observer",
    "PricingError",
    "QuantoForward",
    "QuantoPricer",
    "RatePV01",
    "SavedSettings",
    "Settings",
    "SimpleQuote",
    "SimpleReturnPricer",
    "SpotDelta",
    "WeekendsOnly",
    "ZeroRateCurve",
    "index_manager",
    "rate_pv01",
    "settings",
    "spot_delta",
]
