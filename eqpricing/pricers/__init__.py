"""Pricers for equity return cash flows."""

from eqpricing.pricers.base import BaseEquityPricer
from eqpricing.pricers.quanto_pricer import FX_ATM_STRIKE, QuantoForward, QuantoPricer
from eqpricing.pricers.simple_pricer import SimpleReturnPricer

__all__ = [
    "BaseEquityPricer",
    "FX_ATM_STRIKE",
    "QuantoForward",
    "QuantoPricer",
    "SimpleReturnPricer",
]
