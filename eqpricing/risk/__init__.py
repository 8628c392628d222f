"""
Risk measures for a single equity cash flow, implemented via "bump and reprice".

Bumps go through the market-data handles and quotes themselves, so the
notification graph invalidates the cash flow and the reprice sees the bump.
Market data is always restored afterwards.
"""

from __future__ import annotations

from eqpricing.cashflows import EquityCashFlow
from eqpricing.handles import Handle
from eqpricing.interfaces import YieldTermStructure
from eqpricing.quotes import SimpleQuote
from eqpricing.risk.base import BaseRiskMeasure
from eqpricing.risk.pv01 import RatePV01
from eqpricing.risk.spot_delta import SpotDelta


def rate_pv01(
    cashflow: EquityCashFlow,
    handle: Handle[YieldTermStructure],
    bump_bp: float = 1.0,
) -> float:
    """
    PV01: change in amount when the curve is bumped by bump_bp basis points (parallel).
    bump_bp is in basis points; bump = bump_bp / 10000 (additive to zero rates).
    """
    return RatePV01(handle=handle, bump_bp=bump_bp).compute(cashflow)


def spot_delta(
    cashflow: EquityCashFlow,
    quote: SimpleQuote,
    bump_pct: float = 0.01,
) -> float:
    """
    Spot delta: (amount(bumped) - amount(base)) / (spot_bumped - spot).
    Spot is bumped by factor (1 + bump_pct).
    """
    return SpotDelta(quote=quote, bump_pct=bump_pct).compute(cashflow)


__all__ = [
    "BaseRiskMeasure",
    "RatePV01",
    "SpotDelta",
    "rate_pv01",
    "spot_delta",
]
