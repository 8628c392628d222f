"""GraphQL types for the equity cash flow pricing API."""

from __future__ import annotations

from datetime import date
from typing import Optional

import strawberry


# --- Input types (request payloads) ---


@strawberry.input
class FixingInput:
    """Historic index fixing."""

    fixing_date: date
    value: float


@strawberry.input
class EquityMarketInput:
    """Market for one equity index: flat CC rates (Actual/365 Fixed), spot and fixings."""

    evaluation_date: date
    interest_rate: float
    index_name: str = "EQ_INDEX"
    fixings: Optional[list[FixingInput]] = None
    spot: Optional[float] = None
    dividend_yield: Optional[float] = None


@strawberry.input
class QuantoInput:
    """Quanto market data: flat quanto-currency rate, flat vols and correlation."""

    quanto_rate: float
    equity_volatility: float
    fx_volatility: float
    correlation: float


@strawberry.input
class EquityCashFlowInput:
    """Equity return cash flow; payment date defaults to the fixing date."""

    notional: float
    base_date: date
    fixing_date: date
    payment_date: Optional[date] = None


# --- Output types (response payloads) ---


@strawberry.type
class QuantoForwardResult:
    """Inputs and result of the quanto forward calculation."""

    time: float
    strike: float
    quanto_rate: float
    dividend_yield: float
    equity_volatility: float
    fx_volatility: float
    correlation: float
    spot: float
    forward: float


@strawberry.type
class RiskMeasures:
    """Risk measures: spot delta (quote bump), PV01 (parallel curve bump)."""

    spot_delta: Optional[float] = None
    pv01: Optional[float] = None


@strawberry.type
class EquityPricingResult:
    """Pricing result: cash amount, quanto breakdown and optional risk measures."""

    amount: float
    quanto_forward: Optional[QuantoForwardResult] = None
    risk_measures: Optional[RiskMeasures] = None
