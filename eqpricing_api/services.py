"""Service layer: convert GraphQL inputs to pricing library objects and run pricing/risk."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from eqpricing.cashflows import EquityCashFlow
from eqpricing.curves import FlatForward
from eqpricing.dates import NullCalendar
from eqpricing.handles import Handle
from eqpricing.indexes import EquityIndex
from eqpricing.pricers import QuantoPricer
from eqpricing.quotes import SimpleQuote
from eqpricing.risk import rate_pv01, spot_delta
from eqpricing.settings import SavedSettings, settings
from eqpricing.volatility import BlackConstantVol

from eqpricing_api.types import (
    EquityCashFlowInput,
    EquityMarketInput,
    EquityPricingResult,
    QuantoForwardResult,
    QuantoInput,
    RiskMeasures,
)

PV01_CURVES = ("interest", "dividend", "quanto")


@dataclass
class _MarketHandles:
    """Handles built for one request, keyed the way pv01Curve names them."""

    interest: Handle
    dividend: Handle
    quanto: Handle
    spot: Optional[SimpleQuote]


def _index_from_input(m: EquityMarketInput) -> tuple[EquityIndex, _MarketHandles]:
    """Build the index (with fresh fixing history) and its handles from GraphQL input."""
    interest = Handle(FlatForward(m.interest_rate), label="interest")
    dividend = Handle(label="dividend")
    if m.dividend_yield is not None:
        dividend.link_to(FlatForward(m.dividend_yield))
    spot_quote = SimpleQuote(m.spot) if m.spot is not None else None
    spot = Handle(spot_quote, label="spot")
    index = EquityIndex(m.index_name, NullCalendar(), interest, dividend, spot)
    index.clear_fixings()
    if m.fixings:
        index.add_fixings((f.fixing_date, f.value) for f in m.fixings)
    handles = _MarketHandles(
        interest=interest, dividend=dividend, quanto=Handle(label="quanto"), spot=spot_quote
    )
    return index, handles


def _quanto_pricer_from_input(q: QuantoInput, handles: _MarketHandles) -> QuantoPricer:
    """Build QuantoPricer from GraphQL QuantoInput (flat curve and vols)."""
    handles.quanto.link_to(FlatForward(q.quanto_rate))
    return QuantoPricer(
        quanto_curve=handles.quanto,
        equity_volatility=Handle(BlackConstantVol(q.equity_volatility)),
        fx_volatility=Handle(BlackConstantVol(q.fx_volatility)),
        correlation=Handle(SimpleQuote(q.correlation)),
    )


def price_equity_cash_flow(
    cash_flow: EquityCashFlowInput,
    market: EquityMarketInput,
    quanto: Optional[QuantoInput] = None,
    calculate_spot_delta: bool = False,
    spot_delta_bump_pct: float = 0.01,
    pv01_curve: Optional[str] = None,
    pv01_bump_bp: float = 1.0,
) -> EquityPricingResult:
    """Price an equity return cash flow (plain or quanto) and optionally its risks."""
    if pv01_curve is not None and pv01_curve not in PV01_CURVES:
        raise ValueError(
            f"pv01Curve must be one of {list(PV01_CURVES)}, got '{pv01_curve}'"
        )
    if calculate_spot_delta and market.spot is None:
        raise ValueError("Spot delta requires market.spot")

    with SavedSettings():
        settings.evaluation_date = market.evaluation_date
        index, handles = _index_from_input(market)
        try:
            cf = EquityCashFlow(
                notional=cash_flow.notional,
                index=index,
                base_date=cash_flow.base_date,
                fixing_date=cash_flow.fixing_date,
                payment_date=cash_flow.payment_date or cash_flow.fixing_date,
            )
            quanto_forward = None
            if quanto is not None:
                pricer = _quanto_pricer_from_input(quanto, handles)
                cf.set_pricer(pricer)
                amount = cf.amount()
                qf = pricer.quanto_forward(cf)
                quanto_forward = QuantoForwardResult(
                    time=qf.time,
                    strike=qf.strike,
                    quanto_rate=qf.quanto_rate,
                    dividend_yield=qf.dividend_yield,
                    equity_volatility=qf.equity_volatility,
                    fx_volatility=qf.fx_volatility,
                    correlation=qf.correlation,
                    spot=qf.spot,
                    forward=qf.forward,
                )
            else:
                amount = cf.amount()

            delta_val = None
            pv01_val = None
            if calculate_spot_delta:
                delta_val = spot_delta(cf, handles.spot, bump_pct=spot_delta_bump_pct)
            if pv01_curve is not None:
                handle = getattr(handles, pv01_curve)
                if handle.empty:
                    raise ValueError(f"PV01: curve '{pv01_curve}' is not set in this request")
                pv01_val = rate_pv01(cf, handle, bump_bp=pv01_bump_bp)
        finally:
            index.clear_fixings()

    if delta_val is not None or pv01_val is not None:
        risk_measures = RiskMeasures(spot_delta=delta_val, pv01=pv01_val)
    else:
        risk_measures = None
    return EquityPricingResult(
        amount=amount, quanto_forward=quanto_forward, risk_measures=risk_measures
    )
