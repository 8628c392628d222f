"""
Pricer for quanto-adjusted equity return cash flows.

The equity is observed in its own currency but the return is paid in the quanto
currency without FX conversion. Under the quanto currency's risk-neutral measure
the lognormal equity picks up a covariance drift correction:

    F = S0 * exp((r_f - q - rho * sigma_eq * sigma_fx) * t)

and the cash flow pays  notional * (F / I(base_date) - 1).
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import date
from typing import TYPE_CHECKING

from eqpricing.errors import InconsistentReferenceDateError, MissingMarketDataError
from eqpricing.handles import Handle
from eqpricing.interfaces import BlackVolTermStructure, Quote, YieldTermStructure
from eqpricing.pricers.base import BaseEquityPricer

if TYPE_CHECKING:
    from eqpricing.cashflows import EquityCashFlow

# FX vol is read at a fixed unit strike.
FX_ATM_STRIKE = 1.0


@dataclass(frozen=True)
class QuantoForward:
    """Inputs and result of the quanto forward calculation for one cash flow."""

    fixing_date: date
    time: float
    strike: float
    quanto_rate: float
    dividend_yield: float
    equity_volatility: float
    fx_volatility: float
    correlation: float
    spot: float
    forward: float

    @property
    def drift_adjustment(self) -> float:
        """The -rho * sigma_eq * sigma_fx covariance term."""
        return -self.correlation * self.equity_volatility * self.fx_volatility


class QuantoPricer(BaseEquityPricer):
    """Quanto-adjusted equity return pricer.

    Handles may be empty (or relinked) after construction; they are validated
    only when a cash flow is valued.
    """

    def __init__(
        self,
        quanto_curve: Handle[YieldTermStructure],
        equity_volatility: Handle[BlackVolTermStructure],
        fx_volatility: Handle[BlackVolTermStructure],
        correlation: Handle[Quote],
    ) -> None:
        super().__init__()
        self.quanto_curve = quanto_curve
        self.equity_volatility = equity_volatility
        self.fx_volatility = fx_volatility
        self.correlation = correlation
        for handle in (quanto_curve, equity_volatility, fx_volatility, correlation):
            self.register_with(handle)

    def _validate(self) -> None:
        if self.quanto_curve.empty or self.equity_volatility.empty or self.fx_volatility.empty:
            raise MissingMarketDataError(
                "Quanto currency, equity and FX volatility term structure handles cannot be empty."
            )
        reference = self.quanto_curve.current_link.reference_date
        if (
            self.equity_volatility.current_link.reference_date != reference
            or self.fx_volatility.current_link.reference_date != reference
        ):
            raise InconsistentReferenceDateError(
                "Quanto currency term structure, equity and FX volatility need to have "
                "the same reference date."
            )
        if self.correlation.empty:
            raise MissingMarketDataError("Correlation handle cannot be empty.")

    def quanto_forward(self, cashflow: EquityCashFlow) -> QuantoForward:
        """Quanto-adjusted forward of the index at the cash flow's fixing date."""
        self._validate()
        index = cashflow.index
        fixing_date = cashflow.fixing_date
        curve = self.quanto_curve.current_link

        time = curve.time_from_reference(fixing_date)
        strike = index.fixing(fixing_date)
        rf = curve.zero_rate(time)
        q = 0.0 if index.dividend.empty else index.dividend.current_link.zero_rate(time)
        eq_vol = self.equity_volatility.current_link.black_vol(fixing_date, strike)
        fx_vol = self.fx_volatility.current_link.black_vol(fixing_date, FX_ATM_STRIKE)
        rho = self.correlation.current_link.value
        spot = index.spot_value()

        forward = spot * math.exp((rf - q - rho * eq_vol * fx_vol) * time)
        return QuantoForward(
            fixing_date=fixing_date,
            time=time,
            strike=strike,
            quanto_rate=rf,
            dividend_yield=q,
            equity_volatility=eq_vol,
            fx_volatility=fx_vol,
            correlation=rho,
            spot=spot,
            forward=forward,
        )

    def amount(self, cashflow: EquityCashFlow) -> float:
        forward = self.quanto_forward(cashflow).forward
        base = cashflow.index.fixing(cashflow.base_date)
        return cashflow.notional * (forward / base - 1.0)
