"""Pricer for plain (non-quanto) equity return cash flows."""

from __future__ import annotations

from typing import TYPE_CHECKING

from eqpricing.pricers.base import BaseEquityPricer

if TYPE_CHECKING:
    from eqpricing.cashflows import EquityCashFlow


class SimpleReturnPricer(BaseEquityPricer):
    """Percentage return of the index, no currency adjustment."""

    def amount(self, cashflow: EquityCashFlow) -> float:
        """
        amount = notional * (I(fixing_date) / I(base_date) - 1)
        """
        index = cashflow.index
        end = index.fixing(cashflow.fixing_date)
        start = index.fixing(cashflow.base_date)
        return cashflow.notional * (end / start - 1.0)
