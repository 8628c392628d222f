"""
Equity return cash flow.

The cash flow is data plus a cache: amount computation is delegated to the
attached pricer, run lazily on `amount()` and cached until anything reachable
through the index or the pricer notifies a change.
"""

from __future__ import annotations

from datetime import date

import structlog

from eqpricing.errors import DateOrderingError
from eqpricing.indexes import EquityIndex
from eqpricing.lazy import LazyObject
from eqpricing.pricers.base import BaseEquityPricer
from eqpricing.pricers.simple_pricer import SimpleReturnPricer

logger = structlog.get_logger(__name__)

# Used when no pricer has been attached.
_default_pricer = SimpleReturnPricer()


class EquityCashFlow(LazyObject):
    """
    Pays notional * (index return between base_date and fixing_date) on payment_date.

    - `notional` may be negative (short the return).
    - `fixing_date` must not precede `base_date`; checked at valuation, not here.
    """

    def __init__(
        self,
        notional: float,
        index: EquityIndex,
        base_date: date,
        fixing_date: date,
        payment_date: date,
        pricer: BaseEquityPricer | None = None,
    ) -> None:
        super().__init__()
        self.notional = notional
        self.index = index
        self.base_date = base_date
        self.fixing_date = fixing_date
        self.payment_date = payment_date
        self._pricer: BaseEquityPricer | None = None
        self._amount: float | None = None
        self.register_with(index)
        if pricer is not None:
            self.set_pricer(pricer)

    @property
    def pricer(self) -> BaseEquityPricer | None:
        return self._pricer

    def set_pricer(self, pricer: BaseEquityPricer | None) -> None:
        """Attach (or replace) the pricer; always leaves the cache stale."""
        if self._pricer is not None:
            self.unregister_with(self._pricer)
        self._pricer = pricer
        self.register_with(pricer)
        logger.debug(
            "pricer_attached",
            index=self.index.name,
            pricer=type(pricer).__name__ if pricer is not None else None,
        )
        self.update()

    def has_occurred(self, ref_date: date) -> bool:
        """True once the payment date is strictly before `ref_date`."""
        return self.payment_date < ref_date

    def perform_calculations(self) -> None:
        if self.fixing_date < self.base_date:
            raise DateOrderingError("Fixing date cannot fall before base date.")
        pricer = self._pricer or _default_pricer
        self._amount = pricer.amount(self)
        logger.debug(
            "cashflow_recalculated",
            index=self.index.name,
            base_date=self.base_date.isoformat(),
            fixing_date=self.fixing_date.isoformat(),
            pricer=type(pricer).__name__,
            amount=self._amount,
        )

    def amount(self) -> float:
        """Cash amount; recomputed only if something changed since the last call."""
        self.calculate()
        assert self._amount is not None
        return self._amount

    def __repr__(self) -> str:
        return (
            f"EquityCashFlow(notional={self.notional!r}, index={self.index.name!r}, "
            f"base_date={self.base_date}, fixing_date={self.fixing_date}, "
            f"payment_date={self.payment_date})"
        )
