"""Spot delta risk measure (quote bump, finite difference)."""

from __future__ import annotations

from dataclasses import dataclass

import structlog

from eqpricing.cashflows import EquityCashFlow
from eqpricing.quotes import SimpleQuote
from eqpricing.risk.base import BaseRiskMeasure

logger = structlog.get_logger(__name__)


@dataclass
class SpotDelta(BaseRiskMeasure):
    """Spot delta: (amount(bumped) - amount(base)) / (spot_bumped - spot)."""

    quote: SimpleQuote
    bump_pct: float = 0.01

    @property
    def name(self) -> str:
        return "SpotDelta"

    def compute(self, cashflow: EquityCashFlow) -> float:
        """Finite-difference delta with relative spot bump; the quote is restored."""
        spot = self.quote.value
        spot_bumped = spot * (1.0 + self.bump_pct)
        base_amount = cashflow.amount()
        self.quote.value = spot_bumped
        logger.debug("spot_bumped", spot=spot, spot_bumped=spot_bumped)
        try:
            bumped_amount = cashflow.amount()
        finally:
            self.quote.value = spot
        return (bumped_amount - base_amount) / (spot_bumped - spot)
