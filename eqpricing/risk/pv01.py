"""Parallel rate PV01 risk measure (relink-and-reprice)."""

from __future__ import annotations

from dataclasses import dataclass

import structlog

from eqpricing.cashflows import EquityCashFlow
from eqpricing.handles import Handle
from eqpricing.interfaces import YieldTermStructure
from eqpricing.risk.base import BaseRiskMeasure

logger = structlog.get_logger(__name__)


@dataclass
class RatePV01(BaseRiskMeasure):
    """Parallel PV01: amount change when the curve behind `handle` shifts in parallel."""

    handle: Handle[YieldTermStructure]
    bump_bp: float = 1.0

    @property
    def name(self) -> str:
        return f"PV01_{self.handle.label or 'curve'}"

    def compute(self, cashflow: EquityCashFlow) -> float:
        """amount(bumped) - amount(base); the original curve is relinked afterwards."""
        bump = self.bump_bp / 10000.0
        base_amount = cashflow.amount()
        curve = self.handle.current_link
        self.handle.link_to(curve.bumped(bump))
        logger.debug("curve_bumped", handle=self.handle.label, bump_bp=self.bump_bp)
        try:
            bumped_amount = cashflow.amount()
        finally:
            self.handle.link_to(curve)
        return bumped_amount - base_amount
