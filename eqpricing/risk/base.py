"""Base class for risk measure implementations."""

from __future__ import annotations

from abc import ABC, abstractmethod

from eqpricing.cashflows import EquityCashFlow


class BaseRiskMeasure(ABC):
    """Base class for risk measure implementations."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable name."""
        ...

    @abstractmethod
    def compute(self, cashflow: EquityCashFlow) -> float:
        """Compute the risk measure value."""
        ...
