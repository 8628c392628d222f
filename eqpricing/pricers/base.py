"""Base pricer abstract class for equity cash flow pricers."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from eqpricing.observable import ForwardingObserver

if TYPE_CHECKING:
    from eqpricing.cashflows import EquityCashFlow


class BaseEquityPricer(ForwardingObserver, ABC):
    """Abstract base class for equity cash flow pricers.

    A pricer holds only market-data handles, never per-cash-flow state, so one
    instance can be shared by many cash flows. It observes its handles and
    forwards their notifications to the cash flows it is attached to.
    """

    @abstractmethod
    def amount(self, cashflow: EquityCashFlow) -> float:
        """Cash amount of `cashflow` in the payoff currency."""
        ...
