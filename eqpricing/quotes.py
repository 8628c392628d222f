"""Scalar market quotes (spot levels, correlations, flat rates or vols)."""

from __future__ import annotations

import math

from eqpricing.observable import Observable


class SimpleQuote(Observable):
    """Mutable scalar quote. Setting a different value notifies observers."""

    def __init__(self, value: float | None = None) -> None:
        super().__init__()
        self._value = value

    @property
    def is_valid(self) -> bool:
        return self._value is not None

    @property
    def value(self) -> float:
        if self._value is None:
            raise ValueError("invalid SimpleQuote")
        return self._value

    @value.setter
    def value(self, value: float | None) -> None:
        self.set_value(value)

    def set_value(self, value: float | None) -> float:
        """Set a new value; returns the change (0.0 when unchanged or invalidated)."""
        old = self._value
        if old == value:
            return 0.0
        self._value = value
        self.notify_observers()
        if old is None or value is None or math.isnan(value):
            return 0.0
        return value - old

    def reset(self) -> None:
        """Invalidate the quote."""
        self.set_value(None)

    def __repr__(self) -> str:
        return f"SimpleQuote({self._value!r})"
