"""Lazily calculated objects with an explicit FRESH/STALE cache state."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum

from eqpricing.observable import Observable, Observer


class CacheState(str, Enum):
    """Cache state of a lazy object."""

    FRESH = "fresh"
    STALE = "stale"


class LazyObject(ABC, Observable, Observer):
    """
    Base class for objects whose results are computed on demand and cached.

    - Starts STALE: nothing has been computed yet.
    - `calculate()` runs `perform_calculations()` only when STALE and moves to FRESH
      on success. If the calculation raises, the object stays STALE.
    - `update()` (a notification from anything observed) only flips the state to
      STALE and forwards the notification; no recomputation happens until the next read.
    """

    def __init__(self) -> None:
        Observable.__init__(self)
        Observer.__init__(self)
        self._state = CacheState.STALE
        self._updating = False

    @property
    def state(self) -> CacheState:
        return self._state

    @property
    def is_fresh(self) -> bool:
        return self._state is CacheState.FRESH

    def update(self) -> None:
        if self._updating:
            return
        self._updating = True
        try:
            self._state = CacheState.STALE
            self.notify_observers()
        finally:
            self._updating = False

    def calculate(self) -> None:
        if self._state is CacheState.FRESH:
            return
        self.perform_calculations()
        self._state = CacheState.FRESH

    def recalculate(self) -> None:
        """Force a recalculation regardless of the current state."""
        self._state = CacheState.STALE
        self.calculate()
        self.notify_observers()

    @abstractmethod
    def perform_calculations(self) -> None:
        """Compute and store results. Must not change the cache state itself."""
        ...
