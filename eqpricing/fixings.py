"""
Global fixing-history store.

Histories are keyed by upper-cased index name, so every index object sharing a
name (e.g. an index and its dividend-stripped clone) shares one history. Each
name has its own notifier: any change to that history notifies the indexes
bound to it.
"""

from __future__ import annotations

from collections.abc import Iterable
from datetime import date

import structlog

from eqpricing.observable import Observable

logger = structlog.get_logger(__name__)


class IndexManager:
    """Name-keyed store of Date -> level fixing histories."""

    def __init__(self) -> None:
        self._histories: dict[str, dict[date, float]] = {}
        self._notifiers: dict[str, Observable] = {}

    @staticmethod
    def _key(name: str) -> str:
        return name.upper()

    def notifier(self, name: str) -> Observable:
        """Observable fired whenever the history for `name` changes."""
        return self._notifiers.setdefault(self._key(name), Observable())

    def has_history(self, name: str) -> bool:
        return bool(self._histories.get(self._key(name)))

    def history(self, name: str) -> dict[date, float]:
        """Copy of the history for `name` (empty if none)."""
        return dict(self._histories.get(self._key(name), {}))

    def fixing(self, name: str, d: date) -> float | None:
        return self._histories.get(self._key(name), {}).get(d)

    def add_fixing(self, name: str, d: date, value: float) -> None:
        """Store one fixing; an existing value on the same date is overwritten."""
        self.add_fixings(name, [(d, value)])

    def add_fixings(self, name: str, fixings: Iterable[tuple[date, float]]) -> None:
        key = self._key(name)
        history = self._histories.setdefault(key, {})
        for d, value in fixings:
            previous = history.get(d)
            if previous is not None and previous != value:
                logger.info(
                    "fixing_overwritten",
                    index=key,
                    date=d.isoformat(),
                    previous=previous,
                    value=value,
                )
            history[d] = value
        self.notifier(key).notify_observers()

    def clear_history(self, name: str) -> None:
        key = self._key(name)
        self._histories.pop(key, None)
        self.notifier(key).notify_observers()

    def clear_histories(self) -> None:
        keys = list(self._histories)
        self._histories.clear()
        for key in keys:
            self.notifier(key).notify_observers()


index_manager = IndexManager()
