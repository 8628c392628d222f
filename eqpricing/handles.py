"""
Relinkable handles to market-data objects.

A `Handle` is the shared indirection between market data and everything priced
off it: indexes and pricers hold handles, never the curves themselves, so a whole
set of cash flows can be moved to new market data with a single `link_to()`.
"""

from __future__ import annotations

from typing import Generic, TypeVar

import structlog

from eqpricing.errors import EmptyHandleError
from eqpricing.observable import ForwardingObserver, Observable

logger = structlog.get_logger(__name__)

T = TypeVar("T")


class Handle(ForwardingObserver, Generic[T]):
    """
    Shared, re-pointable reference to a market-data object.

    - Either empty or pointing at exactly one object.
    - Observers of the handle are notified on every relink, and on every
      notification from the current target when that target is observable
      (e.g. a `SimpleQuote` changing value).
    """

    def __init__(self, link: T | None = None, label: str | None = None) -> None:
        super().__init__()
        self.label = label
        self._link: T | None = None
        self._attach_link(link)

    @property
    def empty(self) -> bool:
        return self._link is None

    @property
    def current_link(self) -> T:
        """The object currently pointed to. Raises EmptyHandleError if empty."""
        if self._link is None:
            raise EmptyHandleError("empty Handle cannot be dereferenced")
        return self._link

    def link_to(self, link: T | None) -> None:
        """Re-point the handle (None empties it) and notify observers."""
        if link is self._link:
            return
        if isinstance(self._link, Observable):
            self.unregister_with(self._link)
        self._attach_link(link)
        logger.debug(
            "handle_relinked",
            handle=self.label,
            target=type(link).__name__ if link is not None else None,
        )
        self.notify_observers()

    def _attach_link(self, link: T | None) -> None:
        self._link = link
        if isinstance(link, Observable):
            self.register_with(link)

    def __repr__(self) -> str:
        name = self.label or "Handle"
        return f"{name}({self._link!r})"
