"""
Change-notification graph.

An `Observable` keeps *weak* back-references to the observers registered with it,
so a curve or quote never keeps a cash flow alive. An `Observer` keeps strong
references to what it observes (it needs them to compute anyway).

Notification is a plain walk over the current observers calling `update()`;
observers only flip flags and forward the notification, they never recompute
while the walk is in progress.
"""

from __future__ import annotations

import weakref


class Observable:
    """Something observers can register with to be told when it changes."""

    def __init__(self) -> None:
        self._observers: weakref.WeakSet[Observer] = weakref.WeakSet()

    @property
    def observer_count(self) -> int:
        return len(self._observers)

    def notify_observers(self) -> None:
        """Call `update()` on every live observer."""
        # Snapshot: observers may (un)register while being updated.
        for observer in list(self._observers):
            observer.update()

    def _attach(self, observer: Observer) -> None:
        self._observers.add(observer)

    def _detach(self, observer: Observer) -> None:
        self._observers.discard(observer)


class Observer:
    """Something that wants to know when its observables change.

    The default `update()` does nothing; subclasses that are themselves
    observable forward the notification (see `ForwardingObserver`).
    """

    def __init__(self) -> None:
        self._observables: list[Observable] = []

    def register_with(self, observable: Observable | None) -> None:
        if observable is None:
            return
        if any(o is observable for o in self._observables):
            return
        observable._attach(self)
        self._observables.append(observable)

    def unregister_with(self, observable: Observable | None) -> None:
        if observable is None:
            return
        observable._detach(self)
        self._observables = [o for o in self._observables if o is not observable]

    def unregister_with_all(self) -> None:
        for observable in self._observables:
            observable._detach(self)
        self._observables = []

    def update(self) -> None:
        """Called by an observable this object is registered with."""


class ForwardingObserver(Observable, Observer):
    """Observer that re-broadcasts every notification to its own observers.

    Indexes, pricers and term structures sit in the middle of the graph and
    behave this way. Re-entrant notifications (cycles) are ignored.
    """

    def __init__(self) -> None:
        Observable.__init__(self)
        Observer.__init__(self)
        self._notifying = False

    def update(self) -> None:
        if self._notifying:
            return
        self._notifying = True
        try:
            self.notify_observers()
        finally:
            self._notifying = False
