"""
Global evaluation-date context.

Everything that depends on "today" (index fixing dispatch, term structures without a
pinned reference date) registers with `settings`; moving the evaluation date
notifies them, which in turn marks dependent cash flows stale.
"""

from __future__ import annotations

from datetime import date

from eqpricing.config import get_config
from eqpricing.observable import Observable


class Settings(Observable):
    """Process-wide evaluation settings (single-threaded use)."""

    def __init__(self) -> None:
        super().__init__()
        self._evaluation_date: date | None = None
        self.enforces_todays_historic_fixings = (
            get_config().enforce_todays_historic_fixings
        )

    @property
    def evaluation_date(self) -> date:
        """The evaluation date; defaults to the system date until set."""
        return self._evaluation_date or date.today()

    @evaluation_date.setter
    def evaluation_date(self, value: date | None) -> None:
        if value == self._evaluation_date:
            return
        self._evaluation_date = value
        self.notify_observers()

    def anchor_evaluation_date(self) -> None:
        """Pin the evaluation date to today so it does not roll over at midnight."""
        if self._evaluation_date is None:
            self.evaluation_date = date.today()

    def reset_evaluation_date(self) -> None:
        self.evaluation_date = None


settings = Settings()


class SavedSettings:
    """Context manager restoring the evaluation settings on exit.

    >>> with SavedSettings():
    ...     settings.evaluation_date = date(2023, 1, 27)
    """

    def __enter__(self) -> SavedSettings:
        self._evaluation_date = settings._evaluation_date
        self._enforces = settings.enforces_todays_historic_fixings
        return self

    def __exit__(self, *exc_info: object) -> None:
        settings.evaluation_date = self._evaluation_date
        settings.enforces_todays_historic_fixings = self._enforces
