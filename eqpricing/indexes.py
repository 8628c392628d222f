"""
Equity index: historic fixings plus a risk-neutral forecast from market data.

An `EquityIndex` answers "what was / will the index level be on date D":
- on or before the evaluation date, from the shared fixing history;
- after it, as the forward  spot * DF_div(D) / DF_rate(D).

It holds handles (rate curve, dividend curve, spot quote), never the market
objects themselves, and forwards every change notification from them, from the
fixing history and from the evaluation date to its own observers.
"""

from __future__ import annotations

from collections.abc import Iterable
from datetime import date

from eqpricing.errors import InvalidFixingDateError, MissingFixingError, MissingMarketDataError
from eqpricing.fixings import index_manager
from eqpricing.handles import Handle
from eqpricing.interfaces import Calendar, Quote, YieldTermStructure
from eqpricing.observable import ForwardingObserver
from eqpricing.settings import settings


class EquityIndex(ForwardingObserver):
    """Equity index (single stock or basket) with fixing history and forecast."""

    def __init__(
        self,
        name: str,
        fixing_calendar: Calendar,
        interest: Handle[YieldTermStructure] | None = None,
        dividend: Handle[YieldTermStructure] | None = None,
        spot: Handle[Quote] | None = None,
    ) -> None:
        super().__init__()
        self._name = name
        self.fixing_calendar = fixing_calendar
        self.interest = interest if interest is not None else Handle()
        self.dividend = dividend if dividend is not None else Handle()
        self.spot = spot if spot is not None else Handle()

        self.register_with(self.interest)
        self.register_with(self.dividend)
        self.register_with(self.spot)
        self.register_with(settings)
        self.register_with(index_manager.notifier(name))

    @property
    def name(self) -> str:
        return self._name

    def is_valid_fixing_date(self, d: date) -> bool:
        return self.fixing_calendar.is_business_day(d)

    # --- fixings ---

    def fixing(self, fixing_date: date, forecast_todays_fixing: bool = False) -> float:
        """
        Index level on `fixing_date`.

        Past dates (and today, unless today's history is not enforced) come from
        the fixing history; future dates are forecast.
        """
        if not self.is_valid_fixing_date(fixing_date):
            raise InvalidFixingDateError(f"Fixing date {fixing_date} is not valid")

        today = settings.evaluation_date
        if fixing_date > today or (fixing_date == today and forecast_todays_fixing):
            return self.forecast_fixing(fixing_date)

        if fixing_date < today or settings.enforces_todays_historic_fixings:
            past = self.past_fixing(fixing_date)
            if past is None:
                raise MissingFixingError(f"Missing {self.name} fixing for {fixing_date}")
            return past

        # Today, not enforced: history if available, otherwise forecast.
        past = self.past_fixing(fixing_date)
        if past is not None:
            return past
        return self.forecast_fixing(fixing_date)

    def past_fixing(self, fixing_date: date) -> float | None:
        if not self.is_valid_fixing_date(fixing_date):
            raise InvalidFixingDateError(f"Fixing date {fixing_date} is not valid")
        return index_manager.fixing(self.name, fixing_date)

    def forecast_fixing(self, fixing_date: date) -> float:
        """Risk-neutral forward: spot * DF_div(D) / DF_rate(D)."""
        if self.interest.empty:
            raise MissingMarketDataError(
                f"null interest rate term structure set to this instance of {self.name}"
            )
        forward = self.spot_value() / self.interest.current_link.discount(fixing_date)
        if not self.dividend.empty:
            forward *= self.dividend.current_link.discount(fixing_date)
        return forward

    def spot_value(self) -> float:
        """Spot quote if linked, otherwise today's historic fixing."""
        if not self.spot.empty:
            return self.spot.current_link.value
        spot = index_manager.fixing(self.name, settings.evaluation_date)
        if spot is None:
            raise MissingMarketDataError(
                "Cannot forecast equity index, missing both spot and historical index"
            )
        return spot

    def add_fixing(self, fixing_date: date, value: float) -> None:
        """Store a fixing; a later write on the same date overwrites."""
        if not self.is_valid_fixing_date(fixing_date):
            raise InvalidFixingDateError(f"Fixing date {fixing_date} is not valid")
        index_manager.add_fixing(self.name, fixing_date, value)

    def add_fixings(self, fixings: Iterable[tuple[date, float]]) -> None:
        fixings = list(fixings)
        for fixing_date, _ in fixings:
            if not self.is_valid_fixing_date(fixing_date):
                raise InvalidFixingDateError(f"Fixing date {fixing_date} is not valid")
        index_manager.add_fixings(self.name, fixings)

    def clear_fixings(self) -> None:
        index_manager.clear_history(self.name)

    @property
    def time_series(self) -> dict[date, float]:
        return index_manager.history(self.name)

    # --- variants ---

    def clone(
        self,
        interest: Handle[YieldTermStructure],
        dividend: Handle[YieldTermStructure],
        spot: Handle[Quote],
    ) -> "EquityIndex":
        """Same name, calendar and fixing history; different market-data bindings.

        Passing an empty dividend handle gives the price-return variant.
        """
        return EquityIndex(self.name, self.fixing_calendar, interest, dividend, spot)

    def __repr__(self) -> str:
        return f"EquityIndex(name={self.name!r})"
