from __future__ import annotations

import logging
from datetime import date
from typing import Iterable, Iterator, Optional, Sequence

import numpy as np

from baseunits.intervals import LookAheadIterator
from baseunits.specification import Specification

from ._exceptions import CalendarError, NegativeCountError
from .calendar_interval import CalendarInterval
from .date_specification import fixed, never

logger = logging.getLogger(__name__)


class BusinessCalendar:
    """
    Decides which days are business days and counts in business days.

    A business day is neither a weekend day nor a holiday.  Weekends follow
    the fixed ``WEEKMASK`` (Monday first, Saturday and Sunday off); holidays
    are an accumulated :class:`Specification` that starts out as
    :func:`~baseunits.calendar.date_specification.never`.  Holiday rules can
    be added but never removed.

    Arithmetic walks an unbounded day stream.  A holiday rule that covers
    every weekday makes these walks run forever.
    """

    WEEKMASK: str = "1111100"

    def __init__(self, holidays: Optional[Iterable[date]] = None) -> None:
        self._holiday_spec: Specification[date] = self._default_holiday_spec()
        if holidays:
            self.add_holidays(holidays)

    def _default_holiday_spec(self) -> Specification[date]:
        """Override to seed an organisation's standing holiday rules."""
        return never()

    # ── holiday management ───────────────────────────────────────────────

    @property
    def holiday_spec(self) -> Specification[date]:
        return self._holiday_spec

    def add_holiday(self, day: date) -> None:
        self.add_holiday_spec(fixed(day))

    def add_holidays(self, days: Iterable[date]) -> None:
        for day in days:
            self.add_holiday(day)

    def add_holiday_spec(self, spec: Specification[date]) -> None:
        self._holiday_spec = self._holiday_spec.or_(spec)
        logger.debug("Added holiday rule %r", spec)

    # ── classification ───────────────────────────────────────────────────

    def is_weekend(self, day: date) -> bool:
        return not bool(np.is_busday(np.datetime64(day, "D"), weekmask=self.WEEKMASK))

    def is_holiday(self, day: date) -> bool:
        return self._holiday_spec.is_satisfied_by(day)

    def is_business_day(self, day: date) -> bool:
        return not self.is_weekend(day) and not self.is_holiday(day)

    def business_day_mask(self, days: Sequence[date]) -> np.ndarray:
        """Element-wise :meth:`is_business_day` as a boolean array."""
        d = np.asarray(days, dtype="datetime64[D]").reshape(-1)
        working = np.is_busday(d, weekmask=self.WEEKMASK)
        holiday = np.fromiter(
            (self.is_holiday(day) for day in days), dtype=bool, count=d.size
        )
        return working & ~holiday

    # ── iteration ────────────────────────────────────────────────────────

    def business_days_only(self, days: Iterator[date]) -> LookAheadIterator[date]:
        """
        Lazily filter ``days`` down to business days.

        ``days`` is consumed by the returned iterator and must not be
        advanced elsewhere while it is in use.
        """
        return LookAheadIterator(iter(days), self.is_business_day)

    def get_elapsed_business_days(self, interval: CalendarInterval) -> int:
        if not interval.has_lower_limit or not interval.has_upper_limit:
            raise CalendarError("Business days can only be counted over a bounded interval.")
        return sum(1 for _ in self.business_days_only(interval.days_iterator()))

    # ── arithmetic ───────────────────────────────────────────────────────

    def _nth_business_day(self, n: int, days: Iterator[date]) -> date:
        business_days = self.business_days_only(days)
        for _ in range(n):
            next(business_days)
        return next(business_days)

    def plus_business_days(self, start: date, number_of_days: int) -> date:
        """
        The ``number_of_days``-th business day after the first business day
        on or after ``start``; ``0`` returns that first business day.
        """
        if number_of_days < 0:
            raise NegativeCountError(
                f"Negative number of business days not supported; got {number_of_days}."
            )
        days = CalendarInterval.ever_from(start).days_iterator()
        result = self._nth_business_day(number_of_days, days)
        logger.debug("%s plus %d business days: %s", start, number_of_days, result)
        return result

    def minus_business_days(self, start: date, number_of_days: int) -> date:
        if number_of_days < 0:
            raise NegativeCountError(
                f"Negative number of business days not supported; got {number_of_days}."
            )
        days = CalendarInterval.ever_preceding(start).days_in_reverse_iterator()
        result = self._nth_business_day(number_of_days, days)
        logger.debug("%s minus %d business days: %s", start, number_of_days, result)
        return result

    def next_business_day(self, start: date) -> date:
        return self.plus_business_days(start, 1 if self.is_business_day(start) else 0)

    def prev_business_day(self, start: date) -> date:
        return self.minus_business_days(start, 1 if self.is_business_day(start) else 0)

    def nearest_next_business_day(self, day: date) -> date:
        return day if self.is_business_day(day) else self.next_business_day(day)

    def nearest_prev_business_day(self, day: date) -> date:
        return day if self.is_business_day(day) else self.prev_business_day(day)

    def __repr__(self) -> str:
        return f"BusinessCalendar(weekmask={self.WEEKMASK!r}, holidays={self._holiday_spec!r})"
