from __future__ import annotations

from datetime import date
from typing import Callable, Optional

from baseunits.intervals import LookAheadIterator
from baseunits.specification import Predicate, Specification

from .calendar_interval import CalendarInterval


def iterate_over(spec: Specification[date], interval: CalendarInterval) -> LookAheadIterator[date]:
    """Days of ``interval``, in ascending order, that satisfy ``spec``."""
    return LookAheadIterator(interval.days_iterator(), spec.is_satisfied_by)


def first_occurrence_in(spec: Specification[date], interval: CalendarInterval) -> Optional[date]:
    return next(iterate_over(spec, interval), None)


class DateSpecification(Predicate[date]):
    """
    A predicate over calendar days.

    Combining date specifications with ``and_``, ``or_``, ``not_`` (or
    ``&``, ``|``, ``~``) yields plain composite specifications, which no
    longer carry :meth:`iterate_over` and :meth:`first_occurrence_in`.  Use
    the module-level :func:`iterate_over` and :func:`first_occurrence_in` for
    those, e.g. on ``BusinessCalendar.holiday_spec``.
    """

    def __init__(self, test: Callable[[date], bool], name: str = "date") -> None:
        super().__init__(test, name)

    def iterate_over(self, interval: CalendarInterval) -> LookAheadIterator[date]:
        return iterate_over(self, interval)

    def first_occurrence_in(self, interval: CalendarInterval) -> Optional[date]:
        return first_occurrence_in(self, interval)


class FixedDateSpecification(DateSpecification):

    def __init__(self, day: date) -> None:
        super().__init__(self._matches, f"fixed {day.isoformat()}")
        self.day = day

    def _matches(self, candidate: date) -> bool:
        return candidate == self.day


class AnnualDateSpecification(DateSpecification):
    """The same month and day every year, e.g. 25 December."""

    def __init__(self, month: int, day: int) -> None:
        # Validated against a leap year so that 29 February is accepted.
        try:
            date(2000, month, day)
        except ValueError as exc:
            raise ValueError(f"Invalid annual date {month}/{day}: {exc}") from exc
        super().__init__(self._matches, f"annual {month:02d}-{day:02d}")
        self.month = month
        self.day = day

    def _matches(self, candidate: date) -> bool:
        return candidate.month == self.month and candidate.day == self.day

    def of_year(self, year: int) -> date:
        return date(year, self.month, self.day)


class NthWeekdayInMonthSpecification(DateSpecification):
    """
    The n-th occurrence of a weekday within a month, e.g. the third Monday
    of January.  ``weekday`` follows :meth:`datetime.date.weekday`
    (Monday is 0), ``n`` runs from 1 to 5.
    """

    def __init__(self, month: int, weekday: int, n: int) -> None:
        if not 1 <= month <= 12:
            raise ValueError(f"Month must be in 1..12; got {month}.")
        if not 0 <= weekday <= 6:
            raise ValueError(f"Weekday must be in 0..6; got {weekday}.")
        if not 1 <= n <= 5:
            raise ValueError(f"Occurrence must be in 1..5; got {n}.")
        super().__init__(self._matches, f"weekday {weekday} #{n} of month {month}")
        self.month = month
        self.weekday = weekday
        self.n = n

    def _matches(self, candidate: date) -> bool:
        return (
            candidate.month == self.month
            and candidate.weekday() == self.weekday
            and (candidate.day - 1) // 7 + 1 == self.n
        )

    def of_year(self, year: int) -> date:
        """Raises ``ValueError`` when the month has no such occurrence that year."""
        first = date(year, self.month, 1)
        offset = (self.weekday - first.weekday()) % 7
        return date(year, self.month, 1 + offset + 7 * (self.n - 1))


def fixed(day: date) -> FixedDateSpecification:
    return FixedDateSpecification(day)


def annual_date(month: int, day: int) -> AnnualDateSpecification:
    return AnnualDateSpecification(month, day)


def nth_weekday_in_month(month: int, weekday: int, n: int) -> NthWeekdayInMonthSpecification:
    return NthWeekdayInMonthSpecification(month, weekday, n)


def never() -> DateSpecification:
    return DateSpecification(lambda _: False, "never")
