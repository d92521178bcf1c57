from __future__ import annotations

from datetime import date, timedelta
from typing import Iterator, Optional

from baseunits.intervals import Interval, IntervalError

_ONE_DAY = timedelta(days=1)


def _step(day: date, step: timedelta) -> Optional[date]:
    try:
        return day + step
    except OverflowError:
        return None


class CalendarInterval(Interval[date]):
    """
    Range of calendar days.

    Either side may be open-ended, in which case the day stream in that
    direction only stops at ``date.max`` / ``date.min``.
    """

    @classmethod
    def inclusive(cls, start: date, end: date) -> CalendarInterval:
        return cls.closed(start, end)

    @classmethod
    def ever_from(cls, start: date) -> CalendarInterval:
        return cls.closed(start, None)

    @classmethod
    def ever_preceding(cls, end: date) -> CalendarInterval:
        return cls.closed(None, end)

    @classmethod
    def single_day(cls, day: date) -> CalendarInterval:
        return cls.single_element(day)

    @property
    def start(self) -> Optional[date]:
        return self.lower_limit

    @property
    def end(self) -> Optional[date]:
        return self.upper_limit

    def days_iterator(self) -> Iterator[date]:
        if not self.has_lower_limit:
            raise IntervalError("Cannot iterate forward from an unbounded start.")
        return self._walk(self.lower.value, _ONE_DAY)

    def days_in_reverse_iterator(self) -> Iterator[date]:
        if not self.has_upper_limit:
            raise IntervalError("Cannot iterate backward from an unbounded end.")
        return self._walk(self.upper.value, -_ONE_DAY)

    def _walk(self, day: date, step: timedelta) -> Iterator[date]:
        current: Optional[date] = day if self.includes(day) else _step(day, step)
        while current is not None and self.includes(current):
            yield current
            current = _step(current, step)

    def length_in_days(self) -> int:
        if not self.has_lower_limit or not self.has_upper_limit:
            raise IntervalError("An unbounded interval has no length.")
        days = (self.upper.value - self.lower.value).days + 1
        days -= (not self.lower_included) + (not self.upper_included)
        return max(days, 0)
