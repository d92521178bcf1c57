"""
baseunits.calendar
~~~~~~~~~~~~~~~~~~

Business-day calendar.  A BusinessCalendar combines a fixed Saturday/Sunday
weekend with an accumulated holiday specification, and counts in business
days by lazily filtering a stream of calendar days.

Basic usage::

    from datetime import date
    from baseunits.calendar import BusinessCalendar, annual_date

    cal = BusinessCalendar()
    cal.add_holiday(date(2024, 1, 2))               # one-off closure
    cal.add_holiday_spec(annual_date(12, 25))       # every Christmas

    cal.plus_business_days(date(2024, 1, 1), 1)     # → date(2024, 1, 3)
    cal.nearest_next_business_day(date(2024, 1, 6)) # → date(2024, 1, 8)

Day ranges, bounded or open-ended::

    from baseunits.calendar import CalendarInterval

    january = CalendarInterval.inclusive(date(2024, 1, 1), date(2024, 1, 31))
    cal.get_elapsed_business_days(january)          # → 22

Public API
----------
BusinessCalendar        The main class.
CalendarInterval        Interval of dates with day iterators.
DateSpecification       Predicate over dates; fixed, annual_date,
                        nth_weekday_in_month and never build the primitives.
iterate_over            Days of a CalendarInterval satisfying any date predicate;
                        first_occurrence_in returns the first of them.
CalendarError           Base exception for all calendar-related errors.
"""

from __future__ import annotations

from baseunits.calendar._exceptions import CalendarError, NegativeCountError
from baseunits.calendar.business_calendar import BusinessCalendar
from baseunits.calendar.calendar_interval import CalendarInterval
from baseunits.calendar.date_specification import (
    AnnualDateSpecification,
    DateSpecification,
    FixedDateSpecification,
    NthWeekdayInMonthSpecification,
    annual_date,
    first_occurrence_in,
    fixed,
    iterate_over,
    never,
    nth_weekday_in_month,
)

__all__ = [
    "BusinessCalendar",
    "CalendarInterval",
    "DateSpecification",
    "FixedDateSpecification",
    "AnnualDateSpecification",
    "NthWeekdayInMonthSpecification",
    "fixed",
    "annual_date",
    "nth_weekday_in_month",
    "never",
    "iterate_over",
    "first_occurrence_in",
    "CalendarError",
    "NegativeCountError",
]
