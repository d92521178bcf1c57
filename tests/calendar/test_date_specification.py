"""
tests/calendar/test_date_specification.py

Covers:
  - fixed, annual_date, nth_weekday_in_month, never
  - of_year helpers and argument validation
  - iterate_over / first_occurrence_in
  - Composition with the generic Specification operators, walked through
    the module-level iterate_over / first_occurrence_in
"""

from datetime import date

import pytest

from baseunits.calendar import (
    BusinessCalendar,
    CalendarInterval,
    DateSpecification,
    annual_date,
    first_occurrence_in,
    fixed,
    iterate_over,
    never,
    nth_weekday_in_month,
)

MONDAY = 0


@pytest.fixture
def year_2024():
    return CalendarInterval.inclusive(date(2024, 1, 1), date(2024, 12, 31))


# ── Primitives ────────────────────────────────────────────────────────────────

class TestFixed:

    def test_only_that_date(self):
        spec = fixed(date(2024, 1, 2))
        assert spec.is_satisfied_by(date(2024, 1, 2))
        assert not spec.is_satisfied_by(date(2024, 1, 3))
        assert not spec.is_satisfied_by(date(2025, 1, 2))

    def test_is_date_specification(self):
        assert isinstance(fixed(date(2024, 1, 2)), DateSpecification)


class TestAnnualDate:

    def test_every_year(self):
        spec = annual_date(12, 25)
        assert spec.is_satisfied_by(date(2023, 12, 25))
        assert spec.is_satisfied_by(date(2024, 12, 25))
        assert not spec.is_satisfied_by(date(2024, 12, 24))
        assert not spec.is_satisfied_by(date(2024, 11, 25))

    def test_of_year(self):
        assert annual_date(12, 25).of_year(2030) == date(2030, 12, 25)

    def test_leap_day_accepted(self):
        spec = annual_date(2, 29)
        assert spec.is_satisfied_by(date(2024, 2, 29))
        with pytest.raises(ValueError):
            spec.of_year(2023)

    @pytest.mark.parametrize("month, day", [(2, 30), (13, 1), (0, 1), (4, 31)])
    def test_invalid_raises(self, month, day):
        with pytest.raises(ValueError):
            annual_date(month, day)


class TestNthWeekdayInMonth:

    def test_third_monday_of_january(self):
        spec = nth_weekday_in_month(1, MONDAY, 3)
        assert spec.of_year(2024) == date(2024, 1, 15)
        assert spec.of_year(2025) == date(2025, 1, 20)
        assert spec.is_satisfied_by(date(2024, 1, 15))
        assert not spec.is_satisfied_by(date(2024, 1, 8))
        assert not spec.is_satisfied_by(date(2024, 1, 22))
        assert not spec.is_satisfied_by(date(2024, 1, 16))

    def test_fifth_occurrence(self):
        spec = nth_weekday_in_month(1, MONDAY, 5)
        assert spec.of_year(2024) == date(2024, 1, 29)
        assert spec.is_satisfied_by(date(2024, 1, 29))

    def test_missing_fifth_occurrence(self):
        with pytest.raises(ValueError):
            nth_weekday_in_month(2, MONDAY, 5).of_year(2024)

    @pytest.mark.parametrize("month, weekday, n", [(0, 0, 1), (1, 7, 1), (1, 0, 0), (1, 0, 6)])
    def test_invalid_raises(self, month, weekday, n):
        with pytest.raises(ValueError):
            nth_weekday_in_month(month, weekday, n)


class TestNever:

    def test_never(self, year_2024):
        spec = never()
        assert not any(spec.is_satisfied_by(day) for day in year_2024.days_iterator())

    def test_never_or_is_identity(self, year_2024):
        spec = annual_date(7, 4)
        combined = never().or_(spec)
        for day in year_2024.days_iterator():
            assert combined.is_satisfied_by(day) == spec.is_satisfied_by(day)


# ── Iteration helpers ─────────────────────────────────────────────────────────

class TestIterateOver:

    def test_first_occurrence_in(self, year_2024):
        assert nth_weekday_in_month(1, MONDAY, 3).first_occurrence_in(year_2024) == date(2024, 1, 15)

    def test_first_occurrence_absent(self):
        january = CalendarInterval.inclusive(date(2024, 1, 1), date(2024, 1, 31))
        assert annual_date(12, 25).first_occurrence_in(january) is None

    def test_iterate_over(self):
        years = CalendarInterval.inclusive(date(2023, 1, 1), date(2025, 12, 31))
        assert list(annual_date(12, 25).iterate_over(years)) == [
            date(2023, 12, 25),
            date(2024, 12, 25),
            date(2025, 12, 25),
        ]

    def test_iterate_over_open_ended(self):
        it = annual_date(1, 1).iterate_over(CalendarInterval.ever_from(date(2024, 6, 1)))
        assert next(it) == date(2025, 1, 1)
        assert next(it) == date(2026, 1, 1)


# ── Composition ───────────────────────────────────────────────────────────────

class TestComposition:

    def test_or(self):
        spec = fixed(date(2024, 1, 2)) | annual_date(12, 25)
        assert spec.is_satisfied_by(date(2024, 1, 2))
        assert spec.is_satisfied_by(date(2024, 12, 25))
        assert not spec.is_satisfied_by(date(2024, 1, 3))

    def test_and_not(self, year_2024):
        # Every 25th of a month except Christmas.
        spec = DateSpecification(lambda day: day.day == 25, "25th") & ~annual_date(12, 25)
        hits = [day for day in year_2024.days_iterator() if spec.is_satisfied_by(day)]
        assert len(hits) == 11
        assert date(2024, 12, 25) not in hits

    def test_composite_walks_with_module_helpers(self, year_2024):
        spec = fixed(date(2024, 1, 2)) | annual_date(12, 25)
        assert not hasattr(spec, "iterate_over")
        assert first_occurrence_in(spec, year_2024) == date(2024, 1, 2)
        assert list(iterate_over(spec, year_2024)) == [date(2024, 1, 2), date(2024, 12, 25)]

    def test_calendar_holidays_walk_with_module_helpers(self, year_2024):
        cal = BusinessCalendar(holidays=[date(2024, 1, 2)])
        cal.add_holiday_spec(annual_date(12, 25))
        assert first_occurrence_in(cal.holiday_spec, year_2024) == date(2024, 1, 2)
        assert list(iterate_over(cal.holiday_spec, year_2024)) == [
            date(2024, 1, 2),
            date(2024, 12, 25),
        ]
