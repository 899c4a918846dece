"""
ISO-Week calendar: dates addressed as (year, week, weekday) on top of the
Gregorian day count.  Week 1 is the week containing the year's first
Thursday; weeks start on Monday.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from calendrical._exceptions import InvalidDate
from calendrical.calendars.base import (
    DEFAULT_MAX_YEAR,
    MIDNIGHT,
    CalendarKind,
    join_date_string,
    valid_month_day,
)
from calendrical.calendars.gregorian import gregorian
from calendrical.day_count import DAYS_IN_A_WEEK, Weekday
from calendrical.kday.kday import nth_kday
from calendrical.math import ExactFraction, amod


def _p(year: int) -> int:
    """Weekday of 31 December of ``year``, 0 = Sunday."""
    return (year + year // 4 - year // 100 + year // 400) % 7


@dataclass(frozen=True, slots=True)
class ISOWeekCalendar:
    """
    The ``month`` slot of a date holds the week (1..52 or 53) and ``day``
    the ISO weekday (1 = Monday .. 7 = Sunday).  A "leap year" is a year
    with 53 weeks.
    """

    kind: ClassVar[CalendarKind] = CalendarKind.ISO_WEEK

    max_year: int | None = DEFAULT_MAX_YEAR

    def weeks_in_year(self, year: int) -> int:
        if _p(year) == 4 or _p(year - 1) == 3:
            return 53
        return 52

    def months_in_year(self, year: int) -> int:
        return self.weeks_in_year(year)

    def is_leap_year(self, year: int) -> bool:
        return self.weeks_in_year(year) == 53

    def days_in_month(self, year: int, month: int) -> int:
        if not 1 <= month <= self.weeks_in_year(year):
            raise InvalidDate(f"{year} has no week {month}.")
        return DAYS_IN_A_WEEK

    def is_valid_date(self, year: int, month: int, day: int) -> bool:
        return valid_month_day(self, year, month, day, self.max_year)

    def day_rollover_offset(self) -> ExactFraction:
        return MIDNIGHT

    def date_to_day_count(self, year: int, month: int, day: int) -> int:
        # Count ``month`` Sundays on from 28 December of the previous year.
        reference = gregorian.date_to_day_count(year - 1, 12, 28)
        return nth_kday(reference, month, Weekday.SUNDAY) + day

    def day_count_to_date(self, days: int) -> tuple[int, int, int]:
        approx = gregorian.year_from_day_count(days - 3)
        if days >= self.date_to_day_count(approx + 1, 1, 1):
            year = approx + 1
        else:
            year = approx
        week = (days - self.date_to_day_count(year, 1, 1)) // DAYS_IN_A_WEEK + 1
        weekday = amod(days, DAYS_IN_A_WEEK)
        return year, week, weekday

    def first_day_of_year(self, year: int) -> int:
        """Day count of the Monday of week 1."""
        return self.date_to_day_count(year, 1, 1)

    def last_day_of_year(self, year: int) -> int:
        """Day count of the Sunday of the year's last week."""
        return self.first_day_of_year(year + 1) - 1

    def from_gregorian(self, year: int, month: int, day: int) -> tuple[int, int, int]:
        return self.day_count_to_date(gregorian.date_to_day_count(year, month, day))

    def date_to_string(
        self, year: int, month: int, day: int, time: str | None = None
    ) -> str:
        sign = "-" if year < 0 else ""
        return join_date_string(f"{sign}{abs(year):04d}-W{month:02d}-{day}", time)


iso_week = ISOWeekCalendar()
