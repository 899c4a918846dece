from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from calendrical._exceptions import InvalidDate
from calendrical.calendars.base import (
    DEFAULT_MAX_YEAR,
    MIDNIGHT,
    CalendarKind,
    iso_date_string,
    join_date_string,
    valid_month_day,
)
from calendrical.math import ExactFraction

EPOCH: int = 1

# Day counts of the nested Gregorian cycles.
DAYS_IN_400_YEARS: int = 146_097
DAYS_IN_100_YEARS: int = 36_524
DAYS_IN_4_YEARS: int = 1_461
DAYS_IN_YEAR: int = 365


def month_length(month: int, leap: bool) -> int:
    """Length of a month in the Julian/Gregorian month scheme."""
    if month == 2:
        return 29 if leap else 28
    if month in (4, 6, 9, 11):
        return 30
    if 1 <= month <= 12:
        return 31
    raise InvalidDate(f"Month must be in 1..12; got {month}.")


def prior_month_days(month: int) -> int:
    """
    Days before ``month`` assuming a 30-day February; the leap correction
    is applied separately for months after February.
    """
    return (367 * month - 362) // 12


@dataclass(frozen=True, slots=True)
class GregorianCalendar:
    """
    Proleptic Gregorian calendar with astronomical year numbering (year 0
    is 1 BCE).  Day 1 of the day count is 0001-01-01.
    """

    kind: ClassVar[CalendarKind] = CalendarKind.GREGORIAN

    max_year: int | None = DEFAULT_MAX_YEAR

    def months_in_year(self, year: int) -> int:
        return 12

    def is_leap_year(self, year: int) -> bool:
        return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)

    def days_in_month(self, year: int, month: int) -> int:
        return month_length(month, self.is_leap_year(year))

    def is_valid_date(self, year: int, month: int, day: int) -> bool:
        return valid_month_day(self, year, month, day, self.max_year)

    def day_rollover_offset(self) -> ExactFraction:
        return MIDNIGHT

    def date_to_day_count(self, year: int, month: int, day: int) -> int:
        if month <= 2:
            correction = 0
        elif self.is_leap_year(year):
            correction = -1
        else:
            correction = -2

        y = year - 1
        return (
            EPOCH - 1
            + DAYS_IN_YEAR * y + y // 4 - y // 100 + y // 400
            + prior_month_days(month)
            + correction
            + day
        )

    def year_from_day_count(self, days: int) -> int:
        d0 = days - EPOCH
        n400, d1 = divmod(d0, DAYS_IN_400_YEARS)
        n100, d2 = divmod(d1, DAYS_IN_100_YEARS)
        n4, d3 = divmod(d2, DAYS_IN_4_YEARS)
        n1 = d3 // DAYS_IN_YEAR
        year = 400 * n400 + 100 * n100 + 4 * n4 + n1
        # The last day of a leap cycle belongs to the year already counted.
        if n100 == 4 or n1 == 4:
            return year
        return year + 1

    def day_count_to_date(self, days: int) -> tuple[int, int, int]:
        year = self.year_from_day_count(days)
        prior_days = days - self.date_to_day_count(year, 1, 1)

        if days < self.date_to_day_count(year, 3, 1):
            correction = 0
        elif self.is_leap_year(year):
            correction = 1
        else:
            correction = 2

        month = (12 * (prior_days + correction) + 373) // 367
        day = days - self.date_to_day_count(year, month, 1) + 1
        return year, month, day

    def day_of_year(self, year: int, month: int, day: int) -> int:
        return self.date_to_day_count(year, month, day) - self.date_to_day_count(year, 1, 1) + 1

    def date_to_string(
        self, year: int, month: int, day: int, time: str | None = None
    ) -> str:
        return join_date_string(iso_date_string(year, month, day), time)


gregorian = GregorianCalendar()
