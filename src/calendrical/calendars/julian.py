from __future__ import annotations

import functools
import logging
from dataclasses import dataclass
from typing import ClassVar

from calendrical._exceptions import InvalidDate
from calendrical.calendars.base import (
    MIDNIGHT,
    CalendarKind,
    iso_date_string,
    join_date_string,
    valid_month_day,
)
from calendrical.calendars.gregorian import gregorian, month_length, prior_month_days
from calendrical.math import ExactFraction

logger = logging.getLogger(__name__)


@functools.cache
def epoch() -> int:
    """Day count of Julian 0001-01-01: Gregorian 0000-12-30."""
    days = gregorian.date_to_day_count(0, 12, 30)
    logger.debug("Julian epoch fixed at day %d", days)
    return days


@dataclass(frozen=True, slots=True)
class JulianCalendar:
    """
    Proleptic Julian calendar.  There is no year 0: year -1 is 1 BCE and
    directly precedes year 1.
    """

    kind: ClassVar[CalendarKind] = CalendarKind.JULIAN

    max_year: int | None = None

    def months_in_year(self, year: int) -> int:
        return 12

    def is_leap_year(self, year: int) -> bool:
        return year % 4 == (0 if year > 0 else 3)

    def days_in_month(self, year: int, month: int) -> int:
        return month_length(month, self.is_leap_year(year))

    def is_valid_date(self, year: int, month: int, day: int) -> bool:
        return year != 0 and valid_month_day(self, year, month, day, self.max_year)

    def day_rollover_offset(self) -> ExactFraction:
        return MIDNIGHT

    def date_to_day_count(self, year: int, month: int, day: int) -> int:
        if month <= 2:
            correction = 0
        elif self.is_leap_year(year):
            correction = -1
        else:
            correction = -2

        # Close the gap left by the missing year 0.
        y = (year + 1 if year < 0 else year) - 1
        return (
            epoch() - 1
            + 365 * y + y // 4
            + prior_month_days(month)
            + correction
            + day
        )

    def day_count_to_date(self, days: int) -> tuple[int, int, int]:
        approx = (4 * (days - epoch()) + 1464) // 1461
        year = approx - 1 if approx <= 0 else approx
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

    def date_to_string(
        self, year: int, month: int, day: int, time: str | None = None
    ) -> str:
        return join_date_string(iso_date_string(year, month, day), time, "Julian")


julian = JulianCalendar()


def anchor(year: int, month: int, day: int) -> int:
    """
    Day count of a Julian calendar date.  Used to fix the epochs of the
    calendars that are defined by a date in the Julian calendar.
    """
    if not julian.is_valid_date(year, month, day):
        raise InvalidDate(f"{year}-{month}-{day} is not a valid julian date.")
    return julian.date_to_day_count(year, month, day)
