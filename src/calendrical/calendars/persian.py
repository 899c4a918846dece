"""
Arithmetic Persian calendar.

Leap years follow a 2820-year grand cycle of 1,029,983 days.  The arithmetic
calendar does not always agree with the astronomical Persian calendar; the
two differ in 28 years between 1637 and 2417 AP.
"""

from __future__ import annotations

import functools
import logging
import math
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
from calendrical.calendars.julian import anchor
from calendrical.math import ExactFraction

logger = logging.getLogger(__name__)

GRAND_CYCLE_YEARS: int = 2820
GRAND_CYCLE_DAYS: int = 1_029_983


@functools.cache
def epoch() -> int:
    """Persian 0001-01-01: Julian 0622-03-19."""
    days = anchor(622, 3, 19)
    logger.debug("Persian epoch fixed at day %d", days)
    return days


def _cycle_year(year: int) -> tuple[int, int]:
    """
    Split a Persian year into its offset from 474 AP (with year 0 skipped)
    and the equivalent year within the grand cycle starting at 474 AP.
    """
    y = year - 474 if year > 0 else year - 473
    return y, y % GRAND_CYCLE_YEARS + 474


@dataclass(frozen=True, slots=True)
class PersianCalendar:
    """Arithmetic Persian calendar.  There is no year 0."""

    kind: ClassVar[CalendarKind] = CalendarKind.PERSIAN

    max_year: int | None = DEFAULT_MAX_YEAR

    def months_in_year(self, year: int) -> int:
        return 12

    def is_leap_year(self, year: int) -> bool:
        _, cycle_year = _cycle_year(year)
        return (cycle_year + 38) * 31 % 128 < 31

    def days_in_month(self, year: int, month: int) -> int:
        if 1 <= month <= 6:
            return 31
        if 7 <= month <= 11:
            return 30
        if month == 12:
            return 30 if self.is_leap_year(year) else 29
        raise InvalidDate(f"Month must be in 1..12; got {month}.")

    def is_valid_date(self, year: int, month: int, day: int) -> bool:
        return year != 0 and valid_month_day(self, year, month, day, self.max_year)

    def day_rollover_offset(self) -> ExactFraction:
        return MIDNIGHT

    def date_to_day_count(self, year: int, month: int, day: int) -> int:
        y, cycle_year = _cycle_year(year)
        if month <= 7:
            prior_month_days = 31 * (month - 1)
        else:
            prior_month_days = 30 * (month - 1) + 6
        return (
            epoch() - 1
            + GRAND_CYCLE_DAYS * (y // GRAND_CYCLE_YEARS)
            + 365 * (cycle_year - 1)
            + (31 * cycle_year - 5) // 128
            + prior_month_days
            + day
        )

    def year_from_day_count(self, days: int) -> int:
        d0 = days - self.date_to_day_count(475, 1, 1)
        n2820, d1 = divmod(d0, GRAND_CYCLE_DAYS)
        # The final day of a grand cycle closes year 2820 of that cycle.
        if d1 == GRAND_CYCLE_DAYS - 1:
            y2820 = GRAND_CYCLE_YEARS
        else:
            y2820 = (128 * d1 + 46_878) // 46_751
        year = 474 + GRAND_CYCLE_YEARS * n2820 + y2820
        return year if year > 0 else year - 1

    def day_count_to_date(self, days: int) -> tuple[int, int, int]:
        year = self.year_from_day_count(days)
        day_of_year = days - self.date_to_day_count(year, 1, 1) + 1
        if day_of_year <= 186:
            month = math.ceil(day_of_year / 31)
        else:
            month = math.ceil((day_of_year - 6) / 30)
        day = days - self.date_to_day_count(year, month, 1) + 1
        return year, month, day

    def date_to_string(
        self, year: int, month: int, day: int, time: str | None = None
    ) -> str:
        return join_date_string(iso_date_string(year, month, day), time, "Persian")


persian = PersianCalendar()
