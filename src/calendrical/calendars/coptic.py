"""
Coptic and Ethiopic calendars.

Both have twelve 30-day months followed by a 5-day epagomenal month that
gains a sixth day every fourth year.  They share the same arithmetic and
differ only in their epoch and the time of day at which a day begins.
"""

from __future__ import annotations

import functools
import logging
from dataclasses import dataclass
from typing import ClassVar

from calendrical._exceptions import InvalidDate
from calendrical.calendars.base import (
    DAWN,
    SUNSET,
    CalendarKind,
    iso_date_string,
    join_date_string,
    valid_month_day,
)
from calendrical.calendars.julian import anchor
from calendrical.math import ExactFraction

logger = logging.getLogger(__name__)


@functools.cache
def coptic_epoch() -> int:
    """Coptic 0001-01-01: Julian 0284-08-29."""
    days = anchor(284, 8, 29)
    logger.debug("Coptic epoch fixed at day %d", days)
    return days


@functools.cache
def ethiopic_epoch() -> int:
    """Ethiopic 0001-01-01: Julian 0008-08-29."""
    days = anchor(8, 8, 29)
    logger.debug("Ethiopic epoch fixed at day %d", days)
    return days


@dataclass(frozen=True, slots=True)
class CopticCalendar:

    kind: ClassVar[CalendarKind] = CalendarKind.COPTIC

    max_year: int | None = None

    def months_in_year(self, year: int) -> int:
        return 13

    def is_leap_year(self, year: int) -> bool:
        return year % 4 == 3

    def days_in_month(self, year: int, month: int) -> int:
        if 1 <= month <= 12:
            return 30
        if month == 13:
            return 6 if self.is_leap_year(year) else 5
        raise InvalidDate(f"Month must be in 1..13; got {month}.")

    def is_valid_date(self, year: int, month: int, day: int) -> bool:
        return valid_month_day(self, year, month, day, self.max_year)

    def day_rollover_offset(self) -> ExactFraction:
        return SUNSET

    def date_to_day_count(self, year: int, month: int, day: int) -> int:
        return (
            coptic_epoch() - 1
            + 365 * (year - 1) + year // 4
            + 30 * (month - 1)
            + day
        )

    def day_count_to_date(self, days: int) -> tuple[int, int, int]:
        year = (4 * (days - coptic_epoch()) + 1463) // 1461
        month = (days - self.date_to_day_count(year, 1, 1)) // 30 + 1
        day = days + 1 - self.date_to_day_count(year, month, 1)
        return year, month, day

    def date_to_string(
        self, year: int, month: int, day: int, time: str | None = None
    ) -> str:
        return join_date_string(iso_date_string(year, month, day), time, "Coptic")


coptic = CopticCalendar()


@dataclass(frozen=True, slots=True)
class EthiopicCalendar:
    """Coptic arithmetic counted from the Ethiopic epoch."""

    kind: ClassVar[CalendarKind] = CalendarKind.ETHIOPIC

    max_year: int | None = None

    def months_in_year(self, year: int) -> int:
        return coptic.months_in_year(year)

    def is_leap_year(self, year: int) -> bool:
        return coptic.is_leap_year(year)

    def days_in_month(self, year: int, month: int) -> int:
        return coptic.days_in_month(year, month)

    def is_valid_date(self, year: int, month: int, day: int) -> bool:
        return valid_month_day(self, year, month, day, self.max_year)

    def day_rollover_offset(self) -> ExactFraction:
        return DAWN

    def date_to_day_count(self, year: int, month: int, day: int) -> int:
        return ethiopic_epoch() + coptic.date_to_day_count(year, month, day) - coptic_epoch()

    def day_count_to_date(self, days: int) -> tuple[int, int, int]:
        return coptic.day_count_to_date(days + coptic_epoch() - ethiopic_epoch())

    def date_to_string(
        self, year: int, month: int, day: int, time: str | None = None
    ) -> str:
        return join_date_string(iso_date_string(year, month, day), time, "Ethiopic")


ethiopic = EthiopicCalendar()
