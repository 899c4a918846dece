"""
Egyptian and Armenian calendars.

Twelve 30-day months and five epagomenal days, 365 days every year with no
leap rule, so both drift against the solar year.  The Armenian calendar is
the Egyptian one counted from a later epoch.
"""

from __future__ import annotations

import functools
import logging
from dataclasses import dataclass
from typing import ClassVar

from calendrical._exceptions import InvalidDate
from calendrical.calendars.base import (
    DAWN,
    CalendarKind,
    iso_date_string,
    join_date_string,
    valid_month_day,
)
from calendrical.calendars.julian import anchor
from calendrical.math import ExactFraction

logger = logging.getLogger(__name__)


@functools.cache
def egyptian_epoch() -> int:
    """Egyptian 0001-01-01 (Era of Nabonassar): Julian -0747-02-26, JD 1448638."""
    days = anchor(-747, 2, 26)
    logger.debug("Egyptian epoch fixed at day %d", days)
    return days


@functools.cache
def armenian_epoch() -> int:
    """Armenian 0001-01-01: Julian 0552-07-11."""
    days = anchor(552, 7, 11)
    logger.debug("Armenian epoch fixed at day %d", days)
    return days


def _days_in_month(month: int) -> int:
    if 1 <= month <= 12:
        return 30
    if month == 13:
        return 5
    raise InvalidDate(f"Month must be in 1..13; got {month}.")


@dataclass(frozen=True, slots=True)
class EgyptianCalendar:

    kind: ClassVar[CalendarKind] = CalendarKind.EGYPTIAN

    max_year: int | None = None

    def months_in_year(self, year: int) -> int:
        return 13

    def is_leap_year(self, year: int) -> bool:
        return False

    def days_in_month(self, year: int, month: int) -> int:
        return _days_in_month(month)

    def is_valid_date(self, year: int, month: int, day: int) -> bool:
        return valid_month_day(self, year, month, day, self.max_year)

    def day_rollover_offset(self) -> ExactFraction:
        return DAWN

    def date_to_day_count(self, year: int, month: int, day: int) -> int:
        return egyptian_epoch() + 365 * (year - 1) + 30 * (month - 1) + day - 1

    def day_count_to_date(self, days: int) -> tuple[int, int, int]:
        elapsed = days - egyptian_epoch()
        year = elapsed // 365 + 1
        month = elapsed % 365 // 30 + 1
        day = elapsed - 365 * (year - 1) - 30 * (month - 1) + 1
        return year, month, day

    def date_to_string(
        self, year: int, month: int, day: int, time: str | None = None
    ) -> str:
        return join_date_string(iso_date_string(year, month, day), time, "Egyptian")


egyptian = EgyptianCalendar()


@dataclass(frozen=True, slots=True)
class ArmenianCalendar:

    kind: ClassVar[CalendarKind] = CalendarKind.ARMENIAN

    max_year: int | None = None

    def months_in_year(self, year: int) -> int:
        return 13

    def is_leap_year(self, year: int) -> bool:
        return False

    def days_in_month(self, year: int, month: int) -> int:
        return _days_in_month(month)

    def is_valid_date(self, year: int, month: int, day: int) -> bool:
        return valid_month_day(self, year, month, day, self.max_year)

    def day_rollover_offset(self) -> ExactFraction:
        return DAWN

    def date_to_day_count(self, year: int, month: int, day: int) -> int:
        return armenian_epoch() + egyptian.date_to_day_count(year, month, day) - egyptian_epoch()

    def day_count_to_date(self, days: int) -> tuple[int, int, int]:
        return egyptian.day_count_to_date(days + egyptian_epoch() - armenian_epoch())

    def date_to_string(
        self, year: int, month: int, day: int, time: str | None = None
    ) -> str:
        return join_date_string(iso_date_string(year, month, day), time, "Armenian")


armenian = ArmenianCalendar()
