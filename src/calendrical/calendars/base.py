from __future__ import annotations

import datetime as _dt
import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Mapping, Protocol, Union, runtime_checkable

from calendrical._exceptions import CalendricalError, InvalidDate, RolloverMismatch
from calendrical.day_count import (
    DayCount,
    Weekday,
    day_of_week,
    time_from_day_fraction,
    time_to_day_fraction,
)
from calendrical.math import ExactFraction

logger = logging.getLogger(__name__)

DEFAULT_MAX_YEAR: int = 10_000

# Start of the civil day relative to midnight.
MIDNIGHT = ExactFraction(0, 1)
DAWN = ExactFraction(1, 4)
NOON = ExactFraction(1, 2)
SUNSET = ExactFraction(3, 4)


class CalendarKind(str, Enum):
    GREGORIAN = "gregorian"
    JULIAN = "julian"
    COPTIC = "coptic"
    ETHIOPIC = "ethiopic"
    ARMENIAN = "armenian"
    EGYPTIAN = "egyptian"
    PERSIAN = "persian"
    ISO_WEEK = "iso_week"


@runtime_checkable
class Calendar(Protocol):
    """
    Operations every calendar implements.  Implementations are plain classes
    that satisfy this protocol structurally; there is no shared base class.

    ``date_to_day_count`` and ``day_count_to_date`` are exact inverses over
    every valid date, proleptically.
    """

    kind: CalendarKind

    def months_in_year(self, year: int) -> int: ...

    def days_in_month(self, year: int, month: int) -> int: ...

    def is_leap_year(self, year: int) -> bool: ...

    def date_to_day_count(self, year: int, month: int, day: int) -> int: ...

    def day_count_to_date(self, days: int) -> tuple[int, int, int]: ...

    def is_valid_date(self, year: int, month: int, day: int) -> bool: ...

    def day_rollover_offset(self) -> ExactFraction: ...

    def date_to_string(
        self, year: int, month: int, day: int, time: str | None = None
    ) -> str: ...


CalendarLike = Union[Calendar, CalendarKind, str]


def valid_month_day(
    calendar: Calendar,
    year: int,
    month: int,
    day: int,
    max_year: int | None = None,
) -> bool:
    """Month and day range check shared by the calendar implementations."""
    if max_year is not None and year > max_year:
        return False
    if not 1 <= month <= calendar.months_in_year(year):
        return False
    return 1 <= day <= calendar.days_in_month(year, month)


def iso_date_string(year: int, month: int, day: int) -> str:
    sign = "-" if year < 0 else ""
    return f"{sign}{abs(year):04d}-{month:02d}-{day:02d}"


def join_date_string(date: str, time: str | None = None, suffix: str = "") -> str:
    """Date text, then the time of day if any, then the calendar suffix."""
    return " ".join(part for part in (date, time, suffix) if part)


# ── registry ─────────────────────────────────────────────────────────────────

class CalendarRegistry:
    """
    Maps every CalendarKind to its calendar implementation.

    Lookups accept a CalendarKind, its string value (case-insensitive) or a
    calendar object, which is returned unchanged.
    """

    def __init__(self, calendars: Mapping[CalendarKind, Calendar] | None = None) -> None:
        self._calendars: dict[CalendarKind, Calendar] = dict(calendars or {})

    def register(self, calendar: Calendar) -> None:
        self._calendars[calendar.kind] = calendar

    def get(self, key: CalendarLike) -> Calendar:
        if isinstance(key, Calendar) and not isinstance(key, (str, CalendarKind)):
            return key
        kind = self._key(key)
        try:
            return self._calendars[kind]
        except KeyError:
            raise CalendricalError(f"No calendar registered for {kind.value!r}.") from None

    def kinds(self) -> frozenset[CalendarKind]:
        return frozenset(self._calendars)

    def __contains__(self, key: object) -> bool:
        try:
            return self._key(key) in self._calendars  # type: ignore[arg-type]
        except CalendricalError:
            return False

    def __len__(self) -> int:
        return len(self._calendars)

    @staticmethod
    def _key(key: CalendarKind | str) -> CalendarKind:
        if isinstance(key, CalendarKind):
            return key
        if isinstance(key, str):
            try:
                return CalendarKind(key.strip().lower())
            except ValueError:
                raise CalendricalError(f"Unknown calendar {key!r}.") from None
        raise CalendricalError(f"Cannot resolve a calendar from {key!r}.")


registry = CalendarRegistry()


def get_calendar(key: CalendarLike) -> Calendar:
    return registry.get(key)


def _check_rollover(source: Calendar, target: Calendar) -> None:
    source_offset = source.day_rollover_offset()
    target_offset = target.day_rollover_offset()
    if source_offset != target_offset:
        logger.debug(
            "Rejected date-only conversion %s -> %s (rollover %r != %r)",
            source.kind.value, target.kind.value, source_offset, target_offset,
        )
        raise RolloverMismatch(
            f"{source.kind.value} days start at {source_offset.numerator}/"
            f"{source_offset.denominator} of a day but {target.kind.value} days "
            f"start at {target_offset.numerator}/{target_offset.denominator}; "
            "convert a CalendarDateTime instead."
        )


# ── date records ─────────────────────────────────────────────────────────────

@dataclass(frozen=True, slots=True)
class CalendarDate:
    """
    A date in a specific calendar.  Validated against the calendar on
    construction; an invalid date raises InvalidDate.

    For the ISO-Week calendar ``month`` is the week and ``day`` the weekday.
    """

    year: int
    month: int
    day: int
    calendar: Calendar

    def __post_init__(self) -> None:
        if not self.calendar.is_valid_date(self.year, self.month, self.day):
            raise InvalidDate(
                f"{self.year}-{self.month}-{self.day} is not a valid "
                f"{self.calendar.kind.value} date."
            )

    def to_day_count(self) -> DayCount:
        return DayCount(self.calendar.date_to_day_count(self.year, self.month, self.day))

    @classmethod
    def from_day_count(cls, day_count: DayCount | int, calendar: CalendarLike) -> CalendarDate:
        cal = get_calendar(calendar)
        days = day_count.day if isinstance(day_count, DayCount) else int(day_count)
        year, month, day = cal.day_count_to_date(days)
        return cls(year, month, day, cal)

    def convert(self, calendar: CalendarLike) -> CalendarDate:
        return convert(self, calendar)

    def day_of_week(self) -> Weekday:
        return Weekday(day_of_week(self.to_day_count()))

    def is_leap_year(self) -> bool:
        return self.calendar.is_leap_year(self.year)

    # ── host bridge ──────────────────────────────────────────────────────

    @classmethod
    def from_date(cls, value: _dt.date, calendar: CalendarLike = CalendarKind.GREGORIAN) -> CalendarDate:
        """Build from a Python date (proleptic Gregorian, midnight rollover)."""
        cal = get_calendar(calendar)
        _check_rollover(get_calendar(CalendarKind.GREGORIAN), cal)
        return cls.from_day_count(DayCount(value.toordinal()), cal)

    def to_date(self) -> _dt.date:
        _check_rollover(self.calendar, get_calendar(CalendarKind.GREGORIAN))
        return _dt.date.fromordinal(self.to_day_count().day)

    def __str__(self) -> str:
        return self.calendar.date_to_string(self.year, self.month, self.day)


@dataclass(frozen=True, slots=True)
class CalendarDateTime:
    """A date plus a civil time of day (no time zone) in a specific calendar."""

    year: int
    month: int
    day: int
    hour: int = 0
    minute: int = 0
    second: int = 0
    microsecond: int = 0
    calendar: Calendar = field(kw_only=True)

    def __post_init__(self) -> None:
        if not self.calendar.is_valid_date(self.year, self.month, self.day):
            raise InvalidDate(
                f"{self.year}-{self.month}-{self.day} is not a valid "
                f"{self.calendar.kind.value} date."
            )
        if not (
            0 <= self.hour < 24
            and 0 <= self.minute < 60
            and 0 <= self.second < 60
            and 0 <= self.microsecond < 1_000_000
        ):
            raise InvalidDate(
                f"{self.hour}:{self.minute}:{self.second}.{self.microsecond} "
                "is not a valid time of day."
            )

    def to_day_count(self) -> DayCount:
        return DayCount(
            self.calendar.date_to_day_count(self.year, self.month, self.day),
            time_to_day_fraction(self.hour, self.minute, self.second, self.microsecond),
        )

    @classmethod
    def from_day_count(cls, day_count: DayCount, calendar: CalendarLike) -> CalendarDateTime:
        cal = get_calendar(calendar)
        year, month, day = cal.day_count_to_date(day_count.day)
        hour, minute, second, microsecond = time_from_day_fraction(day_count.fraction)
        return cls(year, month, day, hour, minute, second, microsecond, calendar=cal)

    def date(self) -> CalendarDate:
        return CalendarDate(self.year, self.month, self.day, self.calendar)

    def convert(self, calendar: CalendarLike) -> CalendarDateTime:
        return convert(self, calendar)

    def day_of_week(self) -> Weekday:
        return Weekday(day_of_week(self.to_day_count()))

    # ── host bridge ──────────────────────────────────────────────────────

    @classmethod
    def from_datetime(
        cls, value: _dt.datetime, calendar: CalendarLike = CalendarKind.GREGORIAN
    ) -> CalendarDateTime:
        if value.tzinfo is not None:
            raise ValueError("Only naive datetimes are supported.")
        day_count = DayCount(
            value.toordinal(),
            time_to_day_fraction(value.hour, value.minute, value.second, value.microsecond),
        )
        return cls.from_day_count(day_count, calendar)

    def to_datetime(self) -> _dt.datetime:
        day_count = self.to_day_count()
        hour, minute, second, microsecond = time_from_day_fraction(day_count.fraction)
        day = _dt.date.fromordinal(day_count.day)
        return _dt.datetime(day.year, day.month, day.day, hour, minute, second, microsecond)

    def __str__(self) -> str:
        time = f"{self.hour:02d}:{self.minute:02d}:{self.second:02d}"
        if self.microsecond:
            time += f".{self.microsecond:06d}"
        return self.calendar.date_to_string(self.year, self.month, self.day, time)


# ── conversions ──────────────────────────────────────────────────────────────

def date_to_day_count(value: CalendarDate | CalendarDateTime) -> DayCount:
    return value.to_day_count()


def date_from_day_count(day_count: DayCount | int, calendar: CalendarLike) -> CalendarDate:
    return CalendarDate.from_day_count(day_count, calendar)


def naive_datetime_to_day_count(value: CalendarDateTime) -> DayCount:
    return value.to_day_count()


def day_count_to_naive_datetime(day_count: DayCount, calendar: CalendarLike) -> CalendarDateTime:
    return CalendarDateTime.from_day_count(day_count, calendar)


def convert(
    value: CalendarDate | CalendarDateTime, calendar: CalendarLike
) -> CalendarDate | CalendarDateTime:
    """
    Re-express a date or date-time in another calendar.

    Date-only conversion is allowed only between calendars whose days start
    at the same time; otherwise RolloverMismatch is raised.
    """
    target = get_calendar(calendar)
    if isinstance(value, CalendarDateTime):
        return CalendarDateTime.from_day_count(value.to_day_count(), target)
    _check_rollover(value.calendar, target)
    return CalendarDate.from_day_count(value.to_day_count(), target)
