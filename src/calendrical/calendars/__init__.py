# src/calendrical/calendars/__init__.py
"""
calendrical.calendars
~~~~~~~~~~~~~~~~~~~~~

Arithmetic calendars that convert to and from the canonical day count.
Each calendar is an immutable object satisfying the ``Calendar`` protocol;
a module-level instance of each is registered under its ``CalendarKind``.

Basic usage::

    from calendrical.calendars import date, convert

    d = date(2017, 6, 30)                    # Gregorian by default
    convert(d, "julian")                     # → 2017-06-17 Julian
    date(1734, 1, 1, calendar="coptic")

Converting a date between calendars whose days begin at different times
(e.g. Gregorian at midnight, Coptic at sunset) raises RolloverMismatch;
convert a CalendarDateTime instead.

Public API
----------
Calendar           Protocol every calendar implements.
CalendarKind       Enum naming the calendars.
CalendarDate       Validated (year, month, day, calendar) record.
CalendarDateTime   CalendarDate plus time of day.
get_calendar       Look a calendar up by kind, name or instance.
convert            Re-express a date or date-time in another calendar.
"""

from __future__ import annotations

from calendrical.calendars.base import (
    DAWN,
    DEFAULT_MAX_YEAR,
    MIDNIGHT,
    NOON,
    SUNSET,
    Calendar,
    CalendarDate,
    CalendarDateTime,
    CalendarKind,
    CalendarLike,
    CalendarRegistry,
    convert,
    date_from_day_count,
    date_to_day_count,
    day_count_to_naive_datetime,
    get_calendar,
    naive_datetime_to_day_count,
    registry,
)
from calendrical.calendars.gregorian import GregorianCalendar, gregorian
from calendrical.calendars.julian import JulianCalendar, julian
from calendrical.calendars.coptic import CopticCalendar, EthiopicCalendar, coptic, ethiopic
from calendrical.calendars.armenian import ArmenianCalendar, EgyptianCalendar, armenian, egyptian
from calendrical.calendars.persian import PersianCalendar, persian
from calendrical.calendars.iso_week import ISOWeekCalendar, iso_week

for _calendar in (gregorian, julian, coptic, ethiopic, armenian, egyptian, persian, iso_week):
    registry.register(_calendar)
del _calendar


def date(year: int, month: int, day: int, calendar: CalendarLike = CalendarKind.GREGORIAN) -> CalendarDate:
    return CalendarDate(year, month, day, get_calendar(calendar))


def datetime(
    year: int,
    month: int,
    day: int,
    hour: int = 0,
    minute: int = 0,
    second: int = 0,
    microsecond: int = 0,
    calendar: CalendarLike = CalendarKind.GREGORIAN,
) -> CalendarDateTime:
    return CalendarDateTime(
        year, month, day, hour, minute, second, microsecond, calendar=get_calendar(calendar)
    )


__all__ = [
    "DAWN",
    "DEFAULT_MAX_YEAR",
    "MIDNIGHT",
    "NOON",
    "SUNSET",
    "ArmenianCalendar",
    "Calendar",
    "CalendarDate",
    "CalendarDateTime",
    "CalendarKind",
    "CalendarLike",
    "CalendarRegistry",
    "CopticCalendar",
    "EgyptianCalendar",
    "EthiopicCalendar",
    "GregorianCalendar",
    "ISOWeekCalendar",
    "JulianCalendar",
    "PersianCalendar",
    "armenian",
    "convert",
    "coptic",
    "date",
    "date_from_day_count",
    "date_to_day_count",
    "datetime",
    "day_count_to_naive_datetime",
    "egyptian",
    "ethiopic",
    "get_calendar",
    "gregorian",
    "iso_week",
    "julian",
    "naive_datetime_to_day_count",
    "persian",
    "registry",
]
