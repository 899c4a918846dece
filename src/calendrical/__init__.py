# src/calendrical/__init__.py
"""
calendrical
~~~~~~~~~~~

Conversions between arithmetic calendars (Gregorian, Julian, Coptic,
Ethiopic, Armenian, Egyptian, Persian, ISO-Week) through a canonical,
calendar-independent day count, and weekday-relative date queries.

The day count follows Dershowitz and Reingold's *Calendrical Calculations*:
day 1 is Monday, 1 January of year 1 in the proleptic Gregorian calendar.
Moments are a whole day plus an exact fraction of a day, so chained
conversions never accumulate floating point error.

Basic usage::

    import calendrical as cal

    d = cal.date(2017, 11, 1)
    cal.nth_kday(d, 4, "thursday")            # → 2017-11-23
    d.convert("julian")                        # → 2017-10-19 Julian
    cal.date_to_julian_day(d)                  # → 2458058.5

Public API
----------
DayCount           Canonical day count (whole day + exact fraction).
ExactFraction      Reduced rational number.
CalendarDate       Validated date in a given calendar.
CalendarDateTime   Date plus time of day.
date, datetime     Construct dates by calendar name (default Gregorian).
convert            Move a date or date-time between calendars.
kday_*, nth_kday   Weekday-relative queries.
CalendricalError   Base exception for all calendrical errors.
"""

from __future__ import annotations

from calendrical._exceptions import (
    ArithmeticDegenerate,
    CalendricalError,
    InvalidDate,
    InvalidWeekday,
    RolloverMismatch,
)
from calendrical.math import ExactFraction
from calendrical.day_count import DayCount, Weekday, day_of_week, resolve_weekday
from calendrical.calendars import (
    Calendar,
    CalendarDate,
    CalendarDateTime,
    CalendarKind,
    armenian,
    convert,
    coptic,
    date,
    datetime,
    egyptian,
    ethiopic,
    get_calendar,
    gregorian,
    iso_week,
    julian,
    persian,
)
from calendrical.julian_day import (
    date_from_julian_day,
    date_from_modified_julian_day,
    date_to_julian_day,
    date_to_modified_julian_day,
)
from calendrical.kday import (
    first_kday,
    kday_after,
    kday_before,
    kday_nearest,
    kday_on_or_after,
    kday_on_or_before,
    last_kday,
    nth_kday,
)

__all__ = [
    "ArithmeticDegenerate",
    "Calendar",
    "CalendarDate",
    "CalendarDateTime",
    "CalendarKind",
    "CalendricalError",
    "DayCount",
    "ExactFraction",
    "InvalidDate",
    "InvalidWeekday",
    "RolloverMismatch",
    "Weekday",
    "armenian",
    "convert",
    "coptic",
    "date",
    "date_from_julian_day",
    "date_from_modified_julian_day",
    "date_to_julian_day",
    "date_to_modified_julian_day",
    "datetime",
    "day_of_week",
    "egyptian",
    "ethiopic",
    "first_kday",
    "get_calendar",
    "gregorian",
    "iso_week",
    "julian",
    "kday_after",
    "kday_before",
    "kday_nearest",
    "kday_on_or_after",
    "kday_on_or_before",
    "last_kday",
    "nth_kday",
    "persian",
    "resolve_weekday",
]
