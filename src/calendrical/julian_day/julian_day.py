from __future__ import annotations

import numpy as np
import numpy.typing as npt

from calendrical.calendars.base import CalendarDate, CalendarDateTime, CalendarKind, CalendarLike
from calendrical.day_count import DayCount
from calendrical.math import ExactFraction

# JD 0 is noon, 1 January 4713 BCE (Julian): day count -1,721,424.5.
JD_EPOCH = DayCount(-1_721_425, ExactFraction(1, 2))

# MJD 0 is midnight, 17 November 1858 (Gregorian).
MJD_EPOCH = DayCount(678_576)

_JD_OFFSET: float = -JD_EPOCH.to_float()


def _as_day_count(value: DayCount | float) -> DayCount:
    if isinstance(value, DayCount):
        return value
    return DayCount.from_float(value)


# ── exact ────────────────────────────────────────────────────────────────────

def julian_day_from_day_count(day_count: DayCount) -> DayCount:
    return day_count - JD_EPOCH


def day_count_from_julian_day(jd: DayCount | float) -> DayCount:
    """Day count of a Julian Day.  Floats pass through the lossy float bridge."""
    return _as_day_count(jd) + JD_EPOCH


def modified_julian_day_from_day_count(day_count: DayCount) -> DayCount:
    return day_count - MJD_EPOCH


def day_count_from_modified_julian_day(mjd: DayCount | float) -> DayCount:
    return _as_day_count(mjd) + MJD_EPOCH


# ── float bridge ─────────────────────────────────────────────────────────────

def date_to_julian_day(value: CalendarDate | CalendarDateTime) -> float:
    """Julian Day of a date (at midnight) or date-time, e.g. 2457934.5 for 2017-06-30."""
    return julian_day_from_day_count(value.to_day_count()).to_float()


def date_from_julian_day(
    jd: DayCount | float, calendar: CalendarLike = CalendarKind.GREGORIAN
) -> CalendarDate:
    return CalendarDate.from_day_count(day_count_from_julian_day(jd), calendar)


def date_to_modified_julian_day(value: CalendarDate | CalendarDateTime) -> float:
    return modified_julian_day_from_day_count(value.to_day_count()).to_float()


def date_from_modified_julian_day(
    mjd: DayCount | float, calendar: CalendarLike = CalendarKind.GREGORIAN
) -> CalendarDate:
    return CalendarDate.from_day_count(day_count_from_modified_julian_day(mjd), calendar)


def julian_days_from_days(days: npt.ArrayLike) -> np.ndarray:
    """Julian Days (at midnight) of an array of whole day counts."""
    return np.asarray(days, dtype=np.float64) + _JD_OFFSET


def days_from_julian_days(jd: npt.ArrayLike) -> np.ndarray:
    """Whole day counts containing each Julian Day in ``jd``."""
    return np.floor(np.asarray(jd, dtype=np.float64) - _JD_OFFSET).astype(np.int64)
