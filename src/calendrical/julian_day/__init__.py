# src/calendrical/julian_day/__init__.py
"""
calendrical.julian_day
~~~~~~~~~~~~~~~~~~~~~~

Julian Day (JD) and Modified Julian Day (MJD) numbering, which astronomers
use to count days independently of any calendar.  Not to be confused with
the Julian calendar.

The day-count conversions are exact additions of a fixed epoch; the
``date_*`` functions and the array helpers go through floats and are
precision-bounded.

Basic usage::

    from calendrical import date
    from calendrical.julian_day import date_to_julian_day, date_from_modified_julian_day

    date_to_julian_day(date(2017, 6, 30))        # → 2457934.5
    date_from_modified_julian_day(57934.0)       # → 2017-06-30
"""

from __future__ import annotations

from calendrical.julian_day.julian_day import (
    JD_EPOCH,
    MJD_EPOCH,
    date_from_julian_day,
    date_from_modified_julian_day,
    date_to_julian_day,
    date_to_modified_julian_day,
    day_count_from_julian_day,
    day_count_from_modified_julian_day,
    days_from_julian_days,
    julian_day_from_day_count,
    julian_days_from_days,
    modified_julian_day_from_day_count,
)

__all__ = [
    "JD_EPOCH",
    "MJD_EPOCH",
    "date_from_julian_day",
    "date_from_modified_julian_day",
    "date_to_julian_day",
    "date_to_modified_julian_day",
    "day_count_from_julian_day",
    "day_count_from_modified_julian_day",
    "days_from_julian_days",
    "julian_day_from_day_count",
    "julian_days_from_days",
    "modified_julian_day_from_day_count",
]
