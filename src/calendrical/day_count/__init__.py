# src/calendrical/day_count/__init__.py
"""
calendrical.day_count
~~~~~~~~~~~~~~~~~~~~~

The canonical, calendar-independent day count ("rata die") that every
calendar converts through, plus weekday and time-of-day helpers.

Basic usage::

    from calendrical.day_count import DayCount, day_of_week

    d = DayCount(736510)          # 2017-06-30
    day_of_week(d)                # → 5 (Friday)
    d + 1                         # → DayCount(736511, ...)

NumPy integer arrays are accepted by ``day_of_week``::

    import numpy as np
    day_of_week(np.arange(1, 8))  # → array([1, 2, 3, 4, 5, 6, 7])
"""

from __future__ import annotations

from calendrical.day_count.day_count import (
    DAYS_IN_A_WEEK,
    FLOAT_PRECISION,
    MICROSECONDS_PER_DAY,
    DayCount,
    DayLike,
    Weekday,
    day_of_week,
    resolve_weekday,
    time_from_day_fraction,
    time_to_day_fraction,
    weeks,
)

__all__ = [
    "DAYS_IN_A_WEEK",
    "FLOAT_PRECISION",
    "MICROSECONDS_PER_DAY",
    "DayCount",
    "DayLike",
    "Weekday",
    "day_of_week",
    "resolve_weekday",
    "time_from_day_fraction",
    "time_to_day_fraction",
    "weeks",
]
