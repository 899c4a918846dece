# src/calendrical/kday/__init__.py
"""
calendrical.kday
~~~~~~~~~~~~~~~~

Weekday-relative ("k-day") date queries.  Every query reduces to one
primitive, ``kday_on_or_before(d, k) = d - day_of_week(d - k)``, applied to
the whole-day component of a day count.

Basic usage::

    from calendrical import date
    from calendrical.kday import nth_kday, kday_on_or_before

    nth_kday(date(2017, 11, 1), 4, "thursday")      # → 2017-11-23
    kday_on_or_before(date(2016, 2, 29), 2)         # → 2016-02-23

Results come back in the calendar of the argument.  NumPy integer arrays of
day numbers are accepted everywhere a date is::

    import numpy as np
    kday_on_or_before(np.array([736510, 736511]), "sunday")
"""

from __future__ import annotations

from calendrical.kday.kday import (
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
    "first_kday",
    "kday_after",
    "kday_before",
    "kday_nearest",
    "kday_on_or_after",
    "kday_on_or_before",
    "last_kday",
    "nth_kday",
]
