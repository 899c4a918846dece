from __future__ import annotations

from typing import Callable, TypeVar, Union

import numpy as np
import numpy.typing as npt

from calendrical.calendars.base import CalendarDate, CalendarDateTime
from calendrical.day_count import DAYS_IN_A_WEEK, DayCount, Weekday, resolve_weekday, weeks
from calendrical.math import mod

Days = Union[int, npt.NDArray[np.integer]]
T = TypeVar("T", CalendarDate, CalendarDateTime, DayCount, int, np.ndarray)

WeekdayLike = Union[Weekday, int, str]


def _shift(value: T, fn: Callable[[Days], Days]) -> T:
    """
    Apply ``fn`` to the whole-day component of ``value`` and return the
    result in the same form (and calendar) as ``value``.  The time of day is
    carried through unchanged.
    """
    if isinstance(value, CalendarDateTime):
        moment = value.to_day_count()
        return CalendarDateTime.from_day_count(
            DayCount(fn(moment.day), moment.fraction), value.calendar
        )
    if isinstance(value, CalendarDate):
        return CalendarDate.from_day_count(fn(value.to_day_count().day), value.calendar)
    if isinstance(value, DayCount):
        return DayCount(fn(value.day), value.fraction)
    if isinstance(value, (int, np.integer)) and not isinstance(value, bool):
        return int(fn(int(value)))
    if isinstance(value, np.ndarray) and np.issubdtype(value.dtype, np.integer):
        return fn(value)
    raise TypeError(
        "Expected a CalendarDate, CalendarDateTime, DayCount, int or integer "
        f"array; got {type(value).__name__}."
    )


# ── day-number primitives ────────────────────────────────────────────────────

def _on_or_before(days: Days, k: int) -> Days:
    # Floored modulus: a day already on weekday k maps to itself.
    return days - mod(days - k, DAYS_IN_A_WEEK)


def _on_or_after(days: Days, k: int) -> Days:
    return _on_or_before(days + 6, k)


def _nearest(days: Days, k: int) -> Days:
    return _on_or_before(days + 3, k)


def _before(days: Days, k: int) -> Days:
    return _on_or_before(days - 1, k)


def _after(days: Days, k: int) -> Days:
    return _on_or_after(days, k)


def _nth(days: Days, n: int, k: int) -> Days:
    if n > 0:
        return weeks(n) + _before(days, k)
    return weeks(n) + _after(days, k)


# ── public API ───────────────────────────────────────────────────────────────

def kday_on_or_before(value: T, k: WeekdayLike) -> T:
    """The weekday ``k`` on or before ``value``."""
    kk = int(resolve_weekday(k))
    return _shift(value, lambda d: _on_or_before(d, kk))


def kday_on_or_after(value: T, k: WeekdayLike) -> T:
    """The weekday ``k`` on or after ``value``."""
    kk = int(resolve_weekday(k))
    return _shift(value, lambda d: _on_or_after(d, kk))


def kday_nearest(value: T, k: WeekdayLike) -> T:
    """The weekday ``k`` nearest to ``value`` (at most three days away)."""
    kk = int(resolve_weekday(k))
    return _shift(value, lambda d: _nearest(d, kk))


def kday_before(value: T, k: WeekdayLike) -> T:
    """The weekday ``k`` strictly before ``value``."""
    kk = int(resolve_weekday(k))
    return _shift(value, lambda d: _before(d, kk))


def kday_after(value: T, k: WeekdayLike) -> T:
    """
    The weekday ``k`` on or after ``value``; the anchor that ``nth_kday``
    counts back from for negative ``n``.
    """
    kk = int(resolve_weekday(k))
    return _shift(value, lambda d: _after(d, kk))


def nth_kday(value: T, n: int, k: WeekdayLike) -> T:
    """
    The ``n``-th weekday ``k`` after (``n > 0``) or before (``n < 0``)
    ``value``.  ``nth_kday(date(2017, 11, 1), 4, "thursday")`` is US
    Thanksgiving 2017, 2017-11-23.
    """
    if not isinstance(n, (int, np.integer)) or isinstance(n, bool):
        raise TypeError(f"n must be an integer; got {n!r}.")
    if n == 0:
        raise ValueError("n must be non-zero.")
    kk = int(resolve_weekday(k))
    nn = int(n)
    return _shift(value, lambda d: _nth(d, nn, kk))


def first_kday(value: T, k: WeekdayLike) -> T:
    return nth_kday(value, 1, k)


def last_kday(value: T, k: WeekdayLike) -> T:
    return nth_kday(value, -1, k)
