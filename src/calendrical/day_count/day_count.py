from __future__ import annotations

import math
from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Iterator, Union

import numpy as np
import numpy.typing as npt

from calendrical._exceptions import InvalidWeekday
from calendrical.math import fraction as _fraction
from calendrical.math.fraction import ZERO, ExactFraction, amod, simplify

DAYS_IN_A_WEEK: int = 7

# Quantisation of the float bridge: 1/10,000 of a day (8.64 seconds).
FLOAT_PRECISION: int = 10_000

MICROSECONDS_PER_DAY: int = 86_400 * 1_000_000

DayLike = Union["DayCount", int, np.integer, npt.NDArray[np.integer]]


@dataclass(frozen=True, slots=True, order=True)
class DayCount:
    """
    Calendar-independent moment: a whole day number plus an exact fraction
    of a day in [0, 1).  Day 1 is Gregorian 0001-01-01, a Monday.

    Fractions outside [0, 1) are carried into ``day`` on construction.
    """

    day: int
    fraction: ExactFraction = ZERO

    def __post_init__(self) -> None:
        day, frac = _fraction.normalise((self.day, self.fraction))
        object.__setattr__(self, "day", day)
        object.__setattr__(self, "fraction", frac)

    def __iter__(self) -> Iterator[Any]:
        yield self.day
        yield self.fraction

    # ── arithmetic ───────────────────────────────────────────────────────

    @staticmethod
    def _coerce(other: Any) -> Any:
        if isinstance(other, DayCount):
            return other
        if isinstance(other, (int, np.integer)) and not isinstance(other, bool):
            return DayCount(int(other))
        return None

    def __add__(self, other: Any) -> DayCount:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return DayCount(*_fraction.add(self, rhs))

    __radd__ = __add__

    def __sub__(self, other: Any) -> DayCount:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return DayCount(*_fraction.sub(self, rhs))

    def __rsub__(self, other: Any) -> DayCount:
        lhs = self._coerce(other)
        if lhs is None:
            return NotImplemented
        return DayCount(*_fraction.sub(lhs, self))

    def __mul__(self, other: Any) -> DayCount:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return DayCount(*_fraction.mult(self, rhs))

    __rmul__ = __mul__

    def __truediv__(self, other: Any) -> DayCount:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return DayCount(*_fraction.div(self, rhs))

    # ── float bridge ─────────────────────────────────────────────────────

    @classmethod
    def from_float(cls, value: float, precision: int = FLOAT_PRECISION) -> DayCount:
        """
        Lossy conversion from a float day number.  The fractional part is
        truncated to a multiple of ``1 / precision`` of a day.
        """
        if precision <= 0:
            raise ValueError(f"precision must be positive; got {precision}.")
        day = math.floor(value)
        numerator = int((value - day) * precision)
        if numerator >= precision:
            day, numerator = day + 1, numerator - precision
        return cls(day, simplify(numerator, precision))

    def to_float(self) -> float:
        return self.day + float(self.fraction)

    def __float__(self) -> float:
        return self.to_float()

    def __str__(self) -> str:
        return _fraction.to_string(self)


class Weekday(IntEnum):
    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6
    SUNDAY = 7


def resolve_weekday(k: Weekday | int | str) -> Weekday:
    """Map a Weekday, a cardinal 1..7 or an English day name to a Weekday."""
    if isinstance(k, Weekday):
        return k
    if isinstance(k, str):
        try:
            return Weekday[k.strip().upper()]
        except KeyError:
            raise InvalidWeekday(f"Unknown weekday name {k!r}.") from None
    if isinstance(k, (int, np.integer)) and not isinstance(k, bool):
        if 1 <= k <= DAYS_IN_A_WEEK:
            return Weekday(int(k))
    raise InvalidWeekday(f"Weekday must be 1..7 or a day name; got {k!r}.")


def day_of_week(value: DayLike) -> Any:
    """
    Weekday 1 (Monday) .. 7 (Sunday) of a day count.  Integer NumPy arrays
    of day numbers return an array of weekdays.
    """
    if isinstance(value, DayCount):
        return amod(value.day, DAYS_IN_A_WEEK)
    return amod(value, DAYS_IN_A_WEEK)


def weeks(n: int) -> int:
    return n * DAYS_IN_A_WEEK


def time_to_day_fraction(
    hour: int, minute: int, second: int, microsecond: int = 0
) -> ExactFraction:
    microseconds = ((hour * 60 + minute) * 60 + second) * 1_000_000 + microsecond
    return simplify(microseconds, MICROSECONDS_PER_DAY)


def time_from_day_fraction(fraction: ExactFraction) -> tuple[int, int, int, int]:
    if not ZERO <= fraction < ExactFraction(1):
        raise ValueError(f"Day fraction must be in [0, 1); got {fraction!r}.")
    microseconds = fraction.numerator * MICROSECONDS_PER_DAY // fraction.denominator
    seconds, microsecond = divmod(microseconds, 1_000_000)
    minutes, second = divmod(seconds, 60)
    hour, minute = divmod(minutes, 60)
    return hour, minute, second, microsecond
