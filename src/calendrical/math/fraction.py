from __future__ import annotations

import math
from dataclasses import dataclass
from fractions import Fraction
from functools import total_ordering
from typing import Any, Tuple, Union

import numpy as np
import numpy.typing as npt

from calendrical._exceptions import ArithmeticDegenerate

IntLike = Union[int, np.integer, npt.NDArray[np.integer]]


def _as_int(value: Any, name: str) -> int:
    if isinstance(value, (int, np.integer)) and not isinstance(value, bool):
        return int(value)
    raise TypeError(f"{name} must be an integer; got {value!r}.")


@total_ordering
@dataclass(frozen=True, slots=True)
class ExactFraction:
    """
    Rational number n/d, stored fully reduced with the sign on the numerator.

    ExactFraction(2, 4) == ExactFraction(1, 2) and ExactFraction(1, -2) is
    stored as -1/2. A zero denominator raises ArithmeticDegenerate.
    """

    numerator: int
    denominator: int = 1

    def __post_init__(self) -> None:
        n = _as_int(self.numerator, "numerator")
        d = _as_int(self.denominator, "denominator")
        if d == 0:
            raise ArithmeticDegenerate(f"Zero denominator in {n}/{d}.")
        if d < 0:
            n, d = -n, -d
        g = math.gcd(n, d)
        object.__setattr__(self, "numerator", n // g)
        object.__setattr__(self, "denominator", d // g)

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, ExactFraction):
            return NotImplemented
        return self.numerator * other.denominator < other.numerator * self.denominator

    def __float__(self) -> float:
        return self.numerator / self.denominator

    def __bool__(self) -> bool:
        return self.numerator != 0

    def to_fraction(self) -> Fraction:
        return Fraction(self.numerator, self.denominator)

    @classmethod
    def from_fraction(cls, value: Fraction) -> ExactFraction:
        return cls(value.numerator, value.denominator)

    def __repr__(self) -> str:
        return f"ExactFraction({self.numerator}, {self.denominator})"


ZERO = ExactFraction(0, 1)

# (whole, fraction) pair.  DayCount unpacks the same way.
Mixed = Tuple[int, ExactFraction]


def simplify(numerator: int, denominator: int) -> ExactFraction:
    """Reduce n/d by gcd(n, d) and normalise so that d > 0."""
    return ExactFraction(numerator, denominator)


def _as_fraction(value: ExactFraction | tuple[int, int]) -> ExactFraction:
    if isinstance(value, ExactFraction):
        return value
    n, d = value
    return ExactFraction(n, d)


def normalise(value: Any) -> Mixed:
    """
    Split a (whole, fraction) pair and carry any whole units held in the
    fraction into the whole part, so that 0 <= numerator < denominator.
    """
    whole, frac = value
    frac = _as_fraction(frac)
    carry, numerator = divmod(frac.numerator, frac.denominator)
    return _as_int(whole, "whole part") + carry, ExactFraction(numerator, frac.denominator)


def negate(value: Any) -> Mixed:
    whole, frac = normalise(value)
    if frac.numerator == 0:
        return -whole, ZERO
    return -whole - 1, ExactFraction(frac.denominator - frac.numerator, frac.denominator)


def add(a: Any, b: Any) -> Mixed:
    i1, f1 = normalise(a)
    i2, f2 = normalise(b)
    if i2 < 0:
        return sub((i1, f1), negate((i2, f2)))

    # Common denominator d1 * d2
    denominator = f1.denominator * f2.denominator
    numerator = f1.numerator * f2.denominator + f2.numerator * f1.denominator

    carry, numerator = divmod(numerator, denominator)
    return i1 + i2 + carry, simplify(numerator, denominator)


def sub(a: Any, b: Any) -> Mixed:
    i1, f1 = normalise(a)
    i2, f2 = normalise(b)
    if i2 < 0:
        return add((i1, f1), negate((i2, f2)))

    denominator = f1.denominator * f2.denominator
    n1 = f1.numerator * f2.denominator
    n2 = f2.numerator * f1.denominator

    # Borrow one whole unit so the fractional difference stays non-negative.
    borrow = 1 if n1 < n2 else 0
    numerator = n1 + borrow * denominator - n2
    return i1 - i2 - borrow, simplify(numerator, denominator)


def to_improper(value: Any) -> tuple[int, int]:
    whole, frac = normalise(value)
    return whole * frac.denominator + frac.numerator, frac.denominator


def reciprocal(value: Any) -> Mixed:
    numerator, denominator = to_improper(value)
    if numerator == 0:
        raise ArithmeticDegenerate("Reciprocal of zero.")
    return normalise((0, ExactFraction(denominator, numerator)))


def mult(a: Any, b: Any) -> Mixed:
    n1, d1 = to_improper(a)
    n2, d2 = to_improper(b)

    denominator = d1 * d2
    whole, numerator = divmod(n1 * n2, denominator)
    return whole, simplify(numerator, denominator)


def div(a: Any, b: Any) -> Mixed:
    return mult(a, reciprocal(b))


# ── integer helpers (scalar or NumPy array) ──────────────────────────────────

def mod(x: IntLike, y: int) -> IntLike:
    """Floored modulus; the result takes the sign of y."""
    return x % y


def amod(x: IntLike, y: int) -> IntLike:
    """Adjusted modulus: like mod, but returns y instead of 0."""
    r = x % y
    if np.ndim(r) == 0:
        return y if r == 0 else int(r)
    return np.where(r == 0, y, r)


# ── rendering ────────────────────────────────────────────────────────────────

_SUPERSCRIPT = "⁰¹²³⁴⁵⁶⁷⁸⁹"
_SUBSCRIPT = "₀₁₂₃₄₅₆₇₈₉"
FRACTIONAL_SLASH = "⁄"


def superscript(digit: int) -> str:
    return _SUPERSCRIPT[digit]


def subscript(digit: int) -> str:
    return _SUBSCRIPT[digit]


def to_string(value: Any) -> str:
    """
    Render a (whole, fraction) pair as a mixed number, e.g. (2, 16/25) as
    "2¹⁶⁄₂₅".
    """
    whole, frac = normalise(value)
    num = "".join(superscript(int(c)) for c in str(frac.numerator))
    den = "".join(subscript(int(c)) for c in str(frac.denominator))
    return f"{whole}{num}{FRACTIONAL_SLASH}{den}"
