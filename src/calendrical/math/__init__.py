# src/calendrical/math/__init__.py
"""
calendrical.math
~~~~~~~~~~~~~~~~

Exact rational arithmetic on (whole, fraction) pairs, so chained day-count
arithmetic never accumulates floating point error.

Basic usage::

    from calendrical.math import ExactFraction, add

    add((1, ExactFraction(1, 2)), (0, ExactFraction(1, 2)))
    # → (2, ExactFraction(0, 1))

The integer helpers ``mod`` and ``amod`` accept NumPy integer arrays
everywhere a scalar is.

Public API
----------
ExactFraction   Reduced rational number.
add, sub        Mixed-number addition and subtraction with carry/borrow.
mult, div       Mixed-number multiplication and division.
simplify        Reduce n/d.
mod, amod       Floored and adjusted modulus.
"""

from __future__ import annotations

from calendrical.math.fraction import (
    FRACTIONAL_SLASH,
    ZERO,
    ExactFraction,
    Mixed,
    add,
    amod,
    div,
    mod,
    mult,
    negate,
    normalise,
    reciprocal,
    simplify,
    sub,
    subscript,
    superscript,
    to_improper,
    to_string,
)

__all__ = [
    "FRACTIONAL_SLASH",
    "ZERO",
    "ExactFraction",
    "Mixed",
    "add",
    "amod",
    "div",
    "mod",
    "mult",
    "negate",
    "normalise",
    "reciprocal",
    "simplify",
    "sub",
    "subscript",
    "superscript",
    "to_improper",
    "to_string",
]
