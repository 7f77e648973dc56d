"""Numeric base-conversion helpers and float predicates.

The digit helpers render the magnitude of a non-negative integer in a given
base without any prefix; the caller decides about ``0x`` / ``0b`` / ``0o``
and about the sign.
"""

from __future__ import annotations

import math
from typing import Any


def _check_magnitude(n: Any) -> int:
    if isinstance(n, bool) or not isinstance(n, int):
        raise ValueError(f"expected an integer, got {type(n).__name__}")
    if n < 0:
        raise ValueError(f"expected a non-negative integer, got {n}")
    return n


def to_binary_digits(n: int) -> str:
    """``5`` → ``'101'``."""
    return format(_check_magnitude(n), "b")


def to_octal_digits(n: int) -> str:
    """``8`` → ``'10'``."""
    return format(_check_magnitude(n), "o")


def to_hex_digits(n: int, upper: bool = False) -> str:
    """``255`` → ``'ff'`` (``'FF'`` with *upper*)."""
    return format(_check_magnitude(n), "X" if upper else "x")


def is_nan(x: Any) -> bool:
    # ints are never NaN; math.isnan would overflow on huge ones
    return isinstance(x, float) and math.isnan(x)


def is_infinite(x: Any) -> bool:
    return isinstance(x, float) and math.isinf(x)
