"""Small integer arithmetic helpers."""

from __future__ import annotations

import math


def add(a: int, b: int) -> int:
    """Return ``a + b``."""
    return a + b


def sub(a: int, b: int) -> int:
    """Return ``a - b``."""
    return a - b


def mul(a: int, b: int) -> int:
    """Return ``a * b``."""
    return a * b


def divide(a: int, b: int) -> float:
    """Return ``a / b``, or 0.0 when ``b`` is zero."""
    return a / b if b != 0 else 0.0


def gcd(a: int, b: int) -> int:
    """Return the non-negative greatest common divisor."""
    while b:
        a, b = b, math.fmod(a, b)
        a, b = int(a), int(b)
    return abs(a)


def factorial(n: int) -> int:
    """Return ``n!``, or 0 for negative ``n``."""
    if n < 0:
        return 0
    return math.prod(range(2, n + 1))