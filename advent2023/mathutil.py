"""Greatest common divisor and least common multiple."""

from __future__ import annotations


def gcd(a: int, b: int) -> int:
    """Greatest common divisor of two non-negative integers."""
    if a == b:
        return a
    if b > a:
        a, b = b, a
    while b > 0:
        a, b = b, a % b
    return a


def lcm(a: int, b: int) -> int:
    """Least common multiple of two non-negative integers."""
    return a * b // gcd(a, b)