"""
Scalar geometry helpers shared by the rasterization algorithms.

Provides:
- round_half_away: The single rounding rule used by the engine
- round_ratio_half_away: Same rule applied to an exact integer fraction
- radius_between: Circle radius from two grid points (rounded distance)

Rounding is always half away from zero, so a trace and its mirror
image under negation round identically.
"""

import math

from .types import GridPoint


def round_half_away(value: float) -> int:
    """
    Round to the nearest integer, ties away from zero.

    Unlike the built-in round() (half-to-even), round_half_away(-v) is
    always -round_half_away(v).

    Examples:
        >>> round_half_away(2.5)
        3
        >>> round_half_away(-2.5)
        -3
        >>> round_half_away(0.4)
        0
    """
    if value >= 0:
        return int(math.floor(value + 0.5))
    return -int(math.floor(-value + 0.5))


def round_ratio_half_away(numerator: int, denominator: int) -> int:
    """
    Round the exact fraction numerator / denominator, ties away from zero.

    Integer-only counterpart of round_half_away: no float is formed, so
    a tie like 15 / 2 rounds to 8 rather than to whatever side of 7.5 a
    binary approximation falls on.

    Args:
        numerator: Any integer
        denominator: Positive integer

    Examples:
        >>> round_ratio_half_away(15, 2)
        8
        >>> round_ratio_half_away(-15, 2)
        -8
        >>> round_ratio_half_away(7, 3)
        2
    """
    quotient, remainder = divmod(abs(numerator), denominator)
    if 2 * remainder >= denominator:
        quotient += 1
    return quotient if numerator >= 0 else -quotient


def radius_between(p: GridPoint, q: GridPoint) -> int:
    """
    Euclidean distance between two grid points, rounded to an integer.

    Used when a circle is described by its center and a point on its rim.
    Always non-negative.
    """
    return round_half_away(math.hypot(q.x - p.x, q.y - p.y))


__all__ = [
    "round_half_away",
    "round_ratio_half_away",
    "radius_between",
]
