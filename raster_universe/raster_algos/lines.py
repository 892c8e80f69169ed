"""
Line rasterization algorithms.

Three ways to turn a segment between two grid points into cells:
- step_sampling_points: Naive slope sampling along the dominant axis (floor)
- dda_points: Digital Differential Analyzer, uniform parametric sampling
- bresenham_line_points: Integer-only error-term walk

Key principles:
1. Every function is pure: same endpoints → same list, no timing, no logging
2. Visitation order is part of the result (never sorted, never deduplicated)
3. start == end is valid and yields exactly one point
4. No input within contract divides by zero or fails to terminate

Timing and textual traces are added by raster_engine.
"""

from typing import List

from raster_core.geometry import round_ratio_half_away
from raster_core.types import GridPoint


# =============================================================================
# Naive Slope Sampling
# =============================================================================


def step_sampling_points(start: GridPoint, end: GridPoint) -> List[GridPoint]:
    """
    Rasterize a segment by sampling the dominant axis and flooring the other.

    Algorithm:
    1. Order x0 ≤ x1 and, separately, y0 ≤ y1
    2. dx = x1 - x0, dy = y1 - y0 (both ≥ 0 after step 1)
    3. dx > dy: walk x over [x0, x1], y = floor(y0 + dy/dx · (x - x0))
       otherwise: walk y over [y0, y1], x = floor(x0 + dx/dy · (y - y0))

    The two coordinate pairs are ordered independently, not swapped as
    points. For a segment that rises in one axis and falls in the other,
    e.g. (0, 4) → (4, 0), the cells follow the mirrored diagonal
    (0, 0) → (4, 4).

    Args:
        start: First endpoint
        end: Second endpoint

    Returns:
        Cells in increasing order of the dominant axis.
        Exactly max(dx, dy) + 1 cells.
    """
    x0, x1 = sorted((start.x, end.x))
    y0, y1 = sorted((start.y, end.y))

    dx = x1 - x0
    dy = y1 - y0

    points = []

    if dx > dy:
        # dx > dy ≥ 0, so dx > 0; floor division is the exact floor
        for x in range(x0, x1 + 1):
            points.append(GridPoint(x, y0 + (dy * (x - x0)) // dx))
    else:
        # dx ≤ dy; dy == 0 only for a single-point segment
        for y in range(y0, y1 + 1):
            offset = (dx * (y - y0)) // dy if dy != 0 else 0
            points.append(GridPoint(x0 + offset, y))

    return points


# =============================================================================
# DDA (Digital Differential Analyzer)
# =============================================================================


def dda_points(start: GridPoint, end: GridPoint) -> List[GridPoint]:
    """
    Rasterize a segment with uniform parametric sampling.

    steps = max(|dx|, |dy|); sample i ∈ [0, steps] is
    (round(x0 + i·dx/steps), round(y0 + i·dy/steps)).

    Each sample is the exact rational (x0·steps + i·dx) / steps, rounded
    half away from zero in integer arithmetic
    (raster_core.geometry.round_ratio_half_away). Ties such as 7.5 are
    always real ties, and the last sample lands on end exactly.

    Works for any direction without special-casing the octant.

    Returns:
        Exactly steps + 1 cells; first == start, last == end.
    """
    dx = end.x - start.x
    dy = end.y - start.y
    steps = max(abs(dx), abs(dy))

    if steps == 0:
        return [start]

    points = []
    for i in range(steps + 1):
        x = round_ratio_half_away(start.x * steps + i * dx, steps)
        y = round_ratio_half_away(start.y * steps + i * dy, steps)
        points.append(GridPoint(x, y))

    return points


# =============================================================================
# Bresenham Line
# =============================================================================


def bresenham_line_points(start: GridPoint, end: GridPoint) -> List[GridPoint]:
    """
    Integer-only Bresenham line, valid in all eight octants.

    State:
        dx = |x1 - x0|, dy = |y1 - y0|
        sx, sy = step direction per axis (+1 or -1)
        err = dx - dy

    Each iteration emits the current cell, stops once it equals end, then
    with e2 = 2·err:
        e2 > -dy → err -= dy, x += sx
        e2 <  dx → err += dx, y += sy

    Termination: every iteration moves at least one axis one unit toward
    end, so at most max(dx, dy) + 1 cells are emitted.

    Returns:
        Cells from start to end inclusive; first == start, last == end.
    """
    x, y = start
    x1, y1 = end

    dx = abs(x1 - x)
    dy = abs(y1 - y)
    sx = 1 if x <= x1 else -1
    sy = 1 if y <= y1 else -1
    err = dx - dy

    points = []

    while True:
        points.append(GridPoint(x, y))
        if x == x1 and y == y1:
            break

        e2 = 2 * err
        if e2 > -dy:
            err -= dy
            x += sx
        if e2 < dx:
            err += dx
            y += sy

    return points


# =============================================================================
# Exports
# =============================================================================


__all__ = [
    "step_sampling_points",
    "dda_points",
    "bresenham_line_points",
]
