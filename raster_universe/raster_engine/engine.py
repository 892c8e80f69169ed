"""
Timed rasterization entry points.

Wraps the pure algorithms from raster_algos:
1. Time the algorithm call only (time.perf_counter_ns)
2. Describe every cell ("Drawing point (x, y)")
3. Package points, descriptions and elapsed time as a RasterTrace

Formatting and timing never happen inside the algorithms themselves.
"""

import time
from typing import Callable, List

from raster_algos.circle import bresenham_circle_points
from raster_algos.lines import bresenham_line_points, dda_points, step_sampling_points
from raster_core.geometry import radius_between
from raster_core.types import CircleRequest, GridPoint, LineRequest, RasterTrace


# =============================================================================
# Algorithm Registry
# =============================================================================


STEP = "step"
DDA = "dda"
BRESENHAM = "bresenham"
BRESENHAM_CIRCLE = "bresenham_circle"

ALGORITHMS = (STEP, DDA, BRESENHAM, BRESENHAM_CIRCLE)

HEADERS = {
    STEP: "Step-by-Step Algorithm:",
    DDA: "DDA Algorithm:",
    BRESENHAM: "Bresenham Algorithm:",
    BRESENHAM_CIRCLE: "Bresenham Circle Algorithm:",
}

POINT_TEMPLATE = "Drawing point {point}"


def describe_point(point: GridPoint) -> str:
    """Log line for one emitted cell."""
    return POINT_TEMPLATE.format(point=point)


def _timed_trace(algorithm: str, compute: Callable[[], List[GridPoint]]) -> RasterTrace:
    """Run compute(), timing only the call, and build the trace."""
    started = time.perf_counter_ns()
    points = compute()
    elapsed_ns = time.perf_counter_ns() - started

    return RasterTrace(
        algorithm=algorithm,
        header=HEADERS[algorithm],
        points=tuple(points),
        descriptions=tuple(describe_point(p) for p in points),
        elapsed_ns=elapsed_ns,
    )


# =============================================================================
# Per-Algorithm Operations
# =============================================================================


def rasterize_step_sampling(start: GridPoint, end: GridPoint) -> RasterTrace:
    """Naive slope sampling; see raster_algos.lines.step_sampling_points."""
    return _timed_trace(STEP, lambda: step_sampling_points(start, end))


def rasterize_dda(start: GridPoint, end: GridPoint) -> RasterTrace:
    """DDA; see raster_algos.lines.dda_points."""
    return _timed_trace(DDA, lambda: dda_points(start, end))


def rasterize_bresenham_line(start: GridPoint, end: GridPoint) -> RasterTrace:
    """Bresenham line; see raster_algos.lines.bresenham_line_points."""
    return _timed_trace(BRESENHAM, lambda: bresenham_line_points(start, end))


def rasterize_bresenham_circle(center: GridPoint, radius: int) -> RasterTrace:
    """
    Midpoint circle; see raster_algos.circle.bresenham_circle_points.

    Raises:
        InvalidRadius: If radius < 0 (raised by the algorithm, no trace built)
    """
    return _timed_trace(BRESENHAM_CIRCLE, lambda: bresenham_circle_points(center, radius))


def rasterize_line(request: LineRequest, algorithm: str) -> RasterTrace:
    """Run one of the line algorithms on a LineRequest."""
    if algorithm == STEP:
        return rasterize_step_sampling(request.start, request.end)
    elif algorithm == DDA:
        return rasterize_dda(request.start, request.end)
    elif algorithm == BRESENHAM:
        return rasterize_bresenham_line(request.start, request.end)
    else:
        raise ValueError(f"Unknown line algorithm: {algorithm}")


def rasterize_circle(request: CircleRequest) -> RasterTrace:
    """Run the midpoint circle on a CircleRequest."""
    return rasterize_bresenham_circle(request.center, request.radius)


# =============================================================================
# Dispatcher
# =============================================================================


def rasterize(algorithm: str, start: GridPoint, end: GridPoint) -> RasterTrace:
    """
    Run exactly one algorithm on a pair of grid points.

    For the line algorithms the points are the segment endpoints. For
    "bresenham_circle" start is the center and end lies on the rim:
    radius = round(|end - start|).

    Args:
        algorithm: One of ALGORITHMS
        start: First point (line start or circle center)
        end: Second point (line end or rim point)

    Returns:
        RasterTrace for the selected algorithm.

    Raises:
        ValueError: If algorithm is not one of ALGORITHMS
    """
    if algorithm == BRESENHAM_CIRCLE:
        return rasterize_circle(CircleRequest(start, radius_between(start, end)))
    elif algorithm in (STEP, DDA, BRESENHAM):
        return rasterize_line(LineRequest(start, end), algorithm)
    else:
        raise ValueError(f"Unknown algorithm: {algorithm}. Must be one of {ALGORITHMS}")


__all__ = [
    "ALGORITHMS",
    "STEP",
    "DDA",
    "BRESENHAM",
    "BRESENHAM_CIRCLE",
    "HEADERS",
    "describe_point",
    "rasterize_step_sampling",
    "rasterize_dda",
    "rasterize_bresenham_line",
    "rasterize_bresenham_circle",
    "rasterize_line",
    "rasterize_circle",
    "rasterize",
]
