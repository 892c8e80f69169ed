"""
raster_engine: Timed, traced entry points over raster_algos.

One operation per algorithm plus a by-name dispatcher. Every call returns
a fresh RasterTrace; nothing is shared between calls.
"""

from .engine import (
    ALGORITHMS,
    rasterize,
    rasterize_bresenham_circle,
    rasterize_bresenham_line,
    rasterize_circle,
    rasterize_dda,
    rasterize_line,
    rasterize_step_sampling,
)

__all__ = [
    "ALGORITHMS",
    "rasterize",
    "rasterize_step_sampling",
    "rasterize_dda",
    "rasterize_bresenham_line",
    "rasterize_bresenham_circle",
    "rasterize_line",
    "rasterize_circle",
]
