"""
Core type definitions for the rasterization engine.

All entities are created per invocation and never mutated afterwards:
- GridPoint: one integer-addressed cell of the raster grid
- LineRequest / CircleRequest: validated primitive descriptions
- RasterTrace: ordered output of one algorithm run (plus timing)
"""

from dataclasses import dataclass

import numpy as np


class InvalidRadius(ValueError):
    """Raised when a circle radius is negative."""

    def __init__(self, radius: int):
        super().__init__(f"Radius must be non-negative, got {radius}")
        self.radius = radius


# Grid coordinates (x, y)
@dataclass(frozen=True, order=True)
class GridPoint:
    """Cell coordinates on the infinite integer grid (x right, y up)."""
    x: int
    y: int

    def __iter__(self):
        """Allow tuple unpacking: x, y = point"""
        return iter((self.x, self.y))

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"


@dataclass(frozen=True)
class LineRequest:
    """
    Segment between two grid points.

    start == end is valid (degenerate single-point segment).
    """
    start: GridPoint
    end: GridPoint


@dataclass(frozen=True)
class CircleRequest:
    """Circle given by its center cell and a non-negative integer radius."""
    center: GridPoint
    radius: int

    def __post_init__(self):
        if self.radius < 0:
            raise InvalidRadius(self.radius)


@dataclass(frozen=True)
class RasterTrace:
    """
    Output of one algorithm run.

    - algorithm: Algorithm key ("step", "dda", "bresenham", "bresenham_circle")
    - points: Visitation order; duplicates are kept (circle octant mirroring)
    - descriptions: One human-readable line per point, same order as points
    - elapsed_ns: Wall-clock duration of the algorithm call in nanoseconds
    """
    algorithm: str
    header: str  # e.g. "DDA Algorithm:"
    points: tuple[GridPoint, ...]
    descriptions: tuple[str, ...]
    elapsed_ns: int

    def __len__(self) -> int:
        return len(self.points)

    def as_array(self) -> np.ndarray:
        """Points as an (N, 2) int64 array of [x, y] rows, in trace order."""
        if not self.points:
            return np.empty((0, 2), dtype=np.int64)
        return np.array([(p.x, p.y) for p in self.points], dtype=np.int64)

    def bounding_box(self) -> tuple[int, int, int, int]:
        """
        Inclusive bounds of the trace as (min_x, min_y, max_x, max_y).

        Raises:
            ValueError: If the trace is empty
        """
        if not self.points:
            raise ValueError("bounding_box requires a non-empty trace")

        arr = self.as_array()
        min_x, min_y = arr.min(axis=0)
        max_x, max_y = arr.max(axis=0)
        return int(min_x), int(min_y), int(max_x), int(max_y)

    def log_lines(self) -> list[str]:
        """Header, one description per point, then the execution time footer."""
        return [self.header, *self.descriptions, f"Execution time: {self.elapsed_ns} ns"]
