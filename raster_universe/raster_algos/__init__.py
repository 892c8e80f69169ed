"""
Raster algorithms: pure primitive → ordered grid cells.

Each algorithm:
- Takes validated integer inputs (GridPoint, radius)
- Returns the cells in the algorithm's own visitation order
- Keeps no state between calls

Algorithms:
- lines.py: step_sampling_points, dda_points, bresenham_line_points
- circle.py: bresenham_circle_points (with mirror_octant)
"""

from .circle import bresenham_circle_points, mirror_octant
from .lines import bresenham_line_points, dda_points, step_sampling_points

__all__ = [
    "step_sampling_points",
    "dda_points",
    "bresenham_line_points",
    "bresenham_circle_points",
    "mirror_octant",
]
