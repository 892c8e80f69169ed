"""
Bresenham (midpoint) circle rasterization.

Generates one octant with an integer decision variable and mirrors every
octant point into the other seven. Mirrored duplicates (x == 0, x == y)
stay in the output.
"""

from typing import List

from raster_core.types import GridPoint, InvalidRadius


def mirror_octant(center: GridPoint, x: int, y: int) -> List[GridPoint]:
    """
    Eight symmetric cells of octant point (x, y) around center.

    Order: (+x, +y), (-x, +y), (+x, -y), (-x, -y),
           (+y, +x), (-y, +x), (+y, -x), (-y, -x)
    """
    cx, cy = center
    return [
        GridPoint(cx + x, cy + y), GridPoint(cx - x, cy + y),
        GridPoint(cx + x, cy - y), GridPoint(cx - x, cy - y),
        GridPoint(cx + y, cy + x), GridPoint(cx - y, cy + x),
        GridPoint(cx + y, cy - x), GridPoint(cx - y, cy - x),
    ]


def bresenham_circle_points(center: GridPoint, radius: int) -> List[GridPoint]:
    """
    Midpoint circle around center.

    Algorithm:
        x = 0, y = radius, d = 3 - 2·radius
        emit mirror_octant(x, y)
        while y ≥ x:
            x += 1
            d > 0 → y -= 1, d += 4·(x - y) + 10
            else  → d += 4·x + 6
            emit mirror_octant(x, y)

    Radius 0 emits the eight (identical) center cells and stops without
    entering the loop.

    Args:
        center: Circle center cell
        radius: Non-negative radius in cells

    Returns:
        8 · (iterations + 1) cells, in generation order.

    Raises:
        InvalidRadius: If radius < 0
    """
    if radius < 0:
        raise InvalidRadius(radius)

    x = 0
    y = radius
    d = 3 - 2 * radius

    points = mirror_octant(center, x, y)

    if radius == 0:
        return points

    while y >= x:
        x += 1
        if d > 0:
            y -= 1
            d += 4 * (x - y) + 10
        else:
            d += 4 * x + 6
        points.extend(mirror_octant(center, x, y))

    return points


__all__ = [
    "mirror_octant",
    "bresenham_circle_points",
]
