"""
raster_core: Core primitives for the rasterization engine.

Provides:
- types: GridPoint, LineRequest, CircleRequest, RasterTrace, InvalidRadius
- geometry: Rounding rule and radius derivation shared by all algorithms
"""

from .types import CircleRequest, GridPoint, InvalidRadius, LineRequest, RasterTrace

__all__ = [
    "geometry",
    "types",
    "CircleRequest",
    "GridPoint",
    "InvalidRadius",
    "LineRequest",
    "RasterTrace",
]
