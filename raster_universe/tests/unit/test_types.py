"""
Unit tests for raster_core/types.py and raster_core/geometry.py

- GridPoint: structural equality/ordering, unpacking, str
- CircleRequest: radius validation
- RasterTrace: numpy view, bounding box, log lines
- round_half_away / round_ratio_half_away / radius_between
"""

import dataclasses
import math
from fractions import Fraction

import numpy as np
import pytest

from raster_core.geometry import radius_between, round_half_away, round_ratio_half_away
from raster_core.types import (
    CircleRequest,
    GridPoint,
    InvalidRadius,
    LineRequest,
    RasterTrace,
)


class TestGridPoint:
    """Immutable integer cell."""

    def test_structural_equality(self):
        assert GridPoint(1, 2) == GridPoint(1, 2)
        assert GridPoint(1, 2) != GridPoint(2, 1)

    def test_ordering_x_then_y(self):
        points = [GridPoint(1, 0), GridPoint(0, 5), GridPoint(0, -1)]
        assert sorted(points) == [GridPoint(0, -1), GridPoint(0, 5), GridPoint(1, 0)]

    def test_unpacking(self):
        x, y = GridPoint(-3, 4)
        assert (x, y) == (-3, 4)

    def test_str(self):
        assert str(GridPoint(-3, 4)) == "(-3, 4)"

    def test_frozen(self):
        p = GridPoint(0, 0)
        with pytest.raises(dataclasses.FrozenInstanceError):
            p.x = 1

    def test_hashable(self):
        assert len({GridPoint(0, 0), GridPoint(0, 0), GridPoint(1, 0)}) == 2


class TestRequests:
    """LineRequest and CircleRequest construction."""

    def test_degenerate_line_allowed(self):
        req = LineRequest(GridPoint(2, 2), GridPoint(2, 2))
        assert req.start == req.end

    def test_circle_radius_zero_allowed(self):
        assert CircleRequest(GridPoint(0, 0), 0).radius == 0

    def test_circle_negative_radius_rejected(self):
        with pytest.raises(InvalidRadius) as exc_info:
            CircleRequest(GridPoint(0, 0), -3)

        assert exc_info.value.radius == -3
        assert "-3" in str(exc_info.value)


class TestRasterTrace:
    """Trace helpers."""

    def _trace(self, points):
        return RasterTrace(
            algorithm="dda",
            header="DDA Algorithm:",
            points=tuple(points),
            descriptions=tuple(f"Drawing point {p}" for p in points),
            elapsed_ns=1234,
        )

    def test_len(self):
        assert len(self._trace([GridPoint(0, 0), GridPoint(1, 1)])) == 2

    def test_as_array(self):
        arr = self._trace([GridPoint(0, 0), GridPoint(3, -2), GridPoint(3, -2)]).as_array()

        assert arr.shape == (3, 2)
        assert arr.dtype == np.int64
        np.testing.assert_array_equal(arr, [[0, 0], [3, -2], [3, -2]])

    def test_as_array_empty(self):
        assert self._trace([]).as_array().shape == (0, 2)

    def test_bounding_box(self):
        trace = self._trace([GridPoint(2, -1), GridPoint(-4, 3), GridPoint(0, 7)])
        assert trace.bounding_box() == (-4, -1, 2, 7)

    def test_bounding_box_empty_raises(self):
        with pytest.raises(ValueError):
            self._trace([]).bounding_box()

    def test_log_lines(self):
        lines = self._trace([GridPoint(0, 0), GridPoint(1, 1)]).log_lines()

        assert lines == [
            "DDA Algorithm:",
            "Drawing point (0, 0)",
            "Drawing point (1, 1)",
            "Execution time: 1234 ns",
        ]


class TestRoundHalfAway:
    """Single rounding rule of the engine."""

    @pytest.mark.parametrize("value,expected", [
        (0.0, 0), (0.4, 0), (0.5, 1), (1.5, 2), (2.5, 3), (2.6, 3),
        (-0.4, 0), (-0.5, -1), (-1.5, -2), (-2.5, -3), (-2.6, -3),
        (7.0, 7), (-7.0, -7),
    ])
    def test_values(self, value, expected):
        assert round_half_away(value) == expected

    def test_differs_from_builtin_round_on_even_ties(self):
        assert round(2.5) == 2
        assert round_half_away(2.5) == 3


class TestRoundRatioHalfAway:
    """Half-away rounding of an exact integer fraction."""

    @pytest.mark.parametrize("num,den,expected", [
        (0, 5, 0), (15, 2, 8), (-15, 2, -8), (7, 3, 2), (-7, 3, -2),
        (8, 3, 3), (-8, 3, -3), (165, 22, 8), (-165, 22, -8),
        (164, 22, 7), (21, 7, 3), (-21, 7, -3), (1, 1000, 0),
    ])
    def test_values(self, num, den, expected):
        assert round_ratio_half_away(num, den) == expected

    def test_matches_fraction_rounding(self):
        """Agrees with floor(|v| + 1/2) on Fractions, sign restored."""
        for den in range(1, 30):
            for num in range(-90, 91):
                v = Fraction(num, den)
                exact = math.floor(abs(v) + Fraction(1, 2))
                expected = exact if v >= 0 else -exact
                assert round_ratio_half_away(num, den) == expected, f"{num}/{den}"

    def test_negation_symmetric(self):
        for den in range(1, 12):
            for num in range(0, 40):
                assert round_ratio_half_away(-num, den) == -round_ratio_half_away(num, den)


class TestRadiusBetween:
    """Rounded Euclidean distance."""

    @pytest.mark.parametrize("p,q,expected", [
        (GridPoint(0, 0), GridPoint(3, 4), 5),
        (GridPoint(0, 0), GridPoint(0, 0), 0),
        (GridPoint(0, 0), GridPoint(1, 1), 1),   # 1.414
        (GridPoint(0, 0), GridPoint(1, 2), 2),   # 2.236
        (GridPoint(0, 0), GridPoint(3, 3), 4),   # 4.243
        (GridPoint(-2, -2), GridPoint(1, 2), 5),
    ])
    def test_values(self, p, q, expected):
        assert radius_between(p, q) == expected

    def test_symmetric(self):
        assert radius_between(GridPoint(5, -1), GridPoint(-2, 6)) == \
            radius_between(GridPoint(-2, 6), GridPoint(5, -1))
