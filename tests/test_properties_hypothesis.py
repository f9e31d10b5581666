import math

import pytest

hypothesis = pytest.importorskip("hypothesis", reason="hypothesis is a dev optional dependency")
from hypothesis import given, strategies as st  # type: ignore

from engine.core.color import Color, mix
from engine.core.line import Line
from engine.core.vector import Point
from engine.layout import polygon_centers
from shapes.polygon import corner_points

coord = st.floats(-1e3, 1e3, allow_nan=False, allow_infinity=False)
unit = st.floats(0.0, 1.0, allow_nan=False)
colors = st.builds(Color, unit, unit, unit, unit)


@given(n=st.integers(3, 64), cx=coord, cy=coord, r=st.floats(0.1, 1e3))
def test_corner_points_on_circle_and_equidistant(n, cx, cy, r):
    center = Point(cx, cy)
    pts = corner_points(n, center, r)
    assert len(pts) == n
    for p in pts:
        assert math.isclose(center.distance_to(p), r, rel_tol=1e-9, abs_tol=1e-9)
    sides = [pts[i].distance_to(pts[(i + 1) % n]) for i in range(n)]
    assert max(sides) - min(sides) <= 1e-9 * max(1.0, r) * 10


@given(a=colors, b=colors, t=unit)
def test_mix_operand_order_and_bounds(a, b, t):
    m = mix(a, b, t)
    assert m == mix(b, a, t)
    for x, y, z in zip(a.components, b.components, m.components):
        assert min(x, y) - 1e-12 <= z <= max(x, y) + 1e-12


@given(a=colors, t=unit)
def test_mix_same_color_identity(a, t):
    assert mix(a, a, t) is a


@given(x0=coord, y0=coord, x1=coord, y1=coord, n=st.integers(1, 50))
def test_segment_count_and_spacing(x0, y0, x1, y1, n):
    line = Line.from_points(Point(x0, y0), Point(x1, y1))
    pts = line.segment(n)
    assert len(pts) == n - 1
    for k, p in enumerate(pts, start=1):
        assert math.isclose(p.x, x0 + (k / n) * (x1 - x0), abs_tol=1e-9)
        assert math.isclose(p.y, y0 + (k / n) * (y1 - y0), abs_tol=1e-9)


@given(edges=st.integers(3, 12), layer=st.integers(1, 20))
def test_polygon_center_count_is_edges_times_layer(edges, layer):
    corners = corner_points(edges, Point(0.0, 0.0), float(layer))
    assert len(polygon_centers(corners, layer)) == edges * layer
