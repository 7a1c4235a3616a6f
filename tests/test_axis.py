# tests/test_axis.py
"""
Axis frame: along/across mapping for both orientations, label boxes growing
away from the axis, arrowhead bases, edge lookups.
"""

from __future__ import annotations

import pytest

from slide_diagrams.core.axis import Axis, far_edge, near_edge
from slide_diagrams.core.types import Box, LabelSize


def test_spanning_axis_from_margins() -> None:
    axis = Axis.spanning("horizontal", 900.0, 40.0, 75.0)
    assert (axis.start, axis.end, axis.cross) == (40.0, 860.0, 75.0)
    assert axis.length == 820.0
    assert axis.midpoint == 450.0


def test_along_is_proportional_and_unclamped() -> None:
    axis = Axis("horizontal", 40.0, 860.0, 75.0)
    assert axis.along(0.0) == 40.0
    assert axis.along(0.5) == 450.0
    assert axis.along(-0.5) == pytest.approx(-370.0)


def test_point_swaps_for_vertical() -> None:
    h = Axis("horizontal", 0.0, 100.0, 50.0)
    v = Axis("vertical", 0.0, 100.0, 50.0)
    assert h.point(10.0, 20.0) == (10.0, 20.0)
    assert v.point(10.0, 20.0) == (20.0, 10.0)
    assert v.line(2.0).start == (50.0, 0.0) and v.line(2.0).end == (50.0, 100.0)


def test_box_grows_away_from_axis() -> None:
    axis = Axis("horizontal", 0.0, 100.0, 50.0)
    size = LabelSize(20.0, 10.0)
    below = axis.box(50.0, 60.0, 1, size)
    above = axis.box(50.0, 40.0, -1, size)
    assert (below.x, below.y) == (40.0, 60.0)
    assert (above.x, above.y) == (40.0, 30.0)


def test_vertical_box_uses_width_across() -> None:
    axis = Axis("vertical", 0.0, 100.0, 50.0)
    size = LabelSize(20.0, 10.0)
    right = axis.box(50.0, 60.0, 1, size)
    left = axis.box(50.0, 40.0, -1, size)
    assert (right.x, right.y, right.width, right.height) == (60.0, 45.0, 20.0, 10.0)
    assert (left.x, left.y) == (20.0, 45.0)


def test_arrowhead_base_towards_side() -> None:
    axis = Axis("horizontal", 0.0, 100.0, 50.0)
    head = axis.arrowhead(30.0, 50.0, 1, 6.0)
    assert head.points == ((30.0, 50.0), (24.0, 56.0), (36.0, 56.0))
    v_head = Axis("vertical", 0.0, 100.0, 50.0).arrowhead(30.0, 50.0, -1, 6.0)
    assert v_head.points == ((50.0, 30.0), (44.0, 24.0), (44.0, 36.0))


def test_edges() -> None:
    b = Box(10.0, 20.0, 30.0, 40.0)
    h = Axis("horizontal", 0.0, 100.0, 0.0)
    v = Axis("vertical", 0.0, 100.0, 0.0)
    assert far_edge(b, h, 1) == 60.0 and far_edge(b, h, -1) == 20.0
    assert near_edge(b, h, 1) == 20.0 and near_edge(b, h, -1) == 60.0
    assert far_edge(b, v, 1) == 40.0 and near_edge(b, v, 1) == 10.0
