# tests/test_diagram_2d.py
"""
2D diagram layout: crossing axes, dots with top-right labels, dashed guides,
policy arrows onto both axes, per-axis scales and captions.
Canvas 600x500 with margins 80/40: axes cross at (300, 250).
"""

from __future__ import annotations

import pytest

from slide_diagrams.core.diagram_2d import layout_diagram_2d, render_diagram_2d
from slide_diagrams.core.labels import FixedMetricsLabelRenderer
from slide_diagrams.core.primitives import Circle, Label, Line, MarkerDef, Triangle
from slide_diagrams.core.types import AxisLabel, Diagram2DSpec, LabeledPoint, Point2D, Scale, Tic

RENDERER = FixedMetricsLabelRenderer()


def _spec(**kw) -> Diagram2DSpec:
    base = dict(width=600, height=500, id="s2", margin_x=80, margin_y=40)
    base.update(kw)
    return Diagram2DSpec(**base)


class RecordingRenderer(FixedMetricsLabelRenderer):
    """Fixed metrics, remembering every (label, as_latex) it was asked for."""

    def __init__(self) -> None:
        super().__init__()
        self.calls: list[tuple[str, bool]] = []

    def render(self, label, font_size, as_latex):
        self.calls.append((label, as_latex))
        return super().render(label, font_size, as_latex)


def test_axes_cross_at_center() -> None:
    drawing = layout_diagram_2d(_spec(), RENDERER)
    h_axis, v_axis = drawing.of_type(Line)
    assert h_axis.start == (80.0, 250.0) and h_axis.end == (520.0, 250.0)
    assert v_axis.start == (300.0, 40.0) and v_axis.end == (300.0, 460.0)
    svg = render_diagram_2d(_spec(), RENDERER)
    assert svg.count("<line") == 2
    assert "<marker" not in svg


def test_person_dot_and_label_top_right() -> None:
    drawing = layout_diagram_2d(_spec(persons=(Point2D(0.5, 0.5, "P"),)), RENDERER)
    (dot,) = drawing.of_type(Circle)
    assert dot.center == pytest.approx((300.0, 250.0))
    assert dot.radius == 8.0
    (label,) = drawing.of_type(Label)
    assert label.box.x == pytest.approx(308.0)
    assert label.box.y + label.box.height == pytest.approx(242.0)
    assert label.align == "left"
    assert label.element_id == "s2-P"


def test_guides_are_dashed_lines_to_both_axes() -> None:
    drawing = layout_diagram_2d(_spec(persons=(Point2D(0.25, 0.25, "G", guides=True),)), RENDERER)
    guides = [ln for ln in drawing.of_type(Line) if ln.dasharray]
    assert len(guides) == 2
    to_h, to_v = guides
    assert to_h.start == pytest.approx((190.0, 145.0)) and to_h.end == pytest.approx((190.0, 250.0))
    assert to_v.start == pytest.approx((190.0, 145.0)) and to_v.end == pytest.approx((300.0, 145.0))
    assert 'stroke-dasharray="3,3"' in render_diagram_2d(
        _spec(persons=(Point2D(0.25, 0.25, "G", guides=True),)), RENDERER
    )


def test_no_guides_by_default() -> None:
    drawing = layout_diagram_2d(_spec(persons=(Point2D(0.25, 0.25, "G"),)), RENDERER)
    assert [ln for ln in drawing.of_type(Line) if ln.dasharray] == []


def test_horizontal_policy_points_down_onto_axis() -> None:
    drawing = layout_diagram_2d(_spec(horizontal_policies=(LabeledPoint(0.5, "q"),)), RENDERER)
    arrow = drawing.of_type(Line)[-1]
    assert arrow.start == pytest.approx((300.0, 240.0)) and arrow.end == pytest.approx((300.0, 250.0))
    (head,) = drawing.of_type(Triangle)
    assert head.points == ((300.0, 250.0), (297.0, 247.0), (303.0, 247.0))
    (label,) = drawing.of_type(Label)
    assert label.box.y + label.box.height == pytest.approx(238.0)
    assert label.box.x == pytest.approx(295.2)


def test_vertical_policy_points_right_onto_axis() -> None:
    drawing = layout_diagram_2d(_spec(vertical_policies=(LabeledPoint(0.5, "r"),)), RENDERER)
    arrow = drawing.of_type(Line)[-1]
    assert arrow.start == pytest.approx((290.0, 250.0)) and arrow.end == pytest.approx((300.0, 250.0))
    (head,) = drawing.of_type(Triangle)
    assert head.points == ((300.0, 250.0), (297.0, 247.0), (297.0, 253.0))
    (label,) = drawing.of_type(Label)
    assert label.box.x + label.box.width == pytest.approx(288.0)
    assert label.box.y == pytest.approx(250.0 - 9.6)
    assert label.align == "right"


def test_scales_hang_below_and_right() -> None:
    spec = _spec(
        horizontal_scale=Scale(tics=(Tic(0.0, "0"),)),
        vertical_scale=Scale(tics=(Tic(0.0, "a"),)),
    )
    drawing = layout_diagram_2d(spec, RENDERER)
    h_tic, v_tic = drawing.of_type(Line)[2:4]
    assert h_tic.start == (80.0, 250.0) and h_tic.end == (80.0, 254.0)
    assert v_tic.start == (300.0, 40.0) and v_tic.end == (304.0, 40.0)
    h_label, v_label = drawing.of_type(Label)
    assert h_label.box.y == pytest.approx(256.0)
    assert h_label.box.x == pytest.approx(75.2)
    assert v_label.box.x == pytest.approx(306.0)
    assert v_label.box.y == pytest.approx(40.0 - 9.6)
    assert v_label.align == "left"


def test_scale_latex_flags_are_independent() -> None:
    renderer = RecordingRenderer()
    spec = _spec(
        horizontal_scale=Scale(tics=(Tic(0.5, "h"),), as_latex=False),
        vertical_scale=Scale(tics=(Tic(0.5, "v"),), as_latex=True),
        persons=(Point2D(0.1, 0.1, "p", as_latex=True),),
    )
    layout_diagram_2d(spec, renderer)
    assert ("h", False) in renderer.calls
    assert ("v", True) in renderer.calls
    assert ("p", True) in renderer.calls


def test_axis_captions_fill_margin_boxes() -> None:
    spec = _spec(horizontal_label=AxisLabel("Economic"), vertical_label=AxisLabel("Social"))
    drawing = layout_diagram_2d(spec, RENDERER)
    h_cap, v_cap = drawing.of_type(Label)
    assert (h_cap.box.x, h_cap.box.y, h_cap.box.width, h_cap.box.height) == pytest.approx((522.0, 40.0, 76.0, 420.0))
    assert (v_cap.box.x, v_cap.box.y, v_cap.box.width, v_cap.box.height) == pytest.approx((80.0, 2.0, 440.0, 36.0))
    assert "height: 100%" in h_cap.style and "hyphens: auto" in h_cap.style
    assert "width: 100%" in v_cap.style and "hyphens" not in v_cap.style
    svg = render_diagram_2d(spec, RENDERER)
    assert "display: flex" in svg
    assert drawing.of_type(MarkerDef) == []


def test_2d_render_uses_current_color_only() -> None:
    spec = _spec(
        persons=(Point2D(0.3, 0.3, "A", guides=True),),
        horizontal_policies=(LabeledPoint(0.6, "q"),),
        vertical_policies=(LabeledPoint(0.6, "r"),),
    )
    svg = render_diagram_2d(spec, RENDERER)
    for attr in ('stroke="', 'fill="'):
        start = 0
        while (i := svg.find(attr, start)) != -1:
            assert svg.startswith(attr + "currentColor", i)
            start = i + 1
