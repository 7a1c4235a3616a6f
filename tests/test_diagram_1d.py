# tests/test_diagram_1d.py
"""
1D diagram layout: arrow/label coordinates, omitted arrows, caption + direction
marker, vertical orientation as the rotated horizontal layout.
Uses fixed label metrics (0.6 em per character, 1.2 em high) for exact numbers.
"""

from __future__ import annotations

import pytest

from slide_diagrams.core.diagram_1d import layout_diagram_1d, render_diagram_1d
from slide_diagrams.core.labels import FixedMetricsLabelRenderer
from slide_diagrams.core.primitives import Label, Line, MarkerDef, Triangle
from slide_diagrams.core.types import AxisLabel, Diagram1DSpec, LabeledPoint, Scale, Tic

RENDERER = FixedMetricsLabelRenderer()


def _spec(**kw) -> Diagram1DSpec:
    base = dict(width=900, height=150, id="d1", margin_x=40, margin_y=10)
    base.update(kw)
    return Diagram1DSpec(**base)


def _vertical_spec(**kw) -> Diagram1DSpec:
    base = dict(width=150, height=900, id="v1", margin_x=10, margin_y=40, orientation="vertical")
    base.update(kw)
    return Diagram1DSpec(**base)


def test_person_arrow_tip_at_proportional_x() -> None:
    spec = _spec(persons=(LabeledPoint(0.5, "A"),))
    drawing = layout_diagram_1d(spec, RENDERER)
    (head,) = drawing.of_type(Triangle)
    assert head.points[0] == pytest.approx((450.0, 75.0))
    svg = render_diagram_1d(spec, RENDERER)
    assert 'd="M 450,75 L 444,81 L 456,81 Z"' in svg


def test_person_label_and_arrow_geometry() -> None:
    drawing = layout_diagram_1d(_spec(persons=(LabeledPoint(0.5, "A"),)), RENDERER)
    axis, arrow = drawing.of_type(Line)
    assert axis.start == (40.0, 75.0) and axis.end == (860.0, 75.0)
    # label bottom at height - marginY, arrow tail 5px above the label
    (label,) = drawing.of_type(Label)
    assert label.box.y + label.box.height == pytest.approx(140.0)
    assert label.box.x == pytest.approx(450.0 - 9.6 / 2)
    assert arrow.start == pytest.approx((450.0, 140.0 - 19.2 - 5.0))
    assert arrow.end == pytest.approx((450.0, 75.0))
    assert label.element_id == "d1-A"


def test_empty_diagram_is_a_single_axis_line() -> None:
    svg = render_diagram_1d(_spec(), RENDERER)
    assert svg.count("<line") == 1
    assert "<path" not in svg
    assert "<foreignObject" not in svg
    assert "<marker" not in svg
    assert svg.startswith('<svg id="d1" width="900" height="150"')


@pytest.mark.parametrize("position", [0.0, 0.1, 0.25, 0.5, 0.9, 1.0])
def test_coordinates_stay_on_axis_for_unit_positions(position: float) -> None:
    spec = _spec(persons=(LabeledPoint(position, "p"),), policies=(LabeledPoint(position, "q"),))
    drawing = layout_diagram_1d(spec, RENDERER)
    for head in drawing.of_type(Triangle):
        x, _ = head.points[0]
        assert 40.0 <= x <= 860.0


def test_out_of_range_position_is_not_clamped() -> None:
    drawing = layout_diagram_1d(_spec(persons=(LabeledPoint(1.5, "far"),)), RENDERER)
    (head,) = drawing.of_type(Triangle)
    assert head.points[0][0] == pytest.approx(40 + 1.5 * 820)


def test_person_and_policy_at_same_position_are_both_drawn() -> None:
    spec = _spec(persons=(LabeledPoint(0.5, "A"),), policies=(LabeledPoint(0.5, "B"),))
    drawing = layout_diagram_1d(spec, RENDERER)
    heads = drawing.of_type(Triangle)
    assert len(heads) == 2
    assert len(drawing.of_type(Label)) == 2
    # policy head points down (base above the axis), person head points up
    policy_head, person_head = heads
    assert policy_head.points[1][1] == pytest.approx(69.0)
    assert person_head.points[1][1] == pytest.approx(81.0)
    assert drawing.warnings == []


def test_arrow_omitted_when_label_reaches_axis() -> None:
    # 40px canvas: the 19.2px person label passes the axis at y=20
    spec = _spec(height=40, persons=(LabeledPoint(0.5, "A"),))
    drawing = layout_diagram_1d(spec, RENDERER)
    assert drawing.of_type(Triangle) == []
    assert len(drawing.of_type(Line)) == 1
    assert len(drawing.of_type(Label)) == 1


def test_caption_below_persons_with_direction_marker() -> None:
    spec = _spec(
        persons=(LabeledPoint(0.2, "A"),),
        space_label=AxisLabel("Ideology"),
        label_direction="right",
    )
    drawing = layout_diagram_1d(spec, RENDERER)
    caption = drawing.of_type(Label)[-1]
    assert caption.box.y == pytest.approx(150.0)  # person label bottom 140 + 10
    assert caption.box.x + caption.box.width / 2 == pytest.approx(450.0)
    direction = drawing.of_type(Line)[-1]
    assert direction.start == pytest.approx((430.0, 150.0 + 19.2 + 10.0))
    assert direction.end == pytest.approx((470.0, 150.0 + 19.2 + 10.0))
    assert direction.marker_end == "arrowhead-d1"
    markers = drawing.of_type(MarkerDef)
    assert [m.marker_id for m in markers] == ["arrowhead-d1"]
    assert isinstance(drawing.primitives[-1], MarkerDef)

    svg = render_diagram_1d(spec, RENDERER)
    assert svg.count('<marker id="arrowhead-d1"') == 1
    assert 'marker-end="url(#arrowhead-d1)"' in svg


def test_left_direction_points_left() -> None:
    spec = _spec(space_label=AxisLabel("x"), label_direction="left")
    direction = layout_diagram_1d(spec, RENDERER).of_type(Line)[-1]
    assert direction.start[0] > direction.end[0]


def test_no_marker_without_caption_and_direction() -> None:
    only_caption = render_diagram_1d(_spec(space_label=AxisLabel("Space")), RENDERER)
    only_direction = render_diagram_1d(_spec(label_direction="right"), RENDERER)
    assert "<marker" not in only_caption
    assert "<marker" not in only_direction
    assert "marker-end" not in only_direction


def test_caption_without_persons_sits_below_axis() -> None:
    drawing = layout_diagram_1d(_spec(space_label=AxisLabel("Space")), RENDERER)
    (caption,) = drawing.of_type(Label)
    assert caption.box.y == pytest.approx(85.0)


def test_scale_tics_and_caption_clear_of_tic_labels() -> None:
    spec = _spec(
        scale=Scale(tics=(Tic(0.0, "0"), Tic(1.0, "1"), Tic(0.5))),
        space_label=AxisLabel("Space"),
    )
    drawing = layout_diagram_1d(spec, RENDERER)
    lines = drawing.of_type(Line)
    tics = lines[1:4]
    assert tics[0].start == (40.0, 75.0) and tics[0].end == (40.0, 79.0)
    assert tics[2].start[0] == pytest.approx(450.0)
    labels = drawing.of_type(Label)
    assert [lb.element_id for lb in labels[:2]] == [None, None]
    assert labels[0].box.y == pytest.approx(81.0)
    caption = labels[-1]
    assert caption.box.y == pytest.approx(81.0 + 19.2 + 10.0)


def test_vertical_is_rotated_horizontal() -> None:
    points = dict(persons=(LabeledPoint(0.5, "A"),), policies=(LabeledPoint(0.25, "B"),))
    h = layout_diagram_1d(_spec(**points), RENDERER)
    v = layout_diagram_1d(_vertical_spec(**points), RENDERER)
    h_heads = h.of_type(Triangle)
    v_heads = v.of_type(Triangle)
    assert len(h_heads) == len(v_heads) == 2
    for hh, vh in zip(h_heads, v_heads):
        hx, hy = hh.points[0]
        vx, vy = vh.points[0]
        assert (vx, vy) == pytest.approx((hy, hx))
    # policy: down -> left (base right of the axis); person: up -> right (base left)
    v_policy, v_person = v_heads
    assert v_policy.points[1][0] == pytest.approx(81.0)
    assert v_person.points[1][0] == pytest.approx(69.0)


def test_vertical_person_label_left_of_axis() -> None:
    drawing = layout_diagram_1d(_vertical_spec(persons=(LabeledPoint(0.5, "A"),)), RENDERER)
    (label,) = drawing.of_type(Label)
    assert label.box.x == pytest.approx(10.0)
    assert label.box.y == pytest.approx(450.0 - 19.2 / 2)
    assert label.align == "right"
    axis, arrow = drawing.of_type(Line)
    assert axis.start == (75.0, 40.0) and axis.end == (75.0, 860.0)
    assert arrow.start == pytest.approx((10.0 + 9.6 + 5.0, 450.0))


def test_vertical_caption_and_downward_arrow() -> None:
    spec = _vertical_spec(
        persons=(LabeledPoint(0.5, "A"),),
        space_label=AxisLabel("Tax"),
        label_direction="down",
    )
    drawing = layout_diagram_1d(spec, RENDERER)
    caption = drawing.of_type(Label)[-1]
    # caption right edge 10px left of the person label's left edge (x=10)
    assert caption.box.x + caption.box.width == pytest.approx(0.0)
    direction = drawing.of_type(Line)[-1]
    assert direction.start[1] < direction.end[1]
    assert direction.start[0] == direction.end[0]
    assert drawing.of_type(MarkerDef)[0].marker_id == "arrowhead-v1"


def test_render_is_deterministic() -> None:
    spec = _spec(
        persons=(LabeledPoint(0.3, "A"), LabeledPoint(0.7, "B")),
        policies=(LabeledPoint(0.5, "x^*", as_latex=True),),
        space_label=AxisLabel("Space"),
        label_direction="left",
    )
    assert render_diagram_1d(spec, RENDERER) == render_diagram_1d(spec, RENDERER)


def test_unknown_orientation_raises() -> None:
    with pytest.raises(ValueError):
        layout_diagram_1d(_spec(orientation="diagonal"), RENDERER)


def test_unknown_direction_raises() -> None:
    with pytest.raises(ValueError):
        layout_diagram_1d(_spec(space_label=AxisLabel("x"), label_direction="sideways"), RENDERER)


class _FailingRenderer(FixedMetricsLabelRenderer):
    def render(self, label, font_size, as_latex):
        raise RuntimeError("no rendering surface")


def test_renderer_failure_propagates() -> None:
    with pytest.raises(RuntimeError, match="no rendering surface"):
        render_diagram_1d(_spec(persons=(LabeledPoint(0.5, "A"),)), _FailingRenderer())


def test_overlapping_person_labels_are_reported_not_moved() -> None:
    spec = _spec(persons=(LabeledPoint(0.5, "Alpha"), LabeledPoint(0.5, "Beta")))
    drawing = layout_diagram_1d(spec, RENDERER)
    a, b = drawing.of_type(Label)
    assert a.box.y == b.box.y
    assert len(drawing.warnings) == 1
    assert "'Alpha'" in drawing.warnings[0] and "'Beta'" in drawing.warnings[0]
