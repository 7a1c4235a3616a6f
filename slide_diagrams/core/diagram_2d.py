# slide_diagrams/core/diagram_2d.py
"""
Two-dimensional spatial diagram: horizontal and vertical axes crossing at
the centre of the drawable area, persons as dots with a label at their
top-right, policies as short arrows onto either axis.
"""

from __future__ import annotations

import logging

from slide_diagrams.core.axis import Axis
from slide_diagrams.core.config import (
    ARROW_STROKE_WIDTH,
    AXIS_STROKE_WIDTH,
    CAPTION_PADDING_2D_PX,
    DOT_RADIUS_PX,
    GUIDE_DASHARRAY,
    POLICY_ARROW_HEAD_2D_PX,
    POLICY_ARROW_LENGTH_2D_PX,
    POLICY_LABEL_GAP_2D_PX,
)
from slide_diagrams.core.decorations import add_label, draw_scale, report_overlaps, side_align
from slide_diagrams.core.labels import LabelRenderer, default_renderer
from slide_diagrams.core.primitives import Circle, Drawing, Line, fmt, to_svg
from slide_diagrams.core.types import AxisLabel, Box, Diagram2DSpec, LabeledPoint, Point2D

logger = logging.getLogger(__name__)

POLICY_SIDE = -1
"""Policies sit above the horizontal axis and left of the vertical axis."""

SCALE_SIDE = 1
"""Tics hang below the horizontal axis and right of the vertical axis."""


def _caption_style(font_size: float, fill: str, hyphens: bool) -> str:
    """Flex-centred, wrapping caption filling its margin box."""
    pad = fmt(CAPTION_PADDING_2D_PX)
    parts = [
        f"font-size: {fmt(font_size)}px",
        "margin: 0",
        f"padding: {pad}px",
        "text-align: center",
        "word-wrap: break-word",
        "overflow-wrap: break-word",
    ]
    if hyphens:
        parts.append("hyphens: auto")
    parts += [
        "display: flex",
        "align-items: center",
        "justify-content: center",
        f"{fill}: 100%",
    ]
    return "; ".join(parts) + ";"


def _draw_policy(
    drawing: Drawing,
    axis: Axis,
    policy: LabeledPoint,
    font_size: float,
    renderer: LabelRenderer,
) -> None:
    """Fixed-length arrow onto the axis with the label just beyond its tail."""
    side = POLICY_SIDE
    along = axis.along(policy.position)
    rendered = renderer.render(policy.label, font_size, policy.as_latex)
    tail = axis.cross + side * POLICY_ARROW_LENGTH_2D_PX
    drawing.add(axis.segment(along, tail, axis.cross, ARROW_STROKE_WIDTH))
    drawing.add(axis.arrowhead(along, axis.cross, side, POLICY_ARROW_HEAD_2D_PX))
    box = axis.box(along, tail + side * POLICY_LABEL_GAP_2D_PX, side, rendered.size)
    add_label(drawing, box, rendered, font_size, name=policy.label, kind="policy", align=side_align(axis, side))


def _draw_person(
    drawing: Drawing,
    h_axis: Axis,
    v_axis: Axis,
    person: Point2D,
    font_size: float,
    renderer: LabelRenderer,
) -> None:
    x = h_axis.along(person.x)
    y = v_axis.along(person.y)

    if person.guides:
        # dashed guides to the horizontal axis, then to the vertical axis
        drawing.add(Line((x, y), (x, h_axis.cross), ARROW_STROKE_WIDTH, dasharray=GUIDE_DASHARRAY))
        drawing.add(Line((x, y), (v_axis.cross, y), ARROW_STROKE_WIDTH, dasharray=GUIDE_DASHARRAY))

    drawing.add(Circle((x, y), DOT_RADIUS_PX))

    # bottom-left corner of the label on the dot's top-right
    rendered = renderer.render(person.label, font_size, person.as_latex)
    box = Box(
        x + DOT_RADIUS_PX,
        y - DOT_RADIUS_PX - rendered.size.height,
        rendered.size.width,
        rendered.size.height,
    )
    add_label(drawing, box, rendered, font_size, name=person.label, kind="person", align="left")


def _draw_caption(
    drawing: Drawing,
    caption: AxisLabel,
    box: Box,
    style: str,
    font_size: float,
    renderer: LabelRenderer,
) -> None:
    """Captions fill a fixed margin box; the renderer supplies only the content."""
    rendered = renderer.render(caption.label, font_size, caption.as_latex)
    add_label(drawing, box, rendered, font_size, name=caption.label, kind="caption", with_id=False, style=style)


def layout_diagram_2d(spec: Diagram2DSpec, renderer: LabelRenderer | None = None) -> Drawing:
    """Compute the primitives of a 2D diagram without serializing them."""
    renderer = renderer or default_renderer()

    left, right = spec.margin_x, spec.width - spec.margin_x
    top, bottom = spec.margin_y, spec.height - spec.margin_y
    center_x = (left + right) / 2
    center_y = (top + bottom) / 2

    h_axis = Axis.spanning("horizontal", spec.width, spec.margin_x, center_y)
    v_axis = Axis.spanning("vertical", spec.height, spec.margin_y, center_x)

    drawing = Drawing(spec.width, spec.height, spec.id)
    drawing.add(h_axis.line(AXIS_STROKE_WIDTH))
    drawing.add(v_axis.line(AXIS_STROKE_WIDTH))

    if spec.horizontal_scale is not None:
        draw_scale(drawing, h_axis, spec.horizontal_scale, SCALE_SIDE, spec.font_size, renderer)
    if spec.vertical_scale is not None:
        draw_scale(drawing, v_axis, spec.vertical_scale, SCALE_SIDE, spec.font_size, renderer)

    for policy in spec.horizontal_policies:
        _draw_policy(drawing, h_axis, policy, spec.font_size, renderer)
    for policy in spec.vertical_policies:
        _draw_policy(drawing, v_axis, policy, spec.font_size, renderer)

    for person in spec.persons:
        _draw_person(drawing, h_axis, v_axis, person, spec.font_size, renderer)

    pad = CAPTION_PADDING_2D_PX
    if spec.horizontal_label is not None:
        # right margin, full height of the vertical axis
        box = Box(right + pad, top, spec.margin_x - 2 * pad, v_axis.length)
        style = _caption_style(spec.font_size, "height", hyphens=True)
        _draw_caption(drawing, spec.horizontal_label, box, style, spec.font_size, renderer)
    if spec.vertical_label is not None:
        # top margin, full length of the horizontal axis
        box = Box(left, pad, h_axis.length, spec.margin_y - 2 * pad)
        style = _caption_style(spec.font_size, "width", hyphens=False)
        _draw_caption(drawing, spec.vertical_label, box, style, spec.font_size, renderer)

    report_overlaps(drawing)
    logger.debug(
        "Laid out 2D diagram %s: %d primitives, %d labels",
        spec.id, len(drawing.primitives), len(drawing.label_boxes),
    )
    return drawing


def render_diagram_2d(spec: Diagram2DSpec, renderer: LabelRenderer | None = None) -> str:
    """Render a 2D diagram to a self-contained SVG string."""
    return to_svg(layout_diagram_2d(spec, renderer))
