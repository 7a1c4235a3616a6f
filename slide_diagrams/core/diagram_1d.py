# slide_diagrams/core/diagram_1d.py
"""
One-dimensional spatial diagram: a single axis with persons on one side and
policies on the other, each marked by an arrow pointing at its position.

Horizontal (default): policies above the axis with arrows pointing down,
persons below with arrows pointing up, caption centred below everything.
Vertical: the same layout rotated so that up->right and down->left, i.e.
policies right of the axis with arrows pointing left, persons left of it
with arrows pointing right, caption left of the person labels.
"""

from __future__ import annotations

import logging

from slide_diagrams.core.axis import Axis, far_edge
from slide_diagrams.core.config import (
    ARROW_HEAD_PX,
    ARROW_STROKE_WIDTH,
    AXIS_STROKE_WIDTH,
    CAPTION_GAP_PX,
    DIRECTION_GAP_PX,
    LABEL_ARROW_GAP_PX,
)
from slide_diagrams.core.decorations import (
    add_label,
    direction_arrow,
    draw_scale,
    further,
    report_overlaps,
    side_align,
)
from slide_diagrams.core.labels import LabelRenderer, default_renderer
from slide_diagrams.core.primitives import Drawing, MarkerDef, marker_id_for, to_svg
from slide_diagrams.core.types import ORIENTATIONS, Box, Diagram1DSpec, LabeledPoint

logger = logging.getLogger(__name__)


def _draw_pointer(
    drawing: Drawing,
    axis: Axis,
    point: LabeledPoint,
    side: int,
    far: float,
    font_size: float,
    renderer: LabelRenderer,
    kind: str,
) -> Box:
    """
    Label with its far edge at `far`, plus an arrow from the label towards the axis.
    The arrow is omitted when the label reaches (or passes) the axis.
    """
    along = axis.along(point.position)
    rendered = renderer.render(point.label, font_size, point.as_latex)
    _, across_ext = axis.extents(rendered.size)
    near = far - side * across_ext
    tail = near - side * LABEL_ARROW_GAP_PX
    if side * (tail - axis.cross) > 0:
        drawing.add(axis.segment(along, tail, axis.cross, ARROW_STROKE_WIDTH))
        drawing.add(axis.arrowhead(along, axis.cross, side, ARROW_HEAD_PX))
    box = axis.box(along, near, side, rendered.size)
    add_label(drawing, box, rendered, font_size, name=point.label, kind=kind, align=side_align(axis, side))
    return box


def layout_diagram_1d(spec: Diagram1DSpec, renderer: LabelRenderer | None = None) -> Drawing:
    """Compute the primitives of a 1D diagram without serializing them."""
    if spec.orientation not in ORIENTATIONS:
        raise ValueError(f"Unknown orientation {spec.orientation!r}; expected one of {ORIENTATIONS}")
    renderer = renderer or default_renderer()

    if spec.orientation == "horizontal":
        axis = Axis.spanning("horizontal", spec.width, spec.margin_x, spec.height / 2)
        canvas_across, margin_across = spec.height, spec.margin_y
        policy_side, person_side = -1, 1
    else:
        axis = Axis.spanning("vertical", spec.height, spec.margin_y, spec.width / 2)
        canvas_across, margin_across = spec.width, spec.margin_x
        policy_side, person_side = 1, -1

    def far_for(side: int) -> float:
        return margin_across if side < 0 else canvas_across - margin_across

    drawing = Drawing(spec.width, spec.height, spec.id)
    drawing.add(axis.line(AXIS_STROKE_WIDTH))

    # furthest across coordinate reached on the person side; the caption goes past it
    extreme = axis.cross
    if spec.scale is not None:
        extreme = draw_scale(drawing, axis, spec.scale, person_side, spec.font_size, renderer)

    for policy in spec.policies:
        _draw_pointer(
            drawing, axis, policy, policy_side, far_for(policy_side),
            spec.font_size, renderer, kind="policy",
        )

    for person in spec.persons:
        box = _draw_pointer(
            drawing, axis, person, person_side, far_for(person_side),
            spec.font_size, renderer, kind="person",
        )
        extreme = further(extreme, far_edge(box, axis, person_side), person_side)

    if spec.space_label is not None:
        caption = spec.space_label
        rendered = renderer.render(caption.label, spec.font_size, caption.as_latex)
        box = axis.box(axis.midpoint, extreme + person_side * CAPTION_GAP_PX, person_side, rendered.size)
        add_label(drawing, box, rendered, spec.font_size, name=caption.label, kind="caption")

        if spec.label_direction:
            marker_id = marker_id_for(spec.id)
            arrow_across = far_edge(box, axis, person_side) + person_side * DIRECTION_GAP_PX
            drawing.add(
                direction_arrow(axis, axis.midpoint, arrow_across, person_side, spec.label_direction, marker_id)
            )
            drawing.add(MarkerDef(marker_id))

    report_overlaps(drawing)
    logger.debug(
        "Laid out 1D diagram %s (%s): %d primitives, %d labels",
        spec.id, spec.orientation, len(drawing.primitives), len(drawing.label_boxes),
    )
    return drawing


def render_diagram_1d(spec: Diagram1DSpec, renderer: LabelRenderer | None = None) -> str:
    """
    Render a 1D diagram to a self-contained SVG string.
    Positions are proportions along the axis and are not clamped; a renderer
    failure propagates to the caller.
    """
    return to_svg(layout_diagram_1d(spec, renderer))
