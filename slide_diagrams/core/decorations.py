# slide_diagrams/core/decorations.py
"""
Pieces shared by the 1D and 2D layouts: placed labels, tic scales,
direction arrows and the overlap report.
"""

from __future__ import annotations

import logging

from slide_diagrams.core.axis import Axis, far_edge
from slide_diagrams.core.config import (
    ARROW_STROKE_WIDTH,
    AXIS_STROKE_WIDTH,
    DIRECTION_ARROW_LENGTH_PX,
    TIC_LABEL_GAP_PX,
    TIC_LENGTH_PX,
)
from slide_diagrams.core.labels import LabelRenderer
from slide_diagrams.core.overlaps import find_label_overlaps
from slide_diagrams.core.primitives import Drawing, Label, Line, element_id
from slide_diagrams.core.types import DIRECTIONS, Box, LabelBox, RenderedLabel, Scale

logger = logging.getLogger(__name__)

_DIRECTION_VECTORS: dict[str, tuple[int, int]] = {
    "right": (1, 0),
    "left": (-1, 0),
    "up": (0, -1),
    "down": (0, 1),
}


def further(current: float, candidate: float, side: int) -> float:
    """Running extreme towards `side` (max for +1, min for -1)."""
    return max(current, candidate) if side > 0 else min(current, candidate)


def side_align(axis: Axis, side: int) -> str:
    """Text alignment of a label placed on `side` of the axis."""
    if axis.horizontal:
        return "center"
    return "left" if side > 0 else "right"


def add_label(
    drawing: Drawing,
    box: Box,
    rendered: RenderedLabel,
    font_size: float,
    name: str,
    kind: str,
    align: str = "center",
    with_id: bool = True,
    style: str | None = None,
) -> None:
    """Append a label primitive and record its box for the overlap report."""
    drawing.add(
        Label(
            box=box,
            rendered=rendered,
            font_size=font_size,
            align=align,
            element_id=element_id(drawing.id, name) if with_id else None,
            style=style,
        )
    )
    drawing.label_boxes.append(LabelBox(name=name, box=box, tags=[kind]))


def draw_scale(
    drawing: Drawing,
    axis: Axis,
    scale: Scale,
    side: int,
    font_size: float,
    renderer: LabelRenderer,
) -> float:
    """
    Draw tic marks on `side` of the axis, each optionally captioned.
    Returns the furthest across coordinate reached, for caption placement.
    """
    extreme = axis.cross
    tic_end = axis.cross + side * TIC_LENGTH_PX
    for tic in scale.tics:
        along = axis.along(tic.pos)
        drawing.add(axis.segment(along, axis.cross, tic_end, AXIS_STROKE_WIDTH))
        extreme = further(extreme, tic_end, side)
        if not tic.label:
            continue
        rendered = renderer.render(tic.label, font_size, scale.as_latex)
        box = axis.box(along, tic_end + side * TIC_LABEL_GAP_PX, side, rendered.size)
        add_label(
            drawing, box, rendered, font_size,
            name=tic.label, kind="tic", align=side_align(axis, side), with_id=False,
        )
        extreme = further(extreme, far_edge(box, axis, side), side)
    return extreme


def direction_arrow(
    axis: Axis,
    along_center: float,
    across: float,
    side: int,
    direction: str,
    marker_id: str,
    length: float = DIRECTION_ARROW_LENGTH_PX,
) -> Line:
    """
    Line of `length` pointing in `direction`, centred on `along_center`.
    Arrows perpendicular to the axis start at `across` and extend towards `side`.
    """
    if direction not in _DIRECTION_VECTORS:
        raise ValueError(f"Unknown label direction {direction!r}; expected one of {DIRECTIONS}")
    dx, dy = _DIRECTION_VECTORS[direction]
    half = length / 2
    perpendicular = (dx == 0) if axis.horizontal else (dy == 0)
    if perpendicular:
        across += side * half
    cx, cy = axis.point(along_center, across)
    return Line(
        (cx - dx * half, cy - dy * half),
        (cx + dx * half, cy + dy * half),
        ARROW_STROKE_WIDTH,
        marker_end=marker_id,
    )


def report_overlaps(drawing: Drawing) -> None:
    """Record overlapping label boxes as drawing warnings. Positions are left unchanged."""
    for a, b, area in find_label_overlaps(drawing.label_boxes):
        msg = f"labels {a!r} and {b!r} overlap ({area:.1f} px²)"
        drawing.warnings.append(msg)
        logger.warning("Diagram %s: %s", drawing.id, msg)
