# slide_diagrams/core/primitives.py
"""
Typed drawing primitives and the one-shot SVG serializer.
Layout code appends primitives to a Drawing; to_svg() builds the
ElementTree once at the end.
"""

from __future__ import annotations

import copy
import re
import xml.etree.ElementTree as ET
from dataclasses import dataclass, field
from typing import Union

from slide_diagrams.core.config import MARKER_ID_PREFIX
from slide_diagrams.core.types import Box, LabelBox, RenderedLabel

SVG_NS = "http://www.w3.org/2000/svg"
XLINK_NS = "http://www.w3.org/1999/xlink"
XHTML_NS = "http://www.w3.org/1999/xhtml"

Point = tuple[float, float]


def fmt(v: float) -> str:
    """Compact number: 450.0 -> '450', 42.5 -> '42.5'."""
    s = f"{v:.4f}".rstrip("0").rstrip(".")
    return "0" if s == "-0" else s


@dataclass(frozen=True)
class Line:
    start: Point
    end: Point
    stroke_width: float = 1.0
    dasharray: str | None = None
    marker_end: str | None = None


@dataclass(frozen=True)
class Triangle:
    """Filled arrowhead; the first point is the tip."""
    points: tuple[Point, Point, Point]


@dataclass(frozen=True)
class Circle:
    center: Point
    radius: float


@dataclass(frozen=True)
class Label:
    """foreignObject sized to `box`, holding an XHTML div with the rendered label."""
    box: Box
    rendered: RenderedLabel
    font_size: float
    align: str = "center"
    element_id: str | None = None
    style: str | None = None


@dataclass(frozen=True)
class MarkerDef:
    """Arrowhead marker referenced by marker-end on direction arrows."""
    marker_id: str


Primitive = Union[Line, Triangle, Circle, Label, MarkerDef]


@dataclass
class Drawing:
    """Ordered primitives for one diagram plus placement bookkeeping."""
    width: float
    height: float
    id: str
    primitives: list[Primitive] = field(default_factory=list)
    label_boxes: list[LabelBox] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    def add(self, primitive: Primitive) -> None:
        self.primitives.append(primitive)

    def of_type(self, kind: type) -> list:
        return [p for p in self.primitives if isinstance(p, kind)]


def marker_id_for(diagram_id: str) -> str:
    return f"{MARKER_ID_PREFIX}{diagram_id}"


def label_style(font_size: float, align: str) -> str:
    return f"font-size: {fmt(font_size)}px; margin: 0; padding: 0; text-align: {align};"


def _line_element(p: Line) -> ET.Element:
    attrs = {
        "x1": fmt(p.start[0]),
        "y1": fmt(p.start[1]),
        "x2": fmt(p.end[0]),
        "y2": fmt(p.end[1]),
        "stroke": "currentColor",
        "stroke-width": fmt(p.stroke_width),
    }
    if p.dasharray:
        attrs["stroke-dasharray"] = p.dasharray
    if p.marker_end:
        attrs["marker-end"] = f"url(#{p.marker_end})"
    return ET.Element("line", attrs)


def _triangle_element(p: Triangle) -> ET.Element:
    (x0, y0), (x1, y1), (x2, y2) = p.points
    d = f"M {fmt(x0)},{fmt(y0)} L {fmt(x1)},{fmt(y1)} L {fmt(x2)},{fmt(y2)} Z"
    return ET.Element("path", {"d": d, "fill": "currentColor"})


def _circle_element(p: Circle) -> ET.Element:
    return ET.Element(
        "circle",
        {"cx": fmt(p.center[0]), "cy": fmt(p.center[1]), "r": fmt(p.radius), "fill": "currentColor"},
    )


def _label_element(p: Label) -> ET.Element:
    attrs = {
        "x": fmt(p.box.x),
        "y": fmt(p.box.y),
        "width": fmt(p.box.width),
        "height": fmt(p.box.height),
    }
    if p.element_id:
        attrs["id"] = p.element_id
    fo = ET.Element("foreignObject", attrs)
    div = ET.SubElement(
        fo,
        "div",
        {"xmlns": XHTML_NS, "style": p.style or label_style(p.font_size, p.align)},
    )
    div.text = p.rendered.text
    for node in p.rendered.nodes:
        div.append(copy.deepcopy(node))
    return fo


def _marker_element(p: MarkerDef) -> ET.Element:
    defs = ET.Element("defs")
    marker = ET.SubElement(
        defs,
        "marker",
        {
            "id": p.marker_id,
            "markerWidth": "10",
            "markerHeight": "10",
            "refX": "9",
            "refY": "3",
            "orient": "auto",
        },
    )
    ET.SubElement(marker, "polygon", {"points": "0 0, 10 3, 0 6", "fill": "currentColor"})
    return defs


_BUILDERS = {
    Line: _line_element,
    Triangle: _triangle_element,
    Circle: _circle_element,
    Label: _label_element,
    MarkerDef: _marker_element,
}


def primitive_element(p: Primitive) -> ET.Element:
    return _BUILDERS[type(p)](p)


def to_element(drawing: Drawing) -> ET.Element:
    """Build the <svg> element. Plain tag names; xmlns attributes set exactly once."""
    root = ET.Element(
        "svg",
        {
            "id": drawing.id,
            "width": fmt(drawing.width),
            "height": fmt(drawing.height),
            "xmlns": SVG_NS,
            "xmlns:xlink": XLINK_NS,
        },
    )
    for p in drawing.primitives:
        root.append(primitive_element(p))
    return root


def to_svg(drawing: Drawing) -> str:
    """Serialize to a self-contained SVG string (no XML declaration, embeddable inline)."""
    return ET.tostring(to_element(drawing), encoding="unicode", method="xml")


def slugify(text: str, default: str) -> str:
    """Keep [A-Za-z0-9_-]; every other run of characters becomes a single '-'."""
    return re.sub(r"[^A-Za-z0-9_-]+", "-", text).strip("-") or default


def element_id(diagram_id: str, label: str) -> str:
    """Namespaced, attribute-safe id for a label: '<diagram id>-<slug>'."""
    return f"{diagram_id}-{slugify(label, 'label')}"
