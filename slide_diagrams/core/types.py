# slide_diagrams/core/types.py
"""
Dataclasses for diagram descriptions, measured labels and label boxes.
Field names are snake_case; core/io.py maps the camelCase JSON keys onto them.
"""

from __future__ import annotations

import xml.etree.ElementTree as ET
from dataclasses import dataclass, field
from typing import Literal, Union

from slide_diagrams.core.config import DEFAULT_FONT_SIZE_PX


Orientation = Literal["horizontal", "vertical"]
Direction = Literal["left", "right", "up", "down"]

ORIENTATIONS: tuple[str, ...] = ("horizontal", "vertical")
DIRECTIONS: tuple[str, ...] = ("left", "right", "up", "down")


@dataclass(frozen=True)
class LabeledPoint:
    """A person or policy at a proportion along an axis (0 = start, 1 = end)."""
    position: float
    label: str
    as_latex: bool = False


@dataclass(frozen=True)
class Point2D:
    """A person in 2D: x/y are proportions along the horizontal/vertical axes."""
    x: float
    y: float
    label: str
    as_latex: bool = False
    guides: bool = False


@dataclass(frozen=True)
class Tic:
    pos: float
    label: str | None = None


@dataclass(frozen=True)
class Scale:
    tics: tuple[Tic, ...] = ()
    as_latex: bool = False


@dataclass(frozen=True)
class AxisLabel:
    label: str
    as_latex: bool = False


@dataclass(frozen=True)
class Diagram1DSpec:
    """Single-axis diagram: persons on one side of the axis, policies on the other."""
    width: float
    height: float
    id: str
    margin_x: float
    margin_y: float
    font_size: float = DEFAULT_FONT_SIZE_PX
    orientation: Orientation = "horizontal"
    persons: tuple[LabeledPoint, ...] = ()
    policies: tuple[LabeledPoint, ...] = ()
    scale: Scale | None = None
    space_label: AxisLabel | None = None
    label_direction: Direction | None = None


@dataclass(frozen=True)
class Diagram2DSpec:
    """Two axes crossing at the centre of the drawable area."""
    width: float
    height: float
    id: str
    margin_x: float
    margin_y: float
    font_size: float = DEFAULT_FONT_SIZE_PX
    persons: tuple[Point2D, ...] = ()
    horizontal_policies: tuple[LabeledPoint, ...] = ()
    vertical_policies: tuple[LabeledPoint, ...] = ()
    horizontal_scale: Scale | None = None
    vertical_scale: Scale | None = None
    horizontal_label: AxisLabel | None = None
    vertical_label: AxisLabel | None = None


DiagramSpec = Union[Diagram1DSpec, Diagram2DSpec]


@dataclass(frozen=True)
class LabelSize:
    """Rendered label size in px. Transient: used for placement, then discarded."""
    width: float
    height: float


@dataclass(frozen=True)
class RenderedLabel:
    """
    Measured label plus the XHTML content to embed in its foreignObject div.
    `text` is the div's leading text; `nodes` are its child elements (tails included).
    """
    size: LabelSize
    text: str = ""
    nodes: tuple[ET.Element, ...] = ()


@dataclass(frozen=True)
class Box:
    """Axis-aligned rectangle in canvas px (y down)."""
    x: float
    y: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height


@dataclass
class LabelBox:
    """Placed label, kept on the drawing for overlap reporting."""
    name: str
    box: Box
    tags: list[str] = field(default_factory=list)
