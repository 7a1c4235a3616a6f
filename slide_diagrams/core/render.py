# slide_diagrams/core/render.py
"""
Dispatch a diagram spec to the 1D or 2D layout.
"""

from __future__ import annotations

from slide_diagrams.core.diagram_1d import layout_diagram_1d
from slide_diagrams.core.diagram_2d import layout_diagram_2d
from slide_diagrams.core.labels import LabelRenderer
from slide_diagrams.core.primitives import Drawing, to_svg
from slide_diagrams.core.types import Diagram1DSpec, Diagram2DSpec, DiagramSpec


def diagram_kind(spec: DiagramSpec) -> str:
    return "2d" if isinstance(spec, Diagram2DSpec) else "1d"


def layout_diagram(spec: DiagramSpec, renderer: LabelRenderer | None = None) -> Drawing:
    if isinstance(spec, Diagram2DSpec):
        return layout_diagram_2d(spec, renderer)
    if isinstance(spec, Diagram1DSpec):
        return layout_diagram_1d(spec, renderer)
    raise TypeError(f"Unsupported diagram spec: {type(spec).__name__}")


def render_diagram(spec: DiagramSpec, renderer: LabelRenderer | None = None) -> str:
    return to_svg(layout_diagram(spec, renderer))
