# slide_diagrams/core/axis.py
"""
Orientation-parameterised axis core shared by the 1D and 2D layouts.

Coordinates are expressed in an axis frame:
- `along`: coordinate in the axis direction (x for horizontal, y for vertical)
- `across`: coordinate perpendicular to it (y for horizontal, x for vertical)
A `side` of -1 means towards smaller across values (above / left of the axis),
+1 towards larger ones (below / right).
"""

from __future__ import annotations

from dataclasses import dataclass

from slide_diagrams.core.primitives import Line, Point, Triangle
from slide_diagrams.core.types import Box, LabelSize, Orientation


@dataclass(frozen=True)
class Axis:
    orientation: Orientation
    start: float
    end: float
    cross: float

    @classmethod
    def spanning(
        cls,
        orientation: Orientation,
        canvas_along: float,
        margin_along: float,
        cross: float,
    ) -> Axis:
        """Axis from margin to canvas extent minus margin, at across coordinate `cross`."""
        return cls(orientation, margin_along, canvas_along - margin_along, cross)

    @property
    def horizontal(self) -> bool:
        return self.orientation == "horizontal"

    @property
    def length(self) -> float:
        return self.end - self.start

    @property
    def midpoint(self) -> float:
        return self.start + self.length / 2

    def along(self, position: float) -> float:
        """Absolute along coordinate of a proportion. Not clamped to [0, 1]."""
        return self.start + position * self.length

    def point(self, along: float, across: float) -> Point:
        return (along, across) if self.horizontal else (across, along)

    def extents(self, size: LabelSize) -> tuple[float, float]:
        """(along extent, across extent) of a label box."""
        if self.horizontal:
            return size.width, size.height
        return size.height, size.width

    def box(self, along_center: float, across_near: float, side: int, size: LabelSize) -> Box:
        """
        Label box centred on `along_center`, whose near edge sits at `across_near`
        and which grows away from the axis towards `side`.
        """
        along_ext, across_ext = self.extents(size)
        along_lo = along_center - along_ext / 2
        across_lo = across_near if side > 0 else across_near - across_ext
        if self.horizontal:
            return Box(along_lo, across_lo, size.width, size.height)
        return Box(across_lo, along_lo, size.width, size.height)

    def line(self, stroke_width: float) -> Line:
        return Line(self.point(self.start, self.cross), self.point(self.end, self.cross), stroke_width)

    def segment(self, along: float, across_from: float, across_to: float, stroke_width: float, **kw) -> Line:
        """Line perpendicular to the axis at `along`."""
        return Line(self.point(along, across_from), self.point(along, across_to), stroke_width, **kw)

    def arrowhead(self, along: float, tip_across: float, side: int, size: float) -> Triangle:
        """Triangle with its tip at (along, tip_across), base `size` further towards `side`."""
        base = tip_across + side * size
        return Triangle(
            (
                self.point(along, tip_across),
                self.point(along - size, base),
                self.point(along + size, base),
            )
        )


def far_edge(box: Box, axis: Axis, side: int) -> float:
    """Across coordinate of the box edge furthest from the axis on `side`."""
    if axis.horizontal:
        return box.bottom if side > 0 else box.y
    return box.right if side > 0 else box.x


def near_edge(box: Box, axis: Axis, side: int) -> float:
    """Across coordinate of the box edge closest to the axis on `side`."""
    if axis.horizontal:
        return box.y if side > 0 else box.bottom
    return box.x if side > 0 else box.right
