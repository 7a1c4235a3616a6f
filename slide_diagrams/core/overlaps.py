# slide_diagrams/core/overlaps.py
"""
Detect overlapping label boxes. Detection only: labels are never moved,
callers decide whether to adjust positions.
"""

from __future__ import annotations

from shapely.geometry import Polygon, box

from slide_diagrams.core.types import Box, LabelBox

OVERLAP_MIN_AREA: float = 1e-6
"""Boxes that only touch along an edge are not reported."""


def box_to_polygon(b: Box) -> Polygon:
    return box(b.x, b.y, b.right, b.bottom)


def find_label_overlaps(
    labels: list[LabelBox],
    min_area: float = OVERLAP_MIN_AREA,
) -> list[tuple[str, str, float]]:
    """Return (name_a, name_b, overlap_area) for every intersecting pair, in input order."""
    polys = [box_to_polygon(lb.box) for lb in labels]
    out: list[tuple[str, str, float]] = []
    for i in range(len(polys)):
        for j in range(i + 1, len(polys)):
            if not polys[i].intersects(polys[j]):
                continue
            area = float(polys[i].intersection(polys[j]).area)
            if area > min_area:
                out.append((labels[i].name, labels[j].name, area))
    return out
