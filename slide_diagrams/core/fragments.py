# slide_diagrams/core/fragments.py
"""
Animate a diagram by layering versions of it.

Every version is drawn into the same positioned container. The first is
visible when the slide opens; each following version fades in on the next
fragment step while the previous one fades out, so the diagram appears to
change in place. Sequencing itself is left to the slide framework's
fragment classes.
"""

from __future__ import annotations

import xml.etree.ElementTree as ET
from typing import Sequence

from slide_diagrams.core.primitives import Drawing, fmt, to_element


def _layer_classes(index: int, count: int) -> tuple[str | None, int | None]:
    """(fragment class, fragment index) for the layer at `index` out of `count`."""
    if count == 1:
        return None, None
    if index == 0:
        return "fragment fade-out", 0
    if index == count - 1:
        return "fragment fade-in", index - 1
    return "fragment fade-in-then-out", index - 1


def stack_fragments(drawings: Sequence[Drawing], container_id: str | None = None) -> str:
    """
    HTML container stacking `drawings` as fragment layers.
    The container takes the size of the first drawing; ids must be unique
    across drawings so their marker definitions do not collide.
    """
    if not drawings:
        raise ValueError("stack_fragments needs at least one drawing")
    ids = [d.id for d in drawings]
    if len(set(ids)) != len(ids):
        raise ValueError(f"Drawing ids must be unique within a stack: {ids}")

    first = drawings[0]
    attrs = {
        "class": "diagram-stack",
        "style": f"position: relative; width: {fmt(first.width)}px; height: {fmt(first.height)}px;",
    }
    if container_id:
        attrs["id"] = container_id
    container = ET.Element("div", attrs)

    for i, drawing in enumerate(drawings):
        cls, frag_index = _layer_classes(i, len(drawings))
        layer_attrs = {"style": "position: absolute; top: 0; left: 0;"}
        if cls:
            layer_attrs["class"] = cls
            layer_attrs["data-fragment-index"] = str(frag_index)
        layer = ET.SubElement(container, "div", layer_attrs)
        layer.append(to_element(drawing))

    return ET.tostring(container, encoding="unicode", method="html")
