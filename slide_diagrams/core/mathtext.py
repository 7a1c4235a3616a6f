# slide_diagrams/core/mathtext.py
"""
Typeset LaTeX-style labels with matplotlib mathtext and convert the glyph
outlines into an inline SVG element filled with currentColor.
"""

from __future__ import annotations

import xml.etree.ElementTree as ET

from matplotlib.font_manager import FontProperties
from matplotlib.path import Path as MplPath
from matplotlib.textpath import TextToPath

SVG_NS = "http://www.w3.org/2000/svg"

_text_to_path = TextToPath()


def as_mathtext(label: str) -> str:
    """Wrap a label in $...$ unless it already is a mathtext string."""
    s = label.strip()
    if len(s) > 1 and s.startswith("$") and s.endswith("$"):
        return s
    return f"${s}$"


def measure_math_px(label: str, font_size_px: float) -> tuple[float, float, float]:
    """Return (width_px, height_px, descent_px); height includes the descent."""
    prop = FontProperties(size=font_size_px)
    w, h, d = _text_to_path.get_text_width_height_descent(as_mathtext(label), prop, ismath=True)
    return float(w), float(h), float(d)


def _fmt(v: float) -> str:
    return f"{v:.3f}".rstrip("0").rstrip(".")


def _path_d(verts, codes, ascent: float) -> str:
    """Glyph outlines (y up, baseline 0) to SVG path data (y down, top 0)."""
    path = MplPath(verts, codes)
    parts: list[str] = []
    for seg, code in path.iter_segments(simplify=False, curves=True):
        pts = [(float(seg[i]), ascent - float(seg[i + 1])) for i in range(0, len(seg), 2)]
        if code == MplPath.MOVETO:
            cmd = "M"
        elif code == MplPath.LINETO:
            cmd = "L"
        elif code == MplPath.CURVE3:
            cmd = "Q"
        elif code == MplPath.CURVE4:
            cmd = "C"
        elif code == MplPath.CLOSEPOLY:
            parts.append("Z")
            continue
        else:
            continue
        parts.append(cmd + " " + " ".join(f"{_fmt(x)} {_fmt(y)}" for x, y in pts))
    return " ".join(parts)


def math_to_svg_element(label: str, font_size_px: float) -> tuple[ET.Element, float, float]:
    """
    Return (svg element, width_px, height_px) for a math label.
    Raises ValueError from the mathtext parser on invalid markup.
    """
    width, height, descent = measure_math_px(label, font_size_px)
    prop = FontProperties(size=font_size_px)
    verts, codes = _text_to_path.get_text_path(prop, as_mathtext(label), ismath=True)
    svg = ET.Element(
        "svg",
        {
            "xmlns": SVG_NS,
            "width": _fmt(width),
            "height": _fmt(height),
            "viewBox": f"0 0 {_fmt(width)} {_fmt(height)}",
            "style": "display: block; margin: 0 auto; overflow: visible;",
        },
    )
    if len(codes):
        ET.SubElement(svg, "path", {"d": _path_d(verts, codes, height - descent), "fill": "currentColor"})
    return svg, width, height
