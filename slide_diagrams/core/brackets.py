# slide_diagrams/core/brackets.py
"""
Curly left bracket drawn as a cubic Bezier path, with its point ("nipple")
at an adjustable height. Used to group slide items.
"""

from __future__ import annotations

import xml.etree.ElementTree as ET

from slide_diagrams.core.primitives import SVG_NS, fmt

NIPPLE_X: float = 3.0
"""Tip of the bracket sits this close to the left edge."""

NIPPLE_CURVE_OFFSET: float = 6.0
"""Vertical distance of the control points on either side of the tip."""


def generate_left_bracket(width: float, height: float, nipple_percent: float = 30.0) -> str:
    """
    Return SVG path data for a left bracket filling a width x height viewBox.
    nipple_percent: vertical position of the tip, 0 (top) to 100 (bottom).
    """
    top_y = 0.0
    bottom_y = height
    left_x = width * 0.3
    right_x = width * 0.9
    nipple_y = (nipple_percent / 100.0) * height

    top_arm = nipple_y - top_y
    bottom_arm = bottom_y - nipple_y

    top_mid_y = top_y + top_arm * 0.3
    top_curve_y = top_y + top_arm * 0.7
    bottom_curve_y = nipple_y + bottom_arm * 0.3
    bottom_mid_y = nipple_y + bottom_arm * 0.7

    shoulder_x = left_x + width * 0.1
    neck_x = left_x + width * 0.06

    def pt(x: float, y: float) -> str:
        return f"{fmt(x)},{fmt(y)}"

    return " ".join(
        [
            f"M {pt(right_x, top_y)}",
            f"C {pt(shoulder_x, top_y)} {pt(left_x, top_y)} {pt(left_x, top_mid_y)}",
            f"C {pt(left_x, top_curve_y)} {pt(neck_x, nipple_y - NIPPLE_CURVE_OFFSET)} {pt(NIPPLE_X, nipple_y)}",
            f"C {pt(neck_x, nipple_y + NIPPLE_CURVE_OFFSET)} {pt(left_x, bottom_curve_y)} {pt(left_x, bottom_mid_y)}",
            f"C {pt(left_x, bottom_y)} {pt(shoulder_x, bottom_y)} {pt(right_x, bottom_y)}",
        ]
    )


def left_bracket_svg(width: float, height: float, nipple_percent: float = 30.0, stroke_width: float = 2.0) -> str:
    """Standalone SVG for the bracket, stroked in currentColor."""
    root = ET.Element(
        "svg",
        {
            "xmlns": SVG_NS,
            "width": fmt(width),
            "height": fmt(height),
            "viewBox": f"0 0 {fmt(width)} {fmt(height)}",
        },
    )
    ET.SubElement(
        root,
        "path",
        {
            "d": generate_left_bracket(width, height, nipple_percent),
            "fill": "none",
            "stroke": "currentColor",
            "stroke-width": fmt(stroke_width),
        },
    )
    return ET.tostring(root, encoding="unicode", method="xml")
