# slide_diagrams/core/labels.py
"""
Label measurement + rendering capability injected into the layout engine.

The layout functions only depend on the LabelRenderer protocol. Two
implementations ship here:

- MatplotlibLabelRenderer: Pillow metrics for plain labels, matplotlib
  mathtext for LaTeX labels (typeset to vector outlines).
- FixedMetricsLabelRenderer: a precomputed metrics table (fixed advance per
  character, fixed line height). Deterministic and headless; used by tests
  and by the CLI's --metrics fixed.
"""

from __future__ import annotations

import logging
import re
import xml.etree.ElementTree as ET
from typing import Protocol

import lxml.html
from lxml import etree

from slide_diagrams.core.config import (
    DEFAULT_FONT_FAMILY,
    FIXED_CHAR_WIDTH_EM,
    FIXED_LINE_HEIGHT_EM,
)
from slide_diagrams.core.error_codes import MeasurementError
from slide_diagrams.core.types import LabelSize, RenderedLabel

logger = logging.getLogger(__name__)

_LATEX_COMMAND = re.compile(r"\\[A-Za-z]+")
_LATEX_SYNTAX = re.compile(r"[{}^_$\\]")


class LabelRenderer(Protocol):
    """Converts label text into pixel size and embeddable XHTML content."""

    def measure(self, label: str, font_size: float, as_latex: bool) -> LabelSize:
        ...

    def render(self, label: str, font_size: float, as_latex: bool) -> RenderedLabel:
        ...


def _copy_html(children, parent: ET.Element) -> None:
    """Copy lxml HTML nodes under an ElementTree parent; comments keep only their tail."""
    last: ET.Element | None = None
    for child in children:
        if isinstance(child.tag, str):
            last = ET.SubElement(parent, child.tag, dict(child.attrib))
            last.text = child.text
            _copy_html(child, last)
            last.tail = child.tail
        elif child.tail:
            if last is None:
                parent.text = (parent.text or "") + child.tail
            else:
                last.tail = (last.tail or "") + child.tail


def parse_markup(label: str) -> tuple[str, tuple[ET.Element, ...]]:
    """
    Parse a plain label as an HTML fragment: returns (leading text, child elements)
    as ElementTree nodes ready to be emitted as XHTML. Void tags (<br>), named
    entities (&nbsp;), unquoted attributes and stray '&' / '<' are read the way a
    browser reads innerHTML.
    """
    if not label.strip():
        return label, ()
    try:
        fragments = lxml.html.fragments_fromstring(label)
    except etree.ParserError:
        return label, ()
    div = ET.Element("div")
    if fragments and isinstance(fragments[0], str):
        div.text = fragments[0]
        fragments = fragments[1:]
    _copy_html(fragments, div)
    return div.text or "", tuple(div)


def markup_text(label: str) -> str:
    """Visible text of a plain label (tags stripped)."""
    text, nodes = parse_markup(label)
    return text + "".join("".join(n.itertext()) + (n.tail or "") for n in nodes)


class MatplotlibLabelRenderer:
    """Default renderer: Pillow for plain text, matplotlib mathtext for LaTeX."""

    def __init__(self, font_family: str = DEFAULT_FONT_FAMILY) -> None:
        self.font_family = font_family

    def measure(self, label: str, font_size: float, as_latex: bool) -> LabelSize:
        return self.render(label, font_size, as_latex).size

    def render(self, label: str, font_size: float, as_latex: bool) -> RenderedLabel:
        from slide_diagrams.core.mathtext import math_to_svg_element
        from slide_diagrams.core.text_metrics import measure_text_px

        if as_latex:
            try:
                svg, w, h = math_to_svg_element(label, font_size)
            except (ValueError, RuntimeError) as exc:
                raise MeasurementError(label, exc) from exc
            logger.debug("Measured math label %r: %.2f x %.2f", label, w, h)
            return RenderedLabel(size=LabelSize(w, h), nodes=(svg,))

        text, nodes = parse_markup(label)
        try:
            w, h = measure_text_px(markup_text(label), self.font_family, font_size)
        except OSError as exc:
            raise MeasurementError(label, exc) from exc
        logger.debug("Measured label %r: %.2f x %.2f", label, w, h)
        return RenderedLabel(size=LabelSize(w, h), text=text, nodes=nodes)


class FixedMetricsLabelRenderer:
    """
    Headless renderer from a fixed metrics table.
    Width = visible characters * char_width_em * font_size;
    height = line_height_em * font_size. LaTeX commands count as one character.
    """

    def __init__(
        self,
        char_width_em: float = FIXED_CHAR_WIDTH_EM,
        line_height_em: float = FIXED_LINE_HEIGHT_EM,
    ) -> None:
        self.char_width_em = char_width_em
        self.line_height_em = line_height_em

    def _visible_chars(self, label: str, as_latex: bool) -> int:
        if as_latex:
            s = _LATEX_COMMAND.sub("x", label)
            return len(_LATEX_SYNTAX.sub("", s))
        return len(markup_text(label))

    def measure(self, label: str, font_size: float, as_latex: bool) -> LabelSize:
        n = self._visible_chars(label, as_latex)
        return LabelSize(
            width=n * self.char_width_em * font_size,
            height=self.line_height_em * font_size,
        )

    def render(self, label: str, font_size: float, as_latex: bool) -> RenderedLabel:
        size = self.measure(label, font_size, as_latex)
        if as_latex:
            span = ET.Element("span", {"class": "math"})
            span.text = label
            return RenderedLabel(size=size, nodes=(span,))
        text, nodes = parse_markup(label)
        return RenderedLabel(size=size, text=text, nodes=nodes)


def default_renderer() -> LabelRenderer:
    return MatplotlibLabelRenderer()
