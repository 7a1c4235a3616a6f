# slide_diagrams/core/config.py
"""
Central configuration for spatial diagram layout.
All tunable values live here; no magic numbers in other modules.
Units are CSS pixels (1 px = 1 pt at 72 DPI for the measurement backends).
"""

from __future__ import annotations
import os

# ----- Paths (repo-relative) -----
REPORTS_DIR: str = "reports"
"""Default parent directory for rendered SVGs and batch indexes."""

# ----- Typography -----
DEFAULT_FONT_SIZE_PX: float = 16.0
"""Label font size when a diagram does not set fontSize."""

DEFAULT_FONT_FAMILY: str = os.environ.get("DIAGRAM_FONT_FAMILY", "DejaVu Sans")
"""Font used to measure plain labels. Override with env DIAGRAM_FONT_FAMILY."""

FIXED_CHAR_WIDTH_EM: float = 0.6
"""Fixed metrics: advance width of one character, in em."""

FIXED_LINE_HEIGHT_EM: float = 1.2
"""Fixed metrics: label height, in em (CSS line-height: normal)."""

# ----- Axes -----
AXIS_STROKE_WIDTH: float = 2.0
ARROW_STROKE_WIDTH: float = 1.0

# ----- 1D layout -----
ARROW_HEAD_PX: float = 6.0
"""Half-width and depth of the triangular head on person/policy arrows."""

LABEL_ARROW_GAP_PX: float = 5.0
"""Gap between a label's near edge and the tail of its arrow."""

CAPTION_GAP_PX: float = 10.0
"""Gap between the furthest person label and the axis caption."""

DIRECTION_GAP_PX: float = 10.0
"""Gap between the caption and its directional arrow."""

DIRECTION_ARROW_LENGTH_PX: float = 40.0

# ----- Tic marks (1D and 2D) -----
TIC_LENGTH_PX: float = 4.0
TIC_LABEL_GAP_PX: float = 2.0

# ----- 2D layout -----
POLICY_ARROW_LENGTH_2D_PX: float = 10.0
POLICY_ARROW_HEAD_2D_PX: float = 3.0
POLICY_LABEL_GAP_2D_PX: float = 2.0
DOT_RADIUS_PX: float = 8.0
GUIDE_DASHARRAY: str = "3,3"
CAPTION_PADDING_2D_PX: float = 2.0
"""Inset of the 2D axis captions inside their margin box (each side)."""

# ----- Direction marker -----
MARKER_ID_PREFIX: str = "arrowhead-"
"""Marker definitions are keyed as MARKER_ID_PREFIX + diagram id."""

# ----- Logging -----
LOG_LEVEL: str = os.environ.get("LOG_LEVEL", "INFO").upper()
"""Level for the CLI's logging.basicConfig. Set env LOG_LEVEL=DEBUG for layout traces."""
