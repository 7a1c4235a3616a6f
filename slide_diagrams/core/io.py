# slide_diagrams/core/io.py
"""
Load and validate diagram descriptions from JSON.
Keys follow the slide sources (camelCase: marginX, spaceLabel, asLaTeX, ...)
and are mapped onto the dataclasses in core/types.py.
Geometry and positions are not range-checked; only structure is validated.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Literal

from slide_diagrams.core.config import DEFAULT_FONT_SIZE_PX
from slide_diagrams.core.types import (
    DIRECTIONS,
    ORIENTATIONS,
    AxisLabel,
    Diagram1DSpec,
    Diagram2DSpec,
    DiagramSpec,
    LabeledPoint,
    Point2D,
    Scale,
    Tic,
)

logger = logging.getLogger(__name__)

DiagramKind = Literal["auto", "1d", "2d"]

_KEYS_2D = frozenset(
    {
        "horizontalPolicies",
        "verticalPolicies",
        "horizontalScale",
        "verticalScale",
        "horizontalLabel",
        "verticalLabel",
    }
)


def _resolve_path(path: str | Path, repo_root: Path | None) -> Path:
    """Resolve path; if relative, against repo_root (or cwd if repo_root is None)."""
    p = Path(path)
    if not p.is_absolute() and repo_root is not None:
        p = repo_root / p
    return p.resolve()


def _number(data: dict, key: str, default: float | None = None) -> float:
    if key not in data or data[key] is None:
        if default is None:
            raise ValueError(f"Missing required field {key!r}")
        return default
    value = data[key]
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"Field {key!r} must be a number, got {value!r}")
    return float(value)


def _list(data: dict, key: str) -> list:
    value = data.get(key) or []
    if not isinstance(value, list):
        raise ValueError(f"Field {key!r} must be a list, got {type(value).__name__}")
    return value


def _label_text(item: dict, where: str) -> str:
    if not isinstance(item, dict) or "label" not in item:
        raise ValueError(f"{where}: expected an object with a 'label' field, got {item!r}")
    return str(item["label"])


def _labeled_point(item: Any, where: str) -> LabeledPoint:
    label = _label_text(item, where)
    return LabeledPoint(
        position=_number(item, "position"),
        label=label,
        as_latex=bool(item.get("asLaTeX", False)),
    )


def _point_2d(item: Any, where: str) -> Point2D:
    label = _label_text(item, where)
    return Point2D(
        x=_number(item, "x"),
        y=_number(item, "y"),
        label=label,
        as_latex=bool(item.get("asLaTeX", False)),
        guides=bool(item.get("guides", False)),
    )


def _scale(value: Any, where: str) -> Scale | None:
    if value is None:
        return None
    if not isinstance(value, dict):
        raise ValueError(f"{where}: expected an object with 'tics', got {value!r}")
    tics = []
    for i, t in enumerate(_list(value, "tics")):
        if not isinstance(t, dict):
            raise ValueError(f"{where}.tics[{i}]: expected an object, got {t!r}")
        label = t.get("label")
        tics.append(Tic(pos=_number(t, "pos"), label=str(label) if label else None))
    return Scale(tics=tuple(tics), as_latex=bool(value.get("asLaTeX", False)))


def _axis_label(value: Any, where: str) -> AxisLabel | None:
    if value is None:
        return None
    if isinstance(value, str):
        return AxisLabel(label=value)
    return AxisLabel(label=_label_text(value, where), as_latex=bool(value.get("asLaTeX", False)))


def _common(data: dict) -> dict:
    diagram_id = data.get("id")
    if not diagram_id or not isinstance(diagram_id, str):
        raise ValueError("Missing required field 'id' (non-empty string)")
    return {
        "width": _number(data, "width"),
        "height": _number(data, "height"),
        "id": diagram_id,
        "margin_x": _number(data, "marginX"),
        "margin_y": _number(data, "marginY"),
        "font_size": _number(data, "fontSize", DEFAULT_FONT_SIZE_PX),
    }


def detect_kind(data: dict) -> Literal["1d", "2d"]:
    """'2d' when the description says so or uses any 2D-only key."""
    kind = str(data.get("kind", "")).lower()
    if kind in ("1d", "2d"):
        return kind  # type: ignore[return-value]
    if _KEYS_2D & data.keys():
        return "2d"
    persons = data.get("persons") or []
    if isinstance(persons, list) and any(isinstance(p, dict) and "x" in p and "y" in p for p in persons):
        return "2d"
    return "1d"


def parse_diagram_1d(data: dict) -> Diagram1DSpec:
    orientation = data.get("orientation", "horizontal")
    if orientation not in ORIENTATIONS:
        raise ValueError(f"Unknown orientation {orientation!r}; expected one of {ORIENTATIONS}")
    direction = data.get("LabelDirection", data.get("labelDirection"))
    if direction is not None and direction not in DIRECTIONS:
        raise ValueError(f"Unknown LabelDirection {direction!r}; expected one of {DIRECTIONS}")
    return Diagram1DSpec(
        **_common(data),
        orientation=orientation,
        persons=tuple(_labeled_point(p, f"persons[{i}]") for i, p in enumerate(_list(data, "persons"))),
        policies=tuple(_labeled_point(p, f"policies[{i}]") for i, p in enumerate(_list(data, "policies"))),
        scale=_scale(data.get("scale"), "scale"),
        space_label=_axis_label(data.get("spaceLabel"), "spaceLabel"),
        label_direction=direction,
    )


def parse_diagram_2d(data: dict) -> Diagram2DSpec:
    return Diagram2DSpec(
        **_common(data),
        persons=tuple(_point_2d(p, f"persons[{i}]") for i, p in enumerate(_list(data, "persons"))),
        horizontal_policies=tuple(
            _labeled_point(p, f"horizontalPolicies[{i}]")
            for i, p in enumerate(_list(data, "horizontalPolicies"))
        ),
        vertical_policies=tuple(
            _labeled_point(p, f"verticalPolicies[{i}]")
            for i, p in enumerate(_list(data, "verticalPolicies"))
        ),
        horizontal_scale=_scale(data.get("horizontalScale"), "horizontalScale"),
        vertical_scale=_scale(data.get("verticalScale"), "verticalScale"),
        horizontal_label=_axis_label(data.get("horizontalLabel"), "horizontalLabel"),
        vertical_label=_axis_label(data.get("verticalLabel"), "verticalLabel"),
    )


def parse_diagram(data: dict, kind: DiagramKind = "auto") -> DiagramSpec:
    """
    Build a diagram spec from a decoded JSON object.
    Raises ValueError with the offending field on malformed input.
    """
    if not isinstance(data, dict):
        raise ValueError(f"Diagram description must be a JSON object, got {type(data).__name__}")
    resolved = detect_kind(data) if kind == "auto" else kind
    if resolved == "2d":
        return parse_diagram_2d(data)
    if resolved == "1d":
        return parse_diagram_1d(data)
    raise ValueError(f"Unknown diagram kind {kind!r}")


def load_diagram(
    path: str | Path,
    kind: DiagramKind = "auto",
    repo_root: Path | None = None,
) -> DiagramSpec:
    """
    Load a diagram description from a JSON file.
    Raises FileNotFoundError if path is missing, ValueError if the description is invalid.
    """
    resolved = _resolve_path(path, repo_root)
    if not resolved.exists():
        raise FileNotFoundError(f"Diagram file not found: {resolved}")
    try:
        data = json.loads(resolved.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise ValueError(f"{resolved}: invalid JSON ({exc})") from exc
    spec = parse_diagram(data, kind)
    logger.debug("Loaded %s diagram %s from %s", type(spec).__name__, spec.id, resolved)
    return spec
