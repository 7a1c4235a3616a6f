# slide_diagrams/core/reporting.py
"""
Create <output_dir>/<run_name>/ and write diagram SVGs, fragment stacks and
run_metadata.json.
"""

from __future__ import annotations

import json
from datetime import datetime, timezone
from pathlib import Path

from slide_diagrams.core.config import (
    ARROW_HEAD_PX,
    CAPTION_GAP_PX,
    DEFAULT_FONT_FAMILY,
    DEFAULT_FONT_SIZE_PX,
    DIRECTION_ARROW_LENGTH_PX,
    LABEL_ARROW_GAP_PX,
    REPORTS_DIR,
    TIC_LENGTH_PX,
)
from slide_diagrams.core.primitives import Drawing, slugify


def drawing_to_dict(drawing: Drawing, kind: str, source: str) -> dict:
    """Summary of one rendered diagram: placed label boxes and warnings."""
    return {
        "id": drawing.id,
        "kind": kind,
        "source": source,
        "size": {"width": drawing.width, "height": drawing.height},
        "labels": [
            {
                "name": lb.name,
                "kind": lb.tags[0] if lb.tags else "",
                "box": {"x": lb.box.x, "y": lb.box.y, "width": lb.box.width, "height": lb.box.height},
            }
            for lb in drawing.label_boxes
        ],
        "n_primitives": len(drawing.primitives),
        "warnings": list(drawing.warnings),
    }


def run_metadata_dict(run_name: str, sources: list[str], metrics: str, font_family: str) -> dict:
    """Timestamp and config snapshot for run_metadata.json."""
    return {
        "run_name": run_name,
        "timestamp_utc": datetime.now(timezone.utc).isoformat(),
        "sources": sources,
        "metrics": metrics,
        "font_family": font_family,
        "config": {
            "DEFAULT_FONT_SIZE_PX": DEFAULT_FONT_SIZE_PX,
            "DEFAULT_FONT_FAMILY": DEFAULT_FONT_FAMILY,
            "ARROW_HEAD_PX": ARROW_HEAD_PX,
            "LABEL_ARROW_GAP_PX": LABEL_ARROW_GAP_PX,
            "CAPTION_GAP_PX": CAPTION_GAP_PX,
            "DIRECTION_ARROW_LENGTH_PX": DIRECTION_ARROW_LENGTH_PX,
            "TIC_LENGTH_PX": TIC_LENGTH_PX,
        },
    }


def ensure_report_dir(
    repo_root: Path,
    run_name: str,
    output_dir: str | None = None,
) -> Path:
    """Create output_dir/<run_name>/ under repo_root; return path. Default output_dir from config."""
    base = output_dir if output_dir is not None else REPORTS_DIR
    out = (repo_root / base).resolve() / run_name
    out.mkdir(parents=True, exist_ok=True)
    return out


def output_stem(name: str) -> str:
    """File name stem for a diagram id: path separators and other unsafe characters become '-'."""
    return slugify(name, "diagram")


def write_svg(report_dir: Path, diagram_id: str, svg: str) -> Path:
    """Write <slug>.svg; the file holds exactly the inline-embeddable markup."""
    path = report_dir / f"{output_stem(diagram_id)}.svg"
    path.write_text(svg, encoding="utf-8")
    return path


def write_html(report_dir: Path, name: str, html: str) -> Path:
    path = report_dir / f"{output_stem(name)}.html"
    path.write_text(html, encoding="utf-8")
    return path


def write_diagram_json(report_dir: Path, drawing: Drawing, kind: str, source: str) -> Path:
    path = report_dir / f"{output_stem(drawing.id)}.json"
    path.write_text(json.dumps(drawing_to_dict(drawing, kind, source), indent=2), encoding="utf-8")
    return path


def write_run_metadata_json(
    report_dir: Path,
    run_name: str,
    sources: list[str],
    metrics: str,
    font_family: str = DEFAULT_FONT_FAMILY,
) -> Path:
    path = report_dir / "run_metadata.json"
    data = run_metadata_dict(run_name, sources, metrics, font_family)
    path.write_text(json.dumps(data, indent=2), encoding="utf-8")
    return path
