# slide_diagrams/core/batch.py
"""
Deck batch mode: render every diagram description of a deck.
Input: a directory of .json files or a CSV manifest with a `path` column.
Output: <output_dir>/batch_<run_name>/index.csv and diagrams/<slug>.svg (+ <slug>.json),
where <slug> is the diagram id with unsafe characters replaced by "-".
A failing case is recorded with status 'error' and the batch continues.
"""

from __future__ import annotations

import csv
import logging
import time
from pathlib import Path

from slide_diagrams.core.config import REPORTS_DIR
from slide_diagrams.core.error_codes import INVALID_SPEC, RUN_FAILED, MeasurementError, user_message
from slide_diagrams.core.io import load_diagram
from slide_diagrams.core.labels import LabelRenderer, default_renderer
from slide_diagrams.core.render import diagram_kind, layout_diagram
from slide_diagrams.core.primitives import to_svg
from slide_diagrams.core.reporting import (
    ensure_report_dir,
    write_diagram_json,
    write_run_metadata_json,
    write_svg,
)

logger = logging.getLogger(__name__)

INDEX_FIELDS = [
    "case_id",
    "source",
    "diagram_id",
    "kind",
    "status",
    "n_labels",
    "n_overlaps",
    "duration_ms",
    "message",
]


def _sources_from_dir(spec_dir: Path) -> list[Path]:
    return sorted(spec_dir.glob("*.json"))


def _sources_from_manifest(manifest_path: Path, root: Path) -> list[Path]:
    """Paths from a CSV manifest ('path' column, or 'file'); relative to the manifest, then root."""
    out: list[Path] = []
    with open(manifest_path, newline="", encoding="utf-8") as f:
        for row in csv.DictReader(f):
            value = (row.get("path") or row.get("file") or "").strip()
            if not value:
                continue
            p = Path(value)
            if not p.is_absolute():
                candidate = manifest_path.parent / p
                p = candidate if candidate.exists() else root / p
            out.append(p)
    return out


def _source_name(path: Path, root: Path) -> str:
    return str(path.relative_to(root)) if root in path.parents else str(path)


def _render_case(
    case_id: str,
    path: Path,
    root: Path,
    diagrams_dir: Path,
    renderer: LabelRenderer,
) -> dict:
    source = _source_name(path, root)
    t0 = time.perf_counter()
    row = {
        "case_id": case_id, "source": source, "diagram_id": "", "kind": "",
        "status": "error", "n_labels": 0, "n_overlaps": 0, "duration_ms": 0, "message": "",
    }
    try:
        spec = load_diagram(path)
        row["diagram_id"] = spec.id
        row["kind"] = diagram_kind(spec)
        drawing = layout_diagram(spec, renderer)
    except (FileNotFoundError, ValueError) as exc:
        logger.warning("Case %s (%s) skipped: %s", case_id, source, exc)
        row["message"] = user_message(INVALID_SPEC)
        row["duration_ms"] = int((time.perf_counter() - t0) * 1000)
        return row
    except MeasurementError as exc:
        logger.warning("Case %s (%s) failed: %s", case_id, source, exc)
        row["message"] = user_message(exc.error_key)
        row["duration_ms"] = int((time.perf_counter() - t0) * 1000)
        return row

    try:
        write_svg(diagrams_dir, drawing.id, to_svg(drawing))
        write_diagram_json(diagrams_dir, drawing, row["kind"], source)
    except OSError as exc:
        logger.warning("Case %s (%s) not written: %s", case_id, source, exc)
        row["message"] = user_message(RUN_FAILED)
        row["duration_ms"] = int((time.perf_counter() - t0) * 1000)
        return row
    row.update(
        status="ok",
        n_labels=len(drawing.label_boxes),
        n_overlaps=len(drawing.warnings),
        duration_ms=int((time.perf_counter() - t0) * 1000),
    )
    return row


def run_batch(
    run_name: str,
    batch_dir: Path | None = None,
    manifest_path: Path | None = None,
    limit: int | None = None,
    repo_root: Path | None = None,
    output_dir: str | None = None,
    renderer: LabelRenderer | None = None,
    metrics: str = "matplotlib",
) -> Path:
    """
    Run batch: from batch_dir (directory of .json) or manifest (CSV with paths).
    Returns report directory containing index.csv and diagrams/.
    """
    root = repo_root or Path.cwd().resolve()
    if batch_dir is not None and batch_dir.is_dir():
        sources = _sources_from_dir(batch_dir)
    elif manifest_path is not None and manifest_path.exists():
        sources = _sources_from_manifest(manifest_path, root)
    else:
        raise ValueError("Provide batch_dir or manifest_path")
    if limit:
        sources = sources[:limit]

    renderer = renderer or default_renderer()
    report_dir = ensure_report_dir(root, f"batch_{run_name}", output_dir=output_dir or REPORTS_DIR)
    diagrams_dir = report_dir / "diagrams"
    diagrams_dir.mkdir(parents=True, exist_ok=True)

    rows = [
        _render_case(f"case_{i:04d}_{path.stem}", path, root, diagrams_dir, renderer)
        for i, path in enumerate(sources)
    ]
    ok = sum(1 for r in rows if r["status"] == "ok")
    logger.info("Batch %s: %d/%d diagrams rendered into %s", run_name, ok, len(rows), report_dir)

    with open(report_dir / "index.csv", "w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=INDEX_FIELDS)
        w.writeheader()
        w.writerows(rows)
    write_run_metadata_json(report_dir, run_name, [r["source"] for r in rows], metrics)
    return report_dir
