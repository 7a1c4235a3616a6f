# slide_diagrams/core/runner.py
"""
CLI entrypoint: load diagram description(s), lay out, write SVG files.
Single mode (--spec, repeatable), fragment stack (--fragments) or deck batch
(--batch-dir / --batch-manifest).
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from slide_diagrams.core.config import DEFAULT_FONT_FAMILY, LOG_LEVEL, REPORTS_DIR
from slide_diagrams.core.error_codes import INVALID_SPEC, RUN_FAILED, MeasurementError, user_message
from slide_diagrams.core.fragments import stack_fragments
from slide_diagrams.core.io import load_diagram
from slide_diagrams.core.labels import FixedMetricsLabelRenderer, LabelRenderer, MatplotlibLabelRenderer
from slide_diagrams.core.primitives import to_svg
from slide_diagrams.core.render import diagram_kind, layout_diagram
from slide_diagrams.core.reporting import (
    ensure_report_dir,
    write_diagram_json,
    write_html,
    write_run_metadata_json,
    write_svg,
)

logger = logging.getLogger(__name__)


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Render spatial slide diagrams to SVG.")
    p.add_argument("--spec", type=str, action="append", default=[], help="Diagram JSON path (repeatable)")
    p.add_argument("--kind", choices=("auto", "1d", "2d"), default="auto", help="Diagram kind (default: detect)")
    p.add_argument("--run-name", type=str, default="run", dest="run_name", help="Reports subdir name")
    p.add_argument("--output-dir", type=str, default=REPORTS_DIR, dest="output_dir", help="Output directory (repo-relative)")
    p.add_argument("--repo-root", type=str, default=None, dest="repo_root", help="Repo root (default: cwd)")
    p.add_argument("--font-family", type=str, default=DEFAULT_FONT_FAMILY, dest="font_family", help="Font for plain labels")
    p.add_argument("--metrics", choices=("matplotlib", "fixed"), default="matplotlib", help="Label measurement backend")
    p.add_argument("--fragments", action="store_true", help="Also write <run-name>.html stacking the --spec diagrams as fragments")
    p.add_argument("--batch-dir", type=str, default=None, dest="batch_dir", help="Batch mode: directory of .json files (repo-relative)")
    p.add_argument("--batch-manifest", type=str, default=None, dest="batch_manifest", help="Batch mode: CSV manifest path (repo-relative)")
    p.add_argument("--batch-limit", type=int, default=None, dest="batch_limit", help="Max cases in batch")
    return p.parse_args(argv)


def _under_root(path: str | None, repo_root: Path) -> Path | None:
    """Relative CLI paths are taken relative to --repo-root."""
    if not path:
        return None
    p = Path(path)
    return p if p.is_absolute() else repo_root / p


def make_renderer(metrics: str, font_family: str = DEFAULT_FONT_FAMILY) -> LabelRenderer:
    if metrics == "fixed":
        return FixedMetricsLabelRenderer()
    return MatplotlibLabelRenderer(font_family=font_family)


def main(argv: list[str] | None = None) -> int:
    logging.basicConfig(level=getattr(logging, LOG_LEVEL, logging.INFO))
    args = _parse_args(argv)
    repo_root = Path(args.repo_root).resolve() if args.repo_root else Path.cwd().resolve()
    renderer = make_renderer(args.metrics, args.font_family)

    if args.batch_dir or args.batch_manifest:
        from slide_diagrams.core.batch import run_batch
        batch_dir = _under_root(args.batch_dir, repo_root)
        manifest = _under_root(args.batch_manifest, repo_root)
        try:
            out = run_batch(
                run_name=args.run_name,
                batch_dir=batch_dir,
                manifest_path=manifest,
                limit=args.batch_limit,
                repo_root=repo_root,
                output_dir=args.output_dir,
                renderer=renderer,
                metrics=args.metrics,
            )
        except ValueError as exc:
            logger.error("%s (%s)", user_message(RUN_FAILED), exc)
            return 1
        print(out / "index.csv")
        return 0

    if not args.spec:
        logger.error("Nothing to do: pass --spec or --batch-dir/--batch-manifest")
        return 2

    try:
        specs = [load_diagram(s, kind=args.kind, repo_root=repo_root) for s in args.spec]
        drawings = [layout_diagram(spec, renderer) for spec in specs]
    except (FileNotFoundError, ValueError) as exc:
        logger.error("%s (%s)", user_message(INVALID_SPEC), exc)
        return 1
    except MeasurementError as exc:
        logger.error("%s (%s)", user_message(exc.error_key), exc)
        return 1

    report_dir = ensure_report_dir(repo_root, args.run_name, output_dir=args.output_dir)
    written: list[Path] = []
    for spec, drawing, source in zip(specs, drawings, args.spec):
        written.append(write_svg(report_dir, drawing.id, to_svg(drawing)))
        written.append(write_diagram_json(report_dir, drawing, diagram_kind(spec), source))
    if args.fragments:
        try:
            html = stack_fragments(drawings, container_id=args.run_name)
        except ValueError as exc:
            logger.error("%s", exc)
            return 1
        written.append(write_html(report_dir, args.run_name, html))
    written.append(write_run_metadata_json(report_dir, args.run_name, args.spec, args.metrics, args.font_family))

    for p in written:
        print(p)
    return 0


if __name__ == "__main__":
    sys.exit(main())
