# slide_diagrams/core/text_metrics.py
"""
Measure plain label width/height in px using Pillow. 1 pt = 1 px at 72 DPI.
The scratch image is created and closed inside each call, also when measuring fails.
"""

from __future__ import annotations

import warnings

_font_warning_emitted: set[str] = set()


def _matplotlib_font_path(font_family: str) -> str | None:
    """Resolve a family name to a font file via matplotlib's font cache."""
    from matplotlib import font_manager

    try:
        return font_manager.findfont(
            font_manager.FontProperties(family=font_family),
            fallback_to_default=False,
        )
    except ValueError:
        return None


def _load_font(font_family: str, font_size_px: float):
    """Load PIL ImageFont; fallback with warning if font not found."""
    from PIL import ImageFont

    size = max(1, int(round(font_size_px)))
    candidates = [
        font_family + ".ttf",
        font_family.replace(" ", "") + ".ttf",
    ]
    mpl_path = _matplotlib_font_path(font_family)
    if mpl_path:
        candidates.append(mpl_path)
    candidates += ["DejaVuSans.ttf", "arial.ttf", "Arial.ttf"]
    for name in candidates:
        try:
            return ImageFont.truetype(name, size=size)
        except OSError:
            continue
    if font_family not in _font_warning_emitted:
        _font_warning_emitted.add(font_family)
        warnings.warn(f"Font not found: {font_family!r}; using default.", UserWarning)
    return ImageFont.load_default()


def measure_text_px(text: str, font_family: str, font_size_px: float) -> tuple[float, float]:
    """
    Return (width_px, height_px) of a single line of text.
    Height is the font's line box (ascent + descent), so labels with and
    without descenders line up.
    """
    from PIL import Image, ImageDraw

    font = _load_font(font_family, font_size_px)
    img = Image.new("RGB", (1, 1))
    try:
        draw = ImageDraw.Draw(img)
        w = 0.0
        if text:
            bbox = draw.textbbox((0, 0), text, font=font)
            w = float(bbox[2] - bbox[0])
        if hasattr(font, "getmetrics"):
            ascent, descent = font.getmetrics()
            h = float(ascent + descent)
        else:
            bbox = draw.textbbox((0, 0), "Ag", font=font)
            h = float(bbox[3] - bbox[1])
    finally:
        img.close()
    # Font was loaded at an integer size; rescale to the requested size.
    size_used = getattr(font, "size", font_size_px)
    scale = font_size_px / max(1.0, float(size_used))
    return (w * scale, h * scale)
