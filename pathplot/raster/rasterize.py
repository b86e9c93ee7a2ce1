from __future__ import annotations

import logging

import numpy as np

from pathplot.geometry import (
    RGBA,
    Drawable,
    EmptyDrawable,
    Group,
    LineDash,
    LineStyle,
    Path,
    StrokeStyle,
    Style,
    Text,
    path_bounds,
)
from pathplot.legend import LegendContext
from pathplot.raster.canvas import new_canvas
from pathplot.raster.draw_lines import draw_polyline
from pathplot.raster.draw_text import draw_text, text_size


LOGGER = logging.getLogger(__name__)

DEFAULT_INK: RGBA = (0, 0, 0, 255)


def rasterize(
    drawable: Drawable,
    canvas: np.ndarray,
    *,
    x: float = 0.0,
    y: float = 0.0,
    color: RGBA = DEFAULT_INK,
    line_style: LineStyle = LineStyle.SOLID,
) -> np.ndarray:
    """Draw a drawable tree onto `canvas` with its origin at (x, y)."""
    if isinstance(drawable, EmptyDrawable):
        return canvas
    if isinstance(drawable, Group):
        for item in drawable.items:
            rasterize(item, canvas, x=x, y=y, color=color, line_style=line_style)
    elif isinstance(drawable, (StrokeStyle, Style)):
        inner_color = drawable.color if isinstance(drawable, StrokeStyle) else drawable.fill
        rasterize(drawable.r, canvas, x=x, y=y, color=inner_color, line_style=line_style)
    elif isinstance(drawable, LineDash):
        rasterize(drawable.r, canvas, x=x, y=y, color=color, line_style=drawable.style)
    elif isinstance(drawable, Path):
        xs = np.asarray([float(p.x) + x for p in drawable.points], dtype=np.float64)
        ys = np.asarray([float(p.y) + y for p in drawable.points], dtype=np.float64)
        draw_polyline(
            canvas,
            xs,
            ys,
            color,
            width=max(1, int(round(drawable.stroke_width))),
            dash_pattern=line_style.dash_pattern,
            dash_offset=line_style.offset,
        )
    elif isinstance(drawable, Text):
        draw_text(
            canvas,
            int(round(x)),
            int(round(y)),
            drawable.msg,
            color,
            font_family=drawable.font_face,
            font_size_px=drawable.size,
        )
    else:
        raise TypeError(f"cannot rasterize {type(drawable).__name__}")
    return canvas


def render_legend_swatch(
    context: LegendContext,
    *,
    pad: int = 2,
    gap: int = 6,
    background: RGBA = (0, 0, 0, 0),
) -> np.ndarray | None:
    """Rasterize a legend entry as sample line followed by its label."""
    if context.entry is None:
        return None
    sample, label = context.entry.sample, context.entry.label

    bounds = path_bounds(sample)
    sample_w, sample_h = 0, 0
    if bounds is not None:
        xmin, ymin, xmax, ymax = bounds
        sample_w = int(np.ceil(xmax - xmin)) + 1
        sample_h = int(np.ceil(ymax - ymin)) + _max_stroke_width(sample)
    label_w, label_h = _label_size(label)

    width = pad * 2 + sample_w + gap + label_w
    height = pad * 2 + max(sample_h, label_h, 1)
    canvas = new_canvas(width, height, background)
    mid_y = height / 2.0
    if bounds is not None:
        rasterize(sample, canvas, x=pad - bounds[0], y=mid_y - (bounds[1] + bounds[3]) / 2.0)
    rasterize(label, canvas, x=pad + sample_w + gap, y=mid_y - label_h / 2.0)
    LOGGER.debug("legend swatch rasterized at %dx%d", width, height)
    return canvas


def _max_stroke_width(drawable: Drawable) -> int:
    if isinstance(drawable, Path):
        return max(1, int(round(drawable.stroke_width)))
    if isinstance(drawable, Group):
        return max((_max_stroke_width(item) for item in drawable.items), default=0)
    if isinstance(drawable, (StrokeStyle, LineDash, Style)):
        return _max_stroke_width(drawable.r)
    return 0


def _label_size(drawable: Drawable) -> tuple[int, int]:
    if isinstance(drawable, Text):
        return text_size(drawable.msg, font_family=drawable.font_face, font_size_px=drawable.size)
    if isinstance(drawable, (StrokeStyle, LineDash, Style)):
        return _label_size(drawable.r)
    if isinstance(drawable, Group):
        sizes = [_label_size(item) for item in drawable.items]
        return (max((w for w, _ in sizes), default=0), max((h for _, h in sizes), default=0))
    return (0, 0)
