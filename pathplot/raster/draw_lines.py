from __future__ import annotations

import math
from typing import Sequence

import numpy as np

from pathplot.geometry import RGBA
from pathplot.raster.canvas import draw_pixel


def draw_polyline(
    dst: np.ndarray,
    xs: np.ndarray,
    ys: np.ndarray,
    color: RGBA,
    width: int = 1,
    *,
    dash_pattern: Sequence[float] = (),
    dash_offset: float = 0.0,
) -> None:
    """Stroke a polyline. A dash pattern continues across vertices."""
    if xs.size < 2:
        return
    pattern = tuple(float(v) for v in dash_pattern)
    if sum(pattern) <= 0.0:
        pattern = ()
    distance = float(dash_offset)
    for i in range(xs.size - 1):
        x0, y0 = float(xs[i]), float(ys[i])
        x1, y1 = float(xs[i + 1]), float(ys[i + 1])
        _draw_line_segment(
            dst,
            int(round(x0)),
            int(round(y0)),
            int(round(x1)),
            int(round(y1)),
            color=color,
            width=width,
            pattern=pattern,
            start_distance=distance,
            length=math.hypot(x1 - x0, y1 - y0),
        )
        distance += math.hypot(x1 - x0, y1 - y0)


def pen_down(distance: float, pattern: Sequence[float]) -> bool:
    """Whether the dash pattern draws at `distance` along the stroke."""
    if not pattern:
        return True
    # Odd-length patterns repeat twice per period so on/off alternate.
    period = tuple(pattern) * 2 if len(pattern) % 2 else tuple(pattern)
    pos = math.fmod(distance, sum(period))
    if pos < 0.0:
        pos += sum(period)
    for index, run in enumerate(period):
        if pos < run:
            return index % 2 == 0
        pos -= run
    return False


def _draw_line_segment(
    dst: np.ndarray,
    x0: int,
    y0: int,
    x1: int,
    y1: int,
    color: RGBA,
    width: int,
    pattern: tuple[float, ...],
    start_distance: float,
    length: float,
) -> None:
    dx = abs(x1 - x0)
    sx = 1 if x0 < x1 else -1
    dy = -abs(y1 - y0)
    sy = 1 if y0 < y1 else -1
    err = dx + dy
    steps = max(dx, -dy, 1)
    step = 0

    while True:
        if pen_down(start_distance + length * step / steps, pattern):
            _draw_square_brush(dst, x0, y0, color=color, width=width)
        if x0 == x1 and y0 == y1:
            break
        e2 = 2 * err
        if e2 >= dy:
            err += dy
            x0 += sx
        if e2 <= dx:
            err += dx
            y0 += sy
        step += 1


def _draw_square_brush(dst: np.ndarray, x: int, y: int, color: RGBA, width: int) -> None:
    radius = max(0, width // 2)
    for yy in range(y - radius, y + radius + 1):
        for xx in range(x - radius, x + radius + 1):
            draw_pixel(dst, xx, yy, color)
