from __future__ import annotations

import logging
from typing import Sequence

from pathplot.geometry import Datum2d, Extent, T


LOGGER = logging.getLogger(__name__)

# (axis, edge value) of the half-plane that limited a clip parameter.
_Edge = tuple[str, float]


def point_in_extent(point: Datum2d, extent: Extent) -> bool:
    return 0.0 <= point.x <= extent.width and 0.0 <= point.y <= extent.height


def clip_path(path: Sequence[T], extent: Extent) -> list[list[T]]:
    """Split `path` into the runs that are visible inside `extent`.

    Each consecutive pair of points is clipped against the extent. Where a pair
    crosses the boundary the crossing point is interpolated with `with_xy`, so
    every run starts and ends exactly on the boundary or on an original point.
    Original datum objects are reused wherever they are inside.
    """
    if len(path) < 2:
        return []

    segments: list[list[T]] = []
    current: list[T] = []
    for start, end in zip(path, path[1:]):
        clipped = _clip_segment(start, end, extent)
        if clipped is None:
            if current:
                segments.append(current)
                current = []
            continue
        head, tail, entered, exited = clipped
        if entered or not current:
            if current:
                segments.append(current)
            current = [head]
        current.append(tail)
        if exited:
            segments.append(current)
            current = []
    if current:
        segments.append(current)

    LOGGER.debug("clipped %d points into %d segments", len(path), len(segments))
    return segments


def _clip_segment(start: T, end: T, extent: Extent) -> tuple[T, T, bool, bool] | None:
    """Liang-Barsky clip of one line segment.

    Returns (head, tail, entered, exited) where `entered`/`exited` report
    whether the head/tail had to be moved onto the boundary, or None when no
    part of the segment with positive length lies inside. A zero-length
    segment is kept when its point is inside.
    """
    x0, y0 = float(start.x), float(start.y)
    x1, y1 = float(end.x), float(end.y)
    dx = x1 - x0
    dy = y1 - y0

    t0, t1 = 0.0, 1.0
    enter_edge: _Edge | None = None
    exit_edge: _Edge | None = None
    half_planes = (
        (-dx, x0, ("x", 0.0)),
        (dx, extent.width - x0, ("x", extent.width)),
        (-dy, y0, ("y", 0.0)),
        (dy, extent.height - y0, ("y", extent.height)),
    )
    for p, q, edge in half_planes:
        if p == 0.0:
            if q < 0.0:
                return None
            continue
        t = q / p
        if p < 0.0:
            if t > t1:
                return None
            if t > t0:
                t0, enter_edge = t, edge
        else:
            if t < t0:
                return None
            if t < t1:
                t1, exit_edge = t, edge

    entered = enter_edge is not None
    exited = exit_edge is not None
    if (entered or exited) and t1 <= t0:
        # The segment only touches the extent at a single point.
        return None

    head = _interpolate(start, x0, y0, dx, dy, t0, enter_edge, extent) if entered else start
    tail = _interpolate(start, x0, y0, dx, dy, t1, exit_edge, extent) if exited else end
    return head, tail, entered, exited


def _interpolate(
    datum: T,
    x0: float,
    y0: float,
    dx: float,
    dy: float,
    t: float,
    edge: _Edge | None,
    extent: Extent,
) -> T:
    x = _clamp(x0 + t * dx, 0.0, extent.width)
    y = _clamp(y0 + t * dy, 0.0, extent.height)
    if edge is not None:
        axis, value = edge
        if axis == "x":
            x = value
        else:
            y = value
    return datum.with_xy(x, y)


def _clamp(value: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, value))
