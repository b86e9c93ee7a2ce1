from __future__ import annotations

from dataclasses import dataclass, field
import math
from typing import ClassVar, Iterable, Protocol, TypeVar, Union

from pathplot.errors import PathGeometryError, PathStyleError


RGBA = tuple[int, int, int, int]


class Datum2d(Protocol):
    """A positioned datum. `with_xy` returns a copy moved to a new position."""

    @property
    def x(self) -> float: ...

    @property
    def y(self) -> float: ...

    def with_xy(self, x: float, y: float) -> "Datum2d": ...


T = TypeVar("T", bound=Datum2d)


@dataclass(frozen=True)
class Point:
    x: float
    y: float

    def with_xy(self, x: float, y: float) -> "Point":
        return Point(x=x, y=y)


@dataclass(frozen=True)
class Extent:
    width: float
    height: float

    def __post_init__(self) -> None:
        if not (math.isfinite(self.width) and math.isfinite(self.height)):
            raise PathGeometryError("extent dimensions must be finite")
        if self.width < 0 or self.height < 0:
            raise PathGeometryError(f"extent must be non-negative, got {self.width}x{self.height}")


@dataclass(frozen=True)
class LineStyle:
    """Dash pattern of alternating on/off lengths. An empty pattern is solid."""

    dash_pattern: tuple[float, ...] = ()
    offset: float = 0.0

    SOLID: ClassVar["LineStyle"]
    DOTTED: ClassVar["LineStyle"]
    DASH_DOT: ClassVar["LineStyle"]
    EVENLY_SPACED: ClassVar["LineStyle"]

    def __post_init__(self) -> None:
        pattern = tuple(float(v) for v in self.dash_pattern)
        for value in pattern:
            if not math.isfinite(value) or value < 0:
                raise PathStyleError(f"dash pattern entries must be finite and >= 0, got {value}")
        if not math.isfinite(self.offset):
            raise PathStyleError("dash offset must be finite")
        object.__setattr__(self, "dash_pattern", pattern)
        object.__setattr__(self, "offset", float(self.offset))

    @property
    def is_solid(self) -> bool:
        return not self.dash_pattern


LineStyle.SOLID = LineStyle()
LineStyle.DOTTED = LineStyle((1.0, 2.0))
LineStyle.DASH_DOT = LineStyle((6.0, 3.0, 1.0, 3.0))
LineStyle.EVENLY_SPACED = LineStyle((6.0,))


@dataclass(frozen=True)
class EmptyDrawable:
    pass


@dataclass(frozen=True)
class Path:
    points: tuple[Datum2d, ...]
    stroke_width: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "points", tuple(self.points))


@dataclass(frozen=True)
class StrokeStyle:
    r: "Drawable"
    color: RGBA


@dataclass(frozen=True)
class LineDash:
    r: "Drawable"
    style: LineStyle


@dataclass(frozen=True)
class Style:
    r: "Drawable"
    fill: RGBA


@dataclass(frozen=True)
class Text:
    msg: str
    size: float
    font_face: str


@dataclass(frozen=True)
class Group:
    items: tuple["Drawable", ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(self, "items", tuple(self.items))


Drawable = Union[EmptyDrawable, Path, StrokeStyle, LineDash, Style, Text, Group]


def group(drawables: Iterable[Drawable]) -> Drawable:
    items = tuple(drawables)
    if not items:
        return EmptyDrawable()
    return Group(items)


def is_empty(drawable: Drawable) -> bool:
    if isinstance(drawable, EmptyDrawable):
        return True
    if isinstance(drawable, Group):
        return all(is_empty(item) for item in drawable.items)
    if isinstance(drawable, (StrokeStyle, LineDash, Style)):
        return is_empty(drawable.r)
    return False


def path_bounds(drawable: Drawable) -> tuple[float, float, float, float] | None:
    """Return (xmin, ymin, xmax, ymax) over every Path leaf, or None."""
    points: list[Datum2d] = []
    _collect_points(drawable, points)
    if not points:
        return None
    xs = [float(p.x) for p in points]
    ys = [float(p.y) for p in points]
    return (min(xs), min(ys), max(xs), max(ys))


def _collect_points(drawable: Drawable, out: list[Datum2d]) -> None:
    if isinstance(drawable, Path):
        out.extend(drawable.points)
    elif isinstance(drawable, Group):
        for item in drawable.items:
            _collect_points(item, out)
    elif isinstance(drawable, (StrokeStyle, LineDash, Style)):
        _collect_points(drawable.r, out)
