from __future__ import annotations

from dataclasses import dataclass, field
import logging
import math
from typing import Any, Callable, Generic, Sequence

from pathplot.clipping import clip_path
from pathplot.errors import PathStyleError
from pathplot.geometry import (
    Drawable,
    EmptyDrawable,
    Extent,
    LineDash,
    LineStyle,
    Path,
    Point,
    StrokeStyle,
    Style,
    T,
    Text,
    group,
)
from pathplot.legend import LegendContext, calc_legend_stroke_length
from pathplot.theme import DEFAULT_THEME, PathTheme, parse_color


LOGGER = logging.getLogger(__name__)

ColorLike = str | tuple[int, int, int] | tuple[int, int, int, int]


@dataclass(frozen=True)
class PlotContext:
    """Render-time arguments handed to custom path functions."""

    extent: Extent
    plot: Any = None


class PathRenderer(Generic[T]):
    """Turns a pixel-space path into a drawable, optionally with a legend entry."""

    def render(self, extent: Extent, path: Sequence[T], plot: Any = None) -> Drawable:
        raise NotImplementedError

    def legend_context(self) -> LegendContext:
        return LegendContext.empty()


@dataclass(frozen=True)
class DefaultPathRenderer(PathRenderer[T]):
    stroke_width: float
    color: ColorLike
    label: Drawable = field(default_factory=EmptyDrawable)
    line_style: LineStyle = LineStyle.SOLID
    legend_stroke_length: float = field(init=False)

    def __post_init__(self) -> None:
        if not math.isfinite(self.stroke_width) or self.stroke_width <= 0:
            raise PathStyleError(f"stroke width must be > 0, got {self.stroke_width}")
        object.__setattr__(self, "color", parse_color(self.color))
        object.__setattr__(self, "legend_stroke_length", calc_legend_stroke_length(self.line_style))

    def _styled(self, points: Sequence[Any]) -> Drawable:
        return LineDash(StrokeStyle(Path(tuple(points), self.stroke_width), self.color), self.line_style)

    def render(self, extent: Extent, path: Sequence[T], plot: Any = None) -> Drawable:
        return group(self._styled(segment) for segment in clip_path(path, extent))

    def legend_context(self) -> LegendContext:
        if isinstance(self.label, EmptyDrawable):
            return LegendContext.empty()
        sample = self._styled((Point(0.0, 0.0), Point(self.legend_stroke_length, 0.0)))
        return LegendContext.single(sample, self.label)


@dataclass(frozen=True)
class CustomPathRenderer(PathRenderer[T]):
    path_fn: Callable[[PlotContext, Sequence[T]], Drawable]
    legend_ctx: LegendContext | None = None

    def render(self, extent: Extent, path: Sequence[T], plot: Any = None) -> Drawable:
        return self.path_fn(PlotContext(extent=extent, plot=plot), path)

    def legend_context(self) -> LegendContext:
        if self.legend_ctx is None:
            return super().legend_context()
        return self.legend_ctx


@dataclass(frozen=True)
class ClosedPathRenderer(PathRenderer[T]):
    """Connects the last point back to the first before delegating. Has no legend entry."""

    delegate: DefaultPathRenderer[T]

    def render(self, extent: Extent, path: Sequence[T], plot: Any = None) -> Drawable:
        if len(path) == 0:
            return EmptyDrawable()
        return self.delegate.render(extent, [*path, path[0]], plot)


class EmptyPathRenderer(PathRenderer[T]):
    """No-op renderer for series whose path should not be drawn."""

    def render(self, extent: Extent, path: Sequence[T], plot: Any = None) -> Drawable:
        return EmptyDrawable()


def custom(
    path_fn: Callable[[PlotContext, Sequence[T]], Drawable],
    legend_ctx: LegendContext | None = None,
) -> PathRenderer[T]:
    return CustomPathRenderer(path_fn=path_fn, legend_ctx=legend_ctx)


def default(
    stroke_width: float | None = None,
    color: ColorLike | None = None,
    label: Drawable | None = None,
    line_style: LineStyle | None = None,
    *,
    theme: PathTheme = DEFAULT_THEME,
) -> DefaultPathRenderer[T]:
    """The default path renderer.

    Args:
        stroke_width: Width of the path, theme default when omitted.
        color: Path color as a hex string or RGB(A) tuple.
        label: Legend label drawable. No legend entry when omitted.
        line_style: Dash pattern, theme default when omitted.
    """
    return DefaultPathRenderer(
        stroke_width=float(theme.stroke_width if stroke_width is None else stroke_width),
        color=theme.path_color if color is None else color,
        label=EmptyDrawable() if label is None else label,
        line_style=theme.line_dash_style if line_style is None else line_style,
    )


def named(
    name: str,
    color: ColorLike,
    stroke_width: float | None = None,
    line_style: LineStyle | None = None,
    *,
    theme: PathTheme = DEFAULT_THEME,
) -> DefaultPathRenderer[T]:
    """Default renderer with a text label built from the theme's legend font."""
    label = Style(
        Text(name, theme.legend_label_size, theme.font_face),
        parse_color(theme.legend_label_color),
    )
    return default(stroke_width, color, label, line_style, theme=theme)


def closed(
    stroke_width: float | None = None,
    color: ColorLike | None = None,
    label: Drawable | None = None,
    line_style: LineStyle | None = None,
    *,
    theme: PathTheme = DEFAULT_THEME,
) -> PathRenderer[T]:
    return ClosedPathRenderer(delegate=default(stroke_width, color, label, line_style, theme=theme))


def empty() -> PathRenderer[Any]:
    return EmptyPathRenderer()
