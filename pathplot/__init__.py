from pathplot.clipping import clip_path, point_in_extent
from pathplot.errors import PathGeometryError, PathPlotError, PathStyleError
from pathplot.geometry import (
    Drawable,
    EmptyDrawable,
    Extent,
    Group,
    LineDash,
    LineStyle,
    Path,
    Point,
    StrokeStyle,
    Style,
    Text,
    group,
    is_empty,
)
from pathplot.legend import BASE_LEGEND_STROKE_LENGTH, LegendContext, calc_legend_stroke_length
from pathplot.renderers import (
    ClosedPathRenderer,
    CustomPathRenderer,
    DefaultPathRenderer,
    EmptyPathRenderer,
    PathRenderer,
    PlotContext,
)
from pathplot.theme import DEFAULT_THEME, PathTheme, validate_theme

__all__ = [
    "BASE_LEGEND_STROKE_LENGTH",
    "ClosedPathRenderer",
    "CustomPathRenderer",
    "DEFAULT_THEME",
    "DefaultPathRenderer",
    "Drawable",
    "EmptyDrawable",
    "EmptyPathRenderer",
    "Extent",
    "Group",
    "LegendContext",
    "LineDash",
    "LineStyle",
    "Path",
    "PathGeometryError",
    "PathPlotError",
    "PathRenderer",
    "PathStyleError",
    "PathTheme",
    "PlotContext",
    "Point",
    "StrokeStyle",
    "Style",
    "Text",
    "calc_legend_stroke_length",
    "clip_path",
    "group",
    "is_empty",
    "point_in_extent",
    "validate_theme",
]
