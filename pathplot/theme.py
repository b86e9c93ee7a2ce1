from __future__ import annotations

from dataclasses import dataclass, fields
import re
from typing import Any, Mapping, Sequence

from pathplot.errors import PathStyleError
from pathplot.geometry import RGBA, LineStyle

_HEX_COLOR = re.compile(r"^#[0-9a-fA-F]{6}([0-9a-fA-F]{2})?$")
_COLOR_KEYS = ("path_color", "legend_label_color")


@dataclass(frozen=True)
class PathTheme:
    """Every default a path renderer falls back to."""

    stroke_width: float = 2.0
    path_color: str = "#333333"
    line_dash_style: LineStyle = LineStyle.SOLID
    legend_label_size: float = 13.0
    legend_label_color: str = "#333333"
    font_face: str = "Comic Mono"


DEFAULT_THEME = PathTheme()


def validate_theme(overrides: Mapping[str, Any] | None = None) -> PathTheme:
    """Validate and merge theme overrides against the defaults."""

    raw: dict[str, Any] = {f.name: getattr(DEFAULT_THEME, f.name) for f in fields(PathTheme)}
    if overrides:
        for key, value in overrides.items():
            if key not in raw:
                raise ValueError(f"Unknown theme key: {key}")
            raw[key] = value

    for key in _COLOR_KEYS:
        if not isinstance(raw[key], str) or not _HEX_COLOR.match(raw[key]):
            raise ValueError(f"Theme key `{key}` must be a hex color (#RRGGBB or #RRGGBBAA)")

    for key in ("stroke_width", "legend_label_size"):
        if not isinstance(raw[key], (int, float)) or float(raw[key]) <= 0:
            raise ValueError(f"Theme key `{key}` must be a positive number")

    dash = raw["line_dash_style"]
    if isinstance(dash, (str, bytes)):
        raise ValueError("Theme key `line_dash_style` must be a LineStyle or a sequence of numbers")
    if not isinstance(dash, LineStyle):
        dash = LineStyle(tuple(dash))

    if not isinstance(raw["font_face"], str) or not raw["font_face"].strip():
        raise ValueError("Theme key `font_face` must be a non-empty string")

    return PathTheme(
        stroke_width=float(raw["stroke_width"]),
        path_color=str(raw["path_color"]),
        line_dash_style=dash,
        legend_label_size=float(raw["legend_label_size"]),
        legend_label_color=str(raw["legend_label_color"]),
        font_face=str(raw["font_face"]),
    )


def parse_color(color: str | Sequence[int]) -> RGBA:
    """Normalize `#RRGGBB[AA]` strings and RGB/RGBA tuples into an RGBA tuple."""
    if isinstance(color, str):
        if not _HEX_COLOR.match(color):
            raise PathStyleError(f"invalid hex color: {color!r}")
        digits = color[1:]
        channels = [int(digits[i : i + 2], 16) for i in range(0, len(digits), 2)]
        if len(channels) == 3:
            channels.append(255)
        r, g, b, a = channels
        return (r, g, b, a)

    values = tuple(color)
    if len(values) not in (3, 4):
        raise PathStyleError(f"color must have 3 or 4 channels, got {len(values)}")
    for v in values:
        if not isinstance(v, int) or not 0 <= v <= 255:
            raise PathStyleError(f"color channels must be integers in [0, 255], got {values}")
    if len(values) == 3:
        r, g, b = values
        return (r, g, b, 255)
    r, g, b, a = values
    return (r, g, b, a)
