from __future__ import annotations


class PathPlotError(ValueError):
    """Base error for invalid path rendering configuration."""


class PathStyleError(PathPlotError):
    """Raised for invalid dash patterns, stroke widths or colors."""


class PathGeometryError(PathPlotError):
    """Raised for invalid extents."""
