from .canvas import draw_pixel, new_canvas
from .draw_lines import draw_polyline, pen_down
from .draw_text import draw_text, text_size
from .rasterize import rasterize, render_legend_swatch

__all__ = [
    "draw_pixel",
    "draw_polyline",
    "draw_text",
    "new_canvas",
    "pen_down",
    "rasterize",
    "render_legend_swatch",
    "text_size",
]
