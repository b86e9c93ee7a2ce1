from __future__ import annotations

import unittest
from unittest import mock

from pathplot import renderers
from pathplot.errors import PathStyleError
from pathplot.geometry import (
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
    is_empty,
)
from pathplot.legend import LegendContext
from pathplot.raster import new_canvas, rasterize
from pathplot.renderers import ClosedPathRenderer, DefaultPathRenderer, PlotContext
from pathplot.theme import DEFAULT_THEME, validate_theme


RED = (255, 0, 0, 255)


def as_points(xy: list[tuple[float, float]]) -> list[Point]:
    return [Point(float(x), float(y)) for x, y in xy]


class DefaultPathRendererTests(unittest.TestCase):
    def setUp(self) -> None:
        self.extent = Extent(100.0, 50.0)
        self.renderer = renderers.default(stroke_width=3.0, color=RED, line_style=LineStyle.DOTTED)

    def test_short_paths_render_empty(self) -> None:
        self.assertEqual(self.renderer.render(self.extent, []), EmptyDrawable())
        self.assertEqual(self.renderer.render(self.extent, [Point(1.0, 1.0)]), EmptyDrawable())

    def test_path_outside_renders_empty(self) -> None:
        path = as_points([(-10, -10), (-20, 60), (-1, 200)])
        self.assertEqual(self.renderer.render(self.extent, path), EmptyDrawable())

    def test_inside_path_is_stroked_colored_and_dashed(self) -> None:
        path = as_points([(1, 1), (50, 25), (99, 1)])
        drawable = self.renderer.render(self.extent, path)
        expected = Group((LineDash(StrokeStyle(Path(tuple(path), 3.0), RED), LineStyle.DOTTED),))
        self.assertEqual(drawable, expected)

    def test_each_visible_segment_is_styled_separately(self) -> None:
        path = as_points([(10, 10), (10, 80), (20, 10)])
        drawable = self.renderer.render(self.extent, path)
        assert isinstance(drawable, Group)
        self.assertEqual(len(drawable.items), 2)
        for item in drawable.items:
            self.assertIsInstance(item, LineDash)
            self.assertEqual(item.style, LineStyle.DOTTED)
            self.assertEqual(item.r.color, RED)
        first_path = drawable.items[0].r.r
        self.assertEqual(first_path.points[-1], Point(10.0, 50.0))

    def test_is_empty_sees_through_wrappers(self) -> None:
        self.assertTrue(is_empty(Group((LineDash(EmptyDrawable(), LineStyle.SOLID), Group(())))))
        self.assertFalse(is_empty(self.renderer.render(self.extent, as_points([(1, 1), (2, 2)]))))

    def test_defaults_come_from_theme(self) -> None:
        theme = validate_theme({"stroke_width": 5, "path_color": "#00ff00", "line_dash_style": LineStyle((4.0, 2.0))})
        renderer = renderers.default(theme=theme)
        self.assertEqual(renderer.stroke_width, 5.0)
        self.assertEqual(renderer.color, (0, 255, 0, 255))
        self.assertEqual(renderer.line_style, LineStyle((4.0, 2.0)))

    def test_builtin_theme_defaults(self) -> None:
        renderer = renderers.default()
        self.assertEqual(renderer.stroke_width, DEFAULT_THEME.stroke_width)
        self.assertEqual(renderer.color, (0x33, 0x33, 0x33, 255))
        self.assertEqual(renderer.line_style, LineStyle.SOLID)

    def test_color_accepts_hex_and_rgb(self) -> None:
        self.assertEqual(renderers.default(color="#102030").color, (16, 32, 48, 255))
        self.assertEqual(renderers.default(color=(1, 2, 3)).color, (1, 2, 3, 255))
        with self.assertRaises(PathStyleError):
            renderers.default(color="blue")

    def test_direct_construction_normalizes_color(self) -> None:
        renderer = DefaultPathRenderer(stroke_width=1.0, color="#ff0000")
        self.assertEqual(renderer.color, RED)
        canvas = rasterize(renderer.render(Extent(5.0, 5.0), as_points([(0, 2), (4, 2)])), new_canvas(5, 5))
        self.assertEqual(tuple(canvas[2, 0]), RED)
        with self.assertRaises(PathStyleError):
            DefaultPathRenderer(stroke_width=1.0, color=(1, 2))

    def test_non_positive_stroke_width_is_rejected(self) -> None:
        with self.assertRaises(PathStyleError):
            renderers.default(stroke_width=0.0)

    def test_unlabeled_renderer_has_no_legend(self) -> None:
        self.assertTrue(self.renderer.legend_context().is_empty)

    def test_labeled_renderer_builds_legend_sample(self) -> None:
        label = Text("series", 12.0, "Comic Mono")
        renderer = renderers.default(stroke_width=3.0, color=RED, label=label, line_style=LineStyle.DOTTED)
        ctx = renderer.legend_context()
        assert ctx.entry is not None
        self.assertEqual(ctx.entry.label, label)
        expected_sample = LineDash(
            StrokeStyle(Path((Point(0.0, 0.0), Point(9.0, 0.0)), 3.0), RED),
            LineStyle.DOTTED,
        )
        self.assertEqual(ctx.entry.sample, expected_sample)

    def test_legend_does_not_depend_on_rendered_path(self) -> None:
        renderer = renderers.named("a", RED)
        before = renderer.legend_context()
        renderer.render(self.extent, as_points([(0, 0), (300, 300)]))
        self.assertEqual(renderer.legend_context(), before)


class NamedPathRendererTests(unittest.TestCase):
    def test_named_builds_themed_text_label(self) -> None:
        theme = validate_theme({"legend_label_size": 9, "legend_label_color": "#abcdef", "font_face": "Menlo"})
        renderer = renderers.named("temperature", "#ff0000", theme=theme)
        ctx = renderer.legend_context()
        assert ctx.entry is not None
        self.assertEqual(ctx.entry.label, Style(Text("temperature", 9.0, "Menlo"), (0xAB, 0xCD, 0xEF, 255)))
        self.assertEqual(renderer.color, RED)


class ClosedPathRendererTests(unittest.TestCase):
    def setUp(self) -> None:
        self.extent = Extent(20.0, 20.0)

    def test_closed_matches_default_with_first_point_appended(self) -> None:
        p1, p2, p3 = Point(1.0, 1.0), Point(10.0, 2.0), Point(5.0, 15.0)
        closed = renderers.closed(color=RED)
        default = renderers.default(color=RED)
        self.assertEqual(closed.render(self.extent, [p1, p2, p3]), default.render(self.extent, [p1, p2, p3, p1]))

    def test_closed_empty_path_skips_delegate(self) -> None:
        delegate = mock.Mock()
        renderer = ClosedPathRenderer(delegate=delegate)
        self.assertEqual(renderer.render(self.extent, []), EmptyDrawable())
        delegate.render.assert_not_called()

    def test_closed_single_point_renders_empty(self) -> None:
        renderer = renderers.closed()
        self.assertEqual(renderer.render(self.extent, [Point(1.0, 1.0)]), EmptyDrawable())

    def test_closed_has_no_legend_entry_even_with_label(self) -> None:
        label = Text("loop", 10.0, "Comic Mono")
        self.assertTrue(renderers.closed(label=label).legend_context().is_empty)
        self.assertFalse(renderers.default(label=label).legend_context().is_empty)


class CustomAndEmptyRendererTests(unittest.TestCase):
    def test_custom_delegates_with_plot_context(self) -> None:
        marker = Text("custom", 10.0, "Comic Mono")
        path_fn = mock.Mock(return_value=marker)
        renderer = renderers.custom(path_fn)
        extent = Extent(5.0, 5.0)
        path = as_points([(-100, -100), (100, 100)])
        plot = object()

        self.assertIs(renderer.render(extent, path, plot), marker)
        path_fn.assert_called_once_with(PlotContext(extent=extent, plot=plot), path)
        self.assertTrue(renderer.legend_context().is_empty)

    def test_custom_returns_supplied_legend_context(self) -> None:
        ctx = LegendContext.single(EmptyDrawable(), Text("x", 10.0, "Comic Mono"))
        renderer = renderers.custom(lambda _ctx, _path: EmptyDrawable(), ctx)
        self.assertEqual(renderer.legend_context(), ctx)

    def test_empty_renderer_never_draws(self) -> None:
        renderer = renderers.empty()
        extent = Extent(10.0, 10.0)
        for path in ([], as_points([(1, 1), (2, 2)]), as_points([(-5, 5), (50, 5)])):
            self.assertEqual(renderer.render(extent, path), EmptyDrawable())
        self.assertTrue(renderer.legend_context().is_empty)


if __name__ == "__main__":
    unittest.main()
