import unittest

from pathplot.errors import PathStyleError
from pathplot.geometry import LineStyle
from pathplot.theme import DEFAULT_THEME, parse_color, validate_theme


class PathThemeTests(unittest.TestCase):
    def test_validate_theme_defaults(self) -> None:
        self.assertEqual(validate_theme(), DEFAULT_THEME)

    def test_validate_theme_accepts_partial_override(self) -> None:
        theme = validate_theme({"path_color": "#112233", "legend_label_size": 16})
        self.assertEqual(theme.path_color, "#112233")
        self.assertEqual(theme.legend_label_size, 16.0)
        self.assertEqual(theme.stroke_width, DEFAULT_THEME.stroke_width)

    def test_validate_theme_coerces_dash_sequence(self) -> None:
        theme = validate_theme({"line_dash_style": [3, 1]})
        self.assertEqual(theme.line_dash_style, LineStyle((3.0, 1.0)))

    def test_validate_theme_rejects_unknown_key(self) -> None:
        with self.assertRaisesRegex(ValueError, "Unknown theme key"):
            validate_theme({"unknown": "#112233"})

    def test_validate_theme_rejects_invalid_hex_color(self) -> None:
        with self.assertRaisesRegex(ValueError, "hex color"):
            validate_theme({"legend_label_color": "red"})

    def test_validate_theme_rejects_non_positive_stroke_width(self) -> None:
        with self.assertRaisesRegex(ValueError, "positive number"):
            validate_theme({"stroke_width": 0})

    def test_validate_theme_rejects_string_dash_style(self) -> None:
        with self.assertRaisesRegex(ValueError, "line_dash_style"):
            validate_theme({"line_dash_style": "22"})

    def test_validate_theme_rejects_negative_dash_entry(self) -> None:
        with self.assertRaises(PathStyleError):
            validate_theme({"line_dash_style": [2, -2]})

    def test_parse_color_handles_alpha(self) -> None:
        self.assertEqual(parse_color("#01020380"), (1, 2, 3, 128))
        self.assertEqual(parse_color((9, 8, 7, 6)), (9, 8, 7, 6))
        with self.assertRaises(PathStyleError):
            parse_color((1, 2))
        with self.assertRaises(PathStyleError):
            parse_color((1, 2, 300))


if __name__ == "__main__":
    unittest.main()
