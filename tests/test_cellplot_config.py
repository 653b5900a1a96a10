from __future__ import annotations

from decimal import Decimal
import unittest

import numpy as np

from cellplot import PlotConfig, PlotConfigError, PlotDataError, SeriesSet, plot_config_from_options
from cellplot.adapters import normalize_series
from cellplot.theme import PlotTheme


class PlotConfigTests(unittest.TestCase):
    def test_defaults_follow_theme(self) -> None:
        config = PlotConfig.from_theme(PlotTheme(lines=(5, 6), axes=8))
        self.assertEqual(config.line_colors, (5, 6))
        self.assertEqual(config.axes_color, 8)
        self.assertEqual(config.chart_kind, "line")
        self.assertEqual(config.marker_resolution, "fine")

    def test_rejects_non_positive_or_bool_scale(self) -> None:
        for scale in (0, -1, True, 1.5):
            with self.assertRaises(PlotConfigError):
                PlotConfig(horizontal_scale=scale)

    def test_rejects_unknown_kind_and_resolution(self) -> None:
        with self.assertRaisesRegex(PlotConfigError, "chart kind"):
            PlotConfig(chart_kind="bars")
        with self.assertRaisesRegex(PlotConfigError, "marker resolution"):
            PlotConfig(marker_resolution="pixel")

    def test_rejects_bad_colors_and_marker(self) -> None:
        with self.assertRaises(PlotConfigError):
            PlotConfig(line_colors=())
        with self.assertRaises(PlotConfigError):
            PlotConfig(axes_color=512)
        with self.assertRaises(PlotConfigError):
            PlotConfig(dot_marker="**")

    def test_options_accept_marker_aliases(self) -> None:
        self.assertEqual(plot_config_from_options({"marker_resolution": "braille"}).marker_resolution, "fine")
        self.assertEqual(plot_config_from_options({"marker_resolution": "dot"}).marker_resolution, "coarse")

    def test_options_reject_unknown_names(self) -> None:
        with self.assertRaisesRegex(PlotConfigError, "unknown plot option"):
            plot_config_from_options({"smoothing": True})
        with self.assertRaises(PlotConfigError):
            plot_config_from_options({"line_colors": 3})


class SeriesInputTests(unittest.TestCase):
    def test_normalize_decimal_and_none(self) -> None:
        out = normalize_series([Decimal("1.5"), None, 3])
        self.assertEqual(out.dtype, np.float64)
        self.assertEqual(out[0], 1.5)
        self.assertTrue(np.isnan(out[1]))

    def test_normalize_rejects_strings_and_nested_values(self) -> None:
        with self.assertRaises(PlotDataError):
            normalize_series("123")
        with self.assertRaises(PlotDataError):
            normalize_series(["1", 2])
        with self.assertRaises(PlotDataError):
            normalize_series(np.zeros((2, 2)))

    def test_series_set_from_2d_array_and_names(self) -> None:
        data = SeriesSet.from_values(np.arange(6).reshape(2, 3), names=["a", "b"])
        self.assertEqual(data.names, ("a", "b"))
        self.assertEqual(data[1].tolist(), [3.0, 4.0, 5.0])

    def test_series_set_rejects_bad_names(self) -> None:
        with self.assertRaises(PlotDataError):
            SeriesSet.from_values([[1], [2]], names=["a"])
        with self.assertRaises(PlotDataError):
            SeriesSet.from_values([[1], [2]], names=["a", "a"])

    def test_empty_series_are_legal(self) -> None:
        data = SeriesSet.from_values([[], []])
        self.assertTrue(data.is_empty)
        self.assertEqual(data.finite_values().size, 0)


if __name__ == "__main__":
    unittest.main()
