from __future__ import annotations

import math
import unittest

import numpy as np

from cellplot.bounds import EMPTY_BOUNDS, Bounds, widen
from cellplot.geometry import Rect
from cellplot.scales import CoordinateMapper, normalize
from cellplot.series import SeriesSet


class BoundsTests(unittest.TestCase):
    def test_empty_bounds_keep_sentinels(self) -> None:
        out = widen(EMPTY_BOUNDS, SeriesSet())
        self.assertEqual(out.vmin, math.inf)
        self.assertEqual(out.vmax, -math.inf)
        self.assertFalse(out.is_defined())

    def test_empty_series_is_a_noop(self) -> None:
        start = Bounds(vmin=1.0, vmax=2.0)
        self.assertEqual(widen(start, SeriesSet.from_values([[], []])), start)

    def test_widen_is_monotonic_across_datasets(self) -> None:
        datasets = [[[1.0, 5.0]], [[2.0, 3.0]], [[0.0, 10.0]], [[4.0]]]
        bounds = EMPTY_BOUNDS
        history = []
        for values in datasets:
            bounds = widen(bounds, SeriesSet.from_values(values))
            history.append((bounds.vmin, bounds.vmax))
        self.assertEqual(history, [(1.0, 5.0), (1.0, 5.0), (0.0, 10.0), (0.0, 10.0)])
        for (a_min, a_max), (b_min, b_max) in zip(history, history[1:]):
            self.assertLessEqual(b_min, a_min)
            self.assertGreaterEqual(b_max, a_max)

    def test_line_bounds_cover_all_series(self) -> None:
        bounds = widen(EMPTY_BOUNDS, SeriesSet.from_values([[1, 3, 2], [4, 4, 4]]))
        self.assertEqual((bounds.vmin, bounds.vmax), (1.0, 4.0))
        self.assertFalse(bounds.has_x)

    def test_scatter_bounds_split_x_and_y(self) -> None:
        bounds = widen(EMPTY_BOUNDS, SeriesSet.from_values([[0, 1, 2], [0, 5, 10]]), "scatter")
        self.assertEqual((bounds.xmin, bounds.xmax), (0.0, 2.0))
        self.assertEqual((bounds.vmin, bounds.vmax), (0.0, 10.0))
        self.assertTrue(bounds.is_defined("scatter"))

    def test_overflowing_span_is_undefined(self) -> None:
        bounds = widen(EMPTY_BOUNDS, SeriesSet.from_values([[-1e308, 1e308]]))
        self.assertTrue(math.isinf(bounds.value_span))
        self.assertFalse(bounds.has_values)
        self.assertFalse(Bounds(vmin=0.0, vmax=1.0, xmin=-1e308, xmax=1e308).is_defined("scatter"))

    def test_non_finite_samples_are_ignored(self) -> None:
        bounds = widen(EMPTY_BOUNDS, SeriesSet.from_values([[1.0, float("nan"), float("inf"), 3.0]]))
        self.assertEqual((bounds.vmin, bounds.vmax), (1.0, 3.0))


class CoordinateMapperTests(unittest.TestCase):
    def test_normalization_boundaries(self) -> None:
        for vmin, vmax, height in ((0.0, 10.0, 5), (-3.0, 7.5, 12), (2.0, 3.0, 2)):
            mapper = CoordinateMapper(Bounds(vmin=vmin, vmax=vmax), Rect.from_size(10, height))
            self.assertEqual(mapper.cell_height(vmin), 0)
            self.assertEqual(mapper.cell_height(vmax), height - 1)

    def test_sub_unit_range_divides_by_one(self) -> None:
        mapper = CoordinateMapper(Bounds(vmin=0.0, vmax=0.5), Rect.from_size(10, 5))
        self.assertEqual(mapper.cell_height(0.5), 2)
        flat = CoordinateMapper(Bounds(vmin=3.0, vmax=3.0), Rect.from_size(10, 5))
        self.assertEqual(flat.cell_height(3.0), 0)
        self.assertTrue(np.allclose(normalize(np.asarray([3.0]), 3.0, 3.0), [0.0]))

    def test_line_positions_use_scale_and_flip_rows(self) -> None:
        area = Rect(2, 1, 12, 6)
        mapper = CoordinateMapper(Bounds(vmin=1.0, vmax=4.0), area, horizontal_scale=2)
        pos = mapper.line_positions(np.asarray([1.0, 3.0, 2.0, 4.0]))
        self.assertEqual(pos.xs.tolist(), [2, 4, 6, 8])
        self.assertEqual(pos.ys.tolist(), [5, 3, 4, 1])
        self.assertTrue(bool(np.all(mapper.inside(pos))))

    def test_scatter_positions_use_horizontal_bounds(self) -> None:
        mapper = CoordinateMapper(Bounds(vmin=0.0, vmax=10.0, xmin=0.0, xmax=2.0), Rect.from_size(10, 5))
        pos = mapper.scatter_positions(np.asarray([0.0, 1.0, 2.0]), np.asarray([0.0, 5.0, 10.0]))
        self.assertEqual(pos.points(), [(0, 4), (4, 2), (9, 0)])

    def test_inside_drops_points_past_the_area(self) -> None:
        mapper = CoordinateMapper(Bounds(vmin=0.0, vmax=1.0), Rect.from_size(3, 2), horizontal_scale=3)
        pos = mapper.line_positions(np.asarray([0.0, 1.0, float("nan")]))
        self.assertEqual(mapper.inside(pos).tolist(), [True, False, False])

    def test_fine_positions_are_scaled_two_by_four(self) -> None:
        mapper = CoordinateMapper(Bounds(vmin=0.0, vmax=4.0), Rect.from_size(10, 5))
        fine = mapper.to_fine(mapper.line_positions(np.asarray([0.0, 4.0])))
        self.assertEqual(fine.points(), [(0, 16), (2, 0)])


if __name__ == "__main__":
    unittest.main()
