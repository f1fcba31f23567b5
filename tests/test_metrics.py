# ==============================================================================
# Файл: tests/test_metrics.py
# Назначение: Метрики по наборам точек.
# ==============================================================================
import math
import unittest

import sys
from pathlib import Path

sys.path.append(str(Path(__file__).parent.parent))

from scatter_engine.core.types import Point
from scatter_engine.core.utils.metrics import (
    compute_metrics,
    count_violations,
    min_pair_distance,
    out_of_bounds,
    points_to_array,
)


class TestMetrics(unittest.TestCase):

    def test_min_pair_distance(self):
        self.assertAlmostEqual(min_pair_distance([(0, 0), (3, 4), (10, 10)]), 5.0)
        self.assertEqual(min_pair_distance([Point(1, 1)]), math.inf)
        self.assertEqual(min_pair_distance([]), math.inf)

    def test_count_violations_counts_pairs_once(self):
        pts = [(0, 0), (1, 0), (0, 1), (50, 50)]
        self.assertEqual(count_violations(pts, 2.0), 3)
        self.assertEqual(count_violations(pts, 1.0), 0)

    def test_out_of_bounds(self):
        pts = [(0, 0), (9.99, 9.99), (10, 5), (-0.1, 1)]
        self.assertEqual(out_of_bounds(pts, 10, 10), 2)
        self.assertEqual(out_of_bounds([], 10, 10), 0)

    def test_compute_metrics(self):
        pts = [Point(0, 0), Point(10, 0)]
        m = compute_metrics(pts, 20, 10, 10.0)
        self.assertEqual(m["count"], 2)
        self.assertAlmostEqual(m["min_distance"], 10.0)
        self.assertAlmostEqual(m["density"], 0.01)
        self.assertAlmostEqual(m["coverage_pct"], 2 * math.pi * 25 / 200)

        empty = compute_metrics([], 20, 10, 10.0)
        self.assertEqual(empty["count"], 0)

    def test_points_to_array_shape(self):
        self.assertEqual(points_to_array([]).shape, (0, 2))
        self.assertEqual(points_to_array([(1, 2), Point(3, 4)]).tolist(), [[1, 2], [3, 4]])


if __name__ == '__main__':
    unittest.main()
