from __future__ import annotations

import math
import unittest

import numpy as np

from chartgeom import Bounds, ChartConfigError, PathBuildError, PathBuilder, dash_line, origin_point, polygon
from chartgeom.path import Close, LineTo, MoveTo


class OriginPointTests(unittest.TestCase):
    def test_translates_by_origin(self) -> None:
        self.assertEqual(origin_point(1.0, 2.0, (10.0, 20.0)), (11.0, 22.0))


class DashLineTests(unittest.TestCase):
    def test_dashes_follow_arc_length(self) -> None:
        path = dash_line((0.0, 0.0), (10.0, 0.0), [4.0, 2.0])
        assert path is not None
        self.assertEqual(path.subpath_count(), 2)
        self.assertTrue(np.allclose(path.anchors(), [(0.0, 0.0), (4.0, 0.0), (6.0, 0.0), (10.0, 0.0)]))
        self.assertTrue(path.is_stroke)
        self.assertEqual(path.style.width, 1.0)

    def test_drawn_length_matches_pattern(self) -> None:
        for length, expected in ((10.0, 8.0), (11.0, 8.0), (9.0, 7.0), (12.0, 8.0)):
            path = dash_line((0.0, 5.0), (length, 5.0), (4.0, 2.0))
            assert path is not None
            full = math.floor(length / 6.0)
            remainder = min(4.0, length - full * 6.0)
            self.assertAlmostEqual(path.length(), min(length, full * 4.0 + remainder), places=9)
            self.assertAlmostEqual(path.length(), expected, places=9)

    def test_diagonal_segment(self) -> None:
        path = dash_line((0.0, 0.0), (30.0, 40.0), (5.0, 5.0))
        assert path is not None
        self.assertEqual(path.subpath_count(), 5)
        self.assertAlmostEqual(path.length(), 25.0, places=9)

    def test_degenerate_inputs_produce_nothing(self) -> None:
        self.assertIsNone(dash_line((3.0, 3.0), (3.0, 3.0), (4.0, 2.0)))
        self.assertIsNone(dash_line((0.0, 0.0), (10.0, 0.0), (0.0, 3.0)))
        self.assertIsNone(dash_line((0.0, 0.0), (10.0, 0.0), (0.0, 0.0)))


class PolygonTests(unittest.TestCase):
    def test_open_polyline_is_translated(self) -> None:
        path = polygon([(0.0, 0.0), (10.0, 10.0), (20.0, 0.0)], Bounds(5.0, 5.0, 100.0, 100.0))
        assert path is not None
        self.assertEqual(path.anchors(), [(5.0, 5.0), (15.0, 15.0), (25.0, 5.0)])
        self.assertFalse(any(isinstance(cmd, Close) for cmd in path.commands))
        self.assertTrue(path.is_stroke)

    def test_empty_or_invalid_points(self) -> None:
        bounds = Bounds.from_size(10.0, 10.0)
        self.assertIsNone(polygon([], bounds))
        self.assertIsNone(polygon([(0.0, 0.0), (float("nan"), 1.0)], bounds))


class PathBuilderTests(unittest.TestCase):
    def test_build_records_commands(self) -> None:
        builder = PathBuilder.stroke(2.0)
        builder.move_to((0, 0))
        builder.line_to((10, 0))
        path = builder.build()
        self.assertEqual(path.commands, (MoveTo((0.0, 0.0)), LineTo((10.0, 0.0))))
        self.assertEqual(path.to_svg_d(), "M0,0 L10,0")

    def test_invalid_paths_raise(self) -> None:
        with self.assertRaises(PathBuildError):
            PathBuilder.fill().build()
        with self.assertRaises(PathBuildError):
            PathBuilder.fill().line_to((1.0, 1.0))
        builder = PathBuilder.fill()
        builder.move_to((0.0, 0.0))
        builder.line_to((float("inf"), 1.0))
        with self.assertRaises(PathBuildError):
            builder.build()

    def test_negative_stroke_width_rejected(self) -> None:
        with self.assertRaises(ChartConfigError):
            PathBuilder.stroke(-1.0)

    def test_arc_flattening_stays_on_circle(self) -> None:
        builder = PathBuilder.stroke(1.0)
        builder.move_to((0.0, 0.0))
        builder.arc_to((10.0, 10.0), 0.0, False, True, (20.0, 0.0))
        lines = builder.build().flatten(0.1)
        self.assertEqual(len(lines), 1)
        pts = lines[0].points
        radii = np.hypot(pts[:, 0] - 10.0, pts[:, 1])
        self.assertTrue(np.allclose(radii, 10.0, atol=1e-9))
        # Positive sweep on a y-down screen passes over the top.
        self.assertAlmostEqual(float(np.min(pts[:, 1])), -10.0, places=3)
        self.assertAlmostEqual(builder.build().length(), math.pi * 10.0, delta=0.2)

    def test_cubic_flattening_hits_end_points(self) -> None:
        builder = PathBuilder.stroke(1.0)
        builder.move_to((0.0, 0.0))
        builder.curve_to((10.0, 20.0), (30.0, 20.0), (40.0, 0.0))
        pts = builder.build().flatten()[0].points
        self.assertEqual(tuple(pts[0]), (0.0, 0.0))
        self.assertEqual(tuple(pts[-1]), (40.0, 0.0))
        self.assertGreater(float(np.max(pts[:, 1])), 10.0)


if __name__ == "__main__":
    unittest.main()
