from __future__ import annotations

import unittest

from chartgeom import (
    Area,
    Bar,
    Bounds,
    ChartConfigError,
    Line,
    PointMarker,
    RecordingSurface,
    ScaleBand,
    ScaleLinear,
    ScalePoint,
    StrokeStyle,
)
from chartgeom.paint import PaintPath, PaintQuadCommand
from chartgeom.path import Close, CubicTo, LineTo, MoveTo


BOUNDS = Bounds.from_size(100.0, 100.0)


def _line(data, **kwargs) -> Line:
    return Line(data=data, x=lambda v: v * 10.0, y=lambda v: v * 20.0, **kwargs)


class LineTests(unittest.TestCase):
    def test_path_and_optional_markers(self) -> None:
        path, markers = _line([1.0, 2.0, 3.0]).path(BOUNDS)
        self.assertIsNotNone(path)
        self.assertEqual(markers, [])

        _, markers = _line([1.0, 2.0, 3.0], point=PointMarker()).path(BOUNDS)
        self.assertEqual(len(markers), 3)

    def test_natural_curve_passes_through_every_point(self) -> None:
        path, _ = _line([1.0, 2.0, 3.0]).path(BOUNDS)
        assert path is not None
        self.assertIsInstance(path.commands[0], MoveTo)
        self.assertTrue(all(isinstance(cmd, CubicTo) for cmd in path.commands[1:]))
        self.assertEqual(path.anchors(), [(10.0, 20.0), (20.0, 40.0), (30.0, 60.0)])

        first = path.commands[1]
        assert isinstance(first, CubicTo)
        self.assertAlmostEqual(first.ctrl1[0], 10.0 + 10.0 / 6.0, places=9)
        self.assertAlmostEqual(first.ctrl1[1], 20.0 + 20.0 / 6.0, places=9)
        self.assertAlmostEqual(first.ctrl2[0], 20.0 - 20.0 / 6.0, places=9)
        self.assertAlmostEqual(first.ctrl2[1], 40.0 - 40.0 / 6.0, places=9)

    def test_linear_uses_straight_segments(self) -> None:
        path, _ = _line([1.0, 2.0, 3.0], stroke_style=StrokeStyle.LINEAR).path(BOUNDS)
        assert path is not None
        self.assertEqual(
            path.commands,
            (MoveTo((10.0, 20.0)), LineTo((20.0, 40.0)), LineTo((30.0, 60.0))),
        )

    def test_missing_values_are_skipped_not_interpolated(self) -> None:
        data = [(0.0, 1.0), (1.0, None), (2.0, 3.0), (None, 4.0), (4.0, float("nan"))]
        line = Line(
            data=data,
            x=lambda d: d[0],
            y=lambda d: d[1],
            stroke_style=StrokeStyle.LINEAR,
            point=PointMarker(size=2.0),
        )
        path, markers = line.path(BOUNDS)
        assert path is not None
        self.assertEqual(path.anchors(), [(0.0, 1.0), (2.0, 3.0)])
        self.assertEqual(len(markers), 2)

    def test_single_point_is_a_lone_move(self) -> None:
        path, markers = _line([1.0], point=PointMarker()).path(BOUNDS)
        assert path is not None
        self.assertEqual(path.commands, (MoveTo((10.0, 20.0)),))
        self.assertEqual(len(markers), 1)

    def test_empty_series_paints_nothing(self) -> None:
        self.assertEqual(_line([]).path(BOUNDS), (None, []))
        skipped = Line(data=[1, 2], x=lambda _: None, y=lambda v: v)
        surface = RecordingSurface()
        skipped.paint(BOUNDS, surface)
        self.assertEqual(surface.commands, [])

    def test_points_are_offset_by_bounds_origin(self) -> None:
        path, _ = _line([1.0, 2.0]).path(Bounds(5.0, 7.0, 100.0, 100.0))
        assert path is not None
        self.assertEqual(path.anchors()[0], (15.0, 27.0))

    def test_marker_quad_is_centered_circle(self) -> None:
        marker = PointMarker(size=8.0, fill_color=(255, 0, 0, 255))
        _, markers = _line([1.0], point=marker).path(BOUNDS)
        quad = markers[0]
        self.assertEqual(quad.bounds, Bounds(6.0, 16.0, 8.0, 8.0))
        self.assertEqual(quad.corner_radius, 4.0)
        self.assertEqual(quad.border_color, (255, 0, 0, 255))

        outlined = PointMarker(size=8.0, fill_color=(255, 0, 0, 255), stroke_color=(0, 0, 255, 255))
        self.assertEqual(outlined.quad((0.0, 0.0)).border_color, (0, 0, 255, 255))

    def test_paint_order_is_stroke_then_markers(self) -> None:
        surface = RecordingSurface()
        _line([1.0, 2.0], stroke=(1, 2, 3, 255), point=PointMarker()).paint(BOUNDS, surface)
        self.assertIsInstance(surface.commands[0], PaintPath)
        self.assertEqual(surface.commands[0].fill, (1, 2, 3, 255))
        self.assertTrue(all(isinstance(cmd, PaintQuadCommand) for cmd in surface.commands[1:]))
        self.assertEqual(len(surface.commands), 3)

    def test_invalid_configuration_rejected(self) -> None:
        with self.assertRaises(ChartConfigError):
            _line([1.0], stroke_width=-1.0)
        with self.assertRaises(ChartConfigError):
            PointMarker(size=-2.0)

    def test_scales_drive_accessors(self) -> None:
        months = ["Jan", "Feb", "Mar"]
        x = ScalePoint(months, [0.0, 100.0])
        y = ScaleLinear([0.0, 10.0], [100.0, 0.0])
        data = [("Jan", 0.0), ("Feb", 5.0), ("Dec", 3.0), ("Mar", 10.0)]
        line = Line(
            data=data,
            x=lambda d: x.tick(d[0]),
            y=lambda d: y.tick(d[1]),
            stroke_style=StrokeStyle.LINEAR,
        )
        path, _ = line.path(BOUNDS)
        assert path is not None
        self.assertEqual(path.anchors(), [(0.0, 100.0), (50.0, 50.0), (100.0, 0.0)])


class AreaTests(unittest.TestCase):
    def _area(self, **kwargs) -> Area:
        data = [(0.0, 10.0), (50.0, 20.0), (100.0, 30.0)]
        return Area(data=data, x=lambda d: d[0], y1=lambda d: d[1], **kwargs)

    def test_fill_contour_closes_along_baseline(self) -> None:
        fill, stroke = self._area(y0=100.0, stroke_style=StrokeStyle.LINEAR).paths(BOUNDS)
        assert fill is not None
        self.assertIsNone(stroke)
        self.assertFalse(fill.is_stroke)
        self.assertEqual(
            fill.commands,
            (
                MoveTo((0.0, 10.0)),
                LineTo((50.0, 20.0)),
                LineTo((100.0, 30.0)),
                LineTo((100.0, 100.0)),
                LineTo((50.0, 100.0)),
                LineTo((0.0, 100.0)),
                Close(),
            ),
        )

    def test_stroke_follows_top_edge_after_fill(self) -> None:
        surface = RecordingSurface()
        self._area(y0=100.0, stroke=(0, 0, 255, 255), fill=(0, 0, 255, 80)).paint(BOUNDS, surface)
        self.assertEqual(len(surface.paths), 2)
        fill_cmd, stroke_cmd = surface.paths
        self.assertEqual(fill_cmd.fill, (0, 0, 255, 80))
        self.assertTrue(stroke_cmd.path.is_stroke)
        self.assertEqual(stroke_cmd.path.anchors(), [(0.0, 10.0), (50.0, 20.0), (100.0, 30.0)])

    def test_natural_fill_passes_through_top_points(self) -> None:
        fill, _ = self._area(y0=100.0).paths(BOUNDS)
        assert fill is not None
        anchors = fill.anchors()
        for point in [(0.0, 10.0), (50.0, 20.0), (100.0, 30.0)]:
            self.assertIn(point, anchors)

    def test_baseline_accessor(self) -> None:
        area = self._area(y0=lambda d: d[1] + 5.0, stroke_style=StrokeStyle.LINEAR)
        fill, _ = area.paths(BOUNDS)
        assert fill is not None
        self.assertIn((100.0, 35.0), fill.anchors())
        self.assertIn((0.0, 15.0), fill.anchors())

    def test_invalid_constant_baseline_rejected(self) -> None:
        for y0 in (float("nan"), "bottom", object()):
            with self.subTest(y0=y0):
                with self.assertRaises(ChartConfigError):
                    self._area(y0=y0)

    def test_empty_area(self) -> None:
        area = Area(data=[], x=lambda d: d, y1=lambda d: d)
        self.assertEqual(area.paths(BOUNDS), (None, None))


class BarTests(unittest.TestCase):
    def test_bars_follow_band_scale(self) -> None:
        months = ["January", "February", "March", "April", "May", "June"]
        values = [186.0, 305.0, 237.0, 73.0, 209.0, 214.0]
        x = ScaleBand(months, [0.0, 600.0], padding_inner=0.4, padding_outer=0.2)
        y = ScaleLinear([0.0, 305.0], [300.0, 0.0])
        bar = Bar(
            data=list(zip(months, values)),
            x=lambda d: x.tick(d[0]),
            y1=lambda d: y.tick(d[1]),
            y0=300.0,
            band_width=x.band_width,
            fill=(37, 99, 235, 255),
        )
        quads = bar.quads(Bounds.from_size(600.0, 300.0))
        self.assertEqual(len(quads), 6)
        self.assertAlmostEqual(quads[0].bounds.x, 20.0, places=9)
        self.assertAlmostEqual(quads[0].bounds.width, 60.0, places=9)
        self.assertAlmostEqual(quads[1].bounds.y, 0.0, places=9)
        self.assertAlmostEqual(quads[1].bounds.height, 300.0, places=9)
        self.assertAlmostEqual(quads[0].bounds.y + quads[0].bounds.height, 300.0, places=9)

    def test_inverted_bars_and_skips(self) -> None:
        data = [(0.0, 80.0), (None, 10.0), (20.0, 30.0)]
        bar = Bar(
            data=data,
            x=lambda d: d[0],
            y1=lambda d: d[1],
            y0=50.0,
            band_width=10.0,
            fill=lambda d: (int(d[0]), 0, 0, 255),
        )
        surface = RecordingSurface()
        bar.paint(BOUNDS, surface)
        quads = surface.quads
        self.assertEqual(len(quads), 2)
        self.assertEqual(quads[0].bounds, Bounds(0.0, 50.0, 10.0, 30.0))
        self.assertEqual(quads[1].bounds, Bounds(20.0, 30.0, 10.0, 20.0))
        self.assertEqual(quads[1].background, (20, 0, 0, 255))

    def test_negative_band_width_rejected(self) -> None:
        with self.assertRaises(ChartConfigError):
            Bar(data=[], x=lambda d: d, y1=lambda d: d, band_width=-1.0)

    def test_invalid_constant_baseline_rejected(self) -> None:
        for y0 in (float("nan"), float("inf"), "bottom", None):
            with self.subTest(y0=y0):
                with self.assertRaises(ChartConfigError):
                    Bar(data=[1.0, 2.0], x=lambda d: d, y1=lambda d: d, band_width=5.0, y0=y0)  # type: ignore[arg-type]

    def test_numeric_string_baseline_is_coerced(self) -> None:
        bar = Bar(data=[10.0], x=lambda d: d, y1=lambda d: d, band_width=5.0, y0="40")  # type: ignore[arg-type]
        self.assertEqual(bar.y0, 40.0)
        self.assertEqual(bar.quads(BOUNDS)[0].bounds, Bounds(10.0, 10.0, 5.0, 30.0))


if __name__ == "__main__":
    unittest.main()
