from __future__ import annotations

import importlib.util
from pathlib import Path
import sys
import unittest
import xml.etree.ElementTree as ET

import numpy as np

from chartgeom import render_rgba, render_svg, validate_chart_tokens

MODULE_PATH = Path(__file__).resolve().parents[1] / "examples" / "chart_gallery.py"
SPEC = importlib.util.spec_from_file_location("chart_gallery_example", MODULE_PATH)
if SPEC is None or SPEC.loader is None:
    raise RuntimeError(f"failed to load module spec for {MODULE_PATH}")
MODULE = importlib.util.module_from_spec(SPEC)
sys.modules[SPEC.name] = MODULE
SPEC.loader.exec_module(MODULE)


class ChartGalleryExampleTests(unittest.TestCase):
    def test_every_chart_renders_to_svg_and_pixels(self) -> None:
        charts = MODULE.gallery(validate_chart_tokens())
        self.assertIn("donut-pad", charts)
        for name, chart in charts.items():
            with self.subTest(chart=name):
                root = ET.fromstring(render_svg(chart, 240, 160))
                self.assertGreater(len(list(root)), 1)
                canvas = render_rgba(chart, 240, 160)
                self.assertEqual(canvas.shape, (160, 240, 4))
                self.assertTrue(np.any(canvas[:, :, 3] > 0))

    def test_area_gradient_fades_to_translucent_white(self) -> None:
        chart = MODULE.AreaChart(validate_chart_tokens(), gradient=True)
        root = ET.fromstring(render_svg(chart, 240, 160))
        stops = [elem for elem in root.iter() if elem.tag.endswith("stop")]
        self.assertEqual(len(stops), 2)
        self.assertEqual(stops[0].get("offset"), "0")
        self.assertEqual(stops[0].get("stop-color"), "#ffffff")
        self.assertEqual(stops[0].get("stop-opacity"), "0.298")

    def test_bar_chart_draws_one_rect_per_month(self) -> None:
        chart = MODULE.BarChart(validate_chart_tokens())
        root = ET.fromstring(render_svg(chart, 600, 300))
        rects = [child for child in root if child.tag.endswith("rect")]
        self.assertEqual(len(rects), len(MODULE.CHART_DATA))

    def test_pie_chart_draws_one_sector_per_month(self) -> None:
        root = ET.fromstring(render_svg(MODULE.PieChart(donut=True, pad_angle=True), 300, 300))
        paths = [child for child in root if child.tag.endswith("path")]
        self.assertEqual(len(paths), len(MODULE.CHART_DATA))


if __name__ == "__main__":
    unittest.main()
