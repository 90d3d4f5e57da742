from __future__ import annotations

import argparse
from dataclasses import dataclass
import logging
from pathlib import Path

from chartgeom import (
    Arc,
    Area,
    Bar,
    Bounds,
    Grid,
    Line,
    Pie,
    Plot,
    PointMarker,
    ScaleBand,
    ScaleLinear,
    ScalePoint,
    StrokeStyle,
    Surface,
    linear_gradient,
    parse_color,
    render_svg,
)
from chartgeom.color import WHITE, with_alpha
from chartgeom.theme import ChartTokens, validate_chart_tokens


LOGGER = logging.getLogger("chart_gallery")


@dataclass(frozen=True)
class DataItem:
    month: str
    desktop: float
    color: int


CHART_DATA = (
    DataItem("January", 186.0, 0x2A9D90),
    DataItem("February", 305.0, 0xE76E50),
    DataItem("March", 237.0, 0x274754),
    DataItem("April", 73.0, 0xE8C468),
    DataItem("May", 209.0, 0xF4A462),
    DataItem("June", 214.0, 0x2563EB),
)


def _y_scale(height: float) -> ScaleLinear:
    y_max = max(item.desktop for item in CHART_DATA)
    return ScaleLinear([0.0, y_max], [height, 0.0])


def _grid(tokens: ChartTokens, bounds: Bounds, surface: Surface) -> None:
    Grid.solid(tokens.grid_color, y=[bounds.height * i / 4.0 for i in range(4)]).paint(bounds, surface)


@dataclass(frozen=True)
class AreaChart:
    tokens: ChartTokens
    stroke_style: StrokeStyle = StrokeStyle.NATURAL
    gradient: bool = False

    def paint(self, bounds: Bounds, surface: Surface) -> None:
        x = ScalePoint([item.month for item in CHART_DATA], [0.0, bounds.width])
        y = _y_scale(bounds.height)
        if self.gradient:
            fill = linear_gradient(0.0, (self.tokens.area_fill, 1.0), (with_alpha(WHITE, 0.3), 0.0))
        else:
            fill = self.tokens.color("area_fill")
        _grid(self.tokens, bounds, surface)
        Area(
            data=CHART_DATA,
            x=lambda d: x.tick(d.month),
            y1=lambda d: y.tick(d.desktop),
            y0=bounds.height,
            fill=fill,
            stroke=self.tokens.color("line_color"),
            stroke_style=self.stroke_style,
        ).paint(bounds, surface)


@dataclass(frozen=True)
class LineChart:
    tokens: ChartTokens
    stroke_style: StrokeStyle = StrokeStyle.NATURAL
    point: bool = False

    def paint(self, bounds: Bounds, surface: Surface) -> None:
        x = ScalePoint([item.month for item in CHART_DATA], [0.0, bounds.width])
        y = _y_scale(bounds.height)
        marker = None
        if self.point:
            marker = PointMarker(size=self.tokens.marker_size, fill_color=self.tokens.color("marker_fill"))
        _grid(self.tokens, bounds, surface)
        Line(
            data=CHART_DATA,
            x=lambda d: x.tick(d.month),
            y=lambda d: y.tick(d.desktop),
            stroke=self.tokens.color("line_color"),
            stroke_width=self.tokens.stroke_width,
            stroke_style=self.stroke_style,
            point=marker,
        ).paint(bounds, surface)


@dataclass(frozen=True)
class BarChart:
    tokens: ChartTokens

    def paint(self, bounds: Bounds, surface: Surface) -> None:
        x = ScaleBand(
            [item.month for item in CHART_DATA],
            [0.0, bounds.width],
            padding_inner=0.4,
            padding_outer=0.2,
        )
        y = _y_scale(bounds.height)
        _grid(self.tokens, bounds, surface)
        Bar(
            data=CHART_DATA,
            x=lambda d: x.tick(d.month),
            y1=lambda d: y.tick(d.desktop),
            y0=bounds.height,
            band_width=x.band_width,
            fill=self.tokens.color("bar_fill"),
        ).paint(bounds, surface)


@dataclass(frozen=True)
class PieChart:
    donut: bool = False
    pad_angle: bool = False

    def paint(self, bounds: Bounds, surface: Surface) -> None:
        radius = bounds.height * 0.4
        arc = Arc(inner_radius=radius * 0.8 if self.donut else 0.0, outer_radius=radius)
        pie = Pie(value=lambda d: d.desktop, pad_angle=4.0 / radius if self.pad_angle else 0.0)
        for sector in pie.arcs(CHART_DATA):
            arc.paint(sector, parse_color(sector.data.color), bounds, surface)


def gallery(tokens: ChartTokens) -> dict[str, Plot]:
    return {
        "area": AreaChart(tokens),
        "area-linear": AreaChart(tokens, stroke_style=StrokeStyle.LINEAR),
        "area-gradient": AreaChart(tokens, gradient=True),
        "line": LineChart(tokens),
        "line-linear": LineChart(tokens, stroke_style=StrokeStyle.LINEAR),
        "line-dots": LineChart(tokens, point=True),
        "bar": BarChart(tokens),
        "pie": PieChart(),
        "donut": PieChart(donut=True),
        "donut-pad": PieChart(donut=True, pad_angle=True),
    }


def main() -> None:
    parser = argparse.ArgumentParser(prog="chart-gallery")
    parser.add_argument("out_dir", type=Path, help="directory receiving one SVG per chart")
    parser.add_argument("--width", type=int, default=480)
    parser.add_argument("--height", type=int, default=320)
    parser.add_argument("--line-color", default=None, help="override line color token (#RRGGBB)")
    parser.add_argument("-v", "--verbose", action="store_true")
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)
    overrides = {"line_color": args.line_color} if args.line_color else None
    tokens = validate_chart_tokens(overrides)

    args.out_dir.mkdir(parents=True, exist_ok=True)
    for name, chart in gallery(tokens).items():
        path = args.out_dir / f"{name}.svg"
        path.write_text(render_svg(chart, args.width, args.height, background=(255, 255, 255, 255)), encoding="utf-8")
        LOGGER.info("wrote %s", path)


if __name__ == "__main__":
    main()
