from __future__ import annotations

from dataclasses import dataclass, field
import logging
import math
from typing import Generic, Sequence, TypeVar

from chartgeom.color import RGBA, TRANSPARENT, Fill
from chartgeom.errors import ChartConfigError, PathBuildError
from chartgeom.geometry import origin_point
from chartgeom.paint import Bounds, PaintQuad, Surface
from chartgeom.path import Path, PathBuilder, Point
from chartgeom.shape.curve import Accessor, StrokeStyle, connect, read
from chartgeom.theme import DEFAULT_TOKENS


LOGGER = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class PointMarker:
    size: float = 4.0
    fill_color: RGBA = TRANSPARENT
    stroke_color: RGBA | None = None

    def __post_init__(self) -> None:
        if not math.isfinite(self.size) or self.size < 0:
            raise ChartConfigError("marker size must be a finite number >= 0")

    def quad(self, center: Point) -> PaintQuad:
        radius = self.size / 2.0
        return PaintQuad(
            bounds=Bounds(center[0] - radius, center[1] - radius, self.size, self.size),
            corner_radius=radius,
            background=self.fill_color,
            border_width=1.0,
            border_color=self.stroke_color if self.stroke_color is not None else self.fill_color,
        )


@dataclass(frozen=True)
class Line(Generic[T]):
    """A series drawn as one stroked path, with optional circular markers.

    Elements for which `x` or `y` returns None are left out entirely.
    """

    data: Sequence[T]
    x: Accessor[T]
    y: Accessor[T]
    stroke: Fill = field(default_factory=lambda: DEFAULT_TOKENS.color("line_color"))
    stroke_width: float = 1.0
    stroke_style: StrokeStyle = StrokeStyle.NATURAL
    point: PointMarker | None = None

    def __post_init__(self) -> None:
        if not math.isfinite(self.stroke_width) or self.stroke_width < 0:
            raise ChartConfigError("stroke_width must be a finite number >= 0")
        object.__setattr__(self, "data", tuple(self.data))

    def points(self, bounds: Bounds) -> list[Point]:
        out: list[Point] = []
        for item in self.data:
            x = read(self.x, item)
            y = read(self.y, item)
            if x is None or y is None:
                continue
            out.append(origin_point(x, y, bounds.origin))
        return out

    def path(self, bounds: Bounds) -> tuple[Path | None, list[PaintQuad]]:
        points = self.points(bounds)
        markers = [self.point.quad(p) for p in points] if self.point is not None else []
        if not points:
            return None, markers

        builder = PathBuilder.stroke(self.stroke_width)
        builder.move_to(points[0])
        connect(builder, points, self.stroke_style)
        try:
            return builder.build(), markers
        except PathBuildError as exc:
            LOGGER.debug("line path dropped: %s", exc)
            return None, markers

    def paint(self, bounds: Bounds, surface: Surface) -> None:
        path, markers = self.path(bounds)
        if path is not None:
            surface.paint_path(path, self.stroke)
        for quad in markers:
            surface.paint_quad(quad)
