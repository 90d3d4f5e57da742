from __future__ import annotations

from dataclasses import dataclass, field
import logging
import math
from typing import Generic, Sequence, TypeVar, Union

from chartgeom.color import Fill
from chartgeom.errors import ChartConfigError, PathBuildError
from chartgeom.geometry import finite_float, origin_point
from chartgeom.paint import Bounds, Surface
from chartgeom.path import Path, PathBuilder, Point
from chartgeom.shape.curve import Accessor, StrokeStyle, connect, read
from chartgeom.theme import DEFAULT_TOKENS


LOGGER = logging.getLogger(__name__)

T = TypeVar("T")

Baseline = Union[float, Accessor[T]]


@dataclass(frozen=True)
class Area(Generic[T]):
    """Filled region between a top edge `y1` and a baseline `y0`."""

    data: Sequence[T]
    x: Accessor[T]
    y1: Accessor[T]
    y0: Baseline = 0.0
    fill: Fill = field(default_factory=lambda: DEFAULT_TOKENS.color("area_fill"))
    stroke: Fill | None = None
    stroke_width: float = 1.0
    stroke_style: StrokeStyle = StrokeStyle.NATURAL

    def __post_init__(self) -> None:
        if not math.isfinite(self.stroke_width) or self.stroke_width < 0:
            raise ChartConfigError("stroke_width must be a finite number >= 0")
        if not callable(self.y0):
            object.__setattr__(self, "y0", finite_float(self.y0, "baseline y0"))
        object.__setattr__(self, "data", tuple(self.data))

    def edges(self, bounds: Bounds) -> tuple[list[Point], list[Point]]:
        top: list[Point] = []
        base: list[Point] = []
        for item in self.data:
            x = read(self.x, item)
            y1 = read(self.y1, item)
            y0 = read(self.y0, item) if callable(self.y0) else float(self.y0)
            if x is None or y1 is None or y0 is None:
                continue
            top.append(origin_point(x, y1, bounds.origin))
            base.append(origin_point(x, y0, bounds.origin))
        return top, base

    def paths(self, bounds: Bounds) -> tuple[Path | None, Path | None]:
        """Return the (fill, stroke) paths; either may be None."""
        top, base = self.edges(bounds)
        if not top:
            return None, None

        fill_builder = PathBuilder.fill()
        fill_builder.move_to(top[0])
        connect(fill_builder, top, self.stroke_style)
        reversed_base = base[::-1]
        fill_builder.line_to(reversed_base[0])
        connect(fill_builder, reversed_base, self.stroke_style)
        fill_builder.close()

        stroke_path = None
        if self.stroke is not None:
            stroke_builder = PathBuilder.stroke(self.stroke_width)
            stroke_builder.move_to(top[0])
            connect(stroke_builder, top, self.stroke_style)
            stroke_path = _build(stroke_builder, "area stroke")
        return _build(fill_builder, "area fill"), stroke_path

    def paint(self, bounds: Bounds, surface: Surface) -> None:
        fill_path, stroke_path = self.paths(bounds)
        if fill_path is not None:
            surface.paint_path(fill_path, self.fill)
        if stroke_path is not None and self.stroke is not None:
            surface.paint_path(stroke_path, self.stroke)


def _build(builder: PathBuilder, what: str) -> Path | None:
    try:
        return builder.build()
    except PathBuildError as exc:
        LOGGER.debug("%s path dropped: %s", what, exc)
        return None
