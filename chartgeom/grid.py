from __future__ import annotations

from dataclasses import dataclass, field
import logging
from typing import Sequence, Union

from chartgeom.color import RGBA, parse_color
from chartgeom.errors import ChartConfigError, PathBuildError
from chartgeom.geometry import dash_line, finite_float, origin_point
from chartgeom.paint import Bounds, Surface
from chartgeom.path import PathBuilder, Point
from chartgeom.theme import DEFAULT_TOKENS


LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class SolidStroke:
    color: RGBA


@dataclass(frozen=True)
class DashedStroke:
    color: RGBA
    dash_array: tuple[float, float] = DEFAULT_TOKENS.dash_array

    def __post_init__(self) -> None:
        if len(self.dash_array) != 2:
            raise ChartConfigError("dash_array must hold [dash_length, gap_length]")
        dash, gap = (finite_float(v, "dash_array entry") for v in self.dash_array)
        if dash < 0 or gap < 0:
            raise ChartConfigError("dash and gap lengths must be >= 0")
        object.__setattr__(self, "dash_array", (dash, gap))


GridStroke = Union[SolidStroke, DashedStroke]


def _default_stroke() -> GridStroke:
    return SolidStroke(DEFAULT_TOKENS.color("grid_color"))


@dataclass(frozen=True)
class Grid:
    """Reference lines at pixel offsets: vertical at each `x`, horizontal at each `y`."""

    x: Sequence[float] = ()
    y: Sequence[float] = ()
    stroke: GridStroke = field(default_factory=_default_stroke)

    def __post_init__(self) -> None:
        object.__setattr__(self, "x", tuple(finite_float(v, "grid x offset") for v in self.x))
        object.__setattr__(self, "y", tuple(finite_float(v, "grid y offset") for v in self.y))

    @classmethod
    def solid(cls, color: RGBA | str, *, x: Sequence[float] = (), y: Sequence[float] = ()) -> "Grid":
        return cls(x=x, y=y, stroke=SolidStroke(parse_color(color)))

    @classmethod
    def dashed(
        cls,
        color: RGBA | str,
        dash_array: tuple[float, float],
        *,
        x: Sequence[float] = (),
        y: Sequence[float] = (),
    ) -> "Grid":
        return cls(x=x, y=y, stroke=DashedStroke(parse_color(color), dash_array))

    def lines(self, bounds: Bounds) -> list[tuple[Point, Point]]:
        origin = bounds.origin
        out = [(origin_point(x, 0.0, origin), origin_point(x, bounds.height, origin)) for x in self.x]
        out.extend((origin_point(0.0, y, origin), origin_point(bounds.width, y, origin)) for y in self.y)
        return out

    def paint(self, bounds: Bounds, surface: Surface) -> None:
        stroke = self.stroke
        for start, end in self.lines(bounds):
            if isinstance(stroke, DashedStroke):
                path = dash_line(start, end, stroke.dash_array)
                if path is None:
                    continue
            else:
                builder = PathBuilder.stroke(1.0)
                builder.move_to(start)
                builder.line_to(end)
                try:
                    path = builder.build()
                except PathBuildError as exc:
                    LOGGER.debug("grid line %s-%s dropped: %s", start, end, exc)
                    continue
            surface.paint_path(path, stroke.color)
