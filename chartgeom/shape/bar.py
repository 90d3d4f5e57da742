from __future__ import annotations

from dataclasses import dataclass, field
import logging
import math
from typing import Callable, Generic, Sequence, TypeVar, Union

from chartgeom.color import Fill
from chartgeom.errors import ChartConfigError
from chartgeom.geometry import finite_float, origin_point
from chartgeom.paint import Bounds, PaintQuad, Surface
from chartgeom.shape.curve import Accessor, read
from chartgeom.theme import DEFAULT_TOKENS


LOGGER = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class Bar(Generic[T]):
    """One quad per element, `band_width` wide, spanning `y0` to `y1`.

    `x` gives the left edge, typically `ScaleBand.tick`.
    """

    data: Sequence[T]
    x: Accessor[T]
    y1: Accessor[T]
    band_width: float
    y0: Union[float, Accessor[T]] = 0.0
    fill: Union[Fill, Callable[[T], Fill]] = field(default_factory=lambda: DEFAULT_TOKENS.color("bar_fill"))
    corner_radius: float = 0.0

    def __post_init__(self) -> None:
        if not math.isfinite(self.band_width) or self.band_width < 0:
            raise ChartConfigError("band_width must be a finite number >= 0")
        if not math.isfinite(self.corner_radius) or self.corner_radius < 0:
            raise ChartConfigError("corner_radius must be a finite number >= 0")
        if not callable(self.y0):
            object.__setattr__(self, "y0", finite_float(self.y0, "baseline y0"))
        object.__setattr__(self, "data", tuple(self.data))

    def quads(self, bounds: Bounds) -> list[PaintQuad]:
        out: list[PaintQuad] = []
        for index, item in enumerate(self.data):
            x = read(self.x, item)
            y1 = read(self.y1, item)
            y0 = read(self.y0, item) if callable(self.y0) else float(self.y0)
            if x is None or y1 is None or y0 is None:
                LOGGER.debug("bar %d skipped: missing coordinate", index)
                continue
            left, top = origin_point(x, min(y0, y1), bounds.origin)
            fill = self.fill(item) if callable(self.fill) else self.fill
            out.append(
                PaintQuad(
                    bounds=Bounds(left, top, self.band_width, abs(y1 - y0)),
                    corner_radius=self.corner_radius,
                    background=fill,
                )
            )
        return out

    def paint(self, bounds: Bounds, surface: Surface) -> None:
        for quad in self.quads(bounds):
            surface.paint_quad(quad)
