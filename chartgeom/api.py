from __future__ import annotations

from typing import Protocol

import numpy as np

from chartgeom.color import RGBA, TRANSPARENT
from chartgeom.paint import Bounds, Surface
from chartgeom.raster.surface import RasterSurface
from chartgeom.svg import SvgSurface


class Plot(Protocol):
    def paint(self, bounds: Bounds, surface: Surface) -> None:
        ...


def render_svg(plot: Plot, width: int, height: int, *, background: RGBA | None = None) -> str:
    surface = SvgSurface(width, height, background=background)
    plot.paint(Bounds.from_size(width, height), surface)
    return surface.to_markup()


def render_rgba(plot: Plot, width: int, height: int, *, background: RGBA = TRANSPARENT) -> np.ndarray:
    surface = RasterSurface(width, height, background=background)
    plot.paint(Bounds.from_size(width, height), surface)
    return surface.to_rgba()
