from __future__ import annotations

import logging
from typing import Callable

import numpy as np

from chartgeom.color import RGBA, TRANSPARENT, Fill, LinearGradient
from chartgeom.errors import ChartConfigError
from chartgeom.paint import PaintQuad
from chartgeom.path import Path
from chartgeom.raster.canvas import new_canvas
from chartgeom.raster.draw_fill import fill_polygons
from chartgeom.raster.draw_lines import draw_polyline
from chartgeom.raster.draw_markers import draw_rounded_rect


LOGGER = logging.getLogger(__name__)

PixelColors = Callable[[np.ndarray, np.ndarray], np.ndarray]


class RasterSurface:
    """Surface that rasterizes paint commands onto an RGBA numpy canvas."""

    def __init__(self, width: int, height: int, background: RGBA = TRANSPARENT, *, tolerance: float = 0.25) -> None:
        if width <= 0 or height <= 0:
            raise ChartConfigError("raster surface width/height must be > 0")
        self._canvas = new_canvas(width, height, color=background)
        self._tolerance = tolerance

    @property
    def canvas(self) -> np.ndarray:
        return self._canvas

    def to_rgba(self) -> np.ndarray:
        return self._canvas.copy()

    def paint_path(self, path: Path, fill: Fill) -> None:
        lines = path.flatten(self._tolerance)
        if not lines:
            return
        if path.is_stroke:
            width = path.style.width
            if width <= 0:
                return
            color = self._resolve(fill, path.bbox())
            for line in lines:
                if callable(color):
                    pts = line.points
                    if line.closed and pts.shape[0] > 2:
                        pts = np.vstack([pts, pts[:1]])
                    mids = (pts[:-1] + pts[1:]) / 2.0
                    if mids.shape[0] == 0:
                        continue
                    draw_polyline(self._canvas, pts, color(mids[:, 0], mids[:, 1]), width)
                elif color is not None:
                    draw_polyline(self._canvas, line.points, color, width, closed=line.closed)
            return
        color = self._resolve(fill, path.bbox())
        if color is not None:
            fill_polygons(self._canvas, [line.points for line in lines], color)

    def paint_quad(self, quad: PaintQuad) -> None:
        b = quad.bounds
        box = (b.x, b.y, b.x + b.width, b.y + b.height)
        border = self._resolve(quad.border_color, box) if quad.border_color is not None else None
        draw_rounded_rect(
            self._canvas,
            b.x,
            b.y,
            b.width,
            b.height,
            quad.corner_radius,
            self._resolve(quad.background, box),
            border_width=quad.border_width,
            border=border,
        )

    def _resolve(self, fill: Fill, bbox: tuple[float, float, float, float] | None) -> RGBA | PixelColors | None:
        if isinstance(fill, LinearGradient):
            if bbox is None:
                return fill.mean_color()
            return _gradient_colors(fill, bbox)
        if isinstance(fill, tuple) and len(fill) == 4:
            return fill
        LOGGER.warning("unsupported fill %r; nothing painted", fill)
        return None


def _gradient_colors(gradient: LinearGradient, bbox: tuple[float, float, float, float]) -> PixelColors:
    dx, dy = gradient.direction()
    xmin, ymin, xmax, ymax = bbox
    corners = np.asarray([[xmin, ymin], [xmax, ymin], [xmin, ymax], [xmax, ymax]], dtype=np.float64)
    proj = corners[:, 0] * dx + corners[:, 1] * dy
    lo = float(np.min(proj))
    span = float(np.max(proj)) - lo

    def colors(xs: np.ndarray, ys: np.ndarray) -> np.ndarray:
        t = (np.asarray(xs) * dx + np.asarray(ys) * dy - lo) / span if span > 0 else np.zeros(np.shape(xs))
        return gradient.sample(np.ravel(t))

    return colors
