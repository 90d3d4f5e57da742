from __future__ import annotations

from typing import Callable

import numpy as np

from chartgeom.color import RGBA
from chartgeom.raster.canvas import blend_pixels


PixelColors = Callable[[np.ndarray, np.ndarray], np.ndarray]


def draw_rounded_rect(
    dst: np.ndarray,
    x: float,
    y: float,
    width: float,
    height: float,
    radius: float,
    fill: RGBA | PixelColors | None,
    *,
    border_width: float = 0.0,
    border: RGBA | PixelColors | None = None,
) -> None:
    if width <= 0 or height <= 0:
        return
    x0 = max(0, int(np.floor(x)))
    y0 = max(0, int(np.floor(y)))
    x1 = min(dst.shape[1], int(np.ceil(x + width)))
    y1 = min(dst.shape[0], int(np.ceil(y + height)))
    if x0 >= x1 or y0 >= y1:
        return

    gy, gx = np.mgrid[y0:y1, x0:x1]
    cx = gx + 0.5
    cy = gy + 0.5
    dist = _rounded_rect_distance(cx, cy, x, y, width, height, radius)
    inside = dist <= 0.0
    if border is not None and border_width > 0:
        ring = inside & (dist > -border_width)
        body = inside & ~ring
    else:
        ring = np.zeros_like(inside)
        body = inside
    _paint(dst, gx[body], gy[body], cx[body], cy[body], fill)
    _paint(dst, gx[ring], gy[ring], cx[ring], cy[ring], border)


def _paint(dst: np.ndarray, xs: np.ndarray, ys: np.ndarray, cx: np.ndarray, cy: np.ndarray, color: RGBA | PixelColors | None) -> None:
    if color is None or xs.size == 0:
        return
    colors = color(cx, cy) if callable(color) else np.asarray(color, dtype=np.float32)
    blend_pixels(dst, xs, ys, colors)


def _rounded_rect_distance(
    px: np.ndarray, py: np.ndarray, x: float, y: float, width: float, height: float, radius: float
) -> np.ndarray:
    hw = width / 2.0
    hh = height / 2.0
    r = min(max(radius, 0.0), hw, hh)
    qx = np.abs(px - (x + hw)) - (hw - r)
    qy = np.abs(py - (y + hh)) - (hh - r)
    outside = np.hypot(np.maximum(qx, 0.0), np.maximum(qy, 0.0))
    return outside + np.minimum(np.maximum(qx, qy), 0.0) - r
