from __future__ import annotations

import numpy as np

from chartgeom.color import RGBA
from chartgeom.raster.canvas import draw_pixel


def draw_polyline(
    dst: np.ndarray,
    points: np.ndarray,
    color: RGBA | np.ndarray,
    width: float = 1.0,
    *,
    closed: bool = False,
) -> None:
    """Stroke a polyline with a square brush.

    `color` is one RGBA tuple or an (N - 1, 4) array with one color per segment.
    Segments are clipped to the canvas (plus the brush reach) before walking.
    """
    pts = np.asarray(points, dtype=np.float64)
    if closed and pts.shape[0] > 2:
        pts = np.vstack([pts, pts[:1]])
    if pts.shape[0] < 2:
        return
    per_segment = isinstance(color, np.ndarray)
    brush = max(1, int(round(width)))
    reach = brush // 2
    box = (-reach, -reach, dst.shape[1] - 1 + reach, dst.shape[0] - 1 + reach)
    for i in range(pts.shape[0] - 1):
        clipped = _clip_segment(pts[i, 0], pts[i, 1], pts[i + 1, 0], pts[i + 1, 1], box)
        if clipped is None:
            continue
        x0, y0, x1, y1 = (int(np.rint(v)) for v in clipped)
        seg_color = _row(color, i) if per_segment else color
        _draw_line_segment(dst, x0, y0, x1, y1, color=seg_color, width=brush)


def _clip_segment(
    x0: float, y0: float, x1: float, y1: float, box: tuple[float, float, float, float]
) -> tuple[float, float, float, float] | None:
    # Liang-Barsky against the inclusive box (xmin, ymin, xmax, ymax).
    xmin, ymin, xmax, ymax = box
    dx = x1 - x0
    dy = y1 - y0
    t0, t1 = 0.0, 1.0
    for p, q in ((-dx, x0 - xmin), (dx, xmax - x0), (-dy, y0 - ymin), (dy, ymax - y0)):
        if p == 0.0:
            if q < 0.0:
                return None
            continue
        t = q / p
        if p < 0.0:
            if t > t1:
                return None
            t0 = max(t0, t)
        else:
            if t < t0:
                return None
            t1 = min(t1, t)
    return (x0 + t0 * dx, y0 + t0 * dy, x0 + t1 * dx, y0 + t1 * dy)


def _row(colors: np.ndarray, i: int) -> RGBA:
    c = colors[min(i, colors.shape[0] - 1)]
    return (int(c[0]), int(c[1]), int(c[2]), int(c[3]))


def _draw_line_segment(dst: np.ndarray, x0: int, y0: int, x1: int, y1: int, color: RGBA, width: int) -> None:
    dx = abs(x1 - x0)
    sx = 1 if x0 < x1 else -1
    dy = -abs(y1 - y0)
    sy = 1 if y0 < y1 else -1
    err = dx + dy

    while True:
        _draw_square_brush(dst, x0, y0, color=color, width=width)
        if x0 == x1 and y0 == y1:
            break
        e2 = 2 * err
        if e2 >= dy:
            err += dy
            x0 += sx
        if e2 <= dx:
            err += dx
            y0 += sy


def _draw_square_brush(dst: np.ndarray, x: int, y: int, color: RGBA, width: int) -> None:
    radius = max(0, width // 2)
    for yy in range(y - radius, y + radius + 1):
        for xx in range(x - radius, x + radius + 1):
            draw_pixel(dst, xx, yy, color)
