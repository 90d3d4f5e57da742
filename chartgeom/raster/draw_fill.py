from __future__ import annotations

from typing import Callable, Sequence

import numpy as np

from chartgeom.color import RGBA
from chartgeom.raster.canvas import blend_pixels, draw_hline


SpanColors = Callable[[np.ndarray, np.ndarray], np.ndarray]


def fill_polygons(dst: np.ndarray, rings: Sequence[np.ndarray], color: RGBA | SpanColors) -> None:
    """Even-odd scanline fill of closed rings, sampled at pixel centers.

    `color` is one RGBA tuple or a callable mapping pixel (xs, ys) to colors.
    """
    edges = [_ring_edges(ring) for ring in rings if len(ring) >= 3]
    if not edges:
        return
    e = np.vstack(edges)
    x0, y0, x1, y1 = e[:, 0], e[:, 1], e[:, 2], e[:, 3]
    ylo = np.minimum(y0, y1)
    yhi = np.maximum(y0, y1)
    flat = y0 == y1

    row_min = max(0, int(np.floor(np.min(ylo))))
    row_max = min(dst.shape[0] - 1, int(np.ceil(np.max(yhi))))
    for y in range(row_min, row_max + 1):
        yc = y + 0.5
        hit = (~flat) & (yc >= ylo) & (yc < yhi)
        if not np.any(hit):
            continue
        xs = x0[hit] + (yc - y0[hit]) * (x1[hit] - x0[hit]) / (y1[hit] - y0[hit])
        xs.sort()
        for xa, xb in zip(xs[0::2], xs[1::2]):
            start = int(np.ceil(xa - 0.5))
            stop = int(np.floor(xb - 0.5))
            if stop < start:
                continue
            if callable(color):
                px = np.arange(max(start, 0), min(stop, dst.shape[1] - 1) + 1)
                if px.size == 0:
                    continue
                py = np.full(px.shape, y)
                blend_pixels(dst, px, py, color(px + 0.5, py + 0.5))
            else:
                draw_hline(dst, start, stop, y, color)


def _ring_edges(ring: np.ndarray) -> np.ndarray:
    pts = np.asarray(ring, dtype=np.float64)
    nxt = np.roll(pts, -1, axis=0)
    return np.column_stack([pts[:, 0], pts[:, 1], nxt[:, 0], nxt[:, 1]])
