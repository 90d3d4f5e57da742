from __future__ import annotations

import logging
import math
from typing import Sequence

from chartgeom.errors import ChartConfigError, PathBuildError
from chartgeom.paint import Bounds
from chartgeom.path import Path, PathBuilder, Point


LOGGER = logging.getLogger(__name__)


def origin_point(x: float, y: float, origin: Point) -> Point:
    return (x + origin[0], y + origin[1])


def finite_float(value: object, name: str) -> float:
    try:
        out = float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError) as exc:
        raise ChartConfigError(f"{name} must be a number, got {value!r}") from exc
    if not math.isfinite(out):
        raise ChartConfigError(f"{name} must be finite, got {value!r}")
    return out


def dash_line(start: Point, end: Point, dash_array: tuple[float, float] | Sequence[float]) -> Path | None:
    """Split the segment `start`-`end` into dashes measured by arc length.

    Each dash is emitted as its own sub-path of a 1px stroke path. Returns
    None when there is nothing to draw.
    """
    dash_length, gap_length = float(dash_array[0]), float(dash_array[1])
    pattern_length = dash_length + gap_length
    length = math.hypot(end[0] - start[0], end[1] - start[1])
    if not math.isfinite(length) or not math.isfinite(pattern_length):
        return None
    if length <= 0 or dash_length <= 0 or pattern_length <= 0:
        return None

    builder = PathBuilder.stroke(1.0)
    count = int(math.ceil(length / pattern_length))
    for i in range(count):
        t0 = i * pattern_length / length
        t1 = min(1.0, (i * pattern_length + dash_length) / length)
        if t0 >= 1.0:
            break
        builder.move_to(_lerp(start, end, t0))
        builder.line_to(_lerp(start, end, t1))
    return builder.build()


def polygon(points: Sequence[Point], bounds: Bounds) -> Path | None:
    """Open 1px stroked polyline through `points`, relative to `bounds`."""
    if not points:
        return None
    builder = PathBuilder.stroke(1.0)
    builder.move_to(origin_point(points[0][0], points[0][1], bounds.origin))
    for x, y in points[1:]:
        builder.line_to(origin_point(x, y, bounds.origin))
    try:
        return builder.build()
    except PathBuildError as exc:
        LOGGER.debug("polygon dropped: %s", exc)
        return None


def _lerp(a: Point, b: Point, t: float) -> Point:
    return (a[0] + (b[0] - a[0]) * t, a[1] + (b[1] - a[1]) * t)
