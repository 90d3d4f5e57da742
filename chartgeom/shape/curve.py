from __future__ import annotations

from enum import Enum
import math
from typing import Callable, Optional, Sequence, TypeVar

from chartgeom.path import PathBuilder, Point


T = TypeVar("T")

Accessor = Callable[[T], Optional[float]]


class StrokeStyle(str, Enum):
    """How consecutive points of a line are joined."""

    NATURAL = "natural"
    LINEAR = "linear"


def read(accessor: Accessor[T], item: T) -> float | None:
    value = accessor(item)
    if value is None:
        return None
    value = float(value)
    if not math.isfinite(value):
        return None
    return value


def connect(builder: PathBuilder, points: Sequence[Point], style: StrokeStyle) -> None:
    """Draw from `points[0]` (the current pen position) through the rest."""
    n = len(points)
    if n < 2:
        return
    if style is StrokeStyle.LINEAR:
        for p in points[1:]:
            builder.line_to(p)
        return

    for i in range(n - 1):
        p0 = points[i - 1] if i > 0 else points[0]
        p1 = points[i]
        p2 = points[i + 1]
        p3 = points[i + 2] if i + 2 < n else points[n - 1]
        # Catmull-Rom tangents expressed as Bezier control points.
        c1 = (p1[0] + (p2[0] - p0[0]) / 6.0, p1[1] + (p2[1] - p0[1]) / 6.0)
        c2 = (p2[0] - (p3[0] - p1[0]) / 6.0, p2[1] - (p3[1] - p1[1]) / 6.0)
        builder.curve_to(c1, c2, p2)
