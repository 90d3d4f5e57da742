from __future__ import annotations

from dataclasses import dataclass
import logging
import math
from typing import Generic, TypeVar

from chartgeom.color import Fill
from chartgeom.errors import ChartConfigError, PathBuildError
from chartgeom.paint import Bounds, Surface
from chartgeom.path import Path, PathBuilder, Point


LOGGER = logging.getLogger(__name__)

T = TypeVar("T")

EPSILON = 1e-12
HALF_PI = math.pi / 2.0

# Radius correction hiding anti-aliasing seams between neighbouring sectors.
# Tunable rendering constants, not geometry.
FUDGE_RATIO = 0.1
FUDGE_MIN = 3.0
FUDGE_MAX = 10.0

MAX_INNER_PAD_RATIO = 0.8


@dataclass(frozen=True)
class ArcSector(Generic[T]):
    """One slice of a pie layout. Angles are radians, 0 pointing up, clockwise."""

    index: int
    data: T
    value: float
    start_angle: float
    end_angle: float
    pad_angle: float = 0.0

    @property
    def span(self) -> float:
        return self.end_angle - self.start_angle


@dataclass(frozen=True)
class ArcGeometry:
    """Resolved drawing parameters of one sector, angles in screen convention."""

    center: Point
    outer_radius: float
    inner_radius: float
    outer_start: float
    outer_end: float
    inner_start: float
    inner_end: float

    @property
    def is_donut(self) -> bool:
        return self.inner_radius > EPSILON


def fudge(inner_radius: float, outer_radius: float) -> float:
    return min(FUDGE_MAX, max(FUDGE_MIN, max(inner_radius, outer_radius) * FUDGE_RATIO))


@dataclass(frozen=True)
class Arc:
    """Renders pie sectors as filled wedges (`inner_radius == 0`) or ring segments."""

    inner_radius: float = 0.0
    outer_radius: float = 0.0

    def __post_init__(self) -> None:
        if not (math.isfinite(self.inner_radius) and math.isfinite(self.outer_radius)):
            raise ChartConfigError("arc radii must be finite")

    def centroid(self, sector: ArcSector) -> Point:
        """Mid-radius, mid-angle point relative to the arc center."""
        start_angle = sector.start_angle - HALF_PI
        end_angle = sector.end_angle - HALF_PI
        r = (self.inner_radius + self.outer_radius) / 2.0
        a = (start_angle + end_angle) / 2.0
        return (r * math.cos(a), r * math.sin(a))

    def geometry(self, sector: ArcSector, bounds: Bounds) -> ArcGeometry | None:
        start_angle = sector.start_angle - HALF_PI
        end_angle = sector.end_angle - HALF_PI
        pad_angle = sector.pad_angle
        r0 = max(self.inner_radius, 0.0)
        r1 = max(self.outer_radius, 0.0)

        da = end_angle - start_angle
        if r1 < EPSILON or abs(da) < EPSILON:
            return None

        amount = fudge(r0, r1)
        r1 = r1 + amount
        r0 = max(r0 - amount, 0.0) if r0 > EPSILON else 0.0

        if r0 > EPSILON and pad_angle > 0.0:
            pad_width = r1 * pad_angle
            pad_outer = pad_width / r1
            pad_inner = min(pad_width / r0, da * MAX_INNER_PAD_RATIO)
            a0_outer = start_angle + pad_outer * 0.5
            a1_outer = end_angle - pad_outer * 0.5
            a0_inner = start_angle + pad_inner * 0.5
            a1_inner = end_angle - pad_inner * 0.5
        else:
            pad = pad_angle * 0.5
            a0_outer = a0_inner = start_angle + pad
            a1_outer = a1_inner = end_angle - pad

        if a1_outer - a0_outer <= 0.0:
            return None

        return ArcGeometry(
            center=bounds.center,
            outer_radius=r1,
            inner_radius=r0,
            outer_start=a0_outer,
            outer_end=a1_outer,
            inner_start=a0_inner,
            inner_end=a1_inner,
        )

    def path(self, sector: ArcSector, bounds: Bounds) -> Path | None:
        geo = self.geometry(sector, bounds)
        if geo is None:
            return None
        cx, cy = geo.center
        r1 = geo.outer_radius
        r0 = geo.inner_radius

        builder = PathBuilder.fill()
        builder.move_to(_polar(cx, cy, r1, geo.outer_start))
        _arc_to(builder, cx, cy, r1, geo.outer_start, geo.outer_end, sweep=True)
        if geo.is_donut:
            builder.line_to(_polar(cx, cy, r0, geo.inner_end))
            _arc_to(builder, cx, cy, r0, geo.inner_end, geo.inner_start, sweep=False)
        else:
            builder.line_to((cx, cy))
        builder.close()
        try:
            return builder.build()
        except PathBuildError as exc:
            LOGGER.debug("arc sector %d dropped: %s", sector.index, exc)
            return None

    def paint(self, sector: ArcSector, fill: Fill, bounds: Bounds, surface: Surface) -> None:
        path = self.path(sector, bounds)
        if path is not None:
            surface.paint_path(path, fill)


def _arc_to(builder: PathBuilder, cx: float, cy: float, r: float, a0: float, a1: float, *, sweep: bool) -> None:
    span = abs(a1 - a0)
    if span >= 2.0 * math.pi - 1e-9:
        # Coincident endpoints describe no arc at all; go through the midpoint.
        mid = (a0 + a1) / 2.0
        builder.arc_to((r, r), 0.0, False, sweep, _polar(cx, cy, r, mid))
        builder.arc_to((r, r), 0.0, False, sweep, _polar(cx, cy, r, a1))
        return
    builder.arc_to((r, r), 0.0, span > math.pi, sweep, _polar(cx, cy, r, a1))


def _polar(cx: float, cy: float, r: float, angle: float) -> Point:
    return (cx + r * math.cos(angle), cy + r * math.sin(angle))
