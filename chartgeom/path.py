from __future__ import annotations

from dataclasses import dataclass
import math
from typing import Literal, Union

import numpy as np

from chartgeom.errors import ChartConfigError, PathBuildError


Point = tuple[float, float]
PathKind = Literal["stroke", "fill"]


@dataclass(frozen=True)
class MoveTo:
    to: Point


@dataclass(frozen=True)
class LineTo:
    to: Point


@dataclass(frozen=True)
class CubicTo:
    ctrl1: Point
    ctrl2: Point
    to: Point


@dataclass(frozen=True)
class ArcTo:
    """SVG endpoint-parameterized elliptical arc."""

    radii: Point
    x_rotation: float
    large_arc: bool
    sweep: bool
    to: Point


@dataclass(frozen=True)
class Close:
    pass


PathCommand = Union[MoveTo, LineTo, CubicTo, ArcTo, Close]


@dataclass(frozen=True)
class PathStyle:
    kind: PathKind = "fill"
    width: float = 1.0


@dataclass(frozen=True)
class Polyline:
    points: np.ndarray
    closed: bool


@dataclass(frozen=True)
class Path:
    commands: tuple[PathCommand, ...]
    style: PathStyle

    @property
    def is_stroke(self) -> bool:
        return self.style.kind == "stroke"

    def anchors(self) -> list[Point]:
        """End points of every command, in order, excluding `Close`."""
        return [cmd.to for cmd in self.commands if not isinstance(cmd, Close)]

    def subpath_count(self) -> int:
        return sum(1 for cmd in self.commands if isinstance(cmd, MoveTo))

    def flatten(self, tolerance: float = 0.5) -> list[Polyline]:
        """Sample curves and arcs into polylines, one per sub-path."""
        out: list[Polyline] = []
        current: list[Point] = []
        start: Point | None = None
        pen: Point | None = None
        closed = False

        def flush() -> None:
            if current:
                out.append(Polyline(points=np.asarray(current, dtype=np.float64), closed=closed))

        for cmd in self.commands:
            if isinstance(cmd, MoveTo):
                flush()
                current = [cmd.to]
                start = pen = cmd.to
                closed = False
            elif isinstance(cmd, LineTo):
                current.append(cmd.to)
                pen = cmd.to
            elif isinstance(cmd, CubicTo):
                assert pen is not None
                current.extend(_sample_cubic(pen, cmd.ctrl1, cmd.ctrl2, cmd.to, tolerance)[1:])
                pen = cmd.to
            elif isinstance(cmd, ArcTo):
                assert pen is not None
                current.extend(_sample_arc(pen, cmd, tolerance)[1:])
                pen = cmd.to
            else:
                closed = True
                if start is not None:
                    pen = start
        flush()
        return out

    def length(self, tolerance: float = 0.1) -> float:
        total = 0.0
        for line in self.flatten(tolerance):
            pts = line.points
            if line.closed and len(pts) > 1:
                pts = np.vstack([pts, pts[:1]])
            if len(pts) > 1:
                total += float(np.sum(np.hypot(*np.diff(pts, axis=0).T)))
        return total

    def bbox(self) -> tuple[float, float, float, float] | None:
        lines = self.flatten()
        if not lines:
            return None
        pts = np.vstack([line.points for line in lines])
        xmin, ymin = np.min(pts, axis=0)
        xmax, ymax = np.max(pts, axis=0)
        return (float(xmin), float(ymin), float(xmax), float(ymax))

    def to_svg_d(self) -> str:
        parts: list[str] = []
        for cmd in self.commands:
            if isinstance(cmd, MoveTo):
                parts.append(f"M{_fmt_point(cmd.to)}")
            elif isinstance(cmd, LineTo):
                parts.append(f"L{_fmt_point(cmd.to)}")
            elif isinstance(cmd, CubicTo):
                parts.append(f"C{_fmt_point(cmd.ctrl1)} {_fmt_point(cmd.ctrl2)} {_fmt_point(cmd.to)}")
            elif isinstance(cmd, ArcTo):
                rx, ry = cmd.radii
                parts.append(
                    f"A{_fmt(rx)} {_fmt(ry)} {_fmt(cmd.x_rotation)} "
                    f"{int(cmd.large_arc)} {int(cmd.sweep)} {_fmt_point(cmd.to)}"
                )
            else:
                parts.append("Z")
        return " ".join(parts)


class PathBuilder:
    """Accumulates drawing commands for one path; `build()` snapshots them."""

    def __init__(self, style: PathStyle | None = None) -> None:
        self._style = style or PathStyle()
        self._commands: list[PathCommand] = []
        self._open = False

    @classmethod
    def stroke(cls, width: float) -> "PathBuilder":
        if not math.isfinite(width) or width < 0:
            raise ChartConfigError("stroke width must be a finite number >= 0")
        return cls(PathStyle(kind="stroke", width=float(width)))

    @classmethod
    def fill(cls) -> "PathBuilder":
        return cls(PathStyle(kind="fill"))

    def move_to(self, to: Point) -> None:
        self._commands.append(MoveTo(_pt(to)))
        self._open = True

    def line_to(self, to: Point) -> None:
        self._require_open("line_to")
        self._commands.append(LineTo(_pt(to)))

    def curve_to(self, ctrl1: Point, ctrl2: Point, to: Point) -> None:
        self._require_open("curve_to")
        self._commands.append(CubicTo(_pt(ctrl1), _pt(ctrl2), _pt(to)))

    def arc_to(self, radii: Point, x_rotation: float, large_arc: bool, sweep: bool, to: Point) -> None:
        self._require_open("arc_to")
        self._commands.append(ArcTo(_pt(radii), float(x_rotation), bool(large_arc), bool(sweep), _pt(to)))

    def close(self) -> None:
        self._require_open("close")
        self._commands.append(Close())

    def build(self) -> Path:
        if not self._commands:
            raise PathBuildError("path has no commands")
        for cmd in self._commands:
            if isinstance(cmd, Close):
                continue
            values = [*cmd.to]
            if isinstance(cmd, CubicTo):
                values.extend([*cmd.ctrl1, *cmd.ctrl2])
            elif isinstance(cmd, ArcTo):
                values.extend([*cmd.radii, cmd.x_rotation])
            if not all(math.isfinite(v) for v in values):
                raise PathBuildError(f"non-finite coordinate in {type(cmd).__name__}")
        return Path(commands=tuple(self._commands), style=self._style)

    def _require_open(self, op: str) -> None:
        if not self._open:
            raise PathBuildError(f"{op} called before move_to")


def _pt(p: Point) -> Point:
    return (float(p[0]), float(p[1]))


def _fmt(value: float) -> str:
    out = f"{value:.3f}".rstrip("0").rstrip(".")
    return "0" if out in ("-0", "") else out


def _fmt_point(p: Point) -> str:
    return f"{_fmt(p[0])},{_fmt(p[1])}"


def _sample_cubic(p0: Point, p1: Point, p2: Point, p3: Point, tolerance: float) -> np.ndarray:
    ctrl = np.asarray([p0, p1, p2, p3], dtype=np.float64)
    hull = float(np.sum(np.hypot(*np.diff(ctrl, axis=0).T)))
    n = max(2, int(math.ceil(hull / max(tolerance * 4.0, 1e-6))))
    n = min(n, 256)
    t = np.linspace(0.0, 1.0, n + 1)[:, None]
    mt = 1.0 - t
    return (mt**3) * ctrl[0] + 3 * (mt**2) * t * ctrl[1] + 3 * mt * (t**2) * ctrl[2] + (t**3) * ctrl[3]


def _sample_arc(start: Point, arc: ArcTo, tolerance: float) -> np.ndarray:
    # Endpoint to center conversion, SVG 1.1 implementation notes F.6.5.
    x1, y1 = start
    x2, y2 = arc.to
    rx, ry = abs(arc.radii[0]), abs(arc.radii[1])
    if (x1 == x2 and y1 == y2) or rx < 1e-12 or ry < 1e-12:
        return np.asarray([start, arc.to], dtype=np.float64)

    phi = math.radians(arc.x_rotation)
    cos_phi, sin_phi = math.cos(phi), math.sin(phi)
    dx2, dy2 = (x1 - x2) / 2.0, (y1 - y2) / 2.0
    x1p = cos_phi * dx2 + sin_phi * dy2
    y1p = -sin_phi * dx2 + cos_phi * dy2

    lam = (x1p * x1p) / (rx * rx) + (y1p * y1p) / (ry * ry)
    if lam > 1.0:
        scale = math.sqrt(lam)
        rx *= scale
        ry *= scale

    num = rx * rx * ry * ry - rx * rx * y1p * y1p - ry * ry * x1p * x1p
    den = rx * rx * y1p * y1p + ry * ry * x1p * x1p
    coef = math.sqrt(max(0.0, num / den)) if den > 0 else 0.0
    if arc.large_arc == arc.sweep:
        coef = -coef
    cxp = coef * rx * y1p / ry
    cyp = -coef * ry * x1p / rx
    cx = cos_phi * cxp - sin_phi * cyp + (x1 + x2) / 2.0
    cy = sin_phi * cxp + cos_phi * cyp + (y1 + y2) / 2.0

    theta1 = _vector_angle(1.0, 0.0, (x1p - cxp) / rx, (y1p - cyp) / ry)
    dtheta = _vector_angle((x1p - cxp) / rx, (y1p - cyp) / ry, (-x1p - cxp) / rx, (-y1p - cyp) / ry)
    if not arc.sweep and dtheta > 0:
        dtheta -= 2.0 * math.pi
    elif arc.sweep and dtheta < 0:
        dtheta += 2.0 * math.pi

    r = max(rx, ry)
    step = 2.0 * math.acos(max(-1.0, 1.0 - tolerance / r)) if r > tolerance else math.pi / 4.0
    n = max(2, min(512, int(math.ceil(abs(dtheta) / max(step, 1e-6)))))
    theta = theta1 + np.linspace(0.0, 1.0, n + 1) * dtheta
    xs = cx + rx * cos_phi * np.cos(theta) - ry * sin_phi * np.sin(theta)
    ys = cy + rx * sin_phi * np.cos(theta) + ry * cos_phi * np.sin(theta)
    pts = np.column_stack([xs, ys])
    pts[-1] = (x2, y2)
    return pts


def _vector_angle(ux: float, uy: float, vx: float, vy: float) -> float:
    return math.atan2(ux * vy - uy * vx, ux * vx + uy * vy)
