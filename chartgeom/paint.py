from __future__ import annotations

from dataclasses import dataclass, field
import math
from typing import Protocol, Union

from chartgeom.color import Fill
from chartgeom.errors import ChartConfigError
from chartgeom.path import Path, Point


@dataclass(frozen=True)
class Bounds:
    """Rectangular drawing region in pixels, origin at the top-left corner."""

    x: float
    y: float
    width: float
    height: float

    def __post_init__(self) -> None:
        for name in ("x", "y", "width", "height"):
            if not math.isfinite(getattr(self, name)):
                raise ChartConfigError(f"bounds {name} must be finite")
        if self.width < 0 or self.height < 0:
            raise ChartConfigError("bounds width/height must be >= 0")

    @classmethod
    def from_size(cls, width: float, height: float) -> "Bounds":
        return cls(x=0.0, y=0.0, width=float(width), height=float(height))

    @property
    def origin(self) -> Point:
        return (self.x, self.y)

    @property
    def size(self) -> tuple[float, float]:
        return (self.width, self.height)

    @property
    def center(self) -> Point:
        return (self.x + self.width / 2.0, self.y + self.height / 2.0)


@dataclass(frozen=True)
class PaintQuad:
    bounds: Bounds
    corner_radius: float
    background: Fill
    border_width: float = 0.0
    border_color: Fill | None = None


@dataclass(frozen=True)
class PaintPath:
    path: Path
    fill: Fill


@dataclass(frozen=True)
class PaintQuadCommand:
    quad: PaintQuad


PaintCommand = Union[PaintPath, PaintQuadCommand]


class Surface(Protocol):
    """Drawing capability borrowed for the duration of one paint call."""

    def paint_path(self, path: Path, fill: Fill) -> None:
        ...

    def paint_quad(self, quad: PaintQuad) -> None:
        ...


@dataclass
class RecordingSurface:
    commands: list[PaintCommand] = field(default_factory=list)

    def paint_path(self, path: Path, fill: Fill) -> None:
        self.commands.append(PaintPath(path=path, fill=fill))

    def paint_quad(self, quad: PaintQuad) -> None:
        self.commands.append(PaintQuadCommand(quad=quad))

    @property
    def paths(self) -> list[PaintPath]:
        return [cmd for cmd in self.commands if isinstance(cmd, PaintPath)]

    @property
    def quads(self) -> list[PaintQuad]:
        return [cmd.quad for cmd in self.commands if isinstance(cmd, PaintQuadCommand)]

    def clear(self) -> None:
        self.commands.clear()
