from __future__ import annotations

from dataclasses import dataclass
import math
import re
from typing import Union

import numpy as np

from chartgeom.errors import ChartConfigError


RGBA = tuple[int, int, int, int]

TRANSPARENT: RGBA = (0, 0, 0, 0)
WHITE: RGBA = (255, 255, 255, 255)

_HEX_COLOR = re.compile(r"^#([0-9a-fA-F]{3,4}|[0-9a-fA-F]{6}|[0-9a-fA-F]{8})$")


@dataclass(frozen=True)
class ColorStop:
    color: RGBA
    position: float

    def __post_init__(self) -> None:
        if not math.isfinite(self.position) or not 0.0 <= self.position <= 1.0:
            raise ChartConfigError("color stop position must be within [0, 1]")
        _check_rgba(self.color)


@dataclass(frozen=True)
class LinearGradient:
    """Two-stop linear gradient.

    `angle` follows the CSS convention in degrees: 0 runs bottom to top,
    90 runs left to right. A stop at position 0 sits at the start edge.
    """

    angle: float
    start: ColorStop
    end: ColorStop

    def __post_init__(self) -> None:
        if not math.isfinite(self.angle):
            raise ChartConfigError("gradient angle must be finite")

    def direction(self) -> tuple[float, float]:
        rad = math.radians(self.angle)
        # Screen y grows downward, so "up" is negative y.
        return (math.sin(rad), -math.cos(rad))

    def sample(self, t: np.ndarray) -> np.ndarray:
        """Return an (N, 4) uint8 array of colors for positions `t` in [0, 1]."""
        lo, hi = sorted((self.start, self.end), key=lambda s: s.position)
        t = np.clip(np.asarray(t, dtype=np.float64), 0.0, 1.0)
        span = hi.position - lo.position
        if span <= 0:
            k = (t >= hi.position).astype(np.float64)
        else:
            k = np.clip((t - lo.position) / span, 0.0, 1.0)
        c0 = np.asarray(lo.color, dtype=np.float64)
        c1 = np.asarray(hi.color, dtype=np.float64)
        out = c0[None, :] + (c1 - c0)[None, :] * k[:, None]
        return np.rint(out).astype(np.uint8)

    def mean_color(self) -> RGBA:
        mixed = self.sample(np.asarray([0.5]))[0]
        return (int(mixed[0]), int(mixed[1]), int(mixed[2]), int(mixed[3]))


Fill = Union[RGBA, LinearGradient]


def linear_gradient(angle: float, start: tuple[RGBA | str, float], end: tuple[RGBA | str, float]) -> LinearGradient:
    return LinearGradient(
        angle=float(angle),
        start=ColorStop(color=parse_color(start[0]), position=float(start[1])),
        end=ColorStop(color=parse_color(end[0]), position=float(end[1])),
    )


def parse_color(value: RGBA | str | int) -> RGBA:
    """Accept an RGBA tuple, `#RGB[A]`/`#RRGGBB[AA]` hex string, or 0xRRGGBB int."""
    if isinstance(value, tuple):
        if len(value) == 3:
            value = (value[0], value[1], value[2], 255)
        return _check_rgba(value)
    if isinstance(value, int):
        if value < 0 or value > 0xFFFFFF:
            raise ChartConfigError(f"integer color out of range: {value:#x}")
        return ((value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF, 255)
    if not isinstance(value, str) or not _HEX_COLOR.match(value.strip()):
        raise ChartConfigError(f"color must be a hex string (#RRGGBB or #RRGGBBAA): {value!r}")
    hex_value = value.strip()[1:]
    if len(hex_value) in (3, 4):
        hex_value = "".join(ch * 2 for ch in hex_value)
    r = int(hex_value[0:2], 16)
    g = int(hex_value[2:4], 16)
    b = int(hex_value[4:6], 16)
    a = int(hex_value[6:8], 16) if len(hex_value) == 8 else 255
    return (r, g, b, a)


def with_alpha(color: RGBA, opacity: float) -> RGBA:
    r, g, b, a = color
    return (r, g, b, max(0, min(255, int(round(a * opacity)))))


def to_hex(color: RGBA) -> str:
    r, g, b, _ = color
    return f"#{r:02x}{g:02x}{b:02x}"


def _check_rgba(value: tuple) -> RGBA:
    if len(value) != 4:
        raise ChartConfigError(f"color must have 4 channels: {value!r}")
    for channel in value:
        if not isinstance(channel, (int, np.integer)) or not 0 <= int(channel) <= 255:
            raise ChartConfigError(f"color channels must be integers within [0, 255]: {value!r}")
    return (int(value[0]), int(value[1]), int(value[2]), int(value[3]))
