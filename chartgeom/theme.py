from __future__ import annotations

from dataclasses import asdict, dataclass
import re
from typing import Any, Mapping

from chartgeom.color import RGBA, parse_color
from chartgeom.errors import ChartConfigError

_HEX_COLOR = re.compile(r"^#[0-9a-fA-F]{6}([0-9a-fA-F]{2})?$")

_COLOR_TOKENS = ("grid_color", "line_color", "area_fill", "bar_fill", "marker_fill")
_POSITIVE_TOKENS = ("stroke_width", "marker_size", "dash_length", "gap_length")


@dataclass(frozen=True)
class ChartTokens:
    """Default colors and sizes for grids, lines, markers and dashes."""

    grid_color: str = "#F0F0F0"
    line_color: str = "#2563EB"
    area_fill: str = "#2563EB66"
    bar_fill: str = "#2563EB"
    marker_fill: str = "#2563EB"
    stroke_width: float = 2.0
    marker_size: float = 8.0
    dash_length: float = 4.0
    gap_length: float = 2.0

    def color(self, token: str) -> RGBA:
        if token not in _COLOR_TOKENS:
            raise ChartConfigError(f"Unknown color token: {token}")
        return parse_color(getattr(self, token))

    @property
    def dash_array(self) -> tuple[float, float]:
        return (self.dash_length, self.gap_length)


DEFAULT_TOKENS = ChartTokens()


def validate_chart_tokens(overrides: Mapping[str, Any] | None = None) -> ChartTokens:
    """Validate and merge user token overrides against the defaults."""

    raw: dict[str, Any] = asdict(DEFAULT_TOKENS)
    if overrides:
        for key, value in overrides.items():
            if key not in raw:
                raise ChartConfigError(f"Unknown chart token: {key}")
            raw[key] = value

    for key in _COLOR_TOKENS:
        if not isinstance(raw[key], str) or not _HEX_COLOR.match(raw[key]):
            raise ChartConfigError(f"Token `{key}` must be a hex color (#RRGGBB or #RRGGBBAA)")

    for key in _POSITIVE_TOKENS:
        value = raw[key]
        if isinstance(value, bool) or not isinstance(value, (int, float)) or float(value) <= 0:
            raise ChartConfigError(f"Token `{key}` must be a positive number")

    return ChartTokens(
        **{key: str(raw[key]) for key in _COLOR_TOKENS},
        **{key: float(raw[key]) for key in _POSITIVE_TOKENS},
    )
