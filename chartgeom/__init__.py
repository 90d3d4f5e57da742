from chartgeom.api import Plot, render_rgba, render_svg
from chartgeom.color import RGBA, ColorStop, Fill, LinearGradient, linear_gradient, parse_color
from chartgeom.errors import ChartConfigError, PathBuildError
from chartgeom.geometry import dash_line, origin_point, polygon
from chartgeom.grid import DashedStroke, Grid, SolidStroke
from chartgeom.paint import Bounds, PaintQuad, RecordingSurface, Surface
from chartgeom.path import Path, PathBuilder
from chartgeom.scales import Scale, ScaleBand, ScaleLinear, ScalePoint
from chartgeom.shape import Arc, ArcSector, Area, Bar, Line, Pie, PointMarker, StrokeStyle
from chartgeom.theme import DEFAULT_TOKENS, ChartTokens, validate_chart_tokens

__all__ = [
    "Arc",
    "ArcSector",
    "Area",
    "Bar",
    "Bounds",
    "ChartConfigError",
    "ChartTokens",
    "ColorStop",
    "DEFAULT_TOKENS",
    "DashedStroke",
    "Fill",
    "Grid",
    "Line",
    "LinearGradient",
    "PaintQuad",
    "Path",
    "PathBuildError",
    "PathBuilder",
    "Pie",
    "Plot",
    "PointMarker",
    "RGBA",
    "RecordingSurface",
    "Scale",
    "ScaleBand",
    "ScaleLinear",
    "ScalePoint",
    "SolidStroke",
    "StrokeStyle",
    "Surface",
    "dash_line",
    "linear_gradient",
    "origin_point",
    "parse_color",
    "polygon",
    "render_rgba",
    "render_svg",
    "validate_chart_tokens",
]
