from .arc import Arc, ArcGeometry, ArcSector
from .area import Area
from .bar import Bar
from .curve import StrokeStyle
from .line import Line, PointMarker
from .pie import Pie

__all__ = [
    "Arc",
    "ArcGeometry",
    "ArcSector",
    "Area",
    "Bar",
    "Line",
    "Pie",
    "PointMarker",
    "StrokeStyle",
]
