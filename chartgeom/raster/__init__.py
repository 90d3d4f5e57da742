from .canvas import blend_pixels, draw_hline, draw_pixel, new_canvas
from .draw_fill import fill_polygons
from .draw_lines import draw_polyline
from .draw_markers import draw_rounded_rect
from .surface import RasterSurface

__all__ = [
    "RasterSurface",
    "blend_pixels",
    "draw_hline",
    "draw_pixel",
    "draw_polyline",
    "draw_rounded_rect",
    "fill_polygons",
    "new_canvas",
]
