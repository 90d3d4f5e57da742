from __future__ import annotations

import logging
import xml.etree.ElementTree as ET

from chartgeom.color import RGBA, Fill, LinearGradient, to_hex
from chartgeom.errors import ChartConfigError
from chartgeom.paint import PaintQuad
from chartgeom.path import Path


LOGGER = logging.getLogger(__name__)

SVG_NS = "http://www.w3.org/2000/svg"


class SvgSurface:
    """Surface that records paint commands as SVG elements, in emission order."""

    def __init__(self, width: float, height: float, background: RGBA | None = None) -> None:
        if width <= 0 or height <= 0:
            raise ChartConfigError("svg surface width/height must be > 0")
        self._root = ET.Element(
            "svg",
            {
                "xmlns": SVG_NS,
                "width": _num(width),
                "height": _num(height),
                "viewBox": f"0 0 {_num(width)} {_num(height)}",
            },
        )
        self._defs = ET.SubElement(self._root, "defs")
        self._gradients: dict[LinearGradient, str] = {}
        if background is not None:
            rect = ET.SubElement(self._root, "rect", {"x": "0", "y": "0", "width": _num(width), "height": _num(height)})
            _set_paint(rect, "fill", to_hex(background), background[3])

    @property
    def element_count(self) -> int:
        return sum(1 for child in self._root if child.tag != "defs")

    def paint_path(self, path: Path, fill: Fill) -> None:
        paint = self._paint_ref(fill)
        if paint is None:
            return
        elem = ET.SubElement(self._root, "path", {"d": path.to_svg_d()})
        if path.is_stroke:
            elem.set("fill", "none")
            _set_paint(elem, "stroke", *paint)
            elem.set("stroke-width", _num(path.style.width))
            elem.set("stroke-linejoin", "round")
        else:
            _set_paint(elem, "fill", *paint)
            elem.set("fill-rule", "evenodd")

    def paint_quad(self, quad: PaintQuad) -> None:
        b = quad.bounds
        elem = ET.SubElement(
            self._root,
            "rect",
            {
                "x": _num(b.x),
                "y": _num(b.y),
                "width": _num(b.width),
                "height": _num(b.height),
                "rx": _num(quad.corner_radius),
            },
        )
        background = self._paint_ref(quad.background)
        if background is None:
            elem.set("fill", "none")
        else:
            _set_paint(elem, "fill", *background)
        if quad.border_color is not None and quad.border_width > 0:
            border = self._paint_ref(quad.border_color)
            if border is not None:
                _set_paint(elem, "stroke", *border)
                elem.set("stroke-width", _num(quad.border_width))

    def to_markup(self) -> str:
        return ET.tostring(self._root, encoding="unicode")

    def _paint_ref(self, fill: Fill) -> tuple[str, int] | None:
        if isinstance(fill, LinearGradient):
            return (f"url(#{self._gradient_id(fill)})", 255)
        if isinstance(fill, tuple) and len(fill) == 4:
            return (to_hex(fill), fill[3])
        LOGGER.warning("unsupported fill %r; element skipped", fill)
        return None

    def _gradient_id(self, gradient: LinearGradient) -> str:
        existing = self._gradients.get(gradient)
        if existing is not None:
            return existing
        gid = f"gradient-{len(self._gradients)}"
        self._gradients[gradient] = gid
        dx, dy = gradient.direction()
        elem = ET.SubElement(
            self._defs,
            "linearGradient",
            {
                "id": gid,
                "x1": _num(0.5 - dx / 2.0),
                "y1": _num(0.5 - dy / 2.0),
                "x2": _num(0.5 + dx / 2.0),
                "y2": _num(0.5 + dy / 2.0),
            },
        )
        for stop in sorted((gradient.start, gradient.end), key=lambda s: s.position):
            ET.SubElement(
                elem,
                "stop",
                {
                    "offset": _num(stop.position),
                    "stop-color": to_hex(stop.color),
                    "stop-opacity": _num(stop.color[3] / 255.0),
                },
            )
        return gid


def _set_paint(elem: ET.Element, attr: str, value: str, alpha: int) -> None:
    elem.set(attr, value)
    if alpha < 255:
        elem.set(f"{attr}-opacity", _num(alpha / 255.0))


def _num(value: float) -> str:
    out = f"{float(value):.3f}".rstrip("0").rstrip(".")
    return "0" if out in ("-0", "") else out
