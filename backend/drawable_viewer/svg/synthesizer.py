"""Synthesize a minimal single-line SVG 1.1 document from VectorGeometry."""

from __future__ import annotations

import re
import xml.etree.ElementTree as ET

from drawable_viewer.models.geometry import VectorGeometry

SVG_NS = "http://www.w3.org/2000/svg"

# Written by hand so the serializer never emits its own declaration.
SVG_PROLOGUE = (
    '<?xml version="1.0" encoding="UTF-8"?>'
    '<!DOCTYPE svg PUBLIC "-//W3C//DTD SVG 1.1//EN" '
    '"http://www.w3.org/Graphics/SVG/1.1/DTD/svg11.dtd">'
)

_LINE_BREAK_RE = re.compile(r"[\r\n]")


def build_svg_element(geometry: VectorGeometry) -> ET.Element:
    """Root <svg> with exactly one <path> child."""
    root = ET.Element("svg")
    root.set("xmlns", SVG_NS)
    root.set("width", geometry.width)
    root.set("height", geometry.height)
    root.set("viewBox", f"0 0 {geometry.width} {geometry.height}")

    path = ET.SubElement(root, "path")
    path.set("d", geometry.path_data)
    if geometry.fill_color and geometry.fill_color.strip():
        path.set("fill", geometry.fill_color)
    return root


def synthesize_svg(geometry: VectorGeometry) -> str:
    """Deterministic SVG text: fixed prologue + serialized root, no line breaks."""
    body = ET.tostring(build_svg_element(geometry), encoding="unicode")
    return SVG_PROLOGUE + _LINE_BREAK_RE.sub("", body)
