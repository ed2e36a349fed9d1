"""Rasterization: SVG document -> RasterImage at the document's intrinsic size.

CairoSVG renders from an in-memory bytestring and Pillow decodes the PNG it
produces, so a render never leaves files behind. Resizing is the caller's
job; this module always renders at native resolution.
"""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from pathlib import Path

import cairosvg

from drawable_viewer.errors import RasterizationError, SourceIOError
from drawable_viewer.models.geometry import RasterImage

logger = logging.getLogger(__name__)

# Quality-oriented rendering hints, applied as an override stylesheet.
RENDERING_HINTS: dict[str, str] = {
    "shape-rendering": "geometricPrecision",
    "text-rendering": "geometricPrecision",
    "image-rendering": "optimizeQuality",
    "color-rendering": "optimizeQuality",
}

# Initial value of the SVG `fill` property; paths without a fill render with it.
DEFAULT_FILL = "black"

_SVG_NS = "http://www.w3.org/2000/svg"

# Serialize SVG-namespaced elements without an ns0: prefix.
ET.register_namespace("", _SVG_NS)
ET.register_namespace("xlink", "http://www.w3.org/1999/xlink")


def hints_stylesheet(hints: dict[str, str] = RENDERING_HINTS) -> str:
    """CSS rule applying every hint to every element."""
    decls = " ".join(f"{prop}: {value};" for prop, value in hints.items())
    return f"* {{ {decls} }}"


def apply_rendering_hints(svg_text: str, hints: dict[str, str] = RENDERING_HINTS) -> str:
    """Return a render-only copy of the document with the hint stylesheet injected.

    The stylesheet becomes the first child of the root element. The prolog
    (declaration, DOCTYPE, comments) is dropped from the copy.
    """
    try:
        root = ET.fromstring(svg_text)
    except ET.ParseError as e:
        raise RasterizationError(f"malformed SVG: {e}") from e

    ns = root.tag[: root.tag.index("}") + 1] if root.tag.startswith("{") else ""
    style = ET.Element(f"{ns}style", {"type": "text/css"})
    style.text = hints_stylesheet(hints)
    root.insert(0, style)
    return ET.tostring(root, encoding="unicode")


class Rasterizer:
    """Renders SVG text to RGBA pixels with quality-oriented hints."""

    def __init__(self, hints: dict[str, str] | None = None) -> None:
        self.hints = dict(RENDERING_HINTS if hints is None else hints)

    def render(self, svg_text: str) -> RasterImage:
        """Render at intrinsic width/height.

        Raises RasterizationError on malformed SVG, renderer failure, or an
        empty result. Never returns a placeholder.
        """
        prepared = apply_rendering_hints(svg_text, self.hints)
        try:
            png_data = cairosvg.svg2png(bytestring=prepared.encode("utf-8"))
            image = RasterImage.from_png(png_data)
        except Exception as e:
            logger.warning("Failed to render SVG: %s", e)
            raise RasterizationError(f"cannot render SVG: {e}") from e

        if image.width == 0 or image.height == 0:
            raise RasterizationError("renderer produced an empty bitmap")
        return image

    def render_file(self, path: str | Path) -> RasterImage:
        try:
            svg_text = Path(path).read_text(encoding="utf-8")
        except OSError as e:
            raise SourceIOError(f"cannot read {path}: {e}") from e
        except UnicodeDecodeError as e:
            raise RasterizationError(f"{path} is not UTF-8 SVG text") from e
        return self.render(svg_text)


def rasterize_svg(svg_text: str) -> RasterImage:
    """Render with the default hints."""
    return Rasterizer().render(svg_text)
