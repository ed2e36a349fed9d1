"""Vector drawable parser: Android <vector> XML -> VectorGeometry.

Uses a non-namespace-aware SAX parser so attributes are matched by their
qualified name (``android:width``); a drawable that omits the
``xmlns:android`` declaration still parses. The XML prolog (declaration,
DOCTYPE, comments, BOM) is consumed by the parser itself.

Only the first <path> in document order is modeled; any further paths are
ignored.
"""

from __future__ import annotations

import logging
import xml.sax
from pathlib import Path
from xml.sax.handler import ContentHandler

from drawable_viewer.errors import ParseError, SourceIOError
from drawable_viewer.models.geometry import VectorGeometry

logger = logging.getLogger(__name__)

ANDROID_NS = "http://schemas.android.com/apk/res/android"

_ROOT_TAG = "vector"
_PATH_TAG = "path"
_DP_SUFFIX = "dp"


class _VectorHandler(ContentHandler):
    """Collects root attributes, prefix bindings and the first <path>."""

    def __init__(self) -> None:
        super().__init__()
        self.root_tag: str | None = None
        self.root_attrs: dict[str, str] = {}
        self.path_attrs: dict[str, str] | None = None
        self.path_count = 0
        self._android_prefixes = ["android"]

    def startElement(self, name, attrs):  # noqa: N802 - SAX API
        attrs = dict(attrs.items())
        for key, value in attrs.items():
            if key.startswith("xmlns:") and value == ANDROID_NS:
                prefix = key.split(":", 1)[1]
                if prefix not in self._android_prefixes:
                    self._android_prefixes.append(prefix)

        if self.root_tag is None:
            self.root_tag = _local(name)
            self.root_attrs = attrs
            return

        if _local(name) == _PATH_TAG:
            self.path_count += 1
            if self.path_attrs is None:
                self.path_attrs = attrs

    def android_attr(self, attrs: dict[str, str], name: str) -> str | None:
        for prefix in self._android_prefixes:
            value = attrs.get(f"{prefix}:{name}")
            if value is not None:
                return value
        return None


def _local(qname: str) -> str:
    return qname.rsplit(":", 1)[-1]


def _strip_dp(value: str | None, attr: str) -> str:
    if value is None:
        raise ParseError(f"<vector> has no android:{attr} attribute")
    value = value.strip()
    if value.endswith(_DP_SUFFIX):
        value = value[: -len(_DP_SUFFIX)].strip()
    try:
        float(value)
    except ValueError:
        raise ParseError(f"android:{attr} is not numeric: {value!r}") from None
    return value


def parse_vector_drawable(content: str | bytes) -> VectorGeometry:
    """Extract width, height, and the first path's data and fill color.

    Raises ParseError when the document is not well-formed XML, its root is
    not <vector>, width/height are missing, or it contains no <path>.
    """
    if isinstance(content, str):
        content = content.lstrip("\ufeff").encode("utf-8")

    handler = _VectorHandler()
    try:
        xml.sax.parseString(content, handler)
    except xml.sax.SAXException as e:
        raise ParseError(f"not well-formed XML: {e}") from e

    if handler.root_tag != _ROOT_TAG:
        raise ParseError(f"root element is <{handler.root_tag}>, expected <{_ROOT_TAG}>")

    width = _strip_dp(handler.android_attr(handler.root_attrs, "width"), "width")
    height = _strip_dp(handler.android_attr(handler.root_attrs, "height"), "height")

    if handler.path_attrs is None:
        raise ParseError("<vector> contains no <path> element")
    if handler.path_count > 1:
        logger.debug("Ignoring %d extra <path> elements", handler.path_count - 1)

    path_data = handler.android_attr(handler.path_attrs, "pathData") or ""
    fill_color = handler.android_attr(handler.path_attrs, "fillColor")
    if fill_color is not None and not fill_color.strip():
        fill_color = None

    return VectorGeometry(
        width=width,
        height=height,
        path_data=path_data,
        fill_color=fill_color.strip() if fill_color else None,
    )


def parse_vector_drawable_file(path: str | Path) -> VectorGeometry:
    """Read a drawable from disk and parse it."""
    try:
        content = Path(path).read_bytes()
    except OSError as e:
        raise SourceIOError(f"cannot read {path}: {e}") from e
    return parse_vector_drawable(content)
