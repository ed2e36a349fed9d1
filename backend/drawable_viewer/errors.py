"""Error taxonomy for the drawable preview pipeline.

Each stage raises one of these. IconLoader is the only place that catches
them, turning any failure into an absent icon.
"""

from __future__ import annotations


class PreviewError(Exception):
    """Base class for every failure inside the preview pipeline."""

    stage = "preview"


class SourceIOError(PreviewError):
    """Source file is missing or unreadable."""

    stage = "io"


class ParseError(PreviewError):
    """Malformed or unsupported vector drawable XML."""

    stage = "parse"


class RasterizationError(PreviewError):
    """CairoSVG could not render the document."""

    stage = "rasterize"


class DecodeError(PreviewError):
    """Pillow could not decode a non-vector image."""

    stage = "decode"
