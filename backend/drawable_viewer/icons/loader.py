"""IconLoader: turns a file path into a displayable icon, or nothing.

Vector drawables (.xml) go through parse -> synthesize -> rasterize; every
other file is handed to Pillow. Both branches meet at a RasterImage before
the optional thumbnail resize. Every PreviewError is absorbed here: callers
see an absent icon and render their own placeholder.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from drawable_viewer.config import Settings, settings as default_settings
from drawable_viewer.errors import PreviewError
from drawable_viewer.models.geometry import RasterImage
from drawable_viewer.svg.synthesizer import synthesize_svg
from drawable_viewer.utils.imaging import decode_raster, scale_nearest
from drawable_viewer.utils.rasterizer import Rasterizer
from drawable_viewer.vector.parser import parse_vector_drawable_file

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class IconRequest:
    source_path: Path
    # None = native resolution
    target_size: int | None = None

    def __post_init__(self) -> None:
        if self.target_size is not None and self.target_size <= 0:
            raise ValueError(f"target_size must be positive, got {self.target_size}")


@dataclass(frozen=True)
class Icon:
    source: Path
    image: RasterImage

    @property
    def width(self) -> int:
        return self.image.width

    @property
    def height(self) -> int:
        return self.image.height

    def to_pil(self):
        return self.image.to_pil()

    def to_png(self) -> bytes:
        return self.image.to_png()


@dataclass
class LoadResult:
    """Outcome of one load. Exactly one of icon/error is set."""

    request: IconRequest
    icon: Icon | None = None
    error: PreviewError | None = None

    @property
    def ok(self) -> bool:
        return self.icon is not None

    @property
    def stage(self) -> str | None:
        return self.error.stage if self.error is not None else None


class IconLoader:
    """Stateless facade; safe to share between threads."""

    def __init__(self, settings: Settings | None = None, rasterizer: Rasterizer | None = None) -> None:
        self.settings = settings or default_settings
        self.rasterizer = rasterizer or Rasterizer()

    def is_vector(self, path: str | Path) -> bool:
        return str(path).lower().endswith(self.settings.vector_suffix.lower())

    def load(self, request: IconRequest) -> LoadResult:
        """Run the pipeline for one request, keeping the failure for diagnostics."""
        try:
            image = self._decode(request.source_path)
            if request.target_size is not None:
                image = scale_nearest(image, request.target_size)
        except PreviewError as e:
            logger.warning(
                "No icon for %s (%s stage): %s", request.source_path, e.stage, e,
            )
            return LoadResult(request=request, error=e)
        return LoadResult(request=request, icon=Icon(source=request.source_path, image=image))

    def load_thumbnail(self, path: str | Path) -> Icon | None:
        """Fixed-size square icon, nearest-neighbour scaled."""
        request = IconRequest(Path(path), target_size=self.settings.thumbnail_size)
        return self.load(request).icon

    def load_original(self, path: str | Path) -> Icon | None:
        """Icon at native resolution."""
        return self.load(IconRequest(Path(path))).icon

    def synthesize(self, path: str | Path) -> str | None:
        """Intermediate SVG for a vector drawable, or None."""
        if not self.is_vector(path):
            return None
        try:
            return synthesize_svg(parse_vector_drawable_file(path))
        except PreviewError as e:
            logger.warning("No SVG for %s (%s stage): %s", path, e.stage, e)
            return None

    def _decode(self, path: Path) -> RasterImage:
        if self.is_vector(path):
            geometry = parse_vector_drawable_file(path)
            return self.rasterizer.render(synthesize_svg(geometry))
        return decode_raster(path)


def load_thumbnail(path: str | Path) -> Icon | None:
    return IconLoader().load_thumbnail(path)


def load_original(path: str | Path) -> Icon | None:
    return IconLoader().load_original(path)
