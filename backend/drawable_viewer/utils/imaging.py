"""Pillow helpers: decode non-vector images and scale bitmaps."""

from __future__ import annotations

import logging
from pathlib import Path

from PIL import Image, UnidentifiedImageError

from drawable_viewer.errors import DecodeError, SourceIOError
from drawable_viewer.models.geometry import RasterImage

logger = logging.getLogger(__name__)


def decode_raster(path: str | Path) -> RasterImage:
    """Decode PNG/JPEG/GIF/... into RGBA pixels."""
    path = Path(path)
    if not path.is_file():
        raise SourceIOError(f"no such file: {path}")
    try:
        with Image.open(path) as image:
            return RasterImage.from_pil(image)
    except (FileNotFoundError, PermissionError) as e:
        raise SourceIOError(f"cannot read {path}: {e}") from e
    except UnidentifiedImageError as e:
        raise DecodeError(f"unrecognised image format: {path}") from e
    except Image.DecompressionBombError as e:
        raise DecodeError(f"image too large to decode: {path}: {e}") from e
    except (OSError, ValueError) as e:
        raise DecodeError(f"cannot decode {path}: {e}") from e


def scale_nearest(image: RasterImage, size: int) -> RasterImage:
    """Scale to a size x size square with nearest-neighbour sampling.

    Aspect ratio is not preserved.
    """
    if size <= 0:
        raise ValueError(f"size must be positive, got {size}")
    if image.width == size and image.height == size:
        return image
    scaled = image.to_pil().resize((size, size), Image.Resampling.NEAREST)
    return RasterImage.from_pil(scaled)
