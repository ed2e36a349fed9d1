"""Value types flowing through the preview pipeline."""

from __future__ import annotations

import io
from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray
from PIL import Image


@dataclass(frozen=True)
class VectorGeometry:
    """Single top-level shape extracted from a vector drawable.

    width/height are numeric strings with the "dp" unit already stripped.
    Only the first path of the drawable is modeled.
    """

    width: str
    height: str
    path_data: str = ""
    fill_color: str | None = None


@dataclass(frozen=True, eq=False)
class RasterImage:
    """Decoded bitmap: an (height, width, 4) uint8 RGBA array."""

    pixels: NDArray[np.uint8]

    @property
    def width(self) -> int:
        return int(self.pixels.shape[1])

    @property
    def height(self) -> int:
        return int(self.pixels.shape[0])

    @classmethod
    def from_pil(cls, image: Image.Image) -> RasterImage:
        return cls(pixels=np.array(image.convert("RGBA"), dtype=np.uint8))

    @classmethod
    def from_png(cls, png_data: bytes) -> RasterImage:
        return cls.from_pil(Image.open(io.BytesIO(png_data)))

    def to_pil(self) -> Image.Image:
        return Image.fromarray(self.pixels)

    def to_png(self) -> bytes:
        buf = io.BytesIO()
        self.to_pil().save(buf, format="PNG")
        return buf.getvalue()

    def pixel(self, x: int, y: int) -> tuple[int, int, int, int]:
        """RGBA value at column x, row y."""
        r, g, b, a = self.pixels[y, x]
        return (int(r), int(g), int(b), int(a))
