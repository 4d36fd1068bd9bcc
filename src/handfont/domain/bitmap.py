"""Raster bitmap captured from the drawing surface.

A bitmap is an immutable RGBA pixel grid. The array is stored with numpy's
write flag cleared, so code holding a bitmap can share it freely.
"""

from dataclasses import dataclass
from typing import Any

import numpy as np
from PIL import Image

WHITE = 255


@dataclass(frozen=True, eq=False)
class RasterBitmap:
    """A fixed-size RGBA raster.

    Attributes:
        pixels: Read-only uint8 array of shape (height, width, 4)
    """

    pixels: np.ndarray

    def __post_init__(self) -> None:
        array = np.array(self.pixels, dtype=np.uint8, copy=True)
        if array.ndim != 3 or array.shape[2] != 4:
            raise ValueError(
                f"Expected an array of shape (height, width, 4), got {array.shape}"
            )
        array.setflags(write=False)
        object.__setattr__(self, "pixels", array)

    @property
    def width(self) -> int:
        """Width in pixels."""
        return int(self.pixels.shape[1])

    @property
    def height(self) -> int:
        """Height in pixels."""
        return int(self.pixels.shape[0])

    @property
    def size(self) -> tuple[int, int]:
        """(width, height) in pixels."""
        return (self.width, self.height)

    def pixel(self, x: int, y: int) -> tuple[int, int, int, int]:
        """Return the (r, g, b, a) channels at column x, row y."""
        r, g, b, a = self.pixels[y, x]
        return (int(r), int(g), int(b), int(a))

    def is_blank(self) -> bool:
        """Check whether every pixel is pure white, ignoring alpha.

        Returns:
            True if no pixel has a non-white (r, g, b) triple
        """
        return bool(np.all(self.pixels[:, :, :3] == WHITE))

    def to_image(self) -> Image.Image:
        """Convert to a new Pillow RGBA image."""
        return Image.fromarray(self.pixels.copy())

    @classmethod
    def from_image(cls, image: Image.Image) -> "RasterBitmap":
        """Capture a Pillow image of any mode as an RGBA bitmap."""
        return cls(np.asarray(image.convert("RGBA")))

    @classmethod
    def blank(cls, width: int, height: int) -> "RasterBitmap":
        """Create an opaque white bitmap."""
        return cls(np.full((height, width, 4), WHITE, dtype=np.uint8))

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, RasterBitmap):
            return NotImplemented
        return np.array_equal(self.pixels, other.pixels)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"RasterBitmap(width={self.width}, height={self.height})"
