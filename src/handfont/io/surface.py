"""Pillow-backed drawing surface.

The surface stands in for an interactive canvas: pen strokes paint black
round-capped lines, the eraser clears squares to transparent, and the
current content can be captured as an immutable RasterBitmap.
"""

from collections.abc import Sequence
from typing import Protocol

from PIL import Image, ImageDraw

from handfont.domain import RasterBitmap

INK = (0, 0, 0, 255)
PAPER = (255, 255, 255, 255)
CLEAR = (0, 0, 0, 0)


class DrawingSurface(Protocol):
    """What the session needs from a drawing surface."""

    def current_bitmap(self) -> RasterBitmap: ...

    def clear(self) -> None: ...

    def load(self, bitmap: RasterBitmap) -> None: ...


class ImageSurface:
    """A fixed-size RGBA canvas with pen and eraser tools."""

    def __init__(self, width: int = 400, height: int = 400, brush_size: int = 5) -> None:
        self.width = width
        self.height = height
        self.brush_size = brush_size
        self._image = Image.new("RGBA", (width, height), PAPER)

    def pen_stroke(self, points: Sequence[tuple[float, float]], width: int | None = None) -> None:
        """Paint a black line through points with round caps and joins."""
        if not points:
            return
        size = width or self.brush_size
        draw = ImageDraw.Draw(self._image)
        radius = size / 2
        if len(points) > 1:
            draw.line(list(points), fill=INK, width=size, joint="curve")
        # round caps
        for x, y in (points[0], points[-1]):
            draw.ellipse((x - radius, y - radius, x + radius, y + radius), fill=INK)

    def erase(self, x: float, y: float, size: int | None = None) -> None:
        """Clear a square of side 2*size centred on (x, y) to transparent."""
        half = size or self.brush_size
        draw = ImageDraw.Draw(self._image)
        draw.rectangle((x - half, y - half, x + half - 1, y + half - 1), fill=CLEAR)

    def clear(self) -> None:
        """Fill the canvas with white."""
        self._image.paste(PAPER, (0, 0, self.width, self.height))

    def load(self, bitmap: RasterBitmap) -> None:
        """Replace the canvas content with a stored bitmap."""
        if bitmap.size != (self.width, self.height):
            raise ValueError(
                f"Bitmap is {bitmap.width}x{bitmap.height}, "
                f"surface is {self.width}x{self.height}"
            )
        self._image = bitmap.to_image()

    def current_bitmap(self) -> RasterBitmap:
        """Capture the canvas content."""
        return RasterBitmap.from_image(self._image)
