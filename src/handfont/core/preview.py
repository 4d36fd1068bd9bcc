"""Raster text preview built from saved drawings.

The preview lays characters out left to right as scaled thumbnails of the
stored bitmaps. It reads the store directly and never vectorizes.
"""

from dataclasses import dataclass, field
from enum import Enum

from PIL import Image, ImageDraw

from handfont.config import PreviewConfig
from handfont.core.store import BitmapStore


class CellKind(str, Enum):
    """What was drawn in a preview cell."""

    GLYPH = "glyph"
    PLACEHOLDER = "placeholder"


@dataclass(frozen=True)
class PreviewCell:
    """A drawn cell of the preview.

    Attributes:
        character: Character the cell stands for
        x: Left edge in preview pixels
        y: Top edge in preview pixels
        size: Cell width and height
        kind: Thumbnail of a drawing or placeholder block
    """

    character: str
    x: int
    y: int
    size: int
    kind: CellKind


@dataclass
class PreviewResult:
    """Outcome of composing a preview.

    Exactly one of image and message is set.
    """

    image: Image.Image | None = None
    message: str | None = None
    cells: list[PreviewCell] = field(default_factory=list)


class PreviewComposer:
    """Lays a string out into a flat preview raster.

    Example:
        composer = PreviewComposer()
        result = composer.compose("Hello", store)
        if result.image is not None:
            result.image.save("preview.png")
    """

    def __init__(self, config: PreviewConfig | None = None) -> None:
        self.config = config or PreviewConfig()

    def compose(self, text: str, store: BitmapStore) -> PreviewResult:
        """Compose a preview of text.

        Args:
            text: Preview string
            store: Saved drawings

        Returns:
            PreviewResult holding an image, or a message while the store
            is empty
        """
        config = self.config
        if store.size() == 0:
            return PreviewResult(message=config.empty_message)

        image = Image.new("RGBA", (config.width, config.height), "white")
        draw = ImageDraw.Draw(image)
        cells: list[PreviewCell] = []

        size = config.char_width
        x = config.start_x
        top = config.baseline_y - 25

        for character in text:
            bitmap = store.get(character)
            if bitmap is not None:
                thumbnail = bitmap.to_image().resize((size, size), Image.Resampling.BILINEAR)
                image.alpha_composite(thumbnail, dest=(x, top))
                cells.append(PreviewCell(character, x, top, size, CellKind.GLYPH))
                x += size + config.gutter
            elif character == " ":
                x += size
            else:
                draw.rectangle((x, top, x + size - 1, top + size - 1), fill=config.placeholder_color)
                cells.append(PreviewCell(character, x, top, size, CellKind.PLACEHOLDER))
                x += size + config.gutter

            if x > config.width - size:
                break

        return PreviewResult(image=image, cells=cells)
