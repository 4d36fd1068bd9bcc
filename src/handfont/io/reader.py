"""Bitmap reader for loading glyph drawings from image files.

Drawings are stored one per file. The file stem names the character, either
as the character itself ("A.png") or as a code point ("U+0041.png").
"""

import re
from collections.abc import Iterator
from pathlib import Path

from PIL import Image, UnidentifiedImageError

from handfont.domain import RasterBitmap
from handfont.exceptions import ImageLoadError

_CODEPOINT_STEM = re.compile(r"^U\+([0-9A-Fa-f]{4,6})$")


def character_for_stem(stem: str) -> str | None:
    """Return the character a file stem names, or None.

    Args:
        stem: File name without extension

    Returns:
        The character for "A" or "U+0041" style stems
    """
    match = _CODEPOINT_STEM.match(stem)
    if match:
        return chr(int(match.group(1), 16))
    if len(stem) == 1:
        return stem
    return None


def stem_for_character(character: str) -> str:
    """File stem used when saving a drawing ("U+0041")."""
    return f"U+{ord(character):04X}"


class BitmapReader:
    """Loads glyph drawings from a directory of images.

    Example:
        reader = BitmapReader(Path("drawings"))
        for character, bitmap in reader.iter_bitmaps():
            store.set(character, bitmap)
    """

    def __init__(self, directory: Path, pattern: str = "*.png") -> None:
        self._directory = directory
        self._pattern = pattern

    @staticmethod
    def load(path: Path) -> RasterBitmap:
        """Load one image file as a bitmap.

        Raises:
            ImageLoadError: If the file is missing or not an image
        """
        try:
            with Image.open(path) as image:
                return RasterBitmap.from_image(image)
        except (OSError, UnidentifiedImageError) as e:
            raise ImageLoadError(str(path), str(e)) from e

    def iter_paths(self) -> Iterator[tuple[str, Path]]:
        """Yield (character, path) for files whose stem names a character.

        Files are visited in sorted name order.

        Raises:
            FileNotFoundError: If the directory does not exist
        """
        if not self._directory.is_dir():
            raise FileNotFoundError(f"Glyph directory not found: {self._directory}")

        for path in sorted(self._directory.glob(self._pattern)):
            character = character_for_stem(path.stem)
            if character is not None:
                yield character, path

    def iter_bitmaps(self) -> Iterator[tuple[str, RasterBitmap]]:
        """Yield (character, bitmap) for every drawing in the directory."""
        for character, path in self.iter_paths():
            yield character, self.load(path)
