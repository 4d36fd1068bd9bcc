"""I/O layer for handfont.

This module holds the collaborators at the edge of the pipeline:

- Reading drawings from image files into bitmaps
- A Pillow-backed drawing surface
- Encoding font models into TrueType bytes with fonttools
- Writing encoded fonts to disk

Key classes:
- BitmapReader: Load drawings from a directory of images
- ImageSurface: Pen/eraser canvas producing bitmaps
- FontEncoder: FontModel -> TrueType bytes
- FontWriter: Save font bytes
"""

from handfont.io.reader import BitmapReader, character_for_stem, stem_for_character
from handfont.io.surface import DrawingSurface, ImageSurface
from handfont.io.writer import FontEncoder, FontWriter

__all__ = [
    "BitmapReader",
    "DrawingSurface",
    "FontEncoder",
    "FontWriter",
    "ImageSurface",
    "character_for_stem",
    "stem_for_character",
]
