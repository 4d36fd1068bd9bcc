"""Domain models for handfont.

This module contains the value types that flow through the drawing to font
pipeline. All models are designed to be:

- Immutable (frozen dataclasses, read-only pixel arrays)
- Independent of the drawing surface and of fonttools table details

Key classes:
- RasterBitmap: An RGBA pixel grid captured from the drawing surface
- Point: A 2D point
- Polyline / GlyphPath: Open polylines in font units
- Glyph: A character with unicode mapping, advance width and path
- FontModel: Family metadata and ordered glyphs, .notdef first
- CharacterSet: Ordered characters a user can draw
"""

from handfont.domain.bitmap import RasterBitmap
from handfont.domain.charset import CharacterSet
from handfont.domain.glyph import (
    NOTDEF,
    FontModel,
    Glyph,
    GlyphPath,
    Point,
    Polyline,
    Stroke,
    glyph_name_for,
)

__all__: list[str] = [
    "NOTDEF",
    # Raster
    "RasterBitmap",
    # Vector
    "Point",
    "Stroke",
    "Polyline",
    "GlyphPath",
    "Glyph",
    "FontModel",
    "glyph_name_for",
    # Characters
    "CharacterSet",
]
