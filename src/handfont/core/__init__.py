"""Core processing algorithms for handfont.

This module contains the raster to vector glyph pipeline:

- Bitmap storage (one drawing per character, completion tracking)
- Stroke extraction (grid sampling, nearest-neighbour chaining)
- Glyph path building (raster space to font units, y flipped)
- Font assembly (glyphs plus fixed metrics, .notdef first)
- Text preview (scaled thumbnails of stored drawings)

Key classes:
- BitmapStore: Keyed container of saved drawings
- StrokeExtractor: Bitmap -> strokes
- GlyphPathBuilder: Strokes -> GlyphPath
- FontAssembler: Drawings -> FontModel
- PreviewComposer: Text -> preview raster
- FontMakerSession: Surface, store and export wired together
"""

from handfont.core.assembler import FontAssembler
from handfont.core.extractor import StrokeExtractor
from handfont.core.path_builder import GlyphPathBuilder
from handfont.core.preview import CellKind, PreviewCell, PreviewComposer, PreviewResult
from handfont.core.session import FontMakerSession
from handfont.core.store import BitmapStore, CharacterEntry

__all__ = [
    # Storage
    "BitmapStore",
    "CharacterEntry",
    # Vectorization
    "FontAssembler",
    "GlyphPathBuilder",
    "StrokeExtractor",
    # Preview
    "CellKind",
    "PreviewCell",
    "PreviewComposer",
    "PreviewResult",
    # Session
    "FontMakerSession",
]
