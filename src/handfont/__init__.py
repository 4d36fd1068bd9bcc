"""Handfont - Turn hand-drawn glyphs into a font.

Handfont vectorizes per-character drawings into open polylines and packs
them into a TrueType font. Drawings are sampled on a grid, the ink samples
are chained into strokes, and the strokes are mapped into font units.

Example:
    $ handfont build drawings/ --name MyHandFont

This will create MyHandFont.ttf from drawings/A.png, drawings/U+0062.png, etc.
"""

__version__ = "0.1.0"

__all__ = ["__version__"]
