"""Converters from domain models to fonttools representations.

This module builds fonttools objects from the in-memory FontModel:
glyph outlines are replayed through a TTGlyphPen and the tables are set up
with FontBuilder.
"""

import re

from fontTools.fontBuilder import FontBuilder
from fontTools.misc.roundTools import otRound
from fontTools.pens.ttGlyphPen import TTGlyphPen
from fontTools.ttLib import TTFont
from fontTools.ttLib.tables._g_l_y_f import Glyph as TTGlyph

from handfont.domain import FontModel, Glyph


def domain_glyph_to_fonttools(glyph: Glyph) -> TTGlyph:
    """Convert a domain glyph into a TrueType glyf entry.

    Each open polyline becomes one contour; TrueType contours are
    implicitly closed by the rasterizer.

    Args:
        glyph: Domain glyph

    Returns:
        fonttools glyf Glyph
    """
    pen = TTGlyphPen(None)
    glyph.draw(pen)
    return pen.glyph()


def left_side_bearing(glyph: Glyph) -> int:
    """Left side bearing of a glyph: its rounded minimum x, 0 when empty."""
    xs = [point.x for polyline in glyph.path.polylines for point in polyline.points]
    return otRound(min(xs)) if xs else 0


def postscript_name(family_name: str, style_name: str) -> str:
    """Build a PostScript name ("My Hand Font" + "Regular" -> "MyHandFont-Regular")."""
    family = re.sub(r"[^A-Za-z0-9]", "", family_name) or "Untitled"
    style = re.sub(r"[^A-Za-z0-9]", "", style_name) or "Regular"
    return f"{family}-{style}"[:63]


def font_model_to_ttfont(model: FontModel) -> TTFont:
    """Build a TrueType font from a font model.

    Args:
        model: Font model with .notdef first

    Returns:
        TTFont ready to be saved
    """
    builder = FontBuilder(model.units_per_em, isTTF=True)
    builder.setupGlyphOrder(model.glyph_order)
    builder.setupCharacterMap(model.character_map)
    builder.setupGlyf({glyph.name: domain_glyph_to_fonttools(glyph) for glyph in model.glyphs})
    builder.setupHorizontalMetrics(
        {glyph.name: (glyph.advance_width, left_side_bearing(glyph)) for glyph in model.glyphs}
    )
    builder.setupHorizontalHeader(ascent=model.ascender, descent=model.descender)
    builder.setupNameTable(
        {
            "familyName": model.family_name,
            "styleName": model.style_name,
            "psName": postscript_name(model.family_name, model.style_name),
        }
    )
    builder.setupOS2(
        sTypoAscender=model.ascender,
        sTypoDescender=model.descender,
        usWinAscent=model.ascender,
        usWinDescent=-model.descender,
    )
    builder.setupPost()
    return builder.font
