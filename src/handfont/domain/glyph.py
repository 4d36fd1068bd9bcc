"""Vector glyph and font models.

These types describe the in-memory font handed to the binary encoder:

- Point: A 2D point in raster or font-unit space
- Stroke: An ordered run of points that were chained together
- Polyline: One open polyline in font units
- GlyphPath: All polylines of one glyph
- Glyph: A character with its unicode mapping, advance width and path
- FontModel: Family metadata, vertical metrics and the ordered glyph list
"""

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any

from fontTools.agl import UV2AGL

NOTDEF = ".notdef"


@dataclass(frozen=True, slots=True)
class Point:
    """A point in 2D space.

    Attributes:
        x: X coordinate
        y: Y coordinate
    """

    x: float
    y: float

    def to_tuple(self) -> tuple[float, float]:
        """Convert to simple (x, y) tuple."""
        return (self.x, self.y)


Stroke = tuple[Point, ...]


@dataclass(frozen=True)
class Polyline:
    """An open polyline: a move to the first point, then lines to the rest.

    Attributes:
        points: Points in font units, in drawing order
    """

    points: tuple[Point, ...]

    def commands(self) -> Iterator[tuple[str, tuple[float, float]]]:
        """Yield ("moveTo", xy) followed by one ("lineTo", xy) per remaining point."""
        if not self.points:
            return
        yield ("moveTo", self.points[0].to_tuple())
        for point in self.points[1:]:
            yield ("lineTo", point.to_tuple())

    def draw(self, pen: Any) -> None:
        """Replay the polyline on a fontTools segment pen.

        The path is ended with ``endPath`` so it stays open.
        """
        if len(self.points) < 2:
            return
        for operator, xy in self.commands():
            getattr(pen, operator)(xy)
        pen.endPath()


@dataclass(frozen=True)
class GlyphPath:
    """Ordered set of open polylines forming one glyph."""

    polylines: tuple[Polyline, ...] = ()

    def is_empty(self) -> bool:
        """Check if the path has nothing to draw."""
        return len(self.polylines) == 0

    @property
    def point_count(self) -> int:
        """Total number of points across all polylines."""
        return sum(len(p.points) for p in self.polylines)

    def draw(self, pen: Any) -> None:
        """Replay every polyline on a fontTools segment pen."""
        for polyline in self.polylines:
            polyline.draw(pen)


def glyph_name_for(unicode: int) -> str:
    """Return the production glyph name for a code point.

    Uses the Adobe Glyph List where it has an entry ("A", "exclam"),
    falling back to "uniXXXX".

    Args:
        unicode: Unicode code point

    Returns:
        Glyph name
    """
    if unicode == 0:
        return NOTDEF
    return UV2AGL.get(unicode, f"uni{unicode:04X}")


@dataclass(frozen=True)
class Glyph:
    """A single character's vector representation.

    Attributes:
        character: The character drawn ("" for .notdef)
        unicode: Unicode code point (0 for .notdef)
        advance_width: Horizontal advance in font units
        path: Open polylines in font units
        name: Glyph name; derived from the code point when omitted
    """

    character: str
    unicode: int
    advance_width: int
    path: GlyphPath = field(default_factory=GlyphPath)
    name: str = ""

    def __post_init__(self) -> None:
        if not self.name:
            object.__setattr__(self, "name", glyph_name_for(self.unicode))

    def draw(self, pen: Any) -> None:
        """Draw the glyph outline on a fontTools segment pen."""
        self.path.draw(pen)


@dataclass(frozen=True)
class FontModel:
    """In-memory font handed to the binary encoder.

    Attributes:
        family_name: Font family name
        style_name: Style name, "Regular" for generated fonts
        units_per_em: Design units per em
        ascender: Ascender in font units
        descender: Descender in font units (negative)
        glyphs: Ordered glyphs, .notdef first
    """

    family_name: str
    style_name: str
    units_per_em: int
    ascender: int
    descender: int
    glyphs: tuple[Glyph, ...]

    def __post_init__(self) -> None:
        if not self.glyphs or self.glyphs[0].name != NOTDEF:
            raise ValueError("The first glyph of a font must be .notdef")

    @property
    def glyph_order(self) -> list[str]:
        """Glyph names in font order."""
        return [glyph.name for glyph in self.glyphs]

    @property
    def character_map(self) -> dict[int, str]:
        """Map from code point to glyph name, excluding .notdef."""
        return {glyph.unicode: glyph.name for glyph in self.glyphs if glyph.unicode != 0}

    def get_glyph(self, character: str) -> Glyph | None:
        """Look up the glyph for a character."""
        for glyph in self.glyphs:
            if glyph.character == character and glyph.unicode != 0:
                return glyph
        return None
