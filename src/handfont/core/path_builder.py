"""Mapping of raster strokes into font-unit glyph paths."""

from handfont.domain import GlyphPath, Point, Polyline, Stroke


class GlyphPathBuilder:
    """Maps raster strokes to open polylines in font units.

    Raster space has its origin at the top-left corner with y pointing down;
    font space has its origin on the baseline with y pointing up. Both axes
    are scaled by units_per_em / height.

    Example:
        builder = GlyphPathBuilder(height=400, units_per_em=1000)
        path = builder.build(strokes)
    """

    def __init__(self, height: int, units_per_em: int = 1000) -> None:
        if height <= 0:
            raise ValueError(f"Bitmap height must be positive, got {height}")
        self.height = height
        self.units_per_em = units_per_em
        self.scale = units_per_em / height

    def to_font_units(self, point: Point) -> Point:
        """Map a raster point to font units, flipping the y axis."""
        return Point(point.x * self.scale, (self.height - point.y) * self.scale)

    def build(self, strokes: list[Stroke]) -> GlyphPath:
        """Build a glyph path with one polyline per stroke.

        Strokes with fewer than two points are skipped.

        Args:
            strokes: Strokes in raster pixel space

        Returns:
            GlyphPath, empty when no stroke has two points
        """
        polylines = tuple(
            Polyline(tuple(self.to_font_units(p) for p in stroke))
            for stroke in strokes
            if len(stroke) > 1
        )
        return GlyphPath(polylines)
