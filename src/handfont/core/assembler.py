"""Assembly of the in-memory font model from saved drawings.

Every drawing is vectorized again on each export:
bitmap -> StrokeExtractor -> strokes -> GlyphPathBuilder -> Glyph.
"""

import time
from collections.abc import Callable, Iterable

from handfont.config import ExtractionConfig, FontConfig
from handfont.core.extractor import StrokeExtractor
from handfont.core.path_builder import GlyphPathBuilder
from handfont.core.store import BitmapStore
from handfont.domain import NOTDEF, FontModel, Glyph, GlyphPath, RasterBitmap
from handfont.exceptions import NoGlyphsError
from handfont.utils import ExportLogger

ProgressCallback = Callable[[int, int, str], None]


class FontAssembler:
    """Builds a FontModel from (character, bitmap) pairs.

    Encoding the model into a binary font is left to FontEncoder.

    Example:
        assembler = FontAssembler()
        model = assembler.assemble_store("MyHandFont", store)
    """

    def __init__(
        self,
        font_config: FontConfig | None = None,
        extraction_config: ExtractionConfig | None = None,
        export_logger: ExportLogger | None = None,
    ) -> None:
        self.font_config = font_config or FontConfig()
        self.extractor = StrokeExtractor(extraction_config)
        self.export_logger = export_logger or ExportLogger()

    def build_notdef(self) -> Glyph:
        """Create the empty .notdef glyph."""
        return Glyph(
            character="",
            unicode=0,
            advance_width=self.font_config.advance_width,
            path=GlyphPath(),
            name=NOTDEF,
        )

    def vectorize(self, character: str, bitmap: RasterBitmap) -> Glyph:
        """Convert one drawing into a glyph.

        Args:
            character: The character drawn
            bitmap: Its bitmap

        Returns:
            Glyph with the drawing's strokes in font units
        """
        self.export_logger.log_glyph_start(character)
        start_time = time.time()

        strokes = self.extractor.extract(bitmap)
        builder = GlyphPathBuilder(bitmap.height, self.font_config.units_per_em)
        path = builder.build(strokes)

        self.export_logger.log_glyph_complete(
            character,
            strokes=len(path.polylines),
            points=path.point_count,
            duration_ms=(time.time() - start_time) * 1000,
        )
        return Glyph(
            character=character,
            unicode=ord(character),
            advance_width=self.font_config.advance_width,
            path=path,
        )

    def assemble(
        self,
        font_name: str,
        glyph_specs: Iterable[tuple[str, RasterBitmap]],
        progress_callback: ProgressCallback | None = None,
    ) -> FontModel:
        """Assemble a font model.

        Args:
            font_name: Family name; the configured default when empty
            glyph_specs: (character, bitmap) pairs in glyph order
            progress_callback: Called with (completed, total, character)
                after each glyph

        Returns:
            FontModel whose first glyph is .notdef

        Raises:
            NoGlyphsError: If glyph_specs is empty
        """
        specs = list(glyph_specs)
        if not specs:
            raise NoGlyphsError()

        self.export_logger.reset()
        stats = self.export_logger.stats
        stats.start_time = time.time()

        glyphs = [self.build_notdef()]
        for index, (character, bitmap) in enumerate(specs, start=1):
            glyphs.append(self.vectorize(character, bitmap))
            if progress_callback is not None:
                progress_callback(index, len(specs), character)

        stats.end_time = time.time()

        return FontModel(
            family_name=font_name or self.font_config.default_family_name,
            style_name=self.font_config.style_name,
            units_per_em=self.font_config.units_per_em,
            ascender=self.font_config.ascender,
            descender=self.font_config.descender,
            glyphs=tuple(glyphs),
        )

    def assemble_store(
        self,
        font_name: str,
        store: BitmapStore,
        progress_callback: ProgressCallback | None = None,
    ) -> FontModel:
        """Assemble every completed drawing of a store, in insertion order."""
        specs = [(entry.character, entry.bitmap) for entry in store if entry.completed]
        return self.assemble(font_name, specs, progress_callback)
