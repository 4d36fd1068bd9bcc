"""Drawing session orchestration.

A session ties the drawing surface, the bitmap store and the character set
together and runs the export pipeline:

1. Select a character (saving the current drawing if anything is drawn)
2. Draw on the surface and save it into the store
3. Preview stored drawings as text
4. Export: assemble a FontModel and hand it to the encoder
"""

from handfont.config import HandfontSettings
from handfont.core.assembler import FontAssembler, ProgressCallback
from handfont.core.preview import PreviewComposer, PreviewResult
from handfont.core.store import BitmapStore, CharacterEntry
from handfont.domain import CharacterSet
from handfont.io import DrawingSurface, FontEncoder, ImageSurface
from handfont.utils import ExportLogger


class FontMakerSession:
    """One user's drawing session.

    Example:
        session = FontMakerSession()
        session.surface.pen_stroke([(100, 50), (100, 350)])
        session.save_current()
        data = session.export("MyHandFont")
    """

    def __init__(
        self,
        surface: DrawingSurface | None = None,
        store: BitmapStore | None = None,
        charset: CharacterSet | None = None,
        settings: HandfontSettings | None = None,
        encoder: FontEncoder | None = None,
    ) -> None:
        self.settings = settings or HandfontSettings()
        if surface is None:
            surface = ImageSurface(
                self.settings.surface.width,
                self.settings.surface.height,
                self.settings.surface.brush_size,
            )
        self.surface = surface
        self.store = store if store is not None else BitmapStore()
        self.charset = charset or CharacterSet()
        self.encoder = encoder or FontEncoder()
        self.export_logger = ExportLogger()
        self.assembler = FontAssembler(
            font_config=self.settings.font,
            extraction_config=self.settings.extraction,
            export_logger=self.export_logger,
        )
        self.composer = PreviewComposer(self.settings.preview)
        self.current_character = self.charset.all_characters()[0]

    def save_current(self) -> CharacterEntry:
        """Save the surface content for the current character.

        Raises:
            EmptyCanvasError: If nothing is drawn
        """
        return self.store.set(self.current_character, self.surface.current_bitmap())

    def select_character(self, character: str) -> None:
        """Switch to another character.

        A non-blank drawing is saved for the outgoing character first. The
        surface is then cleared and loaded with any stored drawing.
        """
        if not self.surface.current_bitmap().is_blank():
            self.save_current()

        self.current_character = character
        self.surface.clear()
        stored = self.store.get(character)
        if stored is not None:
            self.surface.load(stored)

    def next_character(self) -> str:
        """Advance to the next character of the set, wrapping at the end."""
        self.select_character(self.charset.next_character(self.current_character))
        return self.current_character

    def progress(self) -> tuple[int, int]:
        """Return (completed, total) over the character set."""
        return self.charset.progress(self.store)

    def preview(self, text: str) -> PreviewResult:
        """Compose a preview of text from the stored drawings."""
        return self.composer.compose(text, self.store)

    def export(
        self,
        font_name: str = "",
        progress_callback: ProgressCallback | None = None,
    ) -> bytes:
        """Vectorize every stored drawing and encode the font.

        Raises:
            NoGlyphsError: If nothing has been saved
            EncodingError: If the encoder fails
        """
        model = self.assembler.assemble_store(font_name, self.store, progress_callback)
        return self.encoder.encode(model)
