"""Binary font encoding and font file writing.

FontEncoder turns a FontModel into TrueType bytes; FontWriter puts those
bytes on disk.
"""

import io
from pathlib import Path

import structlog

from handfont.domain import FontModel
from handfont.exceptions import EncodingError, FontSaveError
from handfont.io.converter import font_model_to_ttfont

logger = structlog.get_logger(__name__)


class FontEncoder:
    """Encodes font models as TrueType font files.

    Example:
        data = FontEncoder().encode(model)
    """

    def encode(self, model: FontModel) -> bytes:
        """Encode a font model.

        Args:
            model: Font model to encode

        Returns:
            The font file contents

        Raises:
            EncodingError: If fonttools cannot build or compile the font
        """
        try:
            font = font_model_to_ttfont(model)
            buffer = io.BytesIO()
            font.save(buffer)
        except Exception as e:
            raise EncodingError(model.family_name, str(e)) from e

        data = buffer.getvalue()
        logger.info(
            "Font encoded",
            family=model.family_name,
            glyphs=len(model.glyphs),
            size_bytes=len(data),
        )
        return data


class FontWriter:
    """Writes encoded fonts to disk.

    Example:
        writer = FontWriter(FontWriter.default_path("MyHandFont"))
        writer.write(data)
    """

    def __init__(self, output_path: Path) -> None:
        """Initialize the font writer.

        Args:
            output_path: Path where the font will be saved
        """
        self._output_path = output_path

    @property
    def output_path(self) -> Path:
        return self._output_path

    def write(self, data: bytes) -> Path:
        """Write font bytes to the output path.

        Raises:
            FontSaveError: If the file cannot be written
        """
        try:
            self._output_path.parent.mkdir(parents=True, exist_ok=True)
            self._output_path.write_bytes(data)
        except OSError as e:
            raise FontSaveError(str(self._output_path), str(e)) from e
        return self._output_path

    @staticmethod
    def default_path(font_name: str, directory: Path | None = None) -> Path:
        """Default output path for a family: <directory>/<font_name>.ttf."""
        return (directory or Path.cwd()) / f"{font_name}.ttf"
