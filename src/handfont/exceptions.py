"""Exception hierarchy for Handfont."""


class HandfontError(Exception):
    """Base exception for all Handfont errors."""

    pass


class CanvasError(HandfontError):
    """Errors related to captured drawings."""

    pass


class EmptyCanvasError(CanvasError):
    """Save attempted on a bitmap with no drawn pixels."""

    def __init__(self, character: str) -> None:
        self.character = character
        super().__init__(f"Nothing drawn for '{character}': draw something before saving")


class BitmapSizeError(CanvasError):
    """Bitmap dimensions differ from the dimensions used by the session."""

    def __init__(
        self,
        character: str,
        expected: tuple[int, int],
        actual: tuple[int, int],
    ) -> None:
        self.character = character
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Bitmap for '{character}' is {actual[0]}x{actual[1]}, "
            f"expected {expected[0]}x{expected[1]}"
        )


class ImageLoadError(HandfontError):
    """Error reading a glyph image from disk."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load image '{path}': {reason}")


class ExportError(HandfontError):
    """Errors raised while turning drawings into a font."""

    pass


class NoGlyphsError(ExportError):
    """Export attempted with zero completed characters."""

    def __init__(self) -> None:
        super().__init__("Draw at least one character before generating a font")


class EncodingError(ExportError):
    """The binary font encoder failed."""

    def __init__(self, family_name: str, reason: str) -> None:
        self.family_name = family_name
        self.reason = reason
        super().__init__(f"Failed to encode font '{family_name}': {reason}")


class FontSaveError(ExportError):
    """Error saving an encoded font file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to save font '{path}': {reason}")
