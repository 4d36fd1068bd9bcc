"""Per-character bitmap storage.

The store is the single owner of every saved drawing. Entries are created or
overwritten by explicit saves and never removed during a session.
"""

import threading
from collections.abc import Iterator
from dataclasses import dataclass

import structlog

from handfont.domain import RasterBitmap
from handfont.exceptions import BitmapSizeError, EmptyCanvasError

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class CharacterEntry:
    """A saved drawing.

    Attributes:
        character: The character the drawing belongs to
        bitmap: The captured bitmap
        completed: Set when the entry is saved, never cleared
    """

    character: str
    bitmap: RasterBitmap
    completed: bool = True

    @property
    def unicode(self) -> int:
        """Code point of the character."""
        return ord(self.character)


class BitmapStore:
    """Keyed container holding one bitmap per character.

    Iteration follows insertion order so glyphs are assembled
    deterministically. Writes to one character are serialized with a
    per-character lock.

    Example:
        store = BitmapStore()
        store.set("A", surface.current_bitmap())
        store.get("A")
    """

    def __init__(self) -> None:
        self._entries: dict[str, CharacterEntry] = {}
        self._size: tuple[int, int] | None = None
        self._locks: dict[str, threading.Lock] = {}
        self._locks_guard = threading.Lock()

    @staticmethod
    def is_blank(bitmap: RasterBitmap) -> bool:
        """Check if a bitmap has no drawn pixels (all white, any alpha)."""
        return bitmap.is_blank()

    def _lock_for(self, character: str) -> threading.Lock:
        with self._locks_guard:
            if character not in self._locks:
                self._locks[character] = threading.Lock()
            return self._locks[character]

    def set(self, character: str, bitmap: RasterBitmap) -> CharacterEntry:
        """Store or overwrite the drawing for a character.

        Args:
            character: A single character
            bitmap: The captured drawing

        Returns:
            The stored entry

        Raises:
            ValueError: If character is not exactly one code point
            EmptyCanvasError: If the bitmap is blank
            BitmapSizeError: If the bitmap size differs from earlier saves
        """
        if len(character) != 1:
            raise ValueError(f"Expected a single character, got {character!r}")

        if self.is_blank(bitmap):
            raise EmptyCanvasError(character)

        with self._lock_for(character):
            with self._locks_guard:
                if self._size is not None and bitmap.size != self._size:
                    raise BitmapSizeError(character, self._size, bitmap.size)
                self._size = bitmap.size
                entry = CharacterEntry(character=character, bitmap=bitmap, completed=True)
                self._entries[character] = entry

        logger.debug("Character saved", character=character, completed=len(self._entries))
        return entry

    def get(self, character: str) -> RasterBitmap | None:
        """Return the stored bitmap for a character, or None."""
        entry = self._entries.get(character)
        return entry.bitmap if entry is not None else None

    def entry(self, character: str) -> CharacterEntry | None:
        """Return the stored entry for a character, or None."""
        return self._entries.get(character)

    def size(self) -> int:
        """Number of completed entries."""
        return sum(1 for entry in self._entries.values() if entry.completed)

    @property
    def bitmap_size(self) -> tuple[int, int] | None:
        """(width, height) shared by all stored bitmaps, None while empty."""
        return self._size

    def characters(self) -> list[str]:
        """Stored characters in insertion order."""
        return list(self._entries)

    def entries(self) -> list[CharacterEntry]:
        """Stored entries in insertion order."""
        return list(self._entries.values())

    def __iter__(self) -> Iterator[CharacterEntry]:
        return iter(self.entries())

    def __contains__(self, character: object) -> bool:
        return character in self._entries

    def __len__(self) -> int:
        return self.size()
