"""The ordered character set users draw glyphs for."""

from collections.abc import Mapping, Sized
from types import MappingProxyType

UPPERCASE = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
LOWERCASE = "abcdefghijklmnopqrstuvwxyz"
NUMBERS = "0123456789"
SYMBOLS = "!@#$%&*()_+-=[]{}|;:'\",.<>?/"


class CharacterSet:
    """Ordered union of character categories.

    The order is used for "next character" navigation and the total is the
    denominator for progress reporting.
    """

    def __init__(self, categories: Mapping[str, str] | None = None) -> None:
        if categories is None:
            categories = {
                "uppercase": UPPERCASE,
                "lowercase": LOWERCASE,
                "numbers": NUMBERS,
                "symbols": SYMBOLS,
            }
        self._categories = MappingProxyType({k: tuple(v) for k, v in categories.items()})
        self._ordered = tuple(c for chars in self._categories.values() for c in chars)
        if not self._ordered:
            raise ValueError("A character set needs at least one character")

    @property
    def categories(self) -> Mapping[str, tuple[str, ...]]:
        return self._categories

    @property
    def total(self) -> int:
        return len(self._ordered)

    def all_characters(self) -> tuple[str, ...]:
        return self._ordered

    def index(self, character: str) -> int:
        return self._ordered.index(character)

    def next_character(self, character: str) -> str:
        """Return the character after ``character``, wrapping at the end.

        A character outside the set moves to the first character.
        """
        if character not in self._ordered:
            return self._ordered[0]
        return self._ordered[(self.index(character) + 1) % len(self._ordered)]

    def progress(self, store: Sized) -> tuple[int, int]:
        """Return (completed, total) for a bitmap store."""
        return (len(store), self.total)

    def __contains__(self, character: object) -> bool:
        return character in self._ordered

    def __iter__(self):
        return iter(self._ordered)

    def __len__(self) -> int:
        return len(self._ordered)
