"""Unicode-to-ASCII transliteration collaborators.

Responsibilities:
- Define the one-method protocol the slugifier uses to expand a character.
- Provide the default implementation backed by the `Unidecode` dataset.

Key types:
- `Transliterator`: protocol expanding one character into an ASCII fragment.
- `UnidecodeTransliterator`: stateless default table lookup.
"""

from __future__ import annotations

from typing import Protocol

from unidecode import unidecode


class Transliterator(Protocol):
    """Protocol for per-character Unicode-to-ASCII expansion."""

    def transliterate(self, character: str) -> str:
        """Return the ASCII fragment for one character, possibly empty."""


class UnidecodeTransliterator:
    """Expand characters using the Unidecode romanization tables.

    Characters without a table entry map to an empty fragment. ASCII characters
    map to themselves.
    """

    __slots__ = ()

    def transliterate(self, character: str) -> str:
        """Return the romanized ASCII fragment for `character`."""

        return unidecode(character, errors="ignore")

    def __repr__(self) -> str:
        return "UnidecodeTransliterator()"

    def __eq__(self, other: object) -> bool:
        return isinstance(other, UnidecodeTransliterator)

    def __hash__(self) -> int:
        return hash(UnidecodeTransliterator)


DEFAULT_TRANSLITERATOR = UnidecodeTransliterator()
