"""Slug generation for URL, filename, and identifier use.

Responsibilities:
- Transliterate free-form Unicode text into lowercase ASCII slugs.
- Keep slug behavior deterministic and locale-independent.

Key types:
- `Slugifier`: immutable separator/transliterator configuration with `slugify`.
- `slugify`: module-level convenience wrapper around a default `Slugifier`.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace

from .transliteration import DEFAULT_TRANSLITERATOR, Transliterator

DEFAULT_SEPARATOR = "-"

_ASCII_LIMIT = "\x80"
_LOWER_ALNUM = frozenset("abcdefghijklmnopqrstuvwxyz0123456789")
_UPPER_TO_LOWER = {chr(code): chr(code + 32) for code in range(ord("A"), ord("Z") + 1)}


@dataclass(frozen=True, slots=True)
class Slugifier:
    """Convert arbitrary text into separator-delimited lowercase ASCII slugs.

    Rules:
    - Unicode characters are transliterated to ASCII; unmapped ones are dropped.
    - Uppercase ASCII letters are converted to lowercase.
    - Every other non-alphanumeric character becomes the separator.
    - Runs of separators collapse to one; none lead or trail the slug.

    The separator is not validated. An alphanumeric or multi-character separator
    is accepted but makes separators indistinguishable from slug content.

    Attributes:
        separator: Character inserted for non-alphanumeric runs.
        transliterator: Per-character Unicode-to-ASCII expansion collaborator.

    Example:
        >>> Slugifier.default().slugify("Crème brûlée!")
        'creme-brulee'
        >>> Slugifier.default().with_separator("_").slugify("Hello, World!")
        'hello_world'
    """

    separator: str = DEFAULT_SEPARATOR
    transliterator: Transliterator = field(default=DEFAULT_TRANSLITERATOR, compare=False)

    @classmethod
    def default(cls) -> Slugifier:
        """Return a slugifier using `-` as the separator."""

        return cls()

    def with_separator(self, separator: str) -> Slugifier:
        """Return a copy of this slugifier using `separator`."""

        return replace(self, separator=separator)

    def with_transliterator(self, transliterator: Transliterator) -> Slugifier:
        """Return a copy of this slugifier using another transliteration table."""

        return replace(self, transliterator=transliterator)

    def slugify(self, text: str) -> str:
        """Convert `text` into a slug using the configured separator."""

        writer = _SlugWriter(self.separator)
        transliterate = self.transliterator.transliterate
        for character in text:
            if character < _ASCII_LIMIT:
                writer.push(character)
            else:
                writer.push_fragment(transliterate(character))
        return writer.finish()


class _SlugWriter:
    """Accumulate slug characters while collapsing separator runs."""

    __slots__ = ("_buffer", "_separator", "_previous_separator")

    def __init__(self, separator: str) -> None:
        self._buffer: list[str] = []
        self._separator = separator
        # start-of-text counts as a separator so none is emitted first
        self._previous_separator = True

    def push(self, character: str) -> None:
        """Append one ASCII character, folding case and mapping non-alphanumerics."""

        character = _UPPER_TO_LOWER.get(character, character)
        if character in _LOWER_ALNUM:
            self._buffer.append(character)
            self._previous_separator = False
        elif not self._previous_separator:
            self._buffer.append(self._separator)
            self._previous_separator = True

    def push_fragment(self, fragment: str) -> None:
        for character in fragment:
            self.push(character)

    def finish(self) -> str:
        """Return the slug with any trailing separator removed."""

        if self._previous_separator and self._buffer:
            self._buffer.pop()
        return "".join(self._buffer)


def slugify(text: str, separator: str = DEFAULT_SEPARATOR) -> str:
    """Return the slug of `text` using the default transliteration table."""

    return Slugifier(separator=separator).slugify(text)
