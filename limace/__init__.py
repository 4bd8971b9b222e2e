"""Top-level package for limace.

This package converts arbitrary Unicode text into lowercase ASCII slugs for
URLs, filenames, and identifiers. The main entry point is `Slugifier`.
"""

from .slugifier import DEFAULT_SEPARATOR, Slugifier, slugify
from .transliteration import Transliterator, UnidecodeTransliterator

__all__ = [
    "DEFAULT_SEPARATOR",
    "Slugifier",
    "Transliterator",
    "UnidecodeTransliterator",
    "slugify",
    "__version__",
]

__version__ = "0.1.0"
