"""PO translation entries.

Python 3.13+.
"""

from .translations import (
    Entry,
    PluralTranslation,
    Translation,
    TranslationKey,
    is_fuzzy,
    key,
    mark_as_fuzzy,
)

__all__ = [
    "Entry",
    "PluralTranslation",
    "Translation",
    "TranslationKey",
    "is_fuzzy",
    "key",
    "mark_as_fuzzy",
]
