"""Shared constants for PolexEngine.

This module provides centralized configuration constants used across
the syntax and fuzzy packages. Placing constants here avoids circular
imports and provides a single source of truth.

Constants are grouped by domain:
- Lexical: Keywords, whitespace classes, escape table
- Fuzzy matching: Threshold and flag defaults
- Plural forms: Fallback when no CLDR data is available

Python 3.13+. Zero external dependencies.
"""

from types import MappingProxyType

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Lexical
    "KEYWORDS",
    "WHITESPACE",
    "INLINE_WHITESPACE",
    "ESCAPE_SEQUENCES",
    "COMMENT_START",
    "STRING_DELIMITER",
    "ESCAPE_CHAR",
    # Fuzzy matching
    "DEFAULT_FUZZY_THRESHOLD",
    "FUZZY_FLAG",
    # Plural forms
    "DEFAULT_PLURAL_FORMS",
]

# ============================================================================
# LEXICAL
# ============================================================================

# Structural keywords recognized at top level. Order matters only for
# readability: no keyword is a prefix of another.
KEYWORDS: tuple[str, ...] = ("msgid", "msgstr")

# Characters that may follow a keyword. Newline included.
WHITESPACE: frozenset[str] = frozenset({"\n", "\t", "\r", " "})

# Skipped at top level without affecting the line counter.
INLINE_WHITESPACE: frozenset[str] = frozenset({"\t", "\r", " "})

# Escaped character -> decoded character. \r is deliberately absent.
ESCAPE_SEQUENCES: MappingProxyType[str, str] = MappingProxyType(
    {
        '"': '"',
        "n": "\n",
        "t": "\t",
        "\\": "\\",
    }
)

COMMENT_START: str = "#"
STRING_DELIMITER: str = '"'
ESCAPE_CHAR: str = "\\"

# ============================================================================
# FUZZY MATCHING
# ============================================================================

# Minimum Jaro distance for two msgids to be considered a fuzzy match.
# Same default as the gettext tooling this library interoperates with.
DEFAULT_FUZZY_THRESHOLD: float = 0.8

# Flag written as "#, fuzzy" in PO files.
FUZZY_FLAG: str = "fuzzy"

# ============================================================================
# PLURAL FORMS
# ============================================================================

# Germanic "one/other" rule; used when a locale has no plural data.
DEFAULT_PLURAL_FORMS: int = 2
