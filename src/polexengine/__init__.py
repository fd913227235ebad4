"""PolexEngine - gettext PO tokenizer and fuzzy translation matcher.

Converts PO source text into a flat token stream for a grammar layer, and
computes and merges fuzzy matches between translation entries while a
catalog is being updated. Neither component performs I/O.

Public API:
    tokenize - Convert PO source to a list of Keyword/Str tokens
    jaro_distance / similarity - msgid similarity of two translation keys
    matcher - Build a threshold-based key matcher
    find_best_match - Pick the closest existing entry for a key
    merge - Fill a new entry's msgstr from its fuzzy match
    Translation / PluralTranslation - Translation entries

Exceptions:
    POError - Base exception class
    POSyntaxError - Malformed PO source
    TokenMissingError - Input ended while a token was expected

Submodules:
    polexengine.syntax - Tokenizer, tokens, cursor, source line helpers
    polexengine.po - Translation entries and helpers
    polexengine.fuzzy - Fuzzy matching and merging
    polexengine.diagnostics - Error types, codes and formatting
    polexengine.core.babel_interop - Babel catalog conversion (optional extra)
"""

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

from .diagnostics import POError, POSyntaxError, TokenMissingError
from .enums import KeywordKind
from .fuzzy import (
    NO_MATCH,
    Match,
    NoMatch,
    find_best_match,
    jaro_distance,
    matcher,
    merge,
    similarity,
)
from .po import PluralTranslation, Translation, mark_as_fuzzy
from .syntax import Keyword, Str, Token, tokenize

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
try:
    __version__ = _get_version("polexengine")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "NO_MATCH",
    "Keyword",
    "KeywordKind",
    "Match",
    "NoMatch",
    "POError",
    "POSyntaxError",
    "PluralTranslation",
    "Str",
    "Token",
    "TokenMissingError",
    "Translation",
    "__version__",
    "find_best_match",
    "jaro_distance",
    "mark_as_fuzzy",
    "matcher",
    "merge",
    "similarity",
    "tokenize",
]
