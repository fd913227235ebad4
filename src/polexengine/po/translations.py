"""Translation entry types.

Translation and PluralTranslation are the values the grammar layer builds
from a token stream and the values the fuzzy matcher reads and rewrites.
Both are frozen: every modification returns a new entry.

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import TypeIs

from polexengine.constants import FUZZY_FLAG

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Entries
    "Translation",
    "PluralTranslation",
    # Type aliases
    "Entry",
    "TranslationKey",
    # Helpers
    "key",
    "is_fuzzy",
    "mark_as_fuzzy",
]


@dataclass(frozen=True, slots=True)
class Translation:
    """Singular translation entry.

    Attributes:
        msgid: Source string
        msgstr: Translated string ("" when untranslated)
        comments: Translator comments ("# ...")
        extracted_comments: Extracted comments ("#. ...")
        references: Source references as (file, line) pairs ("#: ..."); line may be None
        flags: Flags ("#, ..."), e.g. {"fuzzy", "python-format"}
        po_source_line: Line of the msgid keyword in the PO file, if known
    """

    msgid: str
    msgstr: str = ""
    comments: tuple[str, ...] = ()
    extracted_comments: tuple[str, ...] = ()
    references: tuple[tuple[str, int | None], ...] = ()
    flags: frozenset[str] = frozenset()
    po_source_line: int | None = None

    @property
    def fuzzy(self) -> bool:
        """True if the entry carries the fuzzy flag."""
        return FUZZY_FLAG in self.flags

    @staticmethod
    def guard(entry: object) -> TypeIs["Translation"]:
        """Type guard for Translation."""
        return isinstance(entry, Translation)


@dataclass(frozen=True, slots=True)
class PluralTranslation:
    """Plural translation entry.

    Attributes:
        msgid: Singular source string
        msgid_plural: Plural source string
        msgstr: Plural index -> translated string. Stored read-only.
        comments: Translator comments ("# ...")
        extracted_comments: Extracted comments ("#. ...")
        references: Source references as (file, line) pairs ("#: ..."); line may be None
        flags: Flags ("#, ...")
        po_source_line: Line of the msgid keyword in the PO file, if known

    Example:
        >>> entry = PluralTranslation("apple", "apples", {0: "Apfel", 1: "Äpfel"})
        >>> entry.msgstr[1]
        'Äpfel'
    """

    msgid: str
    msgid_plural: str
    msgstr: Mapping[int, str] = field(default_factory=dict)
    comments: tuple[str, ...] = ()
    extracted_comments: tuple[str, ...] = ()
    references: tuple[tuple[str, int | None], ...] = ()
    flags: frozenset[str] = frozenset()
    po_source_line: int | None = None

    def __post_init__(self) -> None:
        """Copy msgstr into a read-only view so callers cannot mutate it."""
        for index in self.msgstr:
            if not isinstance(index, int) or index < 0:
                msg = f"Plural index must be a non-negative int, got {index!r}"
                raise ValueError(msg)
        object.__setattr__(self, "msgstr", MappingProxyType(dict(self.msgstr)))

    @property
    def fuzzy(self) -> bool:
        """True if the entry carries the fuzzy flag."""
        return FUZZY_FLAG in self.flags

    @staticmethod
    def guard(entry: object) -> TypeIs["PluralTranslation"]:
        """Type guard for PluralTranslation."""
        return isinstance(entry, PluralTranslation)


# ============================================================================
# TYPE ALIASES
# ============================================================================

type Entry = Translation | PluralTranslation

# msgid for singular entries, (msgid, msgid_plural) for plural ones
type TranslationKey = str | tuple[str, str]


# ============================================================================
# HELPERS
# ============================================================================


def key(entry: Entry) -> TranslationKey:
    """Return the key identifying an entry in a catalog.

    Example:
        >>> key(Translation("hello"))
        'hello'
        >>> key(PluralTranslation("apple", "apples"))
        ('apple', 'apples')
    """
    if PluralTranslation.guard(entry):
        return (entry.msgid, entry.msgid_plural)
    return entry.msgid


def is_fuzzy(entry: Entry) -> bool:
    """Check whether an entry is flagged fuzzy."""
    return entry.fuzzy


def mark_as_fuzzy[E: (Translation, PluralTranslation)](entry: E) -> E:
    """Return a copy of entry with the fuzzy flag added.

    The input entry is left untouched.
    """
    return replace(entry, flags=entry.flags | {FUZZY_FLAG})
