"""Token types produced by the PO tokenizer.

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from typing import TypeIs

from polexengine.enums import KeywordKind

__all__ = [
    "Keyword",
    "Str",
    "Token",
]


@dataclass(frozen=True, slots=True)
class Str:
    """Quoted string literal with escapes already decoded.

    Attributes:
        line: 1-based line of the opening quote
        value: Decoded contents (without the surrounding quotes)

    Example:
        Source: msgid "a\\tb"
        Token: Str(line=1, value="a<TAB>b")
    """

    line: int
    value: str

    @staticmethod
    def guard(token: object) -> TypeIs["Str"]:
        """Type guard for Str."""
        return isinstance(token, Str)


@dataclass(frozen=True, slots=True)
class Keyword:
    """Structural keyword (msgid or msgstr).

    Attributes:
        kind: Which keyword was read
        line: 1-based line the keyword starts on
    """

    kind: KeywordKind
    line: int

    @staticmethod
    def guard(token: object) -> TypeIs["Keyword"]:
        """Type guard for Keyword."""
        return isinstance(token, Keyword)


type Token = Str | Keyword
