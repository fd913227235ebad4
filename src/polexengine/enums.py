"""Enumerations for PolexEngine type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from enum import StrEnum


class KeywordKind(StrEnum):
    """Structural PO keyword.

    StrEnum provides automatic string conversion: str(KeywordKind.MSGID) == "msgid"
    """

    MSGID = "msgid"
    """Source string: msgid "Hello" """

    MSGSTR = "msgstr"
    """Translated string: msgstr "Hallo" """


__all__ = [
    "KeywordKind",
]
