"""Merging a new entry with its fuzzy match.

Python 3.13+. Zero external dependencies.
"""

import logging
from dataclasses import replace

from polexengine.po import Entry, PluralTranslation, Translation, mark_as_fuzzy

__all__ = ["merge"]

logger = logging.getLogger(__name__)


def merge[E: (Translation, PluralTranslation)](new: E, existing: Entry) -> E:
    """Merge a newly extracted entry with an existing fuzzy match.

    The result keeps everything from new (msgid, plural shape, comments,
    references) except msgstr, which is filled from existing, and is
    always flagged fuzzy. Neither argument is modified.

    msgstr is taken as follows:

        new       existing   msgstr
        singular  singular   existing.msgstr
        singular  plural     existing.msgstr[0]
        plural    singular   existing.msgstr at every index of new.msgstr
        plural    plural     existing.msgstr

    Args:
        new: Entry just extracted from source, usually untranslated
        existing: Previously translated entry that fuzzy-matched new

    Returns:
        New entry of the same type as new

    Raises:
        TypeError: If either argument is not a translation entry

    Example:
        >>> merged = merge(Translation("Hello!"), Translation("Hello", "Hallo"))
        >>> merged.msgstr, merged.fuzzy
        ('Hallo', True)
    """
    match (new, existing):
        case (Translation(), Translation()):
            merged = replace(new, msgstr=existing.msgstr)
        case (Translation(), PluralTranslation()):
            merged = replace(new, msgstr=existing.msgstr.get(0, ""))
        case (PluralTranslation(), Translation()):
            merged = replace(new, msgstr=dict.fromkeys(new.msgstr, existing.msgstr))
        case (PluralTranslation(), PluralTranslation()):
            merged = replace(new, msgstr=existing.msgstr)
        case _:
            msg = (
                "merge() expects Translation or PluralTranslation entries, got "
                f"{type(new).__name__} and {type(existing).__name__}"
            )
            raise TypeError(msg)

    logger.debug("Fuzzy merged %r into %r", existing.msgid, new.msgid)
    return mark_as_fuzzy(merged)
