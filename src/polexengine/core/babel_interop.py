"""Conversion between PolexEngine entries and Babel catalogs.

Lets the fuzzy matcher work on catalogs read and written with
babel.messages.pofile, and sizes new plural entries from Babel's
plural-form table.

Python 3.13+. Requires Babel (optional `babel` extra).
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from polexengine.constants import DEFAULT_PLURAL_FORMS
from polexengine.po import Entry, PluralTranslation, Translation

from .babel_compat import require_babel

if TYPE_CHECKING:
    from babel.messages.catalog import Message

__all__ = [
    "empty_plural_translation",
    "from_babel_message",
    "plural_forms_count",
    "to_babel_message",
]

logger = logging.getLogger(__name__)


def plural_forms_count(locale: str) -> int:
    """Number of plural forms (msgstr indices) a locale uses.

    Unknown or malformed locales fall back to DEFAULT_PLURAL_FORMS.

    Args:
        locale: Locale code (BCP-47 or POSIX format accepted)

    Returns:
        Number of plural forms, e.g. 2 for "de", 3 for "pl", 1 for "ja"

    Raises:
        BabelImportError: If Babel is not installed
    """
    require_babel("plural_forms_count")
    from babel.core import UnknownLocaleError  # noqa: PLC0415
    from babel.messages.plurals import get_plural  # noqa: PLC0415

    try:
        return get_plural(locale.replace("-", "_")).num_plurals
    except (UnknownLocaleError, ValueError) as e:
        logger.warning(
            "Unknown locale '%s': %s. Falling back to %d plural forms",
            locale,
            e,
            DEFAULT_PLURAL_FORMS,
        )
        return DEFAULT_PLURAL_FORMS


def empty_plural_translation(msgid: str, msgid_plural: str, locale: str) -> PluralTranslation:
    """Build an untranslated plural entry with one empty msgstr per plural form.

    Example:
        >>> entry = empty_plural_translation("file", "files", "pl")
        >>> dict(entry.msgstr)
        {0: '', 1: '', 2: ''}
    """
    count = plural_forms_count(locale)
    return PluralTranslation(msgid, msgid_plural, dict.fromkeys(range(count), ""))


def to_babel_message(entry: Entry) -> Message:
    """Convert an entry to a babel.messages.catalog.Message.

    Plural msgstr indices become positions in the message string tuple;
    missing indices are filled with "".

    Raises:
        BabelImportError: If Babel is not installed
    """
    require_babel("to_babel_message")
    from babel.messages.catalog import Message  # noqa: PLC0415

    if PluralTranslation.guard(entry):
        size = max(entry.msgstr, default=-1) + 1
        message_id: str | tuple[str, str] = (entry.msgid, entry.msgid_plural)
        string: str | tuple[str, ...] = tuple(entry.msgstr.get(i, "") for i in range(size))
    else:
        message_id = entry.msgid
        string = entry.msgstr

    return Message(
        message_id,
        string,
        locations=list(entry.references),
        flags=set(entry.flags),
        auto_comments=list(entry.extracted_comments),
        user_comments=list(entry.comments),
        lineno=entry.po_source_line,
    )


def from_babel_message(message: Message) -> Entry:
    """Convert a babel.messages.catalog.Message to an entry.

    Raises:
        BabelImportError: If Babel is not installed
    """
    require_babel("from_babel_message")

    common = {
        "comments": tuple(message.user_comments),
        "extracted_comments": tuple(message.auto_comments),
        "references": tuple((filename, lineno) for filename, lineno in message.locations),
        "flags": frozenset(message.flags),
        "po_source_line": message.lineno,
    }

    if isinstance(message.id, (list, tuple)):
        strings = message.string if isinstance(message.string, (list, tuple)) else (message.string,)
        return PluralTranslation(
            message.id[0],
            message.id[1],
            {i: s or "" for i, s in enumerate(strings)},
            **common,
        )

    return Translation(message.id, message.string or "", **common)
