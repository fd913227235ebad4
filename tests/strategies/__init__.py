"""Hypothesis strategies for PolexEngine property-based testing.

Usage:
    from tests.strategies import po_documents, translation_keys
"""

from .po import (
    entries,
    msgids,
    plural_translations,
    po_documents,
    po_string_literals,
    translation_keys,
    translations,
)

__all__ = [
    "entries",
    "msgids",
    "plural_translations",
    "po_documents",
    "po_string_literals",
    "translation_keys",
    "translations",
]
