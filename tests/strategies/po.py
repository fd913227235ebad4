"""Hypothesis strategies for PO source text and translation entries.

Strategy Categories:
- String strategies: Generate PO source text together with the tokens
  the tokenizer must produce for it
- Entry strategies: Generate translation keys and entries for the
  fuzzy matcher

Event-Emitting Strategies (HypoFuzz-Optimized):
    - po_string_literals: escape density (none|some)
    - po_documents: document shape (empty|comments_only|entries)
"""

from __future__ import annotations

from hypothesis import event
from hypothesis import strategies as st
from hypothesis.strategies import composite

from polexengine.enums import KeywordKind
from polexengine.po import PluralTranslation, Translation
from polexengine.syntax import Keyword, Str, Token

# Characters allowed verbatim inside a quoted string
_PLAIN_STRING_CHARS = st.characters(
    blacklist_categories=["Cs"],
    blacklist_characters='"\\\n',
)

# Characters allowed inside a comment
_COMMENT_CHARS = st.characters(
    blacklist_categories=["Cs"],
    blacklist_characters="\n",
)

# Raw escape sequence -> decoded character
_ESCAPES = {'\\"': '"', "\\n": "\n", "\\t": "\t", "\\\\": "\\"}

msgids = st.text(
    alphabet=st.characters(blacklist_categories=["Cs"]),
    max_size=24,
)

translation_keys = st.one_of(msgids, st.tuples(msgids, msgids))


@composite
def po_string_literals(draw: st.DrawFn) -> tuple[str, str]:
    """Generate the inside of a quoted PO string.

    Returns:
        (raw, decoded): raw text to place between quotes and the value the
        tokenizer must decode it to
    """
    pieces = draw(
        st.lists(
            st.one_of(
                _PLAIN_STRING_CHARS.map(lambda c: (c, c)),
                st.sampled_from(sorted(_ESCAPES.items())),
            ),
            max_size=20,
        )
    )
    has_escape = any(raw != decoded for raw, decoded in pieces)
    event(f"escapes={'some' if has_escape else 'none'}")
    raw = "".join(raw for raw, _ in pieces)
    decoded = "".join(decoded for _, decoded in pieces)
    return raw, decoded


@composite
def po_documents(draw: st.DrawFn) -> tuple[str, list[Token]]:
    """Generate a well-formed PO document and its expected token list.

    Documents mix comments, blank lines (with inline whitespace), and
    msgid/msgstr pairs whose strings may continue over several lines.
    """
    lines: list[str] = []
    expected: list[Token] = []

    blocks = draw(st.lists(st.sampled_from(["comment", "blank", "entry"]), max_size=8))
    for block in blocks:
        if block == "comment":
            lines.append("#" + draw(st.text(alphabet=_COMMENT_CHARS, max_size=30)))
        elif block == "blank":
            lines.append(draw(st.sampled_from(["", " ", "\t", "\r", " \t "])))
        else:
            for kind in (KeywordKind.MSGID, KeywordKind.MSGSTR):
                line_no = len(lines) + 1
                separator = draw(st.sampled_from([" ", "\t", "  "]))
                raw, value = draw(po_string_literals())
                lines.append(f'{kind}{separator}"{raw}"')
                expected += [Keyword(kind, line_no), Str(line_no, value)]
                for _ in range(draw(st.integers(min_value=0, max_value=2))):
                    raw, value = draw(po_string_literals())
                    lines.append(f'"{raw}"')
                    expected.append(Str(len(lines), value))

    if not blocks:
        event("document=empty")
    elif "entry" not in blocks:
        event("document=comments_only")
    else:
        event("document=entries")

    return "\n".join(lines), expected


@composite
def translations(draw: st.DrawFn) -> Translation:
    """Generate singular translation entries."""
    return Translation(
        msgid=draw(msgids),
        msgstr=draw(msgids),
        flags=draw(st.frozensets(st.sampled_from(["fuzzy", "c-format", "no-wrap"]))),
    )


@composite
def plural_translations(draw: st.DrawFn) -> PluralTranslation:
    """Generate plural translation entries with contiguous indices."""
    forms = draw(st.lists(msgids, min_size=1, max_size=6))
    return PluralTranslation(
        msgid=draw(msgids),
        msgid_plural=draw(msgids),
        msgstr=dict(enumerate(forms)),
        flags=draw(st.frozensets(st.sampled_from(["fuzzy", "c-format"]))),
    )


entries = st.one_of(translations(), plural_translations())
