"""Property-based tests for the PO tokenizer.

Properties:
- Well-formed documents tokenize to exactly the expected tokens
- Line numbers are positive and never decrease
- Whitespace and comments alone never produce tokens
- String literals decode their escapes exactly
- Any input either tokenizes or raises one of the two tokenizer errors
"""

from __future__ import annotations

from hypothesis import event, given
from hypothesis import strategies as st

from polexengine.diagnostics import POSyntaxError, TokenMissingError
from polexengine.syntax import Str, Token, tokenize
from tests.strategies import po_documents, po_string_literals

_blank_or_comment_lines = st.lists(
    st.one_of(
        st.text(alphabet=" \t\r", max_size=5),
        st.text(
            alphabet=st.characters(blacklist_categories=["Cs"], blacklist_characters="\n"),
            max_size=20,
        ).map(lambda text: "#" + text),
    ),
    max_size=10,
)


class TestTokenizeDocuments:
    """Round trip from generated documents to their expected tokens."""

    @given(po_documents())
    def test_document_tokens(self, document: tuple[str, list[Token]]) -> None:
        """PROPERTY: tokenize(doc) equals the tokens the doc was built from."""
        source, expected = document

        assert tokenize(source) == expected

    @given(po_documents())
    def test_lines_non_decreasing(self, document: tuple[str, list[Token]]) -> None:
        """PROPERTY: token lines are >= 1 and sorted."""
        source, _ = document
        lines = [token.line for token in tokenize(source)]

        assert all(line >= 1 for line in lines)
        assert lines == sorted(lines)

    @given(po_documents())
    def test_lines_within_source(self, document: tuple[str, list[Token]]) -> None:
        """PROPERTY: no token reports a line past the end of the source."""
        source, _ = document
        last_line = source.count("\n") + 1

        assert all(token.line <= last_line for token in tokenize(source))


class TestTokenizeTrivia:
    """Whitespace and comments vanish."""

    @given(_blank_or_comment_lines)
    def test_trivia_only(self, lines: list[str]) -> None:
        """PROPERTY: whitespace/comment-only input yields no tokens."""
        assert tokenize("\n".join(lines)) == []


class TestTokenizeStrings:
    """String literal decoding."""

    @given(po_string_literals())
    def test_string_decoding(self, literal: tuple[str, str]) -> None:
        """PROPERTY: a quoted literal decodes to its expected value on line 1."""
        raw, decoded = literal

        assert tokenize(f'"{raw}"') == [Str(1, decoded)]

    @given(po_string_literals(), st.integers(min_value=0, max_value=5))
    def test_string_line_is_opening_line(self, literal: tuple[str, str], offset: int) -> None:
        """PROPERTY: the token line is the line of the opening quote."""
        raw, decoded = literal
        source = "\n" * offset + f'"{raw}"'

        assert tokenize(source) == [Str(offset + 1, decoded)]


class TestTokenizeTotality:
    """Arbitrary input never escapes the error contract."""

    @given(st.text(alphabet=st.characters(blacklist_categories=["Cs"]), max_size=60))
    def test_success_or_known_error(self, source: str) -> None:
        """PROPERTY: tokenize returns a list or raises a tokenizer error."""
        try:
            tokens = tokenize(source)
        except POSyntaxError as e:
            event(f"outcome=syntax_error:{e.reason.split(' ')[0]}")
            assert 1 <= e.line <= source.count("\n") + 1
        except TokenMissingError as e:
            event("outcome=token_missing")
            assert e.token == '"'
        else:
            event("outcome=ok")
            assert isinstance(tokens, list)
