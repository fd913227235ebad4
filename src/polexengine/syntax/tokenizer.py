"""PO source tokenizer.

Turns PO source text into a flat list of tokens for the grammar layer:
Keyword tokens for msgid/msgstr and Str tokens for quoted strings.
Whitespace and "#" comments produce no tokens.

Scanning is a single left-to-right pass over an immutable Cursor. Each
top-level rule consumes a bounded prefix, so no backtracking is needed.
The first malformed construct aborts the scan; no partial token list is
ever returned.

Python 3.13+. Zero external dependencies.
"""

import logging

from polexengine.constants import (
    COMMENT_START,
    ESCAPE_CHAR,
    ESCAPE_SEQUENCES,
    INLINE_WHITESPACE,
    KEYWORDS,
    STRING_DELIMITER,
    WHITESPACE,
)
from polexengine.diagnostics import ErrorTemplate, POSyntaxError, TokenMissingError
from polexengine.enums import KeywordKind

from .cursor import Cursor, ParseResult
from .tokens import Keyword, Str, Token

__all__ = ["tokenize"]

logger = logging.getLogger(__name__)


def tokenize(source: str) -> list[Token]:
    """Convert PO source into a list of tokens.

    Args:
        source: Complete PO source text (already decoded)

    Returns:
        Tokens in source order; line numbers never decrease

    Raises:
        POSyntaxError: Keyword not followed by whitespace, unsupported
            escape, literal newline inside a string, or a character that
            cannot start any construct
        TokenMissingError: String still open at end of input

    Example:
        >>> tokenize('msgid "hi"')
        [Keyword(kind=<KeywordKind.MSGID: 'msgid'>, line=1), Str(line=1, value='hi')]
    """
    tokens: list[Token] = []
    cursor = Cursor(source, 0)

    while not cursor.is_eof:
        char = cursor.current

        if char == "\n" or char in INLINE_WHITESPACE:
            cursor = cursor.advance()
            continue

        if char == COMMENT_START:
            cursor = cursor.skip_to_newline()
            continue

        if char == STRING_DELIMITER:
            result = _tokenize_string(cursor.advance())
            tokens.append(result.value)
            cursor = result.cursor
            continue

        keyword = _match_keyword(cursor)
        if keyword is not None:
            tokens.append(keyword.value)
            cursor = keyword.cursor
            continue

        raise POSyntaxError(ErrorTemplate.unexpected_character(char, cursor.line))

    logger.debug("Tokenized %d tokens over %d lines", len(tokens), cursor.line)
    return tokens


def _match_keyword(cursor: Cursor) -> ParseResult[Keyword] | None:
    """Read a keyword at cursor.

    The character after the keyword is only looked at, not consumed.

    Returns:
        ParseResult with the Keyword token and the cursor just past the
        keyword text, or None if no keyword starts here

    Raises:
        POSyntaxError: Keyword text is present but not followed by whitespace
    """
    for keyword in KEYWORDS:
        if not cursor.startswith(keyword):
            continue
        if cursor.peek(len(keyword)) not in WHITESPACE:
            raise POSyntaxError(ErrorTemplate.no_space_after_keyword(keyword, cursor.line))
        token = Keyword(KeywordKind(keyword), cursor.line)
        return ParseResult(token, cursor.advance(len(keyword)))
    return None


def _tokenize_string(cursor: Cursor) -> ParseResult[Str]:
    """Read a quoted string whose opening quote was already consumed.

    Args:
        cursor: Position just after the opening quote

    Returns:
        ParseResult with the Str token and the cursor after the closing quote

    Raises:
        POSyntaxError: Unsupported escape or literal newline
        TokenMissingError: End of input before the closing quote
    """
    start_line = cursor.line
    parts: list[str] = []

    while not cursor.is_eof:
        char = cursor.current

        if char == STRING_DELIMITER:
            return ParseResult(Str(start_line, "".join(parts)), cursor.advance())

        if char == ESCAPE_CHAR:
            escaped = cursor.peek(1)
            if escaped is None:
                break
            if escaped not in ESCAPE_SEQUENCES:
                raise POSyntaxError(ErrorTemplate.unsupported_escape(cursor.line))
            parts.append(ESCAPE_SEQUENCES[escaped])
            cursor = cursor.advance(2)
            continue

        if char == "\n":
            raise POSyntaxError(ErrorTemplate.newline_in_string(cursor.line))

        parts.append(char)
        cursor = cursor.advance()

    raise TokenMissingError(
        ErrorTemplate.token_missing(STRING_DELIMITER, cursor.line),
        token=STRING_DELIMITER,
    )
