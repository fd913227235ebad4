"""PO syntax package.

Provides the tokenizer, token types, and source line helpers.
Separate from the fuzzy package: the two share no state.

Python 3.13+.
"""

from .cursor import Cursor, ParseResult
from .position import get_error_context, get_line_content
from .tokenizer import tokenize
from .tokens import Keyword, Str, Token

__all__ = [
    "Cursor",
    "Keyword",
    "ParseResult",
    "Str",
    "Token",
    "get_error_context",
    "get_line_content",
    "tokenize",
]
