"""Immutable cursor infrastructure for type-safe scanning.

Implements the immutable cursor pattern for zero-`None` scanning.
Python 3.13+. Zero external dependencies.

Design Philosophy:
    - Cursor is immutable (frozen dataclass)
    - EOF is a state (is_eof), not a return value
    - Every advance() returns NEW cursor (prevents infinite loops)
    - The 1-based line travels with the cursor, so tokens and errors never
      need to recount newlines

Line Ending Support:
    Only \\n terminates a line. In CRLF files the \\r is ordinary inline
    whitespace and the \\n still advances the line counter. CR-only files
    are reported as a single line.
"""

from dataclasses import dataclass

__all__ = ["Cursor", "ParseResult"]


@dataclass(frozen=True, slots=True)
class Cursor:
    """Immutable source position tracker.

    Key Design Decisions:
        1. Frozen dataclass - Immutability enforced by Python
        2. Slots - Memory efficiency (important for large catalogs)
        3. Position plus line - line is maintained on advance()
        4. EOF is a property - Not a return value
        5. current raises - No None handling needed!

    Example:
        >>> cursor = Cursor('msgid "a"\\nmsgstr ""', 0)
        >>> cursor.current
        'm'
        >>> cursor.advance(10).line
        2
        >>> cursor.line  # Original unchanged (immutability)
        1
    """

    source: str
    pos: int
    line: int = 1

    @property
    def is_eof(self) -> bool:
        """Check if at end of input.

        Returns:
            True if position >= source length
        """
        return self.pos >= len(self.source)

    @property
    def current(self) -> str:
        """Get current character.

        Returns:
            Current character at position

        Raises:
            EOFError: If at end of input
        """
        if self.is_eof:
            msg = f"Unexpected EOF at position {self.pos}"
            raise EOFError(msg)
        return self.source[self.pos]

    def peek(self, offset: int = 0) -> str | None:
        """Peek at character with offset without advancing.

        Args:
            offset: Offset from current position (0 = current, 1 = next)

        Returns:
            Character at position + offset, or None if beyond EOF

        Note:
            Returns None ONLY when peeking beyond EOF.
            Use for lookahead: `if cursor.peek(5) in WHITESPACE:`
        """
        target_pos = self.pos + offset
        if target_pos >= len(self.source):
            return None
        return self.source[target_pos]

    def advance(self, count: int = 1) -> "Cursor":
        """Return new cursor advanced by count positions.

        Every newline stepped over increments the line counter.

        Args:
            count: Number of positions to advance (default: 1)

        Returns:
            New Cursor instance at new position (original unchanged)

        Example:
            >>> cursor = Cursor("a\\nb", 0)
            >>> cursor.advance(2).line
            2
            >>> cursor.advance(1).line  # Sitting on the newline
            1
        """
        new_pos = min(self.pos + count, len(self.source))
        newlines = self.source.count("\n", self.pos, new_pos)
        return Cursor(self.source, new_pos, self.line + newlines)

    def startswith(self, prefix: str) -> bool:
        """Check whether the remaining input starts with prefix.

        Example:
            >>> Cursor('msgid ""', 0).startswith("msgid")
            True
        """
        return self.source.startswith(prefix, self.pos)

    def skip_to_newline(self) -> "Cursor":
        """Advance to the next newline character without consuming it.

        Returns:
            New cursor positioned at \\n, or at EOF if there is none.

        Example:
            >>> cursor = Cursor("# comment\\nmsgid", 0)
            >>> new_cursor = cursor.skip_to_newline()
            >>> new_cursor.pos
            9
            >>> new_cursor.line
            1
        """
        end = self.source.find("\n", self.pos)
        if end == -1:
            end = len(self.source)
        # No newline between pos and end, so the line is unchanged
        return Cursor(self.source, end, self.line)

@dataclass(frozen=True, slots=True)
class ParseResult[T]:
    """Scanner result containing scanned value and new cursor position.

    Type Parameters:
        T: The type of the scanned value

    Example:
        >>> cursor = Cursor("hello", 0)
        >>> result = ParseResult("h", cursor.advance())
        >>> result.value
        'h'
        >>> result.cursor.pos
        1
    """

    value: T
    cursor: Cursor
