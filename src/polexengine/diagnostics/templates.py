"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    This solves EM101/EM102 violations while providing:
        - Testable error messages
        - Consistent formatting
        - Documentation of all error cases
    """

    # Base documentation URL
    _DOCS_BASE = "https://www.gnu.org/software/gettext/manual/html_node"

    @staticmethod
    def no_space_after_keyword(keyword: str, line: int) -> Diagnostic:
        """Keyword is not followed by whitespace.

        Args:
            keyword: The keyword that was recognized ("msgid" or "msgstr")
            line: Line the keyword starts on

        Returns:
            Diagnostic for NO_SPACE_AFTER_KEYWORD
        """
        msg = f"no space after '{keyword}'"
        return Diagnostic(
            code=DiagnosticCode.NO_SPACE_AFTER_KEYWORD,
            message=msg,
            line=line,
            hint=f"Separate '{keyword}' from its string with a space",
            help_url=f"{ErrorTemplate._DOCS_BASE}/PO-Files.html",
        )

    @staticmethod
    def unsupported_escape(line: int) -> Diagnostic:
        """Backslash followed by a character that is not escapable.

        Args:
            line: Line containing the escape

        Returns:
            Diagnostic for UNSUPPORTED_ESCAPE
        """
        return Diagnostic(
            code=DiagnosticCode.UNSUPPORTED_ESCAPE,
            message="unsupported escape code",
            line=line,
            hint='Only \\", \\n, \\t and \\\\ are valid escapes',
            help_url=f"{ErrorTemplate._DOCS_BASE}/PO-Files.html",
        )

    @staticmethod
    def newline_in_string(line: int) -> Diagnostic:
        """Literal newline inside a quoted string.

        Args:
            line: Line on which the newline occurs

        Returns:
            Diagnostic for NEWLINE_IN_STRING
        """
        return Diagnostic(
            code=DiagnosticCode.NEWLINE_IN_STRING,
            message="newline in string",
            line=line,
            hint="Close the string on this line and continue it on the next",
            help_url=f"{ErrorTemplate._DOCS_BASE}/PO-Files.html",
        )

    @staticmethod
    def unexpected_character(char: str, line: int) -> Diagnostic:
        """Character that cannot start any top-level construct.

        Args:
            char: The offending character
            line: Line the character is on

        Returns:
            Diagnostic for UNEXPECTED_CHARACTER
        """
        msg = f"unexpected character '{char}'"
        return Diagnostic(
            code=DiagnosticCode.UNEXPECTED_CHARACTER,
            message=msg,
            line=line,
            hint="Text outside quotes must be a keyword or a '#' comment",
        )

    @staticmethod
    def token_missing(token: str, line: int) -> Diagnostic:
        """Input ended before an expected token.

        Args:
            token: The token that was expected
            line: Line on which input ended

        Returns:
            Diagnostic for TOKEN_MISSING
        """
        msg = f"missing token {token!r}"
        return Diagnostic(
            code=DiagnosticCode.TOKEN_MISSING,
            message=msg,
            line=line,
            hint=f"Add the closing {token} before the end of the file",
        )
