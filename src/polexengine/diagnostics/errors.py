"""PO exception hierarchy with structured diagnostics.

All exceptions store Diagnostic objects for rich error information.
The plain attributes (line, reason, token) mirror the diagnostic so callers
can branch on them without touching the diagnostic layer.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic


class POError(Exception):
    """Base exception for all PolexEngine errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize POError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class POSyntaxError(POError):
    """Malformed PO source.

    Raised for a keyword without a following space, an unsupported escape
    sequence, a literal newline inside a string, or a character that cannot
    start any top-level construct. Tokenization stops at the first error.

    Attributes:
        line: 1-based line where the error was detected
        reason: Short description ("newline in string", ...)
    """

    def __init__(self, diagnostic: Diagnostic) -> None:
        super().__init__(diagnostic)
        self.line: int = diagnostic.line or 1
        self.reason: str = diagnostic.message


class TokenMissingError(POError):
    """Input ended while a token was still expected.

    Attributes:
        line: 1-based line where input ended
        token: The token that was expected (e.g. '"')
    """

    def __init__(self, diagnostic: Diagnostic, *, token: str) -> None:
        super().__init__(diagnostic)
        self.line: int = diagnostic.line or 1
        self.token = token
