"""Diagnostic formatting service.

Centralizes diagnostic output formatting with configurable options.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import StrEnum

from .codes import Diagnostic

__all__ = [
    "DiagnosticFormatter",
    "OutputFormat",
]


class OutputFormat(StrEnum):
    """Output format options for diagnostic formatting."""

    RUST = "rust"  # Rust compiler-style output (default)
    SIMPLE = "simple"  # Single-line format
    JSON = "json"  # JSON format for tooling integration


@dataclass(frozen=True, slots=True)
class DiagnosticFormatter:
    """Diagnostic formatting service.

    Formats Diagnostic objects raised by the tokenizer into human-readable
    or machine-readable output.

    Attributes:
        output_format: Output style (rust, simple, json)

    Example:
        >>> formatter = DiagnosticFormatter()
        >>> diagnostic = ErrorTemplate.newline_in_string(3)
        >>> print(formatter.format(diagnostic))
        error[NEWLINE_IN_STRING]: newline in string
          --> line 3
          = help: Close the string on this line and continue it on the next
          = note: see https://www.gnu.org/software/gettext/manual/html_node/PO-Files.html

        >>> formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)
        >>> print(formatter.format(diagnostic))
        NEWLINE_IN_STRING: newline in string (line 3)
    """

    output_format: OutputFormat = OutputFormat.RUST

    def format(self, diagnostic: Diagnostic) -> str:
        """Format a single diagnostic.

        Args:
            diagnostic: Diagnostic to format

        Returns:
            Formatted diagnostic string
        """
        match self.output_format:
            case OutputFormat.RUST:
                return self._format_rust(diagnostic)
            case OutputFormat.SIMPLE:
                return self._format_simple(diagnostic)
            case OutputFormat.JSON:
                return self._format_json(diagnostic)

    def format_with_source(
        self, diagnostic: Diagnostic, source: str, context_lines: int = 2
    ) -> str:
        """Format a diagnostic followed by the surrounding source lines.

        Source context is only appended for the RUST format and only when
        the diagnostic carries a line that exists in source.

        Args:
            diagnostic: Diagnostic to format
            source: The PO source the diagnostic was produced from
            context_lines: Lines of context before and after the error line

        Returns:
            Formatted diagnostic, optionally followed by a source excerpt
        """
        formatted = self.format(diagnostic)
        if self.output_format is not OutputFormat.RUST or diagnostic.line is None:
            return formatted

        from polexengine.syntax.position import get_error_context  # noqa: PLC0415 - circular

        try:
            context = get_error_context(source, diagnostic.line, context_lines)
        except ValueError:
            return formatted
        return f"{formatted}\n{context}"

    def _format_rust(self, diagnostic: Diagnostic) -> str:
        """Format diagnostic in Rust compiler style.

        Example output:
            error[UNSUPPORTED_ESCAPE]: unsupported escape code
              --> line 5
              = help: Only \\", \\n, \\t and \\\\ are valid escapes
        """
        severity = diagnostic.severity if diagnostic.severity == "warning" else "error"
        parts = [f"{severity}[{diagnostic.code.name}]: {diagnostic.message}"]

        if diagnostic.line is not None:
            parts.append(f"  --> line {diagnostic.line}")

        if diagnostic.hint:
            parts.append(f"  = help: {diagnostic.hint}")

        if diagnostic.help_url:
            parts.append(f"  = note: see {diagnostic.help_url}")

        return "\n".join(parts)

    def _format_simple(self, diagnostic: Diagnostic) -> str:
        """Format diagnostic in single-line format.

        Example output:
            NEWLINE_IN_STRING: newline in string (line 3)
        """
        if diagnostic.line is None:
            return f"{diagnostic.code.name}: {diagnostic.message}"
        return f"{diagnostic.code.name}: {diagnostic.message} (line {diagnostic.line})"

    def _format_json(self, diagnostic: Diagnostic) -> str:
        """Format diagnostic as JSON.

        Example output:
            {"code": "NEWLINE_IN_STRING", "message": "...", "severity": "error"}
        """
        import json  # noqa: PLC0415

        data: dict[str, str | int | None] = {
            "code": diagnostic.code.name,
            "code_value": diagnostic.code.value,
            "message": diagnostic.message,
            "severity": diagnostic.severity,
        }

        if diagnostic.line is not None:
            data["line"] = diagnostic.line

        if diagnostic.hint:
            data["hint"] = diagnostic.hint

        if diagnostic.help_url:
            data["help_url"] = diagnostic.help_url

        return json.dumps(data, ensure_ascii=False)
