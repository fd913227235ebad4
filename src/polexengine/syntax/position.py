"""Line utilities for PO source code.

Provides helpers for extracting source lines around an error for
diagnostic output. Line numbers are 1-based and only \\n separates lines,
matching the tokenizer's line counter.
"""


def get_line_content(source: str, line: int) -> str:
    """Extract the content of a specific line.

    Args:
        source: Complete PO source text
        line: 1-based line number

    Returns:
        Content of the line (without trailing newline)

    Raises:
        ValueError: If line is out of range

    Example:
        >>> source = 'msgid "a"\\nmsgstr "b"'
        >>> get_line_content(source, 2)
        'msgstr "b"'
    """
    if line < 1:
        msg = f"Line number must be >= 1, got {line}"
        raise ValueError(msg)

    lines = source.split("\n")

    if line > len(lines):
        msg = f"Line {line} out of range (source has {len(lines)} lines)"
        raise ValueError(msg)

    return lines[line - 1]


def get_error_context(source: str, line: int, context_lines: int = 2) -> str:
    """Get formatted error context around a line.

    Creates a multi-line string showing the error line with surrounding
    context, each prefixed by its line number. The error line is marked
    with ">".

    Args:
        source: Complete PO source text
        line: 1-based line number of the error
        context_lines: Number of lines to show before/after error

    Returns:
        Formatted error context string

    Raises:
        ValueError: If line is out of range

    Example:
        >>> source = '# c\\nmsgid "a\\nmsgstr ""'
        >>> print(get_error_context(source, 2, context_lines=1))
             1 | # c
        >    2 | msgid "a
             3 | msgstr ""
    """
    # Validates line
    get_line_content(source, line)

    lines = source.split("\n")
    start_line = max(1, line - context_lines)
    end_line = min(len(lines), line + context_lines)

    context = []
    for i in range(start_line, end_line + 1):
        marker = ">" if i == line else " "
        context.append(f"{marker} {i:4} | {lines[i - 1]}")

    return "\n".join(context)
