"""Quickstart - tokenize a PO file and fuzzy-merge an updated catalog.

CORE-ONLY: Examples 1 and 2 work WITHOUT Babel. Example 3 needs:
    pip install polexengine[babel]

Demonstrates:

1. Tokenize PO source and inspect tokens
2. Report a syntax error with source context
3. Update a catalog: carry old translations over as fuzzy matches

Python 3.13+.
"""

from __future__ import annotations


def example_1_tokenize() -> None:
    """Tokenize PO source and print the token stream."""
    from polexengine import Keyword, Str, tokenize

    print("=" * 60)
    print("Example 1: Tokenizing")
    print("=" * 60)

    po_source = """
# German translations
#, fuzzy
msgid "Open file"
msgstr "Datei öffnen"

msgid ""
"A long message that "
"continues here\\n"
msgstr ""
"Eine lange Nachricht, die "
"hier weitergeht\\n"
"""

    for token in tokenize(po_source):
        match token:
            case Keyword(kind=kind, line=line):
                print(f"  {line:3}: {kind}")
            case Str(line=line, value=value):
                print(f"  {line:3}: {value!r}")


def example_2_errors() -> None:
    """Show how a tokenizer error is reported."""
    from polexengine import POSyntaxError, tokenize
    from polexengine.diagnostics import DiagnosticFormatter

    print("=" * 60)
    print("Example 2: Error Reporting")
    print("=" * 60)

    po_source = 'msgid "Save"\nmsgstr "Speichern\n'

    try:
        tokenize(po_source)
    except POSyntaxError as e:
        print(f"Line {e.line}: {e.reason}")
        if e.diagnostic is not None:
            print(DiagnosticFormatter().format_with_source(e.diagnostic, po_source))


def example_3_catalog_update() -> None:
    """Fill new catalog entries from their closest old translations."""
    from babel.messages.catalog import Catalog

    from polexengine import find_best_match, merge
    from polexengine.core.babel_interop import from_babel_message, to_babel_message

    print("=" * 60)
    print("Example 3: Fuzzy Catalog Update")
    print("=" * 60)

    old = Catalog(locale="de")
    old.add("Open file", "Datei öffnen")
    old.add(("%(num)d file", "%(num)d files"), ("%(num)d Datei", "%(num)d Dateien"))

    existing = [from_babel_message(message) for message in old if message.id]

    template = Catalog(locale="de")
    template.add("Open file...")
    template.add("%(num)d files")

    updated = Catalog(locale="de")
    for message in template:
        if not message.id:
            continue
        new = from_babel_message(message)
        result = find_best_match(new.msgid, existing)
        if result is not None:
            new = merge(new, result[0])
            print(f"  {new.msgid!r} <- {result[0].msgid!r} ({result[1].distance:.2f})")
        updated[message.id] = to_babel_message(new)

    for message in updated:
        if message.id:
            print(f"  {message.id!r}: {message.string!r} fuzzy={message.fuzzy}")


if __name__ == "__main__":
    example_1_tokenize()
    example_2_errors()
    example_3_catalog_update()
