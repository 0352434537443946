"""Grammar rules for string literal bodies.

One call to parse_string_fragment() recognizes one unit of a literal body.
Alternatives are tried in a fixed order and the first that applies wins:

    1. literal run      maximal run of characters other than " and \\
    2. \\"               escaped quote
    3. \\\\              escaped backslash
    4. line continuation (whitespace.py)
    5. mnemonic escape   (primitives.py)
    6. hex escape        (primitives.py)

Order matters. \\x is a syntactically valid mnemonic position holding an
unknown letter, so the mnemonic rule must report NO_MATCH (not failure)
to let the hex rule see it. Incomplete and Failed from any rule stop the
dispatch immediately: a later rule must never "succeed" on text an
earlier rule could not yet decide.
"""

import re

from schemelex.enums import ErrorKind
from schemelex.syntax.cursor import Cursor
from schemelex.syntax.outcome import (
    NO_MATCH,
    Done,
    Incomplete,
    NoMatch,
    ParseOutcome,
    end_of_input,
    failed,
)
from schemelex.syntax.parser.primitives import match_hex_escape, match_mnemonic_escape
from schemelex.syntax.parser.whitespace import match_line_continuation

__all__ = [
    "match_escaped_backslash",
    "match_escaped_quote",
    "match_literal_run",
    "parse_string_fragment",
]

_LITERAL_RUN = re.compile(r'[^"\\]+')


def match_literal_run(cursor: Cursor) -> ParseOutcome[str] | NoMatch:
    """Match a maximal non-empty run of ordinary characters.

    The run is returned as a slice of the source. A run that reaches the
    end of an open buffer is not yet maximal, so it is Incomplete.
    """
    match = _LITERAL_RUN.match(cursor.source, cursor.pos)
    if match is None:
        return NO_MATCH
    end = cursor.advance(match.end() - cursor.pos)
    if end.needs_input:
        return Incomplete(1)
    return Done(match.group(), end)


def _match_escaped_char(cursor: Cursor, escaped: str) -> ParseOutcome[str] | NoMatch:
    """Match backslash followed by escaped, decoding to escaped itself."""
    if cursor.is_eof:
        return end_of_input(cursor)
    if cursor.current != "\\":
        return NO_MATCH
    after = cursor.advance()
    if after.is_eof:
        return end_of_input(after)
    if after.current != escaped:
        return NO_MATCH
    return Done(escaped, after.advance())


def match_escaped_quote(cursor: Cursor) -> ParseOutcome[str] | NoMatch:
    """Match \\" and decode it to a double quote."""
    return _match_escaped_char(cursor, '"')


def match_escaped_backslash(cursor: Cursor) -> ParseOutcome[str] | NoMatch:
    """Match \\\\ and decode it to a single backslash."""
    return _match_escaped_char(cursor, "\\")


_ESCAPE_RULES = (
    match_escaped_quote,
    match_escaped_backslash,
    match_line_continuation,
    match_mnemonic_escape,
    match_hex_escape,
)


def parse_string_fragment(cursor: Cursor) -> ParseOutcome[str] | NoMatch:
    """Recognize and decode the next fragment of a literal body.

    Args:
        cursor: Position inside the literal body

    Returns:
        Done(fragment, cursor_after_fragment) - fragment may be "" for a
            folded line continuation
        Incomplete - buffer ended before the fragment was decided
        Failed(INVALID_ESCAPE) - backslash followed by no known escape
        Failed(...) - propagated from a rule (INVALID_CODEPOINT,
            UNTERMINATED_STRING)
        NO_MATCH - cursor is at an unescaped double quote, which closes
            the literal and is not a fragment
    """
    if cursor.is_eof:
        return end_of_input(cursor)

    if cursor.current != "\\":
        return match_literal_run(cursor)

    for rule in _ESCAPE_RULES:
        result = rule(cursor)
        if not isinstance(result, NoMatch):
            return result

    return failed(ErrorKind.INVALID_ESCAPE, cursor, char=cursor.peek(1))
