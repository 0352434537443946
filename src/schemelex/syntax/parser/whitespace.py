"""Whitespace handling and line-continuation folding for string literals.

A backslash at the end of a line lets a literal wrap across source lines
without putting a newline into its value:

    "blah blah\\   <newline>    blah blah"   ->  "blah blahblah blah"

Grammar:
    line_continuation ::= "\\" blank_inline* line_end blank_inline*
    blank_inline      ::= "\\u0020" | "\\u0009"
    line_end          ::= "\\u000D\\u000A" | "\\u000A"
"""

from schemelex.constants import HORIZONTAL_WHITESPACE
from schemelex.syntax.cursor import Cursor
from schemelex.syntax.outcome import (
    NO_MATCH,
    Done,
    Incomplete,
    NoMatch,
    ParseOutcome,
    end_of_input,
)

__all__ = ["match_line_continuation", "match_line_end", "skip_blank_inline"]


def skip_blank_inline(cursor: Cursor) -> Cursor:
    """Skip inline whitespace (space U+0020 and tab U+0009).

    Args:
        cursor: Current position in source

    Returns:
        New cursor at first non-blank character (or EOF)

    Design:
        Immutable cursor ensures termination.
    """
    while not cursor.is_eof and cursor.current in HORIZONTAL_WHITESPACE:
        cursor = cursor.advance()
    return cursor


def match_line_end(cursor: Cursor) -> ParseOutcome[None] | NoMatch:
    """Match exactly one line ending: LF or CRLF.

    A lone CR is not a line ending. A CR at the end of an open buffer is
    undecided until the next character arrives.

    Returns:
        Done(None, cursor_after_line_end), Incomplete, or NO_MATCH
    """
    if cursor.is_eof:
        return end_of_input(cursor)
    if cursor.current == "\n":
        return Done(None, cursor.advance())
    if cursor.current == "\r":
        after = cursor.advance()
        if after.is_eof:
            return end_of_input(after)
        if after.current == "\n":
            return Done(None, after.advance())
    return NO_MATCH


def match_line_continuation(cursor: Cursor) -> ParseOutcome[str] | NoMatch:
    """Match a line continuation and fold it to the empty string.

    Args:
        cursor: Position of the backslash

    Returns:
        Done("", cursor_after_trailing_blanks) when the whole run matches,
        Incomplete if the buffer ends before the run is decided,
        NO_MATCH if anything other than blanks precedes the line ending
    """
    if cursor.is_eof:
        return end_of_input(cursor)
    if cursor.current != "\\":
        return NO_MATCH

    line_end = match_line_end(skip_blank_inline(cursor.advance()))
    if not isinstance(line_end, Done):
        return line_end

    after = skip_blank_inline(line_end.cursor)
    if after.needs_input:
        # More blanks may follow on the next read
        return Incomplete(1)
    return Done("", after)
