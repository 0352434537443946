"""Primitive escape decoders for Scheme string literals.

This module provides the two table/number driven escapes:

    \\a \\b \\t \\n \\r   mnemonic escapes (fixed table)
    \\xHHHHHHHH        hex escape, 1 to 8 hex digits, no terminator

Each decoder comes in two flavours:

    match_*  used by ordered-alternative dispatch in rules.py; returns
             NO_MATCH when the text is not this kind of escape
    parse_*  standalone; a non-match becomes a Failed outcome

Both take a cursor positioned AT the backslash. Error positions point at
that backslash, the start of the escape sequence.
"""

from collections.abc import Mapping
from types import MappingProxyType

from schemelex.constants import (
    HEX_DIGITS,
    MAX_CODE_POINT,
    MAX_HEX_ESCAPE_DIGITS,
    SURROGATE_RANGE_END,
    SURROGATE_RANGE_START,
)
from schemelex.enums import ErrorKind
from schemelex.syntax.cursor import Cursor, to_cursor
from schemelex.syntax.outcome import (
    NO_MATCH,
    Done,
    NoMatch,
    ParseOutcome,
    end_of_input,
    failed,
)

__all__ = [
    "MNEMONIC_ESCAPES",
    "decode_hex_escape",
    "decode_mnemonic",
    "is_scalar_value",
    "match_hex_escape",
    "match_mnemonic_escape",
    "parse_hex_escape",
    "parse_mnemonic_escape",
]

MNEMONIC_ESCAPES: Mapping[str, str] = MappingProxyType(
    {
        "a": "\u0007",  # alarm
        "b": "\u0008",  # backspace
        "t": "\u0009",  # tab
        "n": "\u000a",  # linefeed
        "r": "\u000d",  # return
    }
)


def is_scalar_value(code_point: int) -> bool:
    """Check that code_point is a Unicode scalar value.

    Scalar values are 0..U+10FFFF minus the surrogate block U+D800..U+DFFF.
    Python's chr() happily builds lone surrogates, so callers must check
    before converting.
    """
    if code_point < 0 or code_point > MAX_CODE_POINT:
        return False
    return not SURROGATE_RANGE_START <= code_point <= SURROGATE_RANGE_END


def match_mnemonic_escape(cursor: Cursor) -> ParseOutcome[str] | NoMatch:
    """Match a mnemonic escape such as \\n.

    Args:
        cursor: Position of the backslash

    Returns:
        Done(control_char, cursor_after_letter) on a table hit,
        Incomplete / Failed(UNTERMINATED_STRING) if input ends first,
        NO_MATCH otherwise
    """
    if cursor.is_eof:
        return end_of_input(cursor)
    if cursor.current != "\\":
        return NO_MATCH

    letter = cursor.advance()
    if letter.is_eof:
        return end_of_input(letter)

    decoded = MNEMONIC_ESCAPES.get(letter.current)
    if decoded is None:
        return NO_MATCH
    return Done(decoded, letter.advance())


def parse_mnemonic_escape(cursor: Cursor) -> ParseOutcome[str]:
    """Parse a mnemonic escape, failing on anything outside the table.

    Returns:
        Done on success, Incomplete if the letter has not arrived yet,
        Failed(UNKNOWN_ESCAPE) for a letter outside the table,
        Failed(INVALID_ESCAPE) if the input does not start with a backslash
    """
    result = match_mnemonic_escape(cursor)
    if not isinstance(result, NoMatch):
        return result
    if cursor.current != "\\":
        return failed(ErrorKind.INVALID_ESCAPE, cursor)
    return failed(ErrorKind.UNKNOWN_ESCAPE, cursor, char=cursor.peek(1))


def match_hex_escape(cursor: Cursor) -> ParseOutcome[str] | NoMatch:  # noqa: PLR0911
    """Match a hex escape: backslash, x, then 1 to 8 hex digits.

    The digit run is greedy and bounded: digits are consumed until a
    non-hex character or the eighth digit. A ninth digit stays in the input.

    Note: PLR0911 (too many returns) is acceptable for parser grammar methods.
    Each return represents one grammar outcome.

    Args:
        cursor: Position of the backslash

    Returns:
        Done(char, cursor_after_digits) for a valid scalar value,
        Failed(INVALID_CODEPOINT) for surrogates and values above U+10FFFF,
        Incomplete while more digits could still arrive,
        NO_MATCH if the text is not a hex escape
    """
    if cursor.is_eof:
        return end_of_input(cursor)
    if cursor.current != "\\":
        return NO_MATCH

    marker = cursor.advance()
    if marker.is_eof:
        return end_of_input(marker)
    if marker.current != "x":
        return NO_MATCH

    start = marker.advance()
    end = start
    count = 0
    while count < MAX_HEX_ESCAPE_DIGITS and not end.is_eof and end.current in HEX_DIGITS:
        end = end.advance()
        count += 1

    # A run touching the end of an open buffer could still grow
    if end.is_eof and count < MAX_HEX_ESCAPE_DIGITS and (end.needs_input or count == 0):
        return end_of_input(end)
    if count == 0:
        return NO_MATCH

    digits = start.slice_to(end.pos)
    code_point = int(digits, 16)
    if not is_scalar_value(code_point):
        return failed(ErrorKind.INVALID_CODEPOINT, cursor, digits=digits)
    return Done(chr(code_point), end)


def parse_hex_escape(cursor: Cursor) -> ParseOutcome[str]:
    """Parse a hex escape, failing on anything that is not one.

    Returns:
        Result of match_hex_escape, with NO_MATCH reported as
        Failed(INVALID_ESCAPE)
    """
    result = match_hex_escape(cursor)
    if not isinstance(result, NoMatch):
        return result
    if cursor.current != "\\":
        return failed(ErrorKind.INVALID_ESCAPE, cursor)
    return failed(ErrorKind.INVALID_ESCAPE, cursor, char=cursor.peek(1))


def decode_mnemonic(source: str | Cursor, *, final: bool = False) -> ParseOutcome[str]:
    """Decode a mnemonic escape at the start of source.

    Examples:
        \\n -> Done(value="\\n", remaining="")
        \\p -> Failed(UNKNOWN_ESCAPE, char="p")
        \\  -> Incomplete(1)

    Args:
        source: Text (or cursor) beginning with a backslash
        final: True when no more input will arrive

    Returns:
        ParseOutcome with the decoded control character
    """
    return parse_mnemonic_escape(to_cursor(source, final=final))


def decode_hex_escape(source: str | Cursor, *, final: bool = False) -> ParseOutcome[str]:
    """Decode a hex escape at the start of source.

    Examples:
        \\x20!    -> Done(value=" ", remaining="!")
        \\xd800!  -> Failed(INVALID_CODEPOINT)
        \\x4      -> Incomplete(1); with final=True, Done(value="\\x04")

    Args:
        source: Text (or cursor) beginning with a backslash and x
        final: True when no more input will arrive

    Returns:
        ParseOutcome with the decoded character
    """
    return parse_hex_escape(to_cursor(source, final=final))

