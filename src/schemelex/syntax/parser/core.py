"""String literal scanner.

This module provides the top-level decoder that turns a quoted literal into
its value:

    "a\\tb\\x41;"   ->  Done(value="a\\tbA;", remaining="")

Architecture:
    The scanner uses an immutable cursor pattern (:class:`~schemelex.syntax.cursor.Cursor`)
    and holds no state between calls. It repeatedly asks
    :func:`~schemelex.syntax.parser.rules.parse_string_fragment` for the next
    fragment and joins them when the closing quote is reached.

Streaming:
    When the buffer ends before the closing quote the result is
    :class:`~schemelex.syntax.outcome.Incomplete`. The caller appends input and
    calls again from the same start position; progress is re-derived from the
    longer buffer. Passing ``final=True`` declares that no more input will
    arrive and turns an unfinished literal into UNTERMINATED_STRING.

Security:
    :class:`StringLiteralParser` validates input size before scanning to
    bound the work of repeated re-scans.
"""

import logging
from typing import assert_never

from schemelex.constants import MAX_SOURCE_SIZE
from schemelex.diagnostics import ErrorTemplate, StringLiteralError
from schemelex.enums import ErrorKind
from schemelex.syntax.cursor import Cursor, to_cursor
from schemelex.syntax.outcome import (
    Done,
    Failed,
    Incomplete,
    NoMatch,
    ParseOutcome,
    failed,
)
from schemelex.syntax.parser.rules import parse_string_fragment

__all__ = [
    "StringLiteralParser",
    "decode_string_literal",
    "parse_string_literal",
    "scan_string_literal",
]

logger = logging.getLogger(__name__)


def scan_string_literal(cursor: Cursor) -> ParseOutcome[str]:
    """Scan a string literal starting at cursor.

    States:
        Start  - expects the opening quote
        InBody - one fragment per iteration, appended to the accumulator
        Closed - unescaped quote consumed, value returned

    Args:
        cursor: Position of the opening quote

    Returns:
        Done(value, cursor_after_closing_quote) on success,
        Incomplete if the buffer ends first and the stream is open,
        Failed(NOT_A_STRING) if there is no opening quote,
        Failed(...) from the fragment recognizer otherwise
    """
    if cursor.needs_input:
        return Incomplete(1)
    if cursor.is_eof or cursor.current != '"':
        return failed(ErrorKind.NOT_A_STRING, cursor)

    cursor = cursor.advance()
    fragments: list[str] = []

    while True:
        result = parse_string_fragment(cursor)
        if isinstance(result, NoMatch):
            # Only an unescaped quote is not a fragment
            return Done("".join(fragments), cursor.advance())
        if not isinstance(result, Done):
            return result
        fragments.append(result.value)
        cursor = result.cursor


def parse_string_literal(source: str | Cursor, *, final: bool = False) -> ParseOutcome[str]:
    """Decode the string literal at the start of source.

    Examples:
        '""'            -> Done(value="", remaining="")
        '"abc" rest'    -> Done(value="abc", remaining=" rest")
        '"ab'           -> Incomplete(1)
        '"ab' (final)   -> Failed(UNTERMINATED_STRING)
        'abc'           -> Failed(NOT_A_STRING)

    Args:
        source: Text beginning with a double quote, or a cursor positioned
            on one inside a larger buffer
        final: True when no more input will arrive

    Returns:
        ParseOutcome with the decoded value
    """
    return scan_string_literal(to_cursor(source, final=final))


def decode_string_literal(source: str) -> tuple[str, str]:
    """Decode a complete literal, raising on failure.

    The buffer is treated as complete: there is no Incomplete outcome.

    Args:
        source: Text beginning with a double quote

    Returns:
        (value, remaining) tuple

    Raises:
        StringLiteralError: If the literal cannot be decoded

    Example:
        >>> decode_string_literal('"a\\\\nb" tail')
        ('a\\nb', ' tail')
    """
    return StringLiteralParser().decode(source)


class StringLiteralParser:
    """Configured entry point for string literal decoding.

    Design:
    - Stateless between calls (safe to share across threads)
    - Size limit checked before scanning
    - Failures logged at DEBUG with position and message

    Attributes:
        max_source_size: Maximum allowed source size in characters (default: 10 MiB)
    """

    __slots__ = ("_max_source_size",)

    def __init__(self, *, max_source_size: int | None = None) -> None:
        """Initialize parser with optional size limit.

        Args:
            max_source_size: Maximum source size in characters (default: 10 MiB).
                            Set to 0 to disable size limit (not recommended).
        """
        self._max_source_size = (
            max_source_size if max_source_size is not None else MAX_SOURCE_SIZE
        )

    @property
    def max_source_size(self) -> int:
        """Maximum allowed source size in characters."""
        return self._max_source_size

    def check_size(self, size: int) -> None:
        """Raise ValueError if size exceeds the configured limit.

        Raises:
            ValueError: If size exceeds max_source_size (DoS prevention)
        """
        if self._max_source_size > 0 and size > self._max_source_size:
            diagnostic = ErrorTemplate.source_too_large(size, self._max_source_size)
            raise ValueError(diagnostic.message)

    def parse(self, source: str | Cursor, *, final: bool = False) -> ParseOutcome[str]:
        """Decode the literal at the start of source.

        Args:
            source: Text or cursor positioned on the opening quote
            final: True when no more input will arrive

        Returns:
            ParseOutcome with the decoded value

        Raises:
            ValueError: If source exceeds max_source_size
        """
        cursor = to_cursor(source, final=final)
        self.check_size(len(cursor.source))

        result = scan_string_literal(cursor)
        if isinstance(result, Failed):
            logger.debug(
                "String literal decode failed at %d (%s): %s",
                result.position,
                result.kind,
                result.error.message,
            )
        return result

    def decode(self, source: str) -> tuple[str, str]:
        """Decode a complete literal, raising on failure.

        Args:
            source: Text beginning with a double quote

        Returns:
            (value, remaining) tuple

        Raises:
            StringLiteralError: If the literal cannot be decoded
            ValueError: If source exceeds max_source_size
        """
        result = self.parse(source, final=True)
        match result:
            case Done():
                return result.value, result.remaining
            case Failed():
                raise StringLiteralError(result.error)
            case Incomplete():
                # Input is closed, so waiting for more means the literal never ended
                end = Cursor(source, len(source), at_end=True)
                raise StringLiteralError(failed(ErrorKind.UNTERMINATED_STRING, end).error)
            case _ as unreachable:
                # assert_never() provides a type-checked exhaustiveness guard.
                assert_never(unreachable)
