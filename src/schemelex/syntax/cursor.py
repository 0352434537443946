"""Immutable cursor infrastructure for streaming, type-safe parsing.

Implements the immutable cursor pattern for zero-`None` parsing over input
that may still be growing.
Python 3.13+. Zero external dependencies.

Design Philosophy:
    - Cursor is immutable (frozen dataclass)
    - EOF is a state (is_eof), not a return value
    - Every advance() returns NEW cursor (prevents infinite loops)
    - End of *buffer* and end of *stream* are different things: a cursor
      at EOF with at_end=False may see more text on the next call
    - Line:column computed on-demand (O(n) only for errors)

Pattern Reference:
    - Rust nom parser combinator library (streaming mode)
    - Haskell Parsec
"""

from dataclasses import dataclass, field, replace

from schemelex.diagnostics import Diagnostic, ErrorTemplate, SourceSpan
from schemelex.enums import ErrorKind

__all__ = ["Cursor", "ParseError", "to_cursor"]


@dataclass(frozen=True, slots=True)
class Cursor:
    """Immutable source position tracker.

    Key Design Decisions:
        1. Frozen dataclass - Immutability enforced by Python
        2. Slots - Memory efficiency (a cursor is created per character)
        3. Simple position - Just an integer offset
        4. EOF is a property - Not a return value
        5. at_end carries the caller's "no more input" signal

    Example:
        >>> cursor = Cursor('"hi"', 0)
        >>> cursor.current
        '"'
        >>> cursor.advance().current
        'h'
        >>> Cursor("hi", 2).needs_input
        True
        >>> Cursor("hi", 2, at_end=True).needs_input
        False
    """

    source: str
    pos: int
    at_end: bool = False

    @property
    def is_eof(self) -> bool:
        """Check if at end of the buffered input.

        Returns:
            True if position >= source length
        """
        return self.pos >= len(self.source)

    @property
    def needs_input(self) -> bool:
        """True when at EOF and the stream may still deliver more text.

        Parsers that hit EOF return Incomplete when this is True and make a
        definitive decision when it is False.
        """
        return self.is_eof and not self.at_end

    @property
    def current(self) -> str:
        """Get current character.

        Returns:
            Current character at position

        Raises:
            EOFError: If at end of input
        """
        if self.is_eof:
            diagnostic = ErrorTemplate.unexpected_eof(self.pos)
            raise EOFError(diagnostic.message)
        return self.source[self.pos]

    def peek(self, offset: int = 0) -> str | None:
        """Peek at character with offset without advancing.

        Args:
            offset: Offset from current position (0 = current, 1 = next)

        Returns:
            Character at position + offset, or None if beyond EOF
        """
        target_pos = self.pos + offset
        if target_pos >= len(self.source):
            return None
        return self.source[target_pos]

    def advance(self, count: int = 1) -> "Cursor":
        """Return new cursor advanced by count positions.

        Args:
            count: Number of positions to advance (default: 1)

        Returns:
            New Cursor instance at new position (original unchanged)

        Example:
            >>> cursor = Cursor("hello", 0)
            >>> cursor.advance(2).pos
            2
            >>> cursor.pos
            0
        """
        new_pos = min(self.pos + count, len(self.source))
        return Cursor(self.source, new_pos, self.at_end)

    def slice_to(self, end_pos: int) -> str:
        """Extract source slice from current position to end_pos.

        Example:
            >>> start = Cursor("hello world", 0)
            >>> cursor = start.advance(5)
            >>> start.slice_to(cursor.pos)
            'hello'
        """
        return self.source[self.pos : end_pos]

    def slice_ahead(self, n: int) -> str:
        """Get up to n characters without advancing cursor.

        Example:
            >>> Cursor("hello", 0).slice_ahead(3)
            'hel'
            >>> Cursor("hello", 0).slice_ahead(10)
            'hello'
        """
        return self.source[self.pos : self.pos + n]

    @property
    def remaining(self) -> str:
        """Unconsumed text from the current position to the end of the buffer."""
        return self.source[self.pos :]

    def compute_line_col(self) -> tuple[int, int]:
        """Compute line and column for current position.

        Returns:
            (line, column) tuple (1-indexed, like text editors)

        Performance:
            O(n) where n = current position.
            Only call for error reporting, not during normal parsing!

        Example:
            >>> cursor = Cursor('"ab\\ncd', 5)
            >>> cursor.compute_line_col()
            (2, 2)
        """
        line = self.source.count("\n", 0, self.pos) + 1
        last_newline = self.source.rfind("\n", 0, self.pos)
        col = self.pos - last_newline if last_newline >= 0 else self.pos + 1
        return (line, col)

    def closed(self) -> "Cursor":
        """Return a cursor over the same input with the stream declared ended."""
        if self.at_end:
            return self
        return replace(self, at_end=True)


def to_cursor(source: "str | Cursor", *, final: bool = False) -> Cursor:
    """Accept either raw text (starting at offset 0) or an existing cursor.

    Args:
        source: Input text or a cursor positioned inside a larger buffer
        final: True when no more input will arrive

    Returns:
        Cursor at the start of the input
    """
    cursor = source if isinstance(source, Cursor) else Cursor(source, 0)
    return cursor.closed() if final else cursor


@dataclass(frozen=True, slots=True)
class ParseError:
    """Decode failure with kind, location and diagnostic.

    Design:
        - Stores cursor at error point (for line:column)
        - kind is the machine-readable classification
        - diagnostic carries the user-facing message and hint
        - char is the offending escape character, where there is one

    Example:
        >>> cursor = Cursor('"a\\\\p"', 2)
        >>> error = ParseError(
        ...     ErrorKind.UNKNOWN_ESCAPE, cursor, ErrorTemplate.unknown_escape("p"), char="p"
        ... )
        >>> error.format_error()
        '1:3: Unknown escape sequence \\\\p'
    """

    kind: ErrorKind
    cursor: Cursor
    diagnostic: Diagnostic
    char: str | None = None
    expected: tuple[str, ...] = field(default_factory=tuple)

    @property
    def position(self) -> int:
        """Character offset of the failure in the cursor's source."""
        return self.cursor.pos

    @property
    def message(self) -> str:
        """Human-readable error description."""
        return self.diagnostic.message

    def format_error(self) -> str:
        """Format error with line:column.

        Returns:
            Formatted error string with location
        """
        line, col = self.cursor.compute_line_col()
        error_msg = f"{line}:{col}: {self.message}"

        if self.expected:
            expected_str = ", ".join(f"'{e}'" for e in self.expected)
            error_msg += f" (expected: {expected_str})"

        return error_msg

    def to_diagnostic(self) -> Diagnostic:
        """Return the diagnostic with its source span filled in."""
        line, col = self.cursor.compute_line_col()
        end = min(self.position + 1, len(self.cursor.source))
        span = SourceSpan(
            start=self.position, end=max(end, self.position), line=line, column=col
        )
        return replace(self.diagnostic, span=span)
