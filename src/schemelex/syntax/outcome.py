"""Three-way parse outcomes for streaming input.

Every decoder returns exactly one of:

    Done(value, cursor)   - parsed; cursor sits after the consumed text
    Incomplete(needed)    - valid so far, cannot decide without more input
    Failed(error)         - definitively invalid, more input will not help

Incomplete is not an error. A caller that receives it appends input and
re-invokes the decoder from the same start position, or declares end of
input (``final=True``) to force a decision.

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from typing import Final

from schemelex.diagnostics import ErrorTemplate
from schemelex.enums import ErrorKind

from .cursor import Cursor, ParseError

__all__ = [
    "NO_MATCH",
    "Done",
    "Failed",
    "Incomplete",
    "NoMatch",
    "ParseOutcome",
    "end_of_input",
    "failed",
]


@dataclass(frozen=True, slots=True)
class Done[T]:
    """Successful parse.

    Attributes:
        value: The decoded value
        cursor: Position immediately after the consumed input
    """

    value: T
    cursor: Cursor

    @property
    def pos(self) -> int:
        """Offset immediately after the consumed input."""
        return self.cursor.pos

    @property
    def remaining(self) -> str:
        """Unconsumed input after the parsed value."""
        return self.cursor.remaining


@dataclass(frozen=True, slots=True)
class Incomplete:
    """More input is needed before a decision can be made.

    Attributes:
        needed: Minimum number of additional characters, if known
    """

    needed: int | None = None


@dataclass(frozen=True, slots=True)
class Failed:
    """Definitive decode failure.

    Attributes:
        error: Kind, position and diagnostic of the failure
    """

    error: ParseError

    @property
    def kind(self) -> ErrorKind:
        """Shortcut for error.kind."""
        return self.error.kind

    @property
    def position(self) -> int:
        """Shortcut for error.position."""
        return self.error.position


class NoMatch:
    """Grammar alternative did not apply; the caller tries the next one.

    Internal to ordered-alternative dispatch. Never returned by a public
    entry point.
    """

    __slots__ = ()

    def __repr__(self) -> str:
        return "NO_MATCH"


NO_MATCH: Final = NoMatch()

type ParseOutcome[T] = Done[T] | Incomplete | Failed


def failed(kind: ErrorKind, cursor: Cursor, *, char: str | None = None, digits: str = "") -> Failed:
    """Build a Failed outcome with the diagnostic for kind.

    Args:
        kind: Error classification
        cursor: Position of the failure
        char: Offending escape character (escape errors)
        digits: Hex digits of the escape (INVALID_CODEPOINT)
    """
    match kind:
        case ErrorKind.NOT_A_STRING:
            diagnostic = ErrorTemplate.not_a_string(cursor.peek())
            expected: tuple[str, ...] = ('"',)
        case ErrorKind.INVALID_ESCAPE:
            diagnostic = ErrorTemplate.invalid_escape(char)
            expected = ()
        case ErrorKind.UNKNOWN_ESCAPE:
            diagnostic = ErrorTemplate.unknown_escape(char or "")
            expected = ("a", "b", "t", "n", "r")
        case ErrorKind.INVALID_CODEPOINT:
            diagnostic = ErrorTemplate.invalid_codepoint(digits)
            expected = ()
        case ErrorKind.UNTERMINATED_STRING:
            diagnostic = ErrorTemplate.unterminated_string()
            expected = ('"',)
    return Failed(ParseError(kind, cursor, diagnostic, char=char, expected=expected))


def end_of_input(cursor: Cursor, needed: int | None = 1) -> Incomplete | Failed:
    """Outcome for running out of input where more text was required.

    Returns Incomplete while the stream is open. Once the caller has
    declared end of input the literal can never be completed.
    """
    if cursor.needs_input:
        return Incomplete(needed)
    return failed(ErrorKind.UNTERMINATED_STRING, cursor)
