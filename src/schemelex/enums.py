"""Enumerations for schemelex type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from enum import StrEnum

__all__ = ["ErrorKind"]


class ErrorKind(StrEnum):
    """Kind of string literal decode failure.

    StrEnum provides automatic string conversion: str(ErrorKind.NOT_A_STRING) == "not-a-string"
    """

    NOT_A_STRING = "not-a-string"
    """Input does not start with an opening double quote."""

    INVALID_ESCAPE = "invalid-escape"
    """Backslash not followed by any recognized escape grammar."""

    UNKNOWN_ESCAPE = "unknown-escape"
    """Mnemonic escape letter outside the fixed table (e.g. \\p)."""

    INVALID_CODEPOINT = "invalid-codepoint"
    """Hex escape names a surrogate or a value above U+10FFFF."""

    UNTERMINATED_STRING = "unterminated-string"
    """Input closed before the closing double quote."""
