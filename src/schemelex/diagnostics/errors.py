"""schemelex exception hierarchy with structured diagnostics.

Decoders return failures as values (see :mod:`schemelex.syntax.outcome`).
These exceptions are raised only by the convenience APIs that promise a
decoded value or nothing.

Python 3.13+. Zero external dependencies.
"""

from typing import TYPE_CHECKING

from .codes import Diagnostic

if TYPE_CHECKING:
    from schemelex.syntax.cursor import ParseError

__all__ = ["SchemeLexError", "StringLiteralError"]


class SchemeLexError(Exception):
    """Base exception for all schemelex errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize SchemeLexError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class StringLiteralError(SchemeLexError):
    """A string literal could not be decoded.

    Attributes:
        error: The ParseError describing the failure
    """

    def __init__(self, error: "ParseError") -> None:
        """Initialize StringLiteralError.

        Args:
            error: ParseError returned by the scanner
        """
        super().__init__(error.to_diagnostic())
        self.error = error

    @property
    def position(self) -> int:
        """Character offset of the failure."""
        return self.error.position
