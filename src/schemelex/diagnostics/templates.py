"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode

__all__ = ["ErrorTemplate"]


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    This keeps messages testable and documents every error case in one place.
    """

    @staticmethod
    def unexpected_eof(position: int) -> Diagnostic:
        """Unexpected end of input.

        Args:
            position: The position where EOF was encountered

        Returns:
            Diagnostic for UNEXPECTED_EOF
        """
        msg = f"Unexpected EOF at position {position}"
        return Diagnostic(
            code=DiagnosticCode.UNEXPECTED_EOF,
            message=msg,
            span=None,
            hint="Check is_eof before reading the current character",
        )

    @staticmethod
    def not_a_string(found: str | None) -> Diagnostic:
        """Input does not start with an opening quote.

        Args:
            found: The character found instead, or None for empty input

        Returns:
            Diagnostic for NOT_A_STRING
        """
        if found is None:
            msg = "Expected string literal, found end of input"
        else:
            msg = f"Expected string literal, found {found!r}"
        return Diagnostic(
            code=DiagnosticCode.NOT_A_STRING,
            message=msg,
            span=None,
            hint='String literals start with a double quote (")',
        )

    @staticmethod
    def invalid_escape(char: str | None) -> Diagnostic:
        """Backslash followed by no recognized escape.

        Args:
            char: The character after the backslash (None if absent)

        Returns:
            Diagnostic for INVALID_ESCAPE
        """
        if char is None:
            msg = "Invalid escape sequence"
        else:
            msg = f"Invalid escape sequence \\{char}"
        return Diagnostic(
            code=DiagnosticCode.INVALID_ESCAPE,
            message=msg,
            span=None,
            hint=(
                'Valid escapes: \\" \\\\ \\a \\b \\t \\n \\r, \\x followed by '
                "1 to 8 hex digits, or a backslash before a line ending"
            ),
        )

    @staticmethod
    def unknown_escape(char: str) -> Diagnostic:
        """Mnemonic escape letter outside the table.

        Args:
            char: The letter after the backslash

        Returns:
            Diagnostic for UNKNOWN_ESCAPE
        """
        msg = f"Unknown escape sequence \\{char}"
        return Diagnostic(
            code=DiagnosticCode.UNKNOWN_ESCAPE,
            message=msg,
            span=None,
            hint="Mnemonic escapes are \\a \\b \\t \\n and \\r",
        )

    @staticmethod
    def invalid_codepoint(digits: str) -> Diagnostic:
        """Hex escape names no scalar character.

        Args:
            digits: The hex digits of the escape

        Returns:
            Diagnostic for INVALID_CODEPOINT
        """
        msg = f"Invalid code point U+{digits.upper()} in hex escape"
        return Diagnostic(
            code=DiagnosticCode.INVALID_CODEPOINT,
            message=msg,
            span=None,
            hint="Code points must be at most U+10FFFF and outside U+D800 to U+DFFF",
        )

    @staticmethod
    def unterminated_string() -> Diagnostic:
        """Input closed before the closing quote.

        Returns:
            Diagnostic for UNTERMINATED_STRING
        """
        return Diagnostic(
            code=DiagnosticCode.UNTERMINATED_STRING,
            message="Unterminated string literal",
            span=None,
            hint='Add the closing double quote (")',
        )

    @staticmethod
    def source_too_large(size: int, limit: int) -> Diagnostic:
        """Source exceeds the configured size limit.

        Args:
            size: Source length in characters
            limit: Configured maximum

        Returns:
            Diagnostic for SOURCE_TOO_LARGE
        """
        msg = f"Source size ({size:,} characters) exceeds maximum ({limit:,} characters)"
        return Diagnostic(
            code=DiagnosticCode.SOURCE_TOO_LARGE,
            message=msg,
            span=None,
            hint="Configure max_source_size to increase the limit",
        )
