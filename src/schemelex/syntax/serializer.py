"""Serialize Python strings back to string literal syntax.

Converts a value to a literal that the scanner decodes to the same value.
Useful for:
- Printers and pretty-printers (write/display of strings)
- Code generators
- Property-based testing (roundtrip: encode -> parse)

Python 3.13+.
"""

from schemelex.constants import MAX_HEX_ESCAPE_DIGITS
from schemelex.syntax.parser.primitives import MNEMONIC_ESCAPES, is_scalar_value

__all__ = ["SerializationValidationError", "encode_string_literal"]


class SerializationValidationError(ValueError):
    """Raised when a value cannot be written as a string literal.

    The only cause is a lone surrogate: no escape can produce one, so
    writing it would create a literal that decodes to something else.
    """


_REVERSE_MNEMONICS: dict[str, str] = {
    char: f"\\{letter}" for letter, char in MNEMONIC_ESCAPES.items()
}


def _escape_char(char: str) -> str:
    """Return the literal text for one character of a value."""
    if char == '"':
        return '\\"'
    if char == "\\":
        return "\\\\"
    mnemonic = _REVERSE_MNEMONICS.get(char)
    if mnemonic is not None:
        return mnemonic
    code_point = ord(char)
    if code_point < 0x20 or code_point == 0x7F:
        # Hex escapes have no terminator and swallow any following hex digit,
        # so always write the full width.
        return f"\\x{code_point:0{MAX_HEX_ESCAPE_DIGITS}x}"
    return char


def encode_string_literal(value: str) -> str:
    """Encode value as a double-quoted string literal.

    Escapes:
        " and \\             -> \\" and \\\\
        BEL BS TAB LF CR     -> \\a \\b \\t \\n \\r
        other C0, DEL        -> \\x followed by 8 hex digits
        everything else      -> written as-is

    Args:
        value: Text to encode

    Returns:
        Literal text including the surrounding quotes

    Raises:
        SerializationValidationError: If value contains a lone surrogate

    Example:
        >>> encode_string_literal('say "hi"\\n')
        '"say \\\\"hi\\\\"\\\\n"'
    """
    for index, char in enumerate(value):
        if not is_scalar_value(ord(char)):
            msg = f"Cannot encode lone surrogate U+{ord(char):04X} at index {index}"
            raise SerializationValidationError(msg)
    return '"' + "".join(_escape_char(char) for char in value) + '"'

