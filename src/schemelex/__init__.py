"""schemelex - streaming decoder for Scheme string literals.

Decodes double-quoted string literals (escapes resolved, line continuations
folded) from input that may still be arriving. Every decoder returns one of
three outcomes: Done, Incomplete (need more input), or Failed.

Public API:
    parse_string_literal - Decode a literal from a possibly partial buffer
    decode_mnemonic - Decode a mnemonic escape (\\a \\b \\t \\n \\r)
    decode_hex_escape - Decode a hex escape (\\x + 1 to 8 hex digits)
    decode_string_literal - Decode a complete literal, raising on failure
    encode_string_literal - Write a value as a literal
    StringLiteralReader - Push-style reader for chunked input
    StringLiteralParser - Configured parser (size limit)

Exceptions:
    SchemeLexError - Base exception class
    StringLiteralError - Raised by the raising decode APIs

Submodules:
    schemelex.syntax - Cursor, outcomes, parser, reader, serializer
    schemelex.diagnostics - Error codes, templates, formatting
"""

from .diagnostics import SchemeLexError, StringLiteralError
from .enums import ErrorKind
from .syntax import (
    Cursor,
    Done,
    Failed,
    Incomplete,
    ParseError,
    ParseOutcome,
    StringLiteralParser,
    StringLiteralReader,
    decode_hex_escape,
    decode_mnemonic,
    decode_string_literal,
    encode_string_literal,
    parse_string_literal,
)

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("schemelex")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "Cursor",
    "Done",
    "ErrorKind",
    "Failed",
    "Incomplete",
    "ParseError",
    "ParseOutcome",
    "SchemeLexError",
    "StringLiteralError",
    "StringLiteralParser",
    "StringLiteralReader",
    "__version__",
    "decode_hex_escape",
    "decode_mnemonic",
    "decode_string_literal",
    "encode_string_literal",
    "parse_string_literal",
]
