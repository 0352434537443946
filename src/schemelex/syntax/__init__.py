"""String literal syntax package.

Provides the cursor, parse outcomes, the streaming decoder, the push-style
reader, and the serializer.

Python 3.13+.
"""

from .cursor import Cursor, ParseError
from .outcome import Done, Failed, Incomplete, ParseOutcome
from .parser import (
    StringLiteralParser,
    decode_hex_escape,
    decode_mnemonic,
    decode_string_literal,
    parse_string_literal,
)
from .serializer import SerializationValidationError, encode_string_literal
from .stream import StringLiteralReader

__all__ = [
    "Cursor",
    "Done",
    "Failed",
    "Incomplete",
    "ParseError",
    "ParseOutcome",
    "SerializationValidationError",
    "StringLiteralParser",
    "StringLiteralReader",
    "decode_hex_escape",
    "decode_mnemonic",
    "decode_string_literal",
    "encode_string_literal",
    "parse_string_literal",
]
