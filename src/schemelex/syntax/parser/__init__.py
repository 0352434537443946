"""String literal parser module.

This module provides the scanner and its grammar rules organized into
focused submodules.

Module Organization:
- core.py: Scanner, parse_string_literal() entry point, StringLiteralParser
- rules.py: Fragment recognizer (ordered escape dispatch)
- primitives.py: Mnemonic and hex escape decoders
- whitespace.py: Inline whitespace and line continuation folding

Public API:
    StringLiteralParser: Configured parser (size limit, logging)
    parse_string_literal: Streaming decoder entry point
    decode_string_literal: Raising decoder for complete input
    decode_mnemonic: Mnemonic escape decoder
    decode_hex_escape: Hex escape decoder
"""

from schemelex.syntax.parser.core import (
    StringLiteralParser,
    decode_string_literal,
    parse_string_literal,
)
from schemelex.syntax.parser.primitives import decode_hex_escape, decode_mnemonic

__all__ = [
    "StringLiteralParser",
    "decode_hex_escape",
    "decode_mnemonic",
    "decode_string_literal",
    "parse_string_literal",
]
