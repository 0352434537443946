"""Hypothesis strategies for schemelex property-based testing.

Usage:
    from tests.strategies import string_literals, plain_text
"""

from .literals import (
    BLANKS,
    PLAIN_CHARS,
    SCALAR_CHARS,
    Piece,
    hex_escapes,
    line_continuations,
    literal_pieces,
    plain_text,
    scalar_code_points,
    scalar_text,
    string_literals,
    surrogate_code_points,
)

__all__ = [
    "BLANKS",
    "PLAIN_CHARS",
    "SCALAR_CHARS",
    "Piece",
    "hex_escapes",
    "line_continuations",
    "literal_pieces",
    "plain_text",
    "scalar_code_points",
    "scalar_text",
    "string_literals",
    "surrogate_code_points",
]
