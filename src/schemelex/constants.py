"""Shared constants for schemelex.

This module provides centralized configuration constants used across the
syntax and diagnostics packages. Placing constants here avoids circular
imports and provides a single source of truth.

Constants are grouped by domain:
- Escape grammar: hex escape width, code point bounds
- Input limits: DoS prevention via size constraints

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Escape grammar
    "MAX_HEX_ESCAPE_DIGITS",
    "MAX_CODE_POINT",
    "SURROGATE_RANGE_START",
    "SURROGATE_RANGE_END",
    "HEX_DIGITS",
    "HORIZONTAL_WHITESPACE",
    # Input limits
    "MAX_SOURCE_SIZE",
]

# ============================================================================
# ESCAPE GRAMMAR
# ============================================================================

# Hex escapes carry 1 to 8 digits and have no terminator: the digit run
# length alone bounds the escape. A ninth digit is ordinary text.
MAX_HEX_ESCAPE_DIGITS: int = 8

# Maximum valid Unicode code point.
MAX_CODE_POINT: int = 0x10FFFF

# UTF-16 surrogate code point range (D800-DFFF).
# Not scalar values, so a hex escape naming one is rejected.
SURROGATE_RANGE_START: int = 0xD800
SURROGATE_RANGE_END: int = 0xDFFF

# ASCII hex digits only. str.isdigit() and int(..., 16) accept more than this.
HEX_DIGITS: frozenset[str] = frozenset("0123456789abcdefABCDEF")

# Whitespace allowed around the line ending of a line continuation.
HORIZONTAL_WHITESPACE: frozenset[str] = frozenset(" \t")

# ============================================================================
# INPUT LIMITS
# ============================================================================

# Default maximum source size in characters (10 MiB).
# Streaming callers re-scan the whole buffer on every feed, so an unbounded
# buffer is also unbounded work.
MAX_SOURCE_SIZE: int = 10 * 1024 * 1024
