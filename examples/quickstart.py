"""Quickstart example for schemelex.

This example demonstrates decoding Scheme string literals from complete
buffers, from text that arrives in pieces, and back again.

Note: Examples print outcomes directly for brevity. In production, match on
Done / Incomplete / Failed and report failures with their diagnostics.
"""

from schemelex import (
    Done,
    Failed,
    StringLiteralError,
    StringLiteralReader,
    decode_hex_escape,
    decode_mnemonic,
    decode_string_literal,
    encode_string_literal,
    parse_string_literal,
)
from schemelex.diagnostics import DiagnosticFormatter, OutputFormat

# Example 1: Complete literal
print("=" * 50)
print("Example 1: Complete Literal")
print("=" * 50)

result = parse_string_literal('"Hello,\\tWorld!\\x1F600;" (newline)')
if isinstance(result, Done):
    print(repr(result.value))
    print(repr(result.remaining))
# Output: 'Hello,\tWorld!\U0001f600;'
# Output: ' (newline)'

# Example 2: Line continuation
print("\n" + "=" * 50)
print("Example 2: Line Continuation")
print("=" * 50)

value, _ = decode_string_literal('"blah blah\\   \n    blah blah"')
print(value)
# Output: blah blahblah blah

# Example 3: Individual escapes
print("\n" + "=" * 50)
print("Example 3: Individual Escapes")
print("=" * 50)

print(decode_mnemonic("\\n"))
print(decode_mnemonic("\\p"))
print(decode_hex_escape("\\x20!"))
print(decode_hex_escape("\\xd800!"))

# Example 4: Input arriving in pieces
print("\n" + "=" * 50)
print("Example 4: Streaming Reader")
print("=" * 50)

reader = StringLiteralReader()
for chunk in ['"hello, ', "wor", 'ld\\x21" (+ 1', " 2)"]:
    outcome = reader.feed(chunk)
    print(f"{chunk!r:16} -> {type(outcome).__name__}")
print(repr(reader.remaining))
# Output: ' (+ 1 2)'

unterminated = StringLiteralReader()
unterminated.feed('"no closing quote')
print(unterminated.close())

# Example 5: Error reporting
print("\n" + "=" * 50)
print("Example 5: Error Reporting")
print("=" * 50)

failure = parse_string_literal('(display "bad \\q escape")'[9:])
if isinstance(failure, Failed):
    print(failure.error.format_error())
    json_formatter = DiagnosticFormatter(output_format=OutputFormat.JSON)
    print(json_formatter.format(failure.error.to_diagnostic()))

try:
    decode_string_literal('"\\xDFFF"')
except StringLiteralError as e:
    print(e)

# Example 6: Writing literals
print("\n" + "=" * 50)
print("Example 6: Serializer")
print("=" * 50)

literal = encode_string_literal('tab\there "quoted" \x1b[0m')
print(literal)
print(decode_string_literal(literal)[0] == 'tab\there "quoted" \x1b[0m')
# Output: True
