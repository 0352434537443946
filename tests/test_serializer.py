"""Tests for syntax.serializer: writing values back as literals."""

from __future__ import annotations

import pytest
from hypothesis import event, given

from schemelex import Done, encode_string_literal, parse_string_literal
from schemelex.syntax.serializer import SerializationValidationError
from tests.strategies import scalar_text


class TestEncodeStringLiteral:
    """Test escaping rules."""

    def test_empty(self) -> None:
        """The empty value is two quotes."""
        assert encode_string_literal("") == '""'

    def test_plain_text_unchanged(self) -> None:
        """Ordinary and non-ASCII characters are written as-is."""
        assert encode_string_literal("héllo \U0001f600") == '"héllo \U0001f600"'

    def test_quote_and_backslash(self) -> None:
        """Quote and backslash get a backslash."""
        assert encode_string_literal('say "hi" \\o/') == '"say \\"hi\\" \\\\o/"'

    @pytest.mark.parametrize(
        ("char", "escape"),
        [("\u0007", "\\a"), ("\u0008", "\\b"), ("\t", "\\t"), ("\n", "\\n"), ("\r", "\\r")],
    )
    def test_mnemonics(self, char: str, escape: str) -> None:
        """Table characters use their mnemonic."""
        assert encode_string_literal(char) == f'"{escape}"'

    @pytest.mark.parametrize(
        ("char", "escape"),
        [("\x00", "\\x00000000"), ("\x1b", "\\x0000001b"), ("\x7f", "\\x0000007f")],
    )
    def test_other_controls_use_full_width_hex(self, char: str, escape: str) -> None:
        """Other controls use eight-digit hex escapes."""
        assert encode_string_literal(char) == f'"{escape}"'

    def test_hex_escape_followed_by_digit(self) -> None:
        """A hex escape before a digit still decodes to two characters."""
        literal = encode_string_literal("\x1bA1")
        result = parse_string_literal(literal)

        assert isinstance(result, Done)
        assert result.value == "\x1bA1"

    def test_lone_surrogate_rejected(self) -> None:
        """No escape produces a surrogate, so none can be written."""
        with pytest.raises(SerializationValidationError, match="U\\+D800 at index 1"):
            encode_string_literal("a\ud800")

    def test_error_is_value_error(self) -> None:
        """Callers may catch ValueError."""
        assert issubclass(SerializationValidationError, ValueError)

    @given(value=scalar_text)
    def test_round_trip(self, value: str) -> None:
        """PROPERTY: decoding an encoded value gives the value back."""
        event(f"has_control={any(ord(c) < 0x20 for c in value)}")
        result = parse_string_literal(encode_string_literal(value), final=True)

        assert isinstance(result, Done)
        assert result.value == value
        assert result.remaining == ""
