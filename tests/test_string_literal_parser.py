"""Tests for StringLiteralParser configuration, raising API and logging."""

from __future__ import annotations

import logging

import pytest

from schemelex import (
    Done,
    ErrorKind,
    Failed,
    Incomplete,
    StringLiteralError,
    StringLiteralParser,
    decode_string_literal,
)
from schemelex.constants import MAX_SOURCE_SIZE
from schemelex.syntax.cursor import Cursor
from schemelex.syntax.parser import core


class TestConfiguration:
    """Test the size limit."""

    def test_default_limit(self) -> None:
        """None selects the package default."""
        assert StringLiteralParser().max_source_size == MAX_SOURCE_SIZE

    def test_custom_limit(self) -> None:
        """A positive limit is enforced."""
        parser = StringLiteralParser(max_source_size=5)

        assert isinstance(parser.parse('"abc"'), Done)
        with pytest.raises(ValueError, match=r"Source size \(6 characters\)"):
            parser.parse('"abcd"')

    def test_limit_counts_whole_buffer(self) -> None:
        """A cursor into a larger buffer is checked against the full buffer."""
        parser = StringLiteralParser(max_source_size=5)

        with pytest.raises(ValueError, match="exceeds maximum"):
            parser.parse(Cursor('xx "a"', 3))

    def test_zero_disables_limit(self) -> None:
        """0 means unlimited."""
        parser = StringLiteralParser(max_source_size=0)
        source = '"' + "a" * 1000 + '"'

        result = parser.parse(source)
        assert isinstance(result, Done)
        assert len(result.value) == 1000

    def test_keyword_only(self) -> None:
        """The limit cannot be passed positionally."""
        with pytest.raises(TypeError):
            StringLiteralParser(5)  # type: ignore[misc]

    def test_final_forwarded(self) -> None:
        """parse(final=True) closes the stream."""
        result = StringLiteralParser().parse('"ab', final=True)

        assert isinstance(result, Failed)
        assert result.kind is ErrorKind.UNTERMINATED_STRING


class TestDecode:
    """Test the raising convenience API."""

    def test_decode_returns_value_and_rest(self) -> None:
        """(value, remaining) on success."""
        assert decode_string_literal('"a\\nb" tail') == ("a\nb", " tail")

    def test_decode_treats_input_as_complete(self) -> None:
        """An unfinished literal raises instead of returning Incomplete."""
        with pytest.raises(StringLiteralError) as exc_info:
            decode_string_literal('"abc')

        assert exc_info.value.error.kind is ErrorKind.UNTERMINATED_STRING
        assert exc_info.value.position == 4

    def test_decode_short_hex_at_end(self) -> None:
        """A closing quote after a short hex run decodes normally."""
        assert StringLiteralParser().decode('"\\x4"') == ("\x04", "")

    def test_decode_not_a_string(self) -> None:
        """Input without an opening quote raises."""
        with pytest.raises(StringLiteralError, match="NOT_A_STRING"):
            decode_string_literal("(+ 1 2)")

    def test_decode_never_returns_incomplete(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """A scanner that still waits on closed input becomes UNTERMINATED_STRING."""
        monkeypatch.setattr(core, "scan_string_literal", lambda cursor: Incomplete(1))

        with pytest.raises(StringLiteralError) as exc_info:
            StringLiteralParser().decode('"abc')

        assert exc_info.value.error.kind is ErrorKind.UNTERMINATED_STRING
        assert exc_info.value.position == 4


class TestParserLogging:
    """Test log records emitted by the parser."""

    def test_failure_logged_at_debug(self, caplog: pytest.LogCaptureFixture) -> None:
        """Failures are logged with position and kind."""
        with caplog.at_level(logging.DEBUG, logger="schemelex.syntax.parser.core"):
            StringLiteralParser().parse('"a\\q"')

        assert "String literal decode failed at 2 (invalid-escape)" in caplog.text

    def test_success_not_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        """The parser is quiet on success."""
        with caplog.at_level(logging.DEBUG, logger="schemelex.syntax.parser.core"):
            StringLiteralParser().parse('"ok"')

        assert caplog.records == []
