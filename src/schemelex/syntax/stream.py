"""Push-style reader for string literals arriving in chunks.

The scanner is stateless: it must be re-run from the literal's start each
time the buffer grows. StringLiteralReader owns that buffer and the
end-of-input signal so REPL and socket callers can feed text as it arrives:

    reader = StringLiteralReader()
    reader.feed('"hello, ')      # Incomplete
    reader.feed('world" (+ 1')   # Done(value="hello, world")
    reader.remaining             # ' (+ 1'

Thread Safety:
    Not thread-safe. Use one reader per input stream.
"""

import logging

from schemelex.enums import ErrorKind
from schemelex.syntax.outcome import Done, Failed, Incomplete, ParseOutcome
from schemelex.syntax.parser.core import StringLiteralParser

__all__ = ["StringLiteralReader"]

logger = logging.getLogger(__name__)


class StringLiteralReader:
    """Accumulate chunks and decode the string literal they begin with.

    Attributes:
        outcome: Latest outcome (Incomplete until settled)
        buffer: All text fed so far
        remaining: Text after the closing quote (empty until Done)
    """

    __slots__ = ("_buffer", "_closed", "_outcome", "_parser")

    def __init__(self, *, max_source_size: int | None = None) -> None:
        """Initialize an empty reader.

        Args:
            max_source_size: Limit on the accumulated buffer, passed to
                StringLiteralParser (default: 10 MiB, 0 disables)
        """
        self._parser = StringLiteralParser(max_source_size=max_source_size)
        self._buffer = ""
        self._closed = False
        self._outcome: ParseOutcome[str] = Incomplete(1)

    @property
    def outcome(self) -> ParseOutcome[str]:
        """Latest outcome."""
        return self._outcome

    @property
    def is_settled(self) -> bool:
        """True once the outcome is Done or Failed."""
        return not isinstance(self._outcome, Incomplete)

    @property
    def is_closed(self) -> bool:
        """True after close()."""
        return self._closed

    @property
    def buffer(self) -> str:
        """All text fed so far."""
        return self._buffer

    @property
    def remaining(self) -> str:
        """Text after the closing quote, including chunks fed after settling."""
        if isinstance(self._outcome, Done):
            return self._buffer[self._outcome.pos :]
        return ""

    def feed(self, chunk: str) -> ParseOutcome[str]:
        """Append chunk and re-scan from the start of the buffer.

        A settled outcome never changes: later chunks are kept for
        :attr:`remaining` but not scanned. The size limit applies to every
        chunk, settled or not, and a rejected chunk leaves the buffer as
        it was.

        Args:
            chunk: Next piece of input

        Returns:
            Current outcome

        Raises:
            ValueError: If the reader is closed or the chunk would take the
                buffer past the size limit
        """
        if self._closed:
            msg = "Cannot feed a closed StringLiteralReader; call reset() first"
            raise ValueError(msg)
        self._parser.check_size(len(self._buffer) + len(chunk))
        self._buffer += chunk
        if self.is_settled:
            return self._outcome
        return self._rescan()

    def close(self) -> ParseOutcome[str]:
        """Declare end of input and force a decision.

        Returns:
            Done or Failed (UNTERMINATED_STRING if the literal never closed)
        """
        if self._closed:
            return self._outcome
        self._closed = True
        if self.is_settled:
            return self._outcome

        outcome = self._rescan()
        if isinstance(outcome, Failed) and outcome.kind is ErrorKind.UNTERMINATED_STRING:
            logger.warning(
                "Input closed inside a string literal after %d characters", len(self._buffer)
            )
        return outcome

    def reset(self) -> None:
        """Discard the buffer and outcome so the reader can be reused."""
        self._buffer = ""
        self._closed = False
        self._outcome = Incomplete(1)

    def _rescan(self) -> ParseOutcome[str]:
        self._outcome = self._parser.parse(self._buffer, final=self._closed)
        if isinstance(self._outcome, Done):
            logger.debug(
                "String literal settled at %d (%d characters decoded)",
                self._outcome.pos,
                len(self._outcome.value),
            )
        return self._outcome
